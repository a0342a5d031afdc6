"""Photoshoot collection store."""

from shoot_vault.domain.records import Photoshoot
from shoot_vault.record_kinds import RecordKind
from shoot_vault.services.collection import CollectionStore, KeyValueStore


class PhotoshootStore(CollectionStore[Photoshoot]):
    """Store for photoshoots, persisted under the photoshoot slot."""

    def __init__(self, storage: KeyValueStore) -> None:
        super().__init__(storage, RecordKind.PHOTOSHOOT)
