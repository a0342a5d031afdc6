"""Client collection store."""

from shoot_vault.domain.records import Client
from shoot_vault.record_kinds import RecordKind
from shoot_vault.services.collection import CollectionStore, KeyValueStore


class ClientStore(CollectionStore[Client]):
    """Store for client contact cards."""

    def __init__(self, storage: KeyValueStore) -> None:
        super().__init__(storage, RecordKind.CLIENT)
