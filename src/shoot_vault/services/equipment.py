"""Equipment inventory store."""

from shoot_vault.domain.records import EquipmentItem
from shoot_vault.record_kinds import RecordKind
from shoot_vault.services.collection import CollectionStore, KeyValueStore


class EquipmentStore(CollectionStore[EquipmentItem]):
    """Store for equipment inventory lines."""

    def __init__(self, storage: KeyValueStore) -> None:
        super().__init__(storage, RecordKind.EQUIPMENT)

    def total_quantity(self) -> int:
        """Return the number of units across all inventory lines."""
        return sum(item.quantity for item in self._records)
