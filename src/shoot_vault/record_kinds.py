"""Record kind configuration."""

from dataclasses import dataclass
from enum import Enum

from shoot_vault.domain.records import Client, EquipmentItem, Photoshoot, Record


@dataclass(frozen=True)
class StorageSlot:
    """Declarative storage slot for one record kind."""

    key: str
    record_type: type[Record]


class RecordKind(Enum):
    """Enum of record kinds (single source of truth for slot keys)."""

    PHOTOSHOOT = StorageSlot("photoshootsData", Photoshoot)
    CLIENT = StorageSlot("clientsData", Client)
    EQUIPMENT = StorageSlot("equipmentData", EquipmentItem)

    @property
    def key(self) -> str:
        return self.value.key

    @property
    def record_type(self) -> type[Record]:
        return self.value.record_type
