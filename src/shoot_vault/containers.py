"""Dependency container wiring for the application."""

from dataclasses import dataclass

from shoot_vault.adapters.json_file_store import JsonFileKeyValueStore
from shoot_vault.app_logging import configure_logging
from shoot_vault.config import Settings
from shoot_vault.services.clients import ClientStore
from shoot_vault.services.collection import KeyValueStore
from shoot_vault.services.equipment import EquipmentStore
from shoot_vault.services.insights import InsightsService
from shoot_vault.services.photoshoots import PhotoshootStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    storage: KeyValueStore
    photoshoot_store: PhotoshootStore
    client_store: ClientStore
    equipment_store: EquipmentStore
    insights_service: InsightsService


def build_container(
    settings: Settings | None = None, storage: KeyValueStore | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    resolved_storage = storage or JsonFileKeyValueStore(resolved_settings.data_dir)
    photoshoot_store = PhotoshootStore(resolved_storage)
    client_store = ClientStore(resolved_storage)
    equipment_store = EquipmentStore(resolved_storage)
    insights_service = InsightsService(
        photoshoots=photoshoot_store,
        clients=client_store,
        equipment=equipment_store,
    )
    return AppContainer(
        settings=resolved_settings,
        storage=resolved_storage,
        photoshoot_store=photoshoot_store,
        client_store=client_store,
        equipment_store=equipment_store,
        insights_service=insights_service,
    )
