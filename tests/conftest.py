"""Shared test fixtures."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from shoot_vault.config import Settings
from shoot_vault.containers import AppContainer, build_container
from shoot_vault.services.clients import ClientStore
from shoot_vault.services.collection import KeyValueStore
from shoot_vault.services.equipment import EquipmentStore
from shoot_vault.services.photoshoots import PhotoshootStore


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """In-memory key-value store that records every write."""

    blobs: dict[str, bytes] = field(default_factory=dict)
    writes: list[str] = field(default_factory=list)
    reads: list[str] = field(default_factory=list)

    def read(self, key: str) -> bytes | None:
        self.reads.append(key)
        return self.blobs.get(key)

    def write(self, key: str, data: bytes) -> None:
        self.writes.append(key)
        self.blobs[key] = data


@dataclass
class FailingKeyValueStore(InMemoryKeyValueStore):
    """Key-value store whose writes fail until ``fail_writes`` is cleared."""

    fail_writes: bool = True

    def write(self, key: str, data: bytes) -> None:
        self.writes.append(key)
        if self.fail_writes:
            raise OSError("disk full")
        self.blobs[key] = data


@pytest.fixture(autouse=True)
def _reset_app_logger():
    yield
    logger = logging.getLogger("shoot_vault")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(data_dir=tmp_path / "data", timezone="UTC")


@pytest.fixture
def key_value_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def photoshoot_store(key_value_store: InMemoryKeyValueStore) -> PhotoshootStore:
    return PhotoshootStore(key_value_store)


@pytest.fixture
def client_store(key_value_store: InMemoryKeyValueStore) -> ClientStore:
    return ClientStore(key_value_store)


@pytest.fixture
def equipment_store(key_value_store: InMemoryKeyValueStore) -> EquipmentStore:
    return EquipmentStore(key_value_store)


@pytest.fixture
def container(
    settings: Settings, key_value_store: InMemoryKeyValueStore
) -> AppContainer:
    return build_container(settings, storage=key_value_store)
