"""File-backed key-value storage for collection blobs."""

import os
import re
from dataclasses import dataclass
from pathlib import Path

from shoot_vault.services.collection import KeyValueStore

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


@dataclass
class JsonFileKeyValueStore(KeyValueStore):
    """Stores each slot as ``<key>.json`` inside a data directory."""

    directory: Path

    def read(self, key: str) -> bytes | None:
        """Return the stored blob, or None when the slot was never written."""
        try:
            return self._path(key).read_bytes()
        except FileNotFoundError:
            return None

    def write(self, key: str, data: bytes) -> None:
        """Atomically replace the blob stored under key."""
        path = self._path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with tmp_path.open("wb") as handle:
                handle.write(data)
                handle.flush()
                os.fsync(handle.fileno())
            tmp_path.replace(path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise

    def _path(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key) or key in {".", ".."}:
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.directory / f"{key}.json"
