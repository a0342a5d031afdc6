"""Ordered record collections persisted to a key-value slot."""

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Generic, Protocol, TypeVar
from uuid import UUID

from pydantic import TypeAdapter, ValidationError

from shoot_vault.domain.outcomes import LoadOutcome, MutationOutcome
from shoot_vault.domain.records import Record
from shoot_vault.record_kinds import RecordKind

_logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Record)


class KeyValueStore(Protocol):
    """Durable storage interface holding one blob per key."""

    def read(self, key: str) -> bytes | None:
        """Return the blob stored under key, if present."""

    def write(self, key: str, data: bytes) -> None:
        """Replace the blob stored under key."""


class CollectionStore(Generic[RecordT]):
    """Authoritative ordered collection for one record kind.

    The collection is loaded once from ``storage`` when the store is built and
    every mutating call writes the whole collection back before returning.
    Load and save failures never reach the caller: they are logged and exposed
    through ``load_outcome`` and ``last_save_error``.
    """

    def __init__(self, storage: KeyValueStore, kind: RecordKind) -> None:
        self.storage = storage
        self.kind = kind
        self.load_outcome = LoadOutcome.EMPTY
        self.last_save_error: Exception | None = None
        self._adapter: TypeAdapter[list[RecordT]] = TypeAdapter(
            list[kind.record_type]
        )
        self._listeners: list[Callable[[tuple[RecordT, ...]], None]] = []
        self._records: list[RecordT] = self._load()

    @property
    def records(self) -> tuple[RecordT, ...]:
        """Snapshot of the collection in insertion order."""
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[RecordT]:
        return iter(self.records)

    def __contains__(self, record_id: object) -> bool:
        return any(record.id == record_id for record in self._records)

    def get(self, record_id: UUID) -> RecordT | None:
        """Return the record with the given id, if present."""
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def add(self, record: RecordT) -> None:
        """Append a record to the end of the collection."""
        self._records.append(record)
        self._persist()

    def update(self, record: RecordT) -> MutationOutcome:
        """Replace the record sharing ``record.id`` in place."""
        for index, existing in enumerate(self._records):
            if existing.id == record.id:
                self._records[index] = record
                self._persist()
                return MutationOutcome.APPLIED
        return MutationOutcome.NOT_FOUND

    def delete(self, record_id: UUID) -> MutationOutcome:
        """Remove the record with the given id."""
        for index, existing in enumerate(self._records):
            if existing.id == record_id:
                del self._records[index]
                self._persist()
                return MutationOutcome.APPLIED
        return MutationOutcome.NOT_FOUND

    def delete_at(self, positions: Iterable[int]) -> list[RecordT]:
        """Remove the records at the given positions and return them.

        Positions index the full collection, not a filtered view of it.
        """
        targets = sorted(set(positions))
        if not targets:
            return []
        size = len(self._records)
        for position in targets:
            if not 0 <= position < size:
                raise IndexError(
                    f"Position {position} out of range for {size} {self.kind.key}"
                )
        removed = [self._records[position] for position in targets]
        dropped = set(targets)
        self._records = [
            record
            for position, record in enumerate(self._records)
            if position not in dropped
        ]
        self._persist()
        return removed

    def delete_many(self, record_ids: Iterable[UUID]) -> int:
        """Remove every record whose id is listed and return how many went."""
        ids = set(record_ids)
        kept = [record for record in self._records if record.id not in ids]
        removed = len(self._records) - len(kept)
        if removed:
            self._records = kept
            self._persist()
        return removed

    def subscribe(
        self, listener: Callable[[tuple[RecordT, ...]], None]
    ) -> Callable[[], None]:
        """Call ``listener`` with a fresh snapshot after every mutation."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _load(self) -> list[RecordT]:
        raw = self.storage.read(self.kind.key)
        if raw is None:
            self.load_outcome = LoadOutcome.EMPTY
            return []
        try:
            records = self._adapter.validate_json(raw)
        except ValidationError:
            _logger.warning(
                "Discarding undecodable %s blob (%s bytes)", self.kind.key, len(raw)
            )
            self.load_outcome = LoadOutcome.DECODE_ERROR
            return []
        self.load_outcome = LoadOutcome.LOADED
        _logger.debug("Loaded %s records from %s", len(records), self.kind.key)
        return records

    def _persist(self) -> None:
        try:
            payload = self._adapter.dump_json(self._records, by_alias=True)
            self.storage.write(self.kind.key, payload)
        except Exception as exc:
            _logger.exception("Failed to save %s", self.kind.key)
            self.last_save_error = exc
        else:
            self.last_save_error = None
        snapshot = self.records
        for listener in list(self._listeners):
            listener(snapshot)
