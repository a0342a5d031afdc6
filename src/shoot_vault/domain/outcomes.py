"""Outcomes reported by collection store operations."""

from enum import Enum


class MutationOutcome(Enum):
    """Result of an update or delete addressed by id."""

    APPLIED = "applied"
    NOT_FOUND = "not_found"


class LoadOutcome(Enum):
    """How a store's collection was obtained at construction."""

    EMPTY = "empty"
    LOADED = "loaded"
    DECODE_ERROR = "decode_error"
