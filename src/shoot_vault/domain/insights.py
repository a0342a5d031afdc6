"""Domain models for derived views."""

from dataclasses import dataclass
from datetime import date

from shoot_vault.domain.records import Photoshoot


@dataclass(frozen=True)
class DayGroup:
    """Photoshoots that fall on the same calendar day."""

    day: date
    photoshoots: list[Photoshoot]


@dataclass(frozen=True)
class Insights:
    """Dashboard counters."""

    upcoming_photoshoots: int
    total_clients: int
    total_equipment: int
