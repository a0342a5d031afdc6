"""Dashboard insights computed from the stores."""

from dataclasses import dataclass
from datetime import UTC, datetime

from shoot_vault.domain.insights import Insights
from shoot_vault.services.clients import ClientStore
from shoot_vault.services.equipment import EquipmentStore
from shoot_vault.services.photoshoots import PhotoshootStore


@dataclass
class InsightsService:
    """Service for computing dashboard counters on demand."""

    photoshoots: PhotoshootStore
    clients: ClientStore
    equipment: EquipmentStore

    def summary(self, now: datetime | None = None) -> Insights:
        """Return upcoming shoots, client count and equipment units."""
        return Insights(
            upcoming_photoshoots=self.upcoming_photoshoots(now),
            total_clients=len(self.clients),
            total_equipment=self.equipment.total_quantity(),
        )

    def upcoming_photoshoots(self, now: datetime | None = None) -> int:
        """Count photoshoots dated at or after ``now``."""
        reference = now or datetime.now(tz=UTC)
        if reference.tzinfo is None:
            reference = reference.replace(tzinfo=UTC)
        return sum(1 for shoot in self.photoshoots if shoot.date >= reference)
