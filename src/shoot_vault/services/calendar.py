"""Calendar grouping for photoshoots."""

from collections.abc import Iterable
from datetime import date
from zoneinfo import ZoneInfo

from shoot_vault.domain.insights import DayGroup
from shoot_vault.domain.records import Photoshoot


def group_by_day(
    photoshoots: Iterable[Photoshoot], timezone_name: str = "UTC"
) -> list[DayGroup]:
    """Bucket photoshoots by local calendar day, earliest day first.

    Photoshoots keep their collection order inside a day.
    """
    tz = ZoneInfo(timezone_name)
    buckets: dict[date, list[Photoshoot]] = {}
    for shoot in photoshoots:
        day = shoot.date.astimezone(tz).date()
        buckets.setdefault(day, []).append(shoot)
    return [DayGroup(day=day, photoshoots=buckets[day]) for day in sorted(buckets)]
