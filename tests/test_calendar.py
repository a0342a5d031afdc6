"""Tests for calendar grouping."""

from datetime import UTC, date, datetime

from shoot_vault.domain.records import Photoshoot
from shoot_vault.services.calendar import group_by_day
from shoot_vault.services.photoshoots import PhotoshootStore


def _shoot(when: datetime, client_name: str = "Ada") -> Photoshoot:
    return Photoshoot(client_name=client_name, date=when, location="Studio")


def test_groups_same_day_shoots_together(photoshoot_store: PhotoshootStore) -> None:
    morning = _shoot(datetime(2024, 1, 1, 9, 0, tzinfo=UTC), "Morning")
    next_day = _shoot(datetime(2024, 1, 2, 12, 0, tzinfo=UTC), "Next")
    evening = _shoot(datetime(2024, 1, 1, 18, 30, tzinfo=UTC), "Evening")
    for shoot in (morning, next_day, evening):
        photoshoot_store.add(shoot)

    groups = group_by_day(photoshoot_store.records)

    assert [group.day for group in groups] == [date(2024, 1, 1), date(2024, 1, 2)]
    assert groups[0].photoshoots == [morning, evening]
    assert groups[1].photoshoots == [next_day]


def test_grouping_uses_requested_timezone() -> None:
    late = _shoot(datetime(2024, 1, 1, 23, 30, tzinfo=UTC))

    groups = group_by_day([late], "Asia/Tokyo")

    assert groups[0].day == date(2024, 1, 2)


def test_empty_collection_has_no_groups() -> None:
    assert group_by_day([]) == []
