"""Case-insensitive substring search over record snapshots."""

from collections.abc import Iterable

from shoot_vault.domain.records import Client, EquipmentItem, Photoshoot


def filter_photoshoots(
    photoshoots: Iterable[Photoshoot], query: str | None
) -> list[Photoshoot]:
    """Return photoshoots whose client name or location contains the query."""
    return [
        shoot
        for shoot in photoshoots
        if _matches(query, shoot.client_name, shoot.location)
    ]


def filter_clients(clients: Iterable[Client], query: str | None) -> list[Client]:
    """Return clients whose name or email contains the query."""
    return [client for client in clients if _matches(query, client.name, client.email)]


def filter_equipment(
    items: Iterable[EquipmentItem], query: str | None
) -> list[EquipmentItem]:
    """Return equipment whose name contains the query."""
    return [item for item in items if _matches(query, item.name)]


def _matches(query: str | None, *fields: str) -> bool:
    """Empty queries match everything."""
    needle = (query or "").casefold()
    if not needle:
        return True
    return any(needle in field.casefold() for field in fields)
