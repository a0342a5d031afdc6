"""Domain models for photoshoots, clients and equipment."""

from datetime import UTC, datetime
from typing import Self
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

MAX_EQUIPMENT_QUANTITY = 1000


class Record(BaseModel):
    """Base for records kept in a collection store.

    Records are immutable; edits produce a new copy with the same ``id``.
    Serialized keys are camelCase and image bytes are base64 encoded.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        ser_json_bytes="base64",
        val_json_bytes="base64",
    )

    id: UUID = Field(default_factory=uuid4)
    image_data: bytes | None = None

    def edited(self, **changes: object) -> Self:
        """Return a validated copy with ``changes`` applied and the same id.

        Unlike ``model_copy`` this runs field validators, so an edited record
        always decodes again after the store persists it.
        """
        changes.pop("id", None)
        return type(self).model_validate({**self.model_dump(), **changes})

    @property
    def is_ready_to_save(self) -> bool:
        """Return True when the required fields are filled in."""
        return True


class Photoshoot(Record):
    """A scheduled or past photoshoot."""

    client_name: str
    date: datetime
    location: str
    notes: str = ""

    @field_validator("date")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        """Treat naive datetimes as UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @classmethod
    def draft(cls) -> Self:
        """Return a placeholder photoshoot for a new entry."""
        return cls(client_name="", date=datetime.now(tz=UTC), location="", notes="")

    @property
    def is_ready_to_save(self) -> bool:
        """Return True when client name and location are set."""
        return bool(self.client_name) and bool(self.location)


class Client(Record):
    """A client contact card."""

    name: str
    contact_number: str
    email: str = ""
    address: str = ""
    notes: str = ""

    @classmethod
    def draft(cls) -> Self:
        """Return a placeholder client for a new entry."""
        return cls(name="", contact_number="", email="", address="", notes="")

    @property
    def is_ready_to_save(self) -> bool:
        """Return True when name and contact number are set."""
        return bool(self.name) and bool(self.contact_number)


class EquipmentItem(Record):
    """An inventory line for a piece of equipment."""

    name: str
    quantity: int = Field(default=1, ge=1, le=MAX_EQUIPMENT_QUANTITY)
    notes: str = ""

    @classmethod
    def draft(cls) -> Self:
        """Return a placeholder equipment item for a new entry."""
        return cls(name="", quantity=1, notes="")

    @property
    def is_ready_to_save(self) -> bool:
        """Return True when the item has a name."""
        return bool(self.name)
