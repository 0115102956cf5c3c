"""Eventbrite resource models.

These mirror the v3 API payloads. Each model keeps the decoded payload it
was built from, and ``dump_json`` renders that payload rather than the
typed fields, so an object fetched from Eventbrite reaches the caller with
the same keys, key order and values. The typed fields are for reading only:
a value that does not fit its type reads as ``None``, and only ``id`` is
required.
"""

import json
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_validator,
)


class EventbriteModel(BaseModel):
    """Base for pass-through Eventbrite payloads."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    _raw: dict[str, Any] = PrivateAttr(default_factory=dict)

    @model_validator(mode="wrap")
    @classmethod
    def keep_payload(cls, data: Any, handler):
        model = handler(data)
        if isinstance(data, dict):
            model._raw = data
        return model

    @field_validator("*", mode="wrap")
    @classmethod
    def tolerate_unexpected_values(cls, value: Any, handler, info: ValidationInfo):
        if info.field_name == "id":
            return handler(value)
        try:
            return handler(value)
        except ValidationError:
            return None

    @property
    def raw(self) -> dict[str, Any]:
        """The payload this model was built from."""
        return self._raw


class TextField(EventbriteModel):
    """Plain and rich text variants of a field (name, description)."""

    text: str | None = None
    html: str | None = None


class DateTimeField(EventbriteModel):
    """Event start or end, as Eventbrite reports it."""

    timezone: str | None = None
    local: str | None = None
    utc: str | None = None


class Address(EventbriteModel):
    address_1: str | None = None
    address_2: str | None = None
    city: str | None = None
    region: str | None = None
    postal_code: str | None = None
    country: str | None = None


class Venue(EventbriteModel):
    """A venue, fetched standalone or attached to an event by enrichment."""

    id: str
    name: str | None = None
    address: Address | None = None
    capacity: int | None = None


class Logo(EventbriteModel):
    url: str | None = None


class Event(EventbriteModel):
    """An Eventbrite event.

    ``venue`` is usually absent from ``/events/{id}/`` responses; the
    dispatcher fills it in from ``venue_id`` when it can.
    """

    id: str
    name: TextField | None = None
    description: TextField | None = None
    url: str | None = None
    start: DateTimeField | None = None
    end: DateTimeField | None = None
    venue_id: str | None = None
    venue: Venue | None = None
    capacity: int | None = None
    category_id: str | None = None
    is_free: bool | None = None
    logo_id: str | None = None
    logo: Logo | None = None

    def attach_venue(self, venue: Venue) -> None:
        """Set the venue, in the typed field and in the rendered payload."""
        self.venue = venue
        self._raw["venue"] = venue.raw


class Category(EventbriteModel):
    id: str
    name: str | None = None
    short_name: str | None = None


class Organization(EventbriteModel):
    id: str
    name: str | None = None


class Pagination(EventbriteModel):
    object_count: int | None = None
    page_number: int | None = None
    page_size: int | None = None
    page_count: int | None = None
    has_more_items: bool | None = None
    continuation: str | None = None


class EventList(EventbriteModel):
    """A page of events, as returned by the organization events endpoint."""

    events: list[Event] = Field(default_factory=list)
    pagination: Pagination | None = None

    @classmethod
    def empty(cls) -> "EventList":
        """Result used when the account has no organization to search."""
        return cls(events=[], pagination=Pagination(page_count=0))


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, EventbriteModel):
        return _to_jsonable(value.raw)
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_unset=True)
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(item) for item in value]
    if isinstance(value, dict):
        return {key: _to_jsonable(item) for key, item in value.items()}
    return value


def dump_json(value: Any) -> str:
    """Render a model (or list of models) as indented JSON text."""
    return json.dumps(_to_jsonable(value), indent=2, ensure_ascii=False)
