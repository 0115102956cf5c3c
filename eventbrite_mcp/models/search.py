"""Search parameter models for event discovery."""

from typing import Literal

from pydantic import BaseModel, Field

# Parameters the organization events endpoint understands.
FORWARDED_FIELDS = ("q", "start_date", "end_date", "page", "page_size")
IGNORED_FIELDS = ("location", "categories", "price")


class Location(BaseModel):
    """Geographic point to search around."""

    latitude: float
    longitude: float
    within: str | None = Field(
        default=None, description="Search radius (e.g., '10km', '10mi')"
    )


class SearchEventsParams(BaseModel):
    """Criteria accepted by ``EventbriteClient.search_events``.

    Only ``q``, ``start_date``, ``end_date``, ``page`` and ``page_size`` reach
    Eventbrite. The organization events endpoint has no location, category
    or price filter, so those fields are accepted and ignored.
    """

    q: str | None = Field(default=None, description="Free-text query")
    location: Location | None = None
    categories: list[str] | None = Field(
        default=None, description="Category IDs to filter by"
    )
    start_date: str | None = Field(
        default=None, description="ISO 8601 start (e.g., '2023-01-01T00:00:00Z')"
    )
    end_date: str | None = Field(
        default=None, description="ISO 8601 end (e.g., '2023-12-31T23:59:59Z')"
    )
    price: Literal["free", "paid"] | None = None
    page: int | None = None
    page_size: int | None = Field(default=None, description="Results per page (max 100)")

    def query_params(self) -> dict[str, str | int]:
        """Query string values for the organization events endpoint."""
        params: dict[str, str | int] = {}
        for name in FORWARDED_FIELDS:
            value = getattr(self, name)
            if value:
                params[name] = value
        return params

    def ignored_filters(self) -> list[str]:
        """Names of filters that were supplied but cannot be applied."""
        return [name for name in IGNORED_FIELDS if getattr(self, name)]
