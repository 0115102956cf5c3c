"""Data models for the Eventbrite MCP server."""

from .events import (
    Address,
    Category,
    DateTimeField,
    Event,
    EventList,
    Logo,
    Organization,
    Pagination,
    TextField,
    Venue,
    dump_json,
)
from .search import Location, SearchEventsParams

__all__ = [
    "Address",
    "Category",
    "DateTimeField",
    "Event",
    "EventList",
    "Location",
    "Logo",
    "Organization",
    "Pagination",
    "SearchEventsParams",
    "TextField",
    "Venue",
    "dump_json",
]
