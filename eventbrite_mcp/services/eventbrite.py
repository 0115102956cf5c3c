"""
Eventbrite API client for event discovery.

Provides async methods to fetch events, venues and categories from the
Eventbrite v3 API.

NOTE: The official Eventbrite Event Search API (/v3/events/search/) was
deprecated in December 2019 and turned off in February 2020. Search is
composed from two calls instead:
1. List the organizations of the token's owner
2. List the events of the first organization
"""

import logging
from typing import Any

import httpx

from eventbrite_mcp.config import get_settings
from eventbrite_mcp.models import (
    Category,
    Event,
    EventList,
    Organization,
    SearchEventsParams,
    Venue,
)

logger = logging.getLogger(__name__)


class EventbriteAPIError(Exception):
    """Raised when an Eventbrite request fails or returns a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class EventbriteClient:
    """Async client for the Eventbrite v3 API.

    The underlying HTTP client is created once and shared by every call;
    nothing about it changes after construction.
    """

    API_BASE_URL = "https://www.eventbriteapi.com/v3"

    def __init__(
        self,
        api_key: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if not api_key:
            raise ValueError("EVENTBRITE_API_KEY not configured")
        self.api_key = api_key
        self._client = httpx.AsyncClient(
            base_url=self.API_BASE_URL,
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """GET a path and return the decoded JSON body.

        Raises:
            EventbriteAPIError: On transport failure or a non-2xx response.
        """
        try:
            response = await self._client.get(path, params=params)
            response.raise_for_status()
        except httpx.HTTPError as e:
            status_code = None
            detail = str(e)
            if isinstance(e, httpx.HTTPStatusError):
                status_code = e.response.status_code
                detail = _error_description(e.response) or detail
            logger.debug("Eventbrite request failed | path=%s error=%s", path, detail)
            raise EventbriteAPIError(
                f"Eventbrite API error: {detail}", status_code=status_code
            ) from e
        return response.json()

    async def get_organizations(self) -> list[Organization]:
        """Get the organizations the token's owner belongs to."""
        data = await self._get("/users/me/organizations/")
        return [Organization.model_validate(o) for o in data.get("organizations") or []]

    async def list_events_by_organization(
        self,
        organization_id: str,
        params: SearchEventsParams | None = None,
    ) -> EventList:
        """
        List the events of an organization.

        Args:
            organization_id: Eventbrite organization ID
            params: Search criteria; only q, start_date, end_date, page and
                page_size are sent

        Returns:
            EventList with the events and Eventbrite's pagination block
        """
        query = params.query_params() if params else {}
        logger.debug(
            "Listing organization events | organization=%s params=%s",
            organization_id,
            query,
        )
        data = await self._get(f"/organizations/{organization_id}/events/", params=query)

        payload: dict[str, Any] = {"events": data.get("events") or []}
        if "pagination" in data:
            payload["pagination"] = data["pagination"]
        return EventList.model_validate(payload)

    async def search_events(self, params: SearchEventsParams) -> EventList:
        """
        Search for events in the first organization of the token's owner.

        Stands in for the retired search endpoint. Location, category and
        price filters are accepted but not applied.
        """
        ignored = params.ignored_filters()
        if ignored:
            logger.info("Ignoring unsupported search filters: %s", ", ".join(ignored))

        organizations = await self.get_organizations()
        if not organizations:
            logger.info("No organizations for this token, returning no events")
            return EventList.empty()

        return await self.list_events_by_organization(organizations[0].id, params)

    async def get_event(self, event_id: str) -> Event:
        """Get event details by ID."""
        data = await self._get(f"/events/{event_id}/")
        return Event.model_validate(data)

    async def get_venue(self, venue_id: str) -> Venue:
        """Get venue details by ID."""
        data = await self._get(f"/venues/{venue_id}/")
        return Venue.model_validate(data)

    async def get_categories(self) -> list[Category]:
        """Get the list of event categories."""
        data = await self._get("/categories/")
        return [Category.model_validate(c) for c in data.get("categories") or []]


def _error_description(response: httpx.Response) -> str | None:
    """Pull Eventbrite's error_description out of an error response, if any."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        return body.get("error_description") or None
    return None


# Singleton instance
_client: EventbriteClient | None = None


def get_eventbrite_client() -> EventbriteClient:
    """Get the singleton Eventbrite client."""
    global _client
    if _client is None:
        _client = EventbriteClient(get_settings().eventbrite_api_key)
    return _client
