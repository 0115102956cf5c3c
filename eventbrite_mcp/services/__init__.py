"""
Service clients for the Eventbrite MCP server.

Available Services
------------------
- EventbriteClient: Eventbrite v3 API integration
- EventbriteAPIError: Failure raised by EventbriteClient requests
"""

from .eventbrite import EventbriteAPIError, EventbriteClient, get_eventbrite_client

__all__ = [
    "EventbriteAPIError",
    "EventbriteClient",
    "get_eventbrite_client",
]
