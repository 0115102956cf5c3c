"""
MCP server exposing Eventbrite event discovery.

Tools:
    search_events, get_event, get_categories, get_venue

Resource templates:
    eventbrite://events/{eventId}

Usage:
    EVENTBRITE_API_KEY=your-api-key python -m eventbrite_mcp
"""

import asyncio
import logging
import re
import sys
from collections.abc import Awaitable, Callable
from typing import Any

from dotenv import load_dotenv
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from eventbrite_mcp import __version__
from eventbrite_mcp.config import configure_logging, get_settings, require_api_key
from eventbrite_mcp.models import Event, SearchEventsParams, dump_json
from eventbrite_mcp.services import EventbriteAPIError, EventbriteClient, get_eventbrite_client

logger = logging.getLogger(__name__)

SERVER_NAME = "eventbrite-mcp"

EVENT_URI_TEMPLATE = "eventbrite://events/{eventId}"
EVENT_URI_PATTERN = re.compile(r"^eventbrite://events/([^/]+)$")

# Tool argument name -> SearchEventsParams field
SEARCH_ARGUMENTS = {
    "query": "q",
    "location": "location",
    "categories": "categories",
    "start_date": "start_date",
    "end_date": "end_date",
    "price": "price",
    "page": "page",
    "page_size": "page_size",
}

TOOLS = [
    types.Tool(
        name="search_events",
        description=(
            "Search for Eventbrite events based on various criteria. "
            "Searches the events of your first Eventbrite organization; "
            "location, categories and price are accepted but not applied."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query for events",
                },
                "location": {
                    "type": "object",
                    "properties": {
                        "latitude": {"type": "number"},
                        "longitude": {"type": "number"},
                        "within": {
                            "type": "string",
                            "description": "Distance (e.g., '10km', '10mi')",
                        },
                    },
                    "required": ["latitude", "longitude"],
                },
                "categories": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Category IDs to filter by",
                },
                "start_date": {
                    "type": "string",
                    "description": "Start date in ISO format (e.g., '2023-01-01T00:00:00Z')",
                },
                "end_date": {
                    "type": "string",
                    "description": "End date in ISO format (e.g., '2023-12-31T23:59:59Z')",
                },
                "price": {
                    "type": "string",
                    "enum": ["free", "paid"],
                    "description": "Filter by free or paid events",
                },
                "page": {
                    "type": "integer",
                    "description": "Page number for pagination",
                },
                "page_size": {
                    "type": "integer",
                    "description": "Number of results per page (max 100)",
                },
            },
        },
    ),
    types.Tool(
        name="get_event",
        description="Get detailed information about a specific Eventbrite event",
        inputSchema={
            "type": "object",
            "properties": {
                "event_id": {
                    "type": "string",
                    "description": "Eventbrite event ID",
                },
            },
            "required": ["event_id"],
        },
    ),
    types.Tool(
        name="get_categories",
        description="Get a list of Eventbrite event categories",
        inputSchema={"type": "object", "properties": {}},
    ),
    types.Tool(
        name="get_venue",
        description="Get information about a specific Eventbrite venue",
        inputSchema={
            "type": "object",
            "properties": {
                "venue_id": {
                    "type": "string",
                    "description": "Eventbrite venue ID",
                },
            },
            "required": ["venue_id"],
        },
    ),
]

RESOURCE_TEMPLATES = [
    types.ResourceTemplate(
        uriTemplate=EVENT_URI_TEMPLATE,
        name="Event details",
        mimeType="application/json",
        description="Get detailed information about a specific Eventbrite event",
    ),
]


def _protocol_error(code: int, message: str) -> McpError:
    return McpError(types.ErrorData(code=code, message=message))


def _error_text(error: Exception) -> str:
    if isinstance(error, EventbriteAPIError):
        return str(error)
    return f"Eventbrite API error: {error}"


class EventbriteDispatcher:
    """
    Handles MCP tool calls and resource reads against one EventbriteClient.

    Protocol errors (unknown tool, missing argument, bad URI) are raised as
    McpError. Failures inside a tool are returned as a result flagged with
    isError so the message reaches the assistant as text.
    """

    def __init__(self, client: EventbriteClient):
        self.client = client
        self._tools: dict[str, Callable[[dict[str, Any]], Awaitable[Any]]] = {
            "search_events": self._search_events,
            "get_event": self._get_event,
            "get_categories": self._get_categories,
            "get_venue": self._get_venue,
        }

    def list_tools(self) -> list[types.Tool]:
        return TOOLS

    def list_resources(self) -> list[types.Resource]:
        return []

    def list_resource_templates(self) -> list[types.ResourceTemplate]:
        return RESOURCE_TEMPLATES

    async def call_tool(
        self, name: str, arguments: dict[str, Any] | None
    ) -> types.CallToolResult:
        """
        Run a tool and wrap its output as JSON text content.

        Raises:
            McpError: METHOD_NOT_FOUND for an unknown tool, INVALID_REQUEST
                for a missing required argument
        """
        handler = self._tools.get(name)
        if handler is None:
            raise _protocol_error(types.METHOD_NOT_FOUND, f"Unknown tool: {name}")

        logger.info("Tool call: %s arguments=%s", name, arguments)
        try:
            result = await handler(arguments or {})
        except McpError:
            raise
        except Exception as e:
            logger.error("Eventbrite tool %s failed: %s", name, e)
            return types.CallToolResult(
                content=[types.TextContent(type="text", text=_error_text(e))],
                isError=True,
            )

        return types.CallToolResult(
            content=[types.TextContent(type="text", text=dump_json(result))]
        )

    async def read_resource(self, uri: str) -> types.ReadResourceResult:
        """
        Read an eventbrite://events/{eventId} resource.

        Raises:
            McpError: INVALID_REQUEST for an unrecognized URI, INTERNAL_ERROR
                when the event cannot be fetched
        """
        match = EVENT_URI_PATTERN.match(uri)
        if match is None:
            raise _protocol_error(types.INVALID_REQUEST, f"Invalid URI format: {uri}")

        try:
            event = await self.get_event_with_venue(match.group(1))
        except Exception as e:
            logger.error("Failed to read resource %s: %s", uri, e)
            raise _protocol_error(
                types.INTERNAL_ERROR, f"Failed to fetch event: {e}"
            ) from e

        return types.ReadResourceResult(
            contents=[
                types.TextResourceContents(
                    uri=uri,
                    mimeType="application/json",
                    text=dump_json(event),
                )
            ]
        )

    async def get_event_with_venue(self, event_id: str) -> Event:
        """
        Fetch an event and attach its venue when only venue_id is present.

        A failed venue lookup is logged and the event is returned as is.
        """
        event = await self.client.get_event(event_id)

        if event.venue_id and not event.raw.get("venue"):
            try:
                event.attach_venue(await self.client.get_venue(event.venue_id))
            except Exception as e:
                logger.warning(
                    "Failed to fetch venue %s for event %s: %s",
                    event.venue_id,
                    event_id,
                    e,
                )
        return event

    async def _search_events(self, arguments: dict[str, Any]) -> Any:
        present = {
            field: arguments[name]
            for name, field in SEARCH_ARGUMENTS.items()
            if arguments.get(name)
        }
        params = SearchEventsParams.model_validate(present)
        return await self.client.search_events(params)

    async def _get_event(self, arguments: dict[str, Any]) -> Any:
        event_id = arguments.get("event_id")
        if not event_id:
            raise _protocol_error(types.INVALID_REQUEST, "Event ID is required")
        return await self.get_event_with_venue(event_id)

    async def _get_categories(self, arguments: dict[str, Any]) -> Any:
        return await self.client.get_categories()

    async def _get_venue(self, arguments: dict[str, Any]) -> Any:
        venue_id = arguments.get("venue_id")
        if not venue_id:
            raise _protocol_error(types.INVALID_REQUEST, "Venue ID is required")
        return await self.client.get_venue(venue_id)


def build_server(dispatcher: EventbriteDispatcher) -> Server:
    """Create the MCP server and register the dispatcher's handlers."""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return dispatcher.list_tools()

    @server.list_resources()
    async def handle_list_resources() -> list[types.Resource]:
        return dispatcher.list_resources()

    @server.list_resource_templates()
    async def handle_list_resource_templates() -> list[types.ResourceTemplate]:
        return dispatcher.list_resource_templates()

    # Registered directly rather than through the decorators, which turn
    # every exception into a tool result. McpError must reach the client
    # as a JSON-RPC error.
    async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
        result = await dispatcher.call_tool(req.params.name, req.params.arguments)
        return types.ServerResult(result)

    async def handle_read_resource(req: types.ReadResourceRequest) -> types.ServerResult:
        result = await dispatcher.read_resource(str(req.params.uri))
        return types.ServerResult(result)

    server.request_handlers[types.CallToolRequest] = handle_call_tool
    server.request_handlers[types.ReadResourceRequest] = handle_read_resource
    return server


async def serve(client: EventbriteClient) -> None:
    """Serve MCP over stdio until the peer disconnects."""
    server = build_server(EventbriteDispatcher(client))
    try:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Eventbrite MCP server running on stdio")
            await server.run(
                read_stream, write_stream, server.create_initialization_options()
            )
    finally:
        await client.close()


def main() -> None:
    """Console entry point."""
    load_dotenv()
    settings = get_settings()
    configure_logging(settings)
    require_api_key(settings)

    client = get_eventbrite_client()
    try:
        asyncio.run(serve(client))
    except KeyboardInterrupt:
        logger.info("Eventbrite MCP server stopped")
    except Exception:
        logger.exception("Server error")
        sys.exit(1)


if __name__ == "__main__":
    main()
