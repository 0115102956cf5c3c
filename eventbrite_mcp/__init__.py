"""MCP server exposing Eventbrite event discovery to AI assistants."""

__version__ = "1.0.0"
