"""Command line utilities for the Eventbrite MCP server."""
