"""Run the Eventbrite MCP server: ``python -m eventbrite_mcp``."""

from eventbrite_mcp.server import main

main()
