#!/usr/bin/env python3
"""
CLI for checking an Eventbrite API key before configuring the MCP server.

Usage:
    # Key from the environment or .env
    python -m eventbrite_mcp.cli.check_key

    # Key passed explicitly
    python -m eventbrite_mcp.cli.check_key YOUR_API_KEY
"""

import argparse
import asyncio
import sys

from dotenv import load_dotenv

from eventbrite_mcp.config import get_settings, require_api_key
from eventbrite_mcp.services import EventbriteAPIError, EventbriteClient

SAMPLE_SIZE = 5


async def check_api_key(api_key: str) -> bool:
    """Fetch categories with the key and report the outcome."""
    client = EventbriteClient(api_key)

    try:
        print("Testing Eventbrite API key...")
        categories = await client.get_categories()
    except EventbriteAPIError as e:
        print("Error testing API key:", file=sys.stderr)
        if e.status_code is not None:
            print(f"Status: {e.status_code}", file=sys.stderr)
        print(f"Message: {e}", file=sys.stderr)
        if e.status_code == 401:
            print("\nYour API key appears to be invalid or has expired.", file=sys.stderr)
            print("Please check your API key and try again.", file=sys.stderr)
        return False
    finally:
        await client.close()

    print("API key is valid!")
    print(f"Found {len(categories)} categories")

    print("\nSample categories:")
    for category in categories[:SAMPLE_SIZE]:
        print(f"- {category.name} (ID: {category.id})")

    print("\nYou can now configure the MCP server with this API key.")
    return True


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Check an Eventbrite API key",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "api_key",
        nargs="?",
        help="Eventbrite API key (default: EVENTBRITE_API_KEY from env or .env)",
    )
    args = parser.parse_args()

    api_key = args.api_key
    if not api_key:
        load_dotenv()
        api_key = require_api_key(get_settings())

    if not asyncio.run(check_api_key(api_key)):
        sys.exit(1)


if __name__ == "__main__":
    main()
