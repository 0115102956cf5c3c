"""Configuration management for the Eventbrite MCP server."""

from __future__ import annotations

import logging
import sys
from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

API_KEY_GUIDANCE = """\
Error: EVENTBRITE_API_KEY environment variable is required

To use this tool, run it with your Eventbrite API key:
EVENTBRITE_API_KEY=your-api-key eventbrite-mcp

Or set it in your environment:
export EVENTBRITE_API_KEY=your-api-key
eventbrite-mcp

Or create a .env file with EVENTBRITE_API_KEY=your-api-key"""


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    eventbrite_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("EVENTBRITE_API_KEY", "EVENTBRITEAPIKEY"),
        description="Eventbrite private token",
    )
    log_level: str = Field(default="INFO", description="Logging level")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def require_api_key(settings: Settings | None = None) -> str:
    """Return the configured API key, or exit with setup instructions."""
    if settings is None:
        settings = get_settings()

    if not settings.eventbrite_api_key:
        print(API_KEY_GUIDANCE, file=sys.stderr)
        sys.exit(1)
    return settings.eventbrite_api_key


def configure_logging(settings: Settings | None = None) -> None:
    """Configure application logging.

    Logs go to stderr; stdout is reserved for the MCP stdio transport.
    """
    if settings is None:
        settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    # Suppress verbose third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
