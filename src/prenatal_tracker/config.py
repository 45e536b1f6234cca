"""Application configuration."""

import logging
import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

_logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    default_timezone: str = "UTC"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_timezone(raw: str | None) -> ZoneInfo:
    """Resolve a timezone name, falling back to UTC."""
    if raw is None or not raw.strip():
        return ZoneInfo("UTC")
    try:
        return ZoneInfo(raw.strip())
    except (ZoneInfoNotFoundError, ValueError):
        _logger.warning("Unknown timezone %r, using UTC", raw)
        return ZoneInfo("UTC")
