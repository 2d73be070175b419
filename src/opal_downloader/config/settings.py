"""
Configuration management for opal-downloader.

Environment-based settings using Pydantic BaseSettings. Values come from
``OPAL_``-prefixed environment variables or a ``.env`` file at the project
root (override the file location with ``OPAL_ENV_FILE``).

The date core never reads settings itself; the CLI resolves them once at
startup and passes the timezone, origin and lag down explicitly.
"""

import os
from datetime import date
from functools import lru_cache
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from opal_downloader.constants import (
    ORIGIN_DATE,
    PUBLICATION_LAG_DAYS,
    TARGET_TIMEZONE,
)

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("OPAL_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are loaded with the OPAL_ prefix, e.g.
    OPAL_TIMEZONE overrides ``timezone``. LOG_LEVEL is read without prefix.
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )

    timezone: str = Field(
        default=TARGET_TIMEZONE,
        description="IANA name of the civil timezone dates are interpreted in",
    )
    origin_date: date = Field(
        default=ORIGIN_DATE, description="Earliest date with published data"
    )
    publication_lag_days: int = Field(
        default=PUBLICATION_LAG_DAYS,
        ge=0,
        description="Calendar days held back from today for publication latency",
    )

    model_config = SettingsConfigDict(
        env_prefix="OPAL_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("timezone")
    @classmethod
    def _validate_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone '{value}'") from exc
        return value

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached application settings instance.

    Settings are read once per process; tests call
    ``get_settings.cache_clear()`` after changing the environment.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
