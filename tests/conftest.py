"""Pytest configuration: fixed clock instants and isolated settings."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Generator

import pytest

from opal_downloader.config import get_settings

_SETTINGS_ENV_VARS = (
    "OPAL_TIMEZONE",
    "OPAL_ORIGIN_DATE",
    "OPAL_PUBLICATION_LAG_DAYS",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Run every test against default settings with a fresh cache."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fixed_now() -> datetime:
    """2023-11-20 14:00 in Sydney (AEDT, +11:00)."""
    return datetime(2023, 11, 20, 3, 0, tzinfo=timezone.utc)
