"""Unit tests for structured logging framework.

Tests cover:
- get_logger returns a structlog BoundLogger
- JSON rendering with ISO timestamps and logger names
- Context binding
"""

import json
import logging

import pytest

from opal_downloader.utils.logging import bind_context, get_logger


def _last_event(caplog: pytest.LogCaptureFixture) -> dict:
    assert len(caplog.records) >= 1
    return json.loads(caplog.records[-1].getMessage())


@pytest.mark.unit
def test_get_logger_returns_bound_logger() -> None:
    logger = get_logger("test_module")

    # structlog returns a BoundLoggerLazyProxy that wraps BoundLogger
    assert hasattr(logger, "bind")
    assert hasattr(logger, "info")
    assert hasattr(logger, "error")


@pytest.mark.unit
def test_json_event_fields(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    get_logger("my_test_logger").info("bounds_computed", max="2023-11-15")

    event = _last_event(caplog)
    assert event["event"] == "bounds_computed"
    assert event["logger"] == "my_test_logger"
    assert event["level"] == "info"
    assert event["max"] == "2023-11-15"
    assert "timestamp" in event


@pytest.mark.unit
def test_bind_context(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    logger = bind_context(run="cli", requested_end="2030-01-01")
    logger.info("download_window_resolved", end="2023-11-15")

    event = _last_event(caplog)
    assert event["run"] == "cli"
    assert event["requested_end"] == "2030-01-01"
    assert event["end"] == "2023-11-15"


@pytest.mark.unit
def test_debug_filtered_at_info(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    get_logger("quiet_logger").debug("date_clamped")

    assert not any("date_clamped" in r.getMessage() for r in caplog.records)
