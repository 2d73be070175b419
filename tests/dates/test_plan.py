"""
Tests for the daily download plan.
"""

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from opal_downloader.dates.bounds import TARGET_TZ
from opal_downloader.dates.plan import iter_download_days


@pytest.mark.unit
def test_inclusive_daily_steps():
    start = datetime(2023, 2, 27, tzinfo=TARGET_TZ)
    end = datetime(2023, 3, 2, tzinfo=TARGET_TZ)
    days = [day.date().isoformat() for day in iter_download_days(start, end)]
    assert days == ["2023-02-27", "2023-02-28", "2023-03-01", "2023-03-02"]


@pytest.mark.unit
def test_days_stay_at_midnight_across_dst():
    start = datetime(2023, 9, 30, tzinfo=TARGET_TZ)
    end = datetime(2023, 10, 2, tzinfo=TARGET_TZ)
    days = list(iter_download_days(start, end))
    assert [day.isoformat() for day in days] == [
        "2023-09-30T00:00:00+10:00",
        "2023-10-01T00:00:00+10:00",
        "2023-10-02T00:00:00+11:00",
    ]


@pytest.mark.unit
def test_single_day():
    day = datetime(2022, 7, 23, tzinfo=TARGET_TZ)
    assert list(iter_download_days(day, day)) == [day]


@pytest.mark.unit
def test_start_after_end_yields_nothing():
    start = datetime(2023, 3, 2, tzinfo=TARGET_TZ)
    end = datetime(2023, 3, 1, tzinfo=TARGET_TZ)
    assert list(iter_download_days(start, end)) == []


@pytest.mark.unit
def test_other_timezone():
    utc = ZoneInfo("UTC")
    start = datetime(2024, 2, 28, tzinfo=utc)
    end = datetime(2024, 3, 1, tzinfo=utc)
    days = [day.date().isoformat() for day in iter_download_days(start, end, utc)]
    assert days == ["2024-02-28", "2024-02-29", "2024-03-01"]
