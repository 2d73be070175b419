"""
Bounding window computation.

The window runs from the data origin (2020-01-01) up to "today" minus the
publication lag, both at local midnight in the target timezone. The current
instant is always passed in so the computation stays deterministic.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Iterator
from zoneinfo import ZoneInfo

from opal_downloader.constants import (
    ORIGIN_DATE,
    PUBLICATION_LAG_DAYS,
    TARGET_TIMEZONE,
)

TARGET_TZ = ZoneInfo(TARGET_TIMEZONE)


@dataclass(frozen=True)
class BoundingWindow:
    """
    Inclusive ``[min, max]`` range of civil dates.

    Unpacks like a pair so callers can write ``lower, upper = window``.

    Attributes:
        min: Earliest allowed local midnight
        max: Latest allowed local midnight
    """

    min: datetime
    max: datetime

    def __iter__(self) -> Iterator[datetime]:
        yield self.min
        yield self.max

    @property
    def is_empty(self) -> bool:
        return self.min > self.max


def today_in(now: datetime, tz: ZoneInfo = TARGET_TZ) -> datetime:
    """
    Truncate ``now`` to 00:00:00 of its calendar day in ``tz``.

    Raises:
        ValueError: If ``now`` is naive
    """
    if now.tzinfo is None or now.utcoffset() is None:
        raise ValueError("now must be timezone-aware")
    local_day = now.astimezone(tz).date()
    return datetime.combine(local_day, time(), tzinfo=tz)


def compute_bounds(
    now: datetime,
    tz: ZoneInfo = TARGET_TZ,
    origin: date = ORIGIN_DATE,
    lag_days: int = PUBLICATION_LAG_DAYS,
) -> BoundingWindow:
    """
    Compute the allowed date window for the instant ``now``.

    Args:
        now: Current instant (timezone-aware)
        tz: Civil timezone the window is expressed in
        origin: Earliest date with published data
        lag_days: Calendar days to hold back from today

    Returns:
        BoundingWindow with ``min`` at the origin and ``max`` at today minus
        ``lag_days``, both at local midnight

    Example:
        >>> from datetime import timezone
        >>> window = compute_bounds(datetime(2023, 11, 20, 3, tzinfo=timezone.utc))
        >>> window.max.isoformat()
        '2023-11-15T00:00:00+11:00'
    """
    today = today_in(now, tz)
    lower = datetime.combine(origin, time(), tzinfo=tz)
    # Same-tzinfo arithmetic is wall-clock, so the result stays at midnight
    upper = today - timedelta(days=lag_days)
    return BoundingWindow(min=lower, max=upper)
