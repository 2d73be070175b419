"""Daily download plan for a resolved date window."""

from datetime import datetime, time, timedelta
from typing import Iterator
from zoneinfo import ZoneInfo

from opal_downloader.dates.bounds import TARGET_TZ


def iter_download_days(
    start: datetime, end: datetime, tz: ZoneInfo = TARGET_TZ
) -> Iterator[datetime]:
    """
    Yield local midnight for every calendar day from ``start`` to ``end``.

    Steps by calendar date rather than by 24 hours so DST changes never move
    a day off midnight. Yields nothing when ``start > end``.
    """
    if start > end:
        return
    cursor = start.astimezone(tz).date()
    last = end.astimezone(tz).date()
    while cursor <= last:
        yield datetime.combine(cursor, time(), tzinfo=tz)
        cursor += timedelta(days=1)
