"""Date parsing, validation and bounding-window computation."""

from opal_downloader.dates.bounds import (
    TARGET_TZ,
    BoundingWindow,
    compute_bounds,
    today_in,
)
from opal_downloader.dates.calendar import days_in_month, is_leap_year
from opal_downloader.dates.errors import ParseError, ParseErrorKind, WindowError
from opal_downloader.dates.plan import iter_download_days
from opal_downloader.dates.resolver import (
    clamp,
    parse_components,
    parse_date,
    resolve,
)

__all__ = [
    "TARGET_TZ",
    "BoundingWindow",
    "ParseError",
    "ParseErrorKind",
    "WindowError",
    "clamp",
    "compute_bounds",
    "days_in_month",
    "is_leap_year",
    "iter_download_days",
    "parse_components",
    "parse_date",
    "resolve",
    "today_in",
]
