"""
Date resolution: parse, validate and clamp ``YYYY-MM-DD`` strings.

The pipeline runs in fixed stages and stops at the first failure:

1. lexical extraction against ``YYYY-MM-DD``
2. numeric conversion of each component
3. month and day range validation
4. construction of a single local-midnight instant in the target timezone
5. clamping into the bounding window

Every invalid input is reported as a ``ParseError``; nothing is guessed or
corrected.
"""

import re
from datetime import MINYEAR, datetime, timezone
from typing import Any, Tuple
from zoneinfo import ZoneInfo

import structlog

from opal_downloader.constants import MAX_MONTH, MIN_MONTH
from opal_downloader.dates.bounds import TARGET_TZ
from opal_downloader.dates.calendar import days_in_month
from opal_downloader.dates.errors import ParseError, WindowError

logger = structlog.get_logger(__name__)

DATE_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})")

DateComponents = Tuple[int, int, int]


def resolve(
    lower: datetime, upper: datetime, text: Any, tz: ZoneInfo = TARGET_TZ
) -> datetime:
    """
    Parse ``text`` into a civil date and clamp it into ``[lower, upper]``.

    Args:
        lower: Inclusive window minimum
        upper: Inclusive window maximum
        text: Candidate date string in ``YYYY-MM-DD`` form
        tz: Civil timezone the date is interpreted in

    Returns:
        Local midnight of the parsed date, or the nearest bound

    Raises:
        ParseError: If ``text`` is not a valid date
        WindowError: If ``lower > upper``

    Example:
        >>> from opal_downloader.dates.bounds import compute_bounds
        >>> window = compute_bounds(datetime(2023, 11, 20, tzinfo=timezone.utc))
        >>> resolve(window.min, window.max, "2022-07-23").isoformat()
        '2022-07-23T00:00:00+10:00'
    """
    year, month, day = parse_components(text)
    try:
        parsed = civil_midnight(year, month, day, tz)
    except OverflowError:
        # Only dates around year 0 fall outside datetime's range here
        if lower > upper:
            raise WindowError(lower, upper) from None
        below = year <= MINYEAR
        logger.debug(
            "date_clamped",
            requested=f"{year:04d}-{month:02d}-{day:02d}",
            bound="min" if below else "max",
        )
        return lower if below else upper
    return clamp(parsed, lower, upper)


def parse_components(text: Any) -> DateComponents:
    """Run the lexical, numeric and range stages on ``text``."""
    return validate_components(
        components_to_numbers(date_string_to_components(text))
    )


def parse_date(text: Any, tz: ZoneInfo = TARGET_TZ) -> datetime:
    """
    Parse ``text`` into local midnight in ``tz`` without clamping.

    Raises:
        ParseError: If ``text`` is not a valid date
        OverflowError: If the date is valid but ``datetime`` cannot hold it
    """
    year, month, day = parse_components(text)
    return civil_midnight(year, month, day, tz)


def date_string_to_components(text: Any) -> Tuple[str, str, str]:
    """Extract the raw year, month and day substrings."""
    if not isinstance(text, str):
        raise ParseError.could_not_parse_date(str(text))

    match = DATE_PATTERN.fullmatch(text)
    if match is None:
        raise ParseError.could_not_parse_date(text)
    return match.group(1), match.group(2), match.group(3)


def components_to_numbers(components: Tuple[str, str, str]) -> DateComponents:
    """
    Convert each substring to a non-negative integer.

    ``\\d`` matches any Unicode decimal digit, so components are checked for
    ASCII here; ``int()`` would otherwise accept e.g. Arabic-Indic digits.
    """
    numbers = []
    for index, component in enumerate(components):
        if not (component.isascii() and component.isdigit()):
            raise ParseError.could_not_parse_numeric_component(index, component)
        numbers.append(int(component))
    return numbers[0], numbers[1], numbers[2]


def validate_components(components: DateComponents) -> DateComponents:
    """Check month and day ranges under the proleptic Gregorian calendar."""
    year, month, day = components
    if not MIN_MONTH <= month <= MAX_MONTH:
        raise ParseError.invalid_month(month)
    if not 1 <= day <= days_in_month(year, month):
        raise ParseError.invalid_date_for_month(month, day)
    return components


def civil_midnight(year: int, month: int, day: int, tz: ZoneInfo) -> datetime:
    """
    Build local midnight for the date, requiring exactly one instant.

    Both ``fold`` values are round-tripped through UTC: a wall time in a DST
    gap survives neither, one repeated by a backward transition survives both
    with different offsets.

    Raises:
        ParseError: NO_SINGLE_DATE when the wall time is missing or ambiguous
        OverflowError: When the date or its UTC instant is outside
            ``datetime``'s range (year 0, the first hours of year 1)
    """
    if year < MINYEAR:
        raise OverflowError(f"year {year} is out of range")
    naive = datetime(year, month, day)

    instants = {}
    for fold in (0, 1):
        candidate = naive.replace(tzinfo=tz, fold=fold)
        as_utc = candidate.astimezone(timezone.utc)
        round_trip = as_utc.astimezone(tz).replace(tzinfo=None)
        if round_trip == naive:
            instants.setdefault(as_utc, candidate)

    if len(instants) != 1:
        raise ParseError.no_single_date(year, month, day)
    return next(iter(instants.values()))


def clamp(value: datetime, lower: datetime, upper: datetime) -> datetime:
    """
    Constrain ``value`` to the inclusive ``[lower, upper]`` range.

    Raises:
        WindowError: If ``lower > upper``
    """
    if lower > upper:
        raise WindowError(lower, upper)
    if value < lower:
        logger.debug("date_clamped", requested=value.isoformat(), bound="min")
        return lower
    if value > upper:
        logger.debug("date_clamped", requested=value.isoformat(), bound="max")
        return upper
    return value
