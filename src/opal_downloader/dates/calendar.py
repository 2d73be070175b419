"""Proleptic Gregorian calendar helpers."""

from opal_downloader.constants import MAX_MONTH, MIN_MONTH

_THIRTY_ONE_DAY_MONTHS = frozenset({1, 3, 5, 7, 8, 10, 12})


def is_leap_year(year: int) -> bool:
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def days_in_month(year: int, month: int) -> int:
    """
    Return the number of days in ``month`` of ``year``.

    Year 0 and other years outside ``datetime``'s range are valid here; the
    leap-year rule is applied uniformly.

    Raises:
        ValueError: If ``month`` is not in 1..12
    """
    if not MIN_MONTH <= month <= MAX_MONTH:
        raise ValueError(f"Month {month} is not a valid month.")
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in _THIRTY_ONE_DAY_MONTHS:
        return 31
    return 30
