"""
Calendar date construction and ordinal arithmetic.

Dates are plain ``datetime.date`` values. This module adds checked
construction, conversion to and from day ordinals, and conversion between
day differences and durations measured in Gregorian years.
"""

from datetime import date, timedelta
from typing import Tuple

from bizdates.core.errors import InvalidDateError


# Mean length of a Gregorian year in days (400-year cycle)
DAYS_PER_YEAR = 365.2425


def make_date(year: int, month: int, day: int) -> date:
    """
    Build a calendar date from its fields.

    Args:
        year: Calendar year
        month: Month (1-12)
        day: Day of month

    Returns:
        The corresponding date

    Raises:
        InvalidDateError: If the fields do not denote a real date
    """
    try:
        return date(year, month, day)
    except (TypeError, ValueError) as e:
        raise InvalidDateError(f"Invalid date {year}-{month}-{day}: {e}") from e


def to_ymd(d: date) -> Tuple[int, int, int]:
    """Project a date back onto (year, month, day)."""
    return d.year, d.month, d.day


def to_ordinal(d: date) -> int:
    """Day ordinal of a date (0001-01-01 is day 1)."""
    return d.toordinal()


def from_ordinal(ordinal: int) -> date:
    """Inverse of to_ordinal."""
    try:
        return date.fromordinal(ordinal)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidDateError(f"Ordinal {ordinal} is outside the supported date range") from e


def days_between(start: date, end: date) -> int:
    """Signed number of days from start to end."""
    return to_ordinal(end) - to_ordinal(start)


def minus_years(d0: date, d1: date) -> float:
    """d0 - d1 expressed in Gregorian years."""
    return days_between(d1, d0) / DAYS_PER_YEAR


def add_years(d: date, years: float) -> date:
    """
    Offset a date by a duration in Gregorian years.

    The duration is converted to days and rounded to the nearest whole day,
    so ``add_years(d1, minus_years(d0, d1)) == d0`` for any two dates.
    """
    return from_ordinal(to_ordinal(d) + int(round(years * DAYS_PER_YEAR)))


def add_days(d: date, days: int) -> date:
    """Offset a date by a signed number of days."""
    try:
        return d + timedelta(days=days)
    except OverflowError as e:
        raise InvalidDateError(f"{d} + {days} days is outside the supported date range") from e
