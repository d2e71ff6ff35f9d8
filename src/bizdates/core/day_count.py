"""
Day count conventions for interest accrual.

Supports: ACT/YEARS, ACT/360, ACT/365, 30/360 (bond basis)

Every convention is antisymmetric: swapping start and end negates the
fraction.
"""

from datetime import date
from enum import Enum
from typing import Callable, Dict, Sequence
import numpy as np

from bizdates.core.dates import DAYS_PER_YEAR, days_between


class DayCountConvention(str, Enum):
    """Supported day count conventions."""

    ACT_YEARS = "ACT/YEARS"
    THIRTY_360 = "30/360"
    ACT_360 = "ACT/360"
    ACT_365 = "ACT/365"


def _thirty_360_days(start: date, end: date) -> int:
    """
    Calculate days using the 30/360 bond basis.

    Each month is treated as having 30 days, year has 360 days.
    """
    d1, m1, y1 = start.day, start.month, start.year
    d2, m2, y2 = end.day, end.month, end.year

    # d1 is normalized before it is tested below
    if d1 == 31:
        d1 = 30
    if d2 == 31 and d1 > 29:
        d2 = 30

    return 360 * (y2 - y1) + 30 * (m2 - m1) + (d2 - d1)


def dcf_years(start: date, end: date) -> float:
    """Elapsed time in mean Gregorian years."""
    return days_between(start, end) / DAYS_PER_YEAR


def dcf_act_360(start: date, end: date) -> float:
    return days_between(start, end) / 360.0


def dcf_act_365(start: date, end: date) -> float:
    return days_between(start, end) / 365.0


def dcf_30_360(start: date, end: date) -> float:
    """
    30/360 bond basis year fraction.

    The day-of-month rules are not symmetric in their arguments, so a
    reversed interval is evaluated in order and negated.
    """
    if end < start:
        return -_thirty_360_days(end, start) / 360.0
    return _thirty_360_days(start, end) / 360.0


_DCF_FUNCTIONS: Dict[DayCountConvention, Callable[[date, date], float]] = {
    DayCountConvention.ACT_YEARS: dcf_years,
    DayCountConvention.THIRTY_360: dcf_30_360,
    DayCountConvention.ACT_360: dcf_act_360,
    DayCountConvention.ACT_365: dcf_act_365,
}


def day_count_fraction(
    start: date,
    end: date,
    convention: DayCountConvention
) -> float:
    """
    Calculate the year fraction between two dates.

    Args:
        start: Start date (exclusive for accrual)
        end: End date (inclusive for accrual)
        convention: Day count convention to use

    Returns:
        Year fraction as a float, negative when end < start

    Examples:
        >>> from datetime import date
        >>> day_count_fraction(date(2024, 1, 1), date(2024, 7, 1), DayCountConvention.ACT_360)
        0.5055555555555555
    """
    try:
        fn = _DCF_FUNCTIONS[DayCountConvention(convention)]
    except ValueError:
        raise ValueError(f"Unknown day count convention: {convention}") from None

    if end == start:
        return 0.0

    return fn(start, end)


def accrual_fractions(
    dates: Sequence[date],
    convention: DayCountConvention
) -> np.ndarray:
    """Year fractions between each pair of consecutive dates."""
    return np.array(
        [day_count_fraction(d0, d1, convention) for d0, d1 in zip(dates[:-1], dates[1:])],
        dtype=float,
    )


def year_fraction_to_days(
    year_fraction: float,
    convention: DayCountConvention
) -> int:
    """Convert a year fraction back to approximate days."""
    if convention == DayCountConvention.ACT_360:
        return int(round(year_fraction * 360))
    elif convention == DayCountConvention.ACT_365:
        return int(round(year_fraction * 365))
    elif convention == DayCountConvention.THIRTY_360:
        return int(round(year_fraction * 360))
    elif convention == DayCountConvention.ACT_YEARS:
        return int(round(year_fraction * DAYS_PER_YEAR))
    else:
        raise ValueError(f"Unknown day count convention: {convention}")
