"""
Business day adjustment conventions.

Supports Unadjusted, Following, Preceding, Modified Following and
Modified Preceding.

Rolling steps one day at a time until the calendar reports a business day.
A calendar must report at least one business day in any run of days; the
optional ``max_steps`` cap exists only to diagnose calendars that do not.
"""

import logging
from datetime import date, timedelta
from enum import Enum
from typing import Optional

from bizdates.core.calendar import BusinessCalendar, DEFAULT_CALENDAR
from bizdates.core.errors import UnboundedCalendarError

logger = logging.getLogger(__name__)


class BusinessDayConvention(str, Enum):
    """Business day adjustment conventions."""

    UNADJUSTED = "UNADJUSTED"
    FOLLOWING = "FOLLOWING"
    MODIFIED_FOLLOWING = "MODIFIED_FOLLOWING"
    PRECEDING = "PRECEDING"
    MODIFIED_PRECEDING = "MODIFIED_PRECEDING"


def _roll(
    d: date,
    step: int,
    cal: BusinessCalendar,
    max_steps: Optional[int]
) -> date:
    current = d
    steps = 0
    while cal.is_non_business_day(current):
        if max_steps is not None and steps >= max_steps:
            logger.warning(
                f"No business day within {max_steps} days of {d} "
                f"(step {step:+d}) on calendar {cal!r}"
            )
            raise UnboundedCalendarError(
                f"Calendar has no business day within {max_steps} days of {d}"
            )
        current += timedelta(days=step)
        steps += 1
    return current


def following(
    d: date,
    calendar: Optional[BusinessCalendar] = None,
    max_steps: Optional[int] = None
) -> date:
    """First business day on or after d."""
    return _roll(d, 1, calendar or DEFAULT_CALENDAR, max_steps)


def preceding(
    d: date,
    calendar: Optional[BusinessCalendar] = None,
    max_steps: Optional[int] = None
) -> date:
    """Last business day on or before d."""
    return _roll(d, -1, calendar or DEFAULT_CALENDAR, max_steps)


def adjust_date(
    d: date,
    convention: BusinessDayConvention,
    calendar: Optional[BusinessCalendar] = None,
    max_steps: Optional[int] = None
) -> date:
    """
    Adjust a date according to a business day convention.

    Args:
        d: Date to adjust
        convention: Business day convention
        calendar: Calendar to use (defaults to weekend-only)
        max_steps: Optional cap on days stepped before giving up

    Returns:
        Adjusted date

    Raises:
        UnboundedCalendarError: If max_steps is exceeded
        ValueError: If the convention is unknown
    """
    cal = calendar or DEFAULT_CALENDAR

    if convention == BusinessDayConvention.UNADJUSTED:
        return d

    if convention == BusinessDayConvention.FOLLOWING:
        return following(d, cal, max_steps)

    elif convention == BusinessDayConvention.PRECEDING:
        return preceding(d, cal, max_steps)

    elif convention == BusinessDayConvention.MODIFIED_FOLLOWING:
        adjusted = following(d, cal, max_steps)
        # If adjusted date is in a different month, go backwards instead
        if adjusted.month != d.month:
            adjusted = preceding(d, cal, max_steps)
        return adjusted

    elif convention == BusinessDayConvention.MODIFIED_PRECEDING:
        adjusted = preceding(d, cal, max_steps)
        if adjusted.month != d.month:
            adjusted = following(d, cal, max_steps)
        return adjusted

    else:
        raise ValueError(f"Unknown business day convention: {convention}")
