"""Core utilities: dates, calendars, rolling, day counts, and schedules."""

from bizdates.core.errors import (
    DateError,
    InvalidDateError,
    InvalidScheduleDirectionError,
    UnboundedCalendarError,
)
from bizdates.core.dates import (
    DAYS_PER_YEAR,
    make_date,
    to_ymd,
    to_ordinal,
    from_ordinal,
    minus_years,
    add_years,
)
from bizdates.core.calendar import (
    BusinessCalendar,
    Calendar,
    get_calendar,
    business_days_between,
    WEEKEND,
    EXAMPLE,
)
from bizdates.core.roll import BusinessDayConvention, adjust_date
from bizdates.core.day_count import DayCountConvention, day_count_fraction, accrual_fractions
from bizdates.core.schedule import (
    Frequency,
    PeriodicDates,
    Schedule,
    ScheduleDate,
    generate,
    generate_frequency,
    generate_schedule,
    generate_explicit_schedule,
)

__all__ = [
    "DateError",
    "InvalidDateError",
    "InvalidScheduleDirectionError",
    "UnboundedCalendarError",
    "DAYS_PER_YEAR",
    "make_date",
    "to_ymd",
    "to_ordinal",
    "from_ordinal",
    "minus_years",
    "add_years",
    "BusinessCalendar",
    "Calendar",
    "get_calendar",
    "business_days_between",
    "WEEKEND",
    "EXAMPLE",
    "BusinessDayConvention",
    "adjust_date",
    "DayCountConvention",
    "day_count_fraction",
    "accrual_fractions",
    "Frequency",
    "PeriodicDates",
    "Schedule",
    "ScheduleDate",
    "generate",
    "generate_frequency",
    "generate_schedule",
    "generate_explicit_schedule",
]
