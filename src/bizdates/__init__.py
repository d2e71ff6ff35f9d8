"""
bizdates - Business day calendars, day counts and payment schedules.

Date primitives for pricing and administering fixed income instruments:
- Business day rolling (Following, Preceding and their Modified variants)
- Day count fractions (30/360, ACT/360, ACT/365, actual years)
- Periodic schedules anchored at the termination date with an initial stub

Example:
    >>> from datetime import date
    >>> from bizdates import generate_schedule, Frequency
    >>> sched = generate_schedule(date(2023, 1, 2), date(2025, 1, 2), Frequency.SEMIANNUALLY)
    >>> [d.isoformat() for d in sched.adjusted_dates]
    ['2023-07-03', '2024-01-02', '2024-07-02', '2025-01-02']
"""

__version__ = "0.1.0"

from bizdates.core import (
    # Errors
    DateError,
    InvalidDateError,
    InvalidScheduleDirectionError,
    UnboundedCalendarError,
    # Dates
    DAYS_PER_YEAR,
    make_date,
    to_ymd,
    to_ordinal,
    from_ordinal,
    minus_years,
    add_years,
    # Calendars and rolling
    BusinessCalendar,
    Calendar,
    get_calendar,
    business_days_between,
    WEEKEND,
    EXAMPLE,
    BusinessDayConvention,
    adjust_date,
    # Day counts
    DayCountConvention,
    day_count_fraction,
    accrual_fractions,
    # Schedules
    Frequency,
    PeriodicDates,
    Schedule,
    ScheduleDate,
    generate,
    generate_frequency,
    generate_schedule,
    generate_explicit_schedule,
)

from bizdates.products.schema import (
    CalendarSpec,
    ScheduleSpec,
    load_schedule_spec,
    validate_schedule_spec_json,
    build_schedule,
    print_schedule_summary,
)

from bizdates.reporting import (
    AccrualEntry,
    AccrualReport,
    generate_accrual_report,
)

__all__ = [
    "__version__",
    # Errors
    "DateError",
    "InvalidDateError",
    "InvalidScheduleDirectionError",
    "UnboundedCalendarError",
    # Dates
    "DAYS_PER_YEAR",
    "make_date",
    "to_ymd",
    "to_ordinal",
    "from_ordinal",
    "minus_years",
    "add_years",
    # Calendars and rolling
    "BusinessCalendar",
    "Calendar",
    "get_calendar",
    "business_days_between",
    "WEEKEND",
    "EXAMPLE",
    "BusinessDayConvention",
    "adjust_date",
    # Day counts
    "DayCountConvention",
    "day_count_fraction",
    "accrual_fractions",
    # Schedules
    "Frequency",
    "PeriodicDates",
    "Schedule",
    "ScheduleDate",
    "generate",
    "generate_frequency",
    "generate_schedule",
    "generate_explicit_schedule",
    # Specifications
    "CalendarSpec",
    "ScheduleSpec",
    "load_schedule_spec",
    "validate_schedule_spec_json",
    "build_schedule",
    "print_schedule_summary",
    # Reporting
    "AccrualEntry",
    "AccrualReport",
    "generate_accrual_report",
]
