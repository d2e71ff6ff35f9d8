"""
Schedule generation for fixed income instruments.

Periodic dates are anchored at the termination date and laid out backwards
in whole periods towards the effective date. Any remainder falls in an
initial stub between the effective date and the first periodic date.
"""

import calendar as _calendar
import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple, Union
import numpy as np

from bizdates.core.calendar import BusinessCalendar, DEFAULT_CALENDAR
from bizdates.core.day_count import DayCountConvention, day_count_fraction
from bizdates.core.errors import InvalidScheduleDirectionError
from bizdates.core.roll import BusinessDayConvention, adjust_date

logger = logging.getLogger(__name__)


# Whole months (int) or whole days (timedelta)
Period = Union[int, timedelta]


class Frequency(int, Enum):
    """Payments per year."""

    ANNUALLY = 1
    SEMIANNUALLY = 2
    QUARTERLY = 4
    MONTHLY = 12

    @property
    def tenor_months(self) -> int:
        """Months per period."""
        return 12 // self.value

    @classmethod
    def from_value(cls, value: Union[int, str, "Frequency"]) -> "Frequency":
        """Parse a frequency from its name ("QUARTERLY") or payments per year (4)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and not value.strip().isdigit():
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown frequency: {value}") from None
        try:
            return cls(int(value))
        except ValueError:
            raise ValueError(f"Unknown frequency: {value}") from None


def add_months(d: date, months: int) -> date:
    """Add months to a date, clamping to the end of the target month."""
    year = d.year + (d.month + months - 1) // 12
    month = (d.month + months - 1) % 12 + 1

    max_day = _calendar.monthrange(year, month)[1]
    day = min(d.day, max_day)

    return date(year, month, day)


def _check_period(period: Period) -> None:
    if isinstance(period, bool) or not isinstance(period, (int, timedelta)):
        raise TypeError(
            f"period must be a number of months (int) or a timedelta, got {type(period).__name__}"
        )
    if isinstance(period, timedelta) and (period.seconds or period.microseconds):
        raise ValueError(f"timedelta period must be a whole number of days, got {period}")


def _period_sign(period: Period) -> int:
    n = period.days if isinstance(period, timedelta) else period
    return (n > 0) - (n < 0)


def _offset(anchor: date, period: Period, steps: int) -> date:
    """anchor + steps * period, always measured from the anchor."""
    if isinstance(period, timedelta):
        return anchor + steps * period
    return add_months(anchor, steps * period)


def is_valid_direction(effective: date, termination: date, period: Period) -> bool:
    """Whether the order of the dates and the sign of the period are compatible."""
    sign = _period_sign(period)
    if effective == termination:
        return sign == 0
    return (effective < termination) == (sign > 0)


@dataclass(frozen=True)
class PeriodicDates:
    """
    Dates spaced one period apart, ending on the termination date.

    The first date is the earliest one reachable from termination in whole
    periods without passing effective. It equals effective only when the span
    is an exact multiple of the period. Iteration is restartable.

    Every date is termination minus a whole number of periods, so month
    periods are exact relative to termination rather than to the previous
    date: after a month-end clamp the next date returns to the termination
    day of month (Jan 31, Feb 28, Mar 31 for a one-month period). A
    Frequency period is read as its tenor in months.
    """

    effective: date
    termination: date
    period: Period
    _dates: Tuple[date, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.period, Frequency):
            months = self.period.tenor_months
            object.__setattr__(
                self, "period", -months if self.termination < self.effective else months
            )
        _check_period(self.period)
        if not is_valid_direction(self.effective, self.termination, self.period):
            raise InvalidScheduleDirectionError(
                f"Period {self.period!r} cannot step from {self.effective} to {self.termination}"
            )
        object.__setattr__(self, "_dates", self._generate())

    def _generate(self) -> Tuple[date, ...]:
        if self.effective == self.termination:
            return (self.termination,)

        forward = self.effective < self.termination
        steps = 0
        while True:
            try:
                candidate = _offset(self.termination, self.period, -(steps + 1))
            except (OverflowError, ValueError):
                # Next step leaves the representable date range
                break
            if (candidate < self.effective) if forward else (candidate > self.effective):
                break
            steps += 1

        return tuple(_offset(self.termination, self.period, -k) for k in range(steps, -1, -1))

    def __iter__(self) -> Iterator[date]:
        return iter(self._dates)

    def __len__(self) -> int:
        return len(self._dates)

    def __getitem__(self, idx: int) -> date:
        return self._dates[idx]

    @property
    def dates(self) -> List[date]:
        return list(self._dates)

    @property
    def anchor(self) -> date:
        """First periodic date."""
        return self._dates[0]

    @property
    def has_stub(self) -> bool:
        """True when the first period does not start on the effective date."""
        return self._dates[0] != self.effective


def generate(effective: date, termination: date, period: Period) -> PeriodicDates:
    """
    Generate periodic dates from effective to termination.

    Args:
        effective: Schedule start date
        termination: Schedule end date, always the last date produced
        period: Signed step in months (int) or days (timedelta). A
            Frequency is read as its tenor, not as a month count.

    Raises:
        InvalidScheduleDirectionError: If the period cannot move from
            effective towards termination
    """
    return PeriodicDates(effective, termination, period)


def generate_frequency(
    effective: date,
    termination: date,
    frequency: Frequency
) -> PeriodicDates:
    """Generate periodic dates using the tenor of a payment frequency."""
    return PeriodicDates(effective, termination, Frequency.from_value(frequency))


@dataclass
class ScheduleDate:
    """A single date in a schedule with associated metadata."""

    unadjusted_date: date
    adjusted_date: date
    period_start: Optional[date] = None
    period_end: Optional[date] = None
    year_fraction: float = 0.0
    is_stub: bool = False


@dataclass
class Schedule:
    """
    An adjusted payment schedule.

    Each entry carries its accrual period (start and end, both adjusted) and
    the year fraction under the schedule's day count.
    """

    dates: List[ScheduleDate] = field(default_factory=list)
    day_count: DayCountConvention = DayCountConvention.THIRTY_360

    def __len__(self) -> int:
        return len(self.dates)

    def __iter__(self):
        return iter(self.dates)

    def __getitem__(self, idx: int) -> ScheduleDate:
        return self.dates[idx]

    @property
    def adjusted_dates(self) -> List[date]:
        """Get list of adjusted dates."""
        return [d.adjusted_date for d in self.dates]

    @property
    def unadjusted_dates(self) -> List[date]:
        """Get list of unadjusted dates."""
        return [d.unadjusted_date for d in self.dates]

    @property
    def year_fractions(self) -> np.ndarray:
        """Accrual year fraction of each entry."""
        return np.array([d.year_fraction for d in self.dates], dtype=float)

    @property
    def has_stub(self) -> bool:
        return any(d.is_stub for d in self.dates)


def _fill_periods(
    dates: List[ScheduleDate],
    start: date,
    day_count: DayCountConvention
) -> None:
    for i, sched_date in enumerate(dates):
        sched_date.period_start = start if i == 0 else dates[i - 1].adjusted_date
        sched_date.period_end = sched_date.adjusted_date
        sched_date.year_fraction = day_count_fraction(
            sched_date.period_start, sched_date.period_end, day_count
        )


def generate_schedule(
    effective: date,
    termination: date,
    period: Union[Period, Frequency],
    convention: BusinessDayConvention = BusinessDayConvention.MODIFIED_FOLLOWING,
    calendar: Optional[BusinessCalendar] = None,
    day_count: DayCountConvention = DayCountConvention.THIRTY_360,
    include_start: bool = False,
    max_roll_steps: Optional[int] = None
) -> Schedule:
    """
    Generate an adjusted schedule between effective and termination.

    Args:
        effective: Schedule start date (unadjusted)
        termination: Schedule end date (unadjusted)
        period: Months (int), days (timedelta) or a Frequency
        convention: Business day adjustment convention
        calendar: Business day calendar
        day_count: Day count for accrual year fractions
        include_start: Keep effective as an entry when a period starts on it
        max_roll_steps: Diagnostic cap passed to adjust_date

    Returns:
        Schedule whose first entry accrues from the adjusted effective date
    """
    cal = calendar or DEFAULT_CALENDAR

    periodic = generate(effective, termination, period)

    unadjusted = periodic.dates
    if not include_start and len(unadjusted) > 1 and unadjusted[0] == effective:
        unadjusted = unadjusted[1:]

    dates: List[ScheduleDate] = [
        ScheduleDate(
            unadjusted_date=d,
            adjusted_date=adjust_date(d, convention, cal, max_roll_steps),
        )
        for d in unadjusted
    ]

    if periodic.has_stub:
        dates[0].is_stub = True
        logger.debug(
            f"Initial stub from {effective} to {periodic.anchor} "
            f"(period {periodic.period!r})"
        )

    _fill_periods(dates, adjust_date(effective, convention, cal, max_roll_steps), day_count)

    return Schedule(dates=dates, day_count=day_count)


def generate_explicit_schedule(
    explicit_dates: Sequence[date],
    convention: BusinessDayConvention = BusinessDayConvention.MODIFIED_FOLLOWING,
    calendar: Optional[BusinessCalendar] = None,
    day_count: DayCountConvention = DayCountConvention.THIRTY_360
) -> Schedule:
    """
    Generate a schedule from explicit dates.

    The earliest date opens the first accrual period, so the first entry
    has a zero year fraction.

    Args:
        explicit_dates: List of unadjusted dates
        convention: Business day adjustment convention
        calendar: Business day calendar
        day_count: Day count for accrual year fractions

    Returns:
        Schedule of dates
    """
    cal = calendar or DEFAULT_CALENDAR

    dates: List[ScheduleDate] = [
        ScheduleDate(unadjusted_date=d, adjusted_date=adjust_date(d, convention, cal))
        for d in sorted(explicit_dates)
    ]
    if dates:
        _fill_periods(dates, dates[0].adjusted_date, day_count)

    return Schedule(dates=dates, day_count=day_count)
