"""
Business day calendars.

A calendar answers one question: is a date a non-business day? Calendars
are composed from a weekend rule plus holiday rules (predicates on a date)
and an optional set of explicit holiday dates; a date is a non-business day
when any of them holds.
"""

from datetime import date, timedelta
from typing import Callable, Dict, Iterable, List, Optional, Protocol, Set


HolidayRule = Callable[[date], bool]


class BusinessCalendar(Protocol):
    """Anything that can tell a business day from a non-business day."""

    def is_non_business_day(self, d: date) -> bool:
        ...


# ----------------------------------------------------------------------------
# Rules
# ----------------------------------------------------------------------------

def is_weekend(d: date) -> bool:
    """Saturday or Sunday."""
    return d.weekday() >= 5


def month_day(month: int, day: int) -> HolidayRule:
    """
    Rule for a holiday falling on the same month and day every year.

    No observance shifting is applied: a holiday on a weekend stays there.
    """
    def rule(d: date) -> bool:
        return d.month == month and d.day == day

    rule.__name__ = f"month_day_{month:02d}_{day:02d}"
    return rule


new_year_day = month_day(1, 1)
christmas_day = month_day(12, 25)


# ----------------------------------------------------------------------------
# Calendar
# ----------------------------------------------------------------------------

class Calendar:
    """
    Business day calendar built from rules and explicit holidays.

    Provides methods to check business days and step between them.
    """

    def __init__(
        self,
        name: str = "WE",  # Weekend-only calendar
        rules: Optional[Iterable[HolidayRule]] = None,
        holidays: Optional[Set[date]] = None
    ) -> None:
        """
        Initialize calendar.

        Args:
            name: Calendar identifier (e.g., "WE", "EX")
            rules: Non-business day predicates, defaults to the weekend rule
            holidays: Set of explicit holiday dates
        """
        self.name = name
        self._rules: List[HolidayRule] = list(rules) if rules is not None else [is_weekend]
        self._holidays: Set[date] = set(holidays) if holidays else set()

    def __repr__(self) -> str:
        return f"Calendar(name={self.name!r}, rules={len(self._rules)}, holidays={len(self._holidays)})"

    def __or__(self, other: "Calendar") -> "Calendar":
        """Union of two calendars: non-business if either says so."""
        if not isinstance(other, Calendar):
            return NotImplemented
        return Calendar(
            name=f"{self.name}|{other.name}",
            rules=self._rules + [r for r in other._rules if r not in self._rules],
            holidays=self._holidays | other._holidays,
        )

    @property
    def rules(self) -> List[HolidayRule]:
        return list(self._rules)

    @property
    def holidays(self) -> Set[date]:
        return set(self._holidays)

    def is_non_business_day(self, d: date) -> bool:
        """Check if a date is a weekend or holiday."""
        if d in self._holidays:
            return True
        return any(rule(d) for rule in self._rules)

    def is_business_day(self, d: date) -> bool:
        """Check if a date is a business day."""
        return not self.is_non_business_day(d)

    def add_business_days(self, d: date, days: int) -> date:
        """Add business days to a date."""
        if days == 0:
            return d

        step = 1 if days > 0 else -1
        remaining = abs(days)
        current = d

        while remaining > 0:
            current += timedelta(days=step)
            if self.is_business_day(current):
                remaining -= 1

        return current

    def add_holidays(self, holidays: Iterable[date]) -> None:
        """Add explicit holidays to the calendar."""
        self._holidays.update(holidays)

    def add_rule(self, rule: HolidayRule) -> None:
        """Add a non-business day rule to the calendar."""
        self._rules.append(rule)

    def with_holidays(self, holidays: Iterable[date]) -> "Calendar":
        """Copy of this calendar with extra explicit holidays."""
        return Calendar(self.name, self._rules, self._holidays | set(holidays))


# Weekend-only calendar
WEEKEND = Calendar("WE")
# Weekend and new year's day
EXAMPLE = Calendar("EX", rules=[is_weekend, new_year_day])
# Weekend, new year's day and Christmas day
WEEKEND_NEW_YEAR_CHRISTMAS = Calendar("WENC", rules=[is_weekend, new_year_day, christmas_day])

DEFAULT_CALENDAR = WEEKEND

CALENDARS: Dict[str, Calendar] = {
    cal.name: cal for cal in (WEEKEND, EXAMPLE, WEEKEND_NEW_YEAR_CHRISTMAS)
}


def get_calendar(name: str) -> Calendar:
    """Look up a named calendar."""
    key = name.upper()
    if key not in CALENDARS:
        raise ValueError(
            f"Unknown calendar: {name}. Available: {list(CALENDARS.keys())}"
        )
    return CALENDARS[key]


def business_days_between(
    start: date,
    end: date,
    calendar: Optional[Calendar] = None
) -> int:
    """Count business days between two dates (exclusive of start, inclusive of end)."""
    cal = calendar or DEFAULT_CALENDAR

    if end <= start:
        return 0

    count = 0
    current = start + timedelta(days=1)
    while current <= end:
        if cal.is_business_day(current):
            count += 1
        current += timedelta(days=1)

    return count
