"""Tests for business day calendars."""

import pytest
from datetime import date

from bizdates.core.calendar import (
    Calendar,
    WEEKEND,
    EXAMPLE,
    WEEKEND_NEW_YEAR_CHRISTMAS,
    business_days_between,
    christmas_day,
    get_calendar,
    is_weekend,
    month_day,
    new_year_day,
)
from bizdates.core.errors import UnboundedCalendarError
from bizdates.core.roll import following, preceding


class TestRules:
    """Tests for non-business day rules."""

    def test_weekend(self, friday: date, saturday: date, sunday: date) -> None:
        assert not is_weekend(friday)
        assert is_weekend(saturday)
        assert is_weekend(sunday)

    def test_fixed_holidays(self) -> None:
        assert new_year_day(date(2024, 1, 1))
        assert not new_year_day(date(2024, 1, 2))
        assert christmas_day(date(2023, 12, 25))
        assert not christmas_day(date(2023, 11, 25))

    def test_month_day_no_observance(self) -> None:
        """A holiday on a Saturday is not moved to Friday or Monday."""
        july_4 = month_day(7, 4)
        assert july_4(date(2026, 7, 4))
        assert not july_4(date(2026, 7, 3))


class TestCalendar:
    """Tests for Calendar."""

    def test_weekend_only(self, saturday: date) -> None:
        assert WEEKEND.is_non_business_day(saturday)
        assert WEEKEND.is_business_day(date(2024, 1, 1))

    def test_example_new_year(self) -> None:
        # Monday
        assert EXAMPLE.is_non_business_day(date(2024, 1, 1))
        assert EXAMPLE.is_business_day(date(2024, 1, 2))

    def test_explicit_holidays(self) -> None:
        cal = Calendar("TEST", holidays={date(2024, 7, 4)})
        assert cal.is_non_business_day(date(2024, 7, 4))
        assert cal.is_non_business_day(date(2024, 7, 6))
        assert cal.is_business_day(date(2024, 7, 5))

    def test_add_holidays_and_rules(self) -> None:
        cal = Calendar("TEST")
        cal.add_holidays([date(2024, 7, 4)])
        cal.add_rule(christmas_day)

        assert cal.is_non_business_day(date(2024, 7, 4))
        assert cal.is_non_business_day(date(2024, 12, 25))

    def test_no_rules(self, saturday: date) -> None:
        """An empty rule list means every day is a business day."""
        cal = Calendar("ALL", rules=[])
        assert cal.is_business_day(saturday)

    def test_union(self) -> None:
        holidays = Calendar("H", rules=[christmas_day], holidays={date(2024, 7, 4)})
        combined = EXAMPLE | holidays

        assert combined.is_non_business_day(date(2024, 1, 1))
        assert combined.is_non_business_day(date(2024, 12, 25))
        assert combined.is_non_business_day(date(2024, 7, 4))
        assert combined.is_non_business_day(date(2024, 7, 6))
        assert combined.name == "EX|H"
        # Operands untouched
        assert EXAMPLE.is_business_day(date(2024, 12, 25))

    def test_with_holidays_copies(self) -> None:
        cal = WEEKEND.with_holidays([date(2024, 1, 2)])
        assert cal.is_non_business_day(date(2024, 1, 2))
        assert WEEKEND.is_business_day(date(2024, 1, 2))
        assert WEEKEND.holidays == set()

    def test_christmas_calendar(self) -> None:
        assert WEEKEND_NEW_YEAR_CHRISTMAS.is_non_business_day(date(2024, 12, 25))


class TestBusinessDaySteps:
    """Tests for stepping between business days."""

    def test_add_business_days(self, friday: date) -> None:
        assert WEEKEND.add_business_days(friday, 1) == date(2023, 1, 9)
        assert WEEKEND.add_business_days(date(2023, 1, 9), -1) == friday
        assert WEEKEND.add_business_days(friday, 0) == friday
        assert WEEKEND.add_business_days(friday, 5) == date(2023, 1, 13)

    def test_roll_on_calendar(self, friday: date, saturday: date) -> None:
        """Stepping to the nearest business day goes through the roll module."""
        assert following(saturday, WEEKEND) == date(2023, 1, 9)
        assert preceding(saturday, WEEKEND) == friday
        assert following(friday, WEEKEND) == friday
        assert following(date(2023, 12, 31), EXAMPLE) == date(2024, 1, 2)

    def test_roll_on_calendar_honours_cap(self) -> None:
        cal = Calendar("CLOSED", rules=[lambda d: True])
        with pytest.raises(UnboundedCalendarError):
            following(date(2023, 1, 2), cal, max_steps=7)

    def test_business_days_between(self, friday: date) -> None:
        assert business_days_between(friday, date(2023, 1, 13)) == 5
        assert business_days_between(date(2023, 1, 13), friday) == 0

    def test_business_days_between_holiday(self) -> None:
        # Fri 2023-12-29 to Fri 2024-01-05: Jan 1 is a holiday
        assert business_days_between(date(2023, 12, 29), date(2024, 1, 5), EXAMPLE) == 4
        assert business_days_between(date(2023, 12, 29), date(2024, 1, 5)) == 5


class TestRegistry:
    """Tests for named calendar lookup."""

    def test_lookup_case_insensitive(self) -> None:
        assert get_calendar("ex") is EXAMPLE
        assert get_calendar("WE") is WEEKEND

    def test_unknown_calendar(self) -> None:
        with pytest.raises(ValueError, match="Unknown calendar"):
            get_calendar("NYSE")
