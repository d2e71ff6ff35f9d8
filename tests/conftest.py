"""
Shared pytest fixtures for bizdates tests.

Provides reusable dates, calendars and schedules.
"""

import pytest
from datetime import date

from bizdates.core.calendar import Calendar, WEEKEND, EXAMPLE
from bizdates.core.day_count import DayCountConvention
from bizdates.core.roll import BusinessDayConvention
from bizdates.core.schedule import Schedule, generate_schedule


class AlwaysClosedCalendar:
    """Pathological calendar that never reports a business day."""

    def is_non_business_day(self, d: date) -> bool:
        return True


@pytest.fixture
def weekend_calendar() -> Calendar:
    """Weekend-only calendar."""
    return WEEKEND


@pytest.fixture
def example_calendar() -> Calendar:
    """Weekend plus new year's day."""
    return EXAMPLE


@pytest.fixture
def closed_calendar() -> AlwaysClosedCalendar:
    return AlwaysClosedCalendar()


@pytest.fixture
def saturday() -> date:
    return date(2023, 1, 7)


@pytest.fixture
def sunday() -> date:
    return date(2023, 1, 8)


@pytest.fixture
def friday() -> date:
    return date(2023, 1, 6)


@pytest.fixture
def effective_date() -> date:
    """Standard effective date for schedules."""
    return date(2023, 1, 2)


@pytest.fixture
def termination_date() -> date:
    """Standard termination date (two years after effective)."""
    return date(2025, 1, 2)


@pytest.fixture
def annual_schedule(effective_date: date, termination_date: date) -> Schedule:
    """Two annual periods, no stub, 30/360."""
    return generate_schedule(
        effective_date,
        termination_date,
        12,
        convention=BusinessDayConvention.MODIFIED_FOLLOWING,
        day_count=DayCountConvention.THIRTY_360,
    )


# Parametrized fixtures

@pytest.fixture(params=list(DayCountConvention))
def day_count(request) -> DayCountConvention:
    """Every day count convention."""
    return request.param


@pytest.fixture(params=list(BusinessDayConvention))
def roll_convention(request) -> BusinessDayConvention:
    """Every business day convention."""
    return request.param
