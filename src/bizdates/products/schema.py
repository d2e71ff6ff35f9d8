"""
Strict Pydantic schema for payment schedule specifications.

A specification names the dates, period, conventions and calendar of one
schedule and can be loaded from JSON.
"""

from datetime import date, timedelta
from typing import List, Optional, Union
from pydantic import BaseModel, Field, field_validator, model_validator
import json
from pathlib import Path

from bizdates.core.calendar import Calendar, get_calendar
from bizdates.core.day_count import DayCountConvention
from bizdates.core.roll import BusinessDayConvention
from bizdates.core.schedule import (
    Frequency,
    Period,
    Schedule,
    generate_schedule,
    is_valid_direction,
)


# ============================================================================
# Sub-schemas
# ============================================================================

class CalendarSpec(BaseModel):
    """Calendar selection plus any extra holidays."""
    name: str = Field(default="WE", min_length=1, description="Registered calendar name")
    holidays: List[date] = Field(
        default_factory=list,
        description="Additional holiday dates"
    )

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Calendar must be registered."""
        get_calendar(v)
        return v.upper()

    def build(self) -> Calendar:
        """Resolve to a calendar, without mutating the registered one."""
        base = get_calendar(self.name)
        if not self.holidays:
            return base
        return base.with_holidays(self.holidays)


# ============================================================================
# Main schedule specification
# ============================================================================

class ScheduleSpec(BaseModel):
    """Complete schedule specification."""
    schedule_id: str = Field(default="SCHEDULE", min_length=1)
    effective_date: date
    termination_date: date

    # Exactly one of these sets the period
    frequency: Optional[Frequency] = None
    period_months: Optional[int] = None
    period_days: Optional[int] = None

    roll: BusinessDayConvention = BusinessDayConvention.MODIFIED_FOLLOWING
    day_count: DayCountConvention = DayCountConvention.THIRTY_360
    calendar: CalendarSpec = Field(default_factory=CalendarSpec)
    include_start: bool = False
    max_roll_steps: Optional[int] = Field(
        default=None, gt=0,
        description="Diagnostic cap on days stepped while rolling"
    )

    @field_validator('frequency', mode='before')
    @classmethod
    def parse_frequency(cls, v: Union[None, int, str, Frequency]) -> Optional[Frequency]:
        """Accept frequency names as well as payments per year."""
        if v is None:
            return None
        return Frequency.from_value(v)

    @model_validator(mode='after')
    def validate_period(self) -> 'ScheduleSpec':
        """Validate period presence and direction."""
        given = [
            name for name in ("frequency", "period_months", "period_days")
            if getattr(self, name) is not None
        ]
        if len(given) != 1:
            raise ValueError(
                f"exactly one of frequency, period_months, period_days required, got {given or 'none'}"
            )
        if self.frequency is not None and self.effective_date == self.termination_date:
            raise ValueError("frequency requires termination_date != effective_date")
        if self.frequency is None and not is_valid_direction(
            self.effective_date, self.termination_date, self.period
        ):
            raise ValueError(
                f"period {self.period!r} cannot step from {self.effective_date} "
                f"to {self.termination_date}"
            )
        return self

    @property
    def period(self) -> Union[Period, Frequency]:
        """Period as understood by generate_schedule."""
        if self.frequency is not None:
            return self.frequency
        if self.period_months is not None:
            return self.period_months
        return timedelta(days=self.period_days)


def load_schedule_spec(path: Union[str, Path]) -> ScheduleSpec:
    """
    Load and validate a schedule specification from JSON file.

    Args:
        path: Path to JSON file

    Returns:
        Validated ScheduleSpec object

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If JSON doesn't match schema
    """
    filepath = Path(path)
    if not filepath.exists():
        raise FileNotFoundError(f"Schedule specification not found: {path}")

    with open(filepath, "r") as f:
        data = json.load(f)

    return ScheduleSpec(**data)


def validate_schedule_spec_json(data: dict) -> ScheduleSpec:
    """
    Validate schedule specification data dictionary.

    Args:
        data: Raw JSON data as dictionary

    Returns:
        Validated ScheduleSpec object
    """
    return ScheduleSpec(**data)


def build_schedule(spec: ScheduleSpec) -> Schedule:
    """Generate the adjusted schedule described by a specification."""
    return generate_schedule(
        spec.effective_date,
        spec.termination_date,
        spec.period,
        convention=spec.roll,
        calendar=spec.calendar.build(),
        day_count=spec.day_count,
        include_start=spec.include_start,
        max_roll_steps=spec.max_roll_steps,
    )


def print_schedule_summary(spec: ScheduleSpec) -> None:
    """Print a clean summary of the schedule specification."""
    print("=" * 70)
    print(f"SCHEDULE SUMMARY: {spec.schedule_id}")
    print("=" * 70)

    print(f"\n--- DATES ---")
    print(f"  Effective Date:    {spec.effective_date}")
    print(f"  Termination Date:  {spec.termination_date}")

    print(f"\n--- CONVENTIONS ---")
    if spec.frequency is not None:
        print(f"  Frequency:   {spec.frequency.name} ({spec.frequency.tenor_months}M)")
    elif spec.period_months is not None:
        print(f"  Period:      {spec.period_months}M")
    else:
        print(f"  Period:      {spec.period_days}D")
    print(f"  Roll:        {spec.roll.value}")
    print(f"  Day Count:   {spec.day_count.value}")
    print(f"  Calendar:    {spec.calendar.name} (+{len(spec.calendar.holidays)} holidays)")
    print("=" * 70)
