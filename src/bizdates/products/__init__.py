"""Schedule specifications loaded from JSON."""

from bizdates.products.schema import (
    CalendarSpec,
    ScheduleSpec,
    load_schedule_spec,
    validate_schedule_spec_json,
    build_schedule,
    print_schedule_summary,
)

__all__ = [
    "CalendarSpec",
    "ScheduleSpec",
    "load_schedule_spec",
    "validate_schedule_spec_json",
    "build_schedule",
    "print_schedule_summary",
]
