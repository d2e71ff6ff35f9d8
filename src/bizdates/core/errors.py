"""
Exceptions raised by date construction, rolling and schedule generation.

All errors derive from ValueError so callers validating inputs can catch
them the same way as any other bad-argument failure.
"""


class DateError(ValueError):
    """Base class for bizdates errors."""


class InvalidDateError(DateError):
    """Year, month and day do not form a real Gregorian date."""


class InvalidScheduleDirectionError(DateError):
    """Effective date, termination date and period disagree in sign."""


class UnboundedCalendarError(DateError):
    """A calendar reported no business day within the diagnostic step cap."""
