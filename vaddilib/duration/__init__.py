"""Duration specs and their resolution."""

from .resolver import duration_between_dates, duration_from_fields, resolve_duration
from .types import DateRange, Duration, DurationSpec, Period

__all__ = [
    "DateRange",
    "Duration",
    "DurationSpec",
    "Period",
    "duration_between_dates",
    "duration_from_fields",
    "resolve_duration",
]
