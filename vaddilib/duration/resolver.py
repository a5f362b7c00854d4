"""Resolve a duration spec into (years, months, days)."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Union

from vaddilib.conventions.types import DurationType, get_duration_type
from vaddilib.exceptions import InvalidDurationSpec
from vaddilib.utils.date import DateLike, days_in_previous_month, to_date, to_optional_date

from .types import DateRange, Duration, DurationSpec, Period

logger = logging.getLogger(__name__)

Number = Union[int, float]


def duration_between_dates(start: DateLike, end: DateLike) -> Duration:
    """Civil duration from ``start`` to ``end``.

    Components are subtracted field by field. A negative day count borrows the
    length of the month preceding the end date's month (at least the start
    day), a negative month count borrows a year. An inverted range resolves to
    the zero duration.
    """
    start_dt: date = to_date(start)
    end_dt: date = to_date(end)

    if start_dt > end_dt:
        logger.warning("Start date %s is after end date %s; using zero duration", start_dt, end_dt)
        return Duration.zero()
    if start_dt == end_dt:
        return Duration.zero()

    years = end_dt.year - start_dt.year
    months = end_dt.month - start_dt.month
    days = end_dt.day - start_dt.day

    if days < 0:
        months -= 1
        # Never borrow fewer days than the start day, so days stays non-negative
        days += max(days_in_previous_month(end_dt), start_dt.day)

    if months < 0:
        years -= 1
        months += 12

    return Duration(years, months, days)


def resolve_duration(spec: DurationSpec) -> Duration:
    """Resolve a ``DateRange`` or ``Period`` into a ``Duration``."""
    if isinstance(spec, Period):
        return Duration(spec.years, spec.months, spec.days)
    if isinstance(spec, DateRange):
        return duration_between_dates(spec.start_date, spec.end_date)
    raise InvalidDurationSpec(
        f"Expected DateRange or Period, got {type(spec).__name__}"
    )


def _component(value: Optional[Number]) -> Number:
    return 0 if value is None else value


def duration_from_fields(
    duration_type: Union[str, DurationType],
    years: Optional[Number] = None,
    months: Optional[Number] = None,
    days: Optional[Number] = None,
    start_date: Optional[DateLike] = None,
    end_date: Optional[DateLike] = None,
) -> Duration:
    """Build the active spec from flat form fields and resolve it.

    Blank period fields count as zero. When dates are selected but either
    date is missing, the duration is zero.
    """
    kind = get_duration_type(duration_type)

    if kind is DurationType.PERIOD:
        return resolve_duration(Period(_component(years), _component(months), _component(days)))

    start = to_optional_date(start_date)
    end = to_optional_date(end_date)
    if start is None or end is None:
        logger.warning("Dates duration requested without both dates; using zero duration")
        return Duration.zero()
    return resolve_duration(DateRange(start, end))
