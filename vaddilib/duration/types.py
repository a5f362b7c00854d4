"""Duration value objects.

A duration is requested either as a pair of calendar dates or as an explicit
years/months/days period, and always resolves to a ``Duration``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Union


@dataclass(frozen=True)
class DateRange:
    """Start and end dates of a loan. Equal dates are a zero-length range."""

    start_date: date
    end_date: date


@dataclass(frozen=True)
class Period:
    """Explicit duration, independent of calendar dates.

    Components are taken literally: months above 11 or days above 30 are not
    carried into the next unit, and no sign check is made.
    """

    years: int = 0
    months: int = 0
    days: int = 0


@dataclass(frozen=True)
class Duration:
    """Resolved (years, months, days) duration."""

    years: int = 0
    months: int = 0
    days: int = 0

    @classmethod
    def zero(cls) -> "Duration":
        return cls(0, 0, 0)

    @property
    def is_zero(self) -> bool:
        return self.years == 0 and self.months == 0 and self.days == 0


DurationSpec = Union[DateRange, Period]
