"""Data structures for interest calculation.

This module defines the request passed to the interest engine, the simple and
compound interest modes, and the rows of a compounding schedule.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Literal, Union

from vaddilib.exceptions import InvalidCompoundFrequency


def check_frequency_months(value) -> int:
    """Return ``value`` as a positive whole number of months, or raise."""
    if value is None:
        raise InvalidCompoundFrequency("Compounding frequency is required")
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidCompoundFrequency(
            f"Compounding frequency must be a number of months, got {value!r}"
        )
    if not math.isfinite(value):
        raise InvalidCompoundFrequency(f"Compounding frequency must be finite, got {value!r}")
    if int(value) != value:
        raise InvalidCompoundFrequency(
            f"Compounding frequency must be a whole number of months, got {value!r}"
        )
    months = int(value)
    if months <= 0:
        raise InvalidCompoundFrequency(
            f"Compounding frequency must be positive, got {value!r}"
        )
    return months


@dataclass(frozen=True)
class SimpleInterest:
    """Interest on the original amount only."""


@dataclass(frozen=True)
class CompoundInterest:
    """Interest added to the balance every ``frequency_months`` months.

    Attributes:
        frequency_months: Months per compounding period (12 annual, 6 semi-annual)
    """

    frequency_months: int

    def __post_init__(self):
        object.__setattr__(self, "frequency_months", check_frequency_months(self.frequency_months))


InterestMode = Union[SimpleInterest, CompoundInterest]


@dataclass(frozen=True)
class InterestRequest:
    """Everything the engine needs to price one loan.

    Attributes:
        amount: Principal in currency units
        rate: Annual rate as a fraction (0.12 for 12%)
        duration_years: Loan duration in years on a 360-day year
        mode: SimpleInterest() or CompoundInterest(frequency_months)
    """

    amount: float
    rate: float
    duration_years: float
    mode: InterestMode = SimpleInterest()


@dataclass(frozen=True)
class AccrualStep:
    """One accrual step of an interest run.

    Attributes:
        index: Step index (1-based)
        kind: "period" for a full compounding period, "remainder" for the
            trailing part-period, "simple" for a simple interest run
        years: Length of the step in years
        opening: Balance at the start of the step
        interest: Interest accrued during the step
        closing: Balance at the end of the step
    """

    index: int
    kind: Literal["period", "remainder", "simple"]
    years: float
    opening: float
    interest: float
    closing: float
