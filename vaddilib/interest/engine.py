"""Simple and compound interest engine.

Compounding runs on the 30/360 convention: the duration is split into whole
30-day months, interest is capitalised after every complete compounding
period, and any days left over accrue simple interest on the compounded
balance.
"""

from __future__ import annotations

import logging
from typing import List

from vaddilib.conventions.daycount import (
    DAYS_PER_MONTH,
    DAYS_PER_YEAR,
    MONTHS_PER_YEAR,
    split_years,
)

from .types import (
    AccrualStep,
    CompoundInterest,
    InterestRequest,
    SimpleInterest,
    check_frequency_months,
)

logger = logging.getLogger(__name__)


def simple_interest(amount: float, rate: float, years: float) -> float:
    """Interest on ``amount`` at annual ``rate`` for ``years``."""
    return amount * rate * years


def _compound_steps(
    amount: float, rate: float, years: float, frequency: int
) -> List[AccrualStep]:
    frequency = check_frequency_months(frequency)
    total_months, total_days = split_years(years)
    complete_periods = total_months // frequency
    period_years = frequency / MONTHS_PER_YEAR

    steps: List[AccrualStep] = []
    balance = amount
    for idx in range(1, complete_periods + 1):
        interest = simple_interest(balance, rate, period_years)
        steps.append(
            AccrualStep(idx, "period", period_years, balance, interest, balance + interest)
        )
        balance += interest

    remaining_days = total_days - complete_periods * frequency * DAYS_PER_MONTH
    if remaining_days > 0:
        remainder_years = remaining_days / DAYS_PER_YEAR
        interest = simple_interest(balance, rate, remainder_years)
        steps.append(
            AccrualStep(
                len(steps) + 1, "remainder", remainder_years, balance, interest, balance + interest
            )
        )

    logger.debug(
        "Compounded %s periods of %s months, %s remaining days",
        complete_periods,
        frequency,
        max(remaining_days, 0),
    )
    return steps


def accrual_schedule(request: InterestRequest) -> List[AccrualStep]:
    """Step-by-step accrual for a request.

    Simple interest is a single step over the whole duration. Compound
    interest has one step per complete compounding period and, when days are
    left over, a final remainder step.
    """
    mode = request.mode
    if isinstance(mode, CompoundInterest):
        return _compound_steps(
            request.amount, request.rate, request.duration_years, mode.frequency_months
        )
    if isinstance(mode, SimpleInterest):
        interest = simple_interest(request.amount, request.rate, request.duration_years)
        return [
            AccrualStep(
                1,
                "simple",
                request.duration_years,
                request.amount,
                interest,
                request.amount + interest,
            )
        ]
    raise TypeError(f"Unsupported interest mode: {mode!r}")


def compute_interest(request: InterestRequest) -> float:
    """Interest accrued over the request's duration (not the total payable)."""
    if isinstance(request.mode, SimpleInterest):
        return simple_interest(request.amount, request.rate, request.duration_years)
    steps = accrual_schedule(request)
    if not steps:
        return 0.0
    return steps[-1].closing - request.amount
