"""Interest engine, rate helpers and accrual schedules."""

from .engine import accrual_schedule, compute_interest, simple_interest
from .rates import annual_rate_fraction, frequency_months
from .schedule import schedule_frame
from .types import (
    AccrualStep,
    CompoundInterest,
    InterestMode,
    InterestRequest,
    SimpleInterest,
    check_frequency_months,
)

__all__ = [
    "AccrualStep",
    "CompoundInterest",
    "InterestMode",
    "InterestRequest",
    "SimpleInterest",
    "accrual_schedule",
    "annual_rate_fraction",
    "check_frequency_months",
    "compute_interest",
    "frequency_months",
    "schedule_frame",
    "simple_interest",
]
