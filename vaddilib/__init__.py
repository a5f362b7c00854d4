"""Loan interest calculator core.

This package resolves a loan duration (from a date pair or an explicit
period) and computes simple or compound interest over it on the 30/360
banking convention.

Key modules:
- duration: Duration specs and their resolution
- conventions: Option enums and the 30/360 day count
- interest: Interest engine, rate quotation and accrual schedules
- calculator: End-to-end calculation for a submitted form
"""

from .calculator import CalculationResult, CalculatorForm, calculate
from .conventions import (
    CompoundFrequency,
    DurationType,
    InterestType,
    RateType,
    to_fractional_years,
)
from .duration import (
    DateRange,
    Duration,
    DurationSpec,
    Period,
    duration_between_dates,
    duration_from_fields,
    resolve_duration,
)
from .exceptions import (
    InvalidCompoundFrequency,
    InvalidDurationSpec,
    InvalidInterestType,
    InvalidRateType,
    VaddiError,
)
from .interest import (
    AccrualStep,
    CompoundInterest,
    InterestRequest,
    SimpleInterest,
    accrual_schedule,
    annual_rate_fraction,
    compute_interest,
    frequency_months,
    schedule_frame,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "AccrualStep",
    "CalculationResult",
    "CalculatorForm",
    "CompoundFrequency",
    "CompoundInterest",
    "DateRange",
    "Duration",
    "DurationSpec",
    "DurationType",
    "InterestRequest",
    "InterestType",
    "InvalidCompoundFrequency",
    "InvalidDurationSpec",
    "InvalidInterestType",
    "InvalidRateType",
    "Period",
    "RateType",
    "SimpleInterest",
    "VaddiError",
    "accrual_schedule",
    "annual_rate_fraction",
    "calculate",
    "compute_interest",
    "duration_between_dates",
    "duration_from_fields",
    "frequency_months",
    "resolve_duration",
    "schedule_frame",
    "to_fractional_years",
]
