"""
Conventions: option enums and the 30/360 day count.
"""

from .daycount import (
    DAYS_PER_MONTH,
    DAYS_PER_YEAR,
    MONTHS_PER_YEAR,
    split_years,
    to_fractional_years,
)
from .types import (
    CompoundFrequency,
    DurationType,
    InterestType,
    RateType,
    get_compound_frequency,
    get_duration_type,
    get_interest_type,
    get_rate_type,
)

__all__ = [
    "CompoundFrequency",
    "DurationType",
    "InterestType",
    "RateType",
    "get_compound_frequency",
    "get_duration_type",
    "get_interest_type",
    "get_rate_type",
    "DAYS_PER_MONTH",
    "DAYS_PER_YEAR",
    "MONTHS_PER_YEAR",
    "split_years",
    "to_fractional_years",
]
