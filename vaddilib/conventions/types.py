"""
Basic types and enums used across the calculator.
"""

from enum import Enum
from typing import Dict, Type, TypeVar, Union

from vaddilib.exceptions import (
    InvalidCompoundFrequency,
    InvalidDurationSpec,
    InvalidInterestType,
    InvalidRateType,
)


class InterestType(Enum):
    """How interest accrues over the duration."""

    SIMPLE = "simple"
    COMPOUND = "compound"


class RateType(Enum):
    """How the interest rate is quoted."""

    RUPEE = "rupee"  # currency units per 100 per month
    PERCENT = "percent"  # percent per annum

    def annualization_factor(self) -> int:
        return 12 if self is RateType.RUPEE else 1


class DurationType(Enum):
    """Which duration fields are active."""

    DATES = "dates"
    PERIOD = "period"


class CompoundFrequency(Enum):
    """Compounding frequencies. Values are months per compounding period."""

    ANNUALLY = 12
    SEMIANNUALLY = 6
    CUSTOM = "custom"

    def months(self) -> int:
        if self is CompoundFrequency.CUSTOM:
            raise InvalidCompoundFrequency(
                "CUSTOM frequency has no fixed month count; supply custom months"
            )
        return self.value


E = TypeVar("E", bound=Enum)

# Registry
INTEREST_TYPES: Dict[str, InterestType] = {
    "SIMPLE": InterestType.SIMPLE,
    "COMPOUND": InterestType.COMPOUND,
}

RATE_TYPES: Dict[str, RateType] = {
    "RUPEE": RateType.RUPEE,
    "RUPEES": RateType.RUPEE,
    "RUPEE/100/MONTH": RateType.RUPEE,
    "PERCENT": RateType.PERCENT,
    "%": RateType.PERCENT,
    "PERCENT/ANNUM": RateType.PERCENT,
}

DURATION_TYPES: Dict[str, DurationType] = {
    "DATES": DurationType.DATES,
    "PERIOD": DurationType.PERIOD,
}

COMPOUND_FREQUENCIES: Dict[str, CompoundFrequency] = {
    "ANNUALLY": CompoundFrequency.ANNUALLY,
    "ANNUAL": CompoundFrequency.ANNUALLY,
    "SEMIANNUALLY": CompoundFrequency.SEMIANNUALLY,
    "SEMIANNUAL": CompoundFrequency.SEMIANNUALLY,
    "SEMI-ANNUALLY": CompoundFrequency.SEMIANNUALLY,
    "CUSTOM": CompoundFrequency.CUSTOM,
}


def _lookup(
    value: Union[str, E],
    enum_cls: Type[E],
    registry: Dict[str, E],
    error_cls: Type[ValueError],
) -> E:
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        raise error_cls(f"Unknown {enum_cls.__name__}: {value!r}")
    try:
        return registry[value.strip().upper()]
    except KeyError as exc:
        raise error_cls(
            f"Unknown {enum_cls.__name__}: {value}. "
            f"Available: {list(registry.keys())}"
        ) from exc


def get_interest_type(value: Union[str, InterestType]) -> InterestType:
    """Get an interest type by name."""
    return _lookup(value, InterestType, INTEREST_TYPES, InvalidInterestType)


def get_rate_type(value: Union[str, RateType]) -> RateType:
    """Get a rate quotation type by name."""
    return _lookup(value, RateType, RATE_TYPES, InvalidRateType)


def get_duration_type(value: Union[str, DurationType]) -> DurationType:
    """Get a duration type by name."""
    return _lookup(value, DurationType, DURATION_TYPES, InvalidDurationSpec)


def get_compound_frequency(value: Union[str, CompoundFrequency]) -> CompoundFrequency:
    """Get a compounding frequency by name."""
    return _lookup(value, CompoundFrequency, COMPOUND_FREQUENCIES, InvalidCompoundFrequency)
