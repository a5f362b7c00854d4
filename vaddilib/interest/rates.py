"""Rate quotation and compounding frequency helpers."""

from __future__ import annotations

from typing import Optional, Union

from vaddilib.conventions.types import (
    CompoundFrequency,
    RateType,
    get_compound_frequency,
    get_rate_type,
)

from .types import check_frequency_months


def annual_rate_fraction(raw_rate: float, rate_type: Union[str, RateType]) -> float:
    """Convert a quoted rate into an annual fraction.

    A rupee rate is currency units per 100 per month, so it is annualized
    (x12) before dividing by 100. A percent rate is already per annum.

    Examples:
        >>> annual_rate_fraction(2, "rupee")
        0.24
        >>> annual_rate_fraction(12, "percent")
        0.12
    """
    kind = get_rate_type(rate_type)
    return (float(raw_rate) * kind.annualization_factor()) / 100


def frequency_months(
    frequency: Union[str, CompoundFrequency],
    custom_months: Optional[float] = None,
) -> int:
    """Months per compounding period for a frequency choice.

    ``custom_months`` is only read for CUSTOM and must be a positive whole number.
    """
    kind = get_compound_frequency(frequency)
    if kind is CompoundFrequency.CUSTOM:
        return check_frequency_months(custom_months)
    return kind.months()
