"""End-to-end calculation for one submitted calculator form.

The form layer collects the inputs; this module turns them into a resolved
duration and an interest amount:

    rate -> annual fraction -> duration -> fractional years -> interest
"""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional, Union

from vaddilib.config import (
    DEFAULT_COMPOUND_FREQUENCY,
    DEFAULT_DURATION_TYPE,
    DEFAULT_INTEREST_TYPE,
    DEFAULT_RATE_TYPE,
)
from vaddilib.conventions.daycount import to_fractional_years
from vaddilib.conventions.types import (
    CompoundFrequency,
    DurationType,
    InterestType,
    RateType,
    get_compound_frequency,
    get_duration_type,
    get_interest_type,
    get_rate_type,
)
from vaddilib.duration.resolver import duration_from_fields
from vaddilib.duration.types import Duration
from vaddilib.interest.engine import compute_interest
from vaddilib.interest.rates import annual_rate_fraction, frequency_months
from vaddilib.interest.types import (
    CompoundInterest,
    InterestMode,
    InterestRequest,
    SimpleInterest,
)
from vaddilib.utils.date import to_optional_date

logger = logging.getLogger(__name__)

Number = Union[int, float]


def _to_number(value: Any, field_name: str) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"{field_name} must be a number, got {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        return float(value)
    if isinstance(value, str):
        if not value.strip():
            return None
        try:
            number = float(value)
        except ValueError as exc:
            raise ValueError(f"{field_name} must be a number, got {value!r}") from exc
        return int(number) if number.is_integer() else number
    raise TypeError(f"Unsupported type for {field_name}: {type(value)}")


def _required_number(value: Any, field_name: str) -> float:
    number = _to_number(value, field_name)
    if number is None:
        raise ValueError(f"{field_name} is required")
    return number


@dataclass(frozen=True)
class CalculatorForm:
    """Validated calculator inputs.

    Option fields accept enum members or their names; dates accept anything
    ``to_date`` does.

    Attributes:
        amount: Principal in currency units
        interest_rate: Rate as quoted, in units of ``interest_rate_type``
        interest_type: Simple or compound interest
        interest_rate_type: Rupee (per 100 per month) or percent per annum
        loan_duration_type: Dates or explicit period
        years, months, days: Period fields (used for PERIOD)
        start_date, end_date: Date fields (used for DATES)
        compound_frequency: Annually, semi-annually or custom
        compound_frequency_months: Month count for a custom frequency
    """

    amount: float
    interest_rate: float
    interest_type: InterestType = InterestType(DEFAULT_INTEREST_TYPE)
    interest_rate_type: RateType = RateType(DEFAULT_RATE_TYPE)
    loan_duration_type: DurationType = DurationType(DEFAULT_DURATION_TYPE)
    years: Optional[Number] = None
    months: Optional[Number] = None
    days: Optional[Number] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    compound_frequency: CompoundFrequency = get_compound_frequency(DEFAULT_COMPOUND_FREQUENCY)
    compound_frequency_months: Optional[Number] = None

    def __post_init__(self):
        object.__setattr__(self, "interest_type", get_interest_type(self.interest_type))
        object.__setattr__(self, "interest_rate_type", get_rate_type(self.interest_rate_type))
        object.__setattr__(
            self, "loan_duration_type", get_duration_type(self.loan_duration_type)
        )
        object.__setattr__(
            self, "compound_frequency", get_compound_frequency(self.compound_frequency)
        )
        object.__setattr__(self, "start_date", to_optional_date(self.start_date))
        object.__setattr__(self, "end_date", to_optional_date(self.end_date))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CalculatorForm":
        """Build a form from a raw payload with camelCase keys.

        Numeric strings are coerced, blank strings count as absent, dates may
        be ISO strings, and option fields take their names (e.g. "compound").
        """

        def pick(key: str, default: Any = None) -> Any:
            value = data.get(key, default)
            if isinstance(value, str) and not value.strip():
                return default
            return value

        return cls(
            amount=_required_number(data.get("amount"), "amount"),
            interest_rate=_required_number(data.get("interestRate"), "interestRate"),
            interest_type=pick("interestType", DEFAULT_INTEREST_TYPE),
            interest_rate_type=pick("interestRateType", DEFAULT_RATE_TYPE),
            loan_duration_type=pick("loanDurationType", DEFAULT_DURATION_TYPE),
            years=_to_number(data.get("years"), "years"),
            months=_to_number(data.get("months"), "months"),
            days=_to_number(data.get("days"), "days"),
            start_date=data.get("startDate"),
            end_date=data.get("endDate"),
            compound_frequency=pick("compoundFrequency", DEFAULT_COMPOUND_FREQUENCY),
            compound_frequency_months=_to_number(
                data.get("compoundFrequencyMonths"), "compoundFrequencyMonths"
            ),
        )

    def interest_mode(self) -> InterestMode:
        if self.interest_type is InterestType.SIMPLE:
            return SimpleInterest()
        return CompoundInterest(
            frequency_months(self.compound_frequency, self.compound_frequency_months)
        )


@dataclass(frozen=True)
class CalculationResult:
    """Outputs shown to the user.

    Attributes:
        interest: Interest accrued over the duration
        duration: Resolved (years, months, days)
        total_years: Duration as a year fraction on a 360-day year
        rate: Annual rate fraction used
        total_payable: amount + interest
    """

    interest: float
    duration: Duration
    total_years: float
    rate: float
    total_payable: float


def calculate(form: CalculatorForm) -> CalculationResult:
    """Run one calculation for a submitted form."""
    rate = annual_rate_fraction(form.interest_rate, form.interest_rate_type)
    duration = duration_from_fields(
        form.loan_duration_type,
        years=form.years,
        months=form.months,
        days=form.days,
        start_date=form.start_date,
        end_date=form.end_date,
    )
    if duration.is_zero:
        logger.debug("Zero loan duration; no interest accrues")
    total_years = to_fractional_years(duration)
    request = InterestRequest(
        amount=form.amount,
        rate=rate,
        duration_years=total_years,
        mode=form.interest_mode(),
    )
    interest = compute_interest(request)
    logger.debug(
        "%s interest on %s at %s for %s (%s years): %s",
        form.interest_type.value,
        form.amount,
        rate,
        duration,
        total_years,
        interest,
    )
    return CalculationResult(
        interest=interest,
        duration=duration,
        total_years=total_years,
        rate=rate,
        total_payable=form.amount + interest,
    )
