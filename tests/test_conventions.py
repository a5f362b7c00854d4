"""
Test suite for conventions

Tests the 30/360 year fraction, the months/days split used by compounding,
and the option registries.
"""

import pytest

from vaddilib.conventions import (
    CompoundFrequency, DurationType, InterestType, RateType,
    DAYS_PER_MONTH, DAYS_PER_YEAR, MONTHS_PER_YEAR,
    get_compound_frequency, get_duration_type, get_interest_type, get_rate_type,
    split_years, to_fractional_years,
)
from vaddilib.duration import Duration
from vaddilib.exceptions import (
    InvalidCompoundFrequency, InvalidDurationSpec, InvalidInterestType, InvalidRateType,
    VaddiError,
)


class TestFractionalYears:
    """Test conversion of a duration into years"""

    def test_constants(self):
        assert MONTHS_PER_YEAR == 12
        assert DAYS_PER_MONTH == 30
        assert DAYS_PER_YEAR == 360

    def test_year_and_half(self):
        assert to_fractional_years(Duration(1, 6, 0)) == 1.5

    def test_days_only(self):
        assert to_fractional_years(Duration(0, 0, 180)) == 0.5

    def test_zero(self):
        assert to_fractional_years(Duration.zero()) == 0

    def test_all_components(self):
        assert to_fractional_years(Duration(2, 3, 15)) == pytest.approx(2 + 0.25 + 15 / 360)


class TestSplitYears:
    """Test splitting a year fraction into whole months and days"""

    def test_whole_years(self):
        assert split_years(2) == (24, 720)

    def test_fractional_years(self):
        assert split_years(1.5) == (18, 540)

    def test_odd_months_survive_float_error(self):
        """7/12 years is exactly 7 months and 210 days"""
        assert split_years(7 / 12) == (7, 210)
        assert split_years(to_fractional_years(Duration(0, 0, 14))) == (0, 14)

    def test_partial_month_floors(self):
        assert split_years(to_fractional_years(Duration(0, 1, 10))) == (1, 40)


class TestRegistries:
    """Test option lookup by name"""

    @pytest.mark.parametrize("name,expected", [
        ("annually", CompoundFrequency.ANNUALLY),
        ("SemiAnnually", CompoundFrequency.SEMIANNUALLY),
        (" custom ", CompoundFrequency.CUSTOM),
        (CompoundFrequency.ANNUALLY, CompoundFrequency.ANNUALLY),
    ])
    def test_compound_frequency(self, name, expected):
        assert get_compound_frequency(name) is expected

    def test_frequency_months(self):
        assert CompoundFrequency.ANNUALLY.months() == 12
        assert CompoundFrequency.SEMIANNUALLY.months() == 6

    def test_custom_frequency_has_no_months(self):
        with pytest.raises(InvalidCompoundFrequency):
            CompoundFrequency.CUSTOM.months()

    def test_unknown_frequency(self):
        with pytest.raises(InvalidCompoundFrequency, match="Unknown CompoundFrequency"):
            get_compound_frequency("fortnightly")

    def test_rate_types(self):
        assert get_rate_type("rupee") is RateType.RUPEE
        assert get_rate_type("percent") is RateType.PERCENT
        assert RateType.RUPEE.annualization_factor() == 12
        assert RateType.PERCENT.annualization_factor() == 1

    def test_unknown_rate_type(self):
        with pytest.raises(InvalidRateType, match="Unknown RateType"):
            get_rate_type("basis-points")

    def test_duration_types(self):
        assert get_duration_type("dates") is DurationType.DATES
        assert get_duration_type("PERIOD") is DurationType.PERIOD
        with pytest.raises(InvalidDurationSpec):
            get_duration_type(None)

    def test_interest_types(self):
        assert get_interest_type("simple") is InterestType.SIMPLE
        assert get_interest_type("Compound") is InterestType.COMPOUND
        with pytest.raises(InvalidInterestType, match="Unknown InterestType"):
            get_interest_type("continuous")

    def test_lookup_errors_share_base(self):
        """Every option lookup fails with a library error kind"""
        for lookup in (get_interest_type, get_rate_type, get_duration_type,
                       get_compound_frequency):
            with pytest.raises(VaddiError):
                lookup("nonsense")
