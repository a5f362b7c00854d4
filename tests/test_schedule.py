"""
Test suite for accrual schedule tabulation
"""

import pytest

from vaddilib.interest import (
    CompoundInterest, InterestRequest, accrual_schedule, compute_interest, schedule_frame,
)


class TestScheduleFrame:
    """Test DataFrame output of an accrual schedule"""

    def test_columns_and_index(self):
        steps = accrual_schedule(InterestRequest(1000, 0.10, 2.5, CompoundInterest(12)))
        df = schedule_frame(steps)

        assert list(df.columns) == ["kind", "years", "opening", "interest", "closing",
                                    "cumulative_interest"]
        assert list(df.index) == [1, 2, 3]
        assert list(df["kind"]) == ["period", "period", "remainder"]

    def test_cumulative_interest_matches_engine(self):
        request = InterestRequest(1000, 0.10, 2.5, CompoundInterest(12))
        df = schedule_frame(accrual_schedule(request))
        assert df["cumulative_interest"].iloc[-1] == pytest.approx(compute_interest(request))
        assert df["cumulative_interest"].iloc[0] == pytest.approx(100)

    def test_simple_schedule_single_row(self):
        df = schedule_frame(accrual_schedule(InterestRequest(1000, 0.12, 1)))
        assert len(df) == 1
        assert df["kind"].iloc[0] == "simple"
        assert df["interest"].iloc[0] == pytest.approx(120)

    def test_empty_schedule(self):
        df = schedule_frame([])
        assert df.empty
        assert "cumulative_interest" in df.columns
