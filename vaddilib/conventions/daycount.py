"""30/360 banking convention used to turn durations into years."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Tuple

from vaddilib.config import FLOOR_EPSILON

if TYPE_CHECKING:
    from vaddilib.duration.types import Duration

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12
DAYS_PER_MONTH = 30
DAYS_PER_YEAR = MONTHS_PER_YEAR * DAYS_PER_MONTH


def to_fractional_years(duration: Duration) -> float:
    """Return the duration as a year fraction on a 360-day year.

    Follows the convention:
        yearfrac = years + months / 12 + days / 360
    """
    return (
        duration.years
        + duration.months / MONTHS_PER_YEAR
        + duration.days / DAYS_PER_YEAR
    )


def _floor(value: float) -> int:
    return math.floor(value + FLOOR_EPSILON)


def split_years(years: float) -> Tuple[int, int]:
    """Split a year fraction into whole (months, days) on 30-day months.

    The whole-year part and the fractional part are scaled separately, so
    1.5 years gives (18, 540).
    """
    whole = math.floor(years)
    frac = years - whole
    total_months = _floor(MONTHS_PER_YEAR * whole + frac * MONTHS_PER_YEAR)
    total_days = _floor(DAYS_PER_YEAR * whole + frac * DAYS_PER_YEAR)
    logger.debug("Split %s years into %s months / %s days", years, total_months, total_days)
    return total_months, total_days
