"""Tabular view of an accrual schedule."""

from __future__ import annotations

from dataclasses import asdict
from typing import Sequence

import numpy as np
import pandas as pd

from .types import AccrualStep

SCHEDULE_COLUMNS = [
    "index",
    "kind",
    "years",
    "opening",
    "interest",
    "closing",
    "cumulative_interest",
]


def schedule_frame(steps: Sequence[AccrualStep]) -> pd.DataFrame:
    """Return the schedule as a DataFrame indexed by step.

    Adds ``cumulative_interest``, the running interest total after each step.
    """
    if not steps:
        return pd.DataFrame(columns=SCHEDULE_COLUMNS).set_index("index")

    df = pd.DataFrame([asdict(step) for step in steps])
    df["cumulative_interest"] = np.cumsum(df["interest"].to_numpy(dtype=float))
    return df[SCHEDULE_COLUMNS].set_index("index")
