"""
Leftover statistics across a run of breakdowns.

Answers the planner's questions at a glance:
  "How tight does it get?"      -> lowest leftover and when
  "How often am I short?"       -> number of deficit periods
  "When do I first go under?"   -> first deficit payday
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

import numpy as np

from core.schema import PeriodBreakdown


@dataclass(frozen=True)
class LeftoverSummary:
    period_count: int
    min_leftover: Decimal
    max_leftover: Decimal
    mean_leftover: float
    std_leftover: float
    deficit_periods: int
    lowest_payday: Optional[date]
    first_deficit_payday: Optional[date]

    @property
    def has_deficit(self) -> bool:
        return self.deficit_periods > 0


def summarize_leftovers(breakdowns: Sequence[PeriodBreakdown]) -> LeftoverSummary:
    """
    Min/max stay exact; mean and standard deviation are floats since they
    are descriptive only.
    """
    if not breakdowns:
        return LeftoverSummary(
            period_count=0,
            min_leftover=Decimal(0),
            max_leftover=Decimal(0),
            mean_leftover=0.0,
            std_leftover=0.0,
            deficit_periods=0,
            lowest_payday=None,
            first_deficit_payday=None,
        )

    leftovers = [b.leftover for b in breakdowns]
    values = np.array([float(v) for v in leftovers], dtype=float)
    lowest = min(range(len(leftovers)), key=lambda i: leftovers[i])
    deficits = [b for b in breakdowns if b.is_deficit]

    return LeftoverSummary(
        period_count=len(breakdowns),
        min_leftover=leftovers[lowest],
        max_leftover=max(leftovers),
        mean_leftover=float(np.mean(values)),
        std_leftover=float(np.std(values)),
        deficit_periods=len(deficits),
        lowest_payday=breakdowns[lowest].period.payday,
        first_deficit_payday=deficits[0].period.payday if deficits else None,
    )
