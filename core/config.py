"""
Planner configuration.
Every knob the engine honours is passed in explicitly; nothing is read from
process-wide settings.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from .utils import to_day, to_decimal


@dataclass(frozen=True)
class PlannerConfig:
    reference_date: date
    period_count: int = 6

    # periods before the one containing reference_date
    past_period_count: int = 0

    # carry-over policy
    carry_over_enabled: bool = True
    opening_balance: Decimal = Decimal(0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "reference_date", to_day(self.reference_date))
        object.__setattr__(self, "opening_balance", to_decimal(self.opening_balance))
        if self.period_count < 0:
            raise ValueError(f"period_count must be >= 0, got {self.period_count}")
        if self.past_period_count < 0:
            raise ValueError(f"past_period_count must be >= 0, got {self.past_period_count}")
