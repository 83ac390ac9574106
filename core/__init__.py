"""
Core package: planner records, configuration and calendar utilities.
No business logic lives here.
"""

from .schema import (
    AllocatedBillLine,
    Bill,
    Frequency,
    IncomeOverride,
    Period,
    PeriodBreakdown,
    PeriodIncome,
    RecurrenceSchedule,
)
from .config import PlannerConfig
from .utils import (
    add_days,
    add_months_preserving_day,
    clamp_day,
    end_of_day,
    start_of_day,
    to_day,
    to_decimal,
)

__all__ = [
    "AllocatedBillLine",
    "Bill",
    "Frequency",
    "IncomeOverride",
    "Period",
    "PeriodBreakdown",
    "PeriodIncome",
    "RecurrenceSchedule",
    "PlannerConfig",
    "add_days",
    "add_months_preserving_day",
    "clamp_day",
    "end_of_day",
    "start_of_day",
    "to_day",
    "to_decimal",
]
