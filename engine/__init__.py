"""
Planner engine: carry-over allocation of bills across generated pay periods.
"""

from .allocation import allocate, allocate_period
from .runner import PlanResult, count_bill_occurrences, generate_periods, run_plan

__all__ = [
    "allocate",
    "allocate_period",
    "count_bill_occurrences",
    "generate_periods",
    "run_plan",
    "PlanResult",
]
