"""
Period grid: merge income schedules into contiguous pay periods.
"""

from .grid import (
    attach_incomes,
    build_periods,
    periods_from_boundaries,
    previous_periods,
    primary_schedule,
)

__all__ = [
    "attach_incomes",
    "build_periods",
    "periods_from_boundaries",
    "previous_periods",
    "primary_schedule",
]
