"""
Recurrence rules: turn a schedule's cadence into concrete paydays.
"""

from .base import RecurrenceRule
from .once import OnceRule
from .stride import StrideRule
from .monthly import MonthDaysRule
from .generator import (
    build_rule,
    next_occurrences,
    occurs_on,
    previous_occurrence,
    previous_occurrences,
    rule_for,
)

__all__ = [
    "RecurrenceRule",
    "OnceRule",
    "StrideRule",
    "MonthDaysRule",
    "build_rule",
    "next_occurrences",
    "occurs_on",
    "previous_occurrence",
    "previous_occurrences",
    "rule_for",
]
