"""
Bill occurrence counting: which bills fall due inside a pay period window.
"""

from .counter import (
    bill_due_dates,
    bill_rule,
    count_occurrences,
    implied_semimonthly_days,
)

__all__ = [
    "bill_due_dates",
    "bill_rule",
    "count_occurrences",
    "implied_semimonthly_days",
]
