"""
Plan insights: breakdown tables, category spend and leftover metrics.
"""

from .tables import bill_lines_frame, breakdowns_to_frame
from .aggregator import category_totals
from .metrics import LeftoverSummary, summarize_leftovers

__all__ = [
    "bill_lines_frame",
    "breakdowns_to_frame",
    "category_totals",
    "LeftoverSummary",
    "summarize_leftovers",
]
