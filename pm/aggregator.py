"""
Spending by category across a run of breakdowns.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Sequence

import pandas as pd

from core.schema import PeriodBreakdown

UNCATEGORIZED = "Other"


def category_totals(breakdowns: Sequence[PeriodBreakdown]) -> pd.DataFrame:
    """
    Total allocated spend per bill category.

    Returns
    -------
    DataFrame with columns: category, total, occurrences, share
    sorted by total descending (ties by category name). ``share`` is the
    category's fraction of all spend, as a float for charting.
    """
    totals: Dict[str, Decimal] = {}
    occurrences: Dict[str, int] = {}
    for b in breakdowns:
        for line in b.lines:
            cat = line.bill.category.strip() or UNCATEGORIZED
            totals[cat] = totals.get(cat, Decimal(0)) + line.total
            occurrences[cat] = occurrences.get(cat, 0) + line.occurrence_count

    grand = sum(totals.values(), Decimal(0))
    rows = [
        {
            "category": cat,
            "total": total,
            "occurrences": occurrences[cat],
            "share": float(total / grand) if grand else 0.0,
        }
        for cat, total in sorted(totals.items(), key=lambda kv: (-kv[1], kv[0]))
    ]
    return pd.DataFrame(rows, columns=["category", "total", "occurrences", "share"])
