"""
Tabular views over period breakdowns.

Values are kept as ``Decimal`` (object columns) so anything rendered from
these frames shows exactly what the engine computed.
"""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from core.schema import PeriodBreakdown

PERIOD_COLUMNS = (
    "period_start",
    "period_end",
    "payday",
    "days",
    "income_total",
    "carry_in",
    "bills_total",
    "leftover",
    "carry_out",
    "bill_count",
)

LINE_COLUMNS = (
    "payday",
    "bill",
    "category",
    "occurrences",
    "amount_each",
    "total",
    "due_dates",
)


def breakdowns_to_frame(breakdowns: Sequence[PeriodBreakdown]) -> pd.DataFrame:
    """One row per period, in engine order."""
    rows = [
        {
            "period_start": b.period.start,
            "period_end": b.period.end,
            "payday": b.period.payday,
            "days": b.period.days,
            "income_total": b.income_total,
            "carry_in": b.carry_in,
            "bills_total": b.bills_total,
            "leftover": b.leftover,
            "carry_out": b.carry_out,
            "bill_count": len(b.lines),
        }
        for b in breakdowns
    ]
    return pd.DataFrame(rows, columns=list(PERIOD_COLUMNS))


def bill_lines_frame(breakdowns: Sequence[PeriodBreakdown]) -> pd.DataFrame:
    """One row per allocated bill line, grouped by period."""
    rows = []
    for b in breakdowns:
        for line in b.lines:
            rows.append({
                "payday": b.period.payday,
                "bill": line.bill.name,
                "category": line.bill.category,
                "occurrences": line.occurrence_count,
                "amount_each": line.amount_per_occurrence,
                "total": line.total,
                "due_dates": list(line.due_dates),
            })
    return pd.DataFrame(rows, columns=list(LINE_COLUMNS))
