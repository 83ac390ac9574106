"""
Bill allocation with carry-over.

Rollover math (carry_over_enabled=True):
  R_0 = opening_balance
  leftover_n = income_n + R_{n-1} - bills_n
  R_n = leftover_n          # surplus (+) or debt (-), both carried

With carry-over disabled every period stands alone: carry_in is 0 and the
leftover is income_n - bills_n.

Money stays ``Decimal`` end to end; no rounding happens here.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, List, Sequence

from bills.counter import bill_due_dates
from core.schema import AllocatedBillLine, Bill, Period, PeriodBreakdown
from core.utils import to_decimal

logger = logging.getLogger(__name__)


def allocate_period(bills: Sequence[Bill], period: Period) -> List[AllocatedBillLine]:
    """Lines for every active bill due at least once inside [start, end)."""
    lines: List[AllocatedBillLine] = []
    for bill in bills:
        if not bill.active:
            continue
        due = bill_due_dates(bill, period.start, period.end)
        if due:
            lines.append(
                AllocatedBillLine(
                    bill=bill,
                    occurrence_count=len(due),
                    amount_per_occurrence=bill.amount,
                    due_dates=tuple(due),
                )
            )
    return lines


def allocate(
    bills: Iterable[Bill],
    periods: Iterable[Period],
    carry_over_enabled: bool,
    opening_balance: Decimal = Decimal(0),
) -> List[PeriodBreakdown]:
    """
    One breakdown per period, ascending by start, threading the running
    balance forward when ``carry_over_enabled``.

    A period whose end is not after its start is a grid construction bug; it
    is logged and skipped rather than given fabricated totals.
    """
    bills = list(bills)
    running = to_decimal(opening_balance) if carry_over_enabled else Decimal(0)
    results: List[PeriodBreakdown] = []

    for period in sorted(periods, key=lambda p: p.start):
        if period.end <= period.start:
            logger.warning("Skipping malformed period %s -> %s", period.start, period.end)
            continue

        lines = allocate_period(bills, period)
        bills_total = sum((line.total for line in lines), Decimal(0))
        carry_in = running if carry_over_enabled else Decimal(0)
        income_total = period.income_total
        leftover = income_total + carry_in - bills_total

        results.append(
            PeriodBreakdown(
                period=period,
                lines=tuple(lines),
                carry_in=carry_in,
                income_total=income_total,
                bills_total=bills_total,
                leftover=leftover,
            )
        )
        running = leftover if carry_over_enabled else Decimal(0)

    return results
