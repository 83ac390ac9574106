"""
Bill occurrence counting over half-open windows [start, end).

Two clamps apply before any cadence math:
  lower = max(window_start, anchor_due_date)   never before the bill's anchor
  upper = min(window_end, end_date + 1 day)    never after the bill's end date

A bill due exactly on a period boundary therefore lands in the period that
begins there, not the one that just ended.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Tuple

from core.schema import Bill
from core.utils import DayLike, clamp_day, to_day
from recurrence.base import RecurrenceRule
from recurrence.generator import build_rule

logger = logging.getLogger(__name__)

# Bills without a stored day pair get the second day pushed to month end (30 -> 28 after clamping).
_IMPLIED_SECOND_DAY = 30
_FIRST_HALF_LAST_DAY = 15


def implied_semimonthly_days(bill: Bill) -> Tuple[int, int]:
    """Day pair for a semimonthly bill, explicit when stored, else derived from the anchor."""
    if bill.due_day_pair is not None:
        return bill.due_day_pair
    anchor_day = bill.anchor_due_date.day
    if anchor_day <= _FIRST_HALF_LAST_DAY:
        pair = (anchor_day, _IMPLIED_SECOND_DAY)
    else:
        pair = (1, anchor_day)
    return tuple(sorted(clamp_day(d) for d in pair))


def bill_rule(bill: Bill) -> RecurrenceRule:
    return build_rule(bill.recurrence, bill.anchor_due_date, implied_semimonthly_days(bill))


def effective_window(bill: Bill, window_start: date, window_end: date) -> Tuple[date, date]:
    lower = max(window_start, bill.anchor_due_date)
    upper = window_end
    if bill.ceiling is not None:
        upper = min(upper, bill.ceiling)
    return lower, upper


def bill_due_dates(bill: Bill, window_start: DayLike, window_end: DayLike) -> List[date]:
    """Every due date of ``bill`` inside [window_start, window_end), ascending."""
    start, end = to_day(window_start), to_day(window_end)
    if end <= start:
        logger.warning(
            "Invalid window for bill %r: end %s is not after start %s", bill.name, end, start
        )
        return []
    lower, upper = effective_window(bill, start, end)
    if upper <= lower:
        return []
    return bill_rule(bill).occurrences_between(lower, upper)


def count_occurrences(bill: Bill, window_start: DayLike, window_end: DayLike) -> int:
    """How many times ``bill`` falls due inside [window_start, window_end)."""
    return len(bill_due_dates(bill, window_start, window_end))
