"""
Occurrence generation for income schedules.

Thin functional surface over the rule classes: callers hand in a
``RecurrenceSchedule`` and get plain ``date`` lists back.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple

from core.schema import Frequency, RecurrenceSchedule
from core.utils import DayLike, to_day

from .base import RecurrenceRule
from .monthly import MonthDaysRule
from .once import OnceRule
from .stride import StrideRule


def build_rule(
    frequency: Frequency,
    anchor: date,
    semimonthly_days: Tuple[int, int] = (1, 15),
) -> RecurrenceRule:
    if frequency is Frequency.ONCE:
        return OnceRule(anchor=anchor)
    if frequency.stride_days is not None:
        return StrideRule(anchor=anchor, step_days=frequency.stride_days)
    if frequency is Frequency.MONTHLY:
        return MonthDaysRule.monthly(anchor)
    if frequency is Frequency.SEMIMONTHLY:
        return MonthDaysRule.semimonthly(*semimonthly_days)
    raise ValueError(f"Unsupported frequency: {frequency!r}")


def rule_for(schedule: RecurrenceSchedule) -> RecurrenceRule:
    return build_rule(schedule.frequency, schedule.anchor_date, schedule.semimonthly_days)


def next_occurrences(schedule: RecurrenceSchedule, after_or_at: DayLike, count: int) -> List[date]:
    """Up to ``count`` paydays on or after ``after_or_at``, ascending."""
    return rule_for(schedule).next_occurrences(after_or_at, count)


def previous_occurrence(schedule: RecurrenceSchedule, at_or_before: DayLike) -> Optional[date]:
    """Latest payday on or before ``at_or_before``; ``None`` for a later one-time payment."""
    return rule_for(schedule).previous_occurrence(to_day(at_or_before))


def previous_occurrences(schedule: RecurrenceSchedule, before: DayLike, count: int) -> List[date]:
    return rule_for(schedule).previous_occurrences(before, count)


def occurs_on(schedule: RecurrenceSchedule, day: DayLike) -> bool:
    """Membership test without enumeration."""
    return rule_for(schedule).occurs_on(to_day(day))
