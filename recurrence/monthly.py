"""
Calendar-day cadences: monthly (one day) and semimonthly (two days).

Days are clamped to [1, 28] before use so every month has a valid instance;
this sidesteps Feb 29/30/31 entirely.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterator, Optional, Tuple

from core.utils import (
    add_months_preserving_day,
    clamp_day,
    first_of_month,
    iter_months,
    month_day,
)

from .base import RecurrenceRule


@dataclass(frozen=True)
class MonthDaysRule(RecurrenceRule):
    days: Tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.days:
            raise ValueError("MonthDaysRule needs at least one day of month.")
        object.__setattr__(self, "days", tuple(sorted({clamp_day(d) for d in self.days})))

    @classmethod
    def monthly(cls, anchor: date) -> "MonthDaysRule":
        return cls(days=(anchor.day,))

    @classmethod
    def semimonthly(cls, first_day: int, second_day: int) -> "MonthDaysRule":
        return cls(days=(first_day, second_day))

    def iter_from(self, after_or_at: date) -> Iterator[date]:
        for cursor in iter_months(after_or_at):
            for dd in self.days:
                candidate = month_day(cursor, dd)
                if candidate >= after_or_at:
                    yield candidate

    def previous_occurrence(self, at_or_before: date) -> Optional[date]:
        this_month = [month_day(at_or_before, dd) for dd in self.days]
        candidates = [c for c in this_month if c <= at_or_before]
        if candidates:
            return max(candidates)
        prev_month = add_months_preserving_day(first_of_month(at_or_before), -1)
        return month_day(prev_month, self.days[-1])

    def occurs_on(self, day: date) -> bool:
        return day.day in self.days
