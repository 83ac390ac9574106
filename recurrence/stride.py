"""
Fixed day-stride cadence (weekly = 7 days, biweekly = 14 days).

Forward enumeration starts at the anchor: a reference before the anchor yields
the anchor itself first. Backward lookup and membership follow the anchor's
phase in both directions, so a boundary found by ``previous_occurrence`` is
always recognised by ``occurs_on``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator, Optional

from .base import RecurrenceRule


@dataclass(frozen=True)
class StrideRule(RecurrenceRule):
    anchor: date
    step_days: int

    def __post_init__(self) -> None:
        if self.step_days <= 0:
            raise ValueError(f"step_days must be positive, got {self.step_days}")

    def first_on_or_after(self, after_or_at: date) -> date:
        if after_or_at <= self.anchor:
            return self.anchor
        gap = (after_or_at - self.anchor).days
        strides = -(-gap // self.step_days)  # ceil
        return self.anchor + timedelta(days=strides * self.step_days)

    def iter_from(self, after_or_at: date) -> Iterator[date]:
        d = self.first_on_or_after(after_or_at)
        step = timedelta(days=self.step_days)
        while True:
            yield d
            d = d + step

    def previous_occurrence(self, at_or_before: date) -> Optional[date]:
        # floor division walks back past the anchor when the reference precedes it
        strides = (at_or_before - self.anchor).days // self.step_days
        return self.anchor + timedelta(days=strides * self.step_days)

    def occurs_on(self, day: date) -> bool:
        return (day - self.anchor).days % self.step_days == 0
