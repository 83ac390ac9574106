"""
One-time cadence: a single payday or due date on the anchor.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterator, Optional

from .base import RecurrenceRule


@dataclass(frozen=True)
class OnceRule(RecurrenceRule):
    """Exactly one occurrence: the anchor day."""

    anchor: date

    def iter_from(self, after_or_at: date) -> Iterator[date]:
        if self.anchor >= after_or_at:
            yield self.anchor

    def previous_occurrence(self, at_or_before: date) -> Optional[date]:
        return self.anchor if self.anchor <= at_or_before else None

    def occurs_on(self, day: date) -> bool:
        return day == self.anchor
