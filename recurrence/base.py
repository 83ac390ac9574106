"""
Base class for recurrence rules.
A rule knows one cadence (one-time, day stride, fixed days of the month) and
answers forward, backward and membership questions about it.
"""

from __future__ import annotations

from datetime import date, timedelta
from itertools import islice, takewhile
from typing import Iterator, List, Optional

from core.utils import DayLike, to_day


class RecurrenceRule:
    """Interface for generating occurrence dates of one cadence."""

    def iter_from(self, after_or_at: date) -> Iterator[date]:
        """Ascending occurrences on or after ``after_or_at`` (possibly infinite)."""
        raise NotImplementedError

    def previous_occurrence(self, at_or_before: date) -> Optional[date]:
        raise NotImplementedError

    def occurs_on(self, day: date) -> bool:
        raise NotImplementedError

    def next_occurrences(self, after_or_at: DayLike, count: int) -> List[date]:
        if count <= 0:
            return []
        return list(islice(self.iter_from(to_day(after_or_at)), count))

    def occurrences_between(self, start: DayLike, end: DayLike) -> List[date]:
        """Occurrences inside the half-open window [start, end)."""
        start, end = to_day(start), to_day(end)
        if end <= start:
            return []
        return list(takewhile(lambda d: d < end, self.iter_from(start)))

    def previous_occurrences(self, before: DayLike, count: int) -> List[date]:
        """The ``count`` latest occurrences strictly before ``before``, ascending."""
        out: List[date] = []
        cursor = to_day(before) - timedelta(days=1)
        while len(out) < count:
            found = self.previous_occurrence(cursor)
            if found is None:
                break
            out.append(found)
            cursor = found - timedelta(days=1)
        out.reverse()
        return out
