"""
Pay period grid construction.

Two modes:
  1. Primary grid:  one recurring schedule (the only one, or the one flagged
                    ``is_main``) defines every boundary. Other schedules,
                    one-time payments included, ride along and add income to
                    any boundary they also pay on.
  2. Merged grid:   several recurring schedules; every payday of every
                    schedule becomes a boundary.

Either way the grid opens with the period containing the reference date,
boundaries are strictly increasing, and each payday's income set is decided by
re-checking every schedule with ``occurs_on`` (a boundary produced by one
schedule may be a payday for another).
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from core.schema import IncomeOverride, Period, PeriodIncome, RecurrenceSchedule
from core.utils import DayLike, to_day
from recurrence.base import RecurrenceRule
from recurrence.generator import occurs_on, rule_for

logger = logging.getLogger(__name__)

# extra look-ahead per schedule so the merged union is exact for `count` periods
_MERGE_LOOKAHEAD = 2
_TAIL_LOOKAHEAD = 4


def primary_schedule(schedules: Sequence[RecurrenceSchedule]) -> Optional[RecurrenceSchedule]:
    """The schedule that alone defines the grid, or ``None`` for a merged grid."""
    recurring = [s for s in schedules if s.active and s.frequency.is_recurring]
    for sch in recurring:
        if sch.is_main:
            return sch
    if len(recurring) == 1:
        return recurring[0]
    return None


def attach_incomes(
    payday: date,
    schedules: Sequence[RecurrenceSchedule],
    overrides: Iterable[IncomeOverride] = (),
) -> Tuple[PeriodIncome, ...]:
    """Income paid on ``payday`` by every schedule that pays that day."""
    replaced: Dict[Tuple[str, date], IncomeOverride] = {
        (o.source_id, o.payday): o for o in overrides
    }
    incomes: List[PeriodIncome] = []
    for sch in schedules:
        if not occurs_on(sch, payday):
            continue
        override = replaced.get((sch.source_id, payday))
        if override is not None:
            incomes.append(PeriodIncome(sch.source_id, override.amount, overridden=True))
        else:
            incomes.append(PeriodIncome(sch.source_id, sch.amount))
    return tuple(incomes)


def periods_from_boundaries(
    boundaries: Sequence[date],
    schedules: Sequence[RecurrenceSchedule],
    overrides: Iterable[IncomeOverride] = (),
) -> List[Period]:
    overrides = tuple(overrides)
    return [
        Period(start=start, end=end, incomes=attach_incomes(end, schedules, overrides))
        for start, end in zip(boundaries, boundaries[1:])
    ]


def _primary_boundaries(primary: RecurrenceSchedule, count: int, reference: date) -> List[date]:
    rule = rule_for(primary)
    prev = rule.previous_occurrence(reference)
    if prev is None:
        return []
    # the reference itself may be a payday; it is already the opening boundary then
    nexts = [d for d in rule.next_occurrences(reference, count + 1) if d > prev]
    return [prev] + nexts[:count]


def _extend_tail(bounds: List[date], rules: Sequence[RecurrenceRule], target: int) -> List[date]:
    while len(bounds) < target:
        tail = bounds[-1]
        more = set()
        for rule in rules:
            more.update(d for d in rule.next_occurrences(tail, target + _TAIL_LOOKAHEAD) if d > tail)
        if not more:
            break
        bounds.extend(sorted(more))
    return bounds[:target]


def _merged_boundaries(
    schedules: Sequence[RecurrenceSchedule], count: int, reference: date
) -> List[date]:
    rules = [rule_for(s) for s in schedules]
    previous = [p for p in (r.previous_occurrence(reference) for r in rules) if p is not None]

    merged = set(previous)
    for rule in rules:
        merged.update(rule.next_occurrences(reference, count + _MERGE_LOOKAHEAD))
    bounds = sorted(merged)
    if not bounds:
        return []

    # open at the latest payday on or before the reference so period 0 contains it
    if previous:
        opening = max(previous)
        bounds = [b for b in bounds if b >= opening]

    return _extend_tail(bounds, rules, count + 1)


def build_periods(
    schedules: Sequence[RecurrenceSchedule],
    count: int,
    reference_date: DayLike,
    overrides: Iterable[IncomeOverride] = (),
) -> List[Period]:
    """
    Upcoming pay periods, the first one containing ``reference_date``.

    Returns an empty list when ``count <= 0`` or no active recurring schedule
    exists; callers present that as an empty state.
    """
    if count <= 0:
        return []
    reference = to_day(reference_date)
    active = [s for s in schedules if s.active]
    if not any(s.frequency.is_recurring for s in active):
        logger.debug("No active recurring schedule; returning an empty grid.")
        return []

    primary = primary_schedule(active)
    if primary is not None:
        logger.debug("Primary grid anchored to %r (%s)", primary.source_id, primary.frequency.value)
        bounds = _primary_boundaries(primary, count, reference)
    else:
        logger.debug("Merged grid across %d schedules", len(active))
        bounds = _merged_boundaries(active, count, reference)

    return periods_from_boundaries(bounds, active, overrides)


def previous_periods(
    schedules: Sequence[RecurrenceSchedule],
    count: int,
    reference_date: DayLike,
    overrides: Iterable[IncomeOverride] = (),
) -> List[Period]:
    """
    Up to ``count`` periods immediately before the one containing
    ``reference_date``, ascending. The last one ends where
    ``build_periods(...)[0]`` starts.
    """
    if count <= 0:
        return []
    current = build_periods(schedules, 1, reference_date)
    if not current:
        return []

    active = [s for s in schedules if s.active]
    primary = primary_schedule(active)
    rules = [rule_for(s) for s in ([primary] if primary is not None else active)]

    bounds = [current[0].start]
    while len(bounds) < count + 1:
        before = bounds[0] - timedelta(days=1)
        candidates = [p for p in (r.previous_occurrence(before) for r in rules) if p is not None]
        if not candidates:
            break
        bounds.insert(0, max(candidates))

    return periods_from_boundaries(bounds, active, overrides)
