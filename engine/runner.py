"""
Plan runner: grid construction and allocation in one call.

The engine is a pure function of its inputs: the same schedules, bills,
overrides and config always give the same result, and the reference date is
the only notion of "today" it has.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Optional, Sequence, Tuple

from bills.counter import count_occurrences
from core.config import PlannerConfig
from core.schema import Bill, IncomeOverride, Period, PeriodBreakdown, RecurrenceSchedule
from core.utils import DayLike
from periods.grid import build_periods, previous_periods

from .allocation import allocate

logger = logging.getLogger(__name__)


def generate_periods(
    schedules: Sequence[RecurrenceSchedule],
    count: int,
    reference_date: DayLike,
    overrides: Iterable[IncomeOverride] = (),
) -> List[Period]:
    return build_periods(schedules, count, reference_date, overrides)


def count_bill_occurrences(bill: Bill, start: DayLike, end: DayLike) -> int:
    return count_occurrences(bill, start, end)


@dataclass(frozen=True)
class PlanResult:
    """
    Past and upcoming breakdowns on one contiguous grid.

    ``breakdowns[current_index]`` is the period containing the reference date;
    everything before it is history, everything from it on is upcoming.
    """

    config: PlannerConfig
    periods: Tuple[Period, ...] = field(default_factory=tuple)
    breakdowns: Tuple[PeriodBreakdown, ...] = field(default_factory=tuple)
    current_index: int = 0

    @property
    def past(self) -> Tuple[PeriodBreakdown, ...]:
        return self.breakdowns[: self.current_index]

    @property
    def upcoming(self) -> Tuple[PeriodBreakdown, ...]:
        return self.breakdowns[self.current_index :]

    @property
    def current(self) -> Optional[PeriodBreakdown]:
        upcoming = self.upcoming
        return upcoming[0] if upcoming else None

    def breakdown_for(self, day: date) -> Optional[PeriodBreakdown]:
        for b in self.breakdowns:
            if b.period.contains(day):
                return b
        return None


def run_plan(
    schedules: Sequence[RecurrenceSchedule],
    bills: Sequence[Bill],
    config: PlannerConfig,
    overrides: Iterable[IncomeOverride] = (),
) -> PlanResult:
    """
    Build ``config.past_period_count`` previous periods plus
    ``config.period_count`` upcoming ones and allocate ``bills`` across all of
    them in a single carry-over pass (history feeds the current balance).
    """
    overrides = tuple(overrides)
    upcoming = build_periods(schedules, config.period_count, config.reference_date, overrides)
    history = previous_periods(schedules, config.past_period_count, config.reference_date, overrides)
    periods = history + upcoming

    logger.debug(
        "Plan for %s: %d past + %d upcoming periods, %d bills",
        config.reference_date,
        len(history),
        len(upcoming),
        len(bills),
    )

    breakdowns = allocate(
        bills,
        periods,
        config.carry_over_enabled,
        opening_balance=config.opening_balance,
    )
    return PlanResult(
        config=config,
        periods=tuple(periods),
        breakdowns=tuple(breakdowns),
        current_index=len(history),
    )
