"""
Immutable records consumed and produced by the planner engine.

Inputs (schedules, bills, overrides) arrive already loaded; outputs (periods,
breakdowns) are derived fresh on every call and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Dict, Optional, Tuple

from .utils import add_days, clamp_day, to_day, to_decimal


class Frequency(str, Enum):
    ONCE = "once"
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    SEMIMONTHLY = "semimonthly"

    @property
    def stride_days(self) -> Optional[int]:
        return _STRIDE_DAYS.get(self)

    @property
    def is_recurring(self) -> bool:
        return self is not Frequency.ONCE

    @classmethod
    def parse(cls, value) -> "Frequency":
        """Accept an enum member or one of the spellings used by stored records."""
        if isinstance(value, Frequency):
            return value
        key = str(value).strip().lower()
        if key in _FREQUENCY_ALIASES:
            return _FREQUENCY_ALIASES[key]
        raise ValueError(f"Unknown frequency: {value!r}")


_STRIDE_DAYS: Dict[Frequency, int] = {
    Frequency.WEEKLY: 7,
    Frequency.BIWEEKLY: 14,
}

_FREQUENCY_ALIASES: Dict[str, Frequency] = {
    "once": Frequency.ONCE,
    "one-time": Frequency.ONCE,
    "one time": Frequency.ONCE,
    "onetime": Frequency.ONCE,
    "weekly": Frequency.WEEKLY,
    "biweekly": Frequency.BIWEEKLY,
    "bi-weekly": Frequency.BIWEEKLY,
    "every 2 weeks": Frequency.BIWEEKLY,
    "fortnightly": Frequency.BIWEEKLY,
    "monthly": Frequency.MONTHLY,
    "semimonthly": Frequency.SEMIMONTHLY,
    "semi-monthly": Frequency.SEMIMONTHLY,
    "twice monthly": Frequency.SEMIMONTHLY,
}


def _sorted_day_pair(first: int, second: int) -> Tuple[int, int]:
    a, b = clamp_day(first), clamp_day(second)
    return (a, b) if a <= b else (b, a)


@dataclass(frozen=True)
class RecurrenceSchedule:
    """
    One income source paying on a fixed cadence.

    The semimonthly day pair is order-independent on input; use
    ``semimonthly_days`` to get it clamped to [1, 28] and sorted.
    """

    source_id: str
    frequency: Frequency
    anchor_date: date
    amount: Decimal = Decimal(0)
    semimonthly_first_day: int = 1
    semimonthly_second_day: int = 15
    is_main: bool = False
    active: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "frequency", Frequency.parse(self.frequency))
        object.__setattr__(self, "anchor_date", to_day(self.anchor_date))
        object.__setattr__(self, "amount", to_decimal(self.amount))

    @property
    def semimonthly_days(self) -> Tuple[int, int]:
        return _sorted_day_pair(self.semimonthly_first_day, self.semimonthly_second_day)


@dataclass(frozen=True)
class Bill:
    """
    A recurring (or one-time) obligation.

    No occurrence is ever produced before ``anchor_due_date`` nor after
    ``end_date``. ``semimonthly_days`` is kept as entered and only consulted
    for semimonthly bills; ``due_day_pair`` gives it clamped to [1, 28] and
    sorted. When absent the pair is derived from the anchor's day-of-month.
    """

    name: str
    amount: Decimal
    recurrence: Frequency
    anchor_due_date: date
    category: str = ""
    end_date: Optional[date] = None
    active: bool = True
    semimonthly_days: Optional[Tuple[int, int]] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "recurrence", Frequency.parse(self.recurrence))
        object.__setattr__(self, "anchor_due_date", to_day(self.anchor_due_date))
        object.__setattr__(self, "amount", to_decimal(self.amount))
        if self.end_date is not None:
            object.__setattr__(self, "end_date", to_day(self.end_date))
        if self.semimonthly_days is not None:
            first, second = self.semimonthly_days
            object.__setattr__(self, "semimonthly_days", (int(first), int(second)))

    @property
    def due_day_pair(self) -> Optional[Tuple[int, int]]:
        if self.semimonthly_days is None:
            return None
        return _sorted_day_pair(*self.semimonthly_days)

    @property
    def ceiling(self) -> Optional[date]:
        """Exclusive upper bound implied by ``end_date`` (the day after it)."""
        if self.end_date is None:
            return None
        return add_days(self.end_date, 1)


@dataclass(frozen=True)
class IncomeOverride:
    """Replaces one source's amount on one specific payday."""

    source_id: str
    payday: date
    amount: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "payday", to_day(self.payday))
        object.__setattr__(self, "amount", to_decimal(self.amount))


@dataclass(frozen=True)
class PeriodIncome:
    source_id: str
    amount: Decimal
    overridden: bool = False


@dataclass(frozen=True)
class Period:
    """
    One pay period. Bills are attributed over the half-open window
    [start, end); ``payday`` is the closing boundary.
    """

    start: date
    end: date
    incomes: Tuple[PeriodIncome, ...] = ()

    @property
    def payday(self) -> date:
        return self.end

    @property
    def income_total(self) -> Decimal:
        return sum((inc.amount for inc in self.incomes), Decimal(0))

    @property
    def days(self) -> int:
        return (self.end - self.start).days

    def contains(self, day: date) -> bool:
        return self.start <= to_day(day) < self.end


@dataclass(frozen=True)
class AllocatedBillLine:
    bill: Bill
    occurrence_count: int
    amount_per_occurrence: Decimal
    due_dates: Tuple[date, ...] = ()

    @property
    def total(self) -> Decimal:
        return self.amount_per_occurrence * self.occurrence_count


@dataclass(frozen=True)
class PeriodBreakdown:
    """
    Bills, income and carried balance for one period.

    leftover = income_total + carry_in - bills_total, and may be negative
    (a deficit carried forward as debt).
    """

    period: Period
    lines: Tuple[AllocatedBillLine, ...] = field(default_factory=tuple)
    carry_in: Decimal = Decimal(0)
    income_total: Decimal = Decimal(0)
    bills_total: Decimal = Decimal(0)
    leftover: Decimal = Decimal(0)

    @property
    def carry_out(self) -> Decimal:
        return self.leftover

    @property
    def available(self) -> Decimal:
        return self.income_total + self.carry_in

    @property
    def is_deficit(self) -> bool:
        return self.leftover < 0
