"""
Day-granular calendar arithmetic shared by every engine layer.

Everything downstream compares plain ``datetime.date`` values; sub-day time and
time zones are stripped here, once, on the way in.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Iterator, Union

import pandas as pd
from dateutil.relativedelta import relativedelta

DayLike = Union[date, datetime, pd.Timestamp, str]

MIN_MONTH_DAY = 1
MAX_MONTH_DAY = 28


def to_day(value: DayLike) -> date:
    """Normalize a date, datetime, Timestamp or ISO string to a calendar day."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    ts = pd.Timestamp(value)
    if pd.isna(ts):
        raise ValueError(f"Not a calendar day: {value!r}")
    return ts.normalize().date()


def start_of_day(value: DayLike) -> datetime:
    return datetime.combine(to_day(value), time.min)


def end_of_day(value: DayLike) -> datetime:
    """Last instant of the same calendar day."""
    return datetime.combine(to_day(value), time.max)


def add_days(value: DayLike, n: int) -> date:
    return to_day(value) + timedelta(days=n)


def day_after(value: DayLike) -> date:
    return add_days(value, 1)


def add_months_preserving_day(value: DayLike, n: int) -> date:
    """
    Add calendar months, clamping to the last day of the resulting month.
    Jan 31 + 1 month -> Feb 28 (or 29), never Mar 3.
    """
    return to_day(value) + relativedelta(months=n)


def clamp_day(day: int) -> int:
    """Clamp a day-of-month to [1, 28] so every month has an instance."""
    return max(MIN_MONTH_DAY, min(MAX_MONTH_DAY, int(day)))


def first_of_month(value: DayLike) -> date:
    return to_day(value).replace(day=1)


def month_day(value: DayLike, day: int) -> date:
    """The (clamped) ``day`` in the month containing ``value``."""
    return to_day(value).replace(day=clamp_day(day))


def iter_months(value: DayLike) -> Iterator[date]:
    """First-of-month cursor walking forward from the month of ``value``."""
    cursor = first_of_month(value)
    while True:
        yield cursor
        cursor = cursor + relativedelta(months=1)


def to_decimal(value) -> Decimal:
    """Exact money conversion; floats go through ``str`` so 0.1 stays 0.1."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)
