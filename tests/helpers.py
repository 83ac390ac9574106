from datetime import date
from decimal import Decimal

from core.schema import Bill, Frequency, Period, PeriodIncome, RecurrenceSchedule


def d(iso: str) -> date:
    return date.fromisoformat(iso)


def make_schedule(
    source_id: str,
    frequency: Frequency,
    anchor: str,
    amount: str = "1000",
    **kwargs,
) -> RecurrenceSchedule:
    return RecurrenceSchedule(
        source_id=source_id,
        frequency=frequency,
        anchor_date=d(anchor),
        amount=Decimal(amount),
        **kwargs,
    )


def make_bill(name: str, amount: str, recurrence: Frequency, anchor: str, **kwargs) -> Bill:
    return Bill(
        name=name,
        amount=Decimal(amount),
        recurrence=recurrence,
        anchor_due_date=d(anchor),
        **kwargs,
    )


def make_period(start: str, end: str, *incomes: str) -> Period:
    return Period(
        start=d(start),
        end=d(end),
        incomes=tuple(PeriodIncome(f"src{i}", Decimal(a)) for i, a in enumerate(incomes)),
    )


def boundaries(periods) -> list:
    if not periods:
        return []
    return [p.start for p in periods] + [periods[-1].end]
