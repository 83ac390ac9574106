"""Tests for forward, backward and membership occurrence rules."""

import pytest

from core.schema import Frequency, RecurrenceSchedule
from recurrence import (
    MonthDaysRule,
    StrideRule,
    next_occurrences,
    occurs_on,
    previous_occurrence,
    previous_occurrences,
)
from tests.helpers import d, make_schedule


def test_biweekly_next_occurrences_from_reference():
    sch = make_schedule("pay", Frequency.BIWEEKLY, "2025-01-02")
    assert next_occurrences(sch, d("2025-01-10"), 3) == [d("2025-01-16"), d("2025-01-30"), d("2025-02-13")]


def test_next_occurrences_includes_reference_payday():
    sch = make_schedule("pay", Frequency.BIWEEKLY, "2025-01-02")
    assert next_occurrences(sch, d("2025-01-16"), 1) == [d("2025-01-16")]


def test_weekly_next_occurrences_start_at_future_anchor():
    sch = make_schedule("pay", Frequency.WEEKLY, "2025-02-01")
    assert next_occurrences(sch, d("2025-01-10"), 2) == [d("2025-02-01"), d("2025-02-08")]


def test_stride_previous_occurrence_walks_back_past_anchor():
    sch = make_schedule("pay", Frequency.BIWEEKLY, "2025-01-02")
    assert previous_occurrence(sch, d("2025-01-10")) == d("2025-01-02")
    assert previous_occurrence(sch, d("2025-01-02")) == d("2025-01-02")
    assert previous_occurrence(sch, d("2024-12-25")) == d("2024-12-19")


def test_stride_occurs_on_uses_modulo():
    sch = make_schedule("pay", Frequency.BIWEEKLY, "2025-01-02")
    assert occurs_on(sch, d("2025-01-16"))
    assert occurs_on(sch, d("2024-12-19"))
    assert not occurs_on(sch, d("2025-01-09"))


def test_monthly_day_is_clamped_to_28():
    sch = make_schedule("pay", Frequency.MONTHLY, "2025-01-31")
    assert next_occurrences(sch, d("2025-02-01"), 3) == [d("2025-02-28"), d("2025-03-28"), d("2025-04-28")]
    assert previous_occurrence(sch, d("2025-03-10")) == d("2025-02-28")
    assert occurs_on(sch, d("2025-03-28"))
    assert not occurs_on(sch, d("2025-03-31"))


def test_monthly_previous_in_same_month():
    sch = make_schedule("pay", Frequency.MONTHLY, "2025-01-05")
    assert previous_occurrence(sch, d("2025-03-05")) == d("2025-03-05")
    assert previous_occurrence(sch, d("2025-03-04")) == d("2025-02-05")


def test_semimonthly_days_are_sorted():
    sch = make_schedule(
        "pay", Frequency.SEMIMONTHLY, "2025-01-01",
        semimonthly_first_day=15, semimonthly_second_day=1,
    )
    assert sch.semimonthly_days == (1, 15)
    assert next_occurrences(sch, d("2025-01-10"), 4) == [
        d("2025-01-15"), d("2025-02-01"), d("2025-02-15"), d("2025-03-01"),
    ]


def test_semimonthly_days_are_clamped():
    sch = make_schedule(
        "pay", Frequency.SEMIMONTHLY, "2025-01-01",
        semimonthly_first_day=30, semimonthly_second_day=10,
    )
    assert sch.semimonthly_days == (10, 28)
    assert next_occurrences(sch, d("2025-02-11"), 2) == [d("2025-02-28"), d("2025-03-10")]


def test_semimonthly_previous_occurrence():
    sch = make_schedule(
        "pay", Frequency.SEMIMONTHLY, "2025-01-01",
        semimonthly_first_day=5, semimonthly_second_day=20,
    )
    assert previous_occurrence(sch, d("2025-03-03")) == d("2025-02-20")
    assert previous_occurrence(sch, d("2025-03-05")) == d("2025-03-05")
    assert previous_occurrence(sch, d("2025-03-25")) == d("2025-03-20")
    assert occurs_on(sch, d("2025-07-20"))
    assert not occurs_on(sch, d("2025-07-21"))


def test_once_schedule():
    sch = make_schedule("bonus", Frequency.ONCE, "2025-01-20")
    assert next_occurrences(sch, d("2025-01-10"), 5) == [d("2025-01-20")]
    assert next_occurrences(sch, d("2025-01-21"), 5) == []
    assert previous_occurrence(sch, d("2025-01-10")) is None
    assert previous_occurrence(sch, d("2025-01-20")) == d("2025-01-20")
    assert occurs_on(sch, d("2025-01-20"))
    assert not occurs_on(sch, d("2025-01-21"))


def test_zero_count_yields_nothing():
    sch = make_schedule("pay", Frequency.WEEKLY, "2025-01-02")
    assert next_occurrences(sch, d("2025-01-10"), 0) == []


def test_previous_occurrences_are_ascending_and_strictly_before():
    sch = make_schedule("pay", Frequency.BIWEEKLY, "2025-01-02")
    assert previous_occurrences(sch, d("2025-01-16"), 3) == [
        d("2024-12-05"), d("2024-12-19"), d("2025-01-02"),
    ]


def test_previous_occurrences_stop_for_once():
    sch = make_schedule("bonus", Frequency.ONCE, "2025-01-02")
    assert previous_occurrences(sch, d("2025-02-01"), 3) == [d("2025-01-02")]


def test_month_days_rule_occurrences_between_is_half_open():
    rule = MonthDaysRule.semimonthly(1, 15)
    assert rule.occurrences_between(d("2025-03-01"), d("2025-04-01")) == [d("2025-03-01"), d("2025-03-15")]


def test_stride_rule_rejects_non_positive_step():
    with pytest.raises(ValueError):
        StrideRule(anchor=d("2025-01-01"), step_days=0)


def test_frequency_parse_accepts_stored_spellings():
    assert Frequency.parse("Every 2 Weeks") is Frequency.BIWEEKLY
    assert Frequency.parse("one-time") is Frequency.ONCE
    assert Frequency.parse("semi-monthly") is Frequency.SEMIMONTHLY
    with pytest.raises(ValueError):
        Frequency.parse("yearly")


def test_schedule_normalizes_fields():
    sch = RecurrenceSchedule("pay", "weekly", "2025-01-02", 1000.5)
    assert sch.frequency is Frequency.WEEKLY
    assert sch.anchor_date == d("2025-01-02")
    assert str(sch.amount) == "1000.5"
