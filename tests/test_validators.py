from core.schema import Frequency
from data_prep import validate_bills, validate_inputs, validate_schedules
from tests.helpers import d, make_bill, make_schedule


def test_clean_inputs_pass(biweekly_salary, household_bills):
    result = validate_inputs([biweekly_salary], household_bills)
    assert result.is_valid
    assert result.warnings == []
    assert "All checks passed" in result.summary()


def test_negative_schedule_amount_is_an_error():
    result = validate_schedules([make_schedule("pay", Frequency.WEEKLY, "2025-01-03", "-10")])
    assert not result.is_valid
    assert "negative amount" in result.errors[0]


def test_semimonthly_days_out_of_range_warn():
    sch = make_schedule(
        "pay", Frequency.SEMIMONTHLY, "2025-01-01",
        semimonthly_first_day=0, semimonthly_second_day=31,
    )
    result = validate_schedules([sch])
    assert result.is_valid
    assert any("will be clamped" in w for w in result.warnings)


def test_semimonthly_same_day_twice_warns():
    sch = make_schedule(
        "pay", Frequency.SEMIMONTHLY, "2025-01-01",
        semimonthly_first_day=10, semimonthly_second_day=10,
    )
    assert any("same day" in w for w in validate_schedules([sch]).warnings)


def test_duplicate_ids_and_multiple_mains_warn():
    a = make_schedule("pay", Frequency.WEEKLY, "2025-01-03", is_main=True)
    b = make_schedule("pay", Frequency.MONTHLY, "2025-01-15", is_main=True)
    warnings = validate_schedules([a, b]).warnings
    assert any("Duplicate schedule source ids" in w for w in warnings)
    assert any("flagged main" in w for w in warnings)


def test_no_recurring_schedule_warns():
    result = validate_schedules([make_schedule("bonus", Frequency.ONCE, "2025-01-20")])
    assert any("No active recurring schedule" in w for w in result.warnings)
    assert any("No active recurring schedule" in w for w in validate_schedules([]).warnings)


def test_bill_errors():
    blank = make_bill("  ", "10", Frequency.MONTHLY, "2025-01-05")
    negative = make_bill("Refund", "-5", Frequency.ONCE, "2025-01-05")
    result = validate_bills([blank, negative])
    assert len(result.errors) == 2
    assert "✗" in result.summary()


def test_bill_warnings():
    ended = make_bill("Loan", "100", Frequency.MONTHLY, "2025-03-01", end_date=d("2025-01-01"))
    late = make_bill("Insurance", "80", Frequency.SEMIMONTHLY, "2025-01-31")
    result = validate_bills([ended, late])
    assert result.is_valid
    assert len(result.warnings) == 2
    assert "⚠" in result.summary()


def test_validate_inputs_merges_both_reports(biweekly_salary):
    bad_bill = make_bill("Fee", "-1", Frequency.ONCE, "2025-01-05")
    result = validate_inputs([], [bad_bill])
    assert len(result.errors) == 1
    assert len(result.warnings) == 1
    assert validate_inputs([biweekly_salary]).is_valid


def test_stored_bill_day_pair_out_of_range_warns():
    bill = make_bill("Insurance", "80", Frequency.SEMIMONTHLY, "2025-01-05", semimonthly_days=(30, 0))
    warnings = validate_bills([bill]).warnings
    assert len(warnings) == 1
    assert "[30, 0]" in warnings[0]
    assert "will be clamped" in warnings[0]


def test_stored_bill_day_pair_overrides_late_anchor():
    bill = make_bill("Insurance", "80", Frequency.SEMIMONTHLY, "2025-01-31", semimonthly_days=(5, 20))
    assert validate_bills([bill]).warnings == []
