"""
Input checks for schedules and bills before they enter the engine.

Catches problems at the edit boundary:
- Negative amounts
- Semimonthly days the engine will have to clamp
- Bills that end before they start
- Ambiguous primary schedules

The engine itself re-clamps and never raises on these; the report is for the
caller to surface.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from core.schema import Bill, Frequency, RecurrenceSchedule
from core.utils import MAX_MONTH_DAY, MIN_MONTH_DAY


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a set of records."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        return ValidationResult(
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings,
        )

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def _out_of_range_days(days: Tuple[int, int]) -> List[int]:
    return [d for d in days if not MIN_MONTH_DAY <= d <= MAX_MONTH_DAY]


def validate_schedules(schedules: Iterable[RecurrenceSchedule]) -> ValidationResult:
    """
    Run all checks on income schedules.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()
    schedules = list(schedules)

    for sch in schedules:
        label = sch.source_id or "<unnamed>"
        if sch.amount < 0:
            result.errors.append(f"Schedule {label!r} has a negative amount ({sch.amount}).")

        if sch.frequency is Frequency.SEMIMONTHLY:
            raw = (sch.semimonthly_first_day, sch.semimonthly_second_day)
            bad = _out_of_range_days(raw)
            if bad:
                result.warnings.append(
                    f"Schedule {label!r} semimonthly days {bad} are outside "
                    f"{MIN_MONTH_DAY}-{MAX_MONTH_DAY} and will be clamped."
                )
            if len(set(sch.semimonthly_days)) == 1:
                result.warnings.append(
                    f"Schedule {label!r} pays twice a month on the same day "
                    f"({sch.semimonthly_days[0]}); it will behave as monthly."
                )

    counts = Counter(s.source_id for s in schedules)
    dupes = sorted(sid for sid, n in counts.items() if n > 1)
    if dupes:
        result.warnings.append(f"Duplicate schedule source ids: {dupes}.")

    mains = [s.source_id for s in schedules if s.is_main and s.active and s.frequency.is_recurring]
    if len(mains) > 1:
        result.warnings.append(
            f"{len(mains)} schedules are flagged main ({mains}); the first one anchors the grid."
        )

    if not any(s.active and s.frequency.is_recurring for s in schedules):
        result.warnings.append("No active recurring schedule; no pay periods will be generated.")

    return result


def validate_bills(bills: Iterable[Bill]) -> ValidationResult:
    """Run all checks on bills."""
    result = ValidationResult()

    for bill in bills:
        if not bill.name.strip():
            result.errors.append(f"Bill due {bill.anchor_due_date} has a blank name.")
        label = bill.name or "<unnamed>"

        if bill.amount < 0:
            result.errors.append(f"Bill {label!r} has a negative amount ({bill.amount}).")

        if bill.end_date is not None and bill.end_date < bill.anchor_due_date:
            result.warnings.append(
                f"Bill {label!r} ends ({bill.end_date}) before its first due date "
                f"({bill.anchor_due_date}); it will never be allocated."
            )

        if bill.recurrence is Frequency.SEMIMONTHLY:
            if bill.semimonthly_days is not None:
                bad = _out_of_range_days(bill.semimonthly_days)
                if bad:
                    result.warnings.append(
                        f"Bill {label!r} semimonthly days {bad} are outside "
                        f"{MIN_MONTH_DAY}-{MAX_MONTH_DAY} and will be clamped."
                    )
            elif bill.anchor_due_date.day > MAX_MONTH_DAY:
                result.warnings.append(
                    f"Bill {label!r} is anchored on day {bill.anchor_due_date.day}; "
                    f"semimonthly due days are clamped to {MAX_MONTH_DAY}."
                )

    return result


def validate_inputs(
    schedules: Iterable[RecurrenceSchedule],
    bills: Optional[Iterable[Bill]] = None,
) -> ValidationResult:
    result = validate_schedules(schedules)
    if bills is not None:
        result = result.merge(validate_bills(bills))
    return result
