"""
Data preparation: edit-boundary validation of schedules and bills.
"""

from .validators import (
    ValidationResult,
    validate_bills,
    validate_inputs,
    validate_schedules,
)

__all__ = [
    "ValidationResult",
    "validate_bills",
    "validate_inputs",
    "validate_schedules",
]
