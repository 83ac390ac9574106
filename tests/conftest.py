import pytest

from core.schema import Frequency
from tests.helpers import make_bill, make_schedule


@pytest.fixture
def biweekly_salary():
    return make_schedule("salary", Frequency.BIWEEKLY, "2025-01-02", "1000")


@pytest.fixture
def household_bills():
    return [
        make_bill("Rent", "1200", Frequency.MONTHLY, "2025-01-05", category="Housing"),
        make_bill("Phone", "60", Frequency.MONTHLY, "2025-01-20", category="Utilities"),
        make_bill("Groceries", "150", Frequency.WEEKLY, "2025-01-03", category="Food"),
        make_bill("Car repair", "400", Frequency.ONCE, "2025-02-10"),
    ]
