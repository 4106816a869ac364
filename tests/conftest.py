"""Canonical bills shared across engine tests.

Reference date: 2024-07-15 (July), so seasonal estimates look at July bills.
"""

from datetime import date
from decimal import Decimal

import pytest

from bill_estimator.models.bill import (
    BillHistoryEntry,
    EstimationMethod,
    RecurringBillRecord,
)

REFERENCE_DATE = date(2024, 7, 15)


def make_history(amounts: list[str], start: date = date(2024, 1, 1)) -> tuple[BillHistoryEntry, ...]:
    """Monthly entries on the first of each month, oldest first."""
    entries = []
    year, month = start.year, start.month
    for amount in amounts:
        entries.append(BillHistoryEntry(actual_amount=Decimal(amount), bill_date=date(year, month, 1)))
        month += 1
        if month > 12:
            year, month = year + 1, 1
    return tuple(entries)


@pytest.fixture
def reference_date() -> date:
    return REFERENCE_DATE


@pytest.fixture
def history():
    """Factory: history(["60", "65"], start=date(...)) -> monthly entries."""
    return make_history


@pytest.fixture
def fixed_subscription() -> RecurringBillRecord:
    """Streaming subscription at a flat $15.99."""
    return RecurringBillRecord(
        id="sub-1",
        name="Streaming Service",
        base_amount=Decimal("15.99"),
        is_variable_amount=False,
    )


@pytest.fixture
def new_variable_bill() -> RecurringBillRecord:
    """Variable bill with a $50 base amount and no payments yet."""
    return RecurringBillRecord(
        id="new-1",
        name="Water Utility",
        base_amount=Decimal("50"),
        estimation_method=EstimationMethod.AUTO,
        is_variable_amount=True,
    )


@pytest.fixture
def phone_bill() -> RecurringBillRecord:
    """Verizon plan with four consistent-ish bills averaging $65."""
    return RecurringBillRecord(
        id="phone-1",
        name="Verizon Wireless",
        base_amount=Decimal("60"),
        average_amount=Decimal("65"),
        last_bill_amount=Decimal("67"),
        estimation_method=EstimationMethod.AVERAGE,
        is_variable_amount=True,
        bill_history=make_history(["60", "65", "70", "67"]),
    )


@pytest.fixture
def electric_bill() -> RecurringBillRecord:
    """Thirteen months of electric bills, July 2023 through July 2024."""
    return RecurringBillRecord(
        id="elec-1",
        name="City Electric",
        base_amount=Decimal("120"),
        average_amount=Decimal("142.31"),
        last_bill_amount=Decimal("190"),
        estimation_method=EstimationMethod.AUTO,
        is_variable_amount=True,
        bill_history=make_history(
            ["180", "175", "130", "105", "120", "155", "160", "150", "125", "100", "110", "150", "190"],
            start=date(2023, 7, 1),
        ),
    )


@pytest.fixture
def rising_bill() -> RecurringBillRecord:
    """Five bills rising $5 a month, stored newest first."""
    history = make_history(["100", "105", "110", "115", "120"])
    return RecurringBillRecord(
        id="trend-1",
        name="Insurance Premium",
        average_amount=Decimal("110"),
        last_bill_amount=Decimal("120"),
        estimation_method=EstimationMethod.TREND,
        is_variable_amount=True,
        bill_history=tuple(reversed(history)),
    )
