"""Bill payment recording and summary statistics.

Callers persist the entries and cached summaries; this module only computes
them.
"""

from dataclasses import replace
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from bill_estimator.engine.statistics import mean
from bill_estimator.models.bill import BillHistoryEntry, BillStatistics, RecurringBillRecord

TWO_PLACES = Decimal("0.01")


def record_bill_payment(
    actual_amount: Decimal,
    estimated_amount: Decimal,
    bill_date: date,
) -> BillHistoryEntry:
    """Build a history entry with variance against the estimate it was budgeted at."""
    variance = actual_amount - estimated_amount
    if estimated_amount != 0:
        variance_percent = (variance / estimated_amount * 100).quantize(TWO_PLACES, ROUND_HALF_UP)
    else:
        variance_percent = Decimal("0")

    return BillHistoryEntry(
        actual_amount=actual_amount,
        bill_date=bill_date,
        variance=variance.quantize(TWO_PLACES, ROUND_HALF_UP),
        variance_percent=variance_percent,
        estimated_amount=estimated_amount,
    )


def summarize_history(history: Iterable[BillHistoryEntry]) -> BillStatistics | None:
    entries = list(history)
    if not entries:
        return None

    amounts = [h.actual_amount for h in entries]
    most_recent = max(entries, key=lambda h: h.bill_date)
    return BillStatistics(
        average_amount=mean(amounts).quantize(TWO_PLACES, ROUND_HALF_UP),
        min_amount=min(amounts),
        max_amount=max(amounts),
        last_bill_amount=most_recent.actual_amount,
        bill_count=len(entries),
    )


def refresh_statistics(bill: RecurringBillRecord) -> RecurringBillRecord:
    """Return a copy of the bill with cached summaries recomputed from its history."""
    stats = summarize_history(bill.bill_history)
    if stats is None:
        return bill
    return replace(
        bill,
        average_amount=stats.average_amount,
        min_amount=stats.min_amount,
        max_amount=stats.max_amount,
        last_bill_amount=stats.last_bill_amount,
    )


def add_payment(bill: RecurringBillRecord, entry: BillHistoryEntry) -> RecurringBillRecord:
    """Append a payment and refresh the cached summaries."""
    return refresh_statistics(replace(bill, bill_history=bill.bill_history + (entry,)))
