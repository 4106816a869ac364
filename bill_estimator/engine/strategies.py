"""Bill amount estimation strategies.

Each strategy turns a RecurringBillRecord into an EstimateResult:
  fixed     - contractual amount, zero-width range
  last bill - most recent amount
  average   - cached average amount
  seasonal  - mean of bills from the same calendar month
  trend     - last amount projected one step along a least-squares line

Pure functions. No I/O.
"""

import logging
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from bill_estimator.engine.statistics import linear_trend_slope, mean, standard_deviation
from bill_estimator.models.bill import EstimationMethod, RecurringBillRecord
from bill_estimator.models.results import Confidence, EstimateRange, EstimateResult

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0")

DEFAULT_VARIANCE_PCT = Decimal("0.20")  # band for bills with no history
SEASONAL_MIN_HISTORY = 6
TREND_MIN_HISTORY = 3
TREND_WINDOW = 6


def _money(value: Decimal) -> Decimal:
    return value.quantize(TWO_PLACES, ROUND_HALF_UP)


def _band(center: Decimal, spread: Decimal) -> EstimateRange:
    return EstimateRange(
        min=max(ZERO, center - spread),
        max=max(ZERO, center + spread),
    )


def amount_spread(bill: RecurringBillRecord) -> Decimal:
    """Unrounded spread of a bill's amounts.

    One population standard deviation of the full history, or 20% of the
    reference amount when there is no history yet.
    """
    if not bill.bill_history:
        return bill.fixed_amount * DEFAULT_VARIANCE_PCT
    return standard_deviation(bill.amounts)


def variance_range(bill: RecurringBillRecord) -> Decimal:
    """Half-width of the uncertainty band around an estimate, in cents."""
    return _money(amount_spread(bill))


def estimate_fixed(bill: RecurringBillRecord) -> EstimateResult:
    amount = bill.fixed_amount
    return EstimateResult(
        estimated_amount=amount,
        confidence=Confidence.HIGH,
        reason="Fixed amount bill",
        range=EstimateRange(min=amount, max=amount),
        method="fixed",
    )


def estimate_from_last_bill(bill: RecurringBillRecord) -> EstimateResult:
    amount = bill.last_known_amount
    confidence = Confidence.MEDIUM if bill.bill_history else Confidence.LOW
    return EstimateResult(
        estimated_amount=amount,
        confidence=confidence,
        reason="Based on most recent bill",
        range=_band(amount, variance_range(bill)),
        method=EstimationMethod.LAST_BILL.value,
    )


def estimate_from_average(bill: RecurringBillRecord) -> EstimateResult:
    amount = bill.average_or_base
    count = bill.history_length

    if count > 3:
        confidence = Confidence.HIGH
    elif count > 1:
        confidence = Confidence.MEDIUM
    else:
        confidence = Confidence.LOW

    return EstimateResult(
        estimated_amount=amount,
        confidence=confidence,
        reason=f"Based on {count} bill average",
        range=_band(amount, variance_range(bill)),
        method=EstimationMethod.AVERAGE.value,
    )


def estimate_from_seasonal_pattern(
    bill: RecurringBillRecord,
    reference_date: date | None = None,
) -> EstimateResult:
    """Average the bills that fell in the same calendar month as reference_date.

    Needs at least six bills; otherwise, or when no bill shares the month,
    falls back to the average strategy.
    """
    if bill.history_length < SEASONAL_MIN_HISTORY:
        logger.debug(
            "Bill %s has %d bills, too few for seasonal estimate",
            bill.id, bill.history_length,
        )
        return estimate_from_average(bill)

    month = (reference_date or date.today()).month
    same_month = [h.actual_amount for h in bill.bill_history if h.bill_date.month == month]
    if not same_month:
        logger.debug("Bill %s has no bills for month %d", bill.id, month)
        return estimate_from_average(bill)

    amount = _money(mean(same_month))
    return EstimateResult(
        estimated_amount=amount,
        confidence=Confidence.HIGH if len(same_month) > 1 else Confidence.MEDIUM,
        reason=f"Based on {len(same_month)} bills from same month",
        range=_band(amount, variance_range(bill)),
        method=EstimationMethod.SEASONAL.value,
    )


def estimate_from_trend(bill: RecurringBillRecord) -> EstimateResult:
    """Project the most recent amount one period along the recent trend line."""
    if bill.history_length < TREND_MIN_HISTORY:
        logger.debug(
            "Bill %s has %d bills, too few for trend estimate",
            bill.id, bill.history_length,
        )
        return estimate_from_average(bill)

    newest_first = sorted(bill.bill_history, key=lambda h: h.bill_date, reverse=True)
    window = newest_first[:TREND_WINDOW]
    amounts = [h.actual_amount for h in reversed(window)]  # oldest -> newest

    slope = linear_trend_slope(amounts)
    projected = _money(amounts[-1] + slope)

    return EstimateResult(
        estimated_amount=max(ZERO, projected),
        confidence=Confidence.MEDIUM if len(window) > 3 else Confidence.LOW,
        reason=f"Based on {len(window)}-month trend analysis",
        range=_band(projected, variance_range(bill)),
        method=EstimationMethod.TREND.value,
    )
