"""Next-bill estimate entry point.

Fixed bills are always estimated at their fixed amount. Variable bills use
the configured strategy, or one chosen from history size and bill category:

  no history          -> base amount, +/-20% band
  fewer than 3 bills  -> last bill
  energy/cooling, >6  -> seasonal
  everything else     -> average
"""

import logging
from datetime import date
from decimal import Decimal

from bill_estimator.config import Settings
from bill_estimator.engine.categories import SEASONAL_SELECTION_CATEGORIES, resolve_category
from bill_estimator.engine.strategies import (
    estimate_fixed,
    estimate_from_average,
    estimate_from_last_bill,
    estimate_from_seasonal_pattern,
    estimate_from_trend,
)
from bill_estimator.models.bill import EstimationMethod, RecurringBillRecord
from bill_estimator.models.results import Confidence, EstimateRange, EstimateResult

logger = logging.getLogger(__name__)

NO_HISTORY_LOW = Decimal("0.8")
NO_HISTORY_HIGH = Decimal("1.2")
SEASONAL_SELECTION_MIN_HISTORY = 6  # strictly more than this many bills


def calculate_next_bill_estimate(
    bill: RecurringBillRecord,
    reference_date: date | None = None,
    settings: Settings | None = None,
) -> EstimateResult:
    """Estimate the next amount due for a recurring bill.

    Args:
        bill: Bill configuration and payment history.
        reference_date: "Today" for the seasonal strategy. Defaults to date.today().
        settings: Overrides the keyword table used for category detection.
    """
    if not bill.is_variable_amount:
        return estimate_fixed(bill)

    method = EstimationMethod.parse(bill.estimation_method)
    if method == EstimationMethod.LAST_BILL:
        return estimate_from_last_bill(bill)
    if method == EstimationMethod.AVERAGE:
        return estimate_from_average(bill)
    if method == EstimationMethod.SEASONAL:
        return estimate_from_seasonal_pattern(bill, reference_date)
    if method == EstimationMethod.TREND:
        return estimate_from_trend(bill)

    return select_best_estimate(bill, reference_date, settings)


def select_best_estimate(
    bill: RecurringBillRecord,
    reference_date: date | None = None,
    settings: Settings | None = None,
) -> EstimateResult:
    """Pick a strategy from history size and bill category."""
    count = bill.history_length

    if count == 0:
        amount = bill.base_or_zero
        return EstimateResult(
            estimated_amount=amount,
            confidence=Confidence.LOW,
            reason="Insufficient history - using base amount",
            range=EstimateRange(min=amount * NO_HISTORY_LOW, max=amount * NO_HISTORY_HIGH),
            method=EstimationMethod.BASE.value,
        )

    if count < 3:
        return estimate_from_last_bill(bill)

    category = resolve_category(bill, settings)
    logger.debug("Bill %s resolved to category %s with %d bills", bill.id, category.value, count)

    if category in SEASONAL_SELECTION_CATEGORIES and count > SEASONAL_SELECTION_MIN_HISTORY:
        return estimate_from_seasonal_pattern(bill, reference_date)

    # Telecom and everything else
    return estimate_from_average(bill)
