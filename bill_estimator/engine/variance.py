"""Bill variance pattern classification.

Coefficient of variation (std dev / mean) over the full history:
  < 0.10  stable
  < 0.30  seasonal for energy bills, otherwise stable with moderate variance
  >= 0.30 volatile
"""

import logging
from decimal import Decimal, ROUND_HALF_UP

from bill_estimator.config import Settings
from bill_estimator.engine.categories import SEASONAL_VARIANCE_CATEGORIES, resolve_category
from bill_estimator.engine.statistics import mean
from bill_estimator.engine.strategies import amount_spread
from bill_estimator.models.bill import RecurringBillRecord
from bill_estimator.models.results import VarianceAnalysis, VarianceType

logger = logging.getLogger(__name__)

FOUR_PLACES = Decimal("0.0001")
MIN_HISTORY = 3
STABLE_CV = Decimal("0.1")
MODERATE_CV = Decimal("0.3")


def coefficient_of_variation(bill: RecurringBillRecord) -> Decimal:
    """Amount spread relative to the mean bill amount. 0 when the mean is 0."""
    avg = mean(bill.amounts)
    if avg == 0:
        return Decimal("0")
    return amount_spread(bill) / avg


def analyze_bill_variance(
    bill: RecurringBillRecord,
    settings: Settings | None = None,
) -> VarianceAnalysis:
    if bill.history_length < MIN_HISTORY:
        return VarianceAnalysis(
            variance_type=VarianceType.STABLE,
            analysis="Insufficient data for variance analysis",
            recommendations=("Add more bill history to improve predictions",),
        )

    cv = coefficient_of_variation(bill)
    cv_rounded = cv.quantize(FOUR_PLACES, ROUND_HALF_UP)
    logger.debug("Bill %s coefficient of variation %s", bill.id, cv_rounded)

    if cv < STABLE_CV:
        return VarianceAnalysis(
            variance_type=VarianceType.STABLE,
            analysis="Bill amounts are very consistent",
            recommendations=("Consider using base amount estimation method",),
            coefficient_of_variation=cv_rounded,
        )

    if cv < MODERATE_CV:
        if resolve_category(bill, settings) in SEASONAL_VARIANCE_CATEGORIES:
            return VarianceAnalysis(
                variance_type=VarianceType.SEASONAL,
                analysis="Bill shows moderate variance, likely seasonal",
                recommendations=(
                    "Consider using seasonal estimation method",
                    "Track bills for full year to identify patterns",
                ),
                coefficient_of_variation=cv_rounded,
            )
        return VarianceAnalysis(
            variance_type=VarianceType.STABLE,
            analysis="Bill amounts have moderate but manageable variance",
            recommendations=("Average estimation method works well for this bill",),
            coefficient_of_variation=cv_rounded,
        )

    return VarianceAnalysis(
        variance_type=VarianceType.VOLATILE,
        analysis="Bill amounts vary significantly",
        recommendations=(
            "Review bill details to understand variance causes",
            "Consider budgeting with higher buffer",
            "Track usage patterns if applicable",
        ),
        coefficient_of_variation=cv_rounded,
    )
