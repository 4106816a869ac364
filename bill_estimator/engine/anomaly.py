"""Flag bill amounts that stray too far from the current estimate."""

import logging
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from bill_estimator.config import Settings
from bill_estimator.engine.selector import calculate_next_bill_estimate
from bill_estimator.models.bill import RecurringBillRecord
from bill_estimator.models.results import AnomalyReport, Severity

logger = logging.getLogger(__name__)

MEDIUM_THRESHOLD_PCT = Decimal("15")
HIGH_THRESHOLD_PCT = Decimal("40")


def percent_difference(amount: Decimal, expected: Decimal) -> Decimal:
    """|amount - expected| as a percentage of expected. 0 when expected is not positive."""
    if expected <= 0:
        return Decimal("0")
    return abs(amount - expected) / expected * 100


def check_for_bill_anomalies(
    bill: RecurringBillRecord,
    proposed_amount: Decimal,
    reference_date: date | None = None,
    settings: Settings | None = None,
) -> AnomalyReport:
    """Compare a proposed amount against the bill's next estimate.

    The deviation is two-sided but messages always read "higher than expected".
    """
    if not isinstance(proposed_amount, Decimal):
        proposed_amount = Decimal(str(proposed_amount))

    expected = calculate_next_bill_estimate(bill, reference_date, settings).estimated_amount
    pct = percent_difference(proposed_amount, expected)
    pct_display = pct.quantize(Decimal("1"), ROUND_HALF_UP)

    if pct < MEDIUM_THRESHOLD_PCT:
        return AnomalyReport(
            is_anomaly=False,
            severity=Severity.LOW,
            message="Amount is within normal range",
            suggested_action="No action needed",
            expected_amount=expected,
            percent_difference=pct_display,
        )

    logger.debug(
        "Bill %s amount %s is %s%% off estimate %s",
        bill.id, proposed_amount, pct_display, expected,
    )

    if pct < HIGH_THRESHOLD_PCT:
        return AnomalyReport(
            is_anomaly=True,
            severity=Severity.MEDIUM,
            message=f"Amount is {pct_display}% higher than expected",
            suggested_action="Review bill for unusual charges",
            expected_amount=expected,
            percent_difference=pct_display,
        )

    return AnomalyReport(
        is_anomaly=True,
        severity=Severity.HIGH,
        message=f"Amount is {pct_display}% higher than expected - unusually high",
        suggested_action="Carefully review bill details and contact provider if necessary",
        expected_amount=expected,
        percent_difference=pct_display,
    )
