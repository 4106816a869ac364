"""Recurring bill records and their payment history, as seen by the estimator."""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


class EstimationMethod(Enum):
    BASE = "base"
    LAST_BILL = "lastBill"
    AVERAGE = "average"
    SEASONAL = "seasonal"
    TREND = "trend"
    AUTO = "auto"

    @classmethod
    def parse(cls, value: "str | EstimationMethod | None") -> "EstimationMethod":
        """Map a stored method string to a member. Unknown values select AUTO."""
        if isinstance(value, cls):
            return value
        if not value:
            return cls.AUTO
        try:
            return cls(value)
        except ValueError:
            logger.warning("Unrecognized estimation method %r, using auto", value)
            return cls.AUTO


class BillCategory(Enum):
    ENERGY = "energy"
    CLIMATE_CONTROL = "climate_control"
    TELECOM = "telecom"
    OTHER = "other"


@dataclass(frozen=True)
class BillHistoryEntry:
    actual_amount: Decimal
    bill_date: date
    variance: Decimal = ZERO  # actual - estimated
    variance_percent: Decimal = ZERO  # 0 when the estimate was 0
    estimated_amount: Decimal | None = None


@dataclass(frozen=True)
class BillStatistics:
    average_amount: Decimal
    min_amount: Decimal
    max_amount: Decimal
    last_bill_amount: Decimal
    bill_count: int


@dataclass(frozen=True)
class RecurringBillRecord:
    id: str
    name: str
    base_amount: Decimal | None = None

    # Cached summaries, possibly stale relative to bill_history
    average_amount: Decimal | None = None
    min_amount: Decimal | None = None
    max_amount: Decimal | None = None
    last_bill_amount: Decimal | None = None

    estimation_method: EstimationMethod = EstimationMethod.AUTO
    is_variable_amount: bool = False
    bill_history: tuple[BillHistoryEntry, ...] = ()
    category: BillCategory | None = None

    @property
    def history_length(self) -> int:
        return len(self.bill_history)

    @property
    def amounts(self) -> list[Decimal]:
        return [h.actual_amount for h in self.bill_history]

    @property
    def fixed_amount(self) -> Decimal:
        """base -> average -> 0. Used for fixed bills and the default band."""
        return _first_known(self.base_amount, self.average_amount)

    @property
    def average_or_base(self) -> Decimal:
        return _first_known(self.average_amount, self.base_amount)

    @property
    def last_known_amount(self) -> Decimal:
        return _first_known(self.last_bill_amount, self.average_amount, self.base_amount)

    @property
    def base_or_zero(self) -> Decimal:
        return _first_known(self.base_amount)


def _first_known(*candidates: Decimal | None) -> Decimal:
    for value in candidates:
        if value is not None:
            return value
    return ZERO
