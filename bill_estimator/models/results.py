from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class Confidence(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class VarianceType(Enum):
    STABLE = "stable"
    SEASONAL = "seasonal"
    TRENDING = "trending"  # reserved, not produced by the analyzer
    VOLATILE = "volatile"


class Severity(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class EstimateRange:
    min: Decimal
    max: Decimal


@dataclass(frozen=True)
class EstimateResult:
    estimated_amount: Decimal
    confidence: Confidence
    reason: str
    range: EstimateRange
    method: str  # strategy that produced the amount, after any fallback


@dataclass(frozen=True)
class VarianceAnalysis:
    variance_type: VarianceType
    analysis: str
    recommendations: tuple[str, ...] = ()
    coefficient_of_variation: Decimal | None = None


@dataclass(frozen=True)
class AnomalyReport:
    is_anomaly: bool
    severity: Severity
    message: str
    suggested_action: str
    expected_amount: Decimal = Decimal("0")
    percent_difference: Decimal = Decimal("0")
