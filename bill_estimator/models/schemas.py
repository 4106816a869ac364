"""Pydantic schemas for bill payloads exchanged with the dashboard (camelCase JSON)."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from bill_estimator.models.bill import (
    BillCategory,
    BillHistoryEntry,
    BillStatistics,
    EstimationMethod,
    RecurringBillRecord,
)
from bill_estimator.models.results import AnomalyReport, EstimateResult, VarianceAnalysis


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---- Request schemas ----

class BillHistoryPayload(CamelModel):
    actual_amount: Decimal = Field(..., ge=0)
    bill_date: date
    variance: Decimal = Decimal("0")
    variance_percent: Decimal = Decimal("0")
    estimated_amount: Decimal | None = Field(None, ge=0)

    @field_validator("bill_date", mode="before")
    @classmethod
    def _drop_time_of_day(cls, value):
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str) and len(value) > 10:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        return value

    def to_entry(self) -> BillHistoryEntry:
        return BillHistoryEntry(
            actual_amount=self.actual_amount,
            bill_date=self.bill_date,
            variance=self.variance,
            variance_percent=self.variance_percent,
            estimated_amount=self.estimated_amount,
        )


class RecurringBillPayload(CamelModel):
    id: str
    name: str = Field(..., min_length=1)
    base_amount: Decimal | None = Field(None, ge=0)
    average_amount: Decimal | None = Field(None, ge=0)
    min_amount: Decimal | None = Field(None, ge=0)
    max_amount: Decimal | None = Field(None, ge=0)
    last_bill_amount: Decimal | None = Field(None, ge=0)
    estimation_method: str = "auto"
    is_variable_amount: bool = False
    bill_history: list[BillHistoryPayload] = Field(default_factory=list)
    category: BillCategory | None = None

    def to_record(self) -> RecurringBillRecord:
        return RecurringBillRecord(
            id=self.id,
            name=self.name,
            base_amount=self.base_amount,
            average_amount=self.average_amount,
            min_amount=self.min_amount,
            max_amount=self.max_amount,
            last_bill_amount=self.last_bill_amount,
            estimation_method=EstimationMethod.parse(self.estimation_method),
            is_variable_amount=self.is_variable_amount,
            bill_history=tuple(h.to_entry() for h in self.bill_history),
            category=self.category,
        )


class AnomalyCheckRequest(CamelModel):
    bill: RecurringBillPayload
    proposed_amount: Decimal = Field(..., ge=0)


# ---- Response schemas ----

class EstimateRangeResponse(CamelModel):
    min: Decimal
    max: Decimal


class EstimateResponse(CamelModel):
    estimated_amount: Decimal
    confidence: str  # "low" | "medium" | "high"
    reason: str
    range: EstimateRangeResponse
    method: str

    @classmethod
    def from_result(cls, result: EstimateResult) -> "EstimateResponse":
        return cls(
            estimated_amount=result.estimated_amount,
            confidence=result.confidence.value,
            reason=result.reason,
            range=EstimateRangeResponse(min=result.range.min, max=result.range.max),
            method=result.method,
        )


class VarianceAnalysisResponse(CamelModel):
    variance_type: str  # "stable" | "seasonal" | "trending" | "volatile"
    analysis: str
    recommendations: list[str]
    coefficient_of_variation: Decimal | None = None

    @classmethod
    def from_result(cls, result: VarianceAnalysis) -> "VarianceAnalysisResponse":
        return cls(
            variance_type=result.variance_type.value,
            analysis=result.analysis,
            recommendations=list(result.recommendations),
            coefficient_of_variation=result.coefficient_of_variation,
        )


class AnomalyReportResponse(CamelModel):
    is_anomaly: bool
    severity: str  # "low" | "medium" | "high"
    message: str
    suggested_action: str
    expected_amount: Decimal
    percent_difference: Decimal

    @classmethod
    def from_result(cls, result: AnomalyReport) -> "AnomalyReportResponse":
        return cls(
            is_anomaly=result.is_anomaly,
            severity=result.severity.value,
            message=result.message,
            suggested_action=result.suggested_action,
            expected_amount=result.expected_amount,
            percent_difference=result.percent_difference,
        )


class BillStatisticsResponse(CamelModel):
    average_amount: Decimal
    min_amount: Decimal
    max_amount: Decimal
    last_bill_amount: Decimal
    bill_count: int

    @classmethod
    def from_result(cls, stats: BillStatistics) -> "BillStatisticsResponse":
        return cls(
            average_amount=stats.average_amount,
            min_amount=stats.min_amount,
            max_amount=stats.max_amount,
            last_bill_amount=stats.last_bill_amount,
            bill_count=stats.bill_count,
        )
