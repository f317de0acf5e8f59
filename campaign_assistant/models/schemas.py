"""
Pydantic request/response models for the Campaign Assistant backend.

This module provides type-safe data validation and serialization for the
performance-analysis API contract: the static benchmark reference types,
per-metric analysis results, the aggregated report, the CSV upload payloads
and the shared error envelope.

All models use Pydantic v2 syntax with proper field validation and examples.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, model_serializer, model_validator

from campaign_assistant.models.enums import (
    MetricFlag,
    MetricKind,
    MetricStatus,
    TrendLabel,
)


# =============================================================================
# Reference Table Models
# =============================================================================


class MetricBenchmark(BaseModel):
    """
    Industry benchmark for a single metric key.

    Both bounds are inclusive. At least one of them must be present; a metric
    key without a benchmark entry is reported as "Not benchmarked".
    """
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "min": 2,
                "max": 10,
                "note": "2–10% (leads), 1–5% (sales)"
            }
        }
    )

    min: Optional[float] = Field(
        default=None,
        description="Lower inclusive bound of the healthy range"
    )
    max: Optional[float] = Field(
        default=None,
        description="Upper inclusive bound of the healthy range"
    )
    note: str = Field(
        ...,
        description="Human-readable description of the industry range"
    )

    @model_validator(mode="after")
    def _require_a_bound(self) -> "MetricBenchmark":
        if self.min is None and self.max is None:
            raise ValueError("a benchmark needs at least one of min or max")
        return self


class RecommendationSet(BaseModel):
    """Recommendation templates for below, within and above benchmark performance."""
    model_config = ConfigDict(frozen=True)

    low: str
    mid: str
    high: str


# =============================================================================
# Analysis Models
# =============================================================================


class MetricAnalysisResult(BaseModel):
    """
    Computed analysis for one submitted metric.

    `value` is echoed back exactly as submitted (before any percentage
    normalization). `trend` is absent when no prior-period value was supplied.
    """
    model_config = ConfigDict(
        use_enum_values=True,
        json_schema_extra={
            "example": {
                "metric": "cvr",
                "label": "Conversion Rate (%)",
                "value": 4.5,
                "past_value": 3.9,
                "status": "On Target",
                "flag": "on_target",
                "message": (
                    "Your conversion rate is within industry norms. Keep optimizing "
                    "copy and creative for incremental gains. Trend: improved."
                ),
                "benchmark": "2–10% (leads), 1–5% (sales)",
                "trend": "Improved"
            }
        }
    )

    metric: str = Field(..., description="Submitted metric key")
    label: str = Field(..., description="Display label for the metric")
    value: Union[int, float] = Field(..., description="Submitted current value")
    past_value: Optional[Union[int, float]] = Field(
        default=None,
        description="Submitted prior-period value, if any"
    )
    status: MetricStatus = Field(..., description="Benchmark status")
    flag: MetricFlag = Field(..., description="Dashboard flag")
    message: str = Field(..., description="Recommendation text, possibly trend-annotated")
    benchmark: str = Field(..., description="Benchmark note or 'N/A'")
    trend: Optional[TrendLabel] = Field(
        default=None,
        description="Period-over-period trend; omitted without a past value"
    )

    @model_serializer(mode="wrap")
    def _omit_missing_trend(self, handler):
        data = handler(self)
        if data.get("trend") is None:
            data.pop("trend", None)
        return data


class AnalysisReport(BaseModel):
    """
    Aggregated performance-analysis report.

    `analysis` keeps the iteration order of the submitted metrics mapping.
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "goal": "lead_generation",
                "platform": "facebook",
                "summary": "⚠️ 1 metric is under industry benchmarks. Review suggestions below.",
                "analysis": [],
                "adjustment_recommendations": [
                    "[Return on Ad Spend (x)]: Low ROAS: Reassess creative and targeting. "
                    "Try focusing on higher-value audiences or adjusting offers."
                ]
            }
        }
    )

    goal: str
    platform: Optional[str] = None
    summary: str
    analysis: List[MetricAnalysisResult] = Field(default_factory=list)
    adjustment_recommendations: List[str] = Field(default_factory=list)

    @model_serializer(mode="wrap")
    def _omit_missing_platform(self, handler):
        data = handler(self)
        if data.get("platform") is None:
            data.pop("platform", None)
        return data


# =============================================================================
# Request Models
# =============================================================================


class PerformanceAnalysisRequest(BaseModel):
    """
    Request body for POST /performance-analysis.

    `metrics` and `past_metrics` are accepted untyped so that structural
    validation (and the silent skipping of non-numeric entries) is done by the
    report aggregator rather than by request parsing.
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "goal": "lead_generation",
                "platform": "facebook",
                "metrics": {"cvr": 4.5, "cpl": 32, "roas": 1.5},
                "past_metrics": {"cvr": 3.9, "cpl": 41}
            }
        }
    )

    goal: Optional[str] = None
    platform: Optional[str] = None
    metrics: Any = None
    past_metrics: Any = None


class MetricEvaluationRequest(BaseModel):
    """Request body for evaluating a single metric."""
    metric: str = Field(..., min_length=1, description="Metric key, e.g. 'ctr'")
    value: FiniteFloat = Field(..., description="Current value")
    past_value: Optional[FiniteFloat] = Field(default=None, description="Prior-period value")


class CsvParseRequest(BaseModel):
    """Request body carrying the text of an uploaded performance CSV."""
    csv_text: str = Field(..., description="Raw CSV file contents")


# =============================================================================
# Response Models
# =============================================================================


class BenchmarkEntry(BaseModel):
    """Flattened view of the reference tables for one benchmarked metric."""
    model_config = ConfigDict(use_enum_values=True)

    metric: str
    label: str
    min: Optional[float] = None
    max: Optional[float] = None
    note: str
    kinds: List[MetricKind] = Field(default_factory=list)


class BenchmarkListResponse(BaseModel):
    """Response model for the benchmark listing endpoint."""
    benchmarks: List[BenchmarkEntry] = Field(default_factory=list)


class ParsedPerformanceData(BaseModel):
    """First data row of a performance CSV, restricted to the template headers."""
    date: Optional[str] = None
    campaign_name: Optional[str] = None
    impressions: Optional[float] = None
    clicks: Optional[float] = None
    spend: Optional[float] = None
    conversions: Optional[float] = None


class CsvParseResponse(BaseModel):
    """Parsed CSV row plus the numeric fields ready to submit as metrics."""
    row: ParsedPerformanceData
    metrics: Dict[str, float] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Error envelope returned for 4xx/5xx responses."""
    error: str
