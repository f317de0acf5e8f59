"""
Package initialization file for backend models.

This module exports all Pydantic schemas and enumerations from schemas.py and enums.py,
making them importable from campaign_assistant.models directly.

Usage:
    from campaign_assistant.models import (
        MetricFlag,
        MetricAnalysisResult,
        AnalysisReport,
        # ... etc
    )
"""

# =============================================================================
# Enums
# =============================================================================

from campaign_assistant.models.enums import (
    Classification,
    MetricFlag,
    MetricKind,
    MetricStatus,
    TrendDirection,
    TrendLabel,
)

# =============================================================================
# Schemas
# =============================================================================

from campaign_assistant.models.schemas import (
    # Reference tables
    MetricBenchmark,
    RecommendationSet,
    # Analysis output
    MetricAnalysisResult,
    AnalysisReport,
    # Requests
    PerformanceAnalysisRequest,
    MetricEvaluationRequest,
    CsvParseRequest,
    # Responses
    BenchmarkEntry,
    BenchmarkListResponse,
    ParsedPerformanceData,
    CsvParseResponse,
    ErrorResponse,
)


__all__ = [
    # Enums
    "Classification",
    "MetricFlag",
    "MetricKind",
    "MetricStatus",
    "TrendDirection",
    "TrendLabel",
    # Schemas
    "MetricBenchmark",
    "RecommendationSet",
    "MetricAnalysisResult",
    "AnalysisReport",
    "PerformanceAnalysisRequest",
    "MetricEvaluationRequest",
    "CsvParseRequest",
    "BenchmarkEntry",
    "BenchmarkListResponse",
    "ParsedPerformanceData",
    "CsvParseResponse",
    "ErrorResponse",
]
