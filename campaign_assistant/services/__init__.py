"""
Backend Services Module

This module contains all business logic services for the Campaign Assistant.
Each service is stateless and testable.

Services:
- benchmarks: Static benchmark, label and recommendation reference tables
- metric_evaluator: Single-metric benchmark classification and trend analysis
- report_aggregator: Multi-metric report with summary and recommendations
- performance_csv: Performance CSV template generation and parsing

All services are designed to be consumed by the API layer (campaign_assistant/api/).
"""

# =============================================================================
# Benchmark Reference Tables
# =============================================================================

from campaign_assistant.services.benchmarks import (
    KPI_BENCHMARKS,
    METRIC_LABELS,
    KPI_RECOMMENDATIONS,
    DEFAULT_RECOMMENDATIONS,
    METRIC_KINDS,
    BenchmarkCatalog,
    build_catalog,
    get_benchmark_catalog,
)

# =============================================================================
# Metric Evaluator
# Per-metric classification, percentage normalization and trend wording
# =============================================================================

from campaign_assistant.services.metric_evaluator import (
    MetricEvaluation,
    normalize_percentage,
    classify_against_benchmark,
    compute_trend_direction,
    describe_trend,
    trend_clause,
    evaluate_metric,
)

# =============================================================================
# Report Aggregator
# Filters numeric metrics, runs the evaluator and builds the summary
# =============================================================================

from campaign_assistant.services.report_aggregator import (
    AnalysisValidationError,
    is_finite_number,
    build_summary,
    build_adjustment_recommendations,
    analyze_metrics,
    aggregate_report,
)

# =============================================================================
# Performance CSV
# =============================================================================

from campaign_assistant.services.performance_csv import (
    CSV_TEMPLATE_HEADERS,
    CsvParseError,
    generate_csv_template,
    parse_performance_csv,
    performance_metrics_from_row,
)


__all__ = [
    # Benchmarks
    "KPI_BENCHMARKS",
    "METRIC_LABELS",
    "KPI_RECOMMENDATIONS",
    "DEFAULT_RECOMMENDATIONS",
    "METRIC_KINDS",
    "BenchmarkCatalog",
    "build_catalog",
    "get_benchmark_catalog",
    # Metric evaluator
    "MetricEvaluation",
    "normalize_percentage",
    "classify_against_benchmark",
    "compute_trend_direction",
    "describe_trend",
    "trend_clause",
    "evaluate_metric",
    # Report aggregator
    "AnalysisValidationError",
    "is_finite_number",
    "build_summary",
    "build_adjustment_recommendations",
    "analyze_metrics",
    "aggregate_report",
    # Performance CSV
    "CSV_TEMPLATE_HEADERS",
    "CsvParseError",
    "generate_csv_template",
    "parse_performance_csv",
    "performance_metrics_from_row",
]
