"""
Report Aggregator Service

Runs the metric evaluator over every submitted metric and synthesizes the
dashboard report: a headline summary and a list of adjustment
recommendations.

Partial-success policy: a metric whose value is not a finite number is
skipped (and logged) rather than failing the request. Only a structurally
invalid request - missing goal, metrics not a mapping - raises
AnalysisValidationError.
"""

import logging
import math
from numbers import Real
from typing import Any, List, Mapping, Optional

import numpy as np

from campaign_assistant.models.enums import MetricFlag
from campaign_assistant.models.schemas import AnalysisReport, MetricAnalysisResult
from campaign_assistant.services.benchmarks import BenchmarkCatalog, get_benchmark_catalog
from campaign_assistant.services.metric_evaluator import evaluate_metric


# Configure module logger
logger = logging.getLogger(__name__)


ALL_NORMAL_SUMMARY = (
    "All submitted metrics appear to be within normal ranges. "
    "Continue monitoring and optimizing."
)
NO_CRITICAL_ISSUES = (
    "No critical issues found based on provided metrics. "
    "Continue optimizing and reviewing new creative/audiences routinely."
)
NO_METRICS_ANALYZED = "No metrics were analyzed. Please provide valid performance data."


class AnalysisValidationError(ValueError):
    """Raised when a performance-analysis request is structurally invalid."""


def is_finite_number(value: Any) -> bool:
    """
    Check whether a submitted value can be analyzed.

    Accepts Python and numpy real numbers that are finite. Booleans are
    rejected even though bool subclasses int.
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    if not isinstance(value, (Real, np.number)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints beyond float range
        return False


def _as_python_number(value: Any) -> Any:
    # numpy scalars arrive from parsed CSV uploads
    if isinstance(value, np.generic):
        return value.item()
    return value


def _pluralize(count: int) -> str:
    return f"{count} metric{'s are' if count > 1 else ' is'}"


def build_summary(results: List[MetricAnalysisResult]) -> str:
    """
    Build the headline summary from per-metric flags.

    Warnings take precedence over good results; with neither the summary
    reports that everything is within normal ranges.
    """
    n_warnings = sum(1 for r in results if r.flag == MetricFlag.WARNING)
    n_goods = sum(1 for r in results if r.flag == MetricFlag.GOOD)

    if n_warnings > 0:
        return f"⚠️ {_pluralize(n_warnings)} under industry benchmarks. Review suggestions below."
    elif n_goods > 0:
        return f"✅ {_pluralize(n_goods)} beating benchmarks—opportunity to scale!"
    else:
        return ALL_NORMAL_SUMMARY


def build_adjustment_recommendations(results: List[MetricAnalysisResult]) -> List[str]:
    """
    One "[label]: message" bullet per warning metric, in analysis order.

    Falls back to a single reassurance bullet when nothing needs attention,
    or a single "nothing analyzed" bullet when there are no results.
    """
    suggestions = [
        f"[{r.label}]: {r.message}"
        for r in results
        if r.flag == MetricFlag.WARNING
    ]

    if not results:
        return [NO_METRICS_ANALYZED]
    if not suggestions:
        return [NO_CRITICAL_ISSUES]
    return suggestions


def analyze_metrics(
    metrics: Mapping[str, Any],
    past_metrics: Optional[Mapping[str, Any]] = None,
    catalog: Optional[BenchmarkCatalog] = None
) -> List[MetricAnalysisResult]:
    """
    Evaluate each numeric entry of `metrics` in iteration order.

    Args:
        metrics: Submitted metric values keyed by metric key
        past_metrics: Optional prior-period values keyed by metric key
        catalog: Reference tables (defaults to the process-wide catalog)

    Returns:
        List of MetricAnalysisResult, one per analyzable metric
    """
    if catalog is None:
        catalog = get_benchmark_catalog()
    if not isinstance(past_metrics, Mapping):
        past_metrics = {}

    results: List[MetricAnalysisResult] = []

    for metric_key, value in metrics.items():
        if not is_finite_number(value):
            logger.warning(f"Skipping non-numeric metric: {metric_key} with value {value!r}")
            continue

        value = _as_python_number(value)
        past = past_metrics.get(metric_key)
        past_value = _as_python_number(past) if is_finite_number(past) else None

        evaluation = evaluate_metric(metric_key, value, past_value, catalog=catalog)

        results.append(MetricAnalysisResult(
            metric=metric_key,
            label=catalog.label_for(metric_key),
            value=value,
            past_value=past_value,
            status=evaluation.status,
            flag=evaluation.flag,
            message=evaluation.message,
            benchmark=evaluation.benchmark,
            trend=evaluation.trend,
        ))

    return results


def aggregate_report(
    goal: Any,
    platform: Optional[str],
    metrics: Any,
    past_metrics: Any = None,
    catalog: Optional[BenchmarkCatalog] = None
) -> AnalysisReport:
    """
    Build the full performance-analysis report.

    Args:
        goal: Campaign goal (required, non-empty)
        platform: Advertising platform, echoed back unchanged
        metrics: Mapping of metric key to current value
        past_metrics: Optional mapping of metric key to prior-period value
        catalog: Reference tables (defaults to the process-wide catalog)

    Returns:
        AnalysisReport with summary, per-metric analysis and recommendations

    Raises:
        AnalysisValidationError: If goal is missing/empty or metrics is not a mapping
    """
    if not isinstance(goal, str) or not goal.strip() or not isinstance(metrics, Mapping):
        raise AnalysisValidationError(
            "Missing required fields: goal, metrics (must be an object)"
        )

    results = analyze_metrics(metrics, past_metrics, catalog=catalog)

    logger.info(
        f"Analyzed {len(results)} of {len(metrics)} submitted metrics "
        f"for goal={goal} platform={platform}"
    )

    return AnalysisReport(
        goal=goal,
        platform=platform,
        summary=build_summary(results),
        analysis=results,
        adjustment_recommendations=build_adjustment_recommendations(results),
    )


__all__ = [
    "AnalysisValidationError",
    "is_finite_number",
    "build_summary",
    "build_adjustment_recommendations",
    "analyze_metrics",
    "aggregate_report",
    "NO_METRICS_ANALYZED",
    "NO_CRITICAL_ISSUES",
    "ALL_NORMAL_SUMMARY",
]
