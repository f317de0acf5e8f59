"""
Metric Evaluator Service

Classifies a single campaign KPI against its industry benchmark, computes the
period-over-period trend and assembles the recommendation message shown on the
performance dashboard.

Evaluation steps:
1. Benchmark lookup - unknown keys short-circuit to "Not benchmarked"
2. Percentage normalization - fractions in [0, 1] are scaled to 0-100
3. Classification - low / mid / high against the benchmark bounds, with
   mirrored polarity for inverted metrics (bounce rate)
4. Trend - direction token from the raw comparison against the past value
5. Message assembly - recommendation template plus one trend clause
6. Status/flag mapping

The trend wording intentionally follows the dashboard's established output:
the reported trend label and the message wording are derived from the same
direction token, which for inverted-polarity metrics has already been
swapped once. Do not "correct" either side without a product decision.

The evaluator is pure: it holds no state and never raises for numeric input.
"""

import math
from dataclasses import dataclass
from typing import Optional

from campaign_assistant.models.enums import (
    Classification,
    MetricFlag,
    MetricKind,
    MetricStatus,
    TrendDirection,
    TrendLabel,
)
from campaign_assistant.models.schemas import MetricBenchmark
from campaign_assistant.services.benchmarks import BenchmarkCatalog, get_benchmark_catalog


NOT_BENCHMARKED_MESSAGE = "No available industry comparison for this metric."
NOT_BENCHMARKED_NOTE = "N/A"

IMPROVED = "improved"
WORSENED = "worsened"

STATUS_BY_CLASSIFICATION = {
    Classification.LOW: (MetricStatus.NEEDS_ATTENTION, MetricFlag.WARNING),
    Classification.MID: (MetricStatus.ON_TARGET, MetricFlag.ON_TARGET),
    Classification.HIGH: (MetricStatus.EXCELLENT, MetricFlag.GOOD),
}

TREND_LABELS = {
    TrendDirection.UP: TrendLabel.IMPROVED,
    TrendDirection.DOWN: TrendLabel.DECLINED,
    TrendDirection.FLAT: TrendLabel.NO_CHANGE,
}


@dataclass(frozen=True)
class MetricEvaluation:
    """
    Outcome of evaluating one metric.

    classification and direction are None for metrics without a benchmark;
    direction and trend are None when no past value was supplied.
    """
    status: MetricStatus
    flag: MetricFlag
    message: str
    benchmark: str
    trend: Optional[TrendLabel] = None
    classification: Optional[Classification] = None
    direction: Optional[TrendDirection] = None


def normalize_percentage(value: float) -> float:
    """
    Normalize a percentage-style value to the 0-100 scale.

    Values in [1, 100] are taken as already being percentages; values in
    [0, 1) are fractions and get multiplied by 100. Anything else (negative,
    above 100) passes through. Exactly 1 counts as a percentage.

    Args:
        value: Submitted value

    Returns:
        Value on the 0-100 scale where the heuristic applies
    """
    if 1 <= value <= 100:
        return value
    if 0 <= value <= 1:
        return value * 100
    return value


def _normalize_past_percentage(value: float) -> float:
    # Past values only get the fraction branch
    if 0 <= value <= 1:
        return value * 100
    return value


def classify_against_benchmark(
    value: float,
    benchmark: MetricBenchmark,
    inverted: bool = False
) -> Classification:
    """
    Classify a normalized value against a benchmark.

    Inverted-polarity metrics (lower is better):
    - value > max -> LOW
    - value < min -> HIGH
    - otherwise   -> MID

    All other metrics, in precedence order:
    1. value < min                     -> LOW
    2. value > max                     -> HIGH (beating the range)
    3. min <= value <= max (both set)  -> MID
    4. only min set and value >= min   -> HIGH
    5. only max set and value <= max   -> MID
    6. otherwise                       -> LOW

    Args:
        value: Normalized metric value
        benchmark: Benchmark bounds for the metric
        inverted: Whether the metric has inverted polarity

    Returns:
        Classification enum value
    """
    low, high = benchmark.min, benchmark.max

    if inverted:
        if high is not None and value > high:
            return Classification.LOW
        elif low is not None and value < low:
            return Classification.HIGH
        else:
            return Classification.MID

    if low is not None and value < low:
        return Classification.LOW
    elif high is not None and value > high:
        return Classification.HIGH
    elif low is not None and high is not None and low <= value <= high:
        return Classification.MID
    elif low is not None and value >= low:
        return Classification.HIGH
    elif high is not None and value <= high:
        return Classification.MID
    else:
        return Classification.LOW


def compute_trend_direction(
    current: float,
    past: float,
    inverted: bool = False
) -> TrendDirection:
    """
    Compare current and past values into a direction token.

    UP means current > past for ordinary metrics; inverted-polarity metrics
    swap UP and DOWN. Equal values are FLAT.
    """
    if current > past:
        return TrendDirection.DOWN if inverted else TrendDirection.UP
    elif current < past:
        return TrendDirection.UP if inverted else TrendDirection.DOWN
    else:
        return TrendDirection.FLAT


def describe_trend(direction: TrendDirection, inverted: bool = False) -> str:
    """
    Word used for the trend inside the recommendation message.

    UP reads "improved" (inverted: "worsened"); DOWN and FLAT read
    "worsened" (inverted: "improved").
    """
    if direction == TrendDirection.UP:
        return WORSENED if inverted else IMPROVED
    return IMPROVED if inverted else WORSENED


def trend_clause(classification: Classification, direction: TrendDirection, inverted: bool = False) -> str:
    """Sentence appended to the base recommendation when a trend exists."""
    description = describe_trend(direction, inverted)

    if classification == Classification.HIGH and description == IMPROVED:
        return f" You've {description} over the last period—great!"
    elif classification == Classification.LOW and description == WORSENED:
        return f" The trend is {description}—take action soon."
    elif classification == Classification.LOW and direction == TrendDirection.FLAT:
        return " Performance is flat, suggesting this remains a problem area."
    else:
        return f" Trend: {description}."


def _is_usable_past(past_value: Optional[float]) -> bool:
    return past_value is not None and math.isfinite(past_value)


def evaluate_metric(
    metric_key: str,
    current_value: float,
    past_value: Optional[float] = None,
    catalog: Optional[BenchmarkCatalog] = None
) -> MetricEvaluation:
    """
    Evaluate one metric against its benchmark.

    Args:
        metric_key: Metric key, e.g. "cvr" or "roas"
        current_value: Current-period value as submitted
        past_value: Prior-period value, or None
        catalog: Reference tables (defaults to the process-wide catalog)

    Returns:
        MetricEvaluation with status, flag, message, benchmark note and trend
    """
    if catalog is None:
        catalog = get_benchmark_catalog()

    benchmark = catalog.benchmark_for(metric_key)
    if benchmark is None:
        return MetricEvaluation(
            status=MetricStatus.NOT_BENCHMARKED,
            flag=MetricFlag.ON_TARGET,
            message=NOT_BENCHMARKED_MESSAGE,
            benchmark=NOT_BENCHMARKED_NOTE,
        )

    is_percentage = catalog.has_kind(metric_key, MetricKind.PERCENTAGE)
    inverted = catalog.has_kind(metric_key, MetricKind.INVERTED_POLARITY)

    value = normalize_percentage(current_value) if is_percentage else current_value
    classification = classify_against_benchmark(value, benchmark, inverted=inverted)

    direction: Optional[TrendDirection] = None
    if _is_usable_past(past_value):
        past = _normalize_past_percentage(past_value) if is_percentage else past_value
        direction = compute_trend_direction(value, past, inverted=inverted)

    templates = catalog.recommendations_for(metric_key)
    message = getattr(templates, classification.value)
    if direction is not None:
        message += trend_clause(classification, direction, inverted=inverted)

    status, flag = STATUS_BY_CLASSIFICATION[classification]

    return MetricEvaluation(
        status=status,
        flag=flag,
        message=message,
        benchmark=benchmark.note,
        trend=TREND_LABELS[direction] if direction is not None else None,
        classification=classification,
        direction=direction,
    )


__all__ = [
    "MetricEvaluation",
    "normalize_percentage",
    "classify_against_benchmark",
    "compute_trend_direction",
    "describe_trend",
    "trend_clause",
    "evaluate_metric",
    "NOT_BENCHMARKED_MESSAGE",
    "NOT_BENCHMARKED_NOTE",
]
