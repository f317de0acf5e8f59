"""
Enumeration definitions for the Campaign Assistant backend.

All enums inherit from both `str` and `Enum` to ensure JSON serialization compatibility
with Pydantic models, enabling automatic serialization/deserialization in API responses.
"""

from enum import Enum


class MetricKind(str, Enum):
    """
    Policy tags attached to benchmarked metric keys.

    - percentage: Value may arrive as a percentage (4.5) or a fraction (0.045)
    - inverted_polarity: Lower is better (bounce rate); classification and
      trend direction are mirrored
    - cost: Monetary amount per unit (CPL, CPA, AOV)
    - ratio: Multiplier such as return on ad spend
    """
    PERCENTAGE = "percentage"
    INVERTED_POLARITY = "inverted_polarity"
    COST = "cost"
    RATIO = "ratio"


class Classification(str, Enum):
    """
    Position of a metric value relative to its industry benchmark.

    - low: Below benchmark (or above it for inverted-polarity metrics)
    - mid: Within the benchmark range
    - high: Beats the benchmark
    """
    LOW = "low"
    MID = "mid"
    HIGH = "high"


class MetricStatus(str, Enum):
    """Human-readable status shown next to each analyzed metric."""
    NEEDS_ATTENTION = "Needs Attention"
    ON_TARGET = "On Target"
    EXCELLENT = "Excellent"
    NOT_BENCHMARKED = "Not benchmarked"


class MetricFlag(str, Enum):
    """
    Badge flag driving the dashboard colouring.

    Source: MetricAnalysisResult.flag ("good" | "on_target" | "warning")
    """
    GOOD = "good"
    ON_TARGET = "on_target"
    WARNING = "warning"


class TrendDirection(str, Enum):
    """
    Internal direction token for period-over-period comparison.

    For ordinary metrics UP means the current value exceeds the past value.
    Inverted-polarity metrics swap UP and DOWN.
    """
    UP = "up"
    DOWN = "down"
    FLAT = "flat"


class TrendLabel(str, Enum):
    """Externally reported trend, derived from the direction token."""
    IMPROVED = "Improved"
    DECLINED = "Declined"
    NO_CHANGE = "No change"
