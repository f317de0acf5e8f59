"""
Benchmark Reference Tables

Static industry benchmarks, display labels, recommendation templates and
per-metric policy tags used by the performance-analysis rule engine.

The tables are plain module constants wrapped once into a read-only
BenchmarkCatalog. Services receive the catalog as an argument (defaulting to
the cached process-wide instance) and FastAPI endpoints receive it through
BenchmarkCatalogDep, so tests can inject an alternative catalog.

Benchmark bounds are inclusive and expressed in the unit the metric is
displayed in: percentages as 0-100, currency in dollars, ROAS as a multiplier.
"""

from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Optional

from campaign_assistant.models.enums import MetricKind
from campaign_assistant.models.schemas import MetricBenchmark, RecommendationSet


# =============================================================================
# Benchmarks
# Closed key set; a metric missing here is "Not benchmarked".
# =============================================================================

KPI_BENCHMARKS: Dict[str, MetricBenchmark] = {
    "cvr": MetricBenchmark(min=2, max=10, note="2–10% (leads), 1–5% (sales)"),
    "cpl": MetricBenchmark(max=50, note="$1–50"),
    "ctr": MetricBenchmark(min=0.5, max=2, note="0.5–2% (social); 2–5% (search)"),
    "engagement_rate": MetricBenchmark(min=0.5, max=5, note="0.5–5%"),
    # Higher bounce is worse; see MetricKind.INVERTED_POLARITY
    "bounce_rate": MetricBenchmark(min=40, max=65, note="40–65%"),
    "cpa": MetricBenchmark(max=100, note="$5–100"),
    "roas": MetricBenchmark(min=2, note="2x+"),
    "aov": MetricBenchmark(min=50, max=150, note="$50–$150"),
}


# =============================================================================
# Display Labels
# Covers a few unbenchmarked keys (leads, impressions) as well.
# =============================================================================

METRIC_LABELS: Dict[str, str] = {
    "leads": "Leads",
    "cvr": "Conversion Rate (%)",
    "cpl": "Cost per Lead ($)",
    "ctr": "Click-Through Rate (%)",
    "impressions": "Impressions",
    "engagement_rate": "Engagement Rate (%)",
    "bounce_rate": "Bounce Rate (%)",
    "cpa": "Cost per Acquisition ($)",
    "roas": "Return on Ad Spend (x)",
    "aov": "Average Order Value ($)",
}


# =============================================================================
# Recommendation Templates
# low = below benchmark, mid = within, high = beats benchmark.
# aov is benchmarked but falls back to DEFAULT_RECOMMENDATIONS.
# =============================================================================

KPI_RECOMMENDATIONS: Dict[str, RecommendationSet] = {
    "cvr": RecommendationSet(
        low="Test a clearer call-to-action, improve landing page design, and refine offer or audience targeting.",
        mid="Your conversion rate is within industry norms. Keep optimizing copy and creative for incremental gains.",
        high="Excellent conversion—consider scaling spend to test new audiences.",
    ),
    "cpl": RecommendationSet(
        low="High CPL: Try new creative, alternate placements, and refine audience parameters to reduce costs.",
        mid="CPL is reasonable given volume; monitor as campaigns scale.",
        high="Low CPL! Consider reallocating extra budget to highest-performing segments.",
    ),
    "ctr": RecommendationSet(
        low="Low CTR: Review headline and visuals. Test sharper messaging and stronger value props.",
        mid="CTR is in a healthy range. Maintain creative rotation.",
        high="Excellent CTR! Try A/B testing for further lift.",
    ),
    "cpa": RecommendationSet(
        low="High CPA: Optimize ad creative, test retargeting, or review bidding/budget allocations.",
        mid="CPA looks solid—monitor quality of conversions.",
        high="Outstanding CPA, scale spend where possible.",
    ),
    "roas": RecommendationSet(
        low="Low ROAS: Reassess creative and targeting. Try focusing on higher-value audiences or adjusting offers.",
        mid="ROAS is good. Test incremental budget increases.",
        high="Great ROAS! Safely scale budget; consider duplicating best ad sets.",
    ),
    "engagement_rate": RecommendationSet(
        low="Low engagement: Try more interactive formats, UGC, and call-outs for shares/comments.",
        mid="Solid engagement—review top posts for repeatable patterns.",
        high="Great engagement; try retargeting recent engagers for conversions.",
    ),
    "bounce_rate": RecommendationSet(
        low="Very low bounce (can be good, but check for event tracking accuracy).",
        mid="Normal bounce rate. Keep optimizing page speed and design.",
        high="High bounce: Review landing page match to ad creative and make the next step immediately clear.",
    ),
}

DEFAULT_RECOMMENDATIONS = RecommendationSet(
    low="Action recommended.",
    mid="Performance is standard.",
    high="Performance is strong.",
)


# =============================================================================
# Metric Policy Tags
# =============================================================================

METRIC_KINDS: Dict[str, FrozenSet[MetricKind]] = {
    "cvr": frozenset({MetricKind.PERCENTAGE}),
    "ctr": frozenset({MetricKind.PERCENTAGE}),
    "engagement_rate": frozenset({MetricKind.PERCENTAGE}),
    "bounce_rate": frozenset({MetricKind.PERCENTAGE, MetricKind.INVERTED_POLARITY}),
    "cpl": frozenset({MetricKind.COST}),
    "cpa": frozenset({MetricKind.COST}),
    "aov": frozenset({MetricKind.COST}),
    "roas": frozenset({MetricKind.RATIO}),
}


@dataclass(frozen=True)
class BenchmarkCatalog:
    """
    Read-only bundle of the reference tables.

    Mappings are wrapped in MappingProxyType so a shared catalog cannot be
    mutated by a caller.
    """
    benchmarks: Mapping[str, MetricBenchmark]
    labels: Mapping[str, str]
    recommendations: Mapping[str, RecommendationSet]
    kinds: Mapping[str, FrozenSet[MetricKind]]
    default_recommendations: RecommendationSet = DEFAULT_RECOMMENDATIONS

    def benchmark_for(self, metric_key: str) -> Optional[MetricBenchmark]:
        return self.benchmarks.get(metric_key)

    def label_for(self, metric_key: str) -> str:
        """Display label, falling back to the uppercased key."""
        return self.labels.get(metric_key) or metric_key.upper()

    def recommendations_for(self, metric_key: str) -> RecommendationSet:
        return self.recommendations.get(metric_key, self.default_recommendations)

    def kinds_for(self, metric_key: str) -> FrozenSet[MetricKind]:
        return self.kinds.get(metric_key, frozenset())

    def has_kind(self, metric_key: str, kind: MetricKind) -> bool:
        return kind in self.kinds_for(metric_key)


def build_catalog(
    benchmarks: Optional[Mapping[str, MetricBenchmark]] = None,
    labels: Optional[Mapping[str, str]] = None,
    recommendations: Optional[Mapping[str, RecommendationSet]] = None,
    kinds: Optional[Mapping[str, FrozenSet[MetricKind]]] = None,
) -> BenchmarkCatalog:
    """
    Build a catalog, substituting the module tables for any omitted argument.

    Args:
        benchmarks: Benchmark table override
        labels: Label table override
        recommendations: Recommendation table override
        kinds: Metric policy tag override

    Returns:
        BenchmarkCatalog with read-only copies of the given tables
    """
    return BenchmarkCatalog(
        benchmarks=MappingProxyType(dict(KPI_BENCHMARKS if benchmarks is None else benchmarks)),
        labels=MappingProxyType(dict(METRIC_LABELS if labels is None else labels)),
        recommendations=MappingProxyType(
            dict(KPI_RECOMMENDATIONS if recommendations is None else recommendations)
        ),
        kinds=MappingProxyType(dict(METRIC_KINDS if kinds is None else kinds)),
    )


@lru_cache()
def get_benchmark_catalog() -> BenchmarkCatalog:
    """Return the process-wide catalog built from the module tables."""
    return build_catalog()


__all__ = [
    "KPI_BENCHMARKS",
    "METRIC_LABELS",
    "KPI_RECOMMENDATIONS",
    "DEFAULT_RECOMMENDATIONS",
    "METRIC_KINDS",
    "BenchmarkCatalog",
    "build_catalog",
    "get_benchmark_catalog",
]
