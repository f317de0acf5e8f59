"""
FastAPI router module for performance analysis.

Implements:
- POST /performance-analysis: Benchmark a set of campaign metrics into a report
- POST /performance-analysis/evaluate: Evaluate a single metric
- GET /performance-analysis/benchmarks: Reference tables for UI display
- GET /performance-analysis/csv-template: Downloadable performance CSV template
- POST /performance-analysis/csv: Parse an uploaded performance CSV

Error contract:
- Structurally invalid requests -> 400 {"error": "..."}
- Unexpected failures -> logged with traceback, 500 {"error": "..."}
"""

import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from campaign_assistant.core.dependencies import BenchmarkCatalogDep, SettingsDep
from campaign_assistant.models.schemas import (
    AnalysisReport,
    BenchmarkEntry,
    BenchmarkListResponse,
    CsvParseRequest,
    CsvParseResponse,
    MetricAnalysisResult,
    MetricEvaluationRequest,
    ParsedPerformanceData,
    PerformanceAnalysisRequest,
)
from campaign_assistant.services.metric_evaluator import evaluate_metric
from campaign_assistant.services.performance_csv import (
    TEMPLATE_FILENAME,
    CsvParseError,
    generate_csv_template,
    parse_performance_csv,
    performance_metrics_from_row,
)
from campaign_assistant.services.report_aggregator import (
    AnalysisValidationError,
    aggregate_report,
)


# Configure logging
logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."

# Create router with prefix and tags for OpenAPI documentation
router = APIRouter(prefix="/performance-analysis", tags=["performance-analysis"])


# =============================================================================
# Endpoint Implementations
# =============================================================================


@router.post("", response_model=AnalysisReport)
async def analyze_performance(
    request: PerformanceAnalysisRequest,
    catalog: BenchmarkCatalogDep,
) -> AnalysisReport:
    """
    Benchmark submitted campaign metrics.

    Each numeric entry of `metrics` is classified against its industry
    benchmark, compared with `past_metrics` when present, and annotated with a
    recommendation. Non-numeric entries are skipped.

    Args:
        request: Goal, optional platform, current and prior-period metrics
        catalog: Benchmark reference tables

    Returns:
        AnalysisReport with summary, per-metric analysis and adjustment
        recommendations

    Raises:
        HTTPException 400: If goal is missing or metrics is not an object
        HTTPException 500: If analysis fails unexpectedly
    """
    try:
        return aggregate_report(
            goal=request.goal,
            platform=request.platform,
            metrics=request.metrics,
            past_metrics=request.past_metrics,
            catalog=catalog,
        )
    except AnalysisValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error in performance analysis: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=UNEXPECTED_ERROR_MESSAGE,
        )


@router.post("/evaluate", response_model=MetricAnalysisResult)
async def evaluate_single_metric(
    request: MetricEvaluationRequest,
    catalog: BenchmarkCatalogDep,
) -> MetricAnalysisResult:
    """
    Evaluate one metric against its benchmark.

    Useful for inline feedback while the user is still filling in the wizard.

    Raises:
        HTTPException 500: If evaluation fails unexpectedly
    """
    try:
        evaluation = evaluate_metric(
            request.metric,
            request.value,
            request.past_value,
            catalog=catalog,
        )
    except Exception as e:
        logger.error(f"Error evaluating metric {request.metric}: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=UNEXPECTED_ERROR_MESSAGE,
        )

    return MetricAnalysisResult(
        metric=request.metric,
        label=catalog.label_for(request.metric),
        value=request.value,
        past_value=request.past_value,
        status=evaluation.status,
        flag=evaluation.flag,
        message=evaluation.message,
        benchmark=evaluation.benchmark,
        trend=evaluation.trend,
    )


@router.get("/benchmarks", response_model=BenchmarkListResponse)
async def list_benchmarks(catalog: BenchmarkCatalogDep) -> BenchmarkListResponse:
    """
    List the industry benchmarks the analysis compares against.

    Returns:
        BenchmarkListResponse with one entry per benchmarked metric
    """
    entries = [
        BenchmarkEntry(
            metric=metric_key,
            label=catalog.label_for(metric_key),
            min=benchmark.min,
            max=benchmark.max,
            note=benchmark.note,
            kinds=sorted(catalog.kinds_for(metric_key), key=lambda kind: kind.value),
        )
        for metric_key, benchmark in catalog.benchmarks.items()
    ]
    return BenchmarkListResponse(benchmarks=entries)


@router.get("/csv-template")
async def download_csv_template() -> Response:
    """Download the performance data CSV template."""
    return Response(
        content=generate_csv_template(),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={TEMPLATE_FILENAME}"},
    )


@router.post("/csv", response_model=CsvParseResponse)
async def parse_csv_upload(
    request: CsvParseRequest,
    settings: SettingsDep,
) -> CsvParseResponse:
    """
    Parse the first data row of an uploaded performance CSV.

    Returns:
        CsvParseResponse with the parsed row and its numeric fields as metrics

    Raises:
        HTTPException 400: If the CSV cannot be parsed
        HTTPException 500: If parsing fails unexpectedly
    """
    try:
        row = parse_performance_csv(request.csv_text, max_bytes=settings.csv_max_bytes)
        return CsvParseResponse(
            row=ParsedPerformanceData(**row),
            metrics=performance_metrics_from_row(row),
        )
    except CsvParseError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error parsing performance CSV: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=UNEXPECTED_ERROR_MESSAGE,
        )
