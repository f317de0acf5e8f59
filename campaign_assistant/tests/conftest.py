"""
Pytest Configuration and Shared Fixtures for Campaign Assistant Backend Tests.

This module provides fixtures and configuration for all backend tests, supporting:
- The default benchmark catalog and small custom catalogs for injection tests
- Sample metric payloads covering warning, on-target and excellent results
- A FastAPI TestClient with dependency overrides reset after each test
"""

from typing import Any, Dict, Generator

import pytest
from fastapi.testclient import TestClient

from campaign_assistant.core.config import get_settings
from campaign_assistant.core.dependencies import get_catalog_dependency, get_settings_dependency
from campaign_assistant.main import app
from campaign_assistant.models.schemas import MetricBenchmark
from campaign_assistant.services.benchmarks import (
    BenchmarkCatalog,
    build_catalog,
    get_benchmark_catalog,
)


# ============================================================
# PYTEST HOOKS
# ============================================================

def pytest_configure(config) -> None:
    """
    Configure custom pytest markers for test organization.

    Custom markers defined:
    - api: Tests exercising the HTTP layer through TestClient
    - parity: Tests pinning output text the dashboard already renders
    """
    config.addinivalue_line(
        'markers',
        'api: marks tests that go through the FastAPI application'
    )
    config.addinivalue_line(
        'markers',
        'parity: marks tests pinning established dashboard output'
    )


# ============================================================
# CATALOG FIXTURES
# ============================================================

@pytest.fixture
def catalog() -> BenchmarkCatalog:
    """The process-wide catalog built from the module tables."""
    return get_benchmark_catalog()


@pytest.fixture
def leads_catalog() -> BenchmarkCatalog:
    """
    Catalog that only benchmarks 'leads' (min 100, no max) and has no
    recommendation templates, so the generic fallback texts apply.
    """
    return build_catalog(
        benchmarks={"leads": MetricBenchmark(min=100, note="100+ per week")},
        recommendations={},
        kinds={},
    )


# ============================================================
# SAMPLE PAYLOADS
# ============================================================

@pytest.fixture
def mixed_metrics() -> Dict[str, Any]:
    """
    One metric in each state plus an unbenchmarked one:
    - cvr 5 -> On Target
    - roas 1.5 -> Needs Attention
    - ctr 3 -> Excellent (above max)
    - impressions -> Not benchmarked
    """
    return {"cvr": 5, "roas": 1.5, "ctr": 3, "impressions": 12000}


@pytest.fixture
def all_warning_metrics() -> Dict[str, Any]:
    """Every entry falls below its benchmark."""
    return {
        "roas": 1.5,
        "cvr": 1.5,
        "engagement_rate": 0.003,  # 0.3%
        "aov": 20,
    }


# ============================================================
# API FIXTURES
# ============================================================

@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """
    TestClient for the full application.

    Dependency overrides set by a test are cleared afterwards.
    """
    get_settings.cache_clear()
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def override_catalog():
    """Install a catalog override for the duration of a test."""
    def _override(replacement: Any) -> None:
        app.dependency_overrides[get_catalog_dependency] = lambda: replacement
    return _override


@pytest.fixture
def override_settings():
    """Install a settings override for the duration of a test."""
    def _override(**values: Any) -> None:
        settings = get_settings().model_copy(update=values)
        app.dependency_overrides[get_settings_dependency] = lambda: settings
    return _override
