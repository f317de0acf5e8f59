"""
FastAPI dependency injection module for the Campaign Assistant backend.

This module provides reusable FastAPI dependencies for configuration access
and the benchmark reference tables, enabling loose coupling between endpoint
handlers and process-wide components.

Key Dependencies Provided:
- get_settings_dependency: Returns the cached Settings singleton
- get_catalog_dependency: Returns the cached BenchmarkCatalog
- SettingsDep: Type alias for injecting Settings into endpoints
- BenchmarkCatalogDep: Type alias for injecting the catalog into endpoints

Usage Examples:
    @router.post("/performance-analysis")
    async def analyze(
        request: PerformanceAnalysisRequest,
        catalog: BenchmarkCatalogDep,
    ) -> AnalysisReport:
        return aggregate_report(..., catalog=catalog)

Both wrappers exist so tests can swap implementations with
app.dependency_overrides.
"""

from typing import Annotated

from fastapi import Depends

from campaign_assistant.core.config import Settings, get_settings
from campaign_assistant.services.benchmarks import BenchmarkCatalog, get_benchmark_catalog


# =============================================================================
# Settings Dependency
# =============================================================================

def get_settings_dependency() -> Settings:
    """
    Return the Settings singleton instance.

    In tests, override with:

        app.dependency_overrides[get_settings_dependency] = lambda: mock_settings
    """
    return get_settings()


# =============================================================================
# Benchmark Catalog Dependency
# =============================================================================

def get_catalog_dependency() -> BenchmarkCatalog:
    """Return the process-wide benchmark catalog."""
    return get_benchmark_catalog()


# =============================================================================
# Type Aliases for Dependency Injection
# =============================================================================

# Usage: async def endpoint(settings: SettingsDep)
SettingsDep = Annotated[Settings, Depends(get_settings_dependency)]

# Usage: async def endpoint(catalog: BenchmarkCatalogDep)
BenchmarkCatalogDep = Annotated[BenchmarkCatalog, Depends(get_catalog_dependency)]
