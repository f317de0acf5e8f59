"""
Campaign Assistant Backend Package.

FastAPI service layer for the marketing campaign assistant. Benchmarks
submitted campaign performance metrics against industry ranges, tracks
period-over-period trends and produces adjustment recommendations.

Subpackages:
    - api: FastAPI route handlers
    - core: Configuration and dependencies
    - models: Pydantic schemas and enums
    - services: Business logic services
"""

__version__ = "1.0.0"
