"""
Backend API package initialization.

This package contains FastAPI router modules for the Campaign Assistant:
- performance_analysis: Benchmark analysis, benchmark listing and CSV helpers
"""

from fastapi import APIRouter

# Import router modules
from campaign_assistant.api.performance_analysis import router as performance_analysis_router

# Create main API router
api_router = APIRouter()

# performance_analysis router has its own /performance-analysis prefix
api_router.include_router(performance_analysis_router)

# Export all routers for selective imports
__all__ = [
    "api_router",
    "performance_analysis_router",
]
