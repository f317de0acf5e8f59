"""
Core infrastructure package for the FastAPI backend.

Provides:
- Configuration management via pydantic-settings
- FastAPI dependency injection utilities

This module re-exports key components from submodules for convenient importing:

    from campaign_assistant.core import get_settings, SettingsDep, BenchmarkCatalogDep

Components Re-exported:
    Settings: Pydantic settings class with all configuration parameters
    get_settings: Function returning the cached Settings singleton
    get_settings_dependency: FastAPI dependency returning Settings
    get_catalog_dependency: FastAPI dependency returning the BenchmarkCatalog
    SettingsDep: Type alias for Settings dependency injection
    BenchmarkCatalogDep: Type alias for catalog dependency injection
"""

from campaign_assistant.core.config import Settings, get_settings

from campaign_assistant.core.dependencies import (
    get_settings_dependency,
    get_catalog_dependency,
    SettingsDep,
    BenchmarkCatalogDep,
)


__all__ = [
    # Configuration management (from config.py)
    'Settings',
    'get_settings',
    # FastAPI dependency injection (from dependencies.py)
    'get_settings_dependency',
    'get_catalog_dependency',
    'SettingsDep',
    'BenchmarkCatalogDep',
]
