"""
Settings and environment management module for the Campaign Assistant backend.

This module provides centralized configuration management using pydantic-settings,
which automatically loads settings from environment variables and .env files.

Key Features:
- Environment variable validation and type coercion
- Sensible defaults for development
- Singleton pattern via @lru_cache for efficient access

Environment Variables:
- APP_NAME: Service name reported by the root endpoint
- API_VERSION: Version string reported by the root endpoint
- LOG_LEVEL: Root logging level (default: INFO)
- CORS_ALLOWED_ORIGINS: JSON list of origins allowed to call the API
- CSV_MAX_BYTES: Maximum size of a performance CSV accepted for parsing

Usage:
    from campaign_assistant.core.config import get_settings

    settings = get_settings()
    origins = settings.cors_allowed_origins
"""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    The class inherits from pydantic-settings BaseSettings which provides:
    - Automatic loading from environment variables (case-insensitive)
    - Support for .env file loading
    - Type validation and coercion
    - Default values for optional settings

    Attributes:
        app_name: Human-readable service name.
        api_version: Version string exposed by the API.
        log_level: Logging level name passed to logging.basicConfig.
        cors_allowed_origins: Origins allowed by the CORS middleware.
        csv_max_bytes: Upper bound on the size of submitted CSV text.
    """

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
        case_sensitive=False,
    )

    # =========================================================================
    # Service identity
    # =========================================================================

    app_name: str = 'Campaign Assistant API'

    api_version: str = '1.0.0'

    # =========================================================================
    # Logging
    # =========================================================================

    # Any name understood by the logging module (DEBUG, INFO, WARNING, ...)
    log_level: str = 'INFO'

    # =========================================================================
    # HTTP
    # =========================================================================

    # The Next.js wizard calls the API directly from the browser during development
    cors_allowed_origins: List[str] = Field(
        default_factory=lambda: [
            'http://localhost:3000',
            'http://127.0.0.1:3000',
        ]
    )

    # =========================================================================
    # Performance data upload
    # =========================================================================

    # CSV text above this size is rejected before parsing (1 MiB)
    csv_max_bytes: int = 1_048_576


@lru_cache()
def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Returns a cached Settings instance, ensuring that environment variables are
    only loaded once during the application lifecycle.

    Returns:
        Settings: The application settings instance with all configuration values.

    Note:
        To refresh settings in tests, you can clear the cache:
        >>> get_settings.cache_clear()
    """
    return Settings()
