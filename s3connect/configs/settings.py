"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator
"""

from functools import lru_cache

from pydantic import Field

from s3connect.configs.base import BaseSettings
from s3connect.configs.s3_client import S3ClientSettings


class Settings(BaseSettings):
    """Unified settings aggregating all config modules."""

    environment: str = Field(
        default="development",
        description="Host application environment (development, staging, production)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Aggregated settings
    s3: S3ClientSettings = Field(default_factory=S3ClientSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for the life of the process.
    Environment variables loaded once on first call.

    Returns:
        Settings: Application settings instance

    Usage:
        from s3connect.configs import get_settings
        settings = get_settings()
    """
    return Settings()
