"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from s3connect.configs.s3_client import S3ClientSettings
from s3connect.configs.settings import Settings, get_settings

__all__ = ["S3ClientSettings", "Settings", "get_settings"]
