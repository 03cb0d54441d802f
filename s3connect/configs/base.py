"""
Base configuration settings.

Shared loading rules for every config module: .env support, case-insensitive
names, and blank values from the host settings store treated as unset.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from typing import Any

from pydantic import model_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Base configuration class with common loading rules."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_blank_values(cls, data: Any) -> Any:
        # Admin forms store cleared fields as "", which must fall back to defaults
        if isinstance(data, dict):
            return {
                key: value
                for key, value in data.items()
                if not (isinstance(value, str) and not value.strip())
            }
        return data
