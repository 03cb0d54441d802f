"""
S3 client configuration.

Site-wide credential, endpoint and stat-cache settings used to build
pre-configured S3 clients.

Dependencies: pydantic_settings
System role: S3 client configuration sourced from the host settings store
"""

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import SettingsConfigDict

from s3connect.configs.base import BaseSettings


class S3ClientSettings(BaseSettings):
    """Settings for S3 client construction and bucket validation caching."""

    model_config = SettingsConfigDict(env_prefix="AMAZONS3_")

    key: str | None = Field(
        default=None,
        description="AWS access key ID",
    )
    secret: SecretStr | None = Field(
        default=None,
        description="AWS secret access key",
    )
    hostname: str | None = Field(
        default=None,
        description="Custom endpoint hostname for S3-compatible services",
    )
    region: str | None = Field(
        default=None,
        description="Default region for new clients",
    )
    bucket: str | None = Field(
        default=None,
        description="Default bucket used by the command line check",
    )
    cache: bool = Field(
        default=True,
        description="Cache successful bucket existence checks",
    )
    cache_lifetime: int | None = Field(
        default=None,
        description="Lifetime of cached checks in seconds (0 or empty for no expiry)",
    )
    connect_timeout: float = Field(
        default=30,
        description="Connection timeout in seconds applied when the caller sets none",
    )

    @field_validator("cache_lifetime", mode="before")
    @classmethod
    def _zero_lifetime_is_no_expiry(cls, value):
        if value in (0, "0"):
            return None
        return value

    @property
    def secret_value(self) -> str | None:
        """Return the plain secret, or None when unset."""
        return self.secret.get_secret_value() if self.secret else None
