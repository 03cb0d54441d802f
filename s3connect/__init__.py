"""
s3connect: pre-configured boto3 S3 clients for content-management sites.

Builds clients from site-wide credentials and endpoint settings, resolves
legacy command names, and validates buckets with an optional stat cache.
"""

from s3connect.boundary.aws import (
    COMMAND_ALIASES,
    AliasCommandFactory,
    S3ClientFactory,
    build_client_config,
    create_client,
    get_bucket_location,
    validate_bucket_exists,
)
from s3connect.boundary.cache import ArrayCache, CacheProvider, ChainCache
from s3connect.configs import S3ClientSettings, Settings, get_settings
from s3connect.core.exceptions import S3ConnectException, S3ConnectValidationError

__version__ = "0.1.0"

__all__ = [
    "COMMAND_ALIASES",
    "AliasCommandFactory",
    "ArrayCache",
    "CacheProvider",
    "ChainCache",
    "S3ClientFactory",
    "S3ClientSettings",
    "S3ConnectException",
    "S3ConnectValidationError",
    "Settings",
    "build_client_config",
    "create_client",
    "get_bucket_location",
    "get_settings",
    "validate_bucket_exists",
]
