"""
AWS boundary modules.

Exports: S3ClientFactory, create_client, validate_bucket_exists,
get_bucket_location, build_client_config, AliasCommandFactory
"""

from .client_config import build_client_config, to_client_kwargs
from .command_aliases import (
    COMMAND_ALIASES,
    AliasCommandFactory,
    resolve_operation_name,
    set_command_factory,
)
from .s3_client import (
    S3ClientFactory,
    create_client,
    does_bucket_exist,
    get_bucket_location,
    validate_bucket_exists,
)

__all__ = [
    "COMMAND_ALIASES",
    "AliasCommandFactory",
    "S3ClientFactory",
    "build_client_config",
    "create_client",
    "does_bucket_exist",
    "get_bucket_location",
    "resolve_operation_name",
    "set_command_factory",
    "to_client_kwargs",
    "validate_bucket_exists",
]
