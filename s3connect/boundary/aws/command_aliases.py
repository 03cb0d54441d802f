"""
Command aliases for legacy and REST operation names.

Maps REST API document names and SDK 1.x names onto canonical botocore
operation names, and installs them on boto3 clients so legacy callers keep
working (client.get_bucket_headers(...) runs HeadBucket).

Dependencies: botocore
System role: Operation name resolution for S3 clients
"""

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from botocore import xform_name
from botocore.client import BaseClient

logger = logging.getLogger(__name__)

COMMAND_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        # REST API docs aliases
        "GetService": "ListBuckets",
        "GetBucket": "ListObjects",
        "PutBucket": "CreateBucket",
        # SDK 1.x aliases
        "GetBucketHeaders": "HeadBucket",
        "GetObjectHeaders": "HeadObject",
        "SetBucketAcl": "PutBucketAcl",
        "CreateObject": "PutObject",
        "PutObjectCopy": "CopyObject",
        "SetObjectAcl": "PutObjectAcl",
        "GetLogs": "GetBucketLogging",
        "GetVersioningStatus": "GetBucketVersioning",
        "SetBucketPolicy": "PutBucketPolicy",
        "CreateBucketNotification": "PutBucketNotification",
        "GetBucketNotifications": "GetBucketNotification",
        "CopyPart": "UploadPartCopy",
        "CreateWebsiteConfig": "PutBucketWebsite",
        "GetWebsiteConfig": "GetBucketWebsite",
        "DeleteWebsiteConfig": "DeleteBucketWebsite",
        "CreateObjectExpirationConfig": "PutBucketLifecycle",
        "GetObjectExpirationConfig": "GetBucketLifecycle",
        "DeleteObjectExpirationConfig": "DeleteBucketLifecycle",
    }
)


def resolve_operation_name(
    name: str, aliases: Mapping[str, str] = COMMAND_ALIASES
) -> str:
    """
    Resolve an operation name through the alias table.

    Args:
        name: Legacy, REST or canonical operation name
        aliases: Alias table to consult

    Returns:
        str: Canonical operation name, or name unchanged when not aliased
    """
    return aliases.get(name, name)


class AliasCommandFactory:
    """Resolves operation names on a single client, aliases first."""

    def __init__(
        self, client: BaseClient, aliases: Mapping[str, str] = COMMAND_ALIASES
    ) -> None:
        """
        Initialize the factory.

        Args:
            client: boto3 S3 client
            aliases: Alias table, alias name to canonical operation name
        """
        self.client = client
        self.aliases = MappingProxyType(dict(aliases))

    def resolve(self, name: str) -> str:
        return resolve_operation_name(name, self.aliases)

    def get_command(self, name: str) -> Callable[..., Any]:
        """
        Get the bound client method for an operation.

        Args:
            name: Operation name (alias or canonical)

        Returns:
            Callable: Client method running the canonical operation

        Raises:
            OperationNotFoundError: If the service has no such operation
        """
        operation = self.resolve(name)
        # Raises botocore.model.OperationNotFoundError for unknown operations
        self.client.meta.service_model.operation_model(operation)
        return getattr(self.client, xform_name(operation))

    def execute(self, name: str, **params: Any) -> Any:
        return self.get_command(name)(**params)

    def install(self) -> BaseClient:
        """
        Bind every alias as a snake_case method on the client.

        Safe to call more than once on the same client.

        Returns:
            BaseClient: The client, for chaining
        """
        if getattr(self.client.meta, "command_factory", None) is self:
            return self.client

        for alias, operation in self.aliases.items():
            setattr(self.client, xform_name(alias), getattr(self.client, xform_name(operation)))

        self.client.meta.command_factory = self
        logger.debug(
            f"{__name__}:install - Installed {len(self.aliases)} command aliases"
        )
        return self.client


def set_command_factory(client: BaseClient) -> AliasCommandFactory:
    """
    Install the default alias factory on a client.

    Args:
        client: boto3 S3 client

    Returns:
        AliasCommandFactory: The installed factory
    """
    existing = getattr(client.meta, "command_factory", None)
    if isinstance(existing, AliasCommandFactory):
        return existing
    factory = AliasCommandFactory(client)
    factory.install()
    return factory
