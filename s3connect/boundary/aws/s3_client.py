"""
Pre-configured S3 client factory and bucket checks.

Wraps boto3 client construction with site-wide credentials, endpoint,
timeout and region, installs legacy command aliases, and validates that a
bucket is reachable, caching positive answers.

Dependencies: boto3, botocore
System role: Boundary between the host application and S3
"""

import logging
from collections.abc import Mapping
from typing import Any

import boto3
from botocore.client import BaseClient
from botocore.exceptions import ClientError

from s3connect.boundary.aws.client_config import build_client_config, to_client_kwargs
from s3connect.boundary.aws.command_aliases import set_command_factory
from s3connect.boundary.cache import ArrayCache, CacheProvider, ChainCache
from s3connect.configs import get_settings
from s3connect.core.exceptions import S3ConnectValidationError
from s3connect.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

DEFAULT_REGION = "us-east-1"
BUCKET_CACHE_PREFIX = "bucket:"

_FORBIDDEN_CODES = {"403", "AccessDenied", "Forbidden"}


def bucket_cache_key(bucket: str) -> str:
    return BUCKET_CACHE_PREFIX + bucket


def _http_status(error: ClientError) -> int | None:
    status = error.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
    if status is not None:
        return int(status)
    # HEAD responses have no body, so the error code is usually the bare status
    code = str(error.response.get("Error", {}).get("Code", ""))
    return int(code) if code.isdigit() else None


def does_bucket_exist(
    client: BaseClient, bucket: str, accept_403: bool = False
) -> bool:
    """
    Check whether a bucket exists with a HeadBucket request.

    S3 answers 403 both for buckets owned by other accounts and for requests
    signed with bad credentials, so 403 counts as missing unless accept_403.
    Any other 4xx (missing bucket, expired token, malformed request) also
    counts as missing.

    Args:
        client: boto3 S3 client
        bucket: Bucket name
        accept_403: Treat access denied as existing

    Returns:
        bool: True if the bucket exists and is accessible

    Raises:
        ClientError: For 5xx responses and errors without an HTTP status
    """
    try:
        client.head_bucket(Bucket=bucket)
        return True
    except ClientError as e:
        error_code = str(e.response.get("Error", {}).get("Code", ""))
        status = _http_status(e)
        if error_code in _FORBIDDEN_CODES or status == 403:
            return accept_403
        if status is not None and status < 500:
            return False
        raise


def validate_bucket_exists(
    bucket: str,
    client: BaseClient,
    cache: CacheProvider | None = None,
    lifetime: int | None = None,
) -> None:
    """
    Validate that a bucket exists.

    Since bucket names are global across all of S3, a bucket that does not
    exist and one owned by another account cannot be told apart. Only
    successful checks are cached, so a credential fix is picked up on the
    next call without a restart.

    Args:
        bucket: Name of the bucket to test
        client: boto3 S3 client
        cache: Optional cache of positive results
        lifetime: Lifetime of cached results in seconds, None for no expiry

    Raises:
        S3ConnectValidationError: When credentials are invalid or the bucket
            does not exist
    """
    key = bucket_cache_key(bucket)

    # Do not fetch; only a successful response is ever cached
    if cache is not None and cache.contains(key):
        logger.debug(f"{__name__}:validate_bucket_exists - Cache hit bucket={bucket}")
        return

    if not does_bucket_exist(client, bucket):
        log_with_context(
            logger,
            logging.WARNING,
            f"{__name__}:validate_bucket_exists - Bucket validation failed",
            bucket=bucket,
        )
        raise S3ConnectValidationError(bucket)

    if cache is not None:
        cache.save(key, True, lifetime)
    logger.info(f"{__name__}:validate_bucket_exists - Bucket validated bucket={bucket}")


def get_bucket_location(bucket: str, client: BaseClient) -> str:
    """
    Get the region for a bucket.

    Args:
        bucket: The bucket to get the region for
        client: boto3 S3 client

    Returns:
        str: The region for the bucket
    """
    response = client.get_bucket_location(Bucket=bucket)
    # us-east-1 is reported as an empty location constraint
    return response.get("LocationConstraint") or DEFAULT_REGION


def create_client(
    config: Mapping[str, Any] | None = None,
    bucket: str | None = None,
    settings: Any | None = None,
    session: boto3.session.Session | None = None,
) -> BaseClient:
    """
    Create a new S3 client using site-wide settings.

    Args:
        config: Partial configuration. If 'credentials' are set they are used
            instead of the configured key and secret.
        bucket: (optional) The bucket to associate this client with. Without
            a configured region, botocore redirects requests to the bucket's
            region on first use.
        settings: S3ClientSettings or Settings; defaults to get_settings()
        session: boto3 session to build the client from

    Returns:
        BaseClient: boto3 S3 client with command aliases installed
    """
    session = session or boto3.session.Session()
    client_config = build_client_config(config, bucket, settings)

    client = session.client("s3", **to_client_kwargs(client_config))
    set_command_factory(client)

    log_with_context(
        logger,
        logging.DEBUG,
        f"{__name__}:create_client - S3 client created",
        bucket=bucket,
        region=client.meta.region_name,
        endpoint=client.meta.endpoint_url,
    )
    return client


class S3ClientFactory:
    """
    S3 client factory with an explicitly injected stat cache.

    Holds the cache and its lifetime per instance instead of process-wide
    state, so tests and separate sites can use different caches.
    """

    def __init__(
        self,
        settings: Any | None = None,
        cache: CacheProvider | None = None,
        cache_lifetime: int | None = None,
        session: boto3.session.Session | None = None,
    ) -> None:
        """
        Initialize the factory.

        Args:
            settings: S3ClientSettings or Settings; defaults to get_settings()
            cache: Cache for successful bucket checks, None to disable
            cache_lifetime: Lifetime of cached checks in seconds
            session: boto3 session used for new clients
        """
        self.settings = settings
        self.cache = cache
        self.cache_lifetime = cache_lifetime
        self.session = session

    @classmethod
    def from_settings(cls, settings: Any | None = None) -> "S3ClientFactory":
        """
        Build a factory with the cache described by settings.

        Args:
            settings: S3ClientSettings or Settings; defaults to get_settings()

        Returns:
            S3ClientFactory: Factory with an in-process ChainCache when
                caching is enabled, no cache otherwise
        """
        resolved = settings if settings is not None else get_settings()
        s3_settings = getattr(resolved, "s3", resolved)
        cache = ChainCache([ArrayCache()]) if s3_settings.cache else None
        return cls(
            settings=resolved,
            cache=cache,
            cache_lifetime=s3_settings.cache_lifetime,
        )

    def create_client(
        self, config: Mapping[str, Any] | None = None, bucket: str | None = None
    ) -> BaseClient:
        return create_client(config, bucket, self.settings, self.session)

    def validate_bucket_exists(self, bucket: str, client: BaseClient) -> None:
        validate_bucket_exists(bucket, client, self.cache, self.cache_lifetime)

    def get_bucket_location(self, bucket: str, client: BaseClient) -> str:
        return get_bucket_location(bucket, client)
