"""
Client configuration assembly.

Builds the configuration bag handed to the boto3 client factory, filling
credentials, endpoint, timeout and region from site-wide settings only where
the caller left them out.

Dependencies: boto3, botocore
System role: Configuration merging for S3 client construction
"""

import logging
from collections.abc import Mapping
from typing import Any

from botocore.config import Config
from botocore.credentials import Credentials

from s3connect.configs import S3ClientSettings, get_settings
from s3connect.observability.log_utils import redact_config

logger = logging.getLogger(__name__)

CREDENTIALS = "credentials"
ENDPOINT = "endpoint"
REGION = "region"
CLIENT_OPTIONS = "client_options"


def normalize_endpoint(hostname: str) -> str:
    """
    Turn a bare hostname into an endpoint URL.

    Args:
        hostname: Hostname with or without scheme (e.g. "minio.local:9000")

    Returns:
        str: Endpoint URL, https unless a scheme was given
    """
    hostname = hostname.strip()
    if "://" in hostname:
        return hostname
    return f"https://{hostname}"


def _resolve_settings(settings: Any | None) -> S3ClientSettings:
    if settings is None:
        return get_settings().s3
    # Accept the aggregate Settings as well as S3ClientSettings
    return getattr(settings, "s3", settings)


def build_client_config(
    config: Mapping[str, Any] | None = None,
    bucket: str | None = None,
    settings: Any | None = None,
) -> dict[str, Any]:
    """
    Produce a complete client configuration from a partial one.

    Caller-supplied values always win; settings only fill what is absent.
    Neither the input mapping nor the settings are modified.

    Args:
        config: Partial configuration bag (credentials, endpoint, region,
            client_options, or any boto3.client keyword)
        bucket: Optional bucket the client will be used with
        settings: S3ClientSettings or Settings; defaults to get_settings()

    Returns:
        dict[str, Any]: New configuration bag
    """
    s3_settings = _resolve_settings(settings)
    merged: dict[str, Any] = dict(config or {})

    # A key explicitly set to None counts as absent
    if merged.get(CREDENTIALS) is None and s3_settings.key and s3_settings.secret_value:
        merged[CREDENTIALS] = Credentials(s3_settings.key, s3_settings.secret_value)

    if merged.get(ENDPOINT) is None and s3_settings.hostname:
        merged[ENDPOINT] = normalize_endpoint(s3_settings.hostname)

    client_options = dict(merged.get(CLIENT_OPTIONS) or {})
    client_options.setdefault("connect_timeout", s3_settings.connect_timeout)
    merged[CLIENT_OPTIONS] = client_options

    if merged.get(REGION) is None and s3_settings.region:
        merged[REGION] = s3_settings.region

    logger.debug(
        f"{__name__}:build_client_config - Assembled config "
        f"bucket={bucket} config={redact_config(merged)}"
    )
    return merged


def _credential_kwargs(credentials: Any) -> dict[str, str]:
    if isinstance(credentials, Mapping):
        access_key = credentials.get("key")
        secret_key = credentials.get("secret")
        token = credentials.get("token")
    else:
        access_key = credentials.access_key
        secret_key = credentials.secret_key
        token = credentials.token

    kwargs = {
        "aws_access_key_id": access_key,
        "aws_secret_access_key": secret_key,
    }
    if token:
        kwargs["aws_session_token"] = token
    return kwargs


def to_client_kwargs(config: Mapping[str, Any]) -> dict[str, Any]:
    """
    Translate a configuration bag into boto3.client() keyword arguments.

    Unrecognised keys are passed through unchanged.

    Args:
        config: Configuration bag from build_client_config

    Returns:
        dict[str, Any]: Keyword arguments for Session.client("s3", ...)
    """
    options = dict(config)
    kwargs: dict[str, Any] = {}

    credentials = options.pop(CREDENTIALS, None)
    if credentials is not None:
        kwargs.update(_credential_kwargs(credentials))

    endpoint = options.pop(ENDPOINT, None)
    if endpoint:
        kwargs["endpoint_url"] = endpoint

    region = options.pop(REGION, None)
    if region:
        kwargs["region_name"] = region

    client_options = options.pop(CLIENT_OPTIONS, None)
    caller_config = options.pop("config", None)
    if client_options:
        kwargs["config"] = Config(**client_options)
        if caller_config is not None:
            kwargs["config"] = kwargs["config"].merge(caller_config)
    elif caller_config is not None:
        kwargs["config"] = caller_config

    kwargs.update(options)
    return kwargs
