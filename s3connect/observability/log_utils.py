"""
Structured logging helpers for S3 client operations.

Renders configuration bags and call context for log lines with credentials
masked and long values shortened.

Dependencies: logging (stdlib), botocore
System role: Log formatting for the S3 boundary
"""

import logging
from collections.abc import Mapping
from typing import Any

from botocore.credentials import Credentials

REDACTED = "***"
_SECRET_MARKERS = ("secret", "password", "token", "credentials")


def _is_secret_key(key: str) -> bool:
    return any(marker in key.lower() for marker in _SECRET_MARKERS)


def describe_value(value: Any, max_length: int = 200) -> str:
    """
    Describe a value in a form fit for one log line.

    Collections are summarised by size and credentials are never rendered.

    Args:
        value: Value to describe
        max_length: Longest text kept before shortening

    Returns:
        str: Printable description
    """
    if isinstance(value, Credentials):
        return REDACTED
    if isinstance(value, Mapping):
        text = f"<{len(value)} keys>"
    elif isinstance(value, (list, tuple, set)):
        text = f"<{len(value)} items>"
    else:
        text = str(value)

    if len(text) > max_length:
        return f"{text[:max_length]}...(+{len(text) - max_length} chars)"
    return text


def redact_config(config: Mapping[str, Any]) -> dict[str, str]:
    """
    Render a client configuration bag for logs with secrets masked.

    Args:
        config: Configuration bag

    Returns:
        dict[str, str]: Loggable copy of the bag
    """
    return {
        key: REDACTED if _is_secret_key(key) else describe_value(val)
        for key, val in config.items()
    }


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """
    Log a message followed by key=value context.

    The context is appended to the message text and also attached to the
    record, so both plain and structured formatters can use it.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Context values; secret-looking keys are masked
    """
    if not logger.isEnabledFor(level):
        return
    safe_context = redact_config(context)
    suffix = " ".join(f"{key}={val}" for key, val in safe_context.items())
    logger.log(level, f"{message} {suffix}" if suffix else message, extra=safe_context)
