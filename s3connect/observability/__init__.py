"""
Observability module.

Provides logging configuration and structured logging helpers.
"""

from s3connect.observability.log_utils import log_with_context, redact_config
from s3connect.observability.logger import configure_logging

__all__ = ["configure_logging", "log_with_context", "redact_config"]
