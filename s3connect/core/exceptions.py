"""
Exception hierarchy for s3connect.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

SDK failures (botocore ClientError, BotoCoreError and friends) are not
wrapped here; they reach callers unchanged.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the package
"""

from typing import Any

BUCKET_VALIDATION_MESSAGE = (
    "The S3 access credentials are invalid or the bucket does not exist."
)


class S3ConnectException(Exception):
    """Base exception for all s3connect errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class S3ConnectValidationError(S3ConnectException):
    """
    Raised when a bucket cannot be confirmed to exist under current credentials.

    S3 bucket names are global, so a missing bucket and a bucket owned by
    another account look the same to the caller.
    """

    def __init__(self, bucket: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize bucket validation error.

        Args:
            bucket: Name of the bucket that failed validation
            details: Additional context
        """
        details = details or {}
        details["bucket"] = bucket
        self.bucket = bucket
        super().__init__(BUCKET_VALIDATION_MESSAGE, details)
