"""
Core domain module.

Exports: S3ConnectException, S3ConnectValidationError
"""

from s3connect.core.exceptions import (
    BUCKET_VALIDATION_MESSAGE,
    S3ConnectException,
    S3ConnectValidationError,
)

__all__ = [
    "BUCKET_VALIDATION_MESSAGE",
    "S3ConnectException",
    "S3ConnectValidationError",
]
