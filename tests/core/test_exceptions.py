"""
Test suite for the exception hierarchy.

System role: Verification of domain error context
"""

from s3connect.core.exceptions import (
    BUCKET_VALIDATION_MESSAGE,
    S3ConnectException,
    S3ConnectValidationError,
)


class TestS3ConnectValidationError:
    """Test suite for S3ConnectValidationError."""

    def test_carries_fixed_message_and_bucket(self):
        """Test the fixed human-readable message and bucket context."""
        # Act
        error = S3ConnectValidationError("site-files")

        # Assert
        assert isinstance(error, S3ConnectException)
        assert error.message == BUCKET_VALIDATION_MESSAGE
        assert error.details == {"bucket": "site-files"}
        assert str(error) == (
            f"{BUCKET_VALIDATION_MESSAGE} | Details: {{'bucket': 'site-files'}}"
        )

    def test_base_exception_without_details(self):
        """Test str() is the bare message when there is no context."""
        assert str(S3ConnectException("boom")) == "boom"
