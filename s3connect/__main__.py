"""
Bucket connection check.

Usage:
    python -m s3connect --bucket my-site-files
    python -m s3connect --no-cache --log-level DEBUG

Purpose:
- Build a client from AMAZONS3_* settings
- Validate that the bucket exists and the credentials can reach it
- Print the bucket region

Dependencies: boto3
System role: Operator helper for checking site storage settings
"""

import argparse
import logging
import sys

from s3connect.boundary.aws import S3ClientFactory
from s3connect.configs import get_settings
from s3connect.core.exceptions import S3ConnectValidationError
from s3connect.observability import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="s3connect",
        description="Validate S3 bucket access using site settings",
    )
    parser.add_argument("--bucket", help="Bucket to check (default: AMAZONS3_BUCKET)")
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Skip the bucket existence cache",
    )
    parser.add_argument("--log-level", default=None, help="Log level (default: settings)")
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Run the bucket check.

    Args:
        argv: Command line arguments (defaults to sys.argv)

    Returns:
        int: 0 on success, 1 on validation failure, 2 on usage error
    """
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(args.log_level or settings.log_level)

    bucket = args.bucket or settings.s3.bucket
    if not bucket:
        logger.error("No bucket given; pass --bucket or set AMAZONS3_BUCKET")
        return 2

    factory = S3ClientFactory.from_settings(settings)
    if args.no_cache:
        factory.cache = None

    client = factory.create_client(bucket=bucket)
    try:
        factory.validate_bucket_exists(bucket, client)
    except S3ConnectValidationError as e:
        logger.error(f"{__name__}:main - {e}")
        return 1

    region = factory.get_bucket_location(bucket, client)
    print(f"{bucket}: {region}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
