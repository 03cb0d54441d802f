"""
Shared test fixtures and configuration for entire test suite.

Provides: settings objects, offline boto3 clients, counting cache doubles
Dependencies: pytest, boto3, botocore
System role: Test infrastructure and fixture management
"""

from typing import Any

import boto3
import pytest
from botocore.stub import Stubber

from s3connect.configs import S3ClientSettings, get_settings

_ENV_VARS = [
    "AMAZONS3_KEY",
    "AMAZONS3_SECRET",
    "AMAZONS3_HOSTNAME",
    "AMAZONS3_REGION",
    "AMAZONS3_BUCKET",
    "AMAZONS3_CACHE",
    "AMAZONS3_CACHE_LIFETIME",
    "AMAZONS3_CONNECT_TIMEOUT",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate tests from host AMAZONS3_* variables and the settings singleton."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def s3_settings() -> S3ClientSettings:
    """Provide site settings with credentials and a region."""
    return S3ClientSettings(
        key="AKIASITEKEY",
        secret="site-secret",
        region="eu-west-1",
        hostname=None,
    )


@pytest.fixture
def s3_client():
    """Provide a real boto3 S3 client that never leaves the process."""
    return boto3.session.Session().client(
        "s3",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def stubber(s3_client):
    """Provide an activated Stubber for the s3_client fixture."""
    with Stubber(s3_client) as stub:
        yield stub
        stub.assert_no_pending_responses()


class CountingCache:
    """In-memory cache double that records every call."""

    def __init__(self) -> None:
        self.entries: dict[str, Any] = {}
        self.lifetimes: dict[str, int | None] = {}
        self.contains_calls = 0
        self.save_calls = 0

    def contains(self, key: str) -> bool:
        self.contains_calls += 1
        return key in self.entries

    def fetch(self, key: str) -> Any:
        return self.entries.get(key)

    def save(self, key: str, value: Any, lifetime: int | None = None) -> bool:
        self.save_calls += 1
        self.entries[key] = value
        self.lifetimes[key] = lifetime
        return True

    def delete(self, key: str) -> bool:
        return self.entries.pop(key, None) is not None


@pytest.fixture
def counting_cache() -> CountingCache:
    """Provide an empty counting cache."""
    return CountingCache()
