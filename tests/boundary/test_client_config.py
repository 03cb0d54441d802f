"""
Unit tests for client configuration assembly.

Tests settings fallback, caller precedence and boto3 keyword translation.
Dependencies: pytest, botocore, s3connect.boundary.aws.client_config
System role: Configuration merging validation
"""

import copy

import pytest
from botocore.config import Config
from botocore.credentials import Credentials

from s3connect.boundary.aws.client_config import (
    build_client_config,
    normalize_endpoint,
    to_client_kwargs,
)
from s3connect.configs import S3ClientSettings, Settings


class TestBuildClientConfigCredentials:
    """Test suite for credential filling."""

    def test_fills_credentials_from_settings_when_absent(self, s3_settings):
        """Test missing credentials come from the configured key and secret."""
        # Act
        config = build_client_config({}, settings=s3_settings)

        # Assert
        credentials = config["credentials"]
        assert credentials.access_key == "AKIASITEKEY"
        assert credentials.secret_key == "site-secret"

    def test_never_overwrites_caller_credentials(self, s3_settings):
        """Test caller-supplied credentials are kept as given."""
        # Arrange
        caller_credentials = Credentials("AKIACALLER", "caller-secret")

        # Act
        config = build_client_config(
            {"credentials": caller_credentials}, settings=s3_settings
        )

        # Assert
        assert config["credentials"] is caller_credentials

    def test_leaves_credentials_unset_without_configured_pair(self):
        """Test boto3 default credential chain is used when no pair is configured."""
        # Arrange
        settings = S3ClientSettings(key="AKIAONLYKEY", secret=None)

        # Act
        config = build_client_config({}, settings=settings)

        # Assert
        assert "credentials" not in config


class TestBuildClientConfigEndpoint:
    """Test suite for endpoint filling."""

    def test_preserves_caller_endpoint(self):
        """Test a caller endpoint wins over the configured hostname."""
        # Arrange
        settings = S3ClientSettings(hostname="storage.example.com")

        # Act
        config = build_client_config(
            {"endpoint": "http://localhost:9000"}, settings=settings
        )

        # Assert
        assert config["endpoint"] == "http://localhost:9000"

    def test_fills_endpoint_from_hostname(self):
        """Test the configured hostname becomes an https endpoint."""
        # Arrange
        settings = S3ClientSettings(hostname="storage.example.com")

        # Act
        config = build_client_config({}, settings=settings)

        # Assert
        assert config["endpoint"] == "https://storage.example.com"

    def test_skips_blank_hostname(self):
        """Test an empty hostname setting adds no endpoint."""
        # Arrange
        settings = S3ClientSettings(hostname="  ")

        # Act
        config = build_client_config({}, settings=settings)

        # Assert
        assert "endpoint" not in config

    @pytest.mark.parametrize(
        ("hostname", "expected"),
        [
            ("minio.local:9000", "https://minio.local:9000"),
            ("http://minio.local:9000", "http://minio.local:9000"),
            (" s3.example.com ", "https://s3.example.com"),
        ],
    )
    def test_normalize_endpoint(self, hostname, expected):
        """Test hostnames gain a scheme only when they have none."""
        assert normalize_endpoint(hostname) == expected


class TestBuildClientConfigDefaults:
    """Test suite for timeout and region defaults."""

    def test_applies_default_connect_timeout(self, s3_settings):
        """Test connect_timeout defaults to the configured 30 seconds."""
        # Act
        config = build_client_config({}, settings=s3_settings)

        # Assert
        assert config["client_options"] == {"connect_timeout": 30}

    def test_keeps_caller_client_options(self, s3_settings):
        """Test caller timeout and extra options survive the merge."""
        # Arrange
        options = {"connect_timeout": 5, "proxies": {"https": "http://proxy:3128"}}

        # Act
        config = build_client_config({"client_options": options}, settings=s3_settings)

        # Assert
        assert config["client_options"]["connect_timeout"] == 5
        assert config["client_options"]["proxies"] == {"https": "http://proxy:3128"}

    def test_fills_region_from_settings(self, s3_settings):
        """Test region comes from settings when absent."""
        assert build_client_config({}, settings=s3_settings)["region"] == "eu-west-1"

    def test_never_overwrites_caller_region(self, s3_settings):
        """Test caller region wins over settings."""
        config = build_client_config({"region": "ap-southeast-2"}, settings=s3_settings)
        assert config["region"] == "ap-southeast-2"

    def test_omits_region_when_unconfigured(self):
        """Test no region key is added when neither caller nor settings set one."""
        assert "region" not in build_client_config({}, settings=S3ClientSettings())

    def test_accepts_aggregate_settings(self, s3_settings):
        """Test the aggregate Settings object is unwrapped to its s3 section."""
        # Arrange
        settings = Settings(s3=s3_settings)

        # Act
        config = build_client_config({}, settings=settings)

        # Assert
        assert config["region"] == "eu-west-1"

    def test_reads_environment_when_no_settings_given(self, monkeypatch):
        """Test get_settings() supplies values from AMAZONS3_* variables."""
        # Arrange
        monkeypatch.setenv("AMAZONS3_KEY", "AKIAENV")
        monkeypatch.setenv("AMAZONS3_SECRET", "env-secret")
        monkeypatch.setenv("AMAZONS3_REGION", "us-west-2")

        # Act
        config = build_client_config()

        # Assert
        assert config["credentials"].access_key == "AKIAENV"
        assert config["region"] == "us-west-2"


class TestBuildClientConfigNoneValues:
    """Test suite for keys explicitly set to None."""

    def test_none_values_count_as_absent(self):
        """
        Test None credentials, endpoint and region fall back to settings.

        Arrange: Caller sets all three keys to None
        Act: Assemble the configuration
        Assert: Each is filled from settings
        """
        # Arrange
        settings = S3ClientSettings(
            key="AKIASITEKEY",
            secret="site-secret",
            region="eu-west-1",
            hostname="minio.local",
        )

        # Act
        config = build_client_config(
            {"region": None, "endpoint": None, "credentials": None}, settings=settings
        )

        # Assert
        assert config["region"] == "eu-west-1"
        assert config["endpoint"] == "https://minio.local"
        assert config["credentials"].access_key == "AKIASITEKEY"

    def test_none_values_without_settings_are_dropped_from_kwargs(self):
        """Test unfilled None keys never reach boto3."""
        config = build_client_config(
            {"region": None, "endpoint": None}, settings=S3ClientSettings()
        )

        kwargs = to_client_kwargs(config)

        assert "region_name" not in kwargs
        assert "endpoint_url" not in kwargs


class TestBuildClientConfigPurity:
    """Test suite for side-effect freedom."""

    def test_does_not_mutate_input(self, s3_settings):
        """Test the caller's mapping and nested options are untouched."""
        # Arrange
        original = {"client_options": {"read_timeout": 10}, "use_ssl": False}
        snapshot = copy.deepcopy(original)

        # Act
        build_client_config(original, settings=s3_settings)

        # Assert
        assert original == snapshot

    def test_repeated_calls_are_equal(self, s3_settings):
        """Test assembly is repeatable."""
        # Act
        first = build_client_config({"use_ssl": False}, settings=s3_settings)
        second = build_client_config({"use_ssl": False}, settings=s3_settings)

        # Assert
        assert first.keys() == second.keys()
        assert first["credentials"].get_frozen_credentials() == (
            second["credentials"].get_frozen_credentials()
        )
        assert first["client_options"] == second["client_options"]


class TestToClientKwargs:
    """Test suite for boto3 keyword translation."""

    def test_translates_known_keys(self):
        """Test credentials, endpoint, region and options map to boto3 names."""
        # Arrange
        config = {
            "credentials": Credentials("AKIA", "secret", "token"),
            "endpoint": "http://localhost:9000",
            "region": "eu-west-1",
            "client_options": {"connect_timeout": 30},
            "use_ssl": False,
        }

        # Act
        kwargs = to_client_kwargs(config)

        # Assert
        assert kwargs["aws_access_key_id"] == "AKIA"
        assert kwargs["aws_secret_access_key"] == "secret"
        assert kwargs["aws_session_token"] == "token"
        assert kwargs["endpoint_url"] == "http://localhost:9000"
        assert kwargs["region_name"] == "eu-west-1"
        assert kwargs["config"].connect_timeout == 30
        assert kwargs["use_ssl"] is False

    def test_accepts_mapping_credentials(self):
        """Test key/secret mappings are accepted as credentials."""
        kwargs = to_client_kwargs({"credentials": {"key": "AKIA", "secret": "s"}})

        assert kwargs == {"aws_access_key_id": "AKIA", "aws_secret_access_key": "s"}

    def test_caller_config_wins_over_client_options(self):
        """Test an explicit botocore Config overrides defaulted options."""
        # Arrange
        config = {
            "client_options": {"connect_timeout": 30, "read_timeout": 60},
            "config": Config(connect_timeout=3),
        }

        # Act
        kwargs = to_client_kwargs(config)

        # Assert
        assert kwargs["config"].connect_timeout == 3
        assert kwargs["config"].read_timeout == 60
