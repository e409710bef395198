"""Unit tests for Settings configuration.

Tests cover:
- Defaults (kernel works unconfigured)
- Loading from environment variables
- Field validation (log level, projection depth)
- Environment helpers and JSON log resolution
- get_settings() caching
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from ddd_kernel.core.config import Settings, get_settings
from ddd_kernel.core.constants import PROJECTION_MAX_DEPTH_DEFAULT
from ddd_kernel.core.enums import Environment, IdentifierVersion


@pytest.mark.unit
class TestSettingsDefaults:
    """Test default configuration."""

    def test_defaults_without_environment(self):
        """Test every field has a usable default."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.log_level == "INFO"
        assert settings.log_json is None
        assert settings.identifier_version == IdentifierVersion.UUID7
        assert settings.projection_max_depth == PROJECTION_MAX_DEPTH_DEFAULT


@pytest.mark.unit
class TestSettingsFromEnvironment:
    """Test loading from environment variables."""

    def test_loads_all_fields(self):
        """Test environment variables override defaults."""
        env = {
            "ENVIRONMENT": "production",
            "LOG_LEVEL": "warning",
            "LOG_JSON": "true",
            "IDENTIFIER_VERSION": "uuid4",
            "PROJECTION_MAX_DEPTH": "50",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings()

        assert settings.environment == Environment.PRODUCTION
        assert settings.log_level == "WARNING"
        assert settings.log_json is True
        assert settings.identifier_version == IdentifierVersion.UUID4
        assert settings.projection_max_depth == 50

    def test_variable_names_are_case_insensitive(self):
        """Test lowercase variable names are accepted."""
        with patch.dict(os.environ, {"log_level": "debug"}, clear=True):
            settings = Settings()

        assert settings.log_level == "DEBUG"

    def test_unrelated_variables_are_ignored(self):
        """Test extra environment variables do not fail validation."""
        with patch.dict(os.environ, {"DATABASE_URL": "postgres://x"}, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT


@pytest.mark.unit
class TestSettingsValidation:
    """Test field validators."""

    def test_rejects_unknown_log_level(self):
        """Test non-standard level names fail."""
        with patch.dict(os.environ, {"LOG_LEVEL": "loud"}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings()

        assert "log_level" in str(exc_info.value)

    @pytest.mark.parametrize("depth", ["0", "-1", "901"])
    def test_rejects_out_of_range_projection_depth(self, depth):
        """Test projection depth must stay between 1 and the ceiling."""
        with patch.dict(os.environ, {"PROJECTION_MAX_DEPTH": depth}, clear=True):
            with pytest.raises(ValidationError):
                Settings()

    def test_rejects_unknown_identifier_version(self):
        """Test only supported UUID versions are accepted."""
        with patch.dict(os.environ, {"IDENTIFIER_VERSION": "uuid1"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()


@pytest.mark.unit
class TestSettingsEnvironmentHelpers:
    """Test environment detection and JSON log resolution."""

    @pytest.mark.parametrize(
        ("environment", "flag"),
        [
            (Environment.DEVELOPMENT, "is_development"),
            (Environment.TESTING, "is_testing"),
            (Environment.CI, "is_ci"),
            (Environment.PRODUCTION, "is_production"),
        ],
    )
    def test_environment_flags(self, environment, flag):
        """Test exactly one environment flag is set."""
        settings = Settings(environment=environment)

        flags = ["is_development", "is_testing", "is_ci", "is_production"]
        assert getattr(settings, flag) is True
        assert [f for f in flags if getattr(settings, f)] == [flag]

    @pytest.mark.parametrize(
        ("environment", "expected"),
        [
            (Environment.DEVELOPMENT, False),
            (Environment.TESTING, True),
            (Environment.CI, True),
            (Environment.PRODUCTION, False),
        ],
    )
    def test_json_logs_follow_environment_by_default(self, environment, expected):
        """Test JSON logs default on for testing/ci only."""
        settings = Settings(environment=environment, log_json=None)

        assert settings.use_json_logs is expected

    def test_explicit_log_json_wins(self):
        """Test log_json overrides the environment default."""
        settings = Settings(environment=Environment.TESTING, log_json=False)

        assert settings.use_json_logs is False


@pytest.mark.unit
class TestGetSettings:
    """Test cached settings accessor."""

    def test_returns_cached_instance(self, isolated_settings):
        """Test repeated calls return the same object."""
        assert get_settings() is get_settings()

    def test_cache_clear_reloads_environment(self, isolated_settings):
        """Test cache_clear() picks up new environment values."""
        with patch.dict(os.environ, {"PROJECTION_MAX_DEPTH": "10"}, clear=True):
            first = get_settings()
            get_settings.cache_clear()
        with patch.dict(os.environ, {"PROJECTION_MAX_DEPTH": "20"}, clear=True):
            second = get_settings()

        assert first.projection_max_depth == 10
        assert second.projection_max_depth == 20
