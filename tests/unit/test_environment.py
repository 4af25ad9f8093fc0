"""Tests for the environment manager (core/environment.py)."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from cms_mock.config import Settings
from cms_mock.core.environment import (
    ENV_DEVELOPMENT,
    ENV_TEST,
    VALID_ENVIRONMENTS,
    EnvironmentInfo,
    get_environment_info,
    to_dict,
    validate_environment,
)


class TestEnvironmentInfo:
    """Tests for the EnvironmentInfo dataclass and get_environment_info()."""

    def test_valid_environments(self):
        assert VALID_ENVIRONMENTS == {ENV_DEVELOPMENT, ENV_TEST}

    def test_development_features(self):
        info = get_environment_info(Settings(_env_file=None, environment="development"))
        assert info.environment == "development"
        assert info.features["simulated_latency"] is True
        assert info.features["request_logging"] is True

    def test_test_features(self):
        info = get_environment_info(Settings(_env_file=None, environment="test"))
        assert info.features["simulated_latency"] is False
        assert info.features["request_logging"] is False
        assert info.features["mock_data"] is True

    @patch("cms_mock.core.environment.get_settings")
    def test_falls_back_to_global_settings(self, mock_settings):
        mock_settings.return_value = Settings(_env_file=None, environment="test")
        assert get_environment_info().environment == "test"

    def test_to_dict_serialization(self):
        info = EnvironmentInfo(environment="test", version="0.1.0", features={"mock_data": True})
        assert to_dict(info) == {
            "environment": "test",
            "version": "0.1.0",
            "features": {"mock_data": True},
        }


class TestValidateEnvironment:
    """Tests for the validate_environment() startup check."""

    def test_invalid_environment_raises_error(self):
        with pytest.raises(ValueError, match="Invalid ENVIRONMENT"):
            validate_environment(Settings(_env_file=None, environment="staging"))

    @pytest.mark.parametrize("environment", ["development", "test"])
    def test_valid_environments_pass(self, environment):
        validate_environment(Settings(_env_file=None, environment=environment))

    def test_invalid_origin_rejected(self):
        settings = Settings(_env_file=None, allowed_origins="localhost:3000")
        with pytest.raises(RuntimeError, match="ALLOWED_ORIGINS has invalid"):
            validate_environment(settings)

    def test_wildcard_origin_allowed(self):
        validate_environment(Settings(_env_file=None, allowed_origins="*"))

    def test_negative_delay_rejected(self):
        settings = Settings(_env_file=None, response_delay_ms=-1)
        with pytest.raises(RuntimeError, match="RESPONSE_DELAY_MS"):
            validate_environment(settings)
