"""Tests for environment → Settings loading."""

import pytest

from core.config import DEFAULT_BASE_URL, Settings, load_settings
from core.errors import StartupConfigurationError


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_minimal_environment_uses_defaults(self):
        settings = load_settings({"EBIRD_API_KEY": "abc123"})

        assert settings.api_key == "abc123"
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.timeout is None
        assert settings.log_level == "INFO"

    @pytest.mark.parametrize("env", [{}, {"EBIRD_API_KEY": ""}, {"EBIRD_API_KEY": "   "}])
    def test_missing_api_key_is_fatal(self, env):
        with pytest.raises(StartupConfigurationError, match="EBIRD_API_KEY"):
            load_settings(env)

    def test_missing_api_key_message_points_to_keygen(self):
        with pytest.raises(StartupConfigurationError, match="ebird.org/api/keygen"):
            load_settings({})

    def test_overrides(self):
        settings = load_settings({
            "EBIRD_API_KEY": "abc123",
            "EBIRD_BASE_URL": "http://localhost:8080/v2/",
            "EBIRD_HTTP_TIMEOUT": "12.5",
            "LOG_LEVEL": "debug",
        })

        # Trailing slash is stripped so endpoint paths can start with "/".
        assert settings.base_url == "http://localhost:8080/v2"
        assert settings.timeout == 12.5
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("raw", ["soon", "0", "-3"])
    def test_bad_timeout_is_rejected(self, raw):
        with pytest.raises(StartupConfigurationError, match="EBIRD_HTTP_TIMEOUT"):
            load_settings({"EBIRD_API_KEY": "abc123", "EBIRD_HTTP_TIMEOUT": raw})

    def test_blank_timeout_means_no_timeout(self):
        settings = load_settings({"EBIRD_API_KEY": "abc123", "EBIRD_HTTP_TIMEOUT": " "})
        assert settings.timeout is None

    def test_reads_process_environment_by_default(self, monkeypatch):
        monkeypatch.setenv("EBIRD_API_KEY", "from-env")
        assert load_settings().api_key == "from-env"


class TestSettings:
    def test_is_immutable(self):
        settings = Settings(api_key="abc123")
        with pytest.raises(AttributeError):
            settings.api_key = "other"

    def test_repr_hides_api_key(self):
        assert "abc123" not in repr(Settings(api_key="abc123"))
