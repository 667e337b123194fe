"""Tests for settings loaded from the environment."""

from datadock.core.config import Settings, get_settings


class TestSettings:
    """Tests for Settings defaults and overrides."""

    def test_defaults(self):
        """Local service URLs and a 30 second timeout out of the box."""
        settings = Settings(_env_file=None)

        assert settings.data_api_url == "http://localhost:4000"
        assert settings.data_compiler_url == "http://localhost:4001"
        assert settings.request_timeout == 30.0
        assert settings.log_level == "WARNING"
        assert settings.log_format == "console"

    def test_environment_overrides(self, monkeypatch):
        """DATADOCK_ variables override every field."""
        monkeypatch.setenv("DATADOCK_DATA_API_URL", "https://data.internal:8443")
        monkeypatch.setenv("DATADOCK_DATA_COMPILER_URL", "https://compiler.internal")
        monkeypatch.setenv("DATADOCK_REQUEST_TIMEOUT", "2.5")
        monkeypatch.setenv("DATADOCK_LOG_FORMAT", "json")

        settings = Settings(_env_file=None)

        assert settings.data_api_url == "https://data.internal:8443"
        assert settings.data_compiler_url == "https://compiler.internal"
        assert settings.request_timeout == 2.5
        assert settings.log_format == "json"

    def test_trailing_slash_is_stripped(self):
        """Base URLs are normalised so paths can be appended directly."""
        settings = Settings(
            _env_file=None,
            data_api_url="http://localhost:4000/",
            data_compiler_url="http://localhost:4001//",
        )

        assert settings.data_api_url == "http://localhost:4000"
        assert settings.data_compiler_url == "http://localhost:4001"

    def test_get_settings_is_cached(self):
        """The same instance is returned until the cache is cleared."""
        assert get_settings() is get_settings()
