"""Unit tests for server configuration settings model.

Tests verify that the Settings model and the grouped configuration models
bind environment variables by their aliases, and that every key documented
in ``.env.example`` is understood by the application.
"""

from pathlib import Path

import pytest

from buzzhub.server.core.config import (
    AuthConfig,
    CORSConfig,
    PostgreSQLConfig,
    Settings,
    YouTubeConfig,
)

# Keys read directly from the environment by buzzhub.core.monitoring
MONITORING_KEYS = {
    "LOGFIRE_ENABLED",
    "LOGFIRE_TOKEN",
    "LOGFIRE_ENVIRONMENT",
    "LOGFIRE_SERVICE_NAME",
    "LOGFIRE_SERVICE_VERSION",
    "LOGFIRE_TRACE_SQLALCHEMY",
    "LOGFIRE_TRACE_HTTPX",
    "LOGFIRE_TRACE_FASTAPI",
}


@pytest.fixture
def env_example_path() -> Path:
    """Get path to .env.example file."""
    return Path(__file__).resolve().parent.parent.parent.parent.parent / ".env.example"


@pytest.fixture
def env_example_vars(env_example_path: Path) -> dict[str, str]:
    """Parse .env.example file and return environment variables."""
    env_vars = {}
    with open(env_example_path) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, value = line.split("=", 1)
                env_vars[key.strip()] = value.strip()
    return env_vars


def aliases(model) -> set[str]:
    return {field.alias for field in model.model_fields.values() if field.alias}


class TestEnvExample:
    def test_every_key_is_bound(self, env_example_vars: dict[str, str]):
        known = set(MONITORING_KEYS)
        for model in (Settings, PostgreSQLConfig, CORSConfig, YouTubeConfig, AuthConfig):
            known |= aliases(model)

        assert set(env_example_vars) - known == set()

    def test_example_values_parse(self, env_example_vars: dict[str, str], monkeypatch):
        for key, value in env_example_vars.items():
            monkeypatch.setenv(key, value)

        settings = Settings()
        assert settings.server_port == 8000
        assert settings.cors.origins == ["*"]
        assert settings.youtube.api_key in (None, "")
        assert settings.youtube.cache_expiry_days == 30
        assert settings.auth.token_expiry_days == 7


class TestSettingsBinding:
    """Test Settings model environment variable binding."""

    def test_defaults(self, monkeypatch):
        for key in ("BUZZHUB_STORAGE_BACKEND", "BUZZHUB_SEED_DEFAULT_DATA", "BUZZHUB_SITE_URL"):
            monkeypatch.delenv(key, raising=False)

        settings = Settings(_env_file=None)

        assert settings.server_host == "0.0.0.0"
        assert settings.storage_backend == "memory"
        assert settings.seed_default_data is True
        assert settings.site_url == "http://localhost:8000"
        assert settings.log_format == "detailed"

    def test_server_binding(self, monkeypatch):
        monkeypatch.setenv("BUZZHUB_SERVER_HOST", "127.0.0.1")
        monkeypatch.setenv("BUZZHUB_SERVER_PORT", "9001")
        monkeypatch.setenv("BUZZHUB_LOG_LEVEL", "DEBUG")

        settings = Settings()

        assert (settings.server_host, settings.server_port, settings.log_level) == ("127.0.0.1", 9001, "DEBUG")

    def test_storage_binding(self, monkeypatch):
        monkeypatch.setenv("BUZZHUB_STORAGE_BACKEND", "sql")
        monkeypatch.setenv("BUZZHUB_SEED_DEFAULT_DATA", "false")
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///buzzhub.db")

        settings = Settings()

        assert settings.storage_backend == "sql"
        assert settings.seed_default_data is False
        assert settings.database_url == "sqlite+aiosqlite:///buzzhub.db"

    def test_invalid_storage_backend(self, monkeypatch):
        monkeypatch.setenv("BUZZHUB_STORAGE_BACKEND", "redis")

        with pytest.raises(ValueError):
            Settings()

    def test_populate_by_name(self):
        settings = Settings(server_port=1234, site_url="https://buzzhub.example")
        assert (settings.server_port, settings.site_url) == (1234, "https://buzzhub.example")


class TestGroupedConfigs:
    def test_postgres(self, monkeypatch):
        monkeypatch.setenv("POSTGRES_HOST", "db.internal")
        monkeypatch.setenv("POSTGRES_PORT", "6543")

        config = Settings().postgres

        assert isinstance(config, PostgreSQLConfig)
        assert (config.host, config.port) == ("db.internal", 6543)

    def test_cors_lists_are_json(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", '["https://a.example", "https://b.example"]')
        monkeypatch.setenv("CORS_ALLOW_CREDENTIALS", "false")

        config = Settings().cors

        assert config.origins == ["https://a.example", "https://b.example"]
        assert config.allow_credentials is False
        assert config.allow_methods == ["*"]

    def test_youtube(self, monkeypatch):
        monkeypatch.setenv("YOUTUBE_API_KEY", "abc")
        monkeypatch.setenv("YOUTUBE_CACHE_SWEEP_INTERVAL_SECONDS", "0")

        config = Settings().youtube

        assert config.api_key == "abc"
        assert config.sweep_interval_seconds == 0
        assert config.api_base_url == "https://www.googleapis.com/youtube/v3"

    def test_auth(self, monkeypatch):
        monkeypatch.setenv("AUTH_TOKEN_EXPIRY_DAYS", "14")
        monkeypatch.setenv("AUTH_COOKIE_SECURE", "true")

        config = Settings().auth

        assert isinstance(config, AuthConfig)
        assert (config.token_expiry_days, config.cookie_secure) == (14, True)

    def test_groups_are_read_fresh(self, monkeypatch):
        settings = Settings()
        monkeypatch.setenv("AUTH_TOKEN_EXPIRY_DAYS", "3")
        assert settings.auth.token_expiry_days == 3
