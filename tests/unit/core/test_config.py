"""Unit tests for settings."""

import pytest

from core.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("APP_ENV", "PORT", "API_PREFIX"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.port == 3000
        assert settings.app_env == "development"
        assert settings.api_prefix == "/api/v1"
        assert settings.is_development is True
        assert settings.is_production is False

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("APP_ENV", "production")

        settings = Settings(_env_file=None)

        assert settings.port == 8080
        assert settings.is_production is True
        assert settings.is_development is False

    def test_cors_origins_list(self) -> None:
        settings = Settings(_env_file=None, cors_origins=" http://a.test , ,http://b.test")

        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
