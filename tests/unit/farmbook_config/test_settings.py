"""Unit tests for application settings."""

from pydantic import SecretStr

from farmbook_config import Settings, get_settings


class TestSettings:
    """Tests for environment-driven settings."""

    def test_token_settings_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET", "from-env")
        monkeypatch.setenv("JWT_EXPIRES_IN", "12h")

        settings = Settings()

        assert settings.jwt_secret.get_secret_value() == "from-env"
        assert settings.jwt_expires_in == "12h"

    def test_token_settings_absent_by_default(self):
        settings = Settings()

        assert settings.jwt_secret is None
        assert settings.jwt_expires_in is None

    def test_blank_lifetime_is_treated_as_missing(self, monkeypatch):
        monkeypatch.setenv("JWT_EXPIRES_IN", "   ")

        assert Settings().jwt_expires_in is None

    def test_database_url_built_from_postgres_parts(self):
        settings = Settings(
            postgres_host="db",
            postgres_port=5433,
            postgres_user="farm",
            postgres_password=SecretStr("pw"),
        )

        assert settings.database_url == "postgresql+asyncpg://farm:pw@db:5433/rdf"

    def test_database_url_override_wins(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

        assert Settings().database_url == "sqlite+aiosqlite:///:memory:"

    def test_cors_origins_split_from_comma_string(self):
        settings = Settings(api_cors_origins="http://a.test, http://b.test,")

        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
