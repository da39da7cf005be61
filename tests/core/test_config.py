import pytest

from invoicing.core.config import (
    DEFAULT_DATABASE_URL,
    INSECURE_JWT_SECRET,
    SEVEN_DAYS,
    Settings,
    env_int,
)

ENV_VARS = [
    "JWT_SECRET",
    "DATABASE_URL",
    "HOST",
    "PORT",
    "LOG_LEVEL",
    "ACCESS_TOKEN_EXPIRES",
    "BCRYPT_ROUNDS",
    "ALLOWED_ORIGINS",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettingsFromEnv:
    def test_defaults(self, clean_env):
        settings = Settings.from_env()

        assert settings.jwt_secret == INSECURE_JWT_SECRET
        assert settings.uses_insecure_secret
        assert settings.database_url == DEFAULT_DATABASE_URL
        assert settings.port == 3000
        assert settings.token_ttl_seconds == SEVEN_DAYS
        assert settings.bcrypt_rounds == 10
        assert settings.allowed_origins == ["*"]

    def test_overrides(self, clean_env):
        clean_env.setenv("JWT_SECRET", "a-real-secret-value-for-production-use")
        clean_env.setenv("DATABASE_URL", "postgresql://localhost/invoices")
        clean_env.setenv("PORT", "8080")
        clean_env.setenv("LOG_LEVEL", "debug")
        clean_env.setenv("ALLOWED_ORIGINS", "http://localhost:5173, https://app.example.com")

        settings = Settings.from_env()

        assert not settings.uses_insecure_secret
        assert settings.database_url == "postgresql://localhost/invoices"
        assert settings.port == 8080
        assert settings.log_level == "DEBUG"
        assert settings.allowed_origins == ["http://localhost:5173", "https://app.example.com"]

    def test_empty_database_url_rejected(self, clean_env):
        clean_env.setenv("DATABASE_URL", "")
        with pytest.raises(ValueError):
            Settings.from_env()

    def test_bcrypt_rounds_below_minimum_fall_back(self, clean_env):
        clean_env.setenv("BCRYPT_ROUNDS", "2")
        assert Settings.from_env().bcrypt_rounds == 10


class TestEnvInt:
    def test_unset(self, clean_env):
        assert env_int("PORT", 3000) == 3000

    def test_not_a_number(self, clean_env):
        clean_env.setenv("PORT", "eighty")
        assert env_int("PORT", 3000) == 3000

    def test_below_minimum(self, clean_env):
        clean_env.setenv("PORT", "0")
        assert env_int("PORT", 3000) == 3000
