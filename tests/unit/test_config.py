"""
Unit tests for cloud_saas.core.config
"""
from dataclasses import FrozenInstanceError

import pytest
from cloud_saas.core.config import Settings
from cloud_saas.core.exceptions import ConfigurationError


REQUIRED = {
    "MONGO_URI": "mongodb://db:27017",
    "JWT_SECRET": "s3cret",
}


class TestSettingsFromEnv:
    def test_defaults(self):
        settings = Settings.from_env(REQUIRED)
        assert settings.mongo_uri == "mongodb://db:27017"
        assert settings.jwt_secret_key == "s3cret"
        assert settings.mongo_database_name == "cloud_saas"
        assert settings.jwt_algorithm == "HS256"
        assert settings.access_token_expire_days == 7
        assert settings.access_token_expire_seconds == 7 * 24 * 60 * 60
        assert settings.bcrypt_rounds == 10
        assert settings.port == 5000
        assert settings.cors_origins == ("*",)
        assert settings.smtp_configured is False

    @pytest.mark.parametrize("missing", ["MONGO_URI", "JWT_SECRET"])
    def test_missing_required_variable_raises(self, missing):
        env = {k: v for k, v in REQUIRED.items() if k != missing}
        with pytest.raises(ConfigurationError, match=missing):
            Settings.from_env(env)

    def test_blank_required_variable_raises(self):
        with pytest.raises(ConfigurationError):
            Settings.from_env({"MONGO_URI": "  ", "JWT_SECRET": "x"})

    def test_invalid_number_raises(self):
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            Settings.from_env({**REQUIRED, "PORT": "not-a-port"})

    def test_overrides(self):
        settings = Settings.from_env({
            **REQUIRED,
            "PORT": "8080",
            "CORS_ORIGINS": "http://a.test, http://b.test",
            "EMAIL_USER": "bot@example.com",
            "EMAIL_PASS": "pw",
            "ADMIN_EMAIL": "admin@example.com",
            "SMTP_USE_TLS": "false",
            "LOG_LEVEL": "debug",
        })
        assert settings.port == 8080
        assert settings.cors_origins == ("http://a.test", "http://b.test")
        assert settings.smtp_configured is True
        assert settings.smtp_use_tls is False
        assert settings.log_level == "DEBUG"

    def test_settings_are_immutable(self):
        settings = Settings.from_env(REQUIRED)
        with pytest.raises(FrozenInstanceError):
            settings.jwt_secret_key = "changed"
