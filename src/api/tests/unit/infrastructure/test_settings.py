"""Unit tests for infrastructure settings."""

import pytest
from pydantic import ValidationError

from infrastructure.settings import (
    CORSSettings,
    DatabaseSettings,
    IdentityServiceSettings,
    Settings,
)


class TestDatabaseSettingsPoolConfiguration:
    """Tests for connection pool configuration."""

    def test_default_pool_settings(self):
        """Should have sensible pool defaults."""
        settings = DatabaseSettings()
        assert settings.pool_min_connections >= 1
        assert settings.pool_max_connections >= settings.pool_min_connections
        assert settings.pool_max_connections <= 20

    def test_pool_settings_from_fields(self):
        """Should accept pool settings via constructor."""
        settings = DatabaseSettings(pool_min_connections=5, pool_max_connections=15)
        assert settings.pool_min_connections == 5
        assert settings.pool_max_connections == 15

    def test_pool_max_must_be_greater_than_or_equal_to_min(self):
        """Should validate max >= min."""
        with pytest.raises(ValidationError) as exc_info:
            DatabaseSettings(pool_min_connections=10, pool_max_connections=5)

        assert "pool_max_connections" in str(exc_info.value)

    def test_pool_max_equal_to_min_is_valid(self):
        """Should allow max == min."""
        settings = DatabaseSettings(pool_min_connections=5, pool_max_connections=5)
        assert settings.pool_min_connections == settings.pool_max_connections == 5

    def test_pool_min_must_be_positive(self):
        """Pool min connections must be >= 1."""
        with pytest.raises(ValidationError):
            DatabaseSettings(pool_min_connections=0)

    def test_pool_max_respects_upper_limit(self):
        """Pool max should not exceed reasonable limit."""
        with pytest.raises(ValidationError):
            DatabaseSettings(pool_max_connections=101)

    def test_connection_string_hides_password(self):
        settings = DatabaseSettings(
            host="db", port=5433, database="audit", username="gw", password="hunter2"
        )
        assert settings.connection_string == "postgresql://gw@db:5433/audit"
        assert "hunter2" not in settings.connection_string


class TestDatabaseSettingsEnvironment:
    """Tests for environment variable loading."""

    def test_reads_prefixed_variables(self, monkeypatch):
        monkeypatch.setenv("GATEWAY_DB_HOST", "audit-db")
        monkeypatch.setenv("GATEWAY_DB_PORT", "6543")

        settings = DatabaseSettings()

        assert settings.host == "audit-db"
        assert settings.port == 6543


class TestIdentityServiceSettings:
    """Tests for SaaSus API settings."""

    def test_derives_api_urls_from_base(self):
        settings = IdentityServiceSettings(api_base_url="https://api.example.test/v1/")
        assert settings.auth_api_url == "https://api.example.test/v1/auth"
        assert settings.pricing_api_url == "https://api.example.test/v1/pricing"

    def test_env_ids_default_to_three(self):
        settings = IdentityServiceSettings()
        assert settings.role_env_id == 3
        assert settings.invitation_env_id == 3

    def test_reads_saasus_prefixed_variables(self, monkeypatch):
        monkeypatch.setenv("SAASUS_SAAS_ID", "saas-1")
        monkeypatch.setenv("SAASUS_SECRET_KEY", "top-secret")
        monkeypatch.setenv("SAASUS_ROLE_ENV_ID", "1")

        settings = IdentityServiceSettings()

        assert settings.saas_id == "saas-1"
        assert settings.secret_key.get_secret_value() == "top-secret"
        assert "top-secret" not in repr(settings)
        assert settings.role_env_id == 1

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            IdentityServiceSettings(request_timeout_seconds=0)


class TestCORSSettings:
    """Tests for CORS settings."""

    def test_allows_access_token_header(self):
        assert "X-Access-Token" in CORSSettings().allowed_headers

    def test_reads_origins_as_json_list(self, monkeypatch):
        monkeypatch.setenv(
            "GATEWAY_CORS_ALLOWED_ORIGINS", '["https://app.example.test"]'
        )
        assert CORSSettings().allowed_origins == ["https://app.example.test"]


class TestSettings:
    """Tests for top-level settings."""

    def test_refresh_cookie_defaults(self):
        settings = Settings()
        assert settings.refresh_token_cookie_name == "SaaSusRefreshToken"
        assert settings.refresh_token_cookie_secure is False
