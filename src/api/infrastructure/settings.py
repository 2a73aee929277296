"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Audit log database connection settings.

    Environment variables:
        GATEWAY_DB_HOST: Database host (default: localhost)
        GATEWAY_DB_PORT: Database port (default: 5432)
        GATEWAY_DB_DATABASE: Database name (default: tenant_gateway)
        GATEWAY_DB_USERNAME: Database user (default: tenant_gateway)
        GATEWAY_DB_PASSWORD: Database password (required in production)
        GATEWAY_DB_POOL_MIN_CONNECTIONS: Minimum connections in pool (default: 2)
        GATEWAY_DB_POOL_MAX_CONNECTIONS: Maximum connections in pool (default: 10)
    """

    model_config = SettingsConfigDict(
        env_prefix="GATEWAY_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="tenant_gateway", description="Database name")
    username: str = Field(default="tenant_gateway", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    pool_min_connections: int = Field(
        default=2,
        description="Minimum connections in pool",
        ge=1,
        le=100,
    )
    pool_max_connections: int = Field(
        default=10,
        description="Maximum connections in pool",
        ge=1,
        le=100,
    )

    @model_validator(mode="after")
    def validate_pool_settings(self) -> "DatabaseSettings":
        """Validate pool max >= min."""
        if self.pool_max_connections < self.pool_min_connections:
            raise ValueError(
                f"pool_max_connections ({self.pool_max_connections}) must be >= "
                f"pool_min_connections ({self.pool_min_connections})"
            )
        return self

    @property
    def connection_string(self) -> str:
        """Generate a connection string (without password for logging)."""
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"


class IdentityServiceSettings(BaseSettings):
    """SaaSus Platform API settings.

    Environment variables:
        SAASUS_SAAS_ID: SaaS ID issued by the SaaSus console
        SAASUS_API_KEY: API key issued by the SaaSus console
        SAASUS_SECRET_KEY: Secret key used to sign API requests
        SAASUS_API_BASE_URL: API root (default: https://api.saasus.io/v1)
        SAASUS_REQUEST_TIMEOUT_SECONDS: HTTP timeout per request (default: 30)
        SAASUS_ROLE_ENV_ID: Environment that registration roles are assigned in
        SAASUS_INVITATION_ENV_ID: Environment that invitations grant access to
    """

    model_config = SettingsConfigDict(
        env_prefix="SAASUS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    saas_id: str = Field(default="", description="SaaS ID")
    api_key: str = Field(default="", description="API key")
    secret_key: SecretStr = Field(
        default=SecretStr(""),
        description="Secret key for request signatures",
    )
    api_base_url: str = Field(
        default="https://api.saasus.io/v1",
        description="Root URL of the SaaSus API",
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        description="HTTP timeout for identity service requests",
        gt=0,
    )
    role_env_id: int = Field(
        default=3,
        description="Environment ID used when assigning roles to new members",
        ge=0,
    )
    invitation_env_id: int = Field(
        default=3,
        description="Environment ID granted by tenant invitations",
        ge=0,
    )

    @property
    def auth_api_url(self) -> str:
        """Base URL of the Auth API."""
        return f"{self.api_base_url.rstrip('/')}/auth"

    @property
    def pricing_api_url(self) -> str:
        """Base URL of the Pricing API."""
        return f"{self.api_base_url.rstrip('/')}/pricing"


class CORSSettings(BaseSettings):
    """CORS settings for the browser client.

    Environment variables:
        GATEWAY_CORS_ALLOWED_ORIGINS: JSON list of origins
            (default: ["http://localhost:3000"])
    """

    model_config = SettingsConfigDict(
        env_prefix="GATEWAY_CORS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    allowed_origins: list[str] = Field(
        default=["http://localhost:3000"],
        description="Origins allowed to call the API with credentials",
    )
    allowed_headers: list[str] = Field(
        default=[
            "Content-Type",
            "Authorization",
            "X-Access-Token",
            "x-requested-with",
        ],
        description="Request headers the browser may send",
    )
    allowed_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        description="HTTP methods the browser may use",
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_prefix="GATEWAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="Tenant Gateway API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")
    refresh_token_cookie_name: str = Field(
        default="SaaSusRefreshToken",
        description="Cookie holding the refresh token issued at login",
    )
    refresh_token_cookie_secure: bool = Field(
        default=False,
        description="Mark the refresh token cookie as Secure",
    )

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()

    @property
    def identity_service(self) -> IdentityServiceSettings:
        """Get identity service settings."""
        return get_identity_service_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return DatabaseSettings()


@lru_cache
def get_identity_service_settings() -> IdentityServiceSettings:
    """Get cached identity service settings."""
    return IdentityServiceSettings()


@lru_cache
def get_cors_settings() -> CORSSettings:
    """Get cached CORS settings."""
    return CORSSettings()
