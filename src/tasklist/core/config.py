"""Configuration management for Tasklist.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded at application
startup and is immutable during runtime.
"""

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_SECRET_KEY = "change-me-in-production-use-openssl-rand-hex-32"

# Read from the environment as comma-separated strings, not JSON
HeaderList = Annotated[list[str], NoDecode]


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TASKLIST_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "Tasklist"
    app_version: str = "0.1.0"
    environment: Literal["development", "production", "testing"] = "development"
    debug: bool = False

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 3000
    workers: int = 1

    # Database Settings
    database_url: str = "sqlite+aiosqlite:///./data/tasklist.db"
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_pool_timeout: int = 30
    db_pool_recycle: int = 3600
    db_echo: bool = False

    # Token Settings
    secret_key: str = Field(
        default=DEFAULT_SECRET_KEY,
        description="Secret key for access token signing",
    )
    jwt_issuer: str = "tasklist"
    access_token_expire_minutes: int = 15
    refresh_token_expire_days: int = 10
    refresh_token_bytes: int = 64

    # Credential Settings
    password_hash_cost: int = Field(
        default=3,
        ge=1,
        description="Work factor (argon2 time_cost) used when hashing passwords",
    )
    password_min_length: int = 8
    prune_expired_sessions: bool = Field(
        default=False,
        description="Delete a user's expired sessions whenever a new session is created",
    )

    # CORS Settings
    cors_allow_origin: str = "*"
    cors_allow_methods: HeaderList = Field(
        default=["GET", "POST", "HEAD", "OPTIONS", "PUT", "PATCH", "DELETE"]
    )
    cors_allow_headers: HeaderList = Field(
        default=[
            "Origin",
            "X-Requested-With",
            "Content-Type",
            "Accept",
            "x-access-token",
            "x-refresh-token",
            "_id",
        ]
    )
    cors_expose_headers: HeaderList = Field(default=["x-access-token", "x-refresh-token"])

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    @field_validator("cors_allow_methods", "cors_allow_headers", "cors_expose_headers", mode="before")
    @classmethod
    def parse_header_list(cls, v: str | list[str]) -> list[str]:
        """Parse header lists from comma-separated string or list."""
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @model_validator(mode="after")
    def validate_sqlite_workers(self) -> "Settings":
        """Validate that SQLite is not used with multiple workers."""
        if self.workers > 1 and self.database_url.startswith("sqlite"):
            raise ValueError(
                "SQLite does not support multiple worker processes. "
                f"Requested {self.workers} workers, but SQLite requires workers=1. "
                "Either use --workers 1 or switch to PostgreSQL."
            )
        return self

    @model_validator(mode="after")
    def validate_secret_key(self) -> "Settings":
        """Refuse the built-in signing secret in production."""
        if self.is_production and self.secret_key == DEFAULT_SECRET_KEY:
            raise ValueError(
                "TASKLIST_SECRET_KEY must be set in production; "
                "the default secret would let anyone forge access tokens."
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    This function caches the settings instance to avoid reloading
    configuration on every call. Settings are loaded once at startup.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
