"""Application settings and configuration.

This module defines all configuration options for the memberhub service.
Settings are loaded once from environment variables (or an ``.env`` file),
frozen, and then handed explicitly to the components that need them.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    ``DATABASE_URL``, ``PORT`` and ``SECRET_KEY`` are required; everything else
    has a default. Instances are immutable once constructed.
    """

    # Application metadata
    app_name: str = Field(default="memberhub", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Server binding
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(alias="PORT", gt=0, lt=65536)

    # Database configuration
    database_url: str = Field(alias="DATABASE_URL", min_length=1)
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    # Token signing
    secret_key: str = Field(alias="SECRET_KEY", min_length=1)
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=60,
        alias="ACCESS_TOKEN_EXPIRE_MINUTES",
        gt=0,
    )

    # Password hashing cost (bcrypt log2 rounds)
    bcrypt_rounds: int = Field(default=10, alias="BCRYPT_ROUNDS", ge=4, le=31)

    # Listing endpoints
    page_size: int = Field(default=10, alias="PAGE_SIZE", gt=0)

    # Whether "Community Admin"/"Community Moderator" must be held in the
    # community of the membership being removed, or in any community.
    member_removal_scope: Literal["global", "community"] = Field(
        default="global",
        alias="MEMBER_REMOVAL_SCOPE",
    )

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    @property
    def database_url_sync(self) -> str:
        """Return a sync-compatible database URL for tooling.

        Converts asyncpg URLs to psycopg for synchronous database operations
        like Alembic migrations and the ORM engine.
        """
        url = self.database_url
        if url.startswith("postgresql+asyncpg"):
            return url.replace("postgresql+asyncpg", "postgresql+psycopg", 1)
        if url.startswith("postgres://"):
            return url.replace("postgres://", "postgresql+psycopg://", 1)
        return url

    @property
    def database_dialect(self) -> str:
        """Return the scheme portion of the database URL, safe to log."""
        return self.database_url_sync.split("://", 1)[0]


@lru_cache
def get_settings() -> Settings:
    """Build the process-wide settings object once."""
    return Settings()  # type: ignore[call-arg]
