"""Database connection settings.

PostgreSQL through the async psycopg driver is the production target.
Any SQLAlchemy async URL can be supplied via DB_DATABASE_URL, which is how
local runs and tests point the service at SQLite (aiosqlite).
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote_plus

from pydantic import Field, SecretStr, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_sources import create_yaml_source


class PostgresSettings(BaseSettings):
    """Database configuration.

    Environment variables use DB_ prefix.
    Example: DB_HOST=db, DB_DATABASE_URL=sqlite+aiosqlite:///./traveller.db
    """

    enabled: bool = Field(
        default=True,
        description="Enable database integration. Set to False for stateless test apps.",
    )
    database_url: str | None = Field(
        default=None,
        description="Complete SQLAlchemy async URL; overrides the component fields.",
    )

    host: str = Field(default="localhost", min_length=1, description="PostgreSQL host.")
    port: int = Field(default=5432, ge=1, le=65535, description="PostgreSQL port.")
    user: str = Field(default="postgres", min_length=1, description="Database username.")
    password: SecretStr = Field(default=SecretStr("postgres"), description="Database password.")
    name: str = Field(default="traveller", min_length=1, description="Database name.")
    driver: str = Field(default="psycopg", description="SQLAlchemy async driver.")
    application_name: str = Field(
        default="traveller-service",
        description="Application name reported to PostgreSQL (visible in pg_stat_activity).",
    )

    pool_size: int = Field(default=10, ge=1, le=100, description="Connection pool size.")
    max_overflow: int = Field(default=10, ge=0, le=100, description="Burst connections above pool_size.")
    pool_pre_ping: bool = Field(default=True, description="Check connections before use.")
    pool_timeout: float = Field(default=30.0, ge=0.1, le=300.0, description="Pool checkout timeout (s).")
    pool_recycle: int = Field(default=1800, ge=0, le=86400, description="Recycle connections after N seconds.")
    echo: bool = Field(default=False, description="Echo SQL statements to logs (debug only).")

    create_tables: bool = Field(
        default=False,
        description="Create missing tables on startup (local development and SQLite runs).",
    )

    model_config = SettingsConfigDict(
        env_prefix="DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
        env_ignore_empty=True,
    )

    @classmethod
    def settings_customise_sources(
        cls, settings_cls, init_settings, env_settings, dotenv_settings, file_secret_settings
    ):
        """Customize settings source precedence: init > yaml > env > dotenv > secrets."""
        return (
            init_settings,
            create_yaml_source(settings_cls, "db", "DB_"),
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )

    @computed_field  # type: ignore[misc]
    @property
    def url(self) -> str:
        """SQLAlchemy async database URL."""
        if self.database_url:
            return self.database_url

        safe_password = quote_plus(self.password.get_secret_value())
        safe_app_name = quote_plus(self.application_name)
        return (
            f"postgresql+{self.driver}://{self.user}:{safe_password}"
            f"@{self.host}:{self.port}/{self.name}?application_name={safe_app_name}"
        )

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @property
    def is_configured(self) -> bool:
        """Check if database is enabled with usable connection info."""
        return self.enabled and bool(self.database_url or (self.host and self.name))

    def sqlalchemy_engine_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for create_async_engine.

        SQLite engines get no pool sizing options.

        Example:
            engine = create_async_engine(db_settings.url, **db_settings.sqlalchemy_engine_kwargs())
        """
        if self.is_sqlite:
            return {"echo": self.echo}
        return {
            "pool_size": self.pool_size,
            "max_overflow": self.max_overflow,
            "pool_pre_ping": self.pool_pre_ping,
            "pool_timeout": self.pool_timeout,
            "pool_recycle": self.pool_recycle,
            "echo": self.echo,
        }
