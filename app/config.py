# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import get_settings
#   settings = get_settings()
#   print(settings.SQLITE_DSN)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# The Settings class validates all values at startup, so a missing database
# path, migrations directory or port stops the process before it serves.
# =============================================================================

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development

    A Settings instance is built once at startup and passed explicitly to
    create_app() and the database engine factory.
    """

    # -------------------------------------------------------------------------
    # Database Configuration
    # -------------------------------------------------------------------------
    # These are required - app won't start without them

    SQLITE_DSN: str = Field(
        ...,  # ... means required (no default)
        min_length=1,
        description="Path to the SQLite database file (e.g., ./data/person.db)"
    )

    SQLITE_MIGRATIONS_DIR: Path = Field(
        ...,
        description="Directory holding NNNN_name.up.sql migration files"
    )

    DB_POOL_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        gt=0,
        description="Max seconds to wait for a pooled connection"
    )

    DB_ECHO: bool = Field(
        default=False,
        description="Log every SQL statement issued by the engine"
    )

    # -------------------------------------------------------------------------
    # HTTP Server
    # -------------------------------------------------------------------------

    HTTP_SERVER_PORT: int = Field(
        ...,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    HTTP_SERVER_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    SHUTDOWN_TIMEOUT_SECONDS: int = Field(
        default=15,
        ge=0,
        description="Grace period for in-flight requests on shutdown"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root log level when DEBUG is off"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        # Load from .env file in project root
        env_file=".env",
        env_file_encoding="utf-8",
        # Treat empty variables as unset so "SQLITE_DSN=" still fails
        env_ignore_empty=True,
        # Case-sensitive environment variable names
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def database_url(self) -> str:
        """
        SQLAlchemy async URL for the configured SQLite file.

        Example: "./data/person.db" -> "sqlite+aiosqlite:///./data/person.db"
        """
        return f"sqlite+aiosqlite:///{self.SQLITE_DSN}"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access. This is the recommended pattern for
    pydantic-settings.

    Returns:
        Settings: The application settings instance

    Raises:
        pydantic.ValidationError: If a required variable is missing or invalid
    """
    return Settings()
