"""
Configuration management for the Todo API.

This module handles all application settings loaded from environment variables,
providing type-safe configuration with validation and defaults.

Design decisions:
- Pydantic Settings for automatic env var loading and validation
- Separate sections for different concerns (database, app, server, security)
- Field validators ensure data integrity at startup
- Properties for computed values (is_production, is_development)
"""

from typing import Union

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.

    All settings can be overridden via environment variables.
    Example: DATABASE_URL=postgresql://localhost/todos python -m todo_api

    Configuration sections:
    1. Database - SQLAlchemy connection settings
    2. Application - Runtime behavior configuration
    3. Server - HTTP server configuration
    4. Security - CORS settings
    """

    # ===== Database Configuration =====
    database_url: str = Field(
        default="sqlite:///./todos.db",
        description="SQLAlchemy database URL for the todo store"
    )
    database_echo: bool = Field(
        default=False,
        description="Echo emitted SQL statements to the log"
    )

    # ===== Application Settings =====
    app_env: str = Field(
        default="development",
        pattern="^(development|staging|production)$",
        description="Application environment"
    )
    log_level: str = Field(
        default="info",
        pattern="^(debug|info|warning|error|critical)$",
        description="Logging level"
    )
    log_format: str = Field(
        default="json",
        pattern="^(json|console)$",
        description="Log output format (json for prod, console for dev)"
    )

    # ===== Server Configuration =====
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind host"
    )
    server_port: int = Field(
        default=8080,
        ge=1024, le=65535,
        description="Server port"
    )

    # ===== Security Configuration =====
    cors_origins: Union[str, list[str]] = Field(
        default="",
        description="Allowed CORS origins - comma-separated string or list"
    )

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Reject an empty database URL."""
        if not v or v.strip() == "":
            raise ValueError("database_url cannot be empty")
        return v.strip()

    @field_validator("log_level", "log_format", "app_env", mode="before")
    @classmethod
    def normalize_case(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @model_validator(mode="after")
    def validate_and_parse_settings(self):
        """Parse cors_origins from string to list and validate."""
        cors_value = self.cors_origins
        if isinstance(cors_value, str):
            if not cors_value or cors_value.strip() == "":
                self.cors_origins = []
            else:
                self.cors_origins = [origin.strip() for origin in cors_value.split(",") if origin.strip()]

        # Validate CORS in production
        if self.app_env == "production":
            if not self.cors_origins:
                raise ValueError("CORS origins must be configured in production")
            if "*" in self.cors_origins:
                raise ValueError("CORS wildcard not allowed in production")

        if not self.cors_origins:
            self.cors_origins = ["http://localhost:3000", "http://localhost:8080"]

        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown env vars
    )


# Singleton instance - loaded once at module import
settings = Settings()
