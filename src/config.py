"""
Configuration management for the Reminders API.

Settings are loaded from environment variables (and an optional .env file),
with validation and defaults.

Design decisions:
- Pydantic Settings for automatic env var loading and validation
- Field validators ensure data integrity at startup
- Properties for computed values (is_production, is_development)
"""

from typing import Union

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.

    All settings can be overridden via environment variables.
    Example: SERVER_PORT=8080 LOG_FORMAT=json python -m src.main
    """

    # ===== Application Settings =====
    app_name: str = Field(
        default="Reminder Management API",
        description="Service name reported in logs and the health endpoint"
    )
    app_version: str = Field(
        default="0.1.0",
        description="Service version"
    )
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
        default="console",
        pattern="^(json|console)$",
        description="Log output format (json for prod, console for dev)"
    )

    # ===== Server Configuration =====
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind host"
    )
    server_port: int = Field(
        default=3000,
        ge=1, le=65535,
        description="Server port"
    )

    # ===== Security Configuration =====
    cors_origins: Union[str, list[str]] = Field(
        default="",
        description="Allowed CORS origins - comma-separated string or list"
    )

    @model_validator(mode="after")
    def parse_cors_origins(self):
        """Parse cors_origins from string to list and validate."""
        cors_value = self.cors_origins
        if isinstance(cors_value, str):
            self.cors_origins = [origin.strip() for origin in cors_value.split(",") if origin.strip()]

        if self.app_env == "production" and "*" in self.cors_origins:
            raise ValueError("CORS wildcard not allowed in production")

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
