# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.PORT)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Nothing here is required: missing email credentials simply put the
# notifier into log-only mode.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Read once at process start. Tests build their own instance and pass it
    to `create_app()` instead of relying on the global one.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, auto-reload)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    SEED_TEST_USER: bool = Field(
        default=True,
        description="Create the test@wellnesshub.com account at startup"
    )

    # -------------------------------------------------------------------------
    # Security
    # -------------------------------------------------------------------------

    JWT_SECRET: str = Field(
        default="dev-secret-key-change-in-production",
        min_length=16,
        description="Shared secret for signing bearer tokens"
    )

    TOKEN_TTL_HOURS: int = Field(
        default=24,
        ge=1,
        le=24 * 30,
        description="Lifetime of issued bearer tokens"
    )

    BCRYPT_ROUNDS: int = Field(
        default=10,
        ge=4,
        le=16,
        description="bcrypt cost factor for password hashing"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins in production (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Email Configuration
    # -------------------------------------------------------------------------
    # Both EMAIL_USER and EMAIL_PASS must be set to send real email

    EMAIL_USER: str | None = Field(
        default=None,
        description="SMTP login (also the default sender)"
    )

    EMAIL_PASS: str | None = Field(
        default=None,
        description="SMTP password or app password"
    )

    SMTP_HOST: str = Field(
        default="smtp.gmail.com",
        description="SMTP server host"
    )

    SMTP_PORT: int = Field(
        default=587,
        ge=1,
        le=65535,
        description="SMTP server port (STARTTLS)"
    )

    SMTP_TIMEOUT: float = Field(
        default=10.0,
        gt=0,
        description="Seconds before an SMTP connection attempt gives up"
    )

    MAIL_FROM: str | None = Field(
        default=None,
        description="Sender address (defaults to EMAIL_USER)"
    )

    ADMIN_EMAIL: str | None = Field(
        default=None,
        description="Recipient of contact-form notifications (defaults to EMAIL_USER)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Treat VAR= as unset
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://wellnesshub.com" -> ["http://localhost:3000", "https://wellnesshub.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def email_enabled(self) -> bool:
        """Email is sent only when both SMTP credentials are present."""
        return bool(self.EMAIL_USER and self.EMAIL_PASS)

    @property
    def mail_sender(self) -> str | None:
        return self.MAIL_FROM or self.EMAIL_USER

    @property
    def admin_recipient(self) -> str | None:
        return self.ADMIN_EMAIL or self.EMAIL_USER

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
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
