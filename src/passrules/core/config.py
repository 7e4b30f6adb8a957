"""Configuration management for passrules.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded once and is
immutable during runtime.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated at load time.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PASSRULES_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Application Settings
    app_name: str = "passrules"
    app_version: str = "0.1.0"
    environment: Literal["development", "production", "testing"] = "development"

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Password Policy Settings
    min_length: int = Field(
        default=8,
        ge=0,
        description="Minimum password length in storage units",
    )
    require_digit: bool = Field(default=True, description="Require at least one digit")
    require_case: bool = Field(
        default=True,
        description="Require at least one lowercase and one uppercase ASCII letter",
    )
    require_symbol: bool = Field(
        default=True,
        description="Require at least one symbol from !@#$%^&*(){}[]?<>",
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
