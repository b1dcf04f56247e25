"""Configuration management for autogroup.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded once and is
immutable during runtime.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Autogroup configuration settings.

    Settings are loaded from environment variables prefixed with
    ``AUTOGROUP_`` and from an optional .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AUTOGROUP_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "autogroup"
    environment: Literal["development", "production", "testing"] = "development"

    # Database Settings
    database_url: str = "sqlite+aiosqlite:///./autogroup_data/autogroup.db"
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_pool_timeout: int = 30
    db_pool_recycle: int = 3600
    db_echo: bool = False

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Membership Settings
    preserve_manual: bool = Field(
        default=True,
        description="Never remove members that were added to an autogroup by hand",
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
        Settings: Cached settings instance.
    """
    return Settings()
