"""
Package Configuration

Uses pydantic-settings for environment variable loading with validation.
All configuration is centralized here for easy management.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings loaded from environment variables.

    Environment variables can be set directly or via .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="AUTHKEYS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Environment
    # ==========================================================================
    environment: Literal["development", "testing", "production"] = Field(
        default="development", description="Runtime environment"
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    # ==========================================================================
    # Logging
    # ==========================================================================
    log_level: str = Field(
        default="INFO", description="Log level passed to logging.basicConfig"
    )

    # ==========================================================================
    # Default Keys
    # ==========================================================================
    seed_default_keys: bool = Field(
        default=True,
        description="Create the default admin and search keys when the key store is empty",
    )

    default_admin_description: str = Field(
        default=(
            "Default Admin API Key (Use it for all other operations. "
            "Caution! Do not use it on a public frontend)"
        ),
        description="Description given to the default admin key",
    )

    default_search_description: str = Field(
        default="Default Search API Key (Use it to search from the frontend)",
        description="Description given to the default search key",
    )

    # ==========================================================================
    # Computed Properties
    # ==========================================================================
    @computed_field
    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    @computed_field
    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == "testing"

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """Log level to apply, forced to DEBUG when debug mode is on."""
        return "DEBUG" if self.debug else self.log_level.upper()


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
