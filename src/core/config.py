"""
Disaster Reporter - Configuration Management
Centralized configuration using pydantic-settings.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"

    # Backend API
    server_url: str = "http://localhost:5000"
    request_timeout_seconds: Optional[float] = None

    # Local storage
    local_store_url: str = "sqlite:///disaster_reporter.db"
    logged_in_user_key: str = "loggedInUser"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
