"""
Configuration settings for the Parcel Tracker.

This module handles application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database Configuration
    database_url: str = "sqlite+aiosqlite:///./parcel.db"
    db_echo: bool = False

    # Logging Configuration
    log_level: str = "INFO"
    log_file: Optional[str] = None


settings = Settings()
