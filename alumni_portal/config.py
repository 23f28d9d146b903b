"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./alumni_portal.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    data_directory: str = Field(
        default="data",
        description="Directory holding the Event, Donation and Alumni record files",
        min_length=1,
    )
    app_timezone: str = Field(
        default="UTC",
        description="IANA timezone (or UTC±HH:MM offset) used to compute calendar days",
    )
    default_donation_goal: float = Field(
        default=1000.0,
        description="Annual giving goal applied when the user has not configured one",
        gt=0,
    )
    event_window_days: int = Field(
        default=14,
        description="Number of days ahead to look for upcoming events",
        gt=0,
    )
    max_event_reminders: int = Field(
        default=3,
        description="Maximum number of event reminders produced per generation pass",
        gt=0,
    )
    max_communications: int = Field(
        default=100,
        description="Maximum number of communications kept per user",
        gt=0,
    )
    preview_limit: int = Field(
        default=5,
        description="Number of unread communications shown in the compact preview",
        gt=0,
    )
    source_fetch_timeout_seconds: float | None = Field(
        default=None,
        description="Optional timeout applied to each record source fetch",
        gt=0,
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
