"""Application settings models."""

from pydantic import BaseModel, ConfigDict, field_validator

from cloudbrowse.constants.defaults import (
    AUTO_REFRESH_DEFAULT,
    NOTIFICATION_SECONDS_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
    THEME_DEFAULT,
)
from cloudbrowse.constants.limits import REFRESH_INTERVAL_MIN


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    # Project
    project_id: str = ""
    project_name: str = ""

    # UI preferences
    theme: str = THEME_DEFAULT
    auto_refresh: bool = AUTO_REFRESH_DEFAULT
    refresh_interval: int = REFRESH_INTERVAL_DEFAULT  # seconds
    notification_seconds: int = NOTIFICATION_SECONDS_DEFAULT

    @field_validator("refresh_interval")
    @classmethod
    def _clamp_refresh_interval(cls, value: int) -> int:
        return max(REFRESH_INTERVAL_MIN, value)

    @field_validator("notification_seconds")
    @classmethod
    def _positive_notification(cls, value: int) -> int:
        return max(1, value)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
