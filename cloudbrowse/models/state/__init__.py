"""Application state models (shared context and settings)."""

from cloudbrowse.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)
from cloudbrowse.models.state.config_manager import ConfigManager
from cloudbrowse.models.state.context import BrowserContext

__all__ = [
    "AppSettings",
    "BrowserContext",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
