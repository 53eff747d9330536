"""Settings persistence (YAML file in the user config directory)."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from cloudbrowse.constants.defaults import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    CONFIG_PATH_ENV,
)
from cloudbrowse.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Load and save AppSettings."""

    @staticmethod
    def config_path() -> Path:
        """Return the settings file path.

        ``CLOUDBROWSE_CONFIG`` wins, then ``$XDG_CONFIG_HOME``, then ``~/.config``.
        """
        override = os.environ.get(CONFIG_PATH_ENV, "").strip()
        if override:
            return Path(override).expanduser()
        base = os.environ.get("XDG_CONFIG_HOME", "").strip()
        config_home = Path(base).expanduser() if base else Path.home() / ".config"
        return config_home / CONFIG_DIR_NAME / CONFIG_FILE_NAME

    @classmethod
    def load(cls, path: Path | None = None) -> AppSettings:
        """Load settings, returning defaults when no file exists.

        Raises:
            ConfigLoadError: The file exists but cannot be read or validated.
        """
        target = path or cls.config_path()
        if not target.exists():
            logger.debug("No settings file at %s, using defaults", target)
            return AppSettings()
        try:
            with target.open(encoding="utf-8") as handle:
                raw = yaml.safe_load(handle) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(f"Cannot read {target}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigLoadError(f"Settings file {target} must contain a mapping")
        try:
            return AppSettings.model_validate(raw)
        except ValidationError as e:
            raise ConfigLoadError(f"Invalid settings in {target}: {e}") from e

    @classmethod
    def save(cls, settings: AppSettings, path: Path | None = None) -> Path:
        """Write settings to disk and return the path written.

        Raises:
            ConfigSaveError: The file cannot be written.
        """
        target = path or cls.config_path()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with target.open("w", encoding="utf-8") as handle:
                yaml.safe_dump(
                    settings.model_dump(),
                    handle,
                    default_flow_style=False,
                    sort_keys=False,
                )
        except OSError as e:
            raise ConfigSaveError(f"Cannot write {target}: {e}") from e
        logger.debug("Settings saved to %s", target)
        return target


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
