"""Main application class for the CloudBrowse TUI."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from cloudbrowse.constants import APP_TITLE, THEME_DEFAULT
from cloudbrowse.constants.enums import ThemeMode
from cloudbrowse.controllers.base import CloudController
from cloudbrowse.controllers.router import EffectRouter
from cloudbrowse.keyboard.app import APP_BINDINGS
from cloudbrowse.models.state.app_settings import AppSettings, ConfigLoadError, ConfigSaveError
from cloudbrowse.models.state.config_manager import ConfigManager
from cloudbrowse.models.state.context import BrowserContext
from cloudbrowse.screens.browser_screen import BrowserScreen

logger = logging.getLogger(__name__)


class CloudBrowserApp(App[None]):
    """Main TUI application for CloudBrowse."""

    TITLE = APP_TITLE
    BINDINGS: list[Binding] = APP_BINDINGS

    # Type hint for settings attribute
    settings: AppSettings

    def __init__(
        self,
        controller: CloudController,
        settings: AppSettings | None = None,
        config_path: Path | None = None,
        persist_settings: bool = True,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.controller = controller
        self.config_path = config_path
        self.persist_settings = persist_settings
        self.settings_error: str | None = None

        if settings is not None:
            self.settings = settings
        else:
            self._load_settings()

        self.ctx = BrowserContext(
            project_id=self.settings.project_id,
            project_name=self.settings.project_name,
            notification_seconds=self.settings.notification_seconds,
        )
        self.router = EffectRouter(controller, self.ctx)
        self._apply_theme()

    def _load_settings(self) -> None:
        """Load application settings from persistent storage."""
        try:
            self.settings = ConfigManager.load(self.config_path)
        except ConfigLoadError as e:
            # Use defaults if loading fails
            logger.warning("Falling back to default settings: %s", e)
            self.settings_error = str(e)
            self.settings = AppSettings()

    def _apply_theme(self) -> None:
        """Apply stored theme preference, mapping the light/dark shorthands."""
        theme_name = str(self.settings.theme or "").strip().lower()
        if theme_name == ThemeMode.LIGHT.value:
            theme_name = "textual-light"
        elif theme_name == ThemeMode.DARK.value:
            theme_name = "textual-dark"
        if theme_name not in self.available_themes:
            theme_name = THEME_DEFAULT
        self.settings.theme = theme_name
        self.theme = theme_name

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.push_screen(BrowserScreen(self.ctx, self.router, self.settings))
        if self.settings_error:
            self.notify(self.settings_error, title="Settings", severity="warning")

    def action_refresh(self) -> None:
        """Refresh the active view."""
        screen = self.screen
        if isinstance(screen, BrowserScreen):
            screen.action_refresh()

    def action_quit(self) -> None:  # type: ignore[override]
        """Quit the application."""
        self.exit()

    def on_unmount(self) -> None:
        """Save settings when app exits."""
        if not self.persist_settings:
            return
        try:
            ConfigManager.save(self.settings, self.config_path)
        except ConfigSaveError as e:
            logger.error("Failed to save settings: %s", e)


__all__ = [
    "CloudBrowserApp",
]
