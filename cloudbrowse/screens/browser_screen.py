"""Browser screen: hosts the view stack inside Textual.

The screen owns no browsing logic. It normalizes key events, hands them
to the transition engine, routes the resulting effects, runs jobs in
workers and re-renders the active view. Layout is three ``Static``
widgets: header (title and project), body (active view) and footer
(notification or help text).
"""

from __future__ import annotations

import logging

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Static

from cloudbrowse.constants.defaults import REFRESH_NOTIFICATION_SECONDS
from cloudbrowse.constants.enums import InputMode
from cloudbrowse.constants.timeouts import NOTIFICATION_TICK_INTERVAL
from cloudbrowse.constants.values import (
    APP_TITLE,
    NOTIFY_ERROR_PREFIX,
    NOTIFY_REFRESH_PREFIX,
    NOTIFY_SUCCESS_PREFIX,
)
from cloudbrowse.controllers.router import EffectRouter
from cloudbrowse.keyboard.app import QUIT_KEY
from cloudbrowse.keyboard.keys import normalize_key
from cloudbrowse.models.state.app_settings import AppSettings
from cloudbrowse.models.state.context import BrowserContext
from cloudbrowse.screens.mixins.worker_mixin import EffectResult, JobCrashed, WorkerMixin
from cloudbrowse.views.base import View
from cloudbrowse.views.common import HomeView
from cloudbrowse.views.navigation import TransitionEngine
from cloudbrowse.views.signals import ActionFailed, ActionSucceeded, Effect, LoadFailed

logger = logging.getLogger(__name__)


class BrowserScreen(WorkerMixin, Screen[None]):
    """Single screen rendering the active view of the navigation stack."""

    DEFAULT_CSS = """
    BrowserScreen {
        layout: vertical;
    }

    #browser-header {
        height: 1;
        background: $primary;
        color: $text;
        text-style: bold;
        padding: 0 1;
    }

    #browser-body {
        height: 1fr;
        padding: 1 2;
        overflow-y: auto;
    }

    #browser-footer {
        height: 1;
        background: $panel;
        color: $text-muted;
        padding: 0 1;
    }
    """

    def __init__(
        self,
        ctx: BrowserContext,
        router: EffectRouter,
        settings: AppSettings | None = None,
        root: View | None = None,
    ) -> None:
        super().__init__()
        self.ctx = ctx
        self.router = router
        self.settings = settings or AppSettings()
        self.engine = TransitionEngine(root or HomeView(ctx))

    def compose(self) -> ComposeResult:
        yield Static("", id="browser-header", markup=True)
        yield Static("", id="browser-body", markup=True)
        yield Static("", id="browser-footer", markup=True)

    def on_mount(self) -> None:
        self.set_interval(NOTIFICATION_TICK_INTERVAL, self._refresh_footer)
        if self.settings.auto_refresh:
            self.set_interval(self.settings.refresh_interval, self._auto_refresh)
        self.ctx.resize(self.size.width, self.size.height)
        self.refresh_view()

    # =========================================================================
    # Input
    # =========================================================================

    def on_key(self, event: events.Key) -> None:
        key = normalize_key(event.key, event.character, event.is_printable)
        event.stop()
        event.prevent_default()
        if key == QUIT_KEY and self.engine.active.input_mode is not InputMode.FILTER:
            self.app.exit()
            return
        self.dispatch_effect(self.engine.dispatch_key(key))
        self.refresh_view()

    def on_resize(self, event: events.Resize) -> None:
        self.ctx.resize(event.size.width, event.size.height)
        self.refresh_view()

    def action_refresh(self) -> None:
        """Reload the active view's data."""
        effect = self.engine.active.refresh_effect()
        if effect is None:
            return
        self.ctx.set_notification(
            f"{NOTIFY_REFRESH_PREFIX} Refreshing...", REFRESH_NOTIFICATION_SECONDS
        )
        self.dispatch_effect(effect)
        self.refresh_view()

    def _auto_refresh(self) -> None:
        view = self.engine.active
        if view.input_mode is not InputMode.NORMAL:
            return
        effect = view.refresh_effect()
        if effect is not None:
            logger.debug("Auto-refresh %s", type(effect).__name__)
            self.dispatch_effect(effect)

    # =========================================================================
    # Effects and results
    # =========================================================================

    def dispatch_effect(self, effect: Effect | None) -> None:
        """Carry out an effect: apply its transition and start its job."""
        if effect is None:
            return
        route = self.router.route(effect)
        if route.notice:
            self.ctx.set_notification(route.notice)
        if route.transition is not None:
            self.engine.apply(route.transition)
        if route.job is not None:
            self.run_job(route.job, name=type(effect).__name__)

    def on_effect_result(self, event: EffectResult) -> None:
        message = event.result
        if isinstance(message, ActionSucceeded) and message.detail:
            self.ctx.set_notification(f"{NOTIFY_SUCCESS_PREFIX} {message.detail}")
        elif isinstance(message, (ActionFailed, LoadFailed)):
            self.ctx.set_notification(f"{NOTIFY_ERROR_PREFIX} {message.error}")
        self.dispatch_effect(self.engine.dispatch_message(message))
        self.refresh_view()

    def on_job_crashed(self, event: JobCrashed) -> None:
        self.ctx.set_notification(f"{NOTIFY_ERROR_PREFIX} {event.error}")
        self.refresh_view()

    def watch_pending_jobs(self, count: int) -> None:
        if self.is_mounted:
            self._refresh_header()

    # =========================================================================
    # Rendering
    # =========================================================================

    def refresh_view(self) -> None:
        """Re-render header, body and footer from the active view."""
        if not self.is_mounted:
            return
        view = self.engine.active
        body = self.query_one("#browser-body", Static)
        width = max(0, body.size.width or self.ctx.width)
        height = max(0, body.size.height or self.ctx.height)
        body.update(view.render(width, height))
        self._refresh_header()
        self._refresh_footer()

    def _refresh_header(self) -> None:
        title = self.engine.active.title()
        parts = [f"{APP_TITLE} │ {title}"]
        if self.ctx.project_label:
            parts.append(f"Project: {self.ctx.project_label}")
        if self.is_loading:
            parts.append("⏳")
        self.query_one("#browser-header", Static).update(Text("  ".join(parts)))

    def _refresh_footer(self) -> None:
        text = self.ctx.active_notification() or self.engine.active.help_text()
        self.query_one("#browser-footer", Static).update(Text(text))


__all__ = ["BrowserScreen"]
