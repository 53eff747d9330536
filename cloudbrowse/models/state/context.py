"""Shared browser context.

One instance lives for the whole process. It is passed to every view
constructor; views read the project and viewport from it and post
short-lived notifications through it. Dispatch is single-threaded, so
writes are last-write-wins without locking.
"""

from __future__ import annotations

import time

from pydantic import BaseModel

from cloudbrowse.constants.defaults import NOTIFICATION_SECONDS_DEFAULT


class BrowserContext(BaseModel):
    """Process-wide UI state shared by all views."""

    project_id: str = ""
    project_name: str = ""
    width: int = 0
    height: int = 0
    notification: str = ""
    notification_expiry: float = 0.0  # Unix timestamp
    notification_seconds: int = NOTIFICATION_SECONDS_DEFAULT

    def set_notification(
        self,
        message: str,
        duration_seconds: int | None = None,
        *,
        now: float | None = None,
    ) -> None:
        """Show ``message`` until ``duration_seconds`` from now."""
        if duration_seconds is None:
            duration_seconds = self.notification_seconds
        current = time.time() if now is None else now
        self.notification = message
        self.notification_expiry = current + duration_seconds

    def clear_notification(self) -> None:
        """Drop the current notification."""
        self.notification = ""
        self.notification_expiry = 0.0

    def active_notification(self, now: float | None = None) -> str:
        """Return the notification text while it has not expired."""
        if not self.notification:
            return ""
        current = time.time() if now is None else now
        if current >= self.notification_expiry:
            return ""
        return self.notification

    def resize(self, width: int, height: int) -> None:
        """Record new terminal dimensions."""
        self.width = max(0, width)
        self.height = max(0, height)

    @property
    def project_label(self) -> str:
        """Project name for headers, falling back to the id."""
        return self.project_name or self.project_id


__all__ = ["BrowserContext"]
