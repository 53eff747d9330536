"""App-level keyboard bindings.

This module contains Textual Binding objects for app-level bindings
that work from any view. Every other key is forwarded to the active view.
"""

from textual.binding import Binding

# ============================================================================
# Textual Binding objects for app-level bindings
# ============================================================================

APP_BINDINGS: list[Binding] = [
    Binding("ctrl+c", "quit", "Quit", priority=True),
    Binding("ctrl+r", "refresh", "Refresh", priority=True),
]

# Keys the browser screen intercepts before forwarding to views.
QUIT_KEY = "q"

__all__ = [
    "APP_BINDINGS",
    "QUIT_KEY",
]
