"""CloudBrowse TUI Screens.

The browser runs on a single Textual screen that hosts the view stack:

    - browser_screen  - BrowserScreen (header, active view, footer)
    - mixins/         - Reusable screen mixins (worker lifecycle)

Example Usage:
    from cloudbrowse.screens import BrowserScreen
"""

from __future__ import annotations

from cloudbrowse.screens.browser_screen import BrowserScreen

__all__ = [
    "BrowserScreen",
]
