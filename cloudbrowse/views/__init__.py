"""View state machine of the browser.

Views are plain Python objects, independent of Textual: the hosting
screen feeds them keys and effect results and displays what they render.
"""

from cloudbrowse.views.base import BaseView, View, ViewResult
from cloudbrowse.views.navigation import NavigationStack, TransitionEngine

__all__ = [
    "BaseView",
    "NavigationStack",
    "TransitionEngine",
    "View",
    "ViewResult",
]
