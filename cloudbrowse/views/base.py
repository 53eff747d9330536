"""View contract for the CloudBrowse TUI.

Every screen of the browser is a ``View``: a self-contained unit of UI
state that renders itself to text and reacts to keys and asynchronous
messages. Views never touch the navigation stack directly. They return
a ``ViewResult`` and the transition engine applies it.

Contract:

- ``render(width, height)`` is pure. It depends only on the view's own
  state and the given dimensions, so a resize never triggers a fetch.
- ``handle_key``/``handle_message`` may mutate only the view itself and
  the shared ``BrowserContext``.
- Out-of-range input is clamped, never raised.

Example:
    class HelloView(BaseView):
        def render(self, width: int, height: int) -> str:
            return "hello"

        def handle_key(self, key: str) -> ViewResult:
            if key == "escape":
                return ViewResult.go_back()
            return ViewResult.none()

        def title(self) -> str:
            return "Hello"

        def help_text(self) -> str:
            return "Esc: Back"
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from cloudbrowse.constants.enums import InputMode
from cloudbrowse.models.state.context import BrowserContext
from cloudbrowse.views.signals import Effect, Message, Transition


@dataclass(frozen=True)
class ViewResult:
    """Outcome of a key press or message: zero-or-one effect, zero-or-one transition."""

    effect: Effect | None = None
    transition: Transition | None = None

    @classmethod
    def none(cls) -> ViewResult:
        return _NO_RESULT

    @classmethod
    def emit(cls, effect: Effect) -> ViewResult:
        return cls(effect=effect)

    @classmethod
    def go_back(cls, depth: int = 1, effect: Effect | None = None) -> ViewResult:
        return cls(effect=effect, transition=Transition.pop(depth))

    @classmethod
    def push(cls, view: View, effect: Effect | None = None) -> ViewResult:
        return cls(effect=effect, transition=Transition.push(view))

    @classmethod
    def replace(cls, view: View, effect: Effect | None = None) -> ViewResult:
        return cls(effect=effect, transition=Transition.replace(view))

    @property
    def is_empty(self) -> bool:
        return self.effect is None and self.transition is None


_NO_RESULT = ViewResult()


class View(ABC):
    """Abstract view: one screen of the browser."""

    @abstractmethod
    def render(self, width: int, height: int) -> str:
        """Return the view content for the given dimensions."""
        ...

    @abstractmethod
    def handle_key(self, key: str) -> ViewResult:
        """Process a key press."""
        ...

    @abstractmethod
    def handle_message(self, message: Message) -> ViewResult:
        """Process an asynchronous message (effect result)."""
        ...

    @abstractmethod
    def title(self) -> str:
        """Title for the header bar."""
        ...

    @abstractmethod
    def help_text(self) -> str:
        """Contextual help for the footer."""
        ...

    @property
    def input_mode(self) -> InputMode:
        """Current input mode; FILTER means text keys are consumed by the view."""
        return InputMode.NORMAL

    def refresh_effect(self) -> Effect | None:
        """Effect that reloads this view's data, if it has any."""
        return None


class BaseView(View):
    """View with the shared context and a no-op message handler.

    Unknown messages are ignored, which is what makes a stale effect
    result harmless once the user has navigated elsewhere.
    """

    def __init__(self, ctx: BrowserContext) -> None:
        self._ctx = ctx

    @property
    def ctx(self) -> BrowserContext:
        """The shared browser context."""
        return self._ctx

    def handle_message(self, message: Message) -> ViewResult:
        return ViewResult.none()


__all__ = [
    "BaseView",
    "View",
    "ViewResult",
]
