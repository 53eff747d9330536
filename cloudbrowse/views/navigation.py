"""Navigation stack and transition engine.

The engine is the only code that mutates the stack. Views express
navigation by returning a ``Transition`` inside their ``ViewResult``;
the engine applies it before the next event is processed.

- PUSH: new view on top, the previous one goes dormant with its state kept.
- POP: remove the top ``depth`` views, never the root.
- REPLACE: swap the top view in one step.
"""

from __future__ import annotations

import logging

from cloudbrowse.constants.enums import TransitionKind
from cloudbrowse.views.base import View, ViewResult
from cloudbrowse.views.signals import Effect, Message, Transition

logger = logging.getLogger(__name__)


class NavigationStack:
    """Ordered views, top is active. Never empty."""

    def __init__(self, root: View) -> None:
        self._views: list[View] = [root]

    @property
    def active(self) -> View:
        """The view receiving input."""
        return self._views[-1]

    @property
    def root(self) -> View:
        return self._views[0]

    @property
    def depth(self) -> int:
        return len(self._views)

    def views(self) -> tuple[View, ...]:
        """Snapshot of the stack, bottom first."""
        return tuple(self._views)

    def push(self, view: View) -> None:
        self._views.append(view)

    def pop(self, depth: int = 1) -> list[View]:
        """Remove up to ``depth`` views, keeping the root.

        Returns:
            The removed views, top first. Empty when only the root is left.
        """
        removed: list[View] = []
        for _ in range(max(0, depth)):
            if len(self._views) <= 1:
                break
            removed.append(self._views.pop())
        return removed

    def replace(self, view: View) -> View:
        """Swap the active view for ``view`` and return the old one."""
        old = self._views[-1]
        self._views[-1] = view
        return old


class TransitionEngine:
    """Dispatches events to the active view and applies its transitions."""

    def __init__(self, root: View) -> None:
        self.stack = NavigationStack(root)

    @property
    def active(self) -> View:
        return self.stack.active

    def dispatch_key(self, key: str) -> Effect | None:
        """Send a key to the active view; return its effect, if any."""
        return self._settle(self.stack.active.handle_key(key))

    def dispatch_message(self, message: Message) -> Effect | None:
        """Send an asynchronous message to the view active right now."""
        return self._settle(self.stack.active.handle_message(message))

    def apply(self, transition: Transition) -> None:
        """Apply one transition to the stack."""
        if transition.kind is TransitionKind.PUSH:
            if transition.view is None:
                logger.warning("Ignoring push transition without a view")
                return
            self.stack.push(transition.view)
        elif transition.kind is TransitionKind.REPLACE:
            if transition.view is None:
                logger.warning("Ignoring replace transition without a view")
                return
            self.stack.replace(transition.view)
        elif transition.kind is TransitionKind.POP:
            removed = self.stack.pop(transition.depth)
            if not removed:
                logger.debug("Pop on root view ignored")
                return
        logger.debug(
            "Applied %s -> %s (depth %d)",
            transition.kind.value,
            type(self.stack.active).__name__,
            self.stack.depth,
        )

    def _settle(self, result: ViewResult) -> Effect | None:
        if result.transition is not None:
            self.apply(result.transition)
        return result.effect


__all__ = [
    "NavigationStack",
    "TransitionEngine",
]
