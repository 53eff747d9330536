"""Action confirmation state machine.

Detail views show a row of actions. Actions marked as requiring
confirmation need two activations in a row; moving the selection in
between always cancels the pending confirmation, so a confirmation can
never land on a different action than the one it was armed for.

States: BROWSING and AWAITING_CONFIRM.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from cloudbrowse.constants.enums import MenuState

A = TypeVar("A")


@dataclass(frozen=True)
class MenuAction(Generic[A]):
    """One entry of an action menu."""

    action: A
    label: str
    requires_confirmation: bool = True
    dangerous: bool = False


class ActionMenu(Generic[A]):
    """Ordered actions, a selected index and the confirmation state."""

    def __init__(self, actions: Sequence[MenuAction[A]]) -> None:
        if not actions:
            raise ValueError("ActionMenu needs at least one action")
        self._actions = tuple(actions)
        self._selected = 0
        self._state = MenuState.BROWSING

    @property
    def actions(self) -> tuple[MenuAction[A], ...]:
        return self._actions

    @property
    def selected_index(self) -> int:
        return self._selected

    @property
    def selected(self) -> MenuAction[A]:
        return self._actions[self._selected]

    @property
    def state(self) -> MenuState:
        return self._state

    @property
    def awaiting_confirmation(self) -> bool:
        return self._state is MenuState.AWAITING_CONFIRM

    def move_left(self) -> None:
        """Select the previous action; any pending confirmation is dropped."""
        self._selected = max(0, self._selected - 1)
        self._state = MenuState.BROWSING

    def move_right(self) -> None:
        """Select the next action; any pending confirmation is dropped."""
        self._selected = min(len(self._actions) - 1, self._selected + 1)
        self._state = MenuState.BROWSING

    def activate(self) -> MenuAction[A] | None:
        """Activate the selected action.

        Returns:
            The action to execute, or None when this activation only armed
            the confirmation.
        """
        entry = self.selected
        if not entry.requires_confirmation:
            self._state = MenuState.BROWSING
            return entry
        if self._state is MenuState.AWAITING_CONFIRM:
            self._state = MenuState.BROWSING
            return entry
        self._state = MenuState.AWAITING_CONFIRM
        return None

    def cancel(self) -> bool:
        """Handle a cancel signal.

        Returns:
            True when the menu was browsing and the view should be left,
            False when a pending confirmation was dropped instead.
        """
        if self._state is MenuState.AWAITING_CONFIRM:
            self._state = MenuState.BROWSING
            return False
        return True


__all__ = [
    "ActionMenu",
    "MenuAction",
]
