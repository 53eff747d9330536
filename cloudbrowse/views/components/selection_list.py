"""Single-choice selection list.

Cursor over a fixed set of labelled options; up/down clamp without
wrap-around. An empty option set is a valid state: the owning view turns
into an acknowledgement screen.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

V = TypeVar("V")


@dataclass(frozen=True)
class SelectionOption(Generic[V]):
    value: V
    label: str
    description: str = ""


class SelectionList(Generic[V]):
    """Exactly-one-of-N picker."""

    def __init__(self, options: Sequence[SelectionOption[V]], selected: int = 0) -> None:
        self._options = tuple(options)
        self._selected = 0
        self.select(selected)

    @property
    def options(self) -> tuple[SelectionOption[V], ...]:
        return self._options

    @property
    def selected_index(self) -> int:
        return self._selected

    @property
    def is_empty(self) -> bool:
        return not self._options

    def selected(self) -> SelectionOption[V] | None:
        if not self._options:
            return None
        return self._options[self._selected]

    def select(self, index: int) -> None:
        """Move the cursor to ``index``, clamped to the options."""
        if not self._options:
            self._selected = 0
            return
        self._selected = max(0, min(index, len(self._options) - 1))

    def select_value(self, value: V) -> bool:
        """Move the cursor to the first option holding ``value``."""
        for index, option in enumerate(self._options):
            if option.value == value:
                self._selected = index
                return True
        return False

    def move_up(self) -> None:
        self.select(self._selected - 1)

    def move_down(self) -> None:
        self.select(self._selected + 1)


__all__ = [
    "SelectionList",
    "SelectionOption",
]
