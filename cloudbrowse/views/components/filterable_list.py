"""Filterable list model shared by every tabular view.

The filtered sequence is never patched incrementally: every mutation
calls ``recompute()``, which rebuilds it from the backing list and the
filter text. The cursor indexes the filtered sequence and is re-clamped
each time that sequence is rebuilt.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")


class FilterableList(Generic[T]):
    """Backing items, a substring filter over text attributes, and a cursor.

    Args:
        fields: Accessors returning the searchable text of an item. An item
            matches when any accessor's value contains the filter text,
            case-insensitively.
        items: Initial backing items.
    """

    def __init__(
        self,
        fields: Sequence[Callable[[T], str]],
        items: Iterable[T] = (),
    ) -> None:
        if not fields:
            raise ValueError("FilterableList needs at least one searchable field")
        self._fields = tuple(fields)
        self._backing: list[T] = list(items)
        self._filtered: list[T] = list(self._backing)
        self._filter = ""
        self._cursor = 0

    # =========================================================================
    # Read access
    # =========================================================================

    @property
    def backing(self) -> list[T]:
        return list(self._backing)

    @property
    def filtered(self) -> list[T]:
        return list(self._filtered)

    @property
    def filter_text(self) -> str:
        return self._filter

    @property
    def cursor(self) -> int:
        return self._cursor

    def __len__(self) -> int:
        return len(self._filtered)

    def selected(self) -> T | None:
        """Item under the cursor, or None when nothing matches."""
        if not self._filtered:
            return None
        return self._filtered[self._cursor]

    # =========================================================================
    # Mutations
    # =========================================================================

    def set_backing(self, items: Iterable[T]) -> None:
        """Replace the backing items (e.g. after a re-fetch).

        The cursor stays on the same index when it is still valid, and is
        clamped to the last row otherwise.
        """
        self._backing = list(items)
        self.recompute()

    def set_filter(self, text: str) -> None:
        self._filter = text
        self.recompute()

    def append_filter_char(self, char: str) -> None:
        self._filter += char
        self.recompute()

    def backspace_filter(self) -> None:
        if self._filter:
            self._filter = self._filter[:-1]
        self.recompute()

    def clear_filter(self) -> None:
        self._filter = ""
        self.recompute()

    def move_up(self) -> None:
        self.set_cursor(self._cursor - 1)

    def move_down(self) -> None:
        self.set_cursor(self._cursor + 1)

    def set_cursor(self, index: int) -> None:
        """Move the cursor, clamped to the filtered rows."""
        self._cursor = _clamp_index(index, len(self._filtered))

    def recompute(self) -> None:
        """Rebuild the filtered sequence from backing + filter."""
        if not self._filter:
            self._filtered = list(self._backing)
        else:
            needle = self._filter.lower()
            self._filtered = [item for item in self._backing if self._matches(item, needle)]
        self._cursor = _clamp_index(self._cursor, len(self._filtered))

    def _matches(self, item: T, needle: str) -> bool:
        return any(needle in (field(item) or "").lower() for field in self._fields)


def _clamp_index(index: int, length: int) -> int:
    if length <= 0:
        return 0
    return max(0, min(index, length - 1))


__all__ = [
    "FilterableList",
]
