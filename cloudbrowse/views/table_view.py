"""Generic table view over a FilterableList.

Concrete tables declare their columns, searchable fields, title and what
Enter does. Filter mode, cursor movement, refresh and the Escape ladder
(leave filter mode, clear filter, go back) live here.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from rich.markup import escape

from cloudbrowse.constants.enums import InputMode
from cloudbrowse.constants.limits import TABLE_CHROME_ROWS, TABLE_HEIGHT_MAX, TABLE_HEIGHT_MIN
from cloudbrowse.keyboard.keys import (
    KEY_BACKSPACE,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_FILTER,
    KEY_REFRESH,
    KEYS_DOWN,
    KEYS_UP,
    is_text_key,
)
from cloudbrowse.models.state.context import BrowserContext
from cloudbrowse.views.base import BaseView, ViewResult
from cloudbrowse.views.components.filterable_list import FilterableList
from cloudbrowse.views.rendering import STYLE_MUTED, STYLE_SELECTED, render_status, truncate

T = TypeVar("T")

STYLE_FILTER_ACTIVE = "#7B68EE"
STYLE_HEADER = "bold"


@dataclass(frozen=True)
class Column(Generic[T]):
    """One table column: header, cell width and cell text accessor."""

    title: str
    width: int
    value: Callable[[T], str]
    status: bool = False


def table_height(height: int) -> int:
    """Number of visible rows for a body of ``height`` lines."""
    return max(TABLE_HEIGHT_MIN, min(TABLE_HEIGHT_MAX, height - TABLE_CHROME_ROWS))


class TableView(BaseView, Generic[T]):
    """Filterable, scrollable table of resource records."""

    columns: Sequence[Column[T]] = ()
    empty_text = "No matching items"
    # Escape in filter mode also clears the filter text.
    clear_filter_on_escape = False

    def __init__(
        self,
        ctx: BrowserContext,
        items: Iterable[T],
        search_fields: Sequence[Callable[[T], str]],
    ) -> None:
        super().__init__(ctx)
        self.list: FilterableList[T] = FilterableList(search_fields, items)
        self._filter_mode = False

    @property
    def input_mode(self) -> InputMode:
        return InputMode.FILTER if self._filter_mode else InputMode.NORMAL

    @property
    def filter_mode(self) -> bool:
        return self._filter_mode

    def update_items(self, items: Iterable[T]) -> None:
        """Replace the rows after a re-fetch; filter and cursor index are kept."""
        self.list.set_backing(items)

    # =========================================================================
    # Hooks
    # =========================================================================

    @abstractmethod
    def on_select(self, item: T) -> ViewResult:
        """Result of pressing Enter on ``item``."""
        ...

    # =========================================================================
    # Keys
    # =========================================================================

    def handle_key(self, key: str) -> ViewResult:
        if self._filter_mode:
            return self._handle_filter_key(key)

        if key == KEY_FILTER:
            self._filter_mode = True
        elif key in KEYS_UP:
            self.list.move_up()
        elif key in KEYS_DOWN:
            self.list.move_down()
        elif key == KEY_ENTER:
            item = self.list.selected()
            if item is not None:
                return self.on_select(item)
        elif key == KEY_REFRESH:
            effect = self.refresh_effect()
            if effect is not None:
                return ViewResult.emit(effect)
        elif key == KEY_ESCAPE:
            if self.list.filter_text:
                self.list.clear_filter()
            else:
                return ViewResult.go_back()
        return ViewResult.none()

    def _handle_filter_key(self, key: str) -> ViewResult:
        if key == KEY_ENTER:
            self._filter_mode = False
        elif key == KEY_ESCAPE:
            self._filter_mode = False
            if self.clear_filter_on_escape:
                self.list.clear_filter()
        elif key == KEY_BACKSPACE:
            self.list.backspace_filter()
        elif is_text_key(key):
            self.list.append_filter_char(key)
        return ViewResult.none()

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self, width: int, height: int) -> str:
        lines: list[str] = []
        filter_text = escape(self.list.filter_text)
        if self._filter_mode:
            lines.append(f"[{STYLE_FILTER_ACTIVE}]Filter: {filter_text}▌[/]")
            lines.append("")
        elif self.list.filter_text:
            lines.append(f"[{STYLE_MUTED}]Filter: {filter_text} (press / to edit)[/]")
            lines.append("")

        header = " ".join(truncate(c.title, c.width).ljust(c.width) for c in self.columns)
        lines.append(f"[{STYLE_HEADER}]{escape(header)}[/]")
        lines.append(f"[{STYLE_MUTED}]{'─' * len(header)}[/]")

        rows = self.list.filtered
        if not rows:
            lines.append(f"[{STYLE_MUTED}]{escape(self.empty_text)}[/]")
            return "\n".join(lines)

        visible = table_height(height)
        cursor = self.list.cursor
        start = max(0, cursor - visible + 1)
        for index in range(start, min(len(rows), start + visible)):
            lines.append(self._render_row(rows[index], selected=index == cursor))
        if len(rows) > visible:
            lines.append(f"[{STYLE_MUTED}]{cursor + 1}/{len(rows)}[/]")
        return "\n".join(lines)

    def _render_row(self, item: T, *, selected: bool) -> str:
        cells = []
        for column in self.columns:
            text = truncate(column.value(item) or "", column.width)
            padding = " " * (column.width - len(text))
            if column.status and not selected:
                cells.append(render_status(text) + padding)
            else:
                cells.append(escape(text) + padding)
        row = " ".join(cells)
        if selected:
            return f"[{STYLE_SELECTED}]{row}[/]"
        return row


__all__ = [
    "Column",
    "TableView",
    "table_height",
]
