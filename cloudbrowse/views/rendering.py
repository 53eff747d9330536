"""Text rendering helpers shared by views.

Views render to Rich console markup; the hosting screen displays it in a
``Static``. Values coming from the API are always escaped before being
embedded so a name like ``[prod]`` is shown literally.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.markup import escape
from rich.text import Text

from cloudbrowse.constants.values import STATUS_PENDING, STATUS_RUNNING, STATUS_STOPPED
from cloudbrowse.views.components.action_menu import ActionMenu

# ============================================================================
# Styles (Rich markup)
# ============================================================================

STYLE_BOX_TITLE = "bold #7B68EE"
STYLE_LABEL = "#888888"
STYLE_RUNNING = "#00FF7F"
STYLE_STOPPED = "#FF6B6B"
STYLE_WARNING = "#FFD700"
STYLE_SELECTED = "bold white on #7B68EE"
STYLE_DANGER = "#FF6B6B"
STYLE_MUTED = "#888888"
STYLE_ERROR = "bold red"
STYLE_BORDER = "#444444"

LABEL_WIDTH = 18


def cell_len(markup: str) -> int:
    """Visible width of a markup string."""
    return Text.from_markup(markup).cell_len


def styled(text: str, style: str) -> str:
    """Escape ``text`` and wrap it in a markup style."""
    return f"[{style}]{escape(text)}[/]"


def key_value(label: str, value: str, *, raw: bool = False) -> str:
    """Label/value line; ``raw`` values are already markup."""
    rendered = value if raw else escape(value)
    return f"[{STYLE_LABEL}]{escape(label + ':'):<{LABEL_WIDTH}}[/] {rendered}"


def render_status(status: str) -> str:
    """Colour a status by its group; unknown statuses stay plain."""
    if status in STATUS_RUNNING:
        return styled(status, STYLE_RUNNING)
    if status in STATUS_STOPPED:
        return styled(status, STYLE_STOPPED)
    if status in STATUS_PENDING:
        return styled(status, STYLE_WARNING)
    return escape(status)


def render_box(title: str, lines: Sequence[str], width: int) -> str:
    """Titled box with a rounded border around markup ``lines``."""
    inner = max(10, width - 4)
    out = [styled(f"▸ {title}", STYLE_BOX_TITLE)]
    out.append(f"[{STYLE_BORDER}]╭{'─' * (inner + 2)}╮[/]")
    for line in lines or [""]:
        padding = max(0, inner - cell_len(line))
        out.append(f"[{STYLE_BORDER}]│[/] {line}{' ' * padding} [{STYLE_BORDER}]│[/]")
    out.append(f"[{STYLE_BORDER}]╰{'─' * (inner + 2)}╯[/]")
    return "\n".join(out)


def render_buttons(labels: Sequence[str], selected: int, danger: Sequence[str] = ()) -> str:
    """Row of ``[Label]`` buttons with the selected one highlighted."""
    parts = []
    for index, label in enumerate(labels):
        if index == selected:
            style = STYLE_SELECTED
        elif label in danger:
            style = STYLE_DANGER
        else:
            style = STYLE_MUTED
        parts.append(styled(f"[{label}]", style))
    return " ".join(parts)


def render_action_menu(menu: ActionMenu, width: int) -> str:
    """Actions box shared by the detail views."""
    labels = [entry.label for entry in menu.actions]
    danger = [entry.label for entry in menu.actions if entry.dangerous]
    lines = [render_buttons(labels, menu.selected_index, danger)]
    if menu.awaiting_confirmation:
        lines.append("")
        lines.append(
            styled(
                f"⚠️  Press Enter to confirm {menu.selected.label}, Escape to cancel",
                STYLE_WARNING,
            )
        )
    return render_box("Actions (←/→ to navigate, Enter to execute)", lines, width)


def render_error(message: str) -> str:
    return styled(message, STYLE_ERROR)


def truncate(text: str, width: int) -> str:
    """Cut plain text to ``width`` cells, marking the cut with an ellipsis."""
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if width == 1:
        return "…"
    return text[: width - 1] + "…"


__all__ = [
    "LABEL_WIDTH",
    "cell_len",
    "key_value",
    "render_action_menu",
    "render_box",
    "render_buttons",
    "render_error",
    "render_status",
    "styled",
    "truncate",
]
