"""Key names understood by views.

Views receive plain key strings: Textual key names for special keys
(``"up"``, ``"enter"``, ``"escape"``...) and the literal character for
printable keys (``"/"``, ``"j"``, ``"R"``...). ``normalize_key`` turns a
Textual key event into that form.
"""

from __future__ import annotations

from typing import Final

# ============================================================================
# Key groups (vim-style aliases follow the arrow keys)
# ============================================================================

KEYS_UP: Final = frozenset({"up", "k"})
KEYS_DOWN: Final = frozenset({"down", "j"})
KEYS_LEFT: Final = frozenset({"left"})
KEYS_RIGHT: Final = frozenset({"right"})
# Field editors also accept h/l for value adjustment.
KEYS_DECREMENT: Final = frozenset({"left", "h"})
KEYS_INCREMENT: Final = frozenset({"right", "l"})
KEYS_TOGGLE: Final = frozenset({"left", "right", "tab"})

KEY_ENTER: Final = "enter"
KEY_ESCAPE: Final = "escape"
KEY_BACKSPACE: Final = "backspace"
KEY_FILTER: Final = "/"
KEY_REFRESH: Final = "r"

KEYS_CONFIRM: Final = frozenset({KEY_ENTER, KEY_ESCAPE})


def normalize_key(key: str, character: str | None, is_printable: bool) -> str:
    """Return the view-level key string for a Textual key event.

    Args:
        key: Textual key name (``event.key``).
        character: Character produced by the key, if any.
        is_printable: Whether the character is printable.

    Returns:
        The character for printable keys, the Textual key name otherwise.
    """
    if is_printable and character:
        return character
    return key


def is_text_key(key: str) -> bool:
    """Return True when the key should be appended to a filter string."""
    return len(key) == 1 and key.isprintable()


__all__ = [
    "KEYS_CONFIRM",
    "KEYS_DECREMENT",
    "KEYS_DOWN",
    "KEYS_INCREMENT",
    "KEYS_LEFT",
    "KEYS_RIGHT",
    "KEYS_TOGGLE",
    "KEYS_UP",
    "KEY_BACKSPACE",
    "KEY_ENTER",
    "KEY_ESCAPE",
    "KEY_FILTER",
    "KEY_REFRESH",
    "is_text_key",
    "normalize_key",
]
