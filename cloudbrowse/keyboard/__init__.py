"""Keyboard module.

This module provides all keyboard handling for the CloudBrowse TUI:

- app: App-level bindings (APP_BINDINGS)
- keys: Key names and key groups understood by views
"""

from cloudbrowse.keyboard.app import APP_BINDINGS, QUIT_KEY
from cloudbrowse.keyboard.keys import (
    KEY_BACKSPACE,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_FILTER,
    KEY_REFRESH,
    KEYS_CONFIRM,
    KEYS_DECREMENT,
    KEYS_DOWN,
    KEYS_INCREMENT,
    KEYS_LEFT,
    KEYS_RIGHT,
    KEYS_TOGGLE,
    KEYS_UP,
    is_text_key,
    normalize_key,
)

__all__ = [
    "APP_BINDINGS",
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
    "QUIT_KEY",
    "is_text_key",
    "normalize_key",
]
