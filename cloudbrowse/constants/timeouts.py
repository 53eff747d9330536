"""Timeout constants for the TUI.

Interval values for refresh cycles and notification housekeeping.
The core never enforces API timeouts; those belong to the cloud client.
"""

from typing import Final

# ============================================================================
# Shell intervals (float, in seconds)
# ============================================================================

NOTIFICATION_TICK_INTERVAL: Final = 0.5

__all__ = [
    "NOTIFICATION_TICK_INTERVAL",
]
