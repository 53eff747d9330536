"""Limit and threshold constants for the TUI.

All limit values, thresholds, and validation ranges.
"""

from typing import Final

# ============================================================================
# Display limits
# ============================================================================

TABLE_HEIGHT_MIN: Final = 5
TABLE_HEIGHT_MAX: Final = 20
# Rows reserved for header, filter line and footer around a table.
TABLE_CHROME_ROWS: Final = 15
BOX_MARGIN: Final = 4

# ============================================================================
# Validation limits
# ============================================================================

REFRESH_INTERVAL_MIN: Final = 5
NODE_COUNT_MIN: Final = 0
NODE_COUNT_MAX: Final = 100

__all__ = [
    "BOX_MARGIN",
    "NODE_COUNT_MAX",
    "NODE_COUNT_MIN",
    "REFRESH_INTERVAL_MIN",
    "TABLE_CHROME_ROWS",
    "TABLE_HEIGHT_MAX",
    "TABLE_HEIGHT_MIN",
]
