"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# UI defaults
# ============================================================================

THEME_DEFAULT: Final = "textual-dark"
REFRESH_INTERVAL_DEFAULT: Final = 30
AUTO_REFRESH_DEFAULT: Final = False

# ============================================================================
# Notification defaults
# ============================================================================

NOTIFICATION_SECONDS_DEFAULT: Final = 3
REFRESH_NOTIFICATION_SECONDS: Final = 2

# ============================================================================
# Settings file
# ============================================================================

CONFIG_DIR_NAME: Final = "cloudbrowse"
CONFIG_FILE_NAME: Final = "settings.yaml"
CONFIG_PATH_ENV: Final = "CLOUDBROWSE_CONFIG"

__all__ = [
    "AUTO_REFRESH_DEFAULT",
    "CONFIG_DIR_NAME",
    "CONFIG_FILE_NAME",
    "CONFIG_PATH_ENV",
    "NOTIFICATION_SECONDS_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
    "REFRESH_NOTIFICATION_SECONDS",
    "THEME_DEFAULT",
]
