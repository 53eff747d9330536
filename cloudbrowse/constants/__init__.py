"""Constants module for the CloudBrowse TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, numbers with Final)
- timeouts.py: Interval values (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings

Note: Key names and bindings are defined in cloudbrowse.keyboard module.
"""

from cloudbrowse.constants.defaults import (
    AUTO_REFRESH_DEFAULT,
    NOTIFICATION_SECONDS_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
    THEME_DEFAULT,
)
from cloudbrowse.constants.enums import (
    ClusterAction,
    InputMode,
    InstanceAction,
    MenuState,
    NodePoolAction,
    ThemeMode,
    TransitionKind,
)
from cloudbrowse.constants.limits import (
    NODE_COUNT_MAX,
    NODE_COUNT_MIN,
    REFRESH_INTERVAL_MIN,
)
from cloudbrowse.constants.timeouts import NOTIFICATION_TICK_INTERVAL
from cloudbrowse.constants.values import (
    APP_TITLE,
    PRODUCT_INSTANCES,
    PRODUCT_KUBERNETES,
    UPDATE_POLICIES,
)

__all__ = [
    # Application
    "APP_TITLE",
    # Defaults
    "AUTO_REFRESH_DEFAULT",
    # Limits
    "NODE_COUNT_MAX",
    "NODE_COUNT_MIN",
    "NOTIFICATION_SECONDS_DEFAULT",
    # Timeouts
    "NOTIFICATION_TICK_INTERVAL",
    # Products
    "PRODUCT_INSTANCES",
    "PRODUCT_KUBERNETES",
    "REFRESH_INTERVAL_DEFAULT",
    "REFRESH_INTERVAL_MIN",
    "THEME_DEFAULT",
    "UPDATE_POLICIES",
    # Enums
    "ClusterAction",
    "InputMode",
    "InstanceAction",
    "MenuState",
    "NodePoolAction",
    "ThemeMode",
    "TransitionKind",
]
