"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Navigation Enums
# =============================================================================


class TransitionKind(Enum):
    """Kinds of navigation stack transitions."""

    PUSH = "push"
    REPLACE = "replace"
    POP = "pop"


class InputMode(Enum):
    """Input mode a view is currently in."""

    NORMAL = "normal"
    FILTER = "filter"
    CONFIRM = "confirm"


class MenuState(Enum):
    """States of the action confirmation state machine."""

    BROWSING = "browsing"
    AWAITING_CONFIRM = "awaiting_confirm"


# =============================================================================
# Resource Action Enums
# =============================================================================


class InstanceAction(Enum):
    """Actions available on a compute instance."""

    START = "start"
    STOP = "stop"
    SOFT_REBOOT = "soft_reboot"
    REBOOT = "reboot"
    SSH = "ssh"
    DELETE = "delete"


class ClusterAction(Enum):
    """Actions available on a Kubernetes cluster."""

    KUBECONFIG = "kubeconfig"
    K9S = "k9s"
    POOLS = "pools"
    UPGRADE = "upgrade"
    POLICY = "policy"
    DELETE = "delete"


class NodePoolAction(Enum):
    """Actions available on a node pool."""

    SCALE = "scale"
    DELETE = "delete"


# =============================================================================
# Theme Enums
# =============================================================================


class ThemeMode(Enum):
    """Theme mode values."""

    DARK = "dark"
    LIGHT = "light"
