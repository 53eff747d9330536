"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "CloudBrowse"

# ============================================================================
# Product identifiers (root menu)
# ============================================================================

PRODUCT_INSTANCES: Final = "instances"
PRODUCT_KUBERNETES: Final = "kubernetes"

# ============================================================================
# Status groups (used for status colouring)
# ============================================================================

STATUS_RUNNING: Final = frozenset({"ACTIVE", "RUNNING", "READY", "HEALTHY"})
STATUS_STOPPED: Final = frozenset({"SHUTOFF", "STOPPED", "ERROR", "FAILED", "UNHEALTHY"})
STATUS_PENDING: Final = frozenset({"BUILD", "BUILDING", "PENDING", "INSTALLING", "UPDATING"})

# ============================================================================
# Notification prefixes (markup-free, rendered by the shell)
# ============================================================================

NOTIFY_SUCCESS_PREFIX: Final = "✓"
NOTIFY_ERROR_PREFIX: Final = "✗"
NOTIFY_REFRESH_PREFIX: Final = "⟳"

# ============================================================================
# Cluster update policies
# ============================================================================

UPDATE_POLICIES: Final = ("ALWAYS_UPDATE", "MINIMAL_DOWNTIME", "NEVER_UPDATE")

UPDATE_POLICY_DESCRIPTIONS: Final = {
    "ALWAYS_UPDATE": "Automatically update to latest patch version",
    "MINIMAL_DOWNTIME": "Update with minimal service disruption",
    "NEVER_UPDATE": "Manual updates only",
}

__all__ = [
    "APP_TITLE",
    "NOTIFY_ERROR_PREFIX",
    "NOTIFY_REFRESH_PREFIX",
    "NOTIFY_SUCCESS_PREFIX",
    "PRODUCT_INSTANCES",
    "PRODUCT_KUBERNETES",
    "STATUS_PENDING",
    "STATUS_RUNNING",
    "STATUS_STOPPED",
    "UPDATE_POLICIES",
    "UPDATE_POLICY_DESCRIPTIONS",
]
