"""Controllers module for the CloudBrowse TUI.

Cloud API access and the routing of view effects to it.
"""

from __future__ import annotations

from cloudbrowse.controllers.base import CloudApiError, CloudController
from cloudbrowse.controllers.router import EffectRouter, Job, Route
from cloudbrowse.controllers.static import StaticCloudController

__all__ = [
    "CloudApiError",
    "CloudController",
    "EffectRouter",
    "Job",
    "Route",
    "StaticCloudController",
]
