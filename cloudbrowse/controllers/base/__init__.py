"""Base controller classes."""

from cloudbrowse.controllers.base.base_controller import CloudApiError, CloudController

__all__ = [
    "CloudApiError",
    "CloudController",
]
