"""In-memory controller."""

from cloudbrowse.controllers.static.controller import StaticCloudController

__all__ = ["StaticCloudController"]
