"""Screen mixins package for the CloudBrowse TUI."""

from cloudbrowse.screens.mixins.worker_mixin import (
    EffectResult,
    JobCrashed,
    WorkerMixin,
)

__all__ = [
    "EffectResult",
    "JobCrashed",
    "WorkerMixin",
]
