"""Compute instance views."""

from cloudbrowse.views.instances.detail import INSTANCE_ACTIONS, InstanceDetailView
from cloudbrowse.views.instances.table import InstanceTableView, instances_view

__all__ = [
    "INSTANCE_ACTIONS",
    "InstanceDetailView",
    "InstanceTableView",
    "instances_view",
]
