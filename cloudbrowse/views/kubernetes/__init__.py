"""Managed Kubernetes views."""

from cloudbrowse.views.kubernetes.delete import DeleteConfirmView
from cloudbrowse.views.kubernetes.detail import CLUSTER_ACTIONS, ClusterDetailView
from cloudbrowse.views.kubernetes.nodepools import (
    NODE_POOL_ACTIONS,
    NodePoolDetailView,
    NodePoolScaleView,
    NodePoolsView,
)
from cloudbrowse.views.kubernetes.pickers import UpdatePolicyView, UpgradeView
from cloudbrowse.views.kubernetes.table import ClusterTableView, clusters_view

__all__ = [
    "CLUSTER_ACTIONS",
    "NODE_POOL_ACTIONS",
    "ClusterDetailView",
    "ClusterTableView",
    "DeleteConfirmView",
    "NodePoolDetailView",
    "NodePoolScaleView",
    "NodePoolsView",
    "UpdatePolicyView",
    "UpgradeView",
    "clusters_view",
]
