"""Core resource models."""

from cloudbrowse.models.core.resources import (
    Instance,
    IPAddress,
    KubeCluster,
    NodePool,
    ResourceModel,
    total_current_nodes,
)

__all__ = [
    "IPAddress",
    "Instance",
    "KubeCluster",
    "NodePool",
    "ResourceModel",
    "total_current_nodes",
]
