"""Cloud API collaborator contract for the CloudBrowse TUI.

Views never call the API. Effects they emit are routed to a
``CloudController``, whose coroutines run inside Textual workers so the
UI stays responsive while requests are in flight.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from cloudbrowse.constants.enums import ClusterAction, InstanceAction
from cloudbrowse.models.core.resources import Instance, KubeCluster, NodePool

logger = logging.getLogger(__name__)


class CloudApiError(Exception):
    """Raised by controllers when the cloud API rejects or fails a request."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class CloudController(ABC):
    """Asynchronous access to the project's cloud resources.

    Listing methods return typed records. Mutating methods return a short
    human-readable result used as a notification. Failures raise
    ``CloudApiError`` (any other exception is treated the same way by the
    effect router).
    """

    # =========================================================================
    # Listing
    # =========================================================================

    @abstractmethod
    async def list_instances(self) -> Sequence[Instance]:
        """Return all instances of the project."""
        ...

    @abstractmethod
    async def list_clusters(self) -> Sequence[KubeCluster]:
        """Return all managed Kubernetes clusters of the project."""
        ...

    @abstractmethod
    async def list_node_pools(self, cluster_id: str) -> Sequence[NodePool]:
        """Return the node pools of one cluster."""
        ...

    @abstractmethod
    async def list_available_versions(self, cluster_id: str) -> Sequence[str]:
        """Return the versions the cluster can be upgraded to (may be empty)."""
        ...

    # =========================================================================
    # Actions
    # =========================================================================

    @abstractmethod
    async def execute_instance_action(self, instance: Instance, action: InstanceAction) -> str:
        ...

    @abstractmethod
    async def execute_cluster_action(self, cluster: KubeCluster, action: ClusterAction) -> str:
        """Run a cluster action that needs no further input (kubeconfig, k9s)."""
        ...

    @abstractmethod
    async def scale_node_pool(
        self,
        cluster: KubeCluster,
        node_pool: NodePool,
        desired: int,
        minimum: int,
        maximum: int,
    ) -> str:
        ...

    @abstractmethod
    async def update_policy(self, cluster: KubeCluster, policy: str) -> str:
        ...

    @abstractmethod
    async def upgrade_cluster(self, cluster: KubeCluster, version: str) -> str:
        ...

    @abstractmethod
    async def delete_cluster(self, cluster: KubeCluster) -> str:
        ...

    @abstractmethod
    async def delete_node_pool(self, cluster: KubeCluster, node_pool: NodePool) -> str:
        ...


__all__ = [
    "CloudApiError",
    "CloudController",
]
