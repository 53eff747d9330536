"""In-memory cloud controller.

Serves a fixed project from memory (or from a YAML fixture file) and
applies actions to that state, so the browser can be driven end to end
without credentials. Used by the demo entry point and the test suite.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from cloudbrowse.constants.enums import ClusterAction, InstanceAction
from cloudbrowse.constants.values import UPDATE_POLICIES
from cloudbrowse.controllers.base import CloudApiError, CloudController
from cloudbrowse.models.core.resources import Instance, KubeCluster, NodePool

logger = logging.getLogger(__name__)

_INSTANCE_STATUS_AFTER = {
    InstanceAction.START: "ACTIVE",
    InstanceAction.STOP: "SHUTOFF",
    InstanceAction.SOFT_REBOOT: "ACTIVE",
    InstanceAction.REBOOT: "ACTIVE",
}

_ACTION_NAMES = {
    InstanceAction.START: "Start",
    InstanceAction.STOP: "Stop",
    InstanceAction.SOFT_REBOOT: "Soft reboot",
    InstanceAction.REBOOT: "Reboot",
}


class StaticCloudController(CloudController):
    """CloudController backed by in-memory records.

    Args:
        instances: Initial instances.
        clusters: Initial clusters.
        node_pools: Node pools by cluster id.
        versions: Upgrade targets by cluster id.
        latency: Seconds every call sleeps before answering.
        failures: Method name -> error message; those methods raise
            ``CloudApiError`` instead of answering.
    """

    def __init__(
        self,
        instances: Iterable[Instance] = (),
        clusters: Iterable[KubeCluster] = (),
        node_pools: Mapping[str, Iterable[NodePool]] | None = None,
        versions: Mapping[str, Sequence[str]] | None = None,
        *,
        latency: float = 0.0,
        failures: Mapping[str, str] | None = None,
    ) -> None:
        self.instances: list[Instance] = list(instances)
        self.clusters: list[KubeCluster] = list(clusters)
        self.node_pools: dict[str, list[NodePool]] = {
            cluster_id: list(pools) for cluster_id, pools in (node_pools or {}).items()
        }
        self.versions: dict[str, list[str]] = {
            cluster_id: list(items) for cluster_id, items in (versions or {}).items()
        }
        self.latency = latency
        self.failures: dict[str, str] = dict(failures or {})
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], **kwargs: Any) -> StaticCloudController:
        """Build from API-shaped maps (camelCase keys)."""
        return cls(
            instances=[Instance.model_validate(item) for item in data.get("instances") or []],
            clusters=[KubeCluster.model_validate(item) for item in data.get("clusters") or []],
            node_pools={
                str(cluster_id): [NodePool.model_validate(item) for item in pools or []]
                for cluster_id, pools in (data.get("nodePools") or {}).items()
            },
            versions={
                str(cluster_id): [str(v) for v in items or []]
                for cluster_id, items in (data.get("versions") or {}).items()
            },
            **kwargs,
        )

    @classmethod
    def from_yaml(cls, path: Path, **kwargs: Any) -> StaticCloudController:
        """Load a fixture file with ``instances``/``clusters``/``nodePools``/``versions``."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise CloudApiError(f"Cannot read fixture {path}: {e}") from e
        if not isinstance(data, dict):
            raise CloudApiError(f"Fixture {path} must contain a mapping")
        return cls.from_mapping(data, **kwargs)

    # =========================================================================
    # Listing
    # =========================================================================

    async def list_instances(self) -> Sequence[Instance]:
        await self._call("list_instances")
        return tuple(self.instances)

    async def list_clusters(self) -> Sequence[KubeCluster]:
        await self._call("list_clusters")
        return tuple(self.clusters)

    async def list_node_pools(self, cluster_id: str) -> Sequence[NodePool]:
        await self._call("list_node_pools", cluster_id)
        return tuple(self.node_pools.get(cluster_id, ()))

    async def list_available_versions(self, cluster_id: str) -> Sequence[str]:
        await self._call("list_available_versions", cluster_id)
        return tuple(self.versions.get(cluster_id, ()))

    # =========================================================================
    # Actions
    # =========================================================================

    async def execute_instance_action(self, instance: Instance, action: InstanceAction) -> str:
        await self._call("execute_instance_action", instance.id, action)
        index = self._instance_index(instance.id)
        if action is InstanceAction.DELETE:
            del self.instances[index]
            return "Instance deleted successfully!"
        if action is InstanceAction.SSH:
            address = instance.floating_ip or next(iter(instance.ipv4_addresses(public=True)), "")
            if not address:
                raise CloudApiError(f"Instance {instance.name} has no public IPv4 address")
            return f"ssh ubuntu@{address}"
        self.instances[index] = self.instances[index].model_copy(
            update={"status": _INSTANCE_STATUS_AFTER[action]}
        )
        return f"{_ACTION_NAMES[action]} initiated successfully!"

    async def execute_cluster_action(self, cluster: KubeCluster, action: ClusterAction) -> str:
        await self._call("execute_cluster_action", cluster.id, action)
        self._cluster_index(cluster.id)
        if action is ClusterAction.KUBECONFIG:
            return f"Kubeconfig for {cluster.name} saved to ~/.kube/config"
        if action is ClusterAction.K9S:
            return f"k9s --context {cluster.name}"
        raise CloudApiError(f"Action {action.value} needs more input and cannot run directly")

    async def scale_node_pool(
        self,
        cluster: KubeCluster,
        node_pool: NodePool,
        desired: int,
        minimum: int,
        maximum: int,
    ) -> str:
        await self._call("scale_node_pool", cluster.id, node_pool.id, desired, minimum, maximum)
        pools = self.node_pools.get(cluster.id, [])
        for index, pool in enumerate(pools):
            if pool.id == node_pool.id:
                pools[index] = pool.model_copy(
                    update={
                        "desired_nodes": desired,
                        "min_nodes": minimum,
                        "max_nodes": maximum,
                        "current_nodes": desired,
                    }
                )
                return f"Node pool '{node_pool.name}' scaled to {desired} nodes"
        raise CloudApiError(f"Node pool {node_pool.id} not found", status=404)

    async def update_policy(self, cluster: KubeCluster, policy: str) -> str:
        await self._call("update_policy", cluster.id, policy)
        if policy not in UPDATE_POLICIES:
            raise CloudApiError(f"Unknown update policy {policy}", status=400)
        index = self._cluster_index(cluster.id)
        self.clusters[index] = self.clusters[index].model_copy(update={"update_policy": policy})
        return f"Update policy set to {policy}"

    async def upgrade_cluster(self, cluster: KubeCluster, version: str) -> str:
        await self._call("upgrade_cluster", cluster.id, version)
        available = self.versions.get(cluster.id, [])
        if version not in available:
            raise CloudApiError(f"Version {version} is not available for {cluster.name}", status=400)
        index = self._cluster_index(cluster.id)
        self.clusters[index] = self.clusters[index].model_copy(
            update={"version": version, "status": "UPDATING"}
        )
        self.versions[cluster.id] = [v for v in available if v != version]
        return f"Upgrade of {cluster.name} to {version} started"

    async def delete_cluster(self, cluster: KubeCluster) -> str:
        await self._call("delete_cluster", cluster.id)
        del self.clusters[self._cluster_index(cluster.id)]
        self.node_pools.pop(cluster.id, None)
        return f"Cluster '{cluster.name}' deleted"

    async def delete_node_pool(self, cluster: KubeCluster, node_pool: NodePool) -> str:
        await self._call("delete_node_pool", cluster.id, node_pool.id)
        pools = self.node_pools.get(cluster.id, [])
        remaining = [pool for pool in pools if pool.id != node_pool.id]
        if len(remaining) == len(pools):
            raise CloudApiError(f"Node pool {node_pool.id} not found", status=404)
        self.node_pools[cluster.id] = remaining
        return f"Node pool '{node_pool.name}' deleted"

    # =========================================================================
    # Helpers
    # =========================================================================

    async def _call(self, method: str, *args: Any) -> None:
        self.calls.append((method, args))
        if self.latency > 0:
            await asyncio.sleep(self.latency)
        error = self.failures.get(method)
        if error is not None:
            logger.debug("Simulated failure for %s: %s", method, error)
            raise CloudApiError(error)

    def _instance_index(self, instance_id: str) -> int:
        for index, instance in enumerate(self.instances):
            if instance.id == instance_id:
                return index
        raise CloudApiError(f"Instance {instance_id} not found", status=404)

    def _cluster_index(self, cluster_id: str) -> int:
        for index, cluster in enumerate(self.clusters):
            if cluster.id == cluster_id:
                return index
        raise CloudApiError(f"Cluster {cluster_id} not found", status=404)


__all__ = ["StaticCloudController"]
