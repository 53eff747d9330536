"""Signals exchanged between views, the transition engine and the shell.

Three families of immutable values:

- ``Transition``: a one-shot instruction for the navigation stack.
- Effects: descriptions of work to run outside the view (API calls,
  navigation that needs the cloud controller). The shell routes them.
- Messages: results of effects, delivered back to whichever view is
  active when they arrive.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cloudbrowse.constants.enums import (
    ClusterAction,
    InstanceAction,
    NodePoolAction,
    TransitionKind,
)
from cloudbrowse.models.core.resources import Instance, KubeCluster, NodePool

if TYPE_CHECKING:
    from cloudbrowse.views.base import View


# ============================================================================
# Transitions
# ============================================================================


@dataclass(frozen=True)
class Transition:
    """Navigation stack instruction emitted by a view."""

    kind: TransitionKind
    view: View | None = None
    depth: int = 1

    @classmethod
    def push(cls, view: View) -> Transition:
        return cls(TransitionKind.PUSH, view)

    @classmethod
    def replace(cls, view: View) -> Transition:
        return cls(TransitionKind.REPLACE, view)

    @classmethod
    def pop(cls, depth: int = 1) -> Transition:
        """Go back ``depth`` views (the root view is never removed)."""
        return cls(TransitionKind.POP, None, max(1, depth))


# ============================================================================
# Effects
# ============================================================================


class Effect:
    """Base class for deferred effects."""


@dataclass(frozen=True)
class ShowProduct(Effect):
    product: str


@dataclass(frozen=True)
class ShowInstanceDetail(Effect):
    instance: Instance


@dataclass(frozen=True)
class ShowClusterDetail(Effect):
    cluster: KubeCluster


@dataclass(frozen=True)
class ShowNodePools(Effect):
    cluster: KubeCluster
    node_pools: tuple[NodePool, ...] = ()


@dataclass(frozen=True)
class ShowNodePoolDetail(Effect):
    cluster: KubeCluster
    node_pool: NodePool


@dataclass(frozen=True)
class ExecuteInstanceAction(Effect):
    instance: Instance
    action: InstanceAction


@dataclass(frozen=True)
class ExecuteClusterAction(Effect):
    cluster: KubeCluster
    action: ClusterAction
    node_pools: tuple[NodePool, ...] = ()


@dataclass(frozen=True)
class ExecuteNodePoolAction(Effect):
    cluster: KubeCluster
    node_pool: NodePool
    action: NodePoolAction


@dataclass(frozen=True)
class SubmitScale(Effect):
    cluster: KubeCluster
    node_pool: NodePool
    desired_nodes: int
    min_nodes: int
    max_nodes: int


@dataclass(frozen=True)
class SubmitUpdatePolicy(Effect):
    cluster: KubeCluster
    policy: str


@dataclass(frozen=True)
class SubmitUpgrade(Effect):
    cluster: KubeCluster
    version: str


@dataclass(frozen=True)
class ConfirmDelete(Effect):
    """Deletion confirmed; ``node_pool`` is None for a cluster delete."""

    cluster: KubeCluster
    node_pool: NodePool | None = None


@dataclass(frozen=True)
class RefreshInstances(Effect):
    pass


@dataclass(frozen=True)
class RefreshClusters(Effect):
    pass


@dataclass(frozen=True)
class RefreshNodePools(Effect):
    cluster: KubeCluster


# ============================================================================
# Messages (effect results)
# ============================================================================


class Message:
    """Base class for asynchronous results delivered to views."""


@dataclass(frozen=True)
class InstancesLoaded(Message):
    instances: tuple[Instance, ...]


@dataclass(frozen=True)
class ClustersLoaded(Message):
    clusters: tuple[KubeCluster, ...]
    node_pools: dict[str, tuple[NodePool, ...]] = field(default_factory=dict)


@dataclass(frozen=True)
class NodePoolsLoaded(Message):
    cluster_id: str
    node_pools: tuple[NodePool, ...]


@dataclass(frozen=True)
class VersionsLoaded(Message):
    cluster_id: str
    versions: tuple[str, ...]


@dataclass(frozen=True)
class LoadFailed(Message):
    """A refresh effect failed; ``effect`` is the request that failed."""

    effect: Effect
    error: str


@dataclass(frozen=True)
class ActionSucceeded(Message):
    effect: Effect
    detail: str = ""


@dataclass(frozen=True)
class ActionFailed(Message):
    effect: Effect
    error: str


__all__ = [
    "ActionFailed",
    "ActionSucceeded",
    "ClustersLoaded",
    "ConfirmDelete",
    "Effect",
    "ExecuteClusterAction",
    "ExecuteInstanceAction",
    "ExecuteNodePoolAction",
    "InstancesLoaded",
    "LoadFailed",
    "Message",
    "NodePoolsLoaded",
    "RefreshClusters",
    "RefreshInstances",
    "RefreshNodePools",
    "ShowClusterDetail",
    "ShowInstanceDetail",
    "ShowNodePoolDetail",
    "ShowNodePools",
    "ShowProduct",
    "SubmitScale",
    "SubmitUpdatePolicy",
    "SubmitUpgrade",
    "Transition",
    "VersionsLoaded",
]
