"""Cluster table."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from cloudbrowse.models.core.resources import KubeCluster, NodePool, total_current_nodes
from cloudbrowse.models.state.context import BrowserContext
from cloudbrowse.views.base import View, ViewResult
from cloudbrowse.views.common import EmptyView
from cloudbrowse.views.signals import (
    ClustersLoaded,
    Effect,
    Message,
    NodePoolsLoaded,
    RefreshClusters,
    ShowClusterDetail,
)
from cloudbrowse.views.table_view import Column, TableView


class ClusterTableView(TableView[KubeCluster]):
    """Managed Kubernetes clusters, filterable by name."""

    empty_text = "No clusters match the filter"

    def __init__(
        self,
        ctx: BrowserContext,
        clusters: Iterable[KubeCluster],
        node_pools: Mapping[str, Sequence[NodePool]] | None = None,
    ) -> None:
        super().__init__(ctx, clusters, [lambda c: c.name])
        self.node_pools: dict[str, tuple[NodePool, ...]] = {
            cluster_id: tuple(pools) for cluster_id, pools in (node_pools or {}).items()
        }
        self.columns = (
            Column("Name", 25, lambda c: c.name),
            Column("Status", 12, lambda c: c.status, status=True),
            Column("Version", 10, lambda c: c.version),
            Column("Region", 12, lambda c: c.region),
            Column("Nodes", 8, self.node_count),
        )

    def node_count(self, cluster: KubeCluster) -> str:
        """Total current nodes, or ``-`` while the pools are unknown."""
        pools = self.node_pools.get(cluster.id)
        if pools is None:
            return "-"
        return str(total_current_nodes(list(pools)))

    def on_select(self, item: KubeCluster) -> ViewResult:
        return ViewResult.emit(ShowClusterDetail(item))

    def handle_message(self, message: Message) -> ViewResult:
        if isinstance(message, ClustersLoaded):
            self.node_pools = dict(message.node_pools)
            self.update_items(message.clusters)
        elif isinstance(message, NodePoolsLoaded):
            self.node_pools[message.cluster_id] = message.node_pools
        return ViewResult.none()

    def refresh_effect(self) -> Effect | None:
        return RefreshClusters()

    def title(self) -> str:
        return f"☸️  Kubernetes ({len(self.list.backing)})"

    def help_text(self) -> str:
        if self.filter_mode:
            return "Type to filter • Enter: Confirm • Esc: Cancel"
        return "↑↓: Navigate • /: Filter • Enter: Details • r: Refresh • Esc: Back • q: Quit"


def clusters_view(
    ctx: BrowserContext,
    clusters: Iterable[KubeCluster],
    node_pools: Mapping[str, Sequence[NodePool]] | None = None,
) -> View:
    """Table for ``clusters``, or the empty state when there are none."""
    rows = list(clusters)
    if rows:
        return ClusterTableView(ctx, rows, node_pools)
    return EmptyView(ctx, "kubernetes clusters", RefreshClusters(), lambda m: _rebuild(ctx, m))


def _rebuild(ctx: BrowserContext, message: Message) -> View | None:
    if isinstance(message, ClustersLoaded):
        return clusters_view(ctx, message.clusters, message.node_pools)
    return None


__all__ = [
    "ClusterTableView",
    "clusters_view",
]
