"""Cluster detail: information, node-pool summary and cluster actions."""

from __future__ import annotations

from collections.abc import Sequence

from rich.markup import escape

from cloudbrowse.constants.enums import ClusterAction
from cloudbrowse.constants.limits import BOX_MARGIN
from cloudbrowse.keyboard.keys import KEY_ENTER, KEY_ESCAPE, KEYS_LEFT, KEYS_RIGHT
from cloudbrowse.models.core.resources import KubeCluster, NodePool
from cloudbrowse.models.state.context import BrowserContext
from cloudbrowse.views.base import BaseView, ViewResult
from cloudbrowse.views.components.action_menu import ActionMenu, MenuAction
from cloudbrowse.views.kubernetes.pickers import UpgradeView
from cloudbrowse.views.rendering import (
    STYLE_MUTED,
    key_value,
    render_action_menu,
    render_box,
    render_error,
    render_status,
    styled,
)
from cloudbrowse.views.signals import (
    ClustersLoaded,
    Effect,
    ExecuteClusterAction,
    Message,
    NodePoolsLoaded,
    RefreshClusters,
    RefreshNodePools,
    VersionsLoaded,
)

CLUSTER_ACTIONS: tuple[MenuAction[ClusterAction], ...] = (
    MenuAction(ClusterAction.KUBECONFIG, "Kubeconfig"),
    MenuAction(ClusterAction.K9S, "K9s"),
    MenuAction(ClusterAction.POOLS, "Pools", requires_confirmation=False),
    MenuAction(ClusterAction.UPGRADE, "Upgrade"),
    MenuAction(ClusterAction.POLICY, "Policy"),
    MenuAction(ClusterAction.DELETE, "Delete", dangerous=True),
)


class ClusterDetailView(BaseView):
    """One cluster. ``node_pools`` is None until the pools have been fetched.

    Reloaded cluster or pool records replace the shown ones; when they
    changed, the cluster table below is refreshed as this view is left.
    """

    def __init__(
        self,
        ctx: BrowserContext,
        cluster: KubeCluster | None,
        node_pools: Sequence[NodePool] | None = None,
    ) -> None:
        super().__init__(ctx)
        self.cluster = cluster
        self.node_pools: tuple[NodePool, ...] | None = (
            tuple(node_pools) if node_pools is not None else None
        )
        self.menu: ActionMenu[ClusterAction] = ActionMenu(CLUSTER_ACTIONS)
        self._stale_parent = False

    def render(self, width: int, height: int) -> str:
        if self.cluster is None:
            return render_error("No cluster data available")
        cluster = self.cluster
        box_width = width - BOX_MARGIN

        info = [
            key_value("ID", cluster.id),
            key_value("Status", render_status(cluster.status), raw=True),
            key_value("Region", cluster.region),
            key_value("Version", cluster.version),
            key_value("Update Policy", cluster.update_policy),
            key_value("Created", cluster.created_at),
        ]
        if cluster.url:
            info.append(key_value("API URL", cluster.url))

        return "\n\n".join(
            [
                render_box("Cluster Information", info, box_width),
                self._render_pools(box_width),
                render_action_menu(self.menu, box_width),
            ]
        )

    def _render_pools(self, width: int) -> str:
        if self.node_pools is None:
            return render_box("Node Pools", [styled("Loading node pools...", STYLE_MUTED)], width)
        if not self.node_pools:
            lines = ["  No node pools configured"]
        else:
            lines = [
                f"  • {escape(pool.name)} ({escape(pool.flavor)}) - "
                f"{render_status(pool.status)} - {pool.current_nodes}/{pool.desired_nodes} nodes"
                for pool in self.node_pools
            ]
        return render_box(f"Node Pools ({len(self.node_pools)})", lines, width)

    def handle_key(self, key: str) -> ViewResult:
        if key in KEYS_LEFT:
            self.menu.move_left()
        elif key in KEYS_RIGHT:
            self.menu.move_right()
        elif key == KEY_ENTER:
            if self.cluster is None:
                return ViewResult.none()
            entry = self.menu.activate()
            if entry is not None:
                return ViewResult.emit(
                    ExecuteClusterAction(self.cluster, entry.action, self.node_pools or ())
                )
        elif key == KEY_ESCAPE:
            if self.menu.cancel():
                if self._stale_parent:
                    return ViewResult.go_back(effect=RefreshClusters())
                return ViewResult.go_back()
        return ViewResult.none()

    def handle_message(self, message: Message) -> ViewResult:
        if self.cluster is None:
            return ViewResult.none()
        if isinstance(message, NodePoolsLoaded) and message.cluster_id == self.cluster.id:
            self._update_pools(message.node_pools)
        elif isinstance(message, ClustersLoaded):
            for cluster in message.clusters:
                if cluster.id == self.cluster.id:
                    self._stale_parent = self._stale_parent or cluster != self.cluster
                    self.cluster = cluster
                    break
            pools = message.node_pools.get(self.cluster.id)
            if pools is not None:
                self._update_pools(pools)
        elif isinstance(message, VersionsLoaded) and message.cluster_id == self.cluster.id:
            return ViewResult.push(UpgradeView(self.ctx, self.cluster, message.versions))
        return ViewResult.none()

    def _update_pools(self, node_pools: Sequence[NodePool]) -> None:
        pools = tuple(node_pools)
        if self.node_pools is not None and pools != self.node_pools:
            self._stale_parent = True
        self.node_pools = pools

    def refresh_effect(self) -> Effect | None:
        if self.cluster is None:
            return None
        return RefreshNodePools(self.cluster)

    def title(self) -> str:
        name = self.cluster.name if self.cluster is not None else ""
        return f"☸️  Kubernetes > {name}"

    def help_text(self) -> str:
        if self.menu.awaiting_confirmation:
            return "Enter: Confirm Action • Esc: Cancel"
        return "←→: Select Action • Enter: Execute • Esc: Back to List • q: Quit"


__all__ = [
    "CLUSTER_ACTIONS",
    "ClusterDetailView",
]
