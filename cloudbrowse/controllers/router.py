"""Effect router: turns view effects into navigation or background jobs.

Views describe what they want as ``Effect`` values. The router decides
how each one is carried out:

- navigation effects become a ``Transition`` that pushes the next view;
- API effects become a job, a coroutine factory run in a Textual worker
  whose return value is the ``Message`` delivered back to the views.

Controller exceptions never escape a job. They are logged and turned
into ``LoadFailed`` (for loads) or ``ActionFailed`` (for actions).
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from cloudbrowse.constants.enums import ClusterAction, NodePoolAction
from cloudbrowse.constants.values import NOTIFY_REFRESH_PREFIX, PRODUCT_INSTANCES, PRODUCT_KUBERNETES
from cloudbrowse.controllers.base import CloudController
from cloudbrowse.models.core.resources import KubeCluster, NodePool
from cloudbrowse.models.state.context import BrowserContext
from cloudbrowse.views.base import View
from cloudbrowse.views.common import LoadingView
from cloudbrowse.views.instances import InstanceDetailView, instances_view
from cloudbrowse.views.kubernetes import (
    ClusterDetailView,
    DeleteConfirmView,
    NodePoolDetailView,
    NodePoolScaleView,
    NodePoolsView,
    UpdatePolicyView,
    clusters_view,
)
from cloudbrowse.views.signals import (
    ActionFailed,
    ActionSucceeded,
    ClustersLoaded,
    ConfirmDelete,
    Effect,
    ExecuteClusterAction,
    ExecuteInstanceAction,
    ExecuteNodePoolAction,
    InstancesLoaded,
    LoadFailed,
    Message,
    NodePoolsLoaded,
    RefreshClusters,
    RefreshInstances,
    RefreshNodePools,
    ShowClusterDetail,
    ShowInstanceDetail,
    ShowNodePoolDetail,
    ShowNodePools,
    ShowProduct,
    SubmitScale,
    SubmitUpdatePolicy,
    SubmitUpgrade,
    Transition,
    VersionsLoaded,
)

logger = logging.getLogger(__name__)

Job = Callable[[], Awaitable[Message]]


@dataclass(frozen=True)
class Route:
    """How one effect is carried out. Every part is optional."""

    transition: Transition | None = None
    job: Job | None = None
    notice: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.transition is None and self.job is None and self.notice is None


class EffectRouter:
    """Maps effects to transitions and controller jobs."""

    def __init__(self, controller: CloudController, ctx: BrowserContext) -> None:
        self.controller = controller
        self.ctx = ctx

    def route(self, effect: Effect) -> Route:
        """Return the route for ``effect``; unknown effects route nowhere."""
        logger.debug("Routing %s", type(effect).__name__)
        handler = self._handlers().get(type(effect))
        if handler is None:
            logger.warning("No route for effect %r", effect)
            return Route()
        return handler(effect)

    def _handlers(self) -> dict[type[Effect], Callable[[Effect], Route]]:
        return {
            ShowProduct: self._show_product,
            ShowInstanceDetail: self._show_instance_detail,
            ShowClusterDetail: self._show_cluster_detail,
            ShowNodePools: self._show_node_pools,
            ShowNodePoolDetail: self._show_node_pool_detail,
            ExecuteInstanceAction: self._execute_instance_action,
            ExecuteClusterAction: self._execute_cluster_action,
            ExecuteNodePoolAction: self._execute_node_pool_action,
            SubmitScale: self._submit_scale,
            SubmitUpdatePolicy: self._submit_update_policy,
            SubmitUpgrade: self._submit_upgrade,
            ConfirmDelete: self._confirm_delete,
            RefreshInstances: self._refresh_instances,
            RefreshClusters: self._refresh_clusters,
            RefreshNodePools: self._refresh_node_pools,
        }

    # =========================================================================
    # Navigation
    # =========================================================================

    def _push(self, view: View, job: Job | None = None) -> Route:
        return Route(transition=Transition.push(view), job=job)

    def _show_product(self, effect: ShowProduct) -> Route:
        if effect.product == PRODUCT_INSTANCES:
            load = RefreshInstances()
            view = LoadingView(
                self.ctx,
                "Loading instances...",
                load,
                lambda m: instances_view(self.ctx, m.instances) if isinstance(m, InstancesLoaded) else None,
            )
            return self._push(view, self._refresh_instances(load).job)
        if effect.product == PRODUCT_KUBERNETES:
            load = RefreshClusters()
            view = LoadingView(
                self.ctx,
                "Loading Kubernetes clusters...",
                load,
                lambda m: (
                    clusters_view(self.ctx, m.clusters, m.node_pools)
                    if isinstance(m, ClustersLoaded)
                    else None
                ),
            )
            return self._push(view, self._refresh_clusters(load).job)
        logger.warning("Unknown product %r", effect.product)
        return Route()

    def _show_instance_detail(self, effect: ShowInstanceDetail) -> Route:
        return self._push(InstanceDetailView(self.ctx, effect.instance))

    def _show_cluster_detail(self, effect: ShowClusterDetail) -> Route:
        view = ClusterDetailView(self.ctx, effect.cluster)
        return self._push(view, self._refresh_node_pools(RefreshNodePools(effect.cluster)).job)

    def _show_node_pools(self, effect: ShowNodePools) -> Route:
        view = NodePoolsView(self.ctx, effect.cluster, effect.node_pools)
        return self._push(view, self._refresh_node_pools(RefreshNodePools(effect.cluster)).job)

    def _show_node_pool_detail(self, effect: ShowNodePoolDetail) -> Route:
        return self._push(NodePoolDetailView(self.ctx, effect.cluster, effect.node_pool))

    # =========================================================================
    # Actions
    # =========================================================================

    def _execute_instance_action(self, effect: ExecuteInstanceAction) -> Route:
        return Route(
            job=self._action_job(
                effect,
                lambda: self.controller.execute_instance_action(effect.instance, effect.action),
            ),
            notice=f"{NOTIFY_REFRESH_PREFIX} {effect.action.value.replace('_', ' ')} "
            f"{effect.instance.name}...",
        )

    def _execute_cluster_action(self, effect: ExecuteClusterAction) -> Route:
        cluster = effect.cluster
        if effect.action is ClusterAction.POOLS:
            return self._show_node_pools(ShowNodePools(cluster, effect.node_pools))
        if effect.action is ClusterAction.POLICY:
            return self._push(UpdatePolicyView(self.ctx, cluster))
        if effect.action is ClusterAction.DELETE:
            return self._push(DeleteConfirmView(self.ctx, cluster))
        if effect.action is ClusterAction.UPGRADE:
            return Route(
                job=self._versions_job(effect, cluster),
                notice=f"{NOTIFY_REFRESH_PREFIX} Fetching available versions...",
            )
        return Route(
            job=self._action_job(
                effect, lambda: self.controller.execute_cluster_action(cluster, effect.action)
            )
        )

    def _execute_node_pool_action(self, effect: ExecuteNodePoolAction) -> Route:
        if effect.action is NodePoolAction.SCALE:
            return self._push(NodePoolScaleView(self.ctx, effect.cluster, effect.node_pool))
        if effect.action is NodePoolAction.DELETE:
            return self._push(DeleteConfirmView(self.ctx, effect.cluster, effect.node_pool))
        logger.warning("Unhandled node pool action %r", effect.action)
        return Route()

    def _submit_scale(self, effect: SubmitScale) -> Route:
        return Route(
            job=self._action_job(
                effect,
                lambda: self.controller.scale_node_pool(
                    effect.cluster,
                    effect.node_pool,
                    effect.desired_nodes,
                    effect.min_nodes,
                    effect.max_nodes,
                ),
            )
        )

    def _submit_update_policy(self, effect: SubmitUpdatePolicy) -> Route:
        return Route(
            job=self._action_job(
                effect, lambda: self.controller.update_policy(effect.cluster, effect.policy)
            )
        )

    def _submit_upgrade(self, effect: SubmitUpgrade) -> Route:
        return Route(
            job=self._action_job(
                effect, lambda: self.controller.upgrade_cluster(effect.cluster, effect.version)
            )
        )

    def _confirm_delete(self, effect: ConfirmDelete) -> Route:
        node_pool = effect.node_pool
        if node_pool is not None:
            call = lambda: self.controller.delete_node_pool(effect.cluster, node_pool)  # noqa: E731
        else:
            call = lambda: self.controller.delete_cluster(effect.cluster)  # noqa: E731
        return Route(job=self._action_job(effect, call))

    # =========================================================================
    # Loads
    # =========================================================================

    def _refresh_instances(self, effect: RefreshInstances) -> Route:
        async def job() -> Message:
            try:
                instances = await self.controller.list_instances()
            except Exception as e:
                logger.exception("Loading instances failed")
                return LoadFailed(effect, str(e))
            logger.info("Loaded %d instances", len(instances))
            return InstancesLoaded(tuple(instances))

        return Route(job=job)

    def _refresh_clusters(self, effect: RefreshClusters) -> Route:
        async def job() -> Message:
            try:
                clusters = tuple(await self.controller.list_clusters())
            except Exception as e:
                logger.exception("Loading clusters failed")
                return LoadFailed(effect, str(e))
            node_pools = await self._gather_node_pools(clusters)
            logger.info("Loaded %d clusters", len(clusters))
            return ClustersLoaded(clusters, node_pools)

        return Route(job=job)

    async def _gather_node_pools(
        self, clusters: tuple[KubeCluster, ...]
    ) -> dict[str, tuple[NodePool, ...]]:
        """Fetch every cluster's pools; clusters whose fetch fails are left out."""
        results = await asyncio.gather(
            *(self.controller.list_node_pools(cluster.id) for cluster in clusters),
            return_exceptions=True,
        )
        node_pools: dict[str, tuple[NodePool, ...]] = {}
        for cluster, result in zip(clusters, results):
            if isinstance(result, BaseException):
                logger.warning("Loading node pools of %s failed: %s", cluster.id, result)
                continue
            node_pools[cluster.id] = tuple(result)
        return node_pools

    def _refresh_node_pools(self, effect: RefreshNodePools) -> Route:
        cluster_id = effect.cluster.id

        async def job() -> Message:
            try:
                pools = await self.controller.list_node_pools(cluster_id)
            except Exception as e:
                logger.exception("Loading node pools of %s failed", cluster_id)
                return LoadFailed(effect, str(e))
            return NodePoolsLoaded(cluster_id, tuple(pools))

        return Route(job=job)

    # =========================================================================
    # Job builders
    # =========================================================================

    def _versions_job(self, effect: Effect, cluster: KubeCluster) -> Job:
        async def job() -> Message:
            try:
                versions = await self.controller.list_available_versions(cluster.id)
            except Exception as e:
                logger.exception("Loading versions of %s failed", cluster.id)
                return ActionFailed(effect, str(e))
            return VersionsLoaded(cluster.id, tuple(versions))

        return job

    def _action_job(self, effect: Effect, call: Callable[[], Awaitable[str]]) -> Job:
        async def job() -> Message:
            try:
                detail = await call()
            except Exception as e:
                logger.exception("%s failed", type(effect).__name__)
                return ActionFailed(effect, str(e))
            logger.info("%s succeeded: %s", type(effect).__name__, detail)
            return ActionSucceeded(effect, detail)

        return job


__all__ = [
    "EffectRouter",
    "Job",
    "Route",
]
