"""Node pool table, detail and scale editor."""

from __future__ import annotations

from collections.abc import Iterable

from cloudbrowse.constants.enums import NodePoolAction, TransitionKind
from cloudbrowse.constants.limits import BOX_MARGIN
from cloudbrowse.keyboard.keys import (
    KEY_ENTER,
    KEY_ESCAPE,
    KEYS_DECREMENT,
    KEYS_DOWN,
    KEYS_INCREMENT,
    KEYS_LEFT,
    KEYS_RIGHT,
    KEYS_UP,
)
from cloudbrowse.models.core.resources import KubeCluster, NodePool
from cloudbrowse.models.state.context import BrowserContext
from cloudbrowse.views.base import BaseView, ViewResult
from cloudbrowse.views.components.action_menu import ActionMenu, MenuAction
from cloudbrowse.views.components.bounded_fields import (
    FIELD_DESIRED,
    FIELD_MAX,
    FIELD_MIN,
    scale_editor,
)
from cloudbrowse.views.rendering import (
    STYLE_BOX_TITLE,
    STYLE_MUTED,
    STYLE_SELECTED,
    key_value,
    render_action_menu,
    render_box,
    render_error,
    render_status,
    styled,
)
from cloudbrowse.views.signals import (
    ActionFailed,
    ActionSucceeded,
    Effect,
    ExecuteNodePoolAction,
    Message,
    NodePoolsLoaded,
    RefreshNodePools,
    ShowNodePoolDetail,
    SubmitScale,
)
from cloudbrowse.views.table_view import Column, TableView


def yes_no(value: bool) -> str:
    return "Yes" if value else "No"


class NodePoolsView(TableView[NodePool]):
    """Node pools of one cluster, filterable by name or flavor.

    Escape in filter mode drops the filter text as well. Once a reload
    brought different pools, leaving the table refreshes the cluster
    detail below it.
    """

    columns = (
        Column("Name", 25, lambda p: p.name),
        Column("Status", 12, lambda p: p.status, status=True),
        Column("Flavor", 15, lambda p: p.flavor),
        Column("Nodes", 10, lambda p: f"{p.current_nodes}/{p.desired_nodes}"),
        Column("Range", 12, lambda p: f"{p.min_nodes}-{p.max_nodes}"),
        Column("Autoscale", 10, lambda p: yes_no(p.autoscale)),
    )
    empty_text = "No node pools found"
    clear_filter_on_escape = True

    def __init__(
        self,
        ctx: BrowserContext,
        cluster: KubeCluster,
        node_pools: Iterable[NodePool] = (),
    ) -> None:
        super().__init__(ctx, node_pools, [lambda p: p.name, lambda p: p.flavor])
        self.cluster = cluster
        self._stale_parent = False

    def on_select(self, item: NodePool) -> ViewResult:
        return ViewResult.emit(ShowNodePoolDetail(self.cluster, item))

    def handle_key(self, key: str) -> ViewResult:
        result = super().handle_key(key)
        if (
            self._stale_parent
            and result.transition is not None
            and result.transition.kind is TransitionKind.POP
        ):
            return ViewResult.go_back(effect=RefreshNodePools(self.cluster))
        return result

    def handle_message(self, message: Message) -> ViewResult:
        if isinstance(message, NodePoolsLoaded) and message.cluster_id == self.cluster.id:
            if tuple(message.node_pools) != tuple(self.list.backing):
                self._stale_parent = True
            self.update_items(message.node_pools)
        return ViewResult.none()

    def refresh_effect(self) -> Effect | None:
        return RefreshNodePools(self.cluster)

    def title(self) -> str:
        return f"☸️  {self.cluster.name} > Node Pools ({len(self.list.backing)})"

    def help_text(self) -> str:
        if self.filter_mode:
            return "Type to filter • Enter: Apply • Esc: Clear"
        return "↑↓: Navigate • Enter: View Details • r: Refresh • /: Filter • Esc: Back"


NODE_POOL_ACTIONS: tuple[MenuAction[NodePoolAction], ...] = (
    MenuAction(NodePoolAction.SCALE, "Scale", requires_confirmation=False),
    MenuAction(NodePoolAction.DELETE, "Delete", dangerous=True),
)


class NodePoolDetailView(BaseView):
    """One node pool with Scale and Delete actions.

    Refreshed pool lists for the same cluster update the shown record; the
    pool table below is then asked to refresh when this view is left.
    """

    def __init__(
        self,
        ctx: BrowserContext,
        cluster: KubeCluster,
        node_pool: NodePool | None,
    ) -> None:
        super().__init__(ctx)
        self.cluster = cluster
        self.node_pool = node_pool
        self.menu: ActionMenu[NodePoolAction] = ActionMenu(NODE_POOL_ACTIONS)
        self._stale_parent = False

    def render(self, width: int, height: int) -> str:
        if self.node_pool is None:
            return render_error("No node pool data available")
        pool = self.node_pool
        box_width = width - BOX_MARGIN
        info = [
            key_value("ID", pool.id),
            key_value("Status", render_status(pool.status), raw=True),
            key_value("Flavor", pool.flavor),
            key_value("Current Nodes", str(pool.current_nodes)),
            key_value("Desired Nodes", str(pool.desired_nodes)),
            key_value("Min/Max", f"{pool.min_nodes} / {pool.max_nodes}"),
            key_value("Autoscale", yes_no(pool.autoscale)),
            key_value("Monthly Billed", yes_no(pool.monthly_billed)),
            key_value("Anti-Affinity", yes_no(pool.anti_affinity)),
            key_value("Created", pool.created_at),
        ]
        return "\n\n".join(
            [
                render_box(f"Node Pool: {pool.name}", info, box_width),
                render_action_menu(self.menu, box_width),
            ]
        )

    def handle_key(self, key: str) -> ViewResult:
        if key in KEYS_LEFT:
            self.menu.move_left()
        elif key in KEYS_RIGHT:
            self.menu.move_right()
        elif key == KEY_ENTER:
            if self.node_pool is None:
                return ViewResult.none()
            entry = self.menu.activate()
            if entry is not None:
                return ViewResult.emit(
                    ExecuteNodePoolAction(self.cluster, self.node_pool, entry.action)
                )
        elif key == KEY_ESCAPE:
            if self.menu.cancel():
                if self._stale_parent:
                    return ViewResult.go_back(effect=RefreshNodePools(self.cluster))
                return ViewResult.go_back()
        return ViewResult.none()

    def handle_message(self, message: Message) -> ViewResult:
        if (
            isinstance(message, NodePoolsLoaded)
            and message.cluster_id == self.cluster.id
            and self.node_pool is not None
        ):
            self._stale_parent = True
            for pool in message.node_pools:
                if pool.id == self.node_pool.id:
                    self.node_pool = pool
                    break
        return ViewResult.none()

    def title(self) -> str:
        name = self.node_pool.name if self.node_pool is not None else ""
        return f"☸️  Kubernetes > {self.cluster.name} > {name}"

    def help_text(self) -> str:
        if self.menu.awaiting_confirmation:
            return "Enter: Confirm Action • Esc: Cancel"
        return "←→: Select Action • Enter: Execute • Esc: Back • q: Quit"


class NodePoolScaleView(BaseView):
    """Edit desired/min/max node counts and submit them.

    Validation errors and API failures share the editor's error slot.
    Escape first dismisses a shown error, then leaves.
    """

    def __init__(self, ctx: BrowserContext, cluster: KubeCluster, node_pool: NodePool) -> None:
        super().__init__(ctx)
        self.cluster = cluster
        self.node_pool = node_pool
        self.editor = scale_editor(node_pool.desired_nodes, node_pool.min_nodes, node_pool.max_nodes)
        self.pending: SubmitScale | None = None

    def render(self, width: int, height: int) -> str:
        lines = [styled(f"Scaling node pool: {self.node_pool.name}", STYLE_BOX_TITLE), ""]
        for index, field in enumerate(self.editor.fields):
            label = f"{field.label}:"
            value = f"◀ {field.value} ▶"
            if index == self.editor.selected_index:
                lines.append(f"▸ {styled(f'{label:<16}', STYLE_SELECTED)} {styled(value, STYLE_SELECTED)}")
            else:
                lines.append(f"  {styled(f'{label:<16}', STYLE_MUTED)} {value}")
        lines.append("")
        lines.append(styled("Use ↑/↓ to select field, ←/→ to adjust value", STYLE_MUTED))
        lines.append(styled("Press Enter to apply, Escape to cancel", STYLE_MUTED))
        if self.pending is not None:
            lines.extend(["", styled("⏳ Scaling...", STYLE_MUTED)])
        if self.editor.error_message:
            lines.extend(["", render_error(f"⚠️  {self.editor.error_message}")])
        return "\n".join(lines)

    def handle_key(self, key: str) -> ViewResult:
        if key in KEYS_UP:
            self.editor.move_up()
        elif key in KEYS_DOWN:
            self.editor.move_down()
        elif key in KEYS_DECREMENT:
            self.editor.decrement()
        elif key in KEYS_INCREMENT:
            self.editor.increment()
        elif key == KEY_ENTER:
            if self.pending is not None:
                return ViewResult.none()
            values = self.editor.submit()
            if values is None:
                return ViewResult.none()
            self.pending = SubmitScale(
                self.cluster,
                self.node_pool,
                desired_nodes=values[FIELD_DESIRED],
                min_nodes=values[FIELD_MIN],
                max_nodes=values[FIELD_MAX],
            )
            return ViewResult.emit(self.pending)
        elif key == KEY_ESCAPE:
            if self.editor.cancel():
                return ViewResult.go_back()
        return ViewResult.none()

    def handle_message(self, message: Message) -> ViewResult:
        if self.pending is None:
            return ViewResult.none()
        if isinstance(message, ActionSucceeded) and message.effect == self.pending:
            self.pending = None
            return ViewResult.go_back(effect=RefreshNodePools(self.cluster))
        if isinstance(message, ActionFailed) and message.effect == self.pending:
            self.pending = None
            self.editor.error_message = message.error
        return ViewResult.none()

    def title(self) -> str:
        return f"☸️  Kubernetes > {self.cluster.name} > {self.node_pool.name} > Scale"

    def help_text(self) -> str:
        return "↑↓: Select Field • ←→: Adjust Value • Enter: Apply • Esc: Cancel"


__all__ = [
    "NODE_POOL_ACTIONS",
    "NodePoolDetailView",
    "NodePoolScaleView",
    "NodePoolsView",
]
