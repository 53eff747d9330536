"""Delete confirmation for clusters and node pools."""

from __future__ import annotations

from cloudbrowse.constants.enums import InputMode
from cloudbrowse.keyboard.keys import KEY_ENTER, KEY_ESCAPE, KEYS_TOGGLE
from cloudbrowse.models.core.resources import KubeCluster, NodePool
from cloudbrowse.models.state.context import BrowserContext
from cloudbrowse.views.base import BaseView, ViewResult
from cloudbrowse.views.rendering import (
    STYLE_MUTED,
    STYLE_STOPPED,
    STYLE_WARNING,
    render_buttons,
    render_error,
    styled,
)
from cloudbrowse.views.signals import (
    ActionFailed,
    ActionSucceeded,
    ConfirmDelete,
    Effect,
    Message,
    RefreshClusters,
    RefreshNodePools,
)

BUTTONS = ("Confirm Delete", "Cancel")
CONFIRM_INDEX = 0
CANCEL_INDEX = 1


class DeleteConfirmView(BaseView):
    """Two-button confirmation, Cancel focused by default.

    Pushed on top of the detail view of the resource being deleted. Once
    the delete succeeds both views are popped and the parent list is
    refreshed.
    """

    def __init__(
        self,
        ctx: BrowserContext,
        cluster: KubeCluster,
        node_pool: NodePool | None = None,
    ) -> None:
        super().__init__(ctx)
        self.cluster = cluster
        self.node_pool = node_pool
        self.selected = CANCEL_INDEX
        self.pending: ConfirmDelete | None = None
        self.error_message = ""

    @property
    def input_mode(self) -> InputMode:
        return InputMode.CONFIRM

    @property
    def target(self) -> str:
        return "node pool" if self.node_pool is not None else "cluster"

    @property
    def target_name(self) -> str:
        if self.node_pool is not None:
            return self.node_pool.name
        return self.cluster.name

    def render(self, width: int, height: int) -> str:
        lines = [
            styled("⚠️  DELETE CONFIRMATION", STYLE_STOPPED),
            "",
            f"You are about to delete the {self.target}:",
            "",
            styled(f"  {self.target_name}", "bold"),
            "",
            styled("This action cannot be undone!", STYLE_WARNING),
            "",
            render_buttons(BUTTONS, self.selected, danger=BUTTONS[:1]),
        ]
        if self.pending is not None:
            lines.extend(["", styled(f"⏳ Deleting {self.target}...", STYLE_MUTED)])
        if self.error_message:
            lines.extend(["", render_error(f"⚠️  {self.error_message}")])
        return "\n".join(lines)

    def handle_key(self, key: str) -> ViewResult:
        if key in KEYS_TOGGLE:
            if self.pending is None:
                self.selected = CANCEL_INDEX if self.selected == CONFIRM_INDEX else CONFIRM_INDEX
        elif key == KEY_ENTER:
            if self.pending is not None:
                return ViewResult.none()
            if self.selected == CANCEL_INDEX:
                return ViewResult.go_back()
            self.error_message = ""
            self.pending = ConfirmDelete(self.cluster, self.node_pool)
            return ViewResult.emit(self.pending)
        elif key == KEY_ESCAPE:
            return ViewResult.go_back()
        return ViewResult.none()

    def handle_message(self, message: Message) -> ViewResult:
        if self.pending is None:
            return ViewResult.none()
        if isinstance(message, ActionSucceeded) and message.effect == self.pending:
            self.pending = None
            return ViewResult.go_back(depth=2, effect=self._parent_refresh())
        if isinstance(message, ActionFailed) and message.effect == self.pending:
            self.pending = None
            self.error_message = message.error
        return ViewResult.none()

    def _parent_refresh(self) -> Effect:
        if self.node_pool is not None:
            return RefreshNodePools(self.cluster)
        return RefreshClusters()

    def title(self) -> str:
        if self.node_pool is not None:
            return "⚠️  Delete Node Pool"
        return "⚠️  Delete Cluster"

    def help_text(self) -> str:
        return "←→: Toggle Selection • Enter: Confirm • Esc: Cancel"


__all__ = [
    "DeleteConfirmView",
]
