"""Single-choice pickers for cluster settings: update policy and upgrade version."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Sequence

from cloudbrowse.constants.values import UPDATE_POLICIES, UPDATE_POLICY_DESCRIPTIONS
from cloudbrowse.keyboard.keys import KEY_ENTER, KEY_ESCAPE, KEYS_CONFIRM, KEYS_DOWN, KEYS_UP
from cloudbrowse.models.core.resources import KubeCluster
from cloudbrowse.models.state.context import BrowserContext
from cloudbrowse.views.base import BaseView, ViewResult
from cloudbrowse.views.components.selection_list import SelectionList, SelectionOption
from cloudbrowse.views.rendering import (
    STYLE_BOX_TITLE,
    STYLE_MUTED,
    STYLE_RUNNING,
    STYLE_SELECTED,
    render_error,
    styled,
)
from cloudbrowse.views.signals import (
    ActionFailed,
    ActionSucceeded,
    Effect,
    Message,
    RefreshClusters,
    SubmitUpdatePolicy,
    SubmitUpgrade,
)


class PickerView(BaseView):
    """Selection list that submits one effect and closes when it succeeds.

    Closing after a success re-fetches the clusters so the detail below
    shows the applied value.

    While the submit is in flight Enter is ignored. A failure is shown
    under the list and the picker stays open.
    """

    heading = ""

    def __init__(
        self,
        ctx: BrowserContext,
        cluster: KubeCluster,
        options: Sequence[SelectionOption[str]],
        selected: str = "",
    ) -> None:
        super().__init__(ctx)
        self.cluster = cluster
        self.options: SelectionList[str] = SelectionList(options)
        if selected:
            self.options.select_value(selected)
        self.pending: Effect | None = None
        self.error_message = ""

    @abstractmethod
    def make_effect(self, value: str) -> Effect:
        """Effect submitting the chosen value."""
        ...

    def render_header(self) -> list[str]:
        return [styled(self.heading.format(name=self.cluster.name), STYLE_BOX_TITLE), ""]

    def render(self, width: int, height: int) -> str:
        lines = self.render_header()
        for index, option in enumerate(self.options.options):
            if index == self.options.selected_index:
                lines.append("▸ " + styled(option.label, STYLE_SELECTED))
            else:
                lines.append("  " + styled(option.label, STYLE_MUTED))
            if option.description:
                lines.append("    " + styled(option.description, STYLE_MUTED))
                lines.append("")
        if self.pending is not None:
            lines.append(styled("⏳ Applying...", STYLE_MUTED))
        if self.error_message:
            lines.append(render_error(f"⚠️  {self.error_message}"))
        return "\n".join(lines)

    def handle_key(self, key: str) -> ViewResult:
        if key in KEYS_UP:
            self.options.move_up()
        elif key in KEYS_DOWN:
            self.options.move_down()
        elif key == KEY_ENTER:
            option = self.options.selected()
            if option is None or self.pending is not None:
                return ViewResult.none()
            self.error_message = ""
            self.pending = self.make_effect(option.value)
            return ViewResult.emit(self.pending)
        elif key == KEY_ESCAPE:
            return ViewResult.go_back()
        return ViewResult.none()

    def handle_message(self, message: Message) -> ViewResult:
        if self.pending is None:
            return ViewResult.none()
        if isinstance(message, ActionSucceeded) and message.effect == self.pending:
            self.pending = None
            return ViewResult.go_back(effect=RefreshClusters())
        if isinstance(message, ActionFailed) and message.effect == self.pending:
            self.pending = None
            self.error_message = message.error
        return ViewResult.none()


class UpdatePolicyView(PickerView):
    """Pick the cluster's update policy; the cursor starts on the current one."""

    heading = "Update Policy for: {name}"

    def __init__(self, ctx: BrowserContext, cluster: KubeCluster) -> None:
        options = [
            SelectionOption(policy, policy, UPDATE_POLICY_DESCRIPTIONS.get(policy, ""))
            for policy in UPDATE_POLICIES
        ]
        super().__init__(ctx, cluster, options, cluster.update_policy)

    def make_effect(self, value: str) -> Effect:
        return SubmitUpdatePolicy(self.cluster, value)

    def title(self) -> str:
        return f"☸️  Kubernetes > {self.cluster.name} > Update Policy"

    def help_text(self) -> str:
        return "↑↓: Select Policy • Enter: Apply • Esc: Cancel"


class UpgradeView(PickerView):
    """Pick a target Kubernetes version.

    With no versions available the view only acknowledges that the cluster
    is up to date; Enter and Escape both go back without an effect.
    """

    heading = "Upgrade cluster: {name}"

    def __init__(
        self,
        ctx: BrowserContext,
        cluster: KubeCluster,
        versions: Sequence[str],
    ) -> None:
        super().__init__(ctx, cluster, [SelectionOption(v, v) for v in versions])

    def make_effect(self, value: str) -> Effect:
        return SubmitUpgrade(self.cluster, value)

    def render_header(self) -> list[str]:
        lines = super().render_header()
        lines.insert(1, styled(f"Current version: {self.cluster.version}", STYLE_MUTED))
        if self.options.is_empty:
            lines.append(styled("✓ Cluster is already on the latest version", STYLE_RUNNING))
        return lines

    def handle_key(self, key: str) -> ViewResult:
        if self.options.is_empty:
            if key in KEYS_CONFIRM:
                return ViewResult.go_back()
            return ViewResult.none()
        return super().handle_key(key)

    def title(self) -> str:
        return f"☸️  Kubernetes > {self.cluster.name} > Upgrade"

    def help_text(self) -> str:
        if self.options.is_empty:
            return "Enter/Esc: Back"
        return "↑↓: Select Version • Enter: Upgrade • Esc: Cancel"


__all__ = [
    "PickerView",
    "UpdatePolicyView",
    "UpgradeView",
]
