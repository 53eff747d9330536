"""Instance detail with lifecycle actions.

Every instance action is gated: the first Enter arms it, the second one
runs it. Any completed action other than SSH re-fetches the instances;
the table below is refreshed again when this view is left.
"""

from __future__ import annotations

from cloudbrowse.constants.enums import InstanceAction
from cloudbrowse.constants.limits import BOX_MARGIN
from cloudbrowse.keyboard.keys import KEY_ENTER, KEY_ESCAPE, KEYS_LEFT, KEYS_RIGHT
from cloudbrowse.models.core.resources import Instance
from cloudbrowse.models.state.context import BrowserContext
from cloudbrowse.views.base import BaseView, ViewResult
from cloudbrowse.views.components.action_menu import ActionMenu, MenuAction
from cloudbrowse.views.rendering import (
    key_value,
    render_action_menu,
    render_box,
    render_error,
    render_status,
)
from cloudbrowse.views.signals import (
    ActionSucceeded,
    ExecuteInstanceAction,
    InstancesLoaded,
    Message,
    RefreshInstances,
)

INSTANCE_ACTIONS: tuple[MenuAction[InstanceAction], ...] = (
    MenuAction(InstanceAction.START, "Start"),
    MenuAction(InstanceAction.STOP, "Stop"),
    MenuAction(InstanceAction.SOFT_REBOOT, "Soft Reboot"),
    MenuAction(InstanceAction.REBOOT, "Reboot"),
    MenuAction(InstanceAction.SSH, "SSH"),
    MenuAction(InstanceAction.DELETE, "Delete", dangerous=True),
)


class InstanceDetailView(BaseView):
    """Information, network and actions of one instance."""

    def __init__(self, ctx: BrowserContext, instance: Instance | None) -> None:
        super().__init__(ctx)
        self.instance = instance
        self.menu: ActionMenu[InstanceAction] = ActionMenu(INSTANCE_ACTIONS)
        self._stale_parent = False

    def render(self, width: int, height: int) -> str:
        if self.instance is None:
            return render_error("No instance data available")
        instance = self.instance
        box_width = width - BOX_MARGIN

        info = [
            key_value("ID", instance.id),
            key_value("Status", render_status(instance.status), raw=True),
            key_value("Region", instance.region),
            key_value("Flavor", instance.flavor),
            key_value("Image", instance.image),
            key_value("Created", instance.created),
        ]
        sections = [render_box("Information", info, box_width)]

        network = []
        public = instance.ipv4_addresses(public=True)
        private = instance.ipv4_addresses(public=False)
        if public:
            network.append(key_value("Public IP", ", ".join(public)))
        if private:
            network.append(key_value("Private IP", ", ".join(private)))
        if instance.floating_ip:
            network.append(key_value("Floating IP", instance.floating_ip))
        if network:
            sections.append(render_box("Network", network, box_width))

        sections.append(render_action_menu(self.menu, box_width))
        return "\n\n".join(sections)

    def handle_key(self, key: str) -> ViewResult:
        if key in KEYS_LEFT:
            self.menu.move_left()
        elif key in KEYS_RIGHT:
            self.menu.move_right()
        elif key == KEY_ENTER:
            if self.instance is None:
                return ViewResult.none()
            entry = self.menu.activate()
            if entry is not None:
                return ViewResult.emit(ExecuteInstanceAction(self.instance, entry.action))
        elif key == KEY_ESCAPE:
            if self.menu.cancel():
                if self._stale_parent:
                    return ViewResult.go_back(effect=RefreshInstances())
                return ViewResult.go_back()
        return ViewResult.none()

    def handle_message(self, message: Message) -> ViewResult:
        if self.instance is None:
            return ViewResult.none()
        if isinstance(message, InstancesLoaded):
            for instance in message.instances:
                if instance.id == self.instance.id:
                    self.instance = instance
                    self._stale_parent = True
                    break
        elif (
            isinstance(message, ActionSucceeded)
            and isinstance(message.effect, ExecuteInstanceAction)
            and message.effect.instance.id == self.instance.id
        ):
            if message.effect.action is InstanceAction.DELETE:
                return ViewResult.go_back(effect=RefreshInstances())
            if message.effect.action is not InstanceAction.SSH:
                return ViewResult.emit(RefreshInstances())
        return ViewResult.none()

    def title(self) -> str:
        name = self.instance.name if self.instance is not None else ""
        return f"🖥️  Instances > {name}"

    def help_text(self) -> str:
        if self.menu.awaiting_confirmation:
            return "Enter: Confirm Action • Esc: Cancel"
        return "←→: Select Action • Enter: Execute • Esc: Back to List • q: Quit"


__all__ = [
    "INSTANCE_ACTIONS",
    "InstanceDetailView",
]
