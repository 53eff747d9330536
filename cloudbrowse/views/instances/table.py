"""Instance table."""

from __future__ import annotations

from collections.abc import Iterable

from cloudbrowse.models.core.resources import Instance
from cloudbrowse.models.state.context import BrowserContext
from cloudbrowse.views.base import View, ViewResult
from cloudbrowse.views.common import EmptyView
from cloudbrowse.views.signals import (
    Effect,
    InstancesLoaded,
    Message,
    RefreshInstances,
    ShowInstanceDetail,
)
from cloudbrowse.views.table_view import Column, TableView


class InstanceTableView(TableView[Instance]):
    """All instances of the project, filterable by name."""

    columns = (
        Column("Name", 25, lambda i: i.name),
        Column("Status", 12, lambda i: i.status, status=True),
        Column("Flavor", 15, lambda i: i.flavor),
        Column("Image", 20, lambda i: i.image),
        Column("Region", 12, lambda i: i.region),
        Column("IP Address", 24, lambda i: i.display_ip()),
    )
    empty_text = "No instances match the filter"

    def __init__(self, ctx: BrowserContext, instances: Iterable[Instance]) -> None:
        super().__init__(ctx, instances, [lambda i: i.name])

    def on_select(self, item: Instance) -> ViewResult:
        return ViewResult.emit(ShowInstanceDetail(item))

    def handle_message(self, message: Message) -> ViewResult:
        if isinstance(message, InstancesLoaded):
            self.update_items(message.instances)
        return ViewResult.none()

    def refresh_effect(self) -> Effect | None:
        return RefreshInstances()

    def title(self) -> str:
        return f"🖥️  Instances ({len(self.list.backing)})"

    def help_text(self) -> str:
        if self.filter_mode:
            return "Type to filter • Enter: Confirm • Esc: Cancel"
        return "↑↓: Navigate • /: Filter • Enter: Details • r: Refresh • Esc: Back • q: Quit"


def instances_view(ctx: BrowserContext, instances: Iterable[Instance]) -> View:
    """Table for ``instances``, or the empty state when there are none."""
    rows = list(instances)
    if rows:
        return InstanceTableView(ctx, rows)
    return EmptyView(ctx, "instances", RefreshInstances(), lambda m: _rebuild(ctx, m))


def _rebuild(ctx: BrowserContext, message: Message) -> View | None:
    if isinstance(message, InstancesLoaded):
        return instances_view(ctx, message.instances)
    return None


__all__ = [
    "InstanceTableView",
    "instances_view",
]
