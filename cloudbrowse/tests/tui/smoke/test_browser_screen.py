"""Smoke tests for the browser screen.

Drives CloudBrowserApp over the in-memory demo project with Textual's
pilot: product selection, loading, filter mode, quit handling, actions
and error display.
"""

from __future__ import annotations

import pytest

from cloudbrowse.screens import BrowserScreen
from cloudbrowse.views.common import ErrorView, HomeView
from cloudbrowse.views.instances import InstanceDetailView, InstanceTableView
from cloudbrowse.views.kubernetes import ClusterDetailView, ClusterTableView


async def settle(app, pilot) -> None:
    """Wait until jobs (and the jobs their results trigger) are done."""
    for _ in range(3):
        await app.workers.wait_for_complete()
        await pilot.pause()


def browser(app) -> BrowserScreen:
    screen = app.screen
    assert isinstance(screen, BrowserScreen)
    return screen


# =============================================================================
# Startup and navigation
# =============================================================================


class TestBrowserStartup:
    """Test the initial screen."""

    @pytest.mark.asyncio
    async def test_starts_on_home(self, app) -> None:
        """The root view is the product picker."""
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            assert isinstance(browser(app).engine.active, HomeView)

    @pytest.mark.asyncio
    async def test_escape_on_home_keeps_root(self, app) -> None:
        """Back on the root view is ignored."""
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.press("escape")
            await pilot.pause()
            assert browser(app).engine.stack.depth == 1


class TestBrowserInstances:
    """Test the instance flow."""

    @pytest.mark.asyncio
    async def test_enter_loads_instance_table(self, app) -> None:
        """Opening instances replaces the loading view with the table."""
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.press("enter")
            await settle(app, pilot)
            table = browser(app).engine.active
            assert isinstance(table, InstanceTableView)
            assert len(table.list.backing) == 3
            assert browser(app).engine.stack.depth == 2

    @pytest.mark.asyncio
    async def test_detail_and_back(self, app) -> None:
        """Enter opens the detail view, Escape returns to the table."""
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.press("enter")
            await settle(app, pilot)
            await pilot.press("enter")
            await pilot.pause()
            assert isinstance(browser(app).engine.active, InstanceDetailView)
            await pilot.press("escape")
            await pilot.pause()
            assert isinstance(browser(app).engine.active, InstanceTableView)

    @pytest.mark.asyncio
    async def test_confirmed_action_notifies(self, app, controller) -> None:
        """Two Enters on Stop run it, notify, and reload the shown instance."""
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.press("enter")
            await settle(app, pilot)
            await pilot.press("enter", "right", "enter", "enter")
            await settle(app, pilot)
            assert controller.instances[0].status == "SHUTOFF"
            assert app.ctx.notification == "✓ Stop initiated successfully!"
            detail = browser(app).engine.active
            assert isinstance(detail, InstanceDetailView)
            assert detail.instance.status == "SHUTOFF"

    @pytest.mark.asyncio
    async def test_load_failure_shows_error(self, app, controller) -> None:
        """A failed fetch replaces the loading view with the error view."""
        controller.failures["list_instances"] = "HTTP 403 forbidden"
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.press("enter")
            await settle(app, pilot)
            view = browser(app).engine.active
            assert isinstance(view, ErrorView)
            assert view.error == "HTTP 403 forbidden"
            assert app.ctx.notification == "✗ HTTP 403 forbidden"


# =============================================================================
# Filter mode and quitting
# =============================================================================


class TestBrowserKeys:
    """Test quit handling and filter text capture."""

    @pytest.mark.asyncio
    async def test_q_types_into_filter(self, app) -> None:
        """In filter mode q is filter text, not quit."""
        exits: list[bool] = []
        async with app.run_test(size=(120, 40)) as pilot:
            app.exit = lambda *args, **kwargs: exits.append(True)
            await pilot.press("enter")
            await settle(app, pilot)
            await pilot.press("slash", "q")
            await pilot.pause()
            table = browser(app).engine.active
            assert table.list.filter_text == "q"
            assert exits == []

    @pytest.mark.asyncio
    async def test_q_quits_in_normal_mode(self, app) -> None:
        """Outside filter mode q exits the app."""
        exits: list[bool] = []
        async with app.run_test(size=(120, 40)) as pilot:
            app.exit = lambda *args, **kwargs: exits.append(True)
            await pilot.press("q")
            await pilot.pause()
            assert exits == [True]

    @pytest.mark.asyncio
    async def test_ctrl_r_refreshes_table(self, app, controller) -> None:
        """ctrl+r re-runs the active view's load."""
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.press("enter")
            await settle(app, pilot)
            before = len(controller.calls)
            await pilot.press("ctrl+r")
            await settle(app, pilot)
            assert controller.calls[before:] == [("list_instances", ())]


# =============================================================================
# Kubernetes
# =============================================================================


class TestBrowserKubernetes:
    """Test the cluster flow."""

    @pytest.mark.asyncio
    async def test_cluster_detail_loads_pools(self, app) -> None:
        """Cluster detail shows its node pools once fetched."""
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.press("down", "enter")
            await settle(app, pilot)
            table = browser(app).engine.active
            assert isinstance(table, ClusterTableView)
            assert table.node_count(table.list.backing[0]) == "4"
            await pilot.press("enter")
            await settle(app, pilot)
            detail = browser(app).engine.active
            assert isinstance(detail, ClusterDetailView)
            assert [p.name for p in detail.node_pools] == ["general", "batch"]
