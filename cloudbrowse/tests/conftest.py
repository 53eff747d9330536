"""Shared fixtures for the CloudBrowse test suite."""

from __future__ import annotations

import pytest

from cloudbrowse.app import CloudBrowserApp
from cloudbrowse.controllers.static import StaticCloudController
from cloudbrowse.controllers.static.demo import DEMO_DATA
from cloudbrowse.models.core.resources import Instance, KubeCluster, NodePool
from cloudbrowse.models.state.app_settings import AppSettings
from cloudbrowse.models.state.context import BrowserContext

# =============================================================================
# Records
# =============================================================================


def _make_instance(name: str = "web-01", **fields) -> Instance:
    data = {"id": f"id-{name}", "name": name, "status": "ACTIVE", "region": "GRA11"}
    data.update(fields)
    return Instance.model_validate(data)


def _make_cluster(name: str = "prod", **fields) -> KubeCluster:
    data = {
        "id": f"kube-{name}",
        "name": name,
        "status": "READY",
        "region": "GRA7",
        "version": "1.29",
        "updatePolicy": "MINIMAL_DOWNTIME",
    }
    data.update(fields)
    return KubeCluster.model_validate(data)


def _make_pool(name: str = "general", **fields) -> NodePool:
    data = {
        "id": f"pool-{name}",
        "name": name,
        "status": "READY",
        "flavor": "b3-16",
        "currentNodes": 3,
        "desiredNodes": 3,
        "minNodes": 1,
        "maxNodes": 5,
    }
    data.update(fields)
    return NodePool.model_validate(data)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def ctx() -> BrowserContext:
    return BrowserContext(project_id="p-123", project_name="demo", width=120, height=40)


@pytest.fixture
def controller() -> StaticCloudController:
    return StaticCloudController.from_mapping(DEMO_DATA)


@pytest.fixture
def app(controller: StaticCloudController) -> CloudBrowserApp:
    """App over the demo project that never touches the user's settings file."""
    return CloudBrowserApp(
        controller,
        settings=AppSettings(project_id="p-123", project_name="demo"),
        persist_settings=False,
    )


@pytest.fixture
def make_instance():
    """Factory for Instance records."""
    return _make_instance


@pytest.fixture
def make_cluster():
    """Factory for KubeCluster records."""
    return _make_cluster


@pytest.fixture
def make_pool():
    """Factory for NodePool records."""
    return _make_pool


@pytest.fixture
def cluster() -> KubeCluster:
    return _make_cluster()


@pytest.fixture
def pool() -> NodePool:
    return _make_pool()
