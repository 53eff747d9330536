"""Unit tests for the in-memory cloud controller.

This module tests:
- Listing from API-shaped fixture data
- Instance, cluster and node pool actions mutating the state
- Not-found and simulated failures raising CloudApiError
- YAML fixture loading
"""

from __future__ import annotations

from pathlib import Path

import pytest

from cloudbrowse.constants.enums import ClusterAction, InstanceAction
from cloudbrowse.controllers import CloudApiError, StaticCloudController
from cloudbrowse.controllers.static.demo import DEMO_DATA


def find(items, item_id):
    return next(item for item in items if item.id == item_id)


# =============================================================================
# Listing
# =============================================================================


class TestListing:
    """Test list_* coroutines over the demo project."""

    @pytest.mark.asyncio
    async def test_list_instances(self, controller: StaticCloudController) -> None:
        """All demo instances are returned in order."""
        instances = await controller.list_instances()
        assert [i.name for i in instances] == ["web-01", "web-02", "db-primary"]

    @pytest.mark.asyncio
    async def test_list_node_pools_unknown_cluster(self, controller: StaticCloudController) -> None:
        """A cluster without pools answers with an empty sequence."""
        assert await controller.list_node_pools("nope") == ()

    @pytest.mark.asyncio
    async def test_calls_are_recorded(self, controller: StaticCloudController) -> None:
        """Every call is appended to ``calls``."""
        await controller.list_available_versions("kube-prod")
        assert controller.calls == [("list_available_versions", ("kube-prod",))]

    @pytest.mark.asyncio
    async def test_simulated_failure(self) -> None:
        """Methods named in ``failures`` raise CloudApiError."""
        controller = StaticCloudController(failures={"list_clusters": "HTTP 503"})
        with pytest.raises(CloudApiError, match="HTTP 503"):
            await controller.list_clusters()


# =============================================================================
# Instance actions
# =============================================================================


class TestInstanceActions:
    """Test lifecycle actions on instances."""

    @pytest.mark.asyncio
    async def test_stop_changes_status(self, controller: StaticCloudController) -> None:
        """Stop switches the instance to SHUTOFF."""
        instance = controller.instances[0]
        detail = await controller.execute_instance_action(instance, InstanceAction.STOP)
        assert detail == "Stop initiated successfully!"
        assert controller.instances[0].status == "SHUTOFF"

    @pytest.mark.asyncio
    async def test_delete_removes_instance(self, controller: StaticCloudController) -> None:
        """Delete removes the instance from the project."""
        instance = controller.instances[1]
        await controller.execute_instance_action(instance, InstanceAction.DELETE)
        assert instance.id not in [i.id for i in controller.instances]

    @pytest.mark.asyncio
    async def test_ssh_prefers_floating_ip(self, controller: StaticCloudController) -> None:
        """The SSH command uses the floating IP when there is one."""
        db = find(controller.instances, "c35e8b77")
        assert await controller.execute_instance_action(db, InstanceAction.SSH) == (
            "ssh ubuntu@145.239.3.4"
        )

    @pytest.mark.asyncio
    async def test_ssh_without_public_address(self, make_instance) -> None:
        """SSH without a public address raises CloudApiError."""
        instance = make_instance()
        controller = StaticCloudController(instances=[instance])
        with pytest.raises(CloudApiError, match="no public IPv4"):
            await controller.execute_instance_action(instance, InstanceAction.SSH)

    @pytest.mark.asyncio
    async def test_unknown_instance(self, controller: StaticCloudController, make_instance) -> None:
        """Actions on an unknown instance raise CloudApiError."""
        with pytest.raises(CloudApiError) as excinfo:
            await controller.execute_instance_action(make_instance("ghost"), InstanceAction.START)
        assert excinfo.value.status == 404


# =============================================================================
# Kubernetes actions
# =============================================================================


class TestKubernetesActions:
    """Test cluster and node pool operations."""

    @pytest.mark.asyncio
    async def test_kubeconfig(self, controller: StaticCloudController) -> None:
        """Kubeconfig reports where the file was written."""
        prod = controller.clusters[0]
        detail = await controller.execute_cluster_action(prod, ClusterAction.KUBECONFIG)
        assert detail == "Kubeconfig for prod saved to ~/.kube/config"

    @pytest.mark.asyncio
    async def test_scale_updates_pool(self, controller: StaticCloudController) -> None:
        """Scaling stores the new desired, min and max nodes."""
        prod = controller.clusters[0]
        general = controller.node_pools["kube-prod"][0]
        detail = await controller.scale_node_pool(prod, general, 5, 2, 8)
        assert detail == "Node pool 'general' scaled to 5 nodes"
        updated = controller.node_pools["kube-prod"][0]
        assert (updated.desired_nodes, updated.min_nodes, updated.max_nodes) == (5, 2, 8)

    @pytest.mark.asyncio
    async def test_update_policy(self, controller: StaticCloudController) -> None:
        """update_policy stores the new policy."""
        prod = controller.clusters[0]
        await controller.update_policy(prod, "NEVER_UPDATE")
        assert controller.clusters[0].update_policy == "NEVER_UPDATE"

    @pytest.mark.asyncio
    async def test_unknown_policy_rejected(self, controller: StaticCloudController) -> None:
        """An unknown policy is rejected."""
        with pytest.raises(CloudApiError):
            await controller.update_policy(controller.clusters[0], "SOMETIMES")

    @pytest.mark.asyncio
    async def test_upgrade_consumes_version(self, controller: StaticCloudController) -> None:
        """An upgrade sets the version and drops it from the available list."""
        prod = controller.clusters[0]
        await controller.upgrade_cluster(prod, "1.30")
        assert controller.clusters[0].version == "1.30"
        assert controller.clusters[0].status == "UPDATING"
        assert await controller.list_available_versions("kube-prod") == ("1.31",)

    @pytest.mark.asyncio
    async def test_upgrade_to_unlisted_version(self, controller: StaticCloudController) -> None:
        """Upgrading to an unlisted version is rejected."""
        with pytest.raises(CloudApiError):
            await controller.upgrade_cluster(controller.clusters[1], "1.31")

    @pytest.mark.asyncio
    async def test_delete_cluster_drops_pools(self, controller: StaticCloudController) -> None:
        """Deleting a cluster also drops its pools."""
        staging = controller.clusters[1]
        await controller.delete_cluster(staging)
        assert [c.id for c in controller.clusters] == ["kube-prod"]
        assert "kube-staging" not in controller.node_pools

    @pytest.mark.asyncio
    async def test_delete_node_pool(self, controller: StaticCloudController) -> None:
        """Deleting a pool removes it from its cluster."""
        prod = controller.clusters[0]
        batch = controller.node_pools["kube-prod"][1]
        await controller.delete_node_pool(prod, batch)
        assert [p.name for p in await controller.list_node_pools("kube-prod")] == ["general"]
        with pytest.raises(CloudApiError):
            await controller.delete_node_pool(prod, batch)


# =============================================================================
# Fixture files
# =============================================================================


class TestFromYaml:
    """Test YAML fixture loading."""

    def test_loads_mapping(self, tmp_path: Path) -> None:
        """A YAML fixture loads instances, clusters and pools."""
        fixture = tmp_path / "project.yaml"
        fixture.write_text(
            "instances:\n  - id: i-1\n    name: solo\n    status: ACTIVE\n", encoding="utf-8"
        )
        controller = StaticCloudController.from_yaml(fixture)
        assert [i.name for i in controller.instances] == ["solo"]
        assert controller.clusters == []

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing fixture raises CloudApiError."""
        with pytest.raises(CloudApiError, match="Cannot read fixture"):
            StaticCloudController.from_yaml(tmp_path / "absent.yaml")

    def test_demo_data_parses(self) -> None:
        """The demo project parses and keeps the given latency."""
        controller = StaticCloudController.from_mapping(DEMO_DATA, latency=0.5)
        assert controller.latency == 0.5
        assert len(controller.node_pools["kube-prod"]) == 2
