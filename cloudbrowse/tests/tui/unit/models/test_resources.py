"""Unit tests for the typed resource records."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cloudbrowse.models.core.resources import Instance, KubeCluster, NodePool, total_current_nodes


class TestInstance:
    """Test instance parsing and address helpers."""

    def test_missing_keys_default_to_empty(self) -> None:
        """Missing keys default to empty values."""
        instance = Instance.model_validate({"id": "i-1"})
        assert instance.name == ""
        assert instance.ip_addresses == []
        assert instance.display_ip() == ""

    def test_nulls_are_absent(self) -> None:
        """null values are treated like missing keys."""
        instance = Instance.model_validate({"id": "i-1", "name": None, "ipAddresses": None})
        assert instance.name == ""
        assert instance.ip_addresses == []

    def test_unknown_keys_ignored(self) -> None:
        """Unknown API keys are ignored."""
        assert Instance.model_validate({"id": "i-1", "monthlyBilling": {}}).id == "i-1"

    def test_flavor_falls_back_to_id(self) -> None:
        """flavor uses the name when known, else the id."""
        assert Instance.model_validate({"flavorId": "f-1"}).flavor == "f-1"
        assert Instance.model_validate({"flavorId": "f-1", "flavorName": "b2-7"}).flavor == "b2-7"

    def test_nested_flavor_name(self) -> None:
        """A nested flavor object provides the flavor name."""
        assert Instance.model_validate({"flavor": {"name": "d2-2"}}).flavor == "d2-2"

    def test_ipv4_public_and_private(self) -> None:
        """IPv4 addresses are split into public and private."""
        instance = Instance.model_validate(
            {
                "ipAddresses": [
                    {"ip": "2001:db8::1", "version": 6, "type": "public"},
                    {"ip": "51.0.0.1", "version": 4, "type": "public"},
                    {"ip": "10.0.0.2", "version": 4, "type": "private"},
                ]
            }
        )
        assert instance.ipv4_addresses(public=True) == ["51.0.0.1"]
        assert instance.ipv4_addresses(public=False) == ["10.0.0.2"]
        assert instance.first_ip() == "2001:db8::1"

    def test_floating_ip_preferred_for_display(self) -> None:
        """The floating IP is displayed before other addresses."""
        instance = Instance.model_validate(
            {"floatingIp": "1.2.3.4", "ipAddresses": [{"ip": "51.0.0.1", "version": 4}]}
        )
        assert instance.display_ip() == "1.2.3.4 (floating)"

    def test_records_are_frozen(self) -> None:
        """Records cannot be modified after parsing."""
        instance = Instance.model_validate({"id": "i-1"})
        with pytest.raises(ValidationError):
            instance.name = "x"


class TestKubernetesRecords:
    """Test cluster and node pool records."""

    def test_cluster_aliases(self) -> None:
        """Cluster fields are read from their camelCase keys."""
        cluster = KubeCluster.model_validate({"updatePolicy": "ALWAYS_UPDATE", "createdAt": "t"})
        assert cluster.update_policy == "ALWAYS_UPDATE"
        assert cluster.created_at == "t"

    def test_node_pool_counts(self) -> None:
        """Node totals add up the current nodes of all pools."""
        pools = [
            NodePool.model_validate({"currentNodes": 2}),
            NodePool.model_validate({"currentNodes": 3, "autoscale": True}),
        ]
        assert pools[1].autoscale is True
        assert total_current_nodes(pools) == 5
        assert total_current_nodes([]) == 0
