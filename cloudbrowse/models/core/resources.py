"""Typed cloud resource records.

The cloud API hands back string-keyed maps with camelCase keys. These
models give every attribute a name, a type and a default, so a missing
key renders as an empty value instead of raising.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ResourceModel(BaseModel):
    """Base model for API records: camelCase aliases, ``None`` means absent."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class IPAddress(ResourceModel):
    """One address attached to an instance."""

    ip: str = ""
    version: str = ""
    type: str = ""

    @field_validator("version", mode="before")
    @classmethod
    def _version_as_text(cls, value: Any) -> str:
        return str(value)


class Instance(ResourceModel):
    """Compute instance row."""

    id: str = ""
    name: str = ""
    status: str = ""
    region: str = ""
    flavor_id: str = Field(default="", alias="flavorId")
    flavor_name: str = Field(default="", alias="flavorName")
    image_id: str = Field(default="", alias="imageId")
    created: str = ""
    ip_addresses: list[IPAddress] = Field(default_factory=list, alias="ipAddresses")
    # Enrichment resolved by the controller (image name, attached floating IP).
    image_name: str = Field(default="", alias="imageName")
    floating_ip: str = Field(default="", alias="floatingIp")

    @model_validator(mode="before")
    @classmethod
    def _flatten_flavor(cls, data: Any) -> Any:
        if isinstance(data, dict):
            flavor = data.get("flavor")
            if isinstance(flavor, dict) and flavor.get("name") and "flavorName" not in data:
                data = {**data, "flavorName": flavor["name"]}
        return data

    @property
    def flavor(self) -> str:
        """Flavor display name, falling back to the flavor id."""
        return self.flavor_name or self.flavor_id

    @property
    def image(self) -> str:
        """Image display name, falling back to the image id."""
        return self.image_name or self.image_id

    def first_ip(self) -> str:
        """Return the first address of any kind, or an empty string."""
        for address in self.ip_addresses:
            if address.ip:
                return address.ip
        return ""

    def display_ip(self) -> str:
        """Address shown in the instance table."""
        if self.floating_ip:
            return f"{self.floating_ip} (floating)"
        return self.first_ip()

    def ipv4_addresses(self, public: bool) -> list[str]:
        """Return IPv4 addresses that are public (or private when False)."""
        return [
            address.ip
            for address in self.ip_addresses
            if address.ip
            and address.version == "4"
            and (address.type == "public") == public
        ]


class KubeCluster(ResourceModel):
    """Managed Kubernetes cluster row."""

    id: str = ""
    name: str = ""
    status: str = ""
    region: str = ""
    version: str = ""
    update_policy: str = Field(default="", alias="updatePolicy")
    created_at: str = Field(default="", alias="createdAt")
    url: str = ""


class NodePool(ResourceModel):
    """Node pool of a Kubernetes cluster."""

    id: str = ""
    name: str = ""
    status: str = ""
    flavor: str = ""
    current_nodes: int = Field(default=0, alias="currentNodes")
    desired_nodes: int = Field(default=0, alias="desiredNodes")
    min_nodes: int = Field(default=0, alias="minNodes")
    max_nodes: int = Field(default=0, alias="maxNodes")
    autoscale: bool = False
    monthly_billed: bool = Field(default=False, alias="monthlyBilled")
    anti_affinity: bool = Field(default=False, alias="antiAffinity")
    created_at: str = Field(default="", alias="createdAt")


def total_current_nodes(pools: list[NodePool]) -> int:
    """Sum of current nodes across pools."""
    return sum(pool.current_nodes for pool in pools)


__all__ = [
    "IPAddress",
    "Instance",
    "KubeCluster",
    "NodePool",
    "ResourceModel",
    "total_current_nodes",
]
