"""Demo project served by the in-memory controller."""

from __future__ import annotations

from typing import Any

from cloudbrowse.controllers.static.controller import StaticCloudController

DEMO_DATA: dict[str, Any] = {
    "instances": [
        {
            "id": "a1f4c2e0",
            "name": "web-01",
            "status": "ACTIVE",
            "region": "GRA11",
            "flavorId": "b2-7",
            "flavor": {"name": "b2-7"},
            "imageId": "img-ubuntu",
            "imageName": "Ubuntu 22.04",
            "created": "2025-03-02T09:14:00Z",
            "ipAddresses": [
                {"ip": "51.68.10.21", "version": 4, "type": "public"},
                {"ip": "10.0.0.11", "version": 4, "type": "private"},
            ],
        },
        {
            "id": "b7d90a13",
            "name": "web-02",
            "status": "SHUTOFF",
            "region": "GRA11",
            "flavorId": "b2-7",
            "imageId": "img-ubuntu",
            "imageName": "Ubuntu 22.04",
            "created": "2025-03-02T09:16:00Z",
            "ipAddresses": [{"ip": "51.68.10.22", "version": 4, "type": "public"}],
        },
        {
            "id": "c35e8b77",
            "name": "db-primary",
            "status": "ACTIVE",
            "region": "SBG5",
            "flavorId": "r2-30",
            "imageId": "img-debian",
            "imageName": "Debian 12",
            "created": "2025-01-18T17:40:00Z",
            "floatingIp": "145.239.3.4",
            "ipAddresses": [{"ip": "10.0.1.5", "version": 4, "type": "private"}],
        },
    ],
    "clusters": [
        {
            "id": "kube-prod",
            "name": "prod",
            "status": "READY",
            "region": "GRA7",
            "version": "1.29",
            "updatePolicy": "MINIMAL_DOWNTIME",
            "createdAt": "2024-11-05T08:00:00Z",
            "url": "https://prod.kube.example.net",
        },
        {
            "id": "kube-staging",
            "name": "staging",
            "status": "READY",
            "region": "SBG5",
            "version": "1.30",
            "updatePolicy": "ALWAYS_UPDATE",
            "createdAt": "2025-02-11T08:00:00Z",
        },
    ],
    "nodePools": {
        "kube-prod": [
            {
                "id": "pool-general",
                "name": "general",
                "status": "READY",
                "flavor": "b3-16",
                "currentNodes": 3,
                "desiredNodes": 3,
                "minNodes": 2,
                "maxNodes": 6,
                "autoscale": True,
                "antiAffinity": True,
                "createdAt": "2024-11-05T08:10:00Z",
            },
            {
                "id": "pool-batch",
                "name": "batch",
                "status": "READY",
                "flavor": "c3-32",
                "currentNodes": 1,
                "desiredNodes": 1,
                "minNodes": 0,
                "maxNodes": 4,
                "monthlyBilled": True,
                "createdAt": "2024-12-01T10:00:00Z",
            },
        ],
        "kube-staging": [
            {
                "id": "pool-default",
                "name": "default",
                "status": "READY",
                "flavor": "b3-8",
                "currentNodes": 2,
                "desiredNodes": 2,
                "minNodes": 1,
                "maxNodes": 3,
                "createdAt": "2025-02-11T08:05:00Z",
            },
        ],
    },
    "versions": {"kube-prod": ["1.30", "1.31"], "kube-staging": []},
}


def demo_controller(latency: float = 0.3) -> StaticCloudController:
    """Controller serving the demo project."""
    return StaticCloudController.from_mapping(DEMO_DATA, latency=latency)


__all__ = [
    "DEMO_DATA",
    "demo_controller",
]
