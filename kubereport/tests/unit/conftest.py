"""Shared fixtures for kubereport unit tests."""

from __future__ import annotations

import io
import json
import threading
import urllib.error
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import pytest

from kubereport.constants.defaults import API_PATH_PREFIX
from kubereport.models.state.settings import ReportSettings
from kubereport.report.templates import write_default_templates

FIXED_NOW = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


class FakeApi:
    """``urlopen`` stand-in serving JSON payloads keyed by API path.

    A route mapped to an exception raises it, one mapped to an object with
    ``read`` is returned as the response; unknown paths answer 404.
    Every request is recorded.
    """

    def __init__(self, routes: dict[str, Any]) -> None:
        self.routes = dict(routes)
        self.requests: list[Any] = []
        self._lock = threading.Lock()

    def __call__(self, request: Any, timeout: float | None = None, context: Any = None) -> Any:
        with self._lock:
            self.requests.append(request)
        path = request.full_url.split(API_PATH_PREFIX, 1)[1]
        response = self.routes.get(path)
        if response is None:
            raise urllib.error.HTTPError(request.full_url, 404, "Not Found", hdrs=None, fp=None)
        if isinstance(response, Exception):
            raise response
        if hasattr(response, "read"):
            return response
        if isinstance(response, bytes):
            return io.BytesIO(response)
        return io.BytesIO(json.dumps(response).encode())

    @property
    def paths(self) -> list[str]:
        return [request.full_url.split(API_PATH_PREFIX, 1)[1] for request in self.requests]


def cluster_routes(namespace: str = "default") -> dict[str, Any]:
    """Payloads of a small healthy cluster: one pod, one node, one claim."""
    return {
        "namespace": {
            "namespaces": [
                {"objectMeta": {"name": namespace}, "phase": "Active"},
                {"objectMeta": {"name": "kube-system"}, "phase": "Active"},
            ]
        },
        f"pod/{namespace}": {
            "pods": [
                {
                    "objectMeta": {"name": "web-1", "labels": {"app": "web", "tier": "front"}},
                    "status": "Running",
                    "nodeName": "node-a",
                    "containerImages": ["nginx:1.25"],
                }
            ]
        },
        f"log/{namespace}/web-1": {
            "logs": [{"timestamp": "2026-01-02T03:00:00Z", "content": "server started"}]
        },
        f"pod/{namespace}/web-1/event": {
            "events": [{"message": "Pulled image", "reason": "Pulled"}]
        },
        f"pod/{namespace}/web-1/persistentvolumeclaim": {
            "items": [{"objectMeta": {"name": "data-web-1"}}]
        },
        "node": {"nodes": [{"objectMeta": {"name": "node-a"}, "ready": "True"}]},
        "node/node-a": {
            "objectMeta": {"name": "node-a", "labels": {"zone": "a"}},
            "ready": "True",
            "unschedulable": False,
            "nodeInfo": {"osImage": "Ubuntu 22.04 LTS"},
            "conditions": [
                {"type": "MemoryPressure", "status": "False"},
                {"type": "DiskPressure", "status": "False"},
                {"type": "PIDPressure", "status": "False"},
                {"type": "NetworkUnavailable", "status": "False"},
                {"type": "Ready", "status": "True"},
            ],
            "taints": [{"key": "dedicated", "value": "web", "effect": "NoSchedule"}],
            "addresses": [
                {"type": "Hostname", "address": "node-a"},
                {"type": "InternalIP", "address": "10.0.0.5"},
            ],
            "eventList": {"events": []},
        },
        f"persistentvolumeclaim/{namespace}": {
            "items": [
                {
                    "objectMeta": {"name": "data-web-1", "labels": {"app": "web"}},
                    "status": "Bound",
                    "volume": "pv-0001",
                    "storageClass": "standard",
                    "capacity": {"storage": "1Gi"},
                }
            ]
        },
        f"event/{namespace}": {
            "events": [
                {
                    "message": "Provisioned volume pv-0001",
                    "reason": "ProvisioningSucceeded",
                    "objectKind": "PersistentVolumeClaim",
                    "objectName": "data-web-1",
                },
                {
                    "message": "Pulled image",
                    "reason": "Pulled",
                    "objectKind": "Pod",
                    "objectName": "web-1",
                },
            ]
        },
    }


@pytest.fixture(scope="session")
def template_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Directory holding the default page templates."""
    directory = tmp_path_factory.mktemp("templates")
    write_default_templates(directory)
    return directory


@pytest.fixture
def report_dir(tmp_path: Path) -> Path:
    return tmp_path / "reports"


@pytest.fixture
def settings(template_dir: Path, report_dir: Path) -> ReportSettings:
    """Settings pointing at the test templates and a fresh report directory."""
    return ReportSettings(template_dir=str(template_dir), report_dir=str(report_dir))


@pytest.fixture
def routes() -> dict[str, Any]:
    return cluster_routes()


@pytest.fixture
def fake_api(routes: dict[str, Any]) -> FakeApi:
    """Fake transport serving the healthy cluster; tests edit ``routes``."""
    return FakeApi(routes)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW
