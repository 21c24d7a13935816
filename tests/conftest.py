"""Pytest configuration and shared fixtures for the ztp-timeline test suite.

This module provides a FakeTransport that answers canned ``oc`` and
``curl`` responses, and a realistic single-node ZTP deployment on a hub.
"""

import asyncio
import json
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

import pytest

from ztp_timeline.config.settings import Settings
from ztp_timeline.core.timeline import TimelineBuilder
from ztp_timeline.models.timeline import Timeline
from ztp_timeline.providers.registry import default_registry
from ztp_timeline.transport.base import BaseTransport, ExecResult
from ztp_timeline.transport.exceptions import TransportError

CLUSTER = "sno-1"
EVENTS_URL = "https://assisted-service.example/api/v2/events?cluster_id=abc"
NOW = datetime(2024, 5, 1, 12, 45, 0, tzinfo=UTC)

NOT_FOUND = 'Error from server (NotFound): managedclusters.cluster "x" not found'


class FakeTransport(BaseTransport):
    """Transport answering from dictionaries instead of running commands.

    ``resources`` is keyed by the query an ``oc get`` would run, e.g.
    ``"managedcluster sno-1"`` or ``"agent -n sno-1"``. Unknown queries
    answer NotFound. ``failures`` maps a query to the stderr of a failed
    command. ``urls`` maps curl URLs to JSON payloads.
    """

    def __init__(
        self,
        resources: dict[str, Any] | None = None,
        urls: dict[str, Any] | None = None,
        failures: dict[str, str] | None = None,
        *,
        reachable: bool = True,
    ) -> None:
        super().__init__(kubeconfig="/fake/hub-kubeconfig")
        self.resources = dict(resources or {})
        self.urls = dict(urls or {})
        self.failures = dict(failures or {})
        self.reachable = reachable
        self.commands: list[list[str]] = []

    @property
    def name(self) -> str:
        return "fake hub"

    def is_available(self) -> bool:
        return True

    def build_command(self, argv: list[str]) -> list[str]:
        return list(argv)

    async def run(self, argv: list[str]) -> ExecResult:
        self.commands.append(list(argv))
        if not self.reachable:
            raise TransportError(self.name, "connection refused")

        if argv[0] == self.curl_binary:
            url = argv[-1]
            if url in self.urls:
                return ExecResult(0, json.dumps(self.urls[url]), "")
            return ExecResult(7, "", "curl: (7) Failed to connect")

        # oc --kubeconfig <path> <args...>
        args = argv[3:]
        if args[0] == "whoami":
            return ExecResult(0, "system:admin\n", "")

        query = " ".join(args[1:-2])
        if query in self.failures:
            return ExecResult(1, "", self.failures[query])
        if query in self.resources:
            return ExecResult(0, json.dumps(self.resources[query]), "")
        return ExecResult(1, "", NOT_FOUND)


def _meta(name: str, created: str, **extra: Any) -> dict[str, Any]:
    return {"name": name, "creationTimestamp": created, **extra}


def _condition(kind: str, time: str, reason: str = "", message: str = "") -> dict[str, Any]:
    return {
        "type": kind,
        "status": "True",
        "lastTransitionTime": time,
        "reason": reason,
        "message": message,
    }


def _event(kind: str, name: str, reason: str, message: str, time: str) -> dict[str, Any]:
    return {
        "involvedObject": {"kind": kind, "name": name},
        "reason": reason,
        "message": message,
        "lastTimestamp": time,
    }


def ztp_deployment() -> tuple[dict[str, Any], dict[str, Any]]:
    """Hub resources and assisted-service URLs of one finished SNO deployment."""
    ns = f"-n {CLUSTER}"
    resources: dict[str, Any] = {
        "infrastructure cluster": {"status": {"infrastructureName": "hub-x7k2p"}},
        "applications.argoproj.io -n openshift-gitops": {
            "items": [
                {
                    "metadata": _meta("clusters", "2024-05-01T10:00:00Z"),
                    "spec": {"source": {"path": "siteconfig"}},
                },
                {
                    "metadata": _meta("policies", "2024-05-01T09:00:00Z"),
                    "spec": {"source": {"path": "policygentemplates"}},
                },
            ]
        },
        "applications.argoproj.io -n argocd": {"items": []},
        f"clusterinstances.siteconfig.open-cluster-management.io {ns}": {
            "items": [
                {
                    "metadata": _meta(CLUSTER, "2024-05-01T10:00:30Z"),
                    "status": {
                        "conditions": [
                            _condition("ClusterInstanceValidated", "2024-05-01T10:00:35Z", "Completed"),
                        ]
                    },
                }
            ]
        },
        f"managedcluster {CLUSTER}": {
            "metadata": _meta(CLUSTER, "2024-05-01T10:01:00Z", labels={"ztp-done": ""}),
            "status": {
                "conditions": [
                    _condition("HubAcceptedManagedCluster", "2024-05-01T10:01:05Z"),
                    _condition("ManagedClusterJoined", "2024-05-01T11:05:00Z"),
                    _condition("ManagedClusterConditionAvailable", "2024-05-01T11:06:00Z"),
                ]
            },
        },
        f"agentclusterinstall {ns}": {
            "items": [
                {
                    "metadata": _meta(CLUSTER, "2024-05-01T10:01:10Z"),
                    "status": {
                        "debugInfo": {"eventsURL": EVENTS_URL},
                        "conditions": [
                            _condition(
                                "Completed",
                                "2024-05-01T11:00:00Z",
                                "InstallationCompleted",
                                "The installation has completed",
                            ),
                        ],
                    },
                }
            ]
        },
        f"events {ns}": {
            "items": [
                _event(
                    "BareMetalHost",
                    CLUSTER,
                    "ProvisioningStarted",
                    "Image provisioning started",
                    "2024-05-01T10:05:00Z",
                ),
                _event(
                    "Policy",
                    "ztp-common.common-config-policy",
                    "PolicyStatusSync",
                    "NonCompliant; violation - subscriptions not found",
                    "2024-05-01T11:10:00Z",
                ),
                _event(
                    "Policy",
                    "ztp-common.common-config-policy",
                    "PolicyStatusSync",
                    "Compliant; notification - subscriptions found as specified",
                    "2024-05-01T11:30:00Z",
                ),
                _event(
                    "Policy",
                    "ztp-group.group-du-sno-config-policy",
                    "PolicyStatusSync",
                    "Compliant; notification - all resources found",
                    "2024-05-01T11:40:00Z",
                ),
            ]
        },
        f"clusterdeployment {ns}": {
            "items": [{"metadata": _meta(CLUSTER, "2024-05-01T10:01:10Z")}]
        },
        f"infraenv {ns}": {
            "items": [
                {
                    "metadata": _meta(CLUSTER, "2024-05-01T10:01:12Z"),
                    "status": {
                        "conditions": [
                            _condition("ImageCreated", "2024-05-01T10:02:00Z", "ImageCreated"),
                        ]
                    },
                }
            ]
        },
        f"agent {ns}": {
            "items": [
                {
                    "metadata": _meta("a1b2c3", "2024-05-01T10:08:00Z"),
                    "status": {
                        "conditions": [
                            _condition("Bound", "2024-05-01T10:10:00Z", "Bound"),
                            _condition("Installed", "2024-05-01T11:00:00Z", "InstallationCompleted"),
                        ]
                    },
                }
            ]
        },
        f"baremetalhost {ns}": {
            "items": [{"metadata": _meta(CLUSTER, "2024-05-01T10:01:15Z")}]
        },
        f"manifestwork {ns}": {
            "items": [
                {
                    "metadata": _meta(f"{CLUSTER}-klusterlet", "2024-05-01T11:04:00Z"),
                    "status": {
                        "conditions": [_condition("Applied", "2024-05-01T11:04:10Z")]
                    },
                }
            ]
        },
        f"policy {ns}": {
            "items": [
                {
                    "metadata": _meta("ztp-common.common-config-policy", "2024-05-01T11:08:00Z"),
                    "status": {
                        "compliant": "Compliant",
                        "details": [
                            {"history": [{"lastTimestamp": "2024-05-01T11:30:00Z"}]},
                        ],
                    },
                }
            ]
        },
        f"clustergroupupgrade {CLUSTER} -n ztp-install": {
            "metadata": _meta(CLUSTER, "2024-05-01T11:07:00Z"),
            "status": {
                "status": {
                    "startedAt": "2024-05-01T11:08:00Z",
                    "completedAt": "2024-05-01T11:45:00Z",
                }
            },
        },
    }
    urls: dict[str, Any] = {
        EVENTS_URL: [
            {
                "name": "cluster_status_updated",
                "message": "Updated status of the cluster to installing",
                "event_time": "2024-05-01T10:20:00.123Z",
            },
            {
                "name": "host_status_updated",
                "message": "Host sno-1: updated status from preparing-successful to installing",
                "event_time": "2024-05-01T10:20:05.500Z",
            },
            {
                "name": "cluster_status_updated",
                "message": "Updated status of the cluster to installed",
                "event_time": "2024-05-01T11:00:00Z",
            },
        ]
    }
    return resources, urls


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults only, independent of the environment."""
    return Settings(_env_file=None, kubeconfig="/fake/hub-kubeconfig")


@pytest.fixture
def make_transport() -> Callable[..., FakeTransport]:
    """Factory for FakeTransport instances."""
    return FakeTransport


@pytest.fixture
def ztp_hub() -> FakeTransport:
    """A hub holding one completed SNO deployment named sno-1."""
    resources, urls = ztp_deployment()
    return FakeTransport(resources=resources, urls=urls)


@pytest.fixture
def fixed_now() -> datetime:
    """Pinned "now" used by summarizer and report tests."""
    return NOW


@pytest.fixture
def ztp_timeline(ztp_hub: FakeTransport, settings: Settings) -> Timeline:
    """The merged timeline of the sno-1 deployment, for synchronous tests."""
    builder = TimelineBuilder(default_registry(ztp_hub, settings))
    return asyncio.run(builder.build(CLUSTER))
