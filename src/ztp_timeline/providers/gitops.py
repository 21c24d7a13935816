"""GitOps trigger providers: ArgoCD Application and SiteConfig ClusterInstance."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from ztp_timeline.config.defaults import SITECONFIG_SOURCE_PATH
from ztp_timeline.logging_config import get_logger
from ztp_timeline.models.enums import MilestoneCategory
from ztp_timeline.models.event import RawEvent
from ztp_timeline.models.exceptions import TimestampParseError
from ztp_timeline.models.timestamps import parse_timestamp
from ztp_timeline.providers.base import EventProvider
from ztp_timeline.providers.kube import (
    condition_events,
    creation_event,
    list_items,
    object_name,
)
from ztp_timeline.transport.exceptions import SourceUnavailableError

if TYPE_CHECKING:
    from ztp_timeline.transport.base import BaseTransport

__all__ = ["ArgoApplicationProvider", "ClusterInstanceProvider"]

logger = get_logger(__name__)


def _source_paths(application: dict[str, Any]) -> list[str]:
    spec = application.get("spec", {})
    sources = [spec.get("source")] if spec.get("source") else []
    sources.extend(spec.get("sources") or [])
    return [source.get("path", "") for source in sources if isinstance(source, dict)]


class ArgoApplicationProvider(EventProvider):
    """Earliest GitOps trigger: creation of the siteconfig ArgoCD Application.

    The Application is not named after the cluster, so every configured
    namespace is searched and only the single earliest match is returned.
    A namespace that cannot be queried is skipped.

    Args:
        transport: Transport used for all hub queries.
        namespaces: Namespaces that may hold ArgoCD Applications.
        source_path: Repository path identifying siteconfig Applications.

    """

    name = "argocd-application"

    def __init__(
        self,
        transport: BaseTransport,
        namespaces: Sequence[str],
        source_path: str = SITECONFIG_SOURCE_PATH,
    ) -> None:
        super().__init__(transport)
        self.namespaces = list(namespaces)
        self.source_path = source_path

    async def collect(self, workflow_id: str) -> list[RawEvent]:
        candidates: list[RawEvent] = []
        for namespace in self.namespaces:
            try:
                data = await self.transport.get_json(
                    "applications.argoproj.io", namespace=namespace
                )
            except SourceUnavailableError as e:
                logger.debug("gitops_namespace_unavailable", namespace=namespace, error=str(e))
                continue
            for app in list_items(data):
                if self.source_path not in _source_paths(app):
                    continue
                app_name = object_name(app)
                candidates.append(
                    creation_event(
                        app,
                        "ZTP.ArgoApplicationCreated",
                        f"ArgoCD Application {app_name} created - GitOps deployment "
                        f"triggered ({self.source_path} path)",
                        MilestoneCategory.GITOPS_TRIGGER,
                        namespace=namespace,
                        app_name=app_name,
                    )
                )
        earliest = _earliest(candidates)
        return [earliest] if earliest else []


def _earliest(events: list[RawEvent]) -> RawEvent | None:
    timed = []
    for event in events:
        try:
            timed.append((parse_timestamp(event.timestamp), event))
        except TimestampParseError:
            continue
    if not timed:
        return None
    return min(timed, key=lambda pair: pair[0])[1]


class ClusterInstanceProvider(EventProvider):
    """SiteConfig v2 ClusterInstance creation and its conditions.

    Only SiteConfig v2 deployments have a ClusterInstance; on older hubs the
    resource type is absent and this provider contributes nothing.
    """

    name = "clusterinstance"

    async def collect(self, workflow_id: str) -> list[RawEvent]:
        data = await self.transport.get_json(
            "clusterinstances.siteconfig.open-cluster-management.io",
            namespace=workflow_id,
        )
        items = list_items(data)
        if not items:
            return []

        first = items[0]
        events = [
            creation_event(
                first,
                "ZTP.ClusterInstanceCreated",
                f"ClusterInstance {object_name(first)} created by SiteConfig v2 operator",
                MilestoneCategory.GITOPS_TRIGGER,
                clusterinstance_name=object_name(first),
            )
        ]
        for item in items:
            events.extend(
                condition_events(
                    item, "ClusterInstance.Condition", MilestoneCategory.GITOPS_TRIGGER
                )
            )
        return events
