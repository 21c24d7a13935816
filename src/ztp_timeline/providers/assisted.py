"""Assisted-service installer events.

The AgentClusterInstall publishes an events URL in ``status.debugInfo``.
Its cluster and host status updates are finer-grained than the
AgentClusterInstall conditions and carry their own event times.
"""

from typing import Any

from ztp_timeline.core.classification import classify_cluster_status, is_host_installing
from ztp_timeline.models.enums import MilestoneCategory
from ztp_timeline.models.event import RawEvent
from ztp_timeline.providers.base import EventProvider
from ztp_timeline.providers.kube import list_items

__all__ = ["AssistedServiceProvider"]


class AssistedServiceProvider(EventProvider):
    """Cluster status transitions and host installation starts."""

    name = "assisted-service"

    async def collect(self, workflow_id: str) -> list[RawEvent]:
        data = await self.transport.get_json("agentclusterinstall", namespace=workflow_id)
        url = _events_url(list_items(data))
        if not url:
            return []

        payload = await self.transport.fetch_json(url)
        if not isinstance(payload, list):
            return []

        events: list[RawEvent] = []
        for item in payload:
            if not isinstance(item, dict):
                continue
            message = item.get("message") or ""
            if item.get("name") == "cluster_status_updated":
                event = f"AssistedService.ClusterStatus.{classify_cluster_status(message)}"
            elif item.get("name") == "host_status_updated" and is_host_installing(message):
                event = "AssistedService.HostInstalling"
            else:
                continue
            events.append(
                RawEvent(
                    timestamp=item.get("event_time"),
                    event=event,
                    event_description=message,
                    milestone=MilestoneCategory.CLUSTER_INSTALL,
                )
            )
        return events


def _events_url(installs: list[dict[str, Any]]) -> str | None:
    for install in installs:
        url = install.get("status", {}).get("debugInfo", {}).get("eventsURL")
        if url:
            return url
    return None
