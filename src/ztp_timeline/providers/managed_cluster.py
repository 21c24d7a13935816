"""ManagedCluster providers: GitOps sync, import conditions, ztp-done marker."""

from ztp_timeline.config.defaults import ZTP_DONE_LABEL
from ztp_timeline.models.enums import MilestoneCategory
from ztp_timeline.models.event import RawEvent
from ztp_timeline.providers.base import EventProvider
from ztp_timeline.providers.kube import condition_events, creation_event, object_name

__all__ = ["ManagedClusterProvider", "ZtpDoneProvider"]

_AVAILABLE_CONDITION = "ManagedCluster.Condition.ManagedClusterConditionAvailable"


class ManagedClusterProvider(EventProvider):
    """ManagedCluster creation (the GitOps sync) and its status conditions.

    Conditions belong to the import phase, except the Available condition,
    which is reported under AVAILABILITY.
    """

    name = "managedcluster"

    async def collect(self, workflow_id: str) -> list[RawEvent]:
        cluster = await self.transport.get_json("managedcluster", workflow_id)
        if not cluster:
            return []

        events = [
            creation_event(
                cluster,
                "ZTP.ManagedClusterCreated",
                "ManagedCluster created by GitOps - Start of deployment for "
                f"{object_name(cluster)}",
                MilestoneCategory.GITOPS_SYNC,
            )
        ]
        for event in condition_events(
            cluster, "ManagedCluster.Condition", MilestoneCategory.IMPORT
        ):
            if event.event == _AVAILABLE_CONDITION:
                event = event.model_copy(update={"milestone": MilestoneCategory.AVAILABILITY})
            events.append(event)
        return events


class ZtpDoneProvider(EventProvider):
    """Presence of the ``ztp-done`` label on the ManagedCluster.

    Emits at most one record. The label carries no transition time, so the
    record reuses the ManagedCluster creation time as a placeholder; it is
    a presence flag and is excluded from every duration computation.
    """

    name = "ztp-done"

    async def collect(self, workflow_id: str) -> list[RawEvent]:
        cluster = await self.transport.get_json("managedcluster", workflow_id)
        if not cluster:
            return []
        labels = cluster.get("metadata", {}).get("labels") or {}
        if ZTP_DONE_LABEL not in labels:
            return []
        return [
            creation_event(
                cluster,
                "ZTP.ZtpDoneLabelPresent",
                f"{ZTP_DONE_LABEL} label is present on cluster",
                MilestoneCategory.DONE_MARKER,
                presence_only=True,
            )
        ]
