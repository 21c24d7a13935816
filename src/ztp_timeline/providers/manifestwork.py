"""ManifestWork provider: ACM agent and add-on deployment to the spoke."""

from ztp_timeline.models.enums import MilestoneCategory
from ztp_timeline.models.event import RawEvent
from ztp_timeline.providers.base import EventProvider
from ztp_timeline.providers.kube import (
    condition_events,
    creation_event,
    list_items,
    object_name,
)

__all__ = ["ManifestWorkProvider"]


class ManifestWorkProvider(EventProvider):
    """ManifestWork creation and conditions, named per ManifestWork.

    The klusterlet ManifestWorks mark the start of the ACM import.
    """

    name = "manifestwork"

    async def collect(self, workflow_id: str) -> list[RawEvent]:
        data = await self.transport.get_json("manifestwork", namespace=workflow_id)
        events: list[RawEvent] = []
        for work in list_items(data):
            work_name = object_name(work)
            events.append(
                creation_event(
                    work,
                    f"ManifestWork.Created.{work_name}",
                    f"ManifestWork {work_name} created",
                    MilestoneCategory.MANIFEST_APPLY,
                )
            )
            events.extend(
                condition_events(
                    work, f"ManifestWork.{work_name}", MilestoneCategory.MANIFEST_APPLY
                )
            )
        return events
