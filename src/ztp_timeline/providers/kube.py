"""Mapping helpers shared by providers that read Kubernetes objects.

Every helper emits one RawEvent per state transition: one per status
condition (timed by its own ``lastTransitionTime``) and one per Kubernetes
Event, plus one creation event per object.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ztp_timeline.models.enums import MilestoneCategory
from ztp_timeline.models.event import RawEvent
from ztp_timeline.providers.base import EventProvider

if TYPE_CHECKING:
    from ztp_timeline.transport.base import BaseTransport

__all__ = [
    "KubeEventProvider",
    "ResourceProvider",
    "condition_events",
    "creation_event",
    "event_time",
    "list_items",
    "object_name",
]


def list_items(data: dict[str, Any] | None) -> list[dict[str, Any]]:
    """Return the ``items`` of a List response; empty for None."""
    if not data:
        return []
    items = data.get("items") or []
    return [item for item in items if isinstance(item, dict)]


def object_name(obj: dict[str, Any]) -> str:
    return obj.get("metadata", {}).get("name", "")


def creation_event(
    obj: dict[str, Any],
    event: str,
    description: str,
    milestone: MilestoneCategory,
    **metadata: Any,
) -> RawEvent:
    """Build the creation event of an object from its creationTimestamp."""
    return RawEvent(
        timestamp=obj.get("metadata", {}).get("creationTimestamp"),
        event=event,
        event_description=description,
        milestone=milestone,
        metadata=metadata,
    )


def condition_events(
    obj: dict[str, Any],
    prefix: str,
    milestone: MilestoneCategory,
) -> list[RawEvent]:
    """Build one event per status condition of an object.

    Args:
        obj: Kubernetes object.
        prefix: Event name prefix; the condition type is appended.
        milestone: Category for the events.

    Returns:
        Events named ``<prefix>.<type>`` with ``reason: message`` descriptions.

    """
    events: list[RawEvent] = []
    for condition in obj.get("status", {}).get("conditions") or []:
        condition_type = condition.get("type")
        if not condition_type:
            continue
        events.append(
            RawEvent(
                timestamp=condition.get("lastTransitionTime"),
                event=f"{prefix}.{condition_type}",
                event_description=_reason_message(condition),
                milestone=milestone,
                metadata={"status": condition.get("status")},
            )
        )
    return events


def event_time(event: dict[str, Any]) -> Any:
    """Pick the most precise time a Kubernetes Event carries."""
    return event.get("eventTime") or event.get("lastTimestamp") or event.get("firstTimestamp")


def _reason_message(condition: dict[str, Any]) -> str:
    return f"{condition.get('reason') or ''}: {condition.get('message') or ''}"


class ResourceProvider(EventProvider):
    """Creation and condition events for every object of one namespaced kind.

    Subclasses set the class attributes below; most ZTP resources need
    nothing more.

    Attributes:
        resource: Resource type passed to ``oc get``.
        kind: Display kind, used as event name prefix.
        category: Category for all emitted events.
        created_suffix: Description suffix for the creation event.

    """

    resource: str
    kind: str
    category: MilestoneCategory
    created_suffix: str = "created"

    async def collect(self, workflow_id: str) -> list[RawEvent]:
        data = await self.transport.get_json(self.resource, namespace=workflow_id)
        events: list[RawEvent] = []
        for obj in list_items(data):
            events.append(self.created(obj))
            events.extend(condition_events(obj, self.kind, self.category))
        return events

    def created(self, obj: dict[str, Any]) -> RawEvent:
        return creation_event(
            obj,
            f"{self.kind}.Created",
            f"{self.kind} {object_name(obj)} {self.created_suffix}",
            self.category,
        )


class KubeEventProvider(EventProvider):
    """Kubernetes Events about one involved-object kind in the cluster namespace.

    Args:
        transport: Transport used for all hub queries.
        kind: ``involvedObject.kind`` to select.
        category: Category for all emitted events.
        include_object_name: Prefix descriptions with the involved object name.

    """

    def __init__(
        self,
        transport: BaseTransport,
        kind: str,
        category: MilestoneCategory,
        include_object_name: bool = False,
    ) -> None:
        super().__init__(transport)
        self.kind = kind
        self.category = category
        self.include_object_name = include_object_name
        self.name = f"events/{kind}"

    async def collect(self, workflow_id: str) -> list[RawEvent]:
        data = await self.transport.get_json("events", namespace=workflow_id)
        events: list[RawEvent] = []
        for item in list_items(data):
            involved = item.get("involvedObject", {})
            if involved.get("kind") != self.kind:
                continue
            message = item.get("message") or ""
            if self.include_object_name:
                message = f"{involved.get('name', '')}: {message}"
            events.append(
                RawEvent(
                    timestamp=event_time(item),
                    event=f"{self.kind}.{item.get('reason') or 'Event'}",
                    event_description=message,
                    milestone=self.category,
                )
            )
        return events
