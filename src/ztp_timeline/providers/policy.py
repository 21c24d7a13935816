"""Policy providers: compliance status events and current policy status.

Only the Compliant classification produced by classify_compliance() can
satisfy the "policies compliant" milestone; see core.classification for
the keyword precedence.
"""

from datetime import datetime
from typing import Any

from ztp_timeline.core.classification import classify_compliance
from ztp_timeline.logging_config import get_logger
from ztp_timeline.models.enums import MilestoneCategory
from ztp_timeline.models.event import RawEvent
from ztp_timeline.models.exceptions import TimestampParseError
from ztp_timeline.models.timestamps import parse_timestamp
from ztp_timeline.providers.base import EventProvider
from ztp_timeline.providers.kube import creation_event, event_time, list_items, object_name

__all__ = ["PolicyEventProvider", "PolicyStatusProvider", "policy_short_name"]

logger = get_logger(__name__)

_STATUS_SYNC_REASON = "PolicyStatusSync"


def policy_short_name(name: str) -> str:
    """Strip the parent namespace from a replicated policy name.

    Replicated policies are named ``<parent-namespace>.<policy>``; the
    second dot-separated segment is the short name. Names without a dot are
    returned unchanged.

    Example:
        >>> policy_short_name("ztp-common.common-config-policy")
        'common-config-policy'
        >>> policy_short_name("ztp-group.du-sno.v4")
        'du-sno'

    """
    segments = name.split(".")
    return segments[1] if len(segments) > 1 and segments[1] else name


class PolicyEventProvider(EventProvider):
    """PolicyStatusSync events, classified into Compliant / NonCompliant / StatusChange."""

    name = "policy-events"

    async def collect(self, workflow_id: str) -> list[RawEvent]:
        data = await self.transport.get_json("events", namespace=workflow_id)
        events: list[RawEvent] = []
        for item in list_items(data):
            involved = item.get("involvedObject", {})
            if involved.get("kind") != "Policy" or item.get("reason") != _STATUS_SYNC_REASON:
                continue
            message = item.get("message") or ""
            state = classify_compliance(message)
            short = policy_short_name(involved.get("name", ""))
            events.append(
                RawEvent(
                    timestamp=event_time(item),
                    event=f"Policy.{short}.{state.value}",
                    event_description=message,
                    milestone=MilestoneCategory.POLICY,
                    metadata={"compliance": state.value},
                )
            )
        return events


class PolicyStatusProvider(EventProvider):
    """Current compliance of each policy replicated to the cluster namespace.

    Timed by the newest compliance history entry; policies without history
    fall back to their creation time.
    """

    name = "policy-status"

    async def collect(self, workflow_id: str) -> list[RawEvent]:
        data = await self.transport.get_json("policy", namespace=workflow_id)
        events: list[RawEvent] = []
        for policy in list_items(data):
            policy_name = object_name(policy)
            compliant = policy.get("status", {}).get("compliant") or "Unknown"
            event = creation_event(
                policy,
                f"Policy.{policy_short_name(policy_name)}.CurrentStatus",
                f"Policy {policy_name} status: {compliant}",
                MilestoneCategory.POLICY,
                compliance=compliant,
            )
            latest = _latest_history_timestamp(policy)
            if latest:
                event = event.model_copy(update={"timestamp": latest})
            events.append(event)
        return events


def _latest_history_timestamp(policy: dict[str, Any]) -> str | None:
    """Return the newest history ``lastTimestamp`` as written by the hub."""
    latest: tuple[datetime, str] | None = None
    for detail in policy.get("status", {}).get("details") or []:
        for entry in detail.get("history") or []:
            stamp = entry.get("lastTimestamp")
            if not stamp:
                continue
            try:
                instant = parse_timestamp(stamp)
            except TimestampParseError:
                logger.debug("history_timestamp_skipped", policy=object_name(policy), value=stamp)
                continue
            if latest is None or instant > latest[0]:
                latest = (instant, stamp)
    return latest[1] if latest else None
