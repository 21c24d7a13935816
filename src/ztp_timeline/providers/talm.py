"""TALM ClusterGroupUpgrade provider.

ZTP creates a ClusterGroupUpgrade named after the cluster in the
``ztp-install`` namespace. Its ``completedAt`` is the moment TALM saw every
policy compliant: the most accurate "ready for workloads" signal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ztp_timeline.config.defaults import DEFAULT_CGU_NAMESPACE
from ztp_timeline.models.enums import MilestoneCategory
from ztp_timeline.models.event import RawEvent
from ztp_timeline.providers.base import EventProvider
from ztp_timeline.providers.kube import object_name

if TYPE_CHECKING:
    from ztp_timeline.transport.base import BaseTransport

__all__ = ["TalmCguProvider"]

_CATEGORY = MilestoneCategory.POLICY_COMPLETION


class TalmCguProvider(EventProvider):
    """CGU start, completion, conditions and managed policies.

    Args:
        transport: Transport used for all hub queries.
        namespace: Namespace of the ZTP ClusterGroupUpgrade.

    """

    name = "talm-cgu"

    def __init__(self, transport: BaseTransport, namespace: str = DEFAULT_CGU_NAMESPACE) -> None:
        super().__init__(transport)
        self.namespace = namespace

    async def collect(self, workflow_id: str) -> list[RawEvent]:
        cgu = await self.transport.get_json("clustergroupupgrade", workflow_id, self.namespace)
        if not cgu:
            return []

        cgu_name = object_name(cgu)
        status = cgu.get("status", {})
        progress = status.get("status") or {}
        events: list[RawEvent] = []

        if progress.get("startedAt"):
            events.append(
                RawEvent(
                    timestamp=progress["startedAt"],
                    event="TALM.CGU.Started",
                    event_description=f"TALM ClusterGroupUpgrade {cgu_name} started remediation",
                    milestone=_CATEGORY,
                )
            )
        if progress.get("completedAt"):
            events.append(
                RawEvent(
                    timestamp=progress["completedAt"],
                    event="TALM.CGU.Completed",
                    event_description=(
                        f"TALM ClusterGroupUpgrade {cgu_name} completed - All policies "
                        "applied and cluster ready"
                    ),
                    milestone=_CATEGORY,
                    metadata={"cgu_name": cgu_name, "cgu_namespace": self.namespace},
                )
            )

        for condition in status.get("conditions") or []:
            if not condition.get("type"):
                continue
            events.append(
                RawEvent(
                    timestamp=condition.get("lastTransitionTime"),
                    event=f"TALM.CGU.Condition.{condition['type']}",
                    event_description=(
                        f"{condition.get('reason') or ''}: {condition.get('message') or ''}"
                    ),
                    milestone=_CATEGORY,
                    metadata={"cgu_status": condition.get("status")},
                )
            )

        for policy in status.get("managedPoliciesForUpgrade") or []:
            policy_status = policy.get("status") or {}
            events.append(
                RawEvent(
                    # entries without their own time are dropped downstream
                    timestamp=policy_status.get("completedAt") or policy.get("lastTransitionTime"),
                    event=f"TALM.CGU.ManagedPolicy.{policy.get('name', '')}",
                    event_description=(
                        f"Managed policy {policy.get('name', '')} - "
                        f"{policy_status.get('compliant') or 'unknown'}"
                    ),
                    milestone=_CATEGORY,
                )
            )
        return events
