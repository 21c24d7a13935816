"""Discovery and provisioning providers: InfraEnv, Agent, BareMetalHost."""

from typing import Any

from ztp_timeline.models.enums import MilestoneCategory
from ztp_timeline.models.event import RawEvent
from ztp_timeline.providers.kube import ResourceProvider, creation_event, object_name

__all__ = ["AgentProvider", "BareMetalHostProvider", "InfraEnvProvider"]


class InfraEnvProvider(ResourceProvider):
    """InfraEnv creation and conditions such as ``ImageCreated``."""

    name = "infraenv"
    resource = "infraenv"
    kind = "InfraEnv"
    category = MilestoneCategory.DISCOVERY
    created_suffix = "created for discovery ISO"


class AgentProvider(ResourceProvider):
    """Agent registration and conditions such as ``Bound`` and ``Installed``."""

    name = "agent"
    resource = "agent"
    kind = "Agent"
    category = MilestoneCategory.DISCOVERY

    def created(self, obj: dict[str, Any]) -> RawEvent:
        return creation_event(
            obj,
            "Agent.Registered",
            f"Agent {object_name(obj)} registered with discovery service",
            self.category,
            agent=object_name(obj),
        )


class BareMetalHostProvider(ResourceProvider):
    """BareMetalHost creation."""

    name = "baremetalhost"
    resource = "baremetalhost"
    kind = "BareMetalHost"
    category = MilestoneCategory.PROVISIONING
