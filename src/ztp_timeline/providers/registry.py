"""Provider registry for timeline collection.

Registration order matters: it is the tie-break order for records that
share a timestamp. Adding coverage for a new resource means registering
one more provider, not editing the collection loop.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from ztp_timeline.logging_config import get_logger
from ztp_timeline.models.enums import MilestoneCategory
from ztp_timeline.providers.assisted import AssistedServiceProvider
from ztp_timeline.providers.base import EventProvider
from ztp_timeline.providers.discovery import (
    AgentProvider,
    BareMetalHostProvider,
    InfraEnvProvider,
)
from ztp_timeline.providers.gitops import ArgoApplicationProvider, ClusterInstanceProvider
from ztp_timeline.providers.install import (
    AgentClusterInstallProvider,
    ClusterDeploymentProvider,
)
from ztp_timeline.providers.kube import KubeEventProvider
from ztp_timeline.providers.managed_cluster import ManagedClusterProvider, ZtpDoneProvider
from ztp_timeline.providers.manifestwork import ManifestWorkProvider
from ztp_timeline.providers.policy import PolicyEventProvider, PolicyStatusProvider
from ztp_timeline.providers.talm import TalmCguProvider

if TYPE_CHECKING:
    from ztp_timeline.config.settings import Settings
    from ztp_timeline.transport.base import BaseTransport

__all__ = ["ProviderRegistry", "default_registry"]

logger = get_logger(__name__)


class ProviderRegistry:
    """Ordered collection of event providers."""

    def __init__(self) -> None:
        self._providers: list[EventProvider] = []

    def register(self, provider: EventProvider) -> None:
        """Register a provider after all previously registered ones.

        Raises:
            ValueError: If a provider with the same name is already registered.

        """
        if provider.name in self.names:
            raise ValueError(f"Provider already registered: {provider.name}")
        self._providers.append(provider)
        logger.debug("provider_registered", provider=provider.name)

    def register_all(self, providers: Iterable[EventProvider]) -> None:
        """Register multiple providers at once, in order."""
        for provider in providers:
            self.register(provider)

    @property
    def providers(self) -> list[EventProvider]:
        """Registered providers in registration order."""
        return list(self._providers)

    @property
    def names(self) -> list[str]:
        """Registered provider names in registration order."""
        return [provider.name for provider in self._providers]

    def __len__(self) -> int:
        return len(self._providers)

    def __iter__(self) -> Iterator[EventProvider]:
        return iter(list(self._providers))


def default_registry(transport: BaseTransport, settings: Settings) -> ProviderRegistry:
    """Build the registry of every ZTP provider, in tie-break order.

    Args:
        transport: Transport shared by all providers.
        settings: Namespaces used by the GitOps and TALM providers.

    Returns:
        A populated ProviderRegistry.

    """
    registry = ProviderRegistry()
    registry.register_all(
        [
            ArgoApplicationProvider(transport, settings.gitops_namespaces),
            ClusterInstanceProvider(transport),
            ManagedClusterProvider(transport),
            ZtpDoneProvider(transport),
            AgentClusterInstallProvider(transport),
            KubeEventProvider(transport, "AgentClusterInstall", MilestoneCategory.CLUSTER_INSTALL),
            AssistedServiceProvider(transport),
            ClusterDeploymentProvider(transport),
            InfraEnvProvider(transport),
            AgentProvider(transport),
            BareMetalHostProvider(transport),
            KubeEventProvider(
                transport,
                "BareMetalHost",
                MilestoneCategory.PROVISIONING,
                include_object_name=True,
            ),
            KubeEventProvider(transport, "ManagedCluster", MilestoneCategory.IMPORT),
            ManifestWorkProvider(transport),
            PolicyEventProvider(transport),
            PolicyStatusProvider(transport),
            TalmCguProvider(transport, settings.cgu_namespace),
        ]
    )
    return registry
