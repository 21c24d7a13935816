"""Event providers for ZTP deployment resources.

Each provider maps one hub resource (or one kind of Kubernetes Event) to
RawEvents. Providers are registered in a ProviderRegistry; use
default_registry() for the full ZTP set.
"""

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
from ztp_timeline.providers.kube import KubeEventProvider, ResourceProvider
from ztp_timeline.providers.managed_cluster import ManagedClusterProvider, ZtpDoneProvider
from ztp_timeline.providers.manifestwork import ManifestWorkProvider
from ztp_timeline.providers.policy import (
    PolicyEventProvider,
    PolicyStatusProvider,
    policy_short_name,
)
from ztp_timeline.providers.registry import ProviderRegistry, default_registry
from ztp_timeline.providers.talm import TalmCguProvider

__all__ = [
    "AgentClusterInstallProvider",
    "AgentProvider",
    "ArgoApplicationProvider",
    "AssistedServiceProvider",
    "BareMetalHostProvider",
    "ClusterDeploymentProvider",
    "ClusterInstanceProvider",
    "default_registry",
    "EventProvider",
    "InfraEnvProvider",
    "KubeEventProvider",
    "ManagedClusterProvider",
    "ManifestWorkProvider",
    "policy_short_name",
    "PolicyEventProvider",
    "PolicyStatusProvider",
    "ProviderRegistry",
    "ResourceProvider",
    "TalmCguProvider",
    "ZtpDoneProvider",
]
