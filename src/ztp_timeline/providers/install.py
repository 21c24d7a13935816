"""Cluster installation providers: AgentClusterInstall and ClusterDeployment."""

from ztp_timeline.models.enums import MilestoneCategory
from ztp_timeline.providers.kube import ResourceProvider

__all__ = ["AgentClusterInstallProvider", "ClusterDeploymentProvider"]


class AgentClusterInstallProvider(ResourceProvider):
    """AgentClusterInstall creation and installation conditions."""

    name = "agentclusterinstall"
    resource = "agentclusterinstall"
    kind = "AgentClusterInstall"
    category = MilestoneCategory.CLUSTER_INSTALL


class ClusterDeploymentProvider(ResourceProvider):
    """Hive ClusterDeployment creation and conditions."""

    name = "clusterdeployment"
    resource = "clusterdeployment"
    kind = "ClusterDeployment"
    category = MilestoneCategory.CLUSTER_INSTALL
