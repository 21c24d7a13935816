"""Enumeration types for ztp-timeline.

This module defines the enum types used throughout the package, including
the milestone category taxonomy and provider/anchor status indicators.
"""

from enum import Enum

__all__ = [
    "AnchorSelection",
    "ComplianceState",
    "MilestoneCategory",
    "ProviderStatus",
]


class MilestoneCategory(str, Enum):
    """Ordered taxonomy of ZTP workflow phases.

    Declaration order is the display order used for grouping. It is not a
    temporal order: phases overlap in real deployments.

    Attributes:
        GITOPS_TRIGGER: ArgoCD Application / ClusterInstance creation.
        GITOPS_SYNC: ManagedCluster created by the GitOps sync.
        CLUSTER_INSTALL: AgentClusterInstall, ClusterDeployment, assisted installer.
        DISCOVERY: InfraEnv and Agent registration.
        PROVISIONING: BareMetalHost provisioning.
        IMPORT: ManagedCluster import into ACM.
        MANIFEST_APPLY: ManifestWork application.
        POLICY: Policy application and compliance.
        AVAILABILITY: ManagedCluster reported available.
        POLICY_COMPLETION: TALM ClusterGroupUpgrade progress and completion.
        DONE_MARKER: ztp-done label presence (not a timed event).
    """

    GITOPS_TRIGGER = "GITOPS_TRIGGER"
    GITOPS_SYNC = "GITOPS_SYNC"
    CLUSTER_INSTALL = "CLUSTER_INSTALL"
    DISCOVERY = "DISCOVERY"
    PROVISIONING = "PROVISIONING"
    IMPORT = "IMPORT"
    MANIFEST_APPLY = "MANIFEST_APPLY"
    POLICY = "POLICY"
    AVAILABILITY = "AVAILABILITY"
    POLICY_COMPLETION = "POLICY_COMPLETION"
    DONE_MARKER = "DONE_MARKER"

    @property
    def rank(self) -> int:
        """Position of the category in the taxonomy."""
        return list(MilestoneCategory).index(self)

    @property
    def is_timed(self) -> bool:
        """Whether records in this category carry a meaningful instant."""
        return self is not MilestoneCategory.DONE_MARKER


class ProviderStatus(str, Enum):
    """Outcome of a single provider invocation.

    Attributes:
        ok: Provider ran; it may still have returned zero records.
        timeout: Provider did not finish in time; contributed nothing.
        failed: Provider raised an unexpected error; contributed nothing.
        transport_error: The transport could not run the provider's queries.
    """

    ok = "ok"
    timeout = "timeout"
    failed = "failed"
    transport_error = "transport_error"


class AnchorSelection(str, Enum):
    """Which matching record an anchor or milestone uses.

    Attributes:
        first: The earliest matching record.
        last: The latest matching record (terminal signals).
    """

    first = "first"
    last = "last"


class ComplianceState(str, Enum):
    """Classification of a policy status message.

    Attributes:
        Compliant: Positive terminal state.
        NonCompliant: Negative state; always wins over Compliant.
        StatusChange: Neither keyword present.
    """

    Compliant = "Compliant"
    NonCompliant = "NonCompliant"
    StatusChange = "StatusChange"
