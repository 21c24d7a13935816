"""Milestone catalogs.

A MilestoneCatalog names the milestones of a workflow, the priority chains
for its start and completion anchors, the candidate spans for the
deployment-duration readout, and the feature-presence flags. The default
catalog describes a ZTP deployment; a catalog file can replace it.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from ztp_timeline.core.matchers import EventMatcher, policy_compliant
from ztp_timeline.models.anchor import AnchorSpec, MilestoneDefinition, SpanSpec
from ztp_timeline.models.enums import AnchorSelection

__all__ = [
    "FeatureFlag",
    "MilestoneCatalog",
    "default_catalog",
]


@dataclass(frozen=True)
class FeatureFlag:
    """A feature reported as present when a record with ``event`` exists.

    Attributes:
        label: Human label.
        event: Exact record name signalling the feature.
        present_notes: Explanatory lines shown when present.
        absent_notes: Explanatory lines shown when absent.

    """

    label: str
    event: str
    present_notes: tuple[str, ...] = ()
    absent_notes: tuple[str, ...] = ()


@dataclass(frozen=True)
class MilestoneCatalog:
    """Milestone definitions and the anchors, spans and flags built on them.

    ``markers`` pairs a key with a presence-only record name; markers are
    reported in key timestamps but never take part in durations.

    Raises:
        ValueError: On duplicate milestone keys, or spans naming unknown keys.

    """

    milestones: tuple[MilestoneDefinition, ...]
    start_anchor: AnchorSpec
    completion_anchor: AnchorSpec
    spans: tuple[SpanSpec, ...] = ()
    features: tuple[FeatureFlag, ...] = ()
    markers: tuple[tuple[str, str], ...] = ()
    _by_key: dict[str, MilestoneDefinition] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        by_key: dict[str, MilestoneDefinition] = {}
        for milestone in self.milestones:
            if milestone.key in by_key:
                raise ValueError(f"Duplicate milestone key: {milestone.key}")
            by_key[milestone.key] = milestone
        for span in self.spans:
            for key in (span.from_key, span.to_key):
                if key not in by_key:
                    raise ValueError(f"Span references unknown milestone: {key}")
        self._by_key.update(by_key)

    @property
    def keys(self) -> list[str]:
        """Milestone keys in definition order."""
        return [milestone.key for milestone in self.milestones]

    def milestone(self, key: str) -> MilestoneDefinition:
        """Look up a milestone definition.

        Raises:
            KeyError: If no milestone has this key.

        """
        return self._by_key[key]

    @classmethod
    def anchor_from_keys(
        cls,
        name: str,
        milestones: Iterable[MilestoneDefinition],
        keys: Iterable[str],
    ) -> AnchorSpec:
        """Build an AnchorSpec whose candidates are existing milestones.

        Raises:
            ValueError: If a key names no milestone.

        """
        by_key = {milestone.key: milestone for milestone in milestones}
        candidates = []
        for key in keys:
            if key not in by_key:
                raise ValueError(f"Anchor '{name}' references unknown milestone: {key}")
            candidates.append(by_key[key].as_candidate())
        return AnchorSpec(name=name, candidates=tuple(candidates))


def _exact(*names: str) -> EventMatcher:
    return EventMatcher(names=names)


_ZTP_MILESTONES = (
    MilestoneDefinition(
        key="argo_application_created",
        label="ArgoCD Application Created",
        predicate=_exact("ZTP.ArgoApplicationCreated"),
    ),
    MilestoneDefinition(
        key="clusterinstance_created",
        label="ClusterInstance Created",
        predicate=_exact("ZTP.ClusterInstanceCreated"),
    ),
    MilestoneDefinition(
        key="gitops_sync",
        label="GitOps Sync (ManagedCluster Created)",
        predicate=_exact("ZTP.ManagedClusterCreated"),
    ),
    MilestoneDefinition(
        key="cluster_install_start",
        label="AgentClusterInstall Created",
        predicate=_exact("AgentClusterInstall.Created"),
    ),
    MilestoneDefinition(
        key="discovery_iso_ready",
        label="Discovery ISO Ready",
        predicate=_exact("InfraEnv.ImageCreated"),
    ),
    MilestoneDefinition(
        key="agent_registered",
        label="Agent Registered",
        predicate=_exact("Agent.Registered"),
    ),
    MilestoneDefinition(
        key="agent_bound",
        label="Agent Bound to Cluster",
        predicate=_exact("Agent.Bound"),
    ),
    MilestoneDefinition(
        key="install_started",
        label="Installation Started",
        predicate=EventMatcher(
            names=("AssistedService.ClusterStatus.Installing",),
            pattern="InstallationInProgress",
        ),
    ),
    MilestoneDefinition(
        key="install_completed",
        label="Installation Completed",
        predicate=EventMatcher(
            names=("AssistedService.ClusterStatus.Installed", "Agent.Installed"),
            pattern="InstallationCompleted|Installed",
        ),
    ),
    MilestoneDefinition(
        key="import_started",
        label="Import to ACM Started",
        predicate=EventMatcher(pattern="ManifestWork.*klusterlet"),
    ),
    MilestoneDefinition(
        key="cluster_available",
        label="Cluster Available",
        predicate=_exact("ManagedCluster.Condition.ManagedClusterConditionAvailable"),
    ),
    MilestoneDefinition(
        key="policies_compliant",
        label="All Policies Compliant",
        predicate=policy_compliant,
        selection=AnchorSelection.last,
    ),
    MilestoneDefinition(
        key="talm_cgu_completed",
        label="TALM CGU Completed (Ready for Workloads)",
        predicate=_exact("TALM.CGU.Completed"),
    ),
)

_ZTP_FEATURES = (
    FeatureFlag(
        label="ArgoCD Application Starting Point",
        event="ZTP.ArgoApplicationCreated",
        present_notes=(
            "Captured GitOps deployment trigger (earliest possible start)",
            "Using ArgoCD Application creation as deployment start",
        ),
        absent_notes=(
            "ArgoCD Application not found in the GitOps namespaces",
            "Using ClusterInstance or ManagedCluster creation as starting point instead",
        ),
    ),
    FeatureFlag(
        label="ClusterInstance Tracking",
        event="ZTP.ClusterInstanceCreated",
        present_notes=(
            "Captured SiteConfig v2 operator reconciliation events",
            "Available for SiteConfig v2 deployments",
        ),
        absent_notes=(
            "ClusterInstance resource not found (requires SiteConfig v2 operator)",
            "Not critical: SiteConfig v1 deployments don't have ClusterInstance",
        ),
    ),
    FeatureFlag(
        label="TALM CGU Completion",
        event="TALM.CGU.Completed",
        present_notes=(
            "Captured accurate policy completion timestamp (ready for workloads)",
            "Using TALM CGU completedAt as deployment success milestone",
        ),
        absent_notes=(
            "TALM ClusterGroupUpgrade not found in the CGU namespace",
            "Using individual policy compliance events as fallback",
        ),
    ),
    FeatureFlag(
        label="ztp-done Label",
        event="ZTP.ZtpDoneLabelPresent",
        present_notes=(
            "ztp-done label is set on the ManagedCluster",
            "Presence marker only: its timestamp is not used for durations",
        ),
        absent_notes=("ztp-done label not set on the ManagedCluster",),
    ),
)


def default_catalog() -> MilestoneCatalog:
    """Build the ZTP deployment catalog."""
    return MilestoneCatalog(
        milestones=_ZTP_MILESTONES,
        start_anchor=MilestoneCatalog.anchor_from_keys(
            "start",
            _ZTP_MILESTONES,
            ["argo_application_created", "clusterinstance_created", "gitops_sync"],
        ),
        completion_anchor=MilestoneCatalog.anchor_from_keys(
            "completion",
            _ZTP_MILESTONES,
            ["talm_cgu_completed", "policies_compliant"],
        ),
        spans=(
            SpanSpec(from_key="agent_bound", to_key="talm_cgu_completed"),
            SpanSpec(from_key="agent_bound", to_key="policies_compliant"),
            SpanSpec(from_key="gitops_sync", to_key="talm_cgu_completed"),
        ),
        features=_ZTP_FEATURES,
        markers=(("ztp_done", "ZTP.ZtpDoneLabelPresent"),),
    )
