"""Unit tests for the ZTP event providers."""

import pytest

from ztp_timeline.models.enums import MilestoneCategory
from ztp_timeline.providers import (
    AgentClusterInstallProvider,
    AgentProvider,
    ArgoApplicationProvider,
    AssistedServiceProvider,
    BareMetalHostProvider,
    ClusterInstanceProvider,
    InfraEnvProvider,
    KubeEventProvider,
    ManagedClusterProvider,
    ManifestWorkProvider,
    PolicyEventProvider,
    PolicyStatusProvider,
    ProviderRegistry,
    TalmCguProvider,
    ZtpDoneProvider,
    default_registry,
    policy_short_name,
)
from ztp_timeline.providers.kube import condition_events, event_time
from ztp_timeline.transport.exceptions import TransportError

CLUSTER = "sno-1"


def _names(events) -> list[str]:
    return [event.event for event in events]


class TestKubeHelpers:
    """Tests for the shared Kubernetes mapping helpers."""

    def test_one_event_per_condition(self) -> None:
        """Each condition yields its own record with its own transition time."""
        obj = {
            "metadata": {"creationTimestamp": "2024-05-01T10:00:00Z"},
            "status": {
                "conditions": [
                    {"type": f"C{i}", "lastTransitionTime": f"2024-05-01T10:0{i}:00Z", "reason": "R"}
                    for i in range(5)
                ]
            },
        }

        events = condition_events(obj, "Kind", MilestoneCategory.CLUSTER_INSTALL)

        assert len(events) == 5
        assert [e.timestamp for e in events] == [f"2024-05-01T10:0{i}:00Z" for i in range(5)]
        assert events[0].event == "Kind.C0"
        assert events[0].event_description == "R: "

    def test_event_time_precedence(self) -> None:
        """eventTime is preferred, then lastTimestamp, then firstTimestamp."""
        assert event_time({"eventTime": "a", "lastTimestamp": "b", "firstTimestamp": "c"}) == "a"
        assert event_time({"eventTime": None, "lastTimestamp": "b", "firstTimestamp": "c"}) == "b"
        assert event_time({"firstTimestamp": "c"}) == "c"


class TestGitOpsProviders:
    """Tests for the ArgoCD Application and ClusterInstance providers."""

    @pytest.mark.asyncio
    async def test_argo_application_only_siteconfig(self, ztp_hub) -> None:
        """Only Applications sourcing the siteconfig path count."""
        provider = ArgoApplicationProvider(ztp_hub, ["openshift-gitops", "argocd"])

        events = await provider.query(CLUSTER)

        assert len(events) == 1
        assert events[0].event == "ZTP.ArgoApplicationCreated"
        assert events[0].timestamp == "2024-05-01T10:00:00Z"
        assert events[0].metadata == {"namespace": "openshift-gitops", "app_name": "clusters"}

    @pytest.mark.asyncio
    async def test_argo_application_earliest_across_namespaces(self, make_transport) -> None:
        """The single earliest match across namespaces wins."""

        def app(name: str, created: str) -> dict:
            return {
                "metadata": {"name": name, "creationTimestamp": created},
                "spec": {"sources": [{"path": "siteconfig"}]},
            }

        transport = make_transport(
            resources={
                "applications.argoproj.io -n openshift-gitops": {
                    "items": [app("late", "2024-05-01T10:00:00Z")]
                },
                "applications.argoproj.io -n argocd": {
                    "items": [app("early", "2024-05-01T09:00:00Z")]
                },
            }
        )

        events = await ArgoApplicationProvider(transport, ["openshift-gitops", "argocd"]).query(CLUSTER)

        assert [e.metadata["app_name"] for e in events] == ["early"]

    @pytest.mark.asyncio
    async def test_argo_namespace_failure_skipped(self, make_transport) -> None:
        """A namespace that cannot be listed does not hide the others."""
        transport = make_transport(
            resources={
                "applications.argoproj.io -n argocd": {
                    "items": [
                        {
                            "metadata": {"name": "c", "creationTimestamp": "2024-05-01T10:00:00Z"},
                            "spec": {"source": {"path": "siteconfig"}},
                        }
                    ]
                }
            },
            failures={"applications.argoproj.io -n openshift-gitops": "Forbidden"},
        )

        events = await ArgoApplicationProvider(transport, ["openshift-gitops", "argocd"]).query(CLUSTER)

        assert len(events) == 1

    @pytest.mark.asyncio
    async def test_cluster_instance(self, ztp_hub) -> None:
        events = await ClusterInstanceProvider(ztp_hub).query(CLUSTER)

        assert _names(events) == [
            "ZTP.ClusterInstanceCreated",
            "ClusterInstance.Condition.ClusterInstanceValidated",
        ]
        assert events[0].metadata == {"clusterinstance_name": CLUSTER}

    @pytest.mark.asyncio
    async def test_cluster_instance_absent_on_legacy_hub(self, make_transport) -> None:
        """Without the ClusterInstance CRD the provider is simply empty."""
        transport = make_transport(
            failures={
                f"clusterinstances.siteconfig.open-cluster-management.io -n {CLUSTER}": (
                    'error: the server doesn\'t have a resource type "clusterinstances"'
                )
            }
        )

        assert await ClusterInstanceProvider(transport).query(CLUSTER) == []


class TestManagedClusterProviders:
    """Tests for the ManagedCluster and ztp-done providers."""

    @pytest.mark.asyncio
    async def test_managed_cluster_categories(self, ztp_hub) -> None:
        """Creation is the GitOps sync; Available is reported separately."""
        events = await ManagedClusterProvider(ztp_hub).query(CLUSTER)
        by_name = {e.event: e.milestone for e in events}

        assert by_name["ZTP.ManagedClusterCreated"] is MilestoneCategory.GITOPS_SYNC
        assert by_name["ManagedCluster.Condition.ManagedClusterJoined"] is MilestoneCategory.IMPORT
        assert (
            by_name["ManagedCluster.Condition.ManagedClusterConditionAvailable"]
            is MilestoneCategory.AVAILABILITY
        )

    @pytest.mark.asyncio
    async def test_ztp_done_presence(self, ztp_hub) -> None:
        events = await ZtpDoneProvider(ztp_hub).query(CLUSTER)

        assert len(events) == 1
        assert events[0].milestone is MilestoneCategory.DONE_MARKER
        assert events[0].metadata == {"presence_only": True}

    @pytest.mark.asyncio
    async def test_ztp_done_absent(self, make_transport) -> None:
        transport = make_transport(
            resources={
                f"managedcluster {CLUSTER}": {
                    "metadata": {"name": CLUSTER, "creationTimestamp": "2024-05-01T10:00:00Z"}
                }
            }
        )

        assert await ZtpDoneProvider(transport).query(CLUSTER) == []


class TestInstallProviders:
    """Tests for AgentClusterInstall, assisted-service, discovery and provisioning."""

    @pytest.mark.asyncio
    async def test_agent_cluster_install(self, ztp_hub) -> None:
        events = await AgentClusterInstallProvider(ztp_hub).query(CLUSTER)

        assert _names(events) == ["AgentClusterInstall.Created", "AgentClusterInstall.Completed"]
        assert events[1].event_description == "InstallationCompleted: The installation has completed"

    @pytest.mark.asyncio
    async def test_assisted_service(self, ztp_hub) -> None:
        events = await AssistedServiceProvider(ztp_hub).query(CLUSTER)

        assert _names(events) == [
            "AssistedService.ClusterStatus.Installing",
            "AssistedService.HostInstalling",
            "AssistedService.ClusterStatus.Installed",
        ]
        assert events[0].timestamp == "2024-05-01T10:20:00.123Z"

    @pytest.mark.asyncio
    async def test_assisted_service_unreachable_url(self, ztp_hub) -> None:
        """An events URL that cannot be fetched contributes nothing."""
        ztp_hub.urls.clear()

        assert await AssistedServiceProvider(ztp_hub).query(CLUSTER) == []

    @pytest.mark.asyncio
    async def test_infraenv_and_agent(self, ztp_hub) -> None:
        infraenv = await InfraEnvProvider(ztp_hub).query(CLUSTER)
        agents = await AgentProvider(ztp_hub).query(CLUSTER)

        assert _names(infraenv) == ["InfraEnv.Created", "InfraEnv.ImageCreated"]
        assert _names(agents) == ["Agent.Registered", "Agent.Bound", "Agent.Installed"]
        assert agents[0].metadata == {"agent": "a1b2c3"}

    @pytest.mark.asyncio
    async def test_baremetalhost_events_named(self, ztp_hub) -> None:
        """BareMetalHost events carry the host name in the description."""
        provider = KubeEventProvider(
            ztp_hub, "BareMetalHost", MilestoneCategory.PROVISIONING, include_object_name=True
        )

        events = await provider.query(CLUSTER)

        assert _names(events) == ["BareMetalHost.ProvisioningStarted"]
        assert events[0].event_description == f"{CLUSTER}: Image provisioning started"
        assert provider.name == "events/BareMetalHost"

    @pytest.mark.asyncio
    async def test_baremetalhost_created(self, ztp_hub) -> None:
        events = await BareMetalHostProvider(ztp_hub).query(CLUSTER)

        assert _names(events) == ["BareMetalHost.Created"]
        assert events[0].milestone is MilestoneCategory.PROVISIONING

    @pytest.mark.asyncio
    async def test_manifestwork(self, ztp_hub) -> None:
        events = await ManifestWorkProvider(ztp_hub).query(CLUSTER)

        assert _names(events) == [
            f"ManifestWork.Created.{CLUSTER}-klusterlet",
            f"ManifestWork.{CLUSTER}-klusterlet.Applied",
        ]


class TestPolicyProviders:
    """Tests for policy events, policy status and TALM."""

    def test_policy_short_name(self) -> None:
        assert policy_short_name("ztp-common.common-config-policy") == "common-config-policy"
        assert policy_short_name("standalone") == "standalone"

    def test_policy_short_name_takes_second_segment(self) -> None:
        assert policy_short_name("ztp-group.du-sno.v4") == "du-sno"

    @pytest.mark.asyncio
    async def test_policy_events_classified(self, ztp_hub) -> None:
        events = await PolicyEventProvider(ztp_hub).query(CLUSTER)

        assert _names(events) == [
            "Policy.common-config-policy.NonCompliant",
            "Policy.common-config-policy.Compliant",
            "Policy.group-du-sno-config-policy.Compliant",
        ]
        assert events[0].metadata == {"compliance": "NonCompliant"}

    @pytest.mark.asyncio
    async def test_policy_event_with_both_keywords(self, make_transport) -> None:
        """A message with both keywords never produces a Compliant record."""
        transport = make_transport(
            resources={
                f"events -n {CLUSTER}": {
                    "items": [
                        {
                            "involvedObject": {"kind": "Policy", "name": "p.x"},
                            "reason": "PolicyStatusSync",
                            "message": "was NonCompliant, now Compliant",
                            "lastTimestamp": "2024-05-01T10:00:00Z",
                        }
                    ]
                }
            }
        )

        events = await PolicyEventProvider(transport).query(CLUSTER)

        assert _names(events) == ["Policy.x.NonCompliant"]

    @pytest.mark.asyncio
    async def test_policy_status_timed_by_history(self, ztp_hub) -> None:
        events = await PolicyStatusProvider(ztp_hub).query(CLUSTER)

        assert _names(events) == ["Policy.common-config-policy.CurrentStatus"]
        assert events[0].timestamp == "2024-05-01T11:30:00Z"
        assert events[0].metadata == {"compliance": "Compliant"}

    @pytest.mark.asyncio
    async def test_policy_status_history_compared_as_instants(self, make_transport) -> None:
        """Fractional and whole-second history stamps are ordered by time."""
        transport = make_transport(
            resources={
                f"policy -n {CLUSTER}": {
                    "items": [
                        {
                            "metadata": {
                                "name": "ztp-common.p",
                                "creationTimestamp": "2024-05-01T10:00:00Z",
                            },
                            "status": {
                                "compliant": "Compliant",
                                "details": [
                                    {
                                        "history": [
                                            {"lastTimestamp": "2024-05-01T11:22:44Z"},
                                            {"lastTimestamp": "2024-05-01T11:22:44.5Z"},
                                            {"lastTimestamp": "not-a-time"},
                                        ]
                                    }
                                ],
                            },
                        }
                    ]
                }
            }
        )

        events = await PolicyStatusProvider(transport).query(CLUSTER)

        assert events[0].timestamp == "2024-05-01T11:22:44.5Z"

    @pytest.mark.asyncio
    async def test_talm_cgu(self, ztp_hub) -> None:
        events = await TalmCguProvider(ztp_hub, "ztp-install").query(CLUSTER)

        assert _names(events) == ["TALM.CGU.Started", "TALM.CGU.Completed"]
        assert events[1].metadata == {"cgu_name": CLUSTER, "cgu_namespace": "ztp-install"}

    @pytest.mark.asyncio
    async def test_talm_managed_policy_without_time(self, make_transport) -> None:
        """Managed policies without their own time are emitted without a timestamp."""
        transport = make_transport(
            resources={
                f"clustergroupupgrade {CLUSTER} -n ztp-install": {
                    "metadata": {"name": CLUSTER},
                    "status": {"managedPoliciesForUpgrade": [{"name": "common-config-policy"}]},
                }
            }
        )

        events = await TalmCguProvider(transport).query(CLUSTER)

        assert _names(events) == ["TALM.CGU.ManagedPolicy.common-config-policy"]
        assert events[0].timestamp is None


class TestProviderContract:
    """Tests for the shared provider contract."""

    @pytest.mark.asyncio
    async def test_source_unavailable_is_empty(self, make_transport) -> None:
        """A failing query empties the provider without raising."""
        transport = make_transport(failures={f"agent -n {CLUSTER}": "Forbidden"})

        assert await AgentProvider(transport).query(CLUSTER) == []

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self, make_transport) -> None:
        """Transport failures are not contained by the provider."""
        transport = make_transport(reachable=False)

        with pytest.raises(TransportError):
            await AgentProvider(transport).query(CLUSTER)


class TestProviderRegistry:
    """Tests for ProviderRegistry and default_registry()."""

    def test_duplicate_name_rejected(self, make_transport) -> None:
        registry = ProviderRegistry()
        registry.register(AgentProvider(make_transport()))

        with pytest.raises(ValueError):
            registry.register(AgentProvider(make_transport()))

    def test_default_registry_order(self, make_transport, settings) -> None:
        """The default registry holds every ZTP provider in tie-break order."""
        registry = default_registry(make_transport(), settings)

        assert registry.names == [
            "argocd-application",
            "clusterinstance",
            "managedcluster",
            "ztp-done",
            "agentclusterinstall",
            "events/AgentClusterInstall",
            "assisted-service",
            "clusterdeployment",
            "infraenv",
            "agent",
            "baremetalhost",
            "events/BareMetalHost",
            "events/ManagedCluster",
            "manifestwork",
            "policy-events",
            "policy-status",
            "talm-cgu",
        ]
        assert len(registry) == 17
