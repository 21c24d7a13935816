"""Unit tests for EventMatcher predicates."""

from datetime import UTC, datetime

import pytest

from ztp_timeline.core.matchers import EventMatcher, policy_compliant
from ztp_timeline.models.enums import MilestoneCategory
from ztp_timeline.models.event import EventRecord


def _record(name: str) -> EventRecord:
    return EventRecord(
        timestamp=datetime(2024, 5, 1, tzinfo=UTC),
        name=name,
        milestone_category=MilestoneCategory.POLICY,
    )


class TestEventMatcher:
    """Tests for EventMatcher."""

    def test_exact_name(self) -> None:
        """Exact names match only themselves."""
        matcher = EventMatcher(names=("Agent.Bound",))

        assert matcher(_record("Agent.Bound"))
        assert not matcher(_record("Agent.BoundLater"))

    def test_pattern_search(self) -> None:
        """Patterns are searched anywhere in the name."""
        matcher = EventMatcher(pattern="ManifestWork.*klusterlet")

        assert matcher(_record("ManifestWork.Created.sno-1-klusterlet"))
        assert not matcher(_record("ManifestWork.Created.sno-1-addons"))

    def test_names_or_pattern(self) -> None:
        """Either an exact name or the pattern is enough."""
        matcher = EventMatcher(
            names=("AssistedService.ClusterStatus.Installing",),
            pattern="InstallationInProgress",
        )

        assert matcher(_record("AssistedService.ClusterStatus.Installing"))
        assert matcher(_record("AgentClusterInstall.InstallationInProgress"))
        assert not matcher(_record("AssistedService.ClusterStatus.Installed"))

    def test_exclude_vetoes(self) -> None:
        """The exclude pattern removes otherwise matching names."""
        matcher = EventMatcher(pattern="Compliant", exclude="NonCompliant")

        assert matcher(_record("Policy.a.Compliant"))
        assert not matcher(_record("Policy.a.NonCompliant"))

    def test_requires_names_or_pattern(self) -> None:
        """An empty matcher is rejected."""
        with pytest.raises(ValueError):
            EventMatcher()

    def test_describe(self) -> None:
        """describe() lists names and patterns."""
        matcher = EventMatcher(names=("A",), pattern="B", exclude="C")

        assert matcher.describe() == "A | /B/ except /C/"


class TestPolicyCompliant:
    """Tests for the policy_compliant matcher."""

    @pytest.mark.parametrize(
        "name",
        ["Policy.common-config-policy.Compliant", "Policy.du.sno.Compliant"],
    )
    def test_matches_compliant(self, name: str) -> None:
        assert policy_compliant(_record(name))

    @pytest.mark.parametrize(
        "name",
        [
            "Policy.common-config-policy.NonCompliant",
            "Policy.common-config-policy.StatusChange",
            "Policy.common-config-policy.CurrentStatus",
            "TALM.CGU.ManagedPolicy.Compliant",
        ],
    )
    def test_rejects_others(self, name: str) -> None:
        assert not policy_compliant(_record(name))
