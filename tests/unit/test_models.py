"""Unit tests for the event and timeline models."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from ztp_timeline.models.enums import MilestoneCategory, ProviderStatus
from ztp_timeline.models.event import EventRecord, RawEvent
from ztp_timeline.models.exceptions import TimestampParseError
from ztp_timeline.models.timeline import ProviderOutcome, Timeline


def _record(name: str, minute: int, category: MilestoneCategory = MilestoneCategory.DISCOVERY) -> EventRecord:
    return EventRecord(
        timestamp=datetime(2024, 5, 1, 10, minute, tzinfo=UTC),
        name=name,
        milestone_category=category,
    )


class TestMilestoneCategory:
    """Tests for the MilestoneCategory taxonomy."""

    def test_rank_follows_declaration_order(self) -> None:
        """GITOPS_TRIGGER is first and DONE_MARKER last."""
        assert MilestoneCategory.GITOPS_TRIGGER.rank == 0
        assert MilestoneCategory.DONE_MARKER.rank == len(MilestoneCategory) - 1

    def test_only_done_marker_is_untimed(self) -> None:
        """Every category except the presence marker is timed."""
        untimed = [c for c in MilestoneCategory if not c.is_timed]

        assert untimed == [MilestoneCategory.DONE_MARKER]


class TestEventRecord:
    """Tests for EventRecord."""

    def test_from_raw_normalizes_timestamp(self) -> None:
        """from_raw() parses the raw timestamp to UTC."""
        raw = RawEvent(
            timestamp="2024-05-01T12:00:00+02:00",
            event="Agent.Bound",
            event_description="Bound: agent bound",
            milestone=MilestoneCategory.DISCOVERY,
            metadata={"agent": "a1"},
        )

        record = EventRecord.from_raw(raw)

        assert record.timestamp == datetime(2024, 5, 1, 10, 0, tzinfo=UTC)
        assert record.name == "Agent.Bound"
        assert record.metadata == {"agent": "a1"}

    def test_from_raw_missing_timestamp(self) -> None:
        """A raw event without a timestamp cannot be normalized."""
        raw = RawEvent(event="Agent.Bound", milestone=MilestoneCategory.DISCOVERY)

        with pytest.raises(TimestampParseError):
            EventRecord.from_raw(raw)

    def test_empty_name_rejected(self) -> None:
        """Names are required."""
        with pytest.raises(ValidationError):
            RawEvent(timestamp="2024-05-01T10:00:00Z", event="", milestone=MilestoneCategory.POLICY)

    def test_records_are_immutable(self) -> None:
        """EventRecord is frozen."""
        record = _record("Agent.Bound", 0)

        with pytest.raises(ValidationError):
            record.name = "Other"  # type: ignore[misc]

    def test_identity(self) -> None:
        """identity is (timestamp, name, description)."""
        record = _record("Agent.Bound", 5)

        assert record.identity == (record.timestamp, "Agent.Bound", "")

    def test_description_kept_verbatim(self) -> None:
        """A condition with a reason but no message keeps its trailing space."""
        raw = RawEvent(
            timestamp="2024-05-01T10:00:00Z",
            event="AgentClusterInstall.Completed",
            event_description="InstallationNotStarted: ",
            milestone=MilestoneCategory.CLUSTER_INSTALL,
        )

        record = EventRecord.from_raw(raw)

        assert raw.event_description == "InstallationNotStarted: "
        assert record.description == "InstallationNotStarted: "

    def test_to_output_wire_shape(self) -> None:
        """to_output() yields the Get-Timeline wire object with metadata merged."""
        record = EventRecord(
            timestamp=datetime(2024, 5, 1, 11, 45, tzinfo=UTC),
            name="TALM.CGU.Completed",
            description="done",
            milestone_category=MilestoneCategory.POLICY_COMPLETION,
            metadata={"cgu_name": "sno-1", "cgu_namespace": "ztp-install"},
        )

        assert record.to_output() == {
            "timestamp": "2024-05-01T11:45:00Z",
            "event": "TALM.CGU.Completed",
            "event_description": "done",
            "milestone": "POLICY_COMPLETION",
            "cgu_name": "sno-1",
            "cgu_namespace": "ztp-install",
        }

    def test_metadata_cannot_shadow_core_fields(self) -> None:
        """Metadata keys never overwrite the core wire fields."""
        record = EventRecord(
            timestamp=datetime(2024, 5, 1, tzinfo=UTC),
            name="X.Y",
            milestone_category=MilestoneCategory.POLICY,
            metadata={"event": "spoofed"},
        )

        assert record.to_output()["event"] == "X.Y"

    def test_presence_marker_untimed(self) -> None:
        """DONE_MARKER records report is_timed False."""
        assert not _record("ZTP.ZtpDoneLabelPresent", 0, MilestoneCategory.DONE_MARKER).is_timed


class TestTimeline:
    """Tests for Timeline."""

    def test_sequence_protocol(self) -> None:
        """Timeline supports len, iteration and indexing."""
        records = (_record("A.One", 0), _record("A.Two", 1))
        timeline = Timeline(records=records)

        assert len(timeline) == 2
        assert [r.name for r in timeline] == ["A.One", "A.Two"]
        assert timeline[1].name == "A.Two"

    def test_by_category_taxonomy_order(self) -> None:
        """Groups follow taxonomy order and skip empty categories."""
        timeline = Timeline(
            records=(
                _record("Policy.a.Compliant", 0, MilestoneCategory.POLICY),
                _record("Agent.Bound", 1, MilestoneCategory.DISCOVERY),
                _record("Policy.b.Compliant", 2, MilestoneCategory.POLICY),
            )
        )

        grouped = timeline.by_category()

        assert list(grouped) == [MilestoneCategory.DISCOVERY, MilestoneCategory.POLICY]
        assert [r.name for r in grouped[MilestoneCategory.POLICY]] == [
            "Policy.a.Compliant",
            "Policy.b.Compliant",
        ]

    def test_has_event_and_matching(self) -> None:
        """has_event() is exact; matching() keeps timeline order."""
        timeline = Timeline(records=(_record("Agent.Bound", 0), _record("Agent.Installed", 1)))

        assert timeline.has_event("Agent.Bound")
        assert not timeline.has_event("Agent")
        assert [r.name for r in timeline.matching(lambda r: r.name.startswith("Agent."))] == [
            "Agent.Bound",
            "Agent.Installed",
        ]

    def test_outcomes_not_part_of_equality(self) -> None:
        """Two timelines with the same records are equal regardless of outcomes."""
        records = (_record("Agent.Bound", 0),)
        outcome = ProviderOutcome(provider="agent", status=ProviderStatus.ok, record_count=1)

        assert Timeline(records=records) == Timeline(records=records, outcomes=(outcome,))
