"""Report models for ztp-timeline.

This module defines the DeploymentSummary model, the structured form of
the Summarize output. Timestamps are stored pre-formatted (ISO-8601 with a
``Z`` suffix) and durations as seconds, so the model dumps straight to the
JSON wire shape.
"""

from typing import Any

from pydantic import Field

from ztp_timeline.models.base import BaseSchema
from ztp_timeline.models.timeline import ProviderOutcome

__all__ = [
    "CategoryBreakdown",
    "DeploymentDuration",
    "DeploymentSummary",
    "EventDigest",
    "FeatureStatus",
    "KeyMilestone",
    "Readiness",
    "ReportContext",
]


class ReportContext(BaseSchema):
    """Where the timeline came from.

    Attributes:
        cluster: Spoke cluster name.
        hub_cluster: Hub infrastructure name, "Unknown" if unreadable.
        host: Bastion host, None when running locally.

    """

    cluster: str
    hub_cluster: str = "Unknown"
    host: str | None = None


class EventDigest(BaseSchema):
    """Short form of a record used in the category breakdown."""

    timestamp: str
    event: str
    event_description: str = ""


class CategoryBreakdown(BaseSchema):
    """Record count and first/last record of one milestone category."""

    category: str
    event_count: int
    first_event: EventDigest
    last_event: EventDigest


class FeatureStatus(BaseSchema):
    """Presence of an optional deployment feature.

    Attributes:
        label: Feature label.
        present: Whether the signalling record exists.
        notes: Explanatory lines for the current state.

    """

    label: str
    present: bool
    notes: list[str] = Field(default_factory=list)


class KeyMilestone(BaseSchema):
    """A milestone row with durations in seconds.

    ``total_elapsed_seconds`` is None when the start anchor is unresolved;
    ``delta_seconds`` is None for the first row (START).
    """

    key: str
    label: str
    timestamp: str
    event: str
    total_elapsed_seconds: float | None = None
    delta_seconds: float | None = None


class Readiness(BaseSchema):
    """Resolved completion anchor and the time elapsed since.

    Attributes:
        label: Label of the winning completion candidate.
        since: Completion timestamp.
        seconds_since: Seconds between completion and report time.
        primary: Whether the highest-priority candidate resolved.

    """

    label: str
    since: str
    seconds_since: float
    primary: bool = True


class DeploymentDuration(BaseSchema):
    """The deployment-duration readout."""

    from_label: str
    to_label: str
    seconds: float


class DeploymentSummary(BaseSchema):
    """Structured summary of a deployment timeline.

    Attributes:
        cluster: Spoke cluster name.
        hub_cluster: Hub infrastructure name.
        host: Bastion host, None when local.
        version: ztp-timeline version that produced the summary.
        generated_at: Instant the summary was computed against.
        features: Feature-presence flags.
        total_events: Number of records in the timeline.
        milestones: Per-category breakdown in taxonomy order.
        key_timestamps: Timestamp per milestone key, None when absent.
        key_milestones: Matched milestones in chronological order.
        start: Label of the resolved start anchor.
        readiness: Completion anchor status, None when not reached.
        deployment_duration: First resolvable span, None otherwise.
        all_events: The full timeline in wire format.
        providers: Per-provider outcomes.

    """

    cluster: str
    hub_cluster: str
    host: str | None = None
    version: str
    generated_at: str
    features: list[FeatureStatus] = Field(default_factory=list)
    total_events: int = 0
    milestones: list[CategoryBreakdown] = Field(default_factory=list)
    key_timestamps: dict[str, str | None] = Field(default_factory=dict)
    key_milestones: list[KeyMilestone] = Field(default_factory=list)
    start: str | None = None
    readiness: Readiness | None = None
    deployment_duration: DeploymentDuration | None = None
    all_events: list[dict[str, Any]] = Field(default_factory=list)
    providers: list[ProviderOutcome] = Field(default_factory=list)
