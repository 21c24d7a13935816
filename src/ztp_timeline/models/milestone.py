"""Milestone summary models.

These are derived, never persisted: a MilestoneSummary is recomputed from
the Timeline on every run.
"""

from datetime import datetime, timedelta

from pydantic import Field

from ztp_timeline.models.anchor import ResolvedAnchor
from ztp_timeline.models.base import BaseSchema

__all__ = ["DurationSpan", "MilestoneEntry", "MilestoneSummary"]


class MilestoneEntry(BaseSchema):
    """One matched milestone with its durations.

    Attributes:
        key: Milestone key.
        label: Human label.
        timestamp: Instant of the matched record.
        event: Name of the matched record.
        total_elapsed: Time since the start anchor; None when the start
            anchor is unresolved.
        delta_from_previous: Time since the previous entry in chronological
            order; None for the first entry (START).

    """

    key: str
    label: str
    timestamp: datetime
    event: str
    total_elapsed: timedelta | None = None
    delta_from_previous: timedelta | None = None

    @property
    def is_start(self) -> bool:
        """Whether this is the first entry of the chain."""
        return self.delta_from_previous is None


class DurationSpan(BaseSchema):
    """Elapsed time between two resolved milestones."""

    from_label: str
    to_label: str
    duration: timedelta


class MilestoneSummary(BaseSchema):
    """Milestones derived from a Timeline.

    Attributes:
        entries: Matched milestones in chronological order.
        start_anchor: Resolved start, if any candidate matched.
        completion_anchor: Resolved completion, if any candidate matched.
        time_since_completion: ``now - completion``; None if unresolved.
        now: The instant the summary was computed against.
        deployment_duration: First resolvable span, if any.

    """

    entries: list[MilestoneEntry] = Field(default_factory=list)
    start_anchor: ResolvedAnchor | None = None
    completion_anchor: ResolvedAnchor | None = None
    time_since_completion: timedelta | None = None
    now: datetime
    deployment_duration: DurationSpan | None = None

    def entry(self, key: str) -> MilestoneEntry | None:
        """Look up an entry by milestone key."""
        for entry in self.entries:
            if entry.key == key:
                return entry
        return None
