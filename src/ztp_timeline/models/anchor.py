"""Anchor and milestone definition models.

Priority fallback chains ("prefer A, else B, else C") are expressed as
ordered AnchorSpec values rather than nested conditionals, so they can be
inspected, replaced from a catalog file, and tested on their own.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from ztp_timeline.models.base import FrozenSchema
from ztp_timeline.models.enums import AnchorSelection
from ztp_timeline.models.event import EventRecord

__all__ = [
    "AnchorCandidate",
    "AnchorSpec",
    "EventPredicate",
    "MilestoneDefinition",
    "ResolvedAnchor",
    "SpanSpec",
]

EventPredicate = Callable[[EventRecord], bool]


@dataclass(frozen=True)
class AnchorCandidate:
    """One candidate signal in an AnchorSpec.

    Attributes:
        label: Human label reported when this candidate wins.
        predicate: Identifies records that represent the signal.
        selection: Use the earliest or the latest matching record.

    """

    label: str
    predicate: EventPredicate
    selection: AnchorSelection = AnchorSelection.first


@dataclass(frozen=True)
class AnchorSpec:
    """Priority-ordered candidates for one anchor (start or completion)."""

    name: str
    candidates: tuple[AnchorCandidate, ...]

    @property
    def labels(self) -> list[str]:
        """Candidate labels in priority order."""
        return [candidate.label for candidate in self.candidates]


@dataclass(frozen=True)
class MilestoneDefinition:
    """A named, human-meaningful milestone matched by a predicate.

    Attributes:
        key: Stable machine key (used in ``key_timestamps``).
        label: Human label used in the narrative table.
        predicate: Identifies the representative record.
        selection: First match, or last match for terminal milestones.

    """

    key: str
    label: str
    predicate: EventPredicate
    selection: AnchorSelection = AnchorSelection.first

    def as_candidate(self) -> AnchorCandidate:
        """Use this milestone as an anchor candidate."""
        return AnchorCandidate(
            label=self.label,
            predicate=self.predicate,
            selection=self.selection,
        )


@dataclass(frozen=True)
class SpanSpec:
    """A (from, to) milestone pair for the deployment-duration readout."""

    from_key: str
    to_key: str


class ResolvedAnchor(FrozenSchema):
    """The record an AnchorSpec resolved to.

    Attributes:
        label: Label of the winning candidate.
        timestamp: Instant of the selected record.
        event: Name of the selected record.

    """

    label: str
    timestamp: datetime
    event: str
