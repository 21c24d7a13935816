"""Anchor resolution over a Timeline."""

from ztp_timeline.logging_config import get_logger
from ztp_timeline.models.anchor import AnchorCandidate, AnchorSpec, ResolvedAnchor
from ztp_timeline.models.enums import AnchorSelection
from ztp_timeline.models.event import EventRecord
from ztp_timeline.models.timeline import Timeline

__all__ = ["AnchorResolver", "select_record"]

logger = get_logger(__name__)


def select_record(timeline: Timeline, candidate: AnchorCandidate) -> EventRecord | None:
    """Pick the record a single candidate refers to.

    Presence-only records are never selected.

    Args:
        timeline: Sorted timeline to search.
        candidate: Candidate with predicate and selection mode.

    Returns:
        Earliest or latest matching timed record, or None.

    """
    matches = [r for r in timeline if r.is_timed and candidate.predicate(r)]
    if not matches:
        return None
    if candidate.selection is AnchorSelection.last:
        return matches[-1]
    return matches[0]


class AnchorResolver:
    """Resolves AnchorSpecs against timelines.

    Candidates are tried in priority order. The first candidate with at
    least one matching record wins, even if a lower-priority candidate
    matches an earlier record.
    """

    def resolve(self, timeline: Timeline, spec: AnchorSpec) -> ResolvedAnchor | None:
        """Resolve an anchor.

        Args:
            timeline: Timeline to search.
            spec: Priority-ordered candidates.

        Returns:
            The resolved anchor, or None if no candidate matched.

        """
        for candidate in spec.candidates:
            record = select_record(timeline, candidate)
            if record is None:
                continue
            logger.debug(
                "anchor_resolved",
                anchor=spec.name,
                label=candidate.label,
                record=record.name,
            )
            return ResolvedAnchor(
                label=candidate.label,
                timestamp=record.timestamp,
                event=record.name,
            )
        logger.debug("anchor_unresolved", anchor=spec.name, candidates=spec.labels)
        return None
