"""Milestone derivation.

The summarizer turns a Timeline into the ordered chain of named milestones
with elapsed times, plus the resolved start and completion anchors. Marker
records (presence-only) never take part in any duration.
"""

from datetime import datetime

from ztp_timeline.core.anchors import AnchorResolver, select_record
from ztp_timeline.core.catalog import MilestoneCatalog
from ztp_timeline.core.clock import Clock, utc_now
from ztp_timeline.logging_config import get_logger
from ztp_timeline.models.anchor import SpanSpec
from ztp_timeline.models.event import EventRecord
from ztp_timeline.models.milestone import DurationSpan, MilestoneEntry, MilestoneSummary
from ztp_timeline.models.timeline import Timeline

__all__ = ["MilestoneSummarizer"]

logger = get_logger(__name__)


class MilestoneSummarizer:
    """Derives milestones, anchors and durations from a Timeline.

    Args:
        catalog: Milestone definitions and anchor chains.
        clock: Source of "now" for the time-since-completion readout.

    """

    def __init__(self, catalog: MilestoneCatalog, clock: Clock = utc_now) -> None:
        self.catalog = catalog
        self.clock = clock
        self.resolver = AnchorResolver()

    def match(self, timeline: Timeline) -> dict[str, EventRecord]:
        """Match each milestone definition to its representative record.

        Returns:
            Records by milestone key, in definition order. Unmatched
            milestones are absent.

        """
        matched: dict[str, EventRecord] = {}
        for milestone in self.catalog.milestones:
            record = select_record(timeline, milestone.as_candidate())
            if record is not None:
                matched[milestone.key] = record
        return matched

    def summarize(self, timeline: Timeline) -> MilestoneSummary:
        """Compute the milestone summary.

        Args:
            timeline: Merged, sorted timeline.

        Returns:
            Entries in chronological order with total and delta durations,
            the resolved anchors, and the time since completion.

        """
        now = self.clock()
        matched = self.match(timeline)
        start = self.resolver.resolve(timeline, self.catalog.start_anchor)
        completion = self.resolver.resolve(timeline, self.catalog.completion_anchor)

        # sorted() is stable, so equal timestamps keep definition order.
        ordered = sorted(matched.items(), key=lambda item: item[1].timestamp)

        entries: list[MilestoneEntry] = []
        previous: datetime | None = None
        for key, record in ordered:
            entries.append(
                MilestoneEntry(
                    key=key,
                    label=self.catalog.milestone(key).label,
                    timestamp=record.timestamp,
                    event=record.name,
                    total_elapsed=record.timestamp - start.timestamp if start else None,
                    delta_from_previous=(
                        record.timestamp - previous if previous is not None else None
                    ),
                )
            )
            previous = record.timestamp

        summary = MilestoneSummary(
            entries=entries,
            start_anchor=start,
            completion_anchor=completion,
            time_since_completion=now - completion.timestamp if completion else None,
            now=now,
            deployment_duration=self._first_span(matched, self.catalog.spans),
        )
        logger.debug(
            "milestones_summarized",
            matched=len(entries),
            defined=len(self.catalog.milestones),
            start=start.label if start else None,
            completion=completion.label if completion else None,
        )
        return summary

    def resolve_span(
        self,
        timeline: Timeline,
        spans: tuple[SpanSpec, ...] | None = None,
    ) -> DurationSpan | None:
        """Resolve the first span whose two milestones both matched.

        Args:
            timeline: Timeline to search.
            spans: Candidate spans in priority order. Defaults to the
                catalog's spans.

        Returns:
            The span and its duration, or None if no pair resolved.

        """
        return self._first_span(self.match(timeline), self.catalog.spans if spans is None else spans)

    def key_timestamps(self, timeline: Timeline) -> dict[str, datetime | None]:
        """Timestamp of every milestone and marker key, None when absent."""
        matched = self.match(timeline)
        result: dict[str, datetime | None] = {
            key: matched[key].timestamp if key in matched else None
            for key in self.catalog.keys
        }
        for key, event in self.catalog.markers:
            markers = timeline.matching(lambda r, name=event: r.name == name)
            result[key] = markers[0].timestamp if markers else None
        return result

    def _first_span(
        self,
        matched: dict[str, EventRecord],
        spans: tuple[SpanSpec, ...],
    ) -> DurationSpan | None:
        for span in spans:
            begin = matched.get(span.from_key)
            end = matched.get(span.to_key)
            if begin is None or end is None:
                continue
            return DurationSpan(
                from_label=self.catalog.milestone(span.from_key).label,
                to_label=self.catalog.milestone(span.to_key).label,
                duration=end.timestamp - begin.timestamp,
            )
        return None
