"""Summary report generator for ztp-timeline.

This module defines the SummaryReportGenerator class which turns a
Timeline and its MilestoneSummary into a DeploymentSummary and provides
serialization methods.
"""

import json
from datetime import timedelta
from typing import Any

from ztp_timeline import __version__
from ztp_timeline.core.catalog import MilestoneCatalog
from ztp_timeline.core.summarizer import MilestoneSummarizer
from ztp_timeline.models.event import EventRecord
from ztp_timeline.models.milestone import MilestoneSummary
from ztp_timeline.models.timeline import Timeline
from ztp_timeline.models.timestamps import format_timestamp
from ztp_timeline.report.exceptions import ReportGenerationError
from ztp_timeline.report.models import (
    CategoryBreakdown,
    DeploymentDuration,
    DeploymentSummary,
    EventDigest,
    FeatureStatus,
    KeyMilestone,
    Readiness,
    ReportContext,
)

__all__ = ["SummaryReportGenerator", "ReportGenerationError"]


def _seconds(value: timedelta | None) -> float | None:
    return None if value is None else value.total_seconds()


def _digest(record: EventRecord) -> EventDigest:
    return EventDigest(
        timestamp=format_timestamp(record.timestamp),
        event=record.name,
        event_description=record.description,
    )


class SummaryReportGenerator:
    """Generates DeploymentSummary reports.

    Example:
        generator = SummaryReportGenerator(summarizer)
        summary = summarizer.summarize(timeline)
        report = generator.generate(timeline, summary, context)
        print(generator.to_json(report))

    """

    def __init__(self, summarizer: MilestoneSummarizer) -> None:
        self.summarizer = summarizer

    @property
    def catalog(self) -> MilestoneCatalog:
        """The catalog features and anchors come from."""
        return self.summarizer.catalog

    def generate(
        self,
        timeline: Timeline,
        summary: MilestoneSummary,
        context: ReportContext,
    ) -> DeploymentSummary:
        """Build the structured summary.

        Args:
            timeline: Merged timeline.
            summary: Milestones derived from the same timeline.
            context: Cluster, hub and host names.

        Returns:
            A DeploymentSummary with every section populated.

        Raises:
            ReportGenerationError: If the summary lists a milestone the
                timeline does not contain.

        """
        known = {record.name for record in timeline}
        missing = [entry.event for entry in summary.entries if entry.event not in known]
        if missing:
            raise ReportGenerationError(
                f"Summary does not belong to this timeline: unknown events {missing}"
            )

        return DeploymentSummary(
            cluster=context.cluster,
            hub_cluster=context.hub_cluster,
            host=context.host,
            version=__version__,
            generated_at=format_timestamp(summary.now),
            features=self.build_features(timeline),
            total_events=len(timeline),
            milestones=self.build_breakdown(timeline),
            key_timestamps={
                key: format_timestamp(ts) if ts is not None else None
                for key, ts in self.summarizer.key_timestamps(timeline).items()
            },
            key_milestones=[
                KeyMilestone(
                    key=entry.key,
                    label=entry.label,
                    timestamp=format_timestamp(entry.timestamp),
                    event=entry.event,
                    total_elapsed_seconds=_seconds(entry.total_elapsed),
                    delta_seconds=_seconds(entry.delta_from_previous),
                )
                for entry in summary.entries
            ],
            start=summary.start_anchor.label if summary.start_anchor else None,
            readiness=self._readiness(summary),
            deployment_duration=(
                DeploymentDuration(
                    from_label=summary.deployment_duration.from_label,
                    to_label=summary.deployment_duration.to_label,
                    seconds=summary.deployment_duration.duration.total_seconds(),
                )
                if summary.deployment_duration
                else None
            ),
            all_events=timeline.to_output(),
            providers=list(timeline.outcomes),
        )

    def build_features(self, timeline: Timeline) -> list[FeatureStatus]:
        """Evaluate every feature flag of the catalog."""
        features = []
        for flag in self.catalog.features:
            present = timeline.has_event(flag.event)
            features.append(
                FeatureStatus(
                    label=flag.label,
                    present=present,
                    notes=list(flag.present_notes if present else flag.absent_notes),
                )
            )
        return features

    def build_breakdown(self, timeline: Timeline) -> list[CategoryBreakdown]:
        """Per-category counts with first and last record, in taxonomy order."""
        return [
            CategoryBreakdown(
                category=category.value,
                event_count=len(records),
                first_event=_digest(records[0]),
                last_event=_digest(records[-1]),
            )
            for category, records in timeline.by_category().items()
        ]

    def to_structured(self, report: DeploymentSummary) -> dict[str, Any]:
        """Convert a report to a JSON-ready dict."""
        return report.model_dump(mode="json")

    def to_json(self, report: DeploymentSummary, indent: int = 2) -> str:
        """Serialize a report to JSON.

        Args:
            report: The DeploymentSummary to serialize.
            indent: JSON indentation level (default 2).

        Returns:
            A JSON string representation of the report.

        """
        return json.dumps(self.to_structured(report), indent=indent, default=str)

    def _readiness(self, summary: MilestoneSummary) -> Readiness | None:
        completion = summary.completion_anchor
        if completion is None or summary.time_since_completion is None:
            return None
        labels = self.catalog.completion_anchor.labels
        return Readiness(
            label=completion.label,
            since=format_timestamp(completion.timestamp),
            seconds_since=summary.time_since_completion.total_seconds(),
            primary=bool(labels) and completion.label == labels[0],
        )
