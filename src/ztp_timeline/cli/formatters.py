"""Output formatting utilities for CLI.

This module renders the Get-Timeline JSON array and the narrative
Summarize report. Output is plain text: no colors, no box drawing.
"""

import json
from datetime import timedelta

from ztp_timeline.models.timeline import Timeline
from ztp_timeline.report.models import DeploymentSummary

__all__ = [
    "format_duration",
    "format_summary",
    "format_timeline",
]

RULE = "=" * 70
_ROW = "{:<50} {:<26}  {:<15}  {}"


def format_duration(value: timedelta | float | None) -> str:
    """Format a duration as ``[Nd]XhMMmSSs``, ``XmSSs`` or ``Xs``.

    Sub-second parts are truncated. Negative durations carry a leading
    ``-``; None renders as ``N/A``.

    Example:
        >>> format_duration(1055)
        '17m35s'
        >>> format_duration(timedelta(days=1, seconds=3725))
        '1d1h02m05s'

    """
    if value is None:
        return "N/A"
    seconds = value.total_seconds() if isinstance(value, timedelta) else float(value)
    sign = "-" if seconds < 0 else ""
    total = int(abs(seconds))

    days, rest = divmod(total, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, secs = divmod(rest, 60)

    text = f"{days}d" if days else ""
    if days or hours:
        text += f"{hours}h{minutes:02d}m{secs:02d}s"
    elif minutes:
        text += f"{minutes}m{secs:02d}s"
    else:
        text += f"{secs}s"
    return sign + text


def format_timeline(timeline: Timeline, indent: int = 2) -> str:
    """Render the timeline as a JSON array of wire objects."""
    return json.dumps(timeline.to_output(), indent=indent, default=str)


def format_summary(report: DeploymentSummary) -> str:
    """Render the narrative summary.

    Args:
        report: Structured summary.

    Returns:
        Multi-line text with the header, key milestones, workload readiness,
        milestone breakdown, feature status and deployment summary sections.

    """
    lines: list[str] = []
    _header(lines, report)
    _key_milestones(lines, report)
    _readiness(lines, report)
    _breakdown(lines, report)
    _feature_status(lines, report)
    _deployment(lines, report)
    return "\n".join(lines)


def _section(lines: list[str], title: str) -> None:
    lines.append(RULE)
    lines.append(title)
    lines.append(RULE)


def _header(lines: list[str], report: DeploymentSummary) -> None:
    _section(lines, "ZTP Deployment Timeline Summary")
    lines.append(f"Hub Cluster: {report.hub_cluster}")
    lines.append(f"Bastion Host: {report.host or 'local'}")
    lines.append(f"Spoke Cluster: {report.cluster}")
    lines.append("")
    lines.append("Deployment Features:")
    for feature in report.features:
        lines.append(f"  - {feature.label}: {_presence(feature.present)}")
    lines.append("")
    lines.append(f"Total Events Captured: {report.total_events}")
    lines.append("")


def _key_milestones(lines: list[str], report: DeploymentSummary) -> None:
    _section(lines, "KEY MILESTONES")
    lines.append(_ROW.format("MILESTONE", "TIMESTAMP", "TOTAL ELAPSED", "DELTA"))
    lines.append(_ROW.format("---------", "---------", "-------------", "-----"))
    for number, milestone in enumerate(report.key_milestones, start=1):
        if milestone.delta_seconds is None:
            delta = "START"
        else:
            delta = "+" + format_duration(milestone.delta_seconds)
        lines.append(
            _ROW.format(
                f"{number}. {milestone.label}",
                milestone.timestamp,
                format_duration(milestone.total_elapsed_seconds),
                delta,
            )
        )
    lines.append("")


def _readiness(lines: list[str], report: DeploymentSummary) -> None:
    _section(lines, "WORKLOAD READINESS STATUS")
    readiness = report.readiness
    if readiness is None:
        lines.append("Workload readiness not yet achieved")
    else:
        since = format_duration(readiness.seconds_since)
        if readiness.primary:
            lead = "Cluster ready for workloads"
        else:
            lead = readiness.label.capitalize()
        lines.append(f"{lead} since: {readiness.since} (since {since})")
    lines.append("")


def _breakdown(lines: list[str], report: DeploymentSummary) -> None:
    _section(lines, "MILESTONE BREAKDOWN")
    for breakdown in report.milestones:
        lines.append("")
        lines.append(f"{breakdown.category} ({breakdown.event_count} events)")
        first, last = breakdown.first_event, breakdown.last_event
        lines.append(f"  First: {first.timestamp} - {first.event}")
        lines.append(f"  Last:  {last.timestamp} - {last.event}")
    lines.append("")


def _feature_status(lines: list[str], report: DeploymentSummary) -> None:
    _section(lines, "FEATURE STATUS")
    for number, feature in enumerate(report.features, start=1):
        lines.append(f"{number}. {feature.label}: {_presence(feature.present)}")
        for note in feature.notes:
            lines.append(f"   - {note}")
        lines.append("")


def _deployment(lines: list[str], report: DeploymentSummary) -> None:
    _section(lines, "DEPLOYMENT SUMMARY")
    span = report.deployment_duration
    if span is None:
        lines.append("Unable to calculate deployment duration (missing key milestones)")
    else:
        lines.append(
            f"The deployment took {format_duration(span.seconds)} "
            f"from {span.from_label} to {span.to_label}"
        )
    lines.append("")
    lines.append(RULE)


def _presence(present: bool) -> str:
    return "Present" if present else "Not Present"
