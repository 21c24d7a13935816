"""Report module for ztp-timeline.

This module provides summary report generation:
- DeploymentSummary: structured summary of a deployment timeline
- SummaryReportGenerator: builds summaries from a Timeline
- ReportGenerationError: exception for report generation failures
"""

from ztp_timeline.report.generator import ReportGenerationError, SummaryReportGenerator
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

__all__ = [
    "CategoryBreakdown",
    "DeploymentDuration",
    "DeploymentSummary",
    "EventDigest",
    "FeatureStatus",
    "KeyMilestone",
    "Readiness",
    "ReportContext",
    "ReportGenerationError",
    "SummaryReportGenerator",
]
