"""Exceptions for report module.

This module defines exceptions related to summary report generation.
"""

from ztp_timeline.exceptions import ZtpTimelineError

__all__ = [
    "ReportError",
    "ReportGenerationError",
]


class ReportError(ZtpTimelineError):
    """Base exception for report errors."""

    pass


class ReportGenerationError(ReportError):
    """Raised when report generation fails."""

    pass
