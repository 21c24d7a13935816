"""Base exceptions for ztp-timeline.

This module defines the root exception hierarchy for the package.
All domain-specific exceptions inherit from ZtpTimelineError.
"""

__all__ = ["ZtpTimelineError"]


class ZtpTimelineError(Exception):
    """Base exception for all ztp-timeline errors.

    Provides a common exception type for clients to catch package errors.
    """

    pass
