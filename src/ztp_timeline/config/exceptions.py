"""Exceptions for config module.

This module defines exceptions related to missing parameters and
milestone catalog loading errors.
"""

from ztp_timeline.exceptions import ZtpTimelineError

__all__ = ["ConfigurationError"]


class ConfigurationError(ZtpTimelineError):
    """Raised when a required parameter is missing or configuration is invalid."""

    pass
