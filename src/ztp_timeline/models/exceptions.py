"""Exceptions for models module.

This module defines exceptions raised while normalizing source data
into the event model.
"""

from ztp_timeline.exceptions import ZtpTimelineError

__all__ = ["ModelValidationError", "TimestampParseError"]


class ModelValidationError(ZtpTimelineError):
    """Base exception for model validation errors."""

    pass


class TimestampParseError(ModelValidationError):
    """Raised when a source timestamp is missing or cannot be parsed.

    Attributes:
        value: The raw value that failed to parse.

    """

    def __init__(self, value: object) -> None:
        """Initialize TimestampParseError.

        Args:
            value: The raw value that failed to parse.

        """
        self.value = value
        super().__init__(f"Unresolvable timestamp: {value!r}")
