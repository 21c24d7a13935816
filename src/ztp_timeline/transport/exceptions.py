"""Exceptions for transport module.

TransportError is fatal for a run: the hub cannot be reached at all.
SourceUnavailableError concerns a single query and is always contained
by the provider that issued it.
"""

from ztp_timeline.exceptions import ZtpTimelineError

__all__ = ["SourceUnavailableError", "TransportError"]


class TransportError(ZtpTimelineError):
    """Raised when the execution layer itself cannot run or connect.

    Attributes:
        target: Description of the transport target (e.g. ``ssh bastion``).
        detail: Error detail from the underlying command.

    """

    def __init__(self, target: str, detail: str) -> None:
        """Initialize TransportError.

        Args:
            target: Description of the transport target.
            detail: Error detail from the underlying command.

        """
        self.target = target
        self.detail = detail
        super().__init__(f"cannot reach hub via {target}: {detail}")


class SourceUnavailableError(ZtpTimelineError):
    """Raised when one query fails for reasons other than "not found".

    Attributes:
        query: The query that failed.
        detail: Error detail from the underlying command.

    """

    def __init__(self, query: str, detail: str) -> None:
        """Initialize SourceUnavailableError.

        Args:
            query: The query that failed.
            detail: Error detail from the underlying command.

        """
        self.query = query
        self.detail = detail
        super().__init__(f"{query} unavailable: {detail}")
