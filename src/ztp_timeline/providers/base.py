"""Base abstraction for event providers.

An event provider observes one sub-resource or category of a ZTP deployment
and maps it to RawEvents. Providers are independent of one another: each
one may find nothing, and a failing query inside a provider only ever
empties that provider's contribution.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ztp_timeline.logging_config import get_logger
from ztp_timeline.models.event import RawEvent
from ztp_timeline.transport.exceptions import SourceUnavailableError

if TYPE_CHECKING:
    from ztp_timeline.transport.base import BaseTransport

__all__ = ["EventProvider"]

logger = get_logger(__name__)


class EventProvider(ABC):
    """Abstract base class for all event providers.

    Subclasses define ``name`` and implement collect(). Callers use
    query(), which treats an unavailable source as an empty result.

    Args:
        transport: Transport used for all hub queries.

    """

    name: str

    def __init__(self, transport: BaseTransport) -> None:
        self.transport = transport

    async def query(self, workflow_id: str) -> list[RawEvent]:
        """Return this provider's events for a spoke cluster.

        Args:
            workflow_id: Spoke cluster name (ManagedCluster name and namespace).

        Returns:
            Zero or more raw events; empty if the source is unavailable.

        Raises:
            TransportError: If the transport itself fails.

        """
        try:
            return await self.collect(workflow_id)
        except SourceUnavailableError as e:
            logger.debug("source_unavailable", provider=self.name, error=str(e))
            return []

    @abstractmethod
    async def collect(self, workflow_id: str) -> list[RawEvent]:
        """Query the source and map it to raw events.

        Raises:
            SourceUnavailableError: If the source query fails.

        """
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
