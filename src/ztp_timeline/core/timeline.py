"""Timeline aggregation across independent event providers.

Providers are queried concurrently, each under its own timeout. Every task
returns its own result list and the pool is merged only after all tasks
have finished (complete-then-merge), so no collection state is shared
between tasks. Sorting happens strictly after collection, which makes the
final order independent of task completion order.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from ztp_timeline.logging_config import get_logger
from ztp_timeline.models.enums import ProviderStatus
from ztp_timeline.models.event import EventRecord, RawEvent
from ztp_timeline.models.exceptions import TimestampParseError
from ztp_timeline.models.timeline import ProviderOutcome, Timeline
from ztp_timeline.transport.exceptions import TransportError

if TYPE_CHECKING:
    from ztp_timeline.providers.base import EventProvider

__all__ = ["TimelineBuilder", "merge_contributions", "normalize_events"]

logger = get_logger(__name__)


def normalize_events(raw_events: Iterable[RawEvent], provider: str = "") -> tuple[list[EventRecord], int]:
    """Convert raw events to EventRecords, dropping unresolvable timestamps.

    Args:
        raw_events: Events as emitted by a provider.
        provider: Provider name for log context.

    Returns:
        Tuple of (records, number of dropped events).

    """
    records: list[EventRecord] = []
    dropped = 0
    for raw in raw_events:
        try:
            records.append(EventRecord.from_raw(raw))
        except TimestampParseError:
            dropped += 1
            logger.debug(
                "record_dropped",
                provider=provider,
                record=raw.event,
                timestamp=raw.timestamp,
            )
    return records, dropped


def merge_contributions(contributions: Sequence[Sequence[EventRecord]]) -> tuple[EventRecord, ...]:
    """Merge per-provider records into canonical timeline order.

    Args:
        contributions: Records per provider, indexed by registration order.

    Returns:
        Records sorted by (timestamp, registration index, name, description),
        with literal duplicates collapsed to their first occurrence.

    """
    pool = [
        (record, index)
        for index, records in enumerate(contributions)
        for record in records
    ]
    pool.sort(key=lambda item: (item[0].timestamp, item[1], item[0].name, item[0].description))

    seen: set[tuple] = set()
    merged: list[EventRecord] = []
    for record, _ in pool:
        if record.identity in seen:
            continue
        seen.add(record.identity)
        merged.append(record)
    return tuple(merged)


class TimelineBuilder:
    """Builds a Timeline from a set of providers.

    A provider that times out, fails, or cannot reach the hub contributes
    nothing; partial timelines are a normal result. Only when every provider
    failed at the transport level is the build itself a failure.

    Args:
        providers: Providers in registration order.
        provider_timeout: Seconds allowed per provider (None for no limit).
        total_timeout: Seconds allowed for the whole collection (None for no
            limit). When it expires, unfinished providers are cancelled and
            the records already collected are used.

    """

    def __init__(
        self,
        providers: Iterable[EventProvider],
        provider_timeout: float | None = None,
        total_timeout: float | None = None,
    ) -> None:
        self.providers = list(providers)
        self.provider_timeout = provider_timeout
        self.total_timeout = total_timeout

    async def build(self, workflow_id: str) -> Timeline:
        """Query every provider and merge the results.

        Cancelling the build behaves like the overall deadline: in-flight
        provider queries are cancelled and the records collected so far are
        returned.

        Args:
            workflow_id: Spoke cluster name.

        Returns:
            The merged Timeline with one ProviderOutcome per provider.

        Raises:
            TransportError: If no provider could reach the hub.

        """
        if not self.providers:
            return Timeline()

        tasks = [
            asyncio.create_task(self._invoke(provider, workflow_id), name=f"provider:{provider.name}")
            for provider in self.providers
        ]
        stop_reason = "collection deadline reached"
        try:
            _, pending = await asyncio.wait(tasks, timeout=self.total_timeout)
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if current is not None:
                current.uncancel()
            pending = {task for task in tasks if not task.done()}
            stop_reason = "collection cancelled"
            logger.warning("collection_cancelled", cancelled=[task.get_name() for task in pending])
        else:
            if pending:
                logger.warning(
                    "collection_deadline_reached",
                    timeout=self.total_timeout,
                    cancelled=[task.get_name() for task in pending],
                )

        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

        contributions: list[list[EventRecord]] = []
        outcomes: list[ProviderOutcome] = []
        transport_error: TransportError | None = None
        for provider, task in zip(self.providers, tasks, strict=True):
            if task in pending:
                contributions.append([])
                outcomes.append(
                    ProviderOutcome(
                        provider=provider.name,
                        status=ProviderStatus.timeout,
                        error=stop_reason,
                    )
                )
                continue
            raw_events, outcome, error = task.result()
            if error is not None and transport_error is None:
                transport_error = error
            records, dropped = normalize_events(raw_events, provider.name)
            contributions.append(records)
            outcomes.append(
                outcome.model_copy(update={"record_count": len(records), "dropped_count": dropped})
            )

        if transport_error is not None and all(
            o.status is ProviderStatus.transport_error for o in outcomes
        ):
            raise transport_error

        timeline = Timeline(records=merge_contributions(contributions), outcomes=tuple(outcomes))
        logger.debug(
            "timeline_built",
            workflow_id=workflow_id,
            records=len(timeline),
            providers=len(outcomes),
            degraded=[o.provider for o in outcomes if o.status is not ProviderStatus.ok],
        )
        return timeline

    async def _invoke(
        self,
        provider: EventProvider,
        workflow_id: str,
    ) -> tuple[list[RawEvent], ProviderOutcome, TransportError | None]:
        """Run one provider, converting every failure into an empty outcome."""
        try:
            events = await asyncio.wait_for(provider.query(workflow_id), self.provider_timeout)
        except TimeoutError:
            logger.warning(
                "provider_timed_out",
                provider=provider.name,
                timeout=self.provider_timeout,
            )
            return [], ProviderOutcome(
                provider=provider.name,
                status=ProviderStatus.timeout,
                error=f"timed out after {self.provider_timeout}s",
            ), None
        except TransportError as e:
            logger.warning("provider_transport_failed", provider=provider.name, error=str(e))
            return [], ProviderOutcome(
                provider=provider.name,
                status=ProviderStatus.transport_error,
                error=str(e),
            ), e
        except Exception as e:
            logger.warning("provider_failed", provider=provider.name, error=str(e))
            return [], ProviderOutcome(
                provider=provider.name,
                status=ProviderStatus.failed,
                error=str(e),
            ), None
        return list(events), ProviderOutcome(provider=provider.name, status=ProviderStatus.ok), None
