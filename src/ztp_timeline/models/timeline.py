"""Timeline model for ztp-timeline.

A Timeline is the deduplicated, chronologically sorted merge of every
provider's records, together with how each provider fared.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

from ztp_timeline.models.base import BaseSchema
from ztp_timeline.models.enums import MilestoneCategory, ProviderStatus
from ztp_timeline.models.event import EventRecord

__all__ = ["ProviderOutcome", "Timeline"]


class ProviderOutcome(BaseSchema):
    """Result bookkeeping for one provider invocation.

    Attributes:
        provider: Provider name.
        status: How the invocation ended.
        record_count: Records accepted into the pool.
        dropped_count: Records dropped for an unresolvable timestamp.
        error: Error text for non-ok outcomes.

    """

    provider: str
    status: ProviderStatus
    record_count: int = 0
    dropped_count: int = 0
    error: str | None = None


@dataclass(frozen=True)
class Timeline:
    """Ordered, immutable sequence of EventRecords.

    Records are sorted ascending by timestamp; ties are broken by provider
    registration order, then name. Literal duplicates have been collapsed.
    """

    records: tuple[EventRecord, ...] = ()
    outcomes: tuple[ProviderOutcome, ...] = field(default=(), compare=False)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[EventRecord]:
        return iter(self.records)

    def __getitem__(self, index: int) -> EventRecord:
        return self.records[index]

    def matching(self, predicate: Callable[[EventRecord], bool]) -> list[EventRecord]:
        """Return records satisfying the predicate, in timeline order."""
        return [record for record in self.records if predicate(record)]

    def has_event(self, name: str) -> bool:
        """Whether any record carries exactly this name."""
        return any(record.name == name for record in self.records)

    def by_category(self) -> dict[MilestoneCategory, list[EventRecord]]:
        """Group records by category, in taxonomy order, omitting empty ones."""
        grouped: dict[MilestoneCategory, list[EventRecord]] = {}
        for category in MilestoneCategory:
            records = [r for r in self.records if r.milestone_category is category]
            if records:
                grouped[category] = records
        return grouped

    def to_output(self) -> list[dict[str, Any]]:
        """Serialize to the Get-Timeline wire format."""
        return [record.to_output() for record in self.records]
