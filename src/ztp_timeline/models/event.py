"""Event models for ztp-timeline.

RawEvent is what a provider emits straight from its source mapping;
EventRecord is the normalized, immutable form that enters a Timeline.
Descriptions are kept exactly as the source wrote them, since they take
part in record identity.
"""

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field

from ztp_timeline.models.base import BaseSchema, FrozenSchema
from ztp_timeline.models.enums import MilestoneCategory
from ztp_timeline.models.timestamps import format_timestamp, parse_timestamp

__all__ = ["EventRecord", "RawEvent"]


class RawEvent(BaseSchema):
    """A provider's observation before timestamp normalization.

    Attributes:
        timestamp: Raw timestamp from the source; may be missing or malformed.
        event: Dotted event name (e.g. ``Agent.Registered``).
        event_description: Free-text explanation.
        milestone: Category assigned by the provider.
        metadata: Provider-specific pass-through values.

    """

    model_config = ConfigDict(str_strip_whitespace=False)

    timestamp: Any = None
    event: str = Field(..., min_length=1)
    event_description: str = ""
    milestone: MilestoneCategory
    metadata: dict[str, Any] = Field(default_factory=dict)


class EventRecord(FrozenSchema):
    """One normalized, timestamped observation.

    Attributes:
        timestamp: The instant of the transition, in UTC.
        name: Hierarchical dotted identifier used for matching. Not unique.
        description: Human explanation, never used for logic.
        milestone_category: Taxonomy label used for grouping.
        metadata: Provider-specific values carried through opaquely.

    """

    model_config = ConfigDict(from_attributes=True, str_strip_whitespace=False, frozen=True)

    timestamp: datetime
    name: str = Field(..., min_length=1)
    description: str = ""
    milestone_category: MilestoneCategory
    metadata: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_raw(cls, raw: RawEvent) -> "EventRecord":
        """Normalize a provider's raw event.

        Raises:
            TimestampParseError: If the raw timestamp cannot be resolved.

        """
        return cls(
            timestamp=parse_timestamp(raw.timestamp),
            name=raw.event,
            description=raw.event_description,
            milestone_category=raw.milestone,
            metadata=dict(raw.metadata),
        )

    @property
    def identity(self) -> tuple[datetime, str, str]:
        """Fields that make two records literal duplicates."""
        return (self.timestamp, self.name, self.description)

    @property
    def is_timed(self) -> bool:
        """False for presence markers whose timestamp is not a transition time."""
        return self.milestone_category.is_timed

    def to_output(self) -> dict[str, Any]:
        """Serialize to the wire shape of the Get-Timeline output."""
        output: dict[str, Any] = {
            "timestamp": format_timestamp(self.timestamp),
            "event": self.name,
            "event_description": self.description,
            "milestone": self.milestone_category.value,
        }
        for key, value in self.metadata.items():
            output.setdefault(key, value)
        return output
