"""Models module for ztp-timeline.

This module contains the shared vocabulary of the engine:
- base: BaseSchema and FrozenSchema for Pydantic models
- enums: MilestoneCategory, ProviderStatus, AnchorSelection, ComplianceState
- event: RawEvent, EventRecord
- timeline: Timeline, ProviderOutcome
- anchor: AnchorCandidate, AnchorSpec, MilestoneDefinition, SpanSpec, ResolvedAnchor
- milestone: MilestoneEntry, MilestoneSummary, DurationSpan
- timestamps: parse_timestamp, format_timestamp
- exceptions: ModelValidationError, TimestampParseError
"""

from ztp_timeline.models.anchor import (
    AnchorCandidate,
    AnchorSpec,
    EventPredicate,
    MilestoneDefinition,
    ResolvedAnchor,
    SpanSpec,
)
from ztp_timeline.models.base import BaseSchema, FrozenSchema
from ztp_timeline.models.enums import (
    AnchorSelection,
    ComplianceState,
    MilestoneCategory,
    ProviderStatus,
)
from ztp_timeline.models.event import EventRecord, RawEvent
from ztp_timeline.models.exceptions import ModelValidationError, TimestampParseError
from ztp_timeline.models.milestone import DurationSpan, MilestoneEntry, MilestoneSummary
from ztp_timeline.models.timeline import ProviderOutcome, Timeline
from ztp_timeline.models.timestamps import format_timestamp, parse_timestamp

__all__ = [
    "AnchorCandidate",
    "AnchorSelection",
    "AnchorSpec",
    "BaseSchema",
    "ComplianceState",
    "DurationSpan",
    "EventPredicate",
    "EventRecord",
    "format_timestamp",
    "FrozenSchema",
    "MilestoneCategory",
    "MilestoneDefinition",
    "MilestoneEntry",
    "MilestoneSummary",
    "ModelValidationError",
    "parse_timestamp",
    "ProviderOutcome",
    "ProviderStatus",
    "RawEvent",
    "ResolvedAnchor",
    "SpanSpec",
    "Timeline",
    "TimestampParseError",
]
