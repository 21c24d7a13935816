"""Core engine for ztp-timeline.

This module contains the timeline and milestone logic:
- timeline: TimelineBuilder, concurrent collection and merge
- anchors: AnchorResolver, priority-ordered anchor resolution
- summarizer: MilestoneSummarizer, milestone chain and durations
- catalog: MilestoneCatalog and the default ZTP catalog
- matchers: EventMatcher predicates
- classification: compliance and cluster-status keyword rules
"""

from ztp_timeline.core.anchors import AnchorResolver, select_record
from ztp_timeline.core.catalog import FeatureFlag, MilestoneCatalog, default_catalog
from ztp_timeline.core.classification import (
    classify_cluster_status,
    classify_compliance,
    is_host_installing,
)
from ztp_timeline.core.clock import Clock, fixed_clock, utc_now
from ztp_timeline.core.matchers import EventMatcher, policy_compliant
from ztp_timeline.core.summarizer import MilestoneSummarizer
from ztp_timeline.core.timeline import TimelineBuilder, merge_contributions, normalize_events

__all__ = [
    "AnchorResolver",
    "classify_cluster_status",
    "classify_compliance",
    "Clock",
    "default_catalog",
    "EventMatcher",
    "FeatureFlag",
    "fixed_clock",
    "is_host_installing",
    "merge_contributions",
    "MilestoneCatalog",
    "MilestoneSummarizer",
    "normalize_events",
    "policy_compliant",
    "select_record",
    "TimelineBuilder",
    "utc_now",
]
