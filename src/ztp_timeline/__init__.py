"""ztp-timeline: reconstruct and summarize ZTP deployment timelines.

Queries the resources a Zero-Touch Provisioning deployment leaves behind on
an ACM hub cluster, merges their transitions into one chronological
timeline, and derives milestones, durations and a readiness verdict from it.
"""

__version__ = "2.1.0"

__all__ = ["__version__"]
