"""Injectable wall clock.

Durations relative to "now" are computed against a Clock so that tests can
pin the current instant.
"""

from collections.abc import Callable
from datetime import UTC, datetime

__all__ = ["Clock", "fixed_clock", "utc_now"]

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)


def fixed_clock(instant: datetime) -> Clock:
    """Build a clock that always returns ``instant``."""
    return lambda: instant
