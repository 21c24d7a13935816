"""Timestamp parsing and rendering.

Sources report RFC 3339 instants in several shapes: Kubernetes metadata
(second precision, ``Z``), Kubernetes ``eventTime`` (microseconds), and the
assisted-service REST API (milliseconds or nanoseconds, sometimes with a
numeric offset). All of them are normalized to timezone-aware UTC datetimes.
"""

import re
from datetime import UTC, datetime

from ztp_timeline.models.exceptions import TimestampParseError

__all__ = ["format_timestamp", "parse_timestamp"]

_RFC3339 = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>Z|z|[+-]\d{2}:?\d{2})?$"
)


def parse_timestamp(value: object) -> datetime:
    """Parse a source timestamp into an aware UTC datetime.

    Fractional seconds longer than microseconds are truncated. Values
    without an offset are taken as UTC.

    Args:
        value: A string or datetime from a source record.

    Returns:
        The instant as a UTC datetime.

    Raises:
        TimestampParseError: If the value is missing or not a recognizable
            instant.

    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        match = _RFC3339.match(value.strip())
        if match is None:
            raise TimestampParseError(value)
        text = match.group("base").replace(" ", "T")
        fraction = match.group("fraction")
        if fraction:
            text += "." + fraction[:6].ljust(6, "0")
        offset = match.group("offset")
        if offset and offset not in ("Z", "z"):
            if ":" not in offset:
                offset = f"{offset[:3]}:{offset[3:]}"
            text += offset
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise TimestampParseError(value) from e
    else:
        raise TimestampParseError(value)

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def format_timestamp(value: datetime) -> str:
    """Render a UTC instant the way Kubernetes does (``Z`` suffix).

    Sub-second precision is kept when present.
    """
    value = value.astimezone(UTC)
    spec = "seconds" if value.microsecond == 0 else "microseconds"
    return value.replace(tzinfo=None).isoformat(timespec=spec) + "Z"
