"""Declarative event predicates.

An EventMatcher is a small, inspectable predicate over EventRecord names.
Milestone definitions and anchor candidates are built from matchers so
that the default catalog and catalog files share one representation.
"""

import re
from dataclasses import dataclass, field

from ztp_timeline.models.event import EventRecord

__all__ = ["EventMatcher", "policy_compliant"]


@dataclass(frozen=True)
class EventMatcher:
    """Match records by exact name, name regex, or both.

    A record matches when its name is one of ``names`` or is found by
    ``pattern`` (``re.search``), and is not found by ``exclude``.

    Attributes:
        names: Exact names that match.
        pattern: Regex searched in the name.
        exclude: Regex that vetoes a match.

    """

    names: tuple[str, ...] = ()
    pattern: str | None = None
    exclude: str | None = None
    _pattern: re.Pattern[str] | None = field(default=None, init=False, repr=False, compare=False)
    _exclude: re.Pattern[str] | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.names and not self.pattern:
            raise ValueError("EventMatcher needs at least one name or a pattern")
        # frozen dataclass: cache compiled regexes through object.__setattr__
        if self.pattern:
            object.__setattr__(self, "_pattern", re.compile(self.pattern))
        if self.exclude:
            object.__setattr__(self, "_exclude", re.compile(self.exclude))

    def __call__(self, record: EventRecord) -> bool:
        name = record.name
        matched = name in self.names or (
            self._pattern is not None and self._pattern.search(name) is not None
        )
        if not matched:
            return False
        return self._exclude is None or self._exclude.search(name) is None

    def describe(self) -> str:
        """Human description of the matcher, for diagnostics."""
        parts = list(self.names)
        if self.pattern:
            parts.append(f"/{self.pattern}/")
        text = " | ".join(parts)
        if self.exclude:
            text += f" except /{self.exclude}/"
        return text


# Positive terminal compliance events emitted by the policy event provider.
policy_compliant = EventMatcher(pattern=r"^Policy\..+\.Compliant$")
