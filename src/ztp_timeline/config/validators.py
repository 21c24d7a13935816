"""Typed field access for catalog file entries.

Every mapping read from a catalog file is wrapped in a CatalogEntry, which
knows where in the file the mapping came from and turns any shape mismatch
into a ConfigurationError naming that location.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ztp_timeline.config.exceptions import ConfigurationError

__all__ = ["CatalogEntry"]


class CatalogEntry:
    """One mapping from a catalog file.

    Example:
        entry = CatalogEntry(data, "milestones[0] in catalog.yaml")
        entry.check_fields({"key", "label", "names", "pattern"})
        key = entry.text("key")
        names = entry.strings("names")

    Args:
        data: Value expected to be a mapping.
        where: Location used in error messages.

    Raises:
        ConfigurationError: If ``data`` is not a mapping.

    """

    def __init__(self, data: Any, where: str) -> None:
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"{where}: expected a mapping, got {type(data).__name__}"
            )
        self.data: dict[str, Any] = data
        self.where = where

    def check_fields(self, allowed: Iterable[str]) -> None:
        """Reject fields outside ``allowed``."""
        unknown = sorted(str(name) for name in set(self.data) - set(allowed))
        if unknown:
            raise ConfigurationError(f"{self.where}: unknown field(s) {', '.join(unknown)}")

    def text(self, field: str, *, required: bool = True) -> str | None:
        """Return a string field.

        Required fields must be present and non-blank. Optional fields
        return None when absent.
        """
        value = self.data.get(field)
        if value is None:
            if required:
                raise self._missing(field)
            return None
        if not isinstance(value, str):
            raise ConfigurationError(
                f"{self.where}: '{field}' must be a string, got {type(value).__name__}"
            )
        if required and not value.strip():
            raise ConfigurationError(f"{self.where}: '{field}' must not be blank")
        return value

    def strings(self, field: str, *, required: bool = False) -> list[str]:
        """Return a list-of-strings field; empty when optional and absent."""
        values = self.items(field, required=required)
        if not all(isinstance(value, str) for value in values):
            raise ConfigurationError(f"{self.where}: '{field}' must contain only strings")
        return values

    def items(self, field: str, *, required: bool = False) -> list[Any]:
        """Return a list field.

        A required list must also be non-empty.
        """
        value = self.data.get(field)
        if value is None:
            if required:
                raise self._missing(field)
            return []
        if not isinstance(value, list):
            raise ConfigurationError(
                f"{self.where}: '{field}' must be a list, got {type(value).__name__}"
            )
        if required and not value:
            raise ConfigurationError(f"{self.where}: '{field}' must not be empty")
        return list(value)

    def mapping(self, field: str) -> dict[str, Any]:
        """Return an optional mapping field; empty when absent."""
        value = self.data.get(field)
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ConfigurationError(
                f"{self.where}: '{field}' must be a mapping, got {type(value).__name__}"
            )
        return value

    def _missing(self, field: str) -> ConfigurationError:
        return ConfigurationError(f"{self.where}: missing required field '{field}'")
