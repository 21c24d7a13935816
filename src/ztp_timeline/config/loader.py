"""YAML loader for milestone catalogs.

A catalog file replaces the built-in ZTP catalog. Its shape:

    milestones:
      - key: agent_bound
        label: Agent Bound to Cluster
        names: [Agent.Bound]
      - key: policies_compliant
        label: All Policies Compliant
        pattern: '^Policy\\..+\\.Compliant$'
        select: last
    start_anchor: [agent_bound]
    completion_anchor: [policies_compliant]
    spans:
      - [agent_bound, policies_compliant]
    features:
      - label: TALM CGU Completion
        event: TALM.CGU.Completed
    markers:
      ztp_done: ZTP.ZtpDoneLabelPresent

Only ``milestones``, ``start_anchor`` and ``completion_anchor`` are required.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import yaml

from ztp_timeline.config.exceptions import ConfigurationError
from ztp_timeline.config.validators import CatalogEntry
from ztp_timeline.core.catalog import FeatureFlag, MilestoneCatalog
from ztp_timeline.core.matchers import EventMatcher
from ztp_timeline.logging_config import get_logger
from ztp_timeline.models.anchor import MilestoneDefinition, SpanSpec
from ztp_timeline.models.enums import AnchorSelection

__all__ = ["load_catalog", "load_yaml_file", "parse_catalog"]

logger = get_logger(__name__)

_CATALOG_FIELDS = {
    "milestones",
    "start_anchor",
    "completion_anchor",
    "spans",
    "features",
    "markers",
}
_MILESTONE_FIELDS = {"key", "label", "names", "pattern", "exclude", "select"}
_FEATURE_FIELDS = {"label", "event", "present_notes", "absent_notes"}


def load_yaml_file(path: Path, label: str = "File") -> dict[str, Any]:
    """Load and validate a YAML file, returning the parsed dict.

    Args:
        path: Path to the YAML file.
        label: Human-readable label for error messages (e.g. "Catalog file").

    Returns:
        Parsed dictionary from the YAML file.

    Raises:
        ConfigurationError: If the file is missing, unreadable, not valid
            YAML, empty, or not a mapping.

    """
    if not path.exists():
        raise ConfigurationError(f"{label} not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse YAML file {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Failed to read YAML file {path}: {e}") from e

    if data is None:
        raise ConfigurationError(f"Empty YAML file: {path}")

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid YAML structure: expected mapping, got {type(data).__name__}"
        )

    return data


def load_catalog(path: Path | str) -> MilestoneCatalog:
    """Load a milestone catalog from a YAML file.

    Args:
        path: Path to the catalog file.

    Returns:
        MilestoneCatalog: The parsed catalog.

    Raises:
        ConfigurationError: If the file cannot be read or the catalog is
            malformed.

    """
    path = Path(path)
    data = load_yaml_file(path, label="Catalog file")
    catalog = parse_catalog(data, context=str(path))
    logger.debug("catalog_loaded", path=str(path), milestones=len(catalog.milestones))
    return catalog


def parse_catalog(data: dict[str, Any], context: str = "catalog") -> MilestoneCatalog:
    """Parse a catalog mapping.

    Raises:
        ConfigurationError: On unknown fields, malformed entries, or
            references to undefined milestone keys.

    """
    root = CatalogEntry(data, context)
    root.check_fields(_CATALOG_FIELDS)

    milestones = tuple(
        _parse_milestone(entry, f"milestones[{index}] in {context}")
        for index, entry in enumerate(root.items("milestones", required=True))
    )
    start_keys = root.strings("start_anchor", required=True)
    completion_keys = root.strings("completion_anchor", required=True)

    spans = tuple(
        _parse_span(entry, f"spans[{index}] in {context}")
        for index, entry in enumerate(root.items("spans"))
    )
    features = tuple(
        _parse_feature(entry, f"features[{index}] in {context}")
        for index, entry in enumerate(root.items("features"))
    )
    markers = _parse_markers(root.mapping("markers"), f"markers in {context}")

    try:
        return MilestoneCatalog(
            milestones=milestones,
            start_anchor=MilestoneCatalog.anchor_from_keys("start", milestones, start_keys),
            completion_anchor=MilestoneCatalog.anchor_from_keys(
                "completion", milestones, completion_keys
            ),
            spans=spans,
            features=features,
            markers=markers,
        )
    except ValueError as e:
        raise ConfigurationError(f"Invalid catalog {context}: {e}") from e


def _parse_milestone(data: Any, context: str) -> MilestoneDefinition:
    entry = CatalogEntry(data, context)
    entry.check_fields(_MILESTONE_FIELDS)

    key = entry.text("key")
    label = entry.text("label")
    names = entry.strings("names")
    pattern = entry.text("pattern", required=False)
    exclude = entry.text("exclude", required=False)
    select = entry.text("select", required=False) or AnchorSelection.first.value

    try:
        selection = AnchorSelection(select)
    except ValueError:
        valid = [s.value for s in AnchorSelection]
        raise ConfigurationError(
            f"Invalid select '{select}' in {context}. Valid values: {valid}"
        ) from None

    try:
        matcher = EventMatcher(names=tuple(names), pattern=pattern, exclude=exclude)
    except re.error as e:
        raise ConfigurationError(f"Invalid regex in {context}: {e}") from e
    except ValueError as e:
        raise ConfigurationError(f"{e} in {context}") from e

    return MilestoneDefinition(key=key.strip(), label=label.strip(), predicate=matcher, selection=selection)


def _parse_span(data: Any, context: str) -> SpanSpec:
    if (
        not isinstance(data, list)
        or len(data) != 2
        or not all(isinstance(key, str) for key in data)
    ):
        raise ConfigurationError(f"Invalid span: expected [from_key, to_key] in {context}")
    return SpanSpec(from_key=data[0], to_key=data[1])


def _parse_feature(data: Any, context: str) -> FeatureFlag:
    entry = CatalogEntry(data, context)
    entry.check_fields(_FEATURE_FIELDS)
    return FeatureFlag(
        label=entry.text("label"),
        event=entry.text("event"),
        present_notes=tuple(entry.strings("present_notes")),
        absent_notes=tuple(entry.strings("absent_notes")),
    )


def _parse_markers(data: dict[Any, Any], context: str) -> tuple[tuple[str, str], ...]:
    markers = []
    for key, event in data.items():
        if not isinstance(key, str) or not isinstance(event, str) or not event:
            raise ConfigurationError(f"Invalid marker '{key}': expected key: event name in {context}")
        markers.append((key, event))
    return tuple(markers)
