"""Configuration module for ztp-timeline.

This module provides centralized settings via pydantic-settings, the
built-in defaults, and the loader for YAML milestone catalog files.
"""

from ztp_timeline.config.exceptions import ConfigurationError
from ztp_timeline.config.loader import load_catalog, load_yaml_file, parse_catalog
from ztp_timeline.config.settings import Settings, get_settings

__all__ = [
    "ConfigurationError",
    "get_settings",
    "load_catalog",
    "load_yaml_file",
    "parse_catalog",
    "Settings",
]
