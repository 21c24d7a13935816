"""CLI package for ztp-timeline.

This package provides the command-line interface. It implements the
Command pattern for the two operations (get timeline, summarize).
"""

from ztp_timeline.cli.commands import (
    BaseCommand,
    CommandResult,
    GetTimelineCommand,
    SummarizeCommand,
)
from ztp_timeline.cli.formatters import format_duration, format_summary, format_timeline
from ztp_timeline.cli.main import CommandDispatcher, main
from ztp_timeline.cli.parser import create_parser
from ztp_timeline.cli.validators import validate_args

__all__ = [
    "BaseCommand",
    "CommandDispatcher",
    "CommandResult",
    "create_parser",
    "format_duration",
    "format_summary",
    "format_timeline",
    "GetTimelineCommand",
    "main",
    "SummarizeCommand",
    "validate_args",
]
