"""CLI command implementations.

This module exports the command classes for the CLI.
"""

from ztp_timeline.cli.commands.base import BaseCommand, CommandResult
from ztp_timeline.cli.commands.summarize import SummarizeCommand
from ztp_timeline.cli.commands.timeline import GetTimelineCommand

__all__ = [
    "BaseCommand",
    "CommandResult",
    "GetTimelineCommand",
    "SummarizeCommand",
]
