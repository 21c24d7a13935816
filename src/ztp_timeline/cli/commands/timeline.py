"""Get-Timeline command implementation.

This module implements the default command: print the merged timeline of
a spoke cluster deployment as a JSON array.
"""

from argparse import Namespace

from ztp_timeline.cli.commands.base import BaseCommand, CommandResult
from ztp_timeline.cli.formatters import format_timeline
from ztp_timeline.cli.session import collect_timeline, create_transport, resolve_settings

__all__ = ["GetTimelineCommand"]


class GetTimelineCommand(BaseCommand):
    """Command to print the full deployment timeline."""

    @property
    def name(self) -> str:
        """Get the command name."""
        return "get-timeline"

    async def execute(self, args: Namespace) -> CommandResult:
        """Execute the timeline command.

        Args:
            args: Parsed arguments with cluster and transport options.

        Returns:
            CommandResult whose output is the JSON timeline.

        Raises:
            TransportError: If the hub cannot be reached.

        """
        settings = resolve_settings(args)
        transport = create_transport(args, settings)
        timeline = await collect_timeline(args.cluster.strip(), settings, transport)
        return CommandResult(exit_code=0, output=format_timeline(timeline))
