"""Summarize command implementation.

This module implements the command that derives milestones from the
timeline and prints the narrative or structured summary.
"""

from argparse import Namespace

from ztp_timeline.cli.commands.base import BaseCommand, CommandResult
from ztp_timeline.cli.formatters import format_summary
from ztp_timeline.cli.session import collect_timeline, create_transport, resolve_settings
from ztp_timeline.config.loader import load_catalog
from ztp_timeline.core.catalog import MilestoneCatalog, default_catalog
from ztp_timeline.core.clock import Clock, utc_now
from ztp_timeline.core.summarizer import MilestoneSummarizer
from ztp_timeline.report.generator import SummaryReportGenerator
from ztp_timeline.report.models import ReportContext

__all__ = ["SummarizeCommand"]

UNKNOWN_HUB = "Unknown"


class SummarizeCommand(BaseCommand):
    """Command to summarize a deployment.

    Args:
        clock: Source of "now" for the readiness readout.

    """

    def __init__(self, clock: Clock = utc_now) -> None:
        self.clock = clock

    @property
    def name(self) -> str:
        """Get the command name."""
        return "summarize"

    async def execute(self, args: Namespace) -> CommandResult:
        """Execute the summarize command.

        The catalog is loaded before the hub is contacted, so a bad
        catalog fails without any partial output.

        Args:
            args: Parsed arguments with cluster, transport and output options.

        Returns:
            CommandResult whose output is the narrative or JSON summary.

        Raises:
            ConfigurationError: If the catalog file is invalid.
            TransportError: If the hub cannot be reached.

        """
        catalog = self.load_catalog(args)
        settings = resolve_settings(args)
        transport = create_transport(args, settings)
        cluster = args.cluster.strip()

        timeline = await collect_timeline(cluster, settings, transport)
        hub_cluster = await transport.get_hub_name() or UNKNOWN_HUB

        summarizer = MilestoneSummarizer(catalog, clock=self.clock)
        generator = SummaryReportGenerator(summarizer)
        report = generator.generate(
            timeline,
            summarizer.summarize(timeline),
            ReportContext(
                cluster=cluster,
                hub_cluster=hub_cluster,
                host=args.host.strip() if getattr(args, "host", None) else None,
            ),
        )

        if getattr(args, "json_output", False):
            return CommandResult(exit_code=0, output=generator.to_json(report))
        return CommandResult(exit_code=0, output=format_summary(report))

    def load_catalog(self, args: Namespace) -> MilestoneCatalog:
        """Catalog from --catalog, or the built-in ZTP catalog."""
        path = getattr(args, "catalog", None)
        if path:
            return load_catalog(path)
        return default_catalog()
