"""Entry point of the ``ztp-timeline`` command.

Exit codes:
    0: Success.
    1: Invalid arguments or configuration, or an unexpected error.
    2: The hub could not be reached.
    130: Interrupted.
"""

import argparse
import asyncio
import sys
import traceback

from ztp_timeline.cli.commands import BaseCommand, GetTimelineCommand, SummarizeCommand
from ztp_timeline.cli.parser import create_parser
from ztp_timeline.cli.validators import validate_args
from ztp_timeline.config.exceptions import ConfigurationError
from ztp_timeline.logging_config import configure_logging, get_logger
from ztp_timeline.transport.exceptions import TransportError

__all__ = ["CommandDispatcher", "main"]

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_TRANSPORT_ERROR = 2
EXIT_INTERRUPTED = 130


class CommandDispatcher:
    """Selects the command for a set of flags and prints its result.

    ``--summary`` selects Summarize; everything else is Get-Timeline.
    """

    def __init__(self) -> None:
        self._timeline = GetTimelineCommand()
        self._summary = SummarizeCommand()

    def select(self, args: argparse.Namespace) -> BaseCommand:
        """Return the command the flags ask for."""
        return self._summary if getattr(args, "summary", False) else self._timeline

    async def dispatch(self, args: argparse.Namespace) -> int:
        """Run the selected command.

        Output goes to stdout, diagnostics to stderr.

        Returns:
            The command's exit code.

        """
        command = self.select(args)
        logger.debug("command_selected", command=command.name, cluster=args.cluster)
        result = await command.execute(args)

        if result.output is not None:
            print(result.output)
        if result.message:
            print(result.message, file=sys.stderr)
        return result.exit_code


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the selected command and map failures to exit codes.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:]).

    Returns:
        The process exit code.

    """
    args = create_parser().parse_args(argv)
    verbose = getattr(args, "verbose", False)
    configure_logging(verbose=verbose)

    error = validate_args(args)
    if error:
        print(error, file=sys.stderr)
        return EXIT_CONFIG_ERROR

    try:
        return asyncio.run(CommandDispatcher().dispatch(args))
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except TransportError as e:
        logger.debug("transport_failed", target=e.target, detail=e.detail)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_TRANSPORT_ERROR
    except Exception as e:
        logger.exception("fatal_error", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        if verbose:
            traceback.print_exc()
        return EXIT_CONFIG_ERROR


if __name__ == "__main__":
    sys.exit(main())
