"""Command abstraction shared by the Get-Timeline and Summarize commands.

A command collects what it needs from the hub and returns its rendered
output; printing and exit-code handling stay in the dispatcher.
"""

from abc import ABC, abstractmethod
from argparse import Namespace

from ztp_timeline.models.base import BaseSchema

__all__ = ["BaseCommand", "CommandResult"]


class CommandResult(BaseSchema):
    """What a command hands back to the dispatcher.

    Attributes:
        exit_code: Process exit code (0 for success).
        output: Rendered result for stdout (JSON or narrative text).
        message: Diagnostic for stderr.

    """

    exit_code: int
    output: str | None = None
    message: str | None = None


class BaseCommand(ABC):
    """A CLI command selected by the dispatcher from the parsed flags."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Command name used in logs."""

    @abstractmethod
    async def execute(self, args: Namespace) -> CommandResult:
        """Run the command against the hub.

        Args:
            args: Parsed and validated command-line arguments.

        Raises:
            ConfigurationError: If the run is misconfigured.
            TransportError: If the hub cannot be reached.

        """
