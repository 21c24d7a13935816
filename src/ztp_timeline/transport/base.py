"""Base transport abstraction for read-only hub queries.

A transport runs ``oc`` (and ``curl`` for assisted-service event URLs)
somewhere that can reach the hub cluster: this machine, or a bastion host
over SSH. Providers only ever see the JSON helpers defined here.
"""

from __future__ import annotations

import asyncio
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from ztp_timeline.logging_config import get_logger
from ztp_timeline.transport.exceptions import SourceUnavailableError, TransportError

__all__ = ["BaseTransport", "ExecResult", "is_not_found_error"]

logger = get_logger(__name__)

_NOT_FOUND_INDICATORS = (
    "notfound",
    "not found",
    "doesn't have a resource type",
    "no matches for kind",
)


def is_not_found_error(error_output: str) -> bool:
    """Check if an oc error means the resource or resource type is absent.

    Args:
        error_output: The stderr output from an oc command.

    Returns:
        True if the error indicates absence rather than failure.

    """
    error_lower = error_output.lower()
    return any(indicator in error_lower for indicator in _NOT_FOUND_INDICATORS)


@dataclass(frozen=True)
class ExecResult:
    """Outcome of one executed command."""

    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class BaseTransport(ABC):
    """Abstract base class for transport implementations.

    Subclasses decide where commands run by implementing build_command().
    Every query issued through a transport is read-only.

    Args:
        kubeconfig: Path to the hub kubeconfig where commands run.
        oc_binary: oc client executable.
        curl_binary: curl executable.

    """

    def __init__(
        self,
        kubeconfig: str,
        oc_binary: str = "oc",
        curl_binary: str = "curl",
    ) -> None:
        self.kubeconfig = kubeconfig
        self.oc_binary = oc_binary
        self.curl_binary = curl_binary

    @property
    @abstractmethod
    def name(self) -> str:
        """Return a human description of where commands run."""
        ...

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the local executables this transport needs exist."""
        ...

    @abstractmethod
    def build_command(self, argv: list[str]) -> list[str]:
        """Wrap an argument vector into the command actually executed."""
        ...

    async def run(self, argv: list[str]) -> ExecResult:
        """Execute a command through this transport.

        The child process is killed if the awaiting task is cancelled.

        Raises:
            TransportError: If the command cannot be started.

        """
        if not self.is_available():
            raise TransportError(self.name, f"required executable not found for {argv[0]}")

        cmd = self.build_command(argv)
        logger.debug("transport_exec", transport=self.name, command=" ".join(cmd))
        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise TransportError(self.name, str(e)) from e

        try:
            stdout, stderr = await process.communicate()
        except asyncio.CancelledError:
            if process.returncode is None:
                process.kill()
                await process.wait()
            raise

        result = ExecResult(
            returncode=process.returncode if process.returncode is not None else -1,
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace").strip(),
        )
        self.check_transport_failure(result)
        return result

    def check_transport_failure(self, result: ExecResult) -> None:
        """Raise TransportError if the result shows the transport itself failed.

        Local execution has no failure mode beyond start-up; SSH overrides this.
        """
        return None

    def oc_command(self, *args: str) -> list[str]:
        """Build an ``oc`` argument vector against the configured kubeconfig."""
        return [self.oc_binary, "--kubeconfig", self.kubeconfig, *args]

    async def get_json(
        self,
        resource: str,
        name: str | None = None,
        namespace: str | None = None,
    ) -> dict[str, Any] | None:
        """Fetch a resource (or a resource list) as JSON.

        Args:
            resource: Resource type, e.g. ``agentclusterinstall``.
            name: Optional object name; without it the result is a List.
            namespace: Optional namespace.

        Returns:
            The decoded object, or None if the resource or its type does
            not exist on the hub.

        Raises:
            SourceUnavailableError: If the query fails for another reason.
            TransportError: If the transport itself fails.

        """
        args = ["get", resource]
        if name:
            args.append(name)
        if namespace:
            args.extend(["-n", namespace])
        args.extend(["-o", "json"])
        query = " ".join(args[1:-2])

        result = await self.run(self.oc_command(*args))
        if not result.ok:
            if is_not_found_error(result.stderr):
                logger.debug("resource_not_found", query=query)
                return None
            raise SourceUnavailableError(query, result.stderr or f"exit code {result.returncode}")
        return _decode_object(query, result.stdout)

    async def fetch_json(self, url: str) -> Any:
        """Fetch a URL reachable from where commands run and decode its JSON.

        Raises:
            SourceUnavailableError: If the request fails or returns invalid JSON.
            TransportError: If the transport itself fails.

        """
        result = await self.run([self.curl_binary, "-sk", url])
        if not result.ok:
            raise SourceUnavailableError(url, result.stderr or f"exit code {result.returncode}")
        try:
            return json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise SourceUnavailableError(url, f"invalid JSON: {e}") from e

    async def check_connection(self) -> None:
        """Verify the hub can be reached and the kubeconfig is accepted.

        Raises:
            TransportError: If ``oc whoami`` cannot be run successfully.

        """
        result = await self.run(self.oc_command("whoami"))
        if not result.ok:
            raise TransportError(self.name, result.stderr or f"oc exited with {result.returncode}")
        logger.debug("transport_connected", transport=self.name, user=result.stdout.strip())

    async def get_hub_name(self) -> str | None:
        """Return the hub's infrastructure name, or None if it cannot be read."""
        try:
            infrastructure = await self.get_json("infrastructure", "cluster")
        except SourceUnavailableError as e:
            logger.debug("hub_name_unavailable", error=str(e))
            return None
        if not infrastructure:
            return None
        return infrastructure.get("status", {}).get("infrastructureName")


def _decode_object(query: str, stdout: str) -> dict[str, Any]:
    try:
        data = json.loads(stdout)
    except json.JSONDecodeError as e:
        raise SourceUnavailableError(query, f"invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise SourceUnavailableError(query, f"expected object, got {type(data).__name__}")
    return data
