"""SSH transport running oc on a bastion host.

The kubeconfig path and any event URLs are resolved on the bastion, which
is the machine with network access to the hub.
"""

from __future__ import annotations

import shlex
import shutil

from ztp_timeline.transport.base import BaseTransport, ExecResult
from ztp_timeline.transport.exceptions import TransportError

__all__ = ["SshTransport"]

# ssh reserves this exit status for its own errors
_SSH_FAILURE_EXIT_CODE = 255


class SshTransport(BaseTransport):
    """Runs queries on a remote host through the ssh client.

    Args:
        host: SSH destination (``host`` or ``user@host``).
        kubeconfig: Kubeconfig path on the remote host.
        ssh_options: Extra ssh options as a shell-style string,
            e.g. ``"-o StrictHostKeyChecking=no"``.
        ssh_binary: ssh client executable.
        oc_binary: oc executable on the remote host.
        curl_binary: curl executable on the remote host.

    """

    def __init__(
        self,
        host: str,
        kubeconfig: str,
        ssh_options: str = "",
        ssh_binary: str = "ssh",
        oc_binary: str = "oc",
        curl_binary: str = "curl",
    ) -> None:
        super().__init__(kubeconfig, oc_binary=oc_binary, curl_binary=curl_binary)
        self.host = host
        self.ssh_options = shlex.split(ssh_options) if ssh_options else []
        self.ssh_binary = ssh_binary

    @property
    def name(self) -> str:
        """Return the transport description."""
        return f"ssh {self.host}"

    def is_available(self) -> bool:
        """Only the local ssh client is required; oc lives on the host."""
        return shutil.which(self.ssh_binary) is not None

    def build_command(self, argv: list[str]) -> list[str]:
        """Wrap the command for remote execution."""
        return [self.ssh_binary, *self.ssh_options, self.host, "--", shlex.join(argv)]

    def check_transport_failure(self, result: ExecResult) -> None:
        """Exit status 255 means ssh could not connect or authenticate."""
        if result.returncode == _SSH_FAILURE_EXIT_CODE:
            raise TransportError(self.name, result.stderr or "ssh connection failed")
