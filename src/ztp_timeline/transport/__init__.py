"""Transport implementations for reaching the hub cluster.

Available transports:
- LocalTransport: Runs oc on this machine
- SshTransport: Runs oc on a bastion host over SSH

Base class:
- BaseTransport: Abstract base class with the read-only JSON query helpers
"""

from ztp_timeline.transport.base import BaseTransport, ExecResult, is_not_found_error
from ztp_timeline.transport.exceptions import SourceUnavailableError, TransportError
from ztp_timeline.transport.local import LocalTransport
from ztp_timeline.transport.ssh import SshTransport

__all__ = [
    "BaseTransport",
    "ExecResult",
    "is_not_found_error",
    "LocalTransport",
    "SourceUnavailableError",
    "SshTransport",
    "TransportError",
]
