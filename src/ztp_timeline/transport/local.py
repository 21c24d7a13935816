"""Local transport running oc on this machine."""

from __future__ import annotations

import shutil

from ztp_timeline.transport.base import BaseTransport

__all__ = ["LocalTransport"]


class LocalTransport(BaseTransport):
    """Runs queries directly on this machine.

    Use when the hub kubeconfig is available locally.
    """

    @property
    def name(self) -> str:
        """Return the transport description."""
        return "local oc"

    def is_available(self) -> bool:
        """Local execution only needs the oc client on PATH."""
        return shutil.which(self.oc_binary) is not None

    def build_command(self, argv: list[str]) -> list[str]:
        """Commands run unchanged."""
        return list(argv)
