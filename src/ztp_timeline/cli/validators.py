"""Validation utilities for CLI arguments."""

import argparse
import shlex
from pathlib import Path

from ztp_timeline.config.defaults import (
    PROVIDER_TIMEOUT_MAX,
    PROVIDER_TIMEOUT_MIN,
    TOTAL_TIMEOUT_MAX,
    TOTAL_TIMEOUT_MIN,
)

__all__ = ["validate_args"]


def validate_args(args: argparse.Namespace) -> str | None:
    """Validate CLI arguments for consistency.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Error message if validation fails, None if valid.

    """
    cluster = getattr(args, "cluster", None)
    if cluster is None or not cluster.strip():
        return "Error: --cluster is required (spoke cluster name)"

    host = getattr(args, "host", None)
    if host is not None and not host.strip():
        return "Error: --host must not be empty"

    ssh_opts = getattr(args, "ssh_opts", "")
    if ssh_opts:
        if host is None:
            return "Error: --ssh-opts requires --host"
        try:
            shlex.split(ssh_opts)
        except ValueError as e:
            return f"Error: Invalid --ssh-opts: {e}"

    kubeconfig = getattr(args, "kubeconfig", None)
    if kubeconfig is not None and not kubeconfig.strip():
        return "Error: --kubeconfig must not be empty"

    summary = getattr(args, "summary", False)
    if getattr(args, "json_output", False) and not summary:
        return "Error: --json requires --summary"

    catalog = getattr(args, "catalog", None)
    if catalog is not None:
        if not summary:
            return "Error: --catalog requires --summary"
        catalog_path = Path(catalog)
        if not catalog_path.exists():
            return f"Error: Catalog file not found: {catalog}"
        if catalog_path.suffix not in (".yaml", ".yml"):
            return f"Error: Catalog file must be YAML: {catalog}"

    provider_timeout = getattr(args, "provider_timeout", None)
    if provider_timeout is not None and not (
        PROVIDER_TIMEOUT_MIN <= provider_timeout <= PROVIDER_TIMEOUT_MAX
    ):
        return (
            f"Error: --provider-timeout must be between "
            f"{PROVIDER_TIMEOUT_MIN} and {PROVIDER_TIMEOUT_MAX} seconds"
        )

    timeout = getattr(args, "timeout", None)
    if timeout is not None and not (TOTAL_TIMEOUT_MIN <= timeout <= TOTAL_TIMEOUT_MAX):
        return (
            f"Error: --timeout must be between "
            f"{TOTAL_TIMEOUT_MIN} and {TOTAL_TIMEOUT_MAX} seconds"
        )

    return None
