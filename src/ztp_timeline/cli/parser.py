"""CLI argument parser configuration.

This module provides the argument parser for the ztp-timeline CLI.
"""

import argparse

from ztp_timeline import __version__

__all__ = ["create_parser"]


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser.

    Returns:
        An ArgumentParser configured with all CLI options.

    """
    parser = argparse.ArgumentParser(
        prog="ztp-timeline",
        description=(
            "ZTP deployment timeline - Collect the events of a spoke cluster "
            "deployment from the hub and derive its milestones."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Full timeline as JSON, hub reached through a bastion host
  ztp-timeline --cluster sno-1 --host bastion.example.com

  # Narrative summary with milestones and durations
  ztp-timeline --cluster sno-1 --host bastion.example.com --summary

  # Structured summary as JSON, using a local kubeconfig
  ztp-timeline --cluster sno-1 --kubeconfig ~/hub-kubeconfig --summary --json

  # Extra ssh options and a custom milestone catalog
  ztp-timeline --cluster sno-1 --host bastion --ssh-opts "-p 2222 -i ~/.ssh/hub" \\
      --summary --catalog milestones.yaml

Environment variables with the ZTP_TIMELINE_ prefix set the defaults
(e.g. ZTP_TIMELINE_KUBECONFIG, ZTP_TIMELINE_PROVIDER_TIMEOUT_SECONDS).
""",
    )

    # Version
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # Target
    parser.add_argument(
        "--cluster",
        type=str,
        help="Spoke cluster name (also its namespace on the hub).",
    )

    parser.add_argument(
        "--host",
        type=str,
        help="Bastion host to run oc on over SSH. Omit to run oc locally.",
    )

    parser.add_argument(
        "--ssh-opts",
        type=str,
        default="",
        dest="ssh_opts",
        help='Extra ssh options, quoted as one argument (e.g. "-p 2222").',
    )

    parser.add_argument(
        "--kubeconfig",
        type=str,
        help="Hub kubeconfig path where oc runs (default: from settings).",
    )

    # Output
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a milestone summary instead of the raw timeline.",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="With --summary, print the structured summary as JSON.",
    )

    parser.add_argument(
        "--catalog",
        type=str,
        help="YAML milestone catalog replacing the built-in ZTP milestones.",
    )

    # Timeouts
    parser.add_argument(
        "--provider-timeout",
        type=float,
        dest="provider_timeout",
        help="Seconds allowed for each provider query (default: from settings).",
    )

    parser.add_argument(
        "--timeout",
        type=float,
        help="Seconds allowed for the whole collection (default: from settings).",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging on stderr.",
    )

    return parser
