"""Shared setup for CLI commands: settings, transport and collection."""

from argparse import Namespace

from pydantic import ValidationError

from ztp_timeline.config.exceptions import ConfigurationError
from ztp_timeline.config.settings import Settings, get_settings
from ztp_timeline.core.timeline import TimelineBuilder
from ztp_timeline.logging_config import get_logger
from ztp_timeline.models.timeline import Timeline
from ztp_timeline.providers.registry import default_registry
from ztp_timeline.transport.base import BaseTransport
from ztp_timeline.transport.local import LocalTransport
from ztp_timeline.transport.ssh import SshTransport

__all__ = ["collect_timeline", "create_transport", "resolve_settings"]

logger = get_logger(__name__)


def resolve_settings(args: Namespace) -> Settings:
    """Apply CLI overrides on top of the environment settings.

    Raises:
        ConfigurationError: If the environment holds invalid settings.

    """
    try:
        settings = get_settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid ZTP_TIMELINE_ settings: {e}") from e

    overrides: dict[str, object] = {}
    if getattr(args, "kubeconfig", None):
        overrides["kubeconfig"] = args.kubeconfig
    if getattr(args, "provider_timeout", None) is not None:
        overrides["provider_timeout_seconds"] = args.provider_timeout
    if getattr(args, "timeout", None) is not None:
        overrides["total_timeout_seconds"] = args.timeout
    return settings.model_copy(update=overrides) if overrides else settings


def create_transport(args: Namespace, settings: Settings) -> BaseTransport:
    """SSH transport when a host is given, local transport otherwise."""
    host = getattr(args, "host", None)
    if host:
        return SshTransport(
            host=host.strip(),
            kubeconfig=settings.kubeconfig,
            ssh_options=getattr(args, "ssh_opts", "") or "",
            ssh_binary=settings.ssh_binary,
            oc_binary=settings.oc_binary,
            curl_binary=settings.curl_binary,
        )
    return LocalTransport(
        kubeconfig=settings.kubeconfig,
        oc_binary=settings.oc_binary,
        curl_binary=settings.curl_binary,
    )


async def collect_timeline(
    cluster: str,
    settings: Settings,
    transport: BaseTransport,
) -> Timeline:
    """Check hub access, then collect the timeline from every provider.

    Raises:
        TransportError: If the hub cannot be reached.

    """
    await transport.check_connection()
    registry = default_registry(transport, settings)
    logger.debug(
        "collecting_timeline",
        cluster=cluster,
        transport=transport.name,
        providers=len(registry),
    )
    builder = TimelineBuilder(
        registry.providers,
        provider_timeout=settings.provider_timeout_seconds,
        total_timeout=settings.total_timeout_seconds,
    )
    return await builder.build(cluster)
