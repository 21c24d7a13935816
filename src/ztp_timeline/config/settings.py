"""Application settings using pydantic-settings.

This module provides environment variable support for configuration.
Every value can be overridden by an environment variable with the
ZTP_TIMELINE_ prefix, and most of them again by a CLI flag.

Environment Variables:
    ZTP_TIMELINE_KUBECONFIG: Path to the hub kubeconfig (on the bastion when
        a host is given)
    ZTP_TIMELINE_PROVIDER_TIMEOUT_SECONDS: Timeout for a single provider query
    ZTP_TIMELINE_TOTAL_TIMEOUT_SECONDS: Deadline for the whole collection
    ZTP_TIMELINE_GITOPS_NAMESPACES: JSON list of namespaces holding ArgoCD
        Applications
    ZTP_TIMELINE_CGU_NAMESPACE: Namespace of the ZTP ClusterGroupUpgrade
    ZTP_TIMELINE_OC_BINARY: oc client executable
    ZTP_TIMELINE_SSH_BINARY: ssh client executable
    ZTP_TIMELINE_CURL_BINARY: curl executable
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ztp_timeline.config.defaults import (
    DEFAULT_CGU_NAMESPACE,
    DEFAULT_CURL_BINARY,
    DEFAULT_GITOPS_NAMESPACES,
    DEFAULT_KUBECONFIG,
    DEFAULT_OC_BINARY,
    DEFAULT_PROVIDER_TIMEOUT_SECONDS,
    DEFAULT_SSH_BINARY,
    DEFAULT_TOTAL_TIMEOUT_SECONDS,
    PROVIDER_TIMEOUT_MAX,
    PROVIDER_TIMEOUT_MIN,
    TOTAL_TIMEOUT_MAX,
    TOTAL_TIMEOUT_MIN,
)

__all__ = [
    "Settings",
    "get_settings",
]


class Settings(BaseSettings):
    """Root settings container.

    Use get_settings() to access the cached singleton instance.

    Attributes:
        kubeconfig: Path to the hub kubeconfig.
        provider_timeout_seconds: Timeout applied to each provider query.
        total_timeout_seconds: Deadline for collecting from all providers.
        gitops_namespaces: Namespaces searched for the ArgoCD Application.
        cgu_namespace: Namespace holding the ZTP ClusterGroupUpgrade.
        oc_binary: oc client executable.
        ssh_binary: ssh client executable.
        curl_binary: curl executable used for assisted-service event URLs.

    """

    model_config = SettingsConfigDict(
        env_prefix="ZTP_TIMELINE_",
        extra="ignore",
    )

    kubeconfig: str = Field(
        default=DEFAULT_KUBECONFIG,
        min_length=1,
        description="Path to the hub kubeconfig",
    )
    provider_timeout_seconds: float = Field(
        default=DEFAULT_PROVIDER_TIMEOUT_SECONDS,
        ge=PROVIDER_TIMEOUT_MIN,
        le=PROVIDER_TIMEOUT_MAX,
        description="Timeout in seconds for a single provider query",
    )
    total_timeout_seconds: float = Field(
        default=DEFAULT_TOTAL_TIMEOUT_SECONDS,
        ge=TOTAL_TIMEOUT_MIN,
        le=TOTAL_TIMEOUT_MAX,
        description="Deadline in seconds for collecting from all providers",
    )
    gitops_namespaces: list[str] = Field(
        default_factory=lambda: list(DEFAULT_GITOPS_NAMESPACES),
        min_length=1,
        description="Namespaces searched for the GitOps Application",
    )
    cgu_namespace: str = Field(
        default=DEFAULT_CGU_NAMESPACE,
        min_length=1,
        description="Namespace of the ZTP ClusterGroupUpgrade",
    )
    oc_binary: str = Field(default=DEFAULT_OC_BINARY, min_length=1)
    ssh_binary: str = Field(default=DEFAULT_SSH_BINARY, min_length=1)
    curl_binary: str = Field(default=DEFAULT_CURL_BINARY, min_length=1)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the cached settings singleton.

    Returns:
        The Settings instance with values from environment variables.

    """
    return Settings()
