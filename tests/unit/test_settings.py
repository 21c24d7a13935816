"""Unit tests for Settings."""

import pytest
from pydantic import ValidationError

from ztp_timeline.config.defaults import (
    DEFAULT_CGU_NAMESPACE,
    DEFAULT_GITOPS_NAMESPACES,
    DEFAULT_PROVIDER_TIMEOUT_SECONDS,
    DEFAULT_TOTAL_TIMEOUT_SECONDS,
)
from ztp_timeline.config.settings import Settings, get_settings


class TestSettings:
    """Tests for Settings defaults and environment overrides."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ZTP_TIMELINE_PROVIDER_TIMEOUT_SECONDS", raising=False)

        settings = Settings(_env_file=None)

        assert settings.provider_timeout_seconds == DEFAULT_PROVIDER_TIMEOUT_SECONDS
        assert settings.total_timeout_seconds == DEFAULT_TOTAL_TIMEOUT_SECONDS
        assert settings.gitops_namespaces == list(DEFAULT_GITOPS_NAMESPACES)
        assert settings.cgu_namespace == DEFAULT_CGU_NAMESPACE
        assert settings.oc_binary == "oc"

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Values are read from ZTP_TIMELINE_* variables."""
        monkeypatch.setenv("ZTP_TIMELINE_KUBECONFIG", "/tmp/hub.kubeconfig")
        monkeypatch.setenv("ZTP_TIMELINE_PROVIDER_TIMEOUT_SECONDS", "5")
        monkeypatch.setenv("ZTP_TIMELINE_GITOPS_NAMESPACES", '["gitops"]')

        settings = Settings(_env_file=None)

        assert settings.kubeconfig == "/tmp/hub.kubeconfig"
        assert settings.provider_timeout_seconds == 5
        assert settings.gitops_namespaces == ["gitops"]

    @pytest.mark.parametrize(
        "field",
        ["provider_timeout_seconds", "total_timeout_seconds"],
    )
    def test_timeouts_must_be_positive(self, field: str) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: 0})

    def test_provider_timeout_upper_bound(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, provider_timeout_seconds=601)

    def test_empty_namespace_list_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, gitops_namespaces=[])

    def test_get_settings_cached(self) -> None:
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
