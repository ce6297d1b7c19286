"""Tests for path management."""

from pathlib import Path

from svcctl.config.paths import (
    ENV_VAR,
    get_config_path,
    get_svcctl_home,
)


class TestGetSvcctlHome:
    """Tests for get_svcctl_home()."""

    def test_default_is_home_dot_svcctl(self, monkeypatch):
        monkeypatch.delenv(ENV_VAR, raising=False)
        get_svcctl_home.cache_clear()

        assert get_svcctl_home() == Path.home() / ".svcctl"

    def test_respects_env_var(self, monkeypatch, tmp_path):
        custom_path = tmp_path / "custom"
        monkeypatch.setenv(ENV_VAR, str(custom_path))
        get_svcctl_home.cache_clear()

        assert get_svcctl_home() == custom_path

    def test_expands_tilde_in_env_var(self, monkeypatch):
        monkeypatch.setenv(ENV_VAR, "~/my-svcctl")
        get_svcctl_home.cache_clear()

        assert get_svcctl_home() == Path.home() / "my-svcctl"


class TestDerivedPaths:
    """Tests for derived path functions."""

    def test_config_path(self, monkeypatch, tmp_path):
        monkeypatch.setenv(ENV_VAR, str(tmp_path))
        get_svcctl_home.cache_clear()

        assert get_config_path() == tmp_path / "config.toml"
