"""Tests for configuration path resolution helpers."""

from pathlib import Path

import pytest

from pathmap.config.paths import (
    ENV_CONFIG_FILE,
    default_config_path,
    resolve_overridable_path,
)


def test_default_config_path_without_override(
    portable_repo_root: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Without an override the config lives under the repository config/ folder."""

    monkeypatch.delenv(ENV_CONFIG_FILE, raising=False)
    assert default_config_path() == (portable_repo_root / "config" / "pathmap.toml").resolve()


def test_default_config_path_env_override(tmp_path: Path) -> None:
    """The environment variable wins over the repository default."""

    target = tmp_path / "custom.toml"
    assert default_config_path({ENV_CONFIG_FILE: str(target)}) == target.resolve()
    assert default_config_path({ENV_CONFIG_FILE: "   "}) != target.resolve()


def test_resolve_overridable_path_prefers_explicit(tmp_path: Path) -> None:
    """Explicit paths take precedence over environment values."""

    explicit = tmp_path / "explicit.toml"
    resolved = resolve_overridable_path(
        explicit_path=explicit,
        env={"VAR": str(tmp_path / "env.toml")},
        env_var="VAR",
        default_factory=lambda: tmp_path / "default.toml",
    )
    assert resolved == explicit.resolve()


def test_resolve_overridable_path_falls_back_to_default(tmp_path: Path) -> None:
    """Missing environment values use the default factory."""

    resolved = resolve_overridable_path(
        explicit_path=None,
        env={},
        env_var="VAR",
        default_factory=lambda: tmp_path / "default.toml",
    )
    assert resolved == (tmp_path / "default.toml").resolve()
