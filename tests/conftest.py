"""Shared pytest fixtures isolating configuration discovery."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from pathmap.config.config import Config
from pathmap.config.paths import ENV_CONFIG_FILE


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point config discovery at a missing file and clear the cached instance."""

    config_file = tmp_path / "config" / "pathmap.toml"
    monkeypatch.setenv(ENV_CONFIG_FILE, str(config_file))
    Config.reset()
    yield config_file
    Config.reset()
