"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Factory creating a text file under tmp_path."""

    def _make(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _make


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """Path of a profile store inside tmp_path (not created)."""
    return tmp_path / "profiles.toml"


@pytest.fixture(autouse=True)
def isolated_config_home(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user themes never leak in."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.delenv("PROFCTL_CONFIG", raising=False)
    return config_home
