"""Shared pytest fixtures for configuration-focused tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def isolated_config_home(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point the XDG base directories at a temporary home."""

    import supplement.config.paths as paths

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("XDG_STATE_HOME", raising=False)
    monkeypatch.delenv(paths.ENV_CONFIG_PATH, raising=False)
    monkeypatch.delenv(paths.ENV_LOG_DIR, raising=False)
    return home


@pytest.fixture
def fresh_config_cache() -> Iterator[None]:
    """Reset the cached configuration singleton around a test run."""

    from supplement.config.config import Config

    original_instance = Config._instance  # pyright: ignore[reportPrivateUsage]
    Config._instance = None  # pyright: ignore[reportPrivateUsage]

    try:
        yield None
    finally:
        Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
