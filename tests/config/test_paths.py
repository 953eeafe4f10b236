"""Tests for configuration path resolution helpers."""

from pathlib import Path

import pytest

from supplement.config.paths import (
    ENV_CONFIG_PATH,
    ENV_LOG_DIR,
    default_config_path,
    default_log_dir,
    default_log_file,
    resolve_overridable_path,
)


def test_default_paths_follow_xdg_fallbacks(isolated_config_home: Path) -> None:
    home = isolated_config_home.resolve()

    assert default_config_path() == home / ".config" / "supplement" / "config.toml"
    assert default_log_dir() == home / ".local" / "state" / "supplement" / "logs"
    assert default_log_file() == default_log_dir() / "supplement.log"


def test_xdg_variables_replace_home_fallbacks(
    isolated_config_home: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    config_home = isolated_config_home / "cfg"
    state_home = isolated_config_home / "state"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setenv("XDG_STATE_HOME", str(state_home))

    assert default_config_path() == (config_home / "supplement" / "config.toml").resolve()
    assert default_log_dir() == (state_home / "supplement" / "logs").resolve()


def test_relative_xdg_value_is_ignored(
    isolated_config_home: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", "relative/cfg")

    assert default_config_path() == (
        isolated_config_home.resolve() / ".config" / "supplement" / "config.toml"
    )


def test_default_config_path_ignores_working_directory(
    isolated_config_home: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A config/config.toml in the caller's cwd is never the default location."""

    host = tmp_path / "host"
    (host / "config").mkdir(parents=True)
    _ = (host / "config" / "config.toml").write_text('console_log_level = "verbose"\n')
    monkeypatch.chdir(host)

    assert not default_config_path().is_relative_to(host.resolve())


def test_environment_overrides_defaults(
    isolated_config_home: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    custom = isolated_config_home / "elsewhere"
    monkeypatch.setenv(ENV_CONFIG_PATH, str(custom / "settings.toml"))
    monkeypatch.setenv(ENV_LOG_DIR, str(custom / "logs"))

    assert default_config_path() == (custom / "settings.toml").resolve()
    assert default_log_file() == (custom / "logs" / "supplement.log").resolve()


def test_explicit_path_wins_over_environment(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=tmp_path / "explicit.toml",
        env={"SOME_VAR": str(tmp_path / "env.toml")},
        env_var="SOME_VAR",
        default_factory=lambda: tmp_path / "default.toml",
    )

    assert resolved == (tmp_path / "explicit.toml").resolve()


def test_blank_environment_value_falls_back_to_default(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=None,
        env={"SOME_VAR": "   "},
        env_var="SOME_VAR",
        default_factory=lambda: tmp_path / "default.toml",
    )

    assert resolved == (tmp_path / "default.toml").resolve()
