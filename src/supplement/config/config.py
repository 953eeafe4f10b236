"""Configuration management for supplement."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from supplement.config.paths import default_config_path

_log = logging.getLogger("supplement.config")

LEVEL_NAMES: tuple[str, ...] = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the TOML document cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when the parsed document is semantically invalid."""


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Library configuration."""

    # Log file path; console-only logging when unset
    log_file: Path | None = _path_field()

    console_log_level: str = "INFO"
    file_log_level: str = "DEBUG"

    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths and normalize level names.

        Only fields flagged with ``metadata={"path": True}`` are converted,
        empty strings become ``None``.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

        self.console_log_level = _validate_level("console_log_level", self.console_log_level)
        self.file_log_level = _validate_level("file_log_level", self.file_log_level)

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to ``path`` (default config location) and return it."""
        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = path if path is not None else default_config_path()
        target.parent.mkdir(parents=True, exist_ok=True)
        _ = target.write_text(self._render_toml(config_dict), encoding="utf-8")
        _log.info("Configuration saved to %s", target)
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# supplement configuration file")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append("# Console-only logging when omitted")
        lines.append('# Example: log_file = "/path/to/logs/supplement.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Log levels: CRITICAL, ERROR, WARNING, INFO or DEBUG")
        lines.append(
            f"console_log_level = {self._format_toml_value(config['console_log_level'])}"
        )
        lines.append(f"file_log_level = {self._format_toml_value(config['file_log_level'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from ``path`` or the default location.

        A missing file yields default settings; nothing is written to disk.
        Results for the default location are cached on the class.

        Raises:
            ConfigParseError: The file is not valid TOML.
            ConfigValidationError: A value is invalid. Unknown keys are ignored.
        """
        if path is None and cls._instance is not None:
            return cls._instance

        config_file = path if path is not None else default_config_path()

        if config_file.exists():
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigParseError(f"Invalid TOML in {config_file}: {exc}") from exc

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                _log.warning(
                    "Ignoring unknown configuration keys in %s: %s",
                    config_file,
                    ", ".join(unknown),
                )
            instance = cls(**{key: config_dict[key] for key in config_dict if key in known})
            _log.debug("Configuration loaded from %s", config_file)
        else:
            instance = cls()

        if path is None:
            cls._instance = instance
        return instance


def _validate_level(name: str, value: object) -> str:
    if not isinstance(value, str) or value.strip().upper() not in LEVEL_NAMES:
        raise ConfigValidationError(
            f"{name} must be one of {', '.join(LEVEL_NAMES)}, got {value!r}"
        )
    return value.strip().upper()


__all__ = [
    "Config",
    "ConfigError",
    "ConfigParseError",
    "ConfigValidationError",
    "LEVEL_NAMES",
]
