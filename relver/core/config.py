"""Typed configuration loading.

The configuration lives in an optional ``relver.toml`` at the repository
root:

    [release]
    tag_format = "v${version}"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result

__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULT_TAG_FORMAT",
    "Config",
    "ConfigError",
    "load_config",
]

CONFIG_FILE_NAME = "relver.toml"
DEFAULT_TAG_FORMAT = "v${version}"

StrDict = dict[str, object]


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    tag_format: str = DEFAULT_TAG_FORMAT

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        release = _get_table(data, "release") or {}
        tag_format = release.get("tag_format", DEFAULT_TAG_FORMAT)
        if not isinstance(tag_format, str):
            raise TypeError("release.tag_format must be a string")
        return cls(tag_format=tag_format)


def _get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    value = table.get(key)
    if not isinstance(value, dict):
        return None
    return {str(k): v for k, v in value.items()}


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, mapping read and syntax errors to ConfigError."""
    import tomllib

    try:
        content = path.read_bytes()
        data: StrDict = tomllib.loads(content.decode("utf-8"))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to relver.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))
