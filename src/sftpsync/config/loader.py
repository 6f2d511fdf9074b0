"""
Configuration file loading.
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import yaml

from sftpsync.config.resolver import resolve_config
from sftpsync.exceptions import ConfigurationError


class Config:
    """sftpsync configuration container with dict-like access."""

    def __init__(self, data: dict[str, Any], path: Path | None = None):
        self.data = data
        self.path = path

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation."""
        keys = key.split(".")
        value = self.data
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default
        return value

    def __getitem__(self, key: str) -> Any:
        """Dict-like access: config['key'] or config['nested.key']."""
        if "." in key:
            return self.get(key)
        if key in self.data:
            value = self.data[key]
            if isinstance(value, dict):
                return Config(value, self.path)
            return value
        raise KeyError(f"Config key '{key}' not found")

    def __contains__(self, key: str) -> bool:
        """Check if key exists in config."""
        value: Any = self.data
        for k in key.split("."):
            if not isinstance(value, dict) or k not in value:
                return False
            value = value[k]
        return True

    def __iter__(self) -> Iterator[str]:
        return iter(self.data)

    def keys(self):
        return self.data.keys()

    def items(self):
        return self.data.items()


def load_config(config_path: str | Path) -> Config:
    """
    Load a sftpsync YAML configuration file.

    Args:
        config_path: Path to the YAML file

    Returns:
        Config instance with ``${VAR}`` references resolved

    Raises:
        ConfigurationError: File missing, unreadable, malformed or not a mapping
    """
    config_path = Path(config_path).expanduser()
    if not config_path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {config_path}",
            details={"path": str(config_path)},
        )
    if not config_path.is_file():
        raise ConfigurationError(f"Configuration path is not a file: {config_path}", details={"path": str(config_path)})

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        if mark is not None:
            raise ConfigurationError(
                f"Error parsing {config_path.name} at line {mark.line + 1}, column {mark.column + 1}:\n"
                f"  {e}\n"
                f"  Suggestion: Check YAML syntax, ensure proper indentation and quotes",
                details={"path": str(config_path)},
            ) from e
        raise ConfigurationError(f"Error parsing {config_path.name}: {e}", details={"path": str(config_path)}) from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file {config_path}: {e}") from e

    if not isinstance(config_data, dict):
        raise ConfigurationError(
            f"Configuration must be a mapping, got {type(config_data).__name__}",
            details={"path": str(config_path)},
        )

    return Config(resolve_config(config_data), config_path)
