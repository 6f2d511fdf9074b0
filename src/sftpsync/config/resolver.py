"""
Configuration resolution and environment variable substitution.
"""

import os
import re
from typing import Any

_VAR_PATTERN = re.compile(r"\${([^}]+)}")


def resolve_config(config_data: dict[str, Any]) -> dict[str, Any]:
    """
    Resolve configuration with environment variable substitution.

    ``${VAR_NAME}`` is replaced with the variable's value; unset variables are
    left as written so validation can report them.

    Args:
        config_data: Configuration dictionary

    Returns:
        Resolved configuration
    """
    return _resolve_value(config_data)


def _resolve_value(value: Any) -> Any:
    """Recursively resolve values in configuration."""
    if isinstance(value, dict):
        return {k: _resolve_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_resolve_value(item) for item in value]
    elif isinstance(value, str):
        return _VAR_PATTERN.sub(lambda m: os.getenv(m.group(1), m.group(0)), value)
    else:
        return value
