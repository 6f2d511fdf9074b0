"""
Configuration management.

YAML file parsing, environment variable substitution, typed run settings.
"""

from sftpsync.config.loader import Config, load_config
from sftpsync.config.resolver import resolve_config
from sftpsync.config.settings import SyncSettings

__all__ = [
    "load_config",
    "Config",
    "resolve_config",
    "SyncSettings",
]
