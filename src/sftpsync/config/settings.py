"""
Typed run settings built from the ``sftpconfig`` section of a config file.
"""

from __future__ import annotations

import os
import posixpath
from dataclasses import dataclass
from typing import Any

from sftpsync.config.loader import Config
from sftpsync.exceptions import ConfigurationError

SECTION = "sftpconfig"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class SyncSettings:
    """Resolved settings for one run."""

    read_path: str
    archive_path: str
    download_path: str
    connection_env_var: str
    verbose: bool = False
    known_hosts_path: str | None = None
    private_key_path: str | None = None
    private_key_passphrase: str | None = None
    connect_timeout_s: float = 15.0

    @classmethod
    def from_config(cls, config: Config) -> SyncSettings:
        """
        Validate the ``sftpconfig`` section and build settings.

        Every problem is collected and reported in a single ConfigurationError.
        """
        section = config.get(SECTION)
        if not isinstance(section, dict):
            raise ConfigurationError(f"Configuration is missing the '{SECTION}' section")

        errors: list[str] = []

        def required(key: str) -> str:
            value = section.get(key)
            if not isinstance(value, str) or not value.strip():
                errors.append(f"'{SECTION}.{key}' must be a non-empty string")
                return ""
            return value.strip()

        read_path = required("readpath")
        archive_path = required("archivepath")
        download_path = required("downloadpath")
        env_var = required("connectionstringenvvar")

        if read_path and archive_path and _same_remote_dir(read_path, archive_path):
            errors.append(f"'{SECTION}.readpath' and '{SECTION}.archivepath' must be different directories")

        verbose = False
        try:
            verbose = _coerce_bool(section.get("verbose", False))
        except ValueError as e:
            errors.append(f"'{SECTION}.verbose': {e}")

        timeout = 15.0
        try:
            timeout = float(section.get("connecttimeout", 15.0))
            if timeout <= 0:
                raise ValueError("must be positive")
        except (TypeError, ValueError) as e:
            errors.append(f"'{SECTION}.connecttimeout': {e}")

        if errors:
            raise ConfigurationError(
                "Invalid configuration:\n  " + "\n  ".join(errors),
                details={"errors": errors},
            )

        return cls(
            read_path=read_path,
            archive_path=archive_path,
            download_path=os.path.expanduser(download_path),
            connection_env_var=env_var,
            verbose=verbose,
            known_hosts_path=_optional_path(section.get("knownhostspath")),
            private_key_path=_optional_path(section.get("privatekeypath")),
            private_key_passphrase=_optional_str(section.get("privatekeypassphrase")),
            connect_timeout_s=timeout,
        )

    def connection_url(self) -> str:
        """Read the connection URL from the configured environment variable."""
        url = os.getenv(self.connection_env_var, "")
        if not url:
            raise ConfigurationError(
                f"Can't find environment variable {self.connection_env_var}",
                details={"env_var": self.connection_env_var},
            )
        return url


def _same_remote_dir(a: str, b: str) -> bool:
    return posixpath.normpath(a) == posixpath.normpath(b)


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
    raise ValueError(f"expected a boolean, got {value!r}")


def _optional_path(value: Any) -> str | None:
    if not value:
        return None
    return os.path.expanduser(str(value))


def _optional_str(value: Any) -> str | None:
    # YAML reads an unquoted 1234 as int; paramiko wants str
    if value is None or value == "":
        return None
    return str(value)
