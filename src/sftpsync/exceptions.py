"""
sftpsync exception hierarchy.

All domain-specific exceptions inherit from SyncError, so the CLI can map any
failure of a run to an exit code with a single ``except`` while components
still raise fine-grained types.

Hierarchy::

    SyncError
    ├── ConfigurationError        - config loading, parsing, validation
    ├── ConnectionError_          - session setup, authentication, host key
    ├── ListError                 - directory enumeration failed
    ├── DownloadError             - remote open, local create or copy failed
    └── ArchiveError              - remote rename into the archive failed
"""

from __future__ import annotations


class SyncError(Exception):
    """Base exception for all sftpsync errors."""

    def __init__(self, message: str, *, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


# --- Configuration -----------------------------------------------------------


class ConfigurationError(SyncError):
    """Raised when configuration loading, parsing, or validation fails."""


# --- Connections -------------------------------------------------------------


class ConnectionError_(SyncError):
    """Raised when a transfer session cannot be established.

    Named with trailing underscore to avoid shadowing the builtin
    ``ConnectionError``; the public alias ``SFTPConnectionError``
    is preferred for external use.
    """


SFTPConnectionError = ConnectionError_


# --- Reconciliation ----------------------------------------------------------


class ListError(SyncError):
    """Raised when a directory cannot be listed."""

    def __init__(self, path: str, message: str | None = None) -> None:
        full = f"Cannot list directory '{path}'"
        if message:
            full = f"{full}: {message}"
        super().__init__(full, details={"path": path})
        self.path = path


class DownloadError(SyncError):
    """Raised when a file cannot be copied to the local download directory.

    ``stage`` is one of ``open_remote``, ``create_local`` or ``copy``.
    """

    def __init__(self, name: str | None, stage: str, message: str, *, processed: int = 0) -> None:
        subject = f"Download of '{name}'" if name else "Download"
        super().__init__(
            f"{subject} failed at {stage}: {message}",
            details={"name": name, "stage": stage, "processed": processed},
        )
        self.name = name
        self.stage = stage


class ArchiveError(SyncError):
    """Raised when a downloaded file cannot be moved into the archive directory."""

    def __init__(self, name: str, source: str, target: str, message: str, *, processed: int = 0) -> None:
        super().__init__(
            f"Archive of '{name}' ({source} -> {target}) failed: {message}",
            details={"name": name, "source": source, "target": target, "processed": processed},
        )
        self.name = name
        self.source = source
        self.target = target
