"""
sftpsync - One-shot SFTP download-and-archive sync.

Lists a remote directory, downloads every file not yet present in the remote
archive directory, then moves it into the archive.
"""

__version__ = "0.1.0"

from sftpsync.config import SyncSettings, load_config
from sftpsync.connections import FilesystemConnection, SFTPConnection, open_session
from sftpsync.exceptions import (
    ArchiveError,
    ConfigurationError,
    ConnectionError_,
    DownloadError,
    ListError,
    SFTPConnectionError,
    SyncError,
)
from sftpsync.sync import Reconciler, RemoteEntry, SyncResult, diff, list_files, run_sync
from sftpsync.utils.logging import get_logger, setup_logging

__all__ = [
    "__version__",
    # Configuration
    "load_config",
    "SyncSettings",
    # Sessions
    "open_session",
    "SFTPConnection",
    "FilesystemConnection",
    # Sync
    "run_sync",
    "list_files",
    "diff",
    "Reconciler",
    "RemoteEntry",
    "SyncResult",
    # Exceptions
    "SyncError",
    "ConfigurationError",
    "ConnectionError_",
    "SFTPConnectionError",
    "ListError",
    "DownloadError",
    "ArchiveError",
    # Logging
    "get_logger",
    "setup_logging",
]
