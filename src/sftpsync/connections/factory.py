"""
Session factory: pick a connection implementation from a connection URL.
"""

from __future__ import annotations

from urllib.parse import urlsplit

from sftpsync.config.settings import SyncSettings
from sftpsync.connections.filesystem import FilesystemConnection
from sftpsync.connections.sftp import SFTPConnection
from sftpsync.exceptions import ConfigurationError
from sftpsync.utils.logging import get_logger

logger = get_logger("sftpsync.connections.factory")


def open_session(url: str, settings: SyncSettings | None = None) -> SFTPConnection | FilesystemConnection:
    """
    Build an unconnected session for ``url``.

    ``sftp://`` (or ``ssh://``) gives an SFTPConnection configured with the
    key, known-hosts and timeout options from ``settings``; ``file://`` gives
    a FilesystemConnection. Use the result as a context manager.
    """
    scheme = urlsplit(url).scheme.lower()
    if scheme in ("sftp", "ssh"):
        options = {}
        if settings is not None:
            options = {
                "private_key_path": settings.private_key_path,
                "private_key_passphrase": settings.private_key_passphrase,
                "known_hosts_path": settings.known_hosts_path,
                "connect_timeout_s": settings.connect_timeout_s,
            }
        conn = SFTPConnection.from_url(url, **options)
        conn.validate()
        logger.debug(f"Using {conn!r}")
        return conn
    if scheme == "file":
        conn_fs = FilesystemConnection.from_url(url)
        logger.debug(f"Using {conn_fs!r}")
        return conn_fs
    raise ConfigurationError(
        f"Unsupported connection URL scheme '{scheme or '(none)'}'. Use sftp:// or file://",
        details={"scheme": scheme},
    )
