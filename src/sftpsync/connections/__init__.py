"""
Transfer sessions: SFTP servers and local directory trees.
"""

from sftpsync.connections.factory import open_session
from sftpsync.connections.filesystem import FilesystemConnection
from sftpsync.connections.sftp import SFTPConfig, SFTPConnection

__all__ = [
    "open_session",
    "FilesystemConnection",
    "SFTPConfig",
    "SFTPConnection",
]
