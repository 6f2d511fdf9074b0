"""
Local filesystem connection implementing the transfer session.

Lets a sync run treat a local directory tree as the remote side, for
``file://`` URLs and for tests.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import IO, Any
from urllib.parse import unquote, urlsplit

from sftpsync.exceptions import ConnectionError_
from sftpsync.sync.types import RemoteEntry


class FilesystemConnection:
    """
    Local directory tree addressed with remote-style absolute paths.

    ``/outbound/a.csv`` resolves to ``<root_path>/outbound/a.csv``.
    """

    def __init__(self, name: str, config: dict[str, Any]):
        self.name = name
        self.config = config

    @classmethod
    def from_url(cls, url: str, name: str = "filesystem") -> FilesystemConnection:
        """Build a connection from ``file:///abs/root``."""
        parts = urlsplit(url)
        root = unquote(parts.path) or "/"
        return cls(name, {"type": "filesystem", "config": {"root_path": root}})

    @property
    def root_path(self) -> Path:
        """
        Get root path for this connection.

        Returns:
            Path: Root directory that remote-style paths are resolved under
        """
        root = self.config.get("config", {}).get("root_path", ".")
        return Path(root)

    def resolve(self, path: str) -> Path:
        """
        Map a remote-style path to a local path under ``root_path``.

        Raises:
            ValueError: If the path escapes root_path
        """
        root_resolved = self.root_path.resolve()
        full_resolved = (root_resolved / path.lstrip("/")).resolve()
        try:
            full_resolved.relative_to(root_resolved)
        except ValueError as e:
            raise ValueError(f"Path traversal detected: '{path}' escapes root_path '{self.root_path}'") from e
        return full_resolved

    def list_directory(self, path: str) -> list[RemoteEntry]:
        entries = []
        with os.scandir(self.resolve(path)) as it:
            for entry in it:
                st = entry.stat()
                entries.append(
                    RemoteEntry(
                        name=entry.name,
                        is_dir=entry.is_dir(),
                        size=st.st_size,
                        mtime=int(st.st_mtime),
                    )
                )
        return entries

    def open_for_read(self, path: str) -> IO[bytes]:
        return open(self.resolve(path), "rb")

    def rename(self, old_path: str, new_path: str) -> None:
        source = self.resolve(old_path)
        target = self.resolve(new_path)
        # os.rename overwrites on POSIX; SFTP rename does not
        if target.exists():
            raise FileExistsError(f"Target already exists: {new_path}")
        os.rename(source, target)

    def connect(self) -> FilesystemConnection:
        if not self.root_path.is_dir():
            raise ConnectionError_(f"Root path does not exist: {self.root_path}", details={"connection": self.name})
        return self

    def close(self) -> None:
        pass

    def __enter__(self) -> FilesystemConnection:
        self.connect()
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        """String representation."""
        return f"{self.__class__.__name__}(name='{self.name}', root_path='{self.root_path}')"
