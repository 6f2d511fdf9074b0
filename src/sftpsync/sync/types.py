"""
Type definitions for sync runs and transfer sessions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import IO, Any, Protocol


@dataclass(frozen=True)
class RemoteEntry:
    """One directory entry as returned by a session listing."""

    name: str
    is_dir: bool = False
    size: int = 0
    mtime: int = 0


class Session(Protocol):
    """
    Transfer session protocol.

    Implemented by the SFTP connection and by the local filesystem connection.
    ``rename`` must fail when ``new_path`` already exists.
    """

    def list_directory(self, path: str) -> list[RemoteEntry]: ...

    def open_for_read(self, path: str) -> IO[bytes]: ...

    def rename(self, old_path: str, new_path: str) -> None: ...


@dataclass(frozen=True)
class SyncResult:
    """Summary of one run, or of a plan when ``processed`` is 0 and nothing ran."""

    processed: int
    pending: int
    archived: int
    new: list[str] = field(default_factory=list)
    duration_s: float = 0.0

    def as_dict(self) -> dict[str, Any]:
        return {
            "processed": self.processed,
            "pending": self.pending,
            "archived": self.archived,
            "new": self.new[:25],
            "duration_s": round(self.duration_s, 3),
        }
