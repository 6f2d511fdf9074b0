"""
Shared fixtures: an in-memory session with deterministic listing order.
"""

import io
import logging
import posixpath

import pytest

from sftpsync.sync.types import RemoteEntry


class TrackingReader(io.BytesIO):
    """Remote read handle; tests check ``.closed`` after a run."""


class InMemorySession:
    """
    Minimal remote side kept in dicts.

    ``dirs`` maps a directory path to its entry names in listing order;
    an entry is a subdirectory when its full path is itself a key of ``dirs``.
    """

    def __init__(self) -> None:
        self.dirs: dict[str, list[str]] = {}
        self.files: dict[str, bytes] = {}
        self.readers: list[TrackingReader] = []
        self.calls: list[tuple[str, ...]] = []
        self.fail_open: dict[str, Exception] = {}
        self.fail_rename: dict[str, Exception] = {}

    def mkdir(self, path: str) -> "InMemorySession":
        parent, name = posixpath.split(path.rstrip("/"))
        if parent in self.dirs and name not in self.dirs[parent]:
            self.dirs[parent].append(name)
        self.dirs.setdefault(path, [])
        return self

    def put(self, path: str, data: bytes = b"data") -> "InMemorySession":
        parent, name = posixpath.split(path)
        self.dirs.setdefault(parent, [])
        if name not in self.dirs[parent]:
            self.dirs[parent].append(name)
        self.files[path] = data
        return self

    def names(self, path: str) -> list[str]:
        return list(self.dirs.get(path, []))

    def list_directory(self, path: str) -> list[RemoteEntry]:
        self.calls.append(("list", path))
        if path not in self.dirs:
            raise FileNotFoundError(f"No such file: {path}")
        entries = []
        for name in self.dirs[path]:
            full = posixpath.join(path, name)
            entries.append(RemoteEntry(name=name, is_dir=full in self.dirs, size=len(self.files.get(full, b""))))
        return entries

    def open_for_read(self, path: str) -> TrackingReader:
        self.calls.append(("open", path))
        if path in self.fail_open:
            raise self.fail_open[path]
        if path not in self.files:
            raise FileNotFoundError(f"No such file: {path}")
        reader = TrackingReader(self.files[path])
        self.readers.append(reader)
        return reader

    def rename(self, old_path: str, new_path: str) -> None:
        self.calls.append(("rename", old_path, new_path))
        if old_path in self.fail_rename:
            raise self.fail_rename[old_path]
        if new_path in self.files:
            raise OSError("Failure")
        if old_path not in self.files:
            raise FileNotFoundError(f"No such file: {old_path}")
        old_parent, old_name = posixpath.split(old_path)
        self.dirs[old_parent].remove(old_name)
        data = self.files.pop(old_path)
        self.put(new_path, data)


@pytest.fixture
def session():
    """Empty in-memory session with /outbound and /outbound/archive."""
    s = InMemorySession()
    s.mkdir("/outbound")
    s.mkdir("/outbound/archive")
    return s


@pytest.fixture
def remote_root(tmp_path):
    """Local directory tree standing in for the remote server."""
    root = tmp_path / "remote"
    (root / "outbound" / "archive").mkdir(parents=True)
    return root


@pytest.fixture(autouse=True)
def _reset_sftpsync_logger():
    """Drop handlers installed by setup_logging so tests stay independent."""
    yield
    logger = logging.getLogger("sftpsync")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
