"""
Directory listing for sync runs.

Returns the plain files of one directory, in the order the session lists them.
"""

from __future__ import annotations

from sftpsync.exceptions import ListError
from sftpsync.sync.types import RemoteEntry, Session
from sftpsync.utils.logging import get_logger

logger = get_logger("sftpsync.sync.lister")


def list_files(session: Session, path: str) -> list[RemoteEntry]:
    """
    List non-directory entries of ``path``.

    Subdirectories are skipped, not descended into. Raises ListError if the
    directory cannot be read.
    """
    try:
        entries = session.list_directory(path)
    except Exception as e:
        raise ListError(path, str(e)) from e

    files: list[RemoteEntry] = []
    for entry in entries:
        if entry.is_dir:
            logger.debug(f"Skipping directory {path}/{entry.name}")
            continue
        files.append(entry)

    logger.debug(f"Listed {len(files)} files in {path} ({len(entries) - len(files)} directories skipped)")
    return files
