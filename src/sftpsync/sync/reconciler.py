"""
Diff and download-then-archive reconciliation.

The archive directory is the ledger of processed files: a pending file is new
as long as no file of the same name sits in the archive. Each new file is
copied locally first and only then moved into the archive, so an interrupted
run leaves the file pending and the next run downloads it again.
"""

from __future__ import annotations

import logging
import posixpath
import shutil
from collections.abc import Iterable, Sequence
from pathlib import Path

from sftpsync.exceptions import ArchiveError, DownloadError
from sftpsync.sync.types import RemoteEntry, Session
from sftpsync.utils.logging import get_logger

# Read/write chunk for the local copy; SFTP prefetch handles the remote side
COPY_BUFSIZE = 64 * 1024


def diff(pending: Iterable[RemoteEntry], archived: Iterable[RemoteEntry]) -> list[str]:
    """
    Names in ``pending`` that are not in ``archived``, in pending order.

    Names are compared by exact string equality.
    """
    archived_names = {entry.name for entry in archived}
    return [entry.name for entry in pending if entry.name not in archived_names]


class Reconciler:
    """
    Downloads new files and moves them into the archive directory.

    Strictly sequential: the first failure aborts the remaining names and is
    raised to the caller. Nothing already archived is rolled back.
    """

    def __init__(self, session: Session, *, verbose: bool = False, logger: logging.Logger | None = None):
        self.session = session
        self.verbose = verbose
        self.logger = logger or get_logger("sftpsync.sync.reconciler")
        # Per-file progress is only interesting in verbose runs
        self._progress_level = logging.INFO if verbose else logging.DEBUG

    def process(
        self,
        names: Sequence[str],
        pending_path: str,
        archive_path: str,
        download_path: str | Path,
    ) -> int:
        """
        Download then archive each name in order.

        Returns:
            Number of files fully processed (downloaded and archived).

        Raises:
            DownloadError: Copy to the local directory failed.
            ArchiveError: Remote move into the archive failed.
        """
        download_dir = Path(download_path)
        processed = 0
        for index, name in enumerate(names, start=1):
            source = posixpath.join(pending_path, name)
            target = posixpath.join(archive_path, name)
            local = download_dir / name

            self.logger.log(self._progress_level, f"[{index}/{len(names)}] Downloading {source} -> {local}")
            try:
                size = self.download_file(source, local, name=name)
            except DownloadError as e:
                e.details["processed"] = processed
                raise

            self.logger.log(self._progress_level, f"[{index}/{len(names)}] Archiving {source} -> {target}")
            try:
                self.archive_file(source, target, name=name)
            except ArchiveError as e:
                e.details["processed"] = processed
                raise

            processed += 1
            self.logger.log(self._progress_level, f"[{index}/{len(names)}] Done {name} ({size} bytes)")

        return processed

    def download_file(self, remote_path: str, local_path: Path, *, name: str | None = None) -> int:
        """
        Copy one remote file to ``local_path``, truncating any previous copy.

        Both handles are closed before returning, on success and on error.
        Returns the number of bytes copied.
        """
        name = name or posixpath.basename(remote_path)
        try:
            src = self.session.open_for_read(remote_path)
        except Exception as e:
            raise DownloadError(name, "open_remote", f"{remote_path}: {e}") from e

        try:
            with src:
                try:
                    dst = open(local_path, "wb")
                except OSError as e:
                    raise DownloadError(name, "create_local", f"{local_path}: {e}") from e

                with dst:
                    try:
                        shutil.copyfileobj(src, dst, COPY_BUFSIZE)
                        size = dst.tell()
                    except Exception as e:
                        raise DownloadError(name, "copy", f"{remote_path} -> {local_path}: {e}") from e
        except DownloadError:
            raise
        except Exception as e:
            # Closing either handle failed (dropped connection, final flush)
            raise DownloadError(name, "copy", f"{remote_path} -> {local_path}: {e}") from e
        return size

    def archive_file(self, source: str, target: str, *, name: str | None = None) -> None:
        """Move ``source`` to ``target`` on the remote side."""
        name = name or posixpath.basename(source)
        try:
            self.session.rename(source, target)
        except Exception as e:
            raise ArchiveError(name, source, target, str(e)) from e
