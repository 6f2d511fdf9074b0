"""
One sync run: list, diff, download, archive, report.

The session must already be open and stays open for the whole run; the
caller owns it.
"""

from __future__ import annotations

import logging
import time
from dataclasses import replace
from datetime import datetime
from pathlib import Path

from sftpsync.config.settings import SyncSettings
from sftpsync.exceptions import DownloadError
from sftpsync.sync.lister import list_files
from sftpsync.sync.reconciler import Reconciler, diff
from sftpsync.sync.types import Session, SyncResult
from sftpsync.utils.logging import get_logger


def plan_sync(session: Session, settings: SyncSettings, *, logger: logging.Logger | None = None) -> SyncResult:
    """
    List both directories and work out which names are new.

    Nothing is downloaded or moved; ``processed`` is always 0. The archive
    ledger is listed over the same session as the pending directory.

    Raises:
        ListError: Either directory could not be listed.
    """
    logger = logger or get_logger("sftpsync.sync.runner")

    logger.debug(f"Listing pending files in {settings.read_path}")
    pending = list_files(session, settings.read_path)

    logger.debug(f"Listing archived files in {settings.archive_path}")
    archived = list_files(session, settings.archive_path)
    logger.debug(f"Finished listing {len(pending)} pending and {len(archived)} archived files")

    return SyncResult(processed=0, pending=len(pending), archived=len(archived), new=diff(pending, archived))


def run_sync(session: Session, settings: SyncSettings, *, logger: logging.Logger | None = None) -> SyncResult:
    """
    Run a single sync pass over an open session.

    Raises:
        ListError, DownloadError, ArchiveError: First failure of the run.
    """
    logger = logger or get_logger("sftpsync.sync.runner")
    start = time.monotonic()
    logger.info(f"Starting sync at {datetime.now().isoformat(timespec='seconds')}")

    download_dir = Path(settings.download_path)
    try:
        download_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DownloadError(None, "create_local", f"{download_dir}: {e}") from e

    plan = plan_sync(session, settings, logger=logger)
    logger.info(f"Found {len(plan.new)} new files. Downloading")

    reconciler = Reconciler(session, verbose=settings.verbose, logger=logger)
    processed = reconciler.process(plan.new, settings.read_path, settings.archive_path, download_dir)

    duration = time.monotonic() - start
    logger.info(f"Successfully downloaded {processed} files. Took {duration:.2f}s")
    return replace(plan, processed=processed, duration_s=duration)
