"""
Sync subsystem: list, diff, download and archive remote files.
"""

from sftpsync.sync.lister import list_files
from sftpsync.sync.reconciler import Reconciler, diff
from sftpsync.sync.runner import plan_sync, run_sync
from sftpsync.sync.types import RemoteEntry, Session, SyncResult

__all__ = [
    "RemoteEntry",
    "Reconciler",
    "Session",
    "SyncResult",
    "diff",
    "list_files",
    "plan_sync",
    "run_sync",
]
