"""Offline sync use cases."""

from .offline_first_writer import OfflineFirstWriter, WriteOutcome, WriteStatus
from .offline_queue import DEFAULT_STORAGE_KEY, DrainReport, OfflineQueue

__all__ = [
    "OfflineQueue",
    "DrainReport",
    "DEFAULT_STORAGE_KEY",
    "OfflineFirstWriter",
    "WriteOutcome",
    "WriteStatus",
]
