"""Domain exceptions for offline sync."""

from .domain_errors import (
    InvalidOperationError,
    OfflineSyncError,
    RemoteStoreError,
    StorageError,
)

__all__ = [
    "OfflineSyncError",
    "RemoteStoreError",
    "StorageError",
    "InvalidOperationError",
]
