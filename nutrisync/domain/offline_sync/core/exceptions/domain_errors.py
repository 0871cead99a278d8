"""Domain exceptions for offline sync."""

from typing import Optional

from nutrisync.domain.shared.errors import NutriSyncError


class OfflineSyncError(NutriSyncError):
    """Base exception for offline sync errors."""

    pass


class RemoteStoreError(OfflineSyncError):
    """Raised when a remote mutation or read fails.

    Covers network errors and server-side rejections alike; the remote
    store has no partial-success semantics.
    """

    def __init__(
        self,
        message: str,
        table: Optional[str] = None,
        operation: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.table = table
        self.operation = operation
        self.status_code = status_code


class StorageError(OfflineSyncError):
    """Raised when local key-value storage cannot be read or written."""

    pass


class InvalidOperationError(OfflineSyncError):
    """Raised when a mutation payload can never be replayed."""

    pass
