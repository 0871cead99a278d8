"""OfflineFirstWriter - remote writes that fall back to the offline queue."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from nutrisync.domain.offline_sync.core.exceptions import RemoteStoreError
from nutrisync.domain.offline_sync.core.ports import IRemoteStore
from nutrisync.domain.offline_sync.core.value_objects import (
    OperationKind,
    QueuedOperation,
)

from .offline_queue import OfflineQueue

logger = logging.getLogger(__name__)


class WriteStatus(str, Enum):
    APPLIED = "applied"
    QUEUED = "queued"


@dataclass(frozen=True)
class WriteOutcome:
    """Result of a write attempt.

    Attributes:
        status: APPLIED if the remote store accepted the write, QUEUED if
            it was buffered for later replay
        record: Row echoed by the remote store (APPLIED only)
        operation: Queued operation (QUEUED only)
    """

    status: WriteStatus
    record: Optional[Dict[str, Any]] = None
    operation: Optional[QueuedOperation] = None

    @property
    def queued(self) -> bool:
        return self.status is WriteStatus.QUEUED


class OfflineFirstWriter:
    """
    Data-access entry point for mutations.

    Tries the remote store first; when it raises ``RemoteStoreError`` the
    mutation is queued and the caller sees no error.

    Example:
        >>> writer = OfflineFirstWriter(remote, queue)
        >>> outcome = await writer.insert("nutrition_entries", entry)
        >>> outcome.queued
        False
    """

    def __init__(self, remote: IRemoteStore, queue: OfflineQueue):
        self._remote = remote
        self._queue = queue

    async def insert(self, table: str, record: Dict[str, Any]) -> WriteOutcome:
        try:
            stored = await self._remote.insert(table, record)
        except RemoteStoreError as e:
            return await self._defer(OperationKind.INSERT, table, record, e)
        return WriteOutcome(status=WriteStatus.APPLIED, record=stored)

    async def update(
        self, table: str, record_id: Any, updates: Dict[str, Any]
    ) -> WriteOutcome:
        try:
            stored = await self._remote.update(table, record_id, updates)
        except RemoteStoreError as e:
            return await self._defer(
                OperationKind.UPDATE, table, {"id": record_id, "updates": updates}, e
            )
        return WriteOutcome(status=WriteStatus.APPLIED, record=stored)

    async def delete(self, table: str, record_id: Any) -> WriteOutcome:
        try:
            await self._remote.delete(table, record_id)
        except RemoteStoreError as e:
            return await self._defer(OperationKind.DELETE, table, {"id": record_id}, e)
        return WriteOutcome(status=WriteStatus.APPLIED)

    async def _defer(
        self,
        kind: OperationKind,
        table: str,
        payload: Dict[str, Any],
        error: RemoteStoreError,
    ) -> WriteOutcome:
        logger.warning(
            "Remote write failed, queueing for sync",
            extra={
                "kind": kind.value,
                "table": table,
                "status": error.status_code,
                "error": str(error),
            },
        )
        operation = await self._queue.enqueue(kind, table, payload)
        return WriteOutcome(status=WriteStatus.QUEUED, operation=operation)
