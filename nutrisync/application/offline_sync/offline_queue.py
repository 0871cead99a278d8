"""
OfflineQueue - persisted buffer of remote mutations awaiting replay.

One instance is constructed at process start and passed to every
data-access call site. Mutations that failed against the remote store are
appended here, persisted after every change, and replayed in FIFO order
by ``drain()`` (called on a fixed interval by the drain scheduler).
"""

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, List, Mapping, Optional

from nutrisync.domain.offline_sync.core.exceptions import InvalidOperationError
from nutrisync.domain.offline_sync.core.ports import IKeyValueStorage, IRemoteStore
from nutrisync.domain.offline_sync.core.value_objects import (
    OperationKind,
    QueuedOperation,
)

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "supabase_offline_queue"


@dataclass(frozen=True)
class DrainReport:
    """Outcome of one drain pass."""

    attempted: int = 0
    succeeded: int = 0
    failed: int = 0
    dead_lettered: int = 0
    skipped_reason: Optional[str] = None

    @property
    def skipped(self) -> bool:
        return self.skipped_reason is not None


class OfflineQueue:
    """
    FIFO queue of remote mutations, persisted to local storage.

    Guarantees:
    - Replay order equals enqueue order
    - An entry is removed only after its replay succeeded
    - A failing entry does not block later entries in the same pass
    - Only one drain pass runs at a time

    Delivery is at-least-once: an entry whose remote call succeeded but
    whose removal was not persisted (crash) is replayed again.

    Example:
        >>> queue = OfflineQueue(storage, remote)
        >>> await queue.load()
        >>> await queue.enqueue("insert", "water_intake", {"user_id": "u1", "amount_ml": 250})
        >>> report = await queue.drain()
    """

    def __init__(
        self,
        storage: IKeyValueStorage,
        remote: IRemoteStore,
        storage_key: str = DEFAULT_STORAGE_KEY,
        max_attempts: Optional[int] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize offline queue.

        Args:
            storage: Local key-value storage used for persistence
            remote: Remote store the queued mutations are replayed against
            storage_key: Key holding the serialised queue
            max_attempts: Failed replays after which an entry is moved to the
                dead-letter list (None = retry forever)
            clock: Time source for ``enqueued_at`` (defaults to UTC now)
        """
        if max_attempts is not None and max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")

        self._storage = storage
        self._remote = remote
        self._storage_key = storage_key
        self._max_attempts = max_attempts
        self._clock = clock or (lambda: datetime.now(timezone.utc))

        self._queue: List[QueuedOperation] = []
        # While a drain runs: snapshot entries already failed (_retry) and
        # not yet attempted (_in_flight), both ahead of _queue
        self._retry: List[QueuedOperation] = []
        self._in_flight: List[QueuedOperation] = []
        self._draining = False
        self._generation = 0

    @property
    def storage_key(self) -> str:
        return self._storage_key

    @property
    def dead_letter_key(self) -> str:
        return f"{self._storage_key}:dead_letter"

    @property
    def corrupt_key(self) -> str:
        return f"{self._storage_key}:corrupt"

    @property
    def is_draining(self) -> bool:
        return self._draining

    @property
    def pending(self) -> int:
        """Entries awaiting replay, including those of a running drain."""
        return len(self._retry) + len(self._in_flight) + len(self._queue)

    def __len__(self) -> int:
        return self.pending

    def snapshot(self) -> List[QueuedOperation]:
        """Entries awaiting replay, in replay order."""
        return [*self._retry, *self._in_flight, *self._queue]

    async def load(self) -> int:
        """
        Restore the queue persisted by a previous process.

        A corrupt document is copied to ``<key>:corrupt`` and the queue
        starts empty. Malformed individual entries are skipped, and the
        original document is copied to ``<key>:corrupt`` as well.

        Returns:
            Number of entries restored
        """
        try:
            raw = await self._storage.get(self._storage_key)
        except Exception as e:
            logger.error(
                "Error loading offline queue",
                extra={"storage_key": self._storage_key, "error": str(e)},
                exc_info=True,
            )
            return 0

        if not raw:
            self._queue = []
            return 0

        try:
            entries = json.loads(raw)
            if not isinstance(entries, list):
                raise ValueError(f"expected a JSON array, got {type(entries).__name__}")
        except ValueError as e:
            logger.error(
                "Persisted offline queue is corrupt, starting empty",
                extra={"storage_key": self._storage_key, "error": str(e)},
            )
            await self._quarantine(raw)
            self._queue = []
            return 0

        restored: List[QueuedOperation] = []
        for index, entry in enumerate(entries):
            try:
                restored.append(QueuedOperation.from_dict(entry))
            except InvalidOperationError as e:
                logger.warning(
                    "Skipping malformed offline queue entry",
                    extra={"index": index, "error": str(e)},
                )

        if len(restored) < len(entries):
            # keep the untouched document; the next persist drops the bad entries
            await self._quarantine(raw, reset=False)

        self._queue = restored
        logger.info(
            "Offline queue loaded",
            extra={"entries": len(restored), "skipped": len(entries) - len(restored)},
        )
        return len(restored)

    async def enqueue(
        self,
        kind: Any,
        target: str,
        payload: Mapping[str, Any],
    ) -> QueuedOperation:
        """
        Append a mutation and persist the queue.

        Persistence failures are logged; the entry stays queued in memory
        for the rest of the process lifetime. Payloads that cannot be
        replayed (update/delete without ``id``) are queued with a warning
        and dead-lettered by the next drain.

        Args:
            kind: "insert", "update", "delete" or an OperationKind
            target: Table name
            payload: Record (insert), {"id", "updates"} (update) or {"id"} (delete)

        Returns:
            The queued operation

        Raises:
            InvalidOperationError: If kind is unknown, target is empty or
                payload is not a mapping
        """
        operation = QueuedOperation.create(kind, target, payload, now=self._clock())
        self._queue.append(operation)

        if not operation.is_replayable:
            logger.warning(
                "Queued offline operation cannot be replayed",
                extra={
                    "operation_id": operation.operation_id,
                    "error": operation.replay_problem,
                },
            )

        logger.info(
            "Queued offline operation",
            extra={
                "operation_id": operation.operation_id,
                "kind": operation.kind.value,
                "table": operation.target,
                "pending": self.pending,
            },
        )

        await self._persist()
        return operation

    async def drain(self) -> DrainReport:
        """
        Replay every queued mutation against the remote store.

        No-op while offline, while the queue is empty, or while another
        drain pass is still running. Successful entries are dropped;
        failed ones go back to the queue (ahead of entries enqueued during
        this pass) with their attempt counter incremented.

        Returns:
            DrainReport describing the pass
        """
        if self._draining:
            logger.debug("Offline queue drain already in progress, skipping")
            return DrainReport(skipped_reason="busy")

        if not self._queue:
            return DrainReport(skipped_reason="empty")

        self._draining = True
        try:
            if not await self._probe_online():
                logger.debug(
                    "Offline, skipping queue drain",
                    extra={"pending": self.pending},
                )
                return DrainReport(skipped_reason="offline")

            return await self._replay_all()
        finally:
            self._draining = False

    async def clear(self) -> None:
        """Discard every queued entry (logout/account reset). Not reversible."""
        dropped = self.pending
        self._queue = []
        self._retry = []
        self._in_flight = []
        self._generation += 1

        logger.info("Offline queue cleared", extra={"dropped": dropped})
        await self._persist()

    async def dead_letters(self) -> List[QueuedOperation]:
        """Entries abandoned after ``max_attempts`` or with an unreplayable payload."""
        return await self._read_list(self.dead_letter_key)

    async def _replay_all(self) -> DrainReport:
        generation = self._generation
        self._in_flight = list(self._queue)
        self._queue = []
        self._retry = []

        attempted = len(self._in_flight)
        succeeded = 0
        dead: List[QueuedOperation] = []

        logger.info("Draining offline queue", extra={"entries": attempted})

        while self._in_flight:
            operation = self._in_flight[0]
            if not operation.is_replayable:
                dead.append(operation)
                self._in_flight.pop(0)
                continue

            try:
                await self._replay(operation)
            except Exception as e:
                failed = operation.with_failed_attempt()
                logger.warning(
                    "Offline operation replay failed",
                    extra={
                        "operation_id": operation.operation_id,
                        "kind": operation.kind.value,
                        "table": operation.target,
                        "attempts": failed.attempts,
                        "error": str(e),
                    },
                )
                if self._max_attempts is not None and failed.attempts >= self._max_attempts:
                    dead.append(failed)
                else:
                    self._retry.append(failed)
            else:
                succeeded += 1

            if generation != self._generation:
                # clear() ran while this replay was suspended
                self._retry = []
                dead = []
                break

            self._in_flight.pop(0)

        retry = self._retry
        self._in_flight = []
        self._retry = []
        self._queue = retry + self._queue

        if dead:
            await self._append_dead_letters(dead)

        await self._persist()

        report = DrainReport(
            attempted=attempted,
            succeeded=succeeded,
            failed=len(retry),
            dead_lettered=len(dead),
        )
        logger.info(
            "Offline queue drain complete",
            extra={
                "attempted": report.attempted,
                "succeeded": report.succeeded,
                "failed": report.failed,
                "dead_lettered": report.dead_lettered,
                "pending": self.pending,
            },
        )
        return report

    async def _replay(self, operation: QueuedOperation) -> None:
        if operation.kind is OperationKind.INSERT:
            await self._remote.insert(operation.target, operation.payload)
        elif operation.kind is OperationKind.UPDATE:
            await self._remote.update(
                operation.target, operation.record_id, operation.updates
            )
        else:
            await self._remote.delete(operation.target, operation.record_id)

    async def _probe_online(self) -> bool:
        try:
            return bool(await self._remote.is_online())
        except Exception as e:
            logger.warning("Connectivity probe failed", extra={"error": str(e)})
            return False

    async def _persist(self) -> None:
        try:
            document = json.dumps([op.to_dict() for op in self.snapshot()])
            await self._storage.set(self._storage_key, document)
        except Exception as e:
            logger.error(
                "Error saving offline queue, keeping in-memory state",
                extra={"storage_key": self._storage_key, "error": str(e)},
            )

    async def _append_dead_letters(self, operations: List[QueuedOperation]) -> None:
        existing = await self._read_list(self.dead_letter_key)
        try:
            document = json.dumps([op.to_dict() for op in existing + operations])
            await self._storage.set(self.dead_letter_key, document)
        except Exception as e:
            logger.error(
                "Error saving dead-lettered operations",
                extra={"count": len(operations), "error": str(e)},
            )
        for op in operations:
            logger.error(
                "Offline operation dead-lettered",
                extra={
                    "operation_id": op.operation_id,
                    "kind": op.kind.value,
                    "table": op.target,
                    "attempts": op.attempts,
                },
            )

    async def _read_list(self, key: str) -> List[QueuedOperation]:
        try:
            raw = await self._storage.get(key)
            entries = json.loads(raw) if raw else []
        except Exception as e:
            logger.error("Error reading stored operations", extra={"key": key, "error": str(e)})
            return []

        operations: List[QueuedOperation] = []
        for entry in entries if isinstance(entries, list) else []:
            try:
                operations.append(QueuedOperation.from_dict(entry))
            except InvalidOperationError:
                continue
        return operations

    async def _quarantine(self, raw: str, reset: bool = True) -> None:
        try:
            await self._storage.set(self.corrupt_key, raw)
            if reset:
                await self._storage.set(self._storage_key, "[]")
        except Exception as e:
            logger.error("Error quarantining corrupt offline queue", extra={"error": str(e)})
