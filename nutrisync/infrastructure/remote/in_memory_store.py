"""
In-memory remote store implementation.

Simple in-memory tables for testing and development, with switchable
offline mode and per-table failure injection.
"""

import logging
from typing import Any, Dict, List, Optional, Set, Tuple
from uuid import uuid4

from nutrisync.domain.offline_sync.core.exceptions import RemoteStoreError
from nutrisync.domain.offline_sync.core.ports import IRemoteStore

logger = logging.getLogger(__name__)


class InMemoryRemoteStore(IRemoteStore):
    """In-memory implementation of IRemoteStore.

    Attributes:
        online: When False, every call raises and the probe returns False
        failing_tables: Tables whose mutations always raise
        calls: Log of (operation, table, record_id) for successful mutations
    """

    def __init__(self, online: bool = True) -> None:
        self.online = online
        self.failing_tables: Set[str] = set()
        self.calls: List[Tuple[str, str, Any]] = []
        self._tables: Dict[str, Dict[Any, Dict[str, Any]]] = {}

    async def insert(self, table: str, record: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        self._check(table, "insert")
        row = dict(record)
        row.setdefault("id", str(uuid4()))
        self._tables.setdefault(table, {})[row["id"]] = row
        self.calls.append(("insert", table, row["id"]))
        return dict(row)

    async def update(
        self, table: str, record_id: Any, updates: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        self._check(table, "update")
        rows = self._tables.get(table, {})
        if record_id not in rows:
            raise RemoteStoreError(
                "Referenced record not found", table=table, operation="update"
            )
        rows[record_id].update(updates)
        self.calls.append(("update", table, record_id))
        return dict(rows[record_id])

    async def delete(self, table: str, record_id: Any) -> None:
        self._check(table, "delete")
        self._tables.get(table, {}).pop(record_id, None)
        self.calls.append(("delete", table, record_id))

    async def is_online(self) -> bool:
        return self.online

    def rows(self, table: str) -> List[Dict[str, Any]]:
        """All rows of ``table`` (for assertions)."""
        return [dict(row) for row in self._tables.get(table, {}).values()]

    def get(self, table: str, record_id: Any) -> Optional[Dict[str, Any]]:
        row = self._tables.get(table, {}).get(record_id)
        return dict(row) if row is not None else None

    def _check(self, table: str, operation: str) -> None:
        if not self.online:
            raise RemoteStoreError("Network request failed", table=table, operation=operation)
        if table in self.failing_tables:
            raise RemoteStoreError(
                "Database operation failed", table=table, operation=operation
            )
