"""
In-memory key-value storage implementation.

For testing and development; contents are lost at process exit.
"""

import logging
from typing import Dict, Optional

from nutrisync.domain.offline_sync.core.ports import IKeyValueStorage

logger = logging.getLogger(__name__)


class InMemoryKeyValueStorage(IKeyValueStorage):
    """Dict-backed implementation of IKeyValueStorage."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value
        logger.debug(f"Stored key {key} ({len(value)} chars)")

    async def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)

    def clear(self) -> None:
        """Clear all entries (for testing)."""
        self._data.clear()
