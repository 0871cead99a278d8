"""Local key-value storage port."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional


class IKeyValueStorage(ABC):
    """
    Port for durable local string storage.

    Assumed to survive process restarts, not assumed transactional.
    Implementations raise ``StorageError`` on I/O failures.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        pass

    @abstractmethod
    async def remove(self, key: str) -> None:
        """Delete ``key``; a missing key is not an error."""
        pass

    async def multi_remove(self, keys: Iterable[str]) -> None:
        """Delete several keys."""
        for key in keys:
            await self.remove(key)
