"""Remote data store port."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class IRemoteStore(ABC):
    """
    Port for the hosted relational data store.

    Every mutation either applies fully or raises ``RemoteStoreError``.
    """

    @abstractmethod
    async def insert(self, table: str, record: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Insert a record; returns the stored row when the backend echoes it."""
        pass

    @abstractmethod
    async def update(
        self, table: str, record_id: Any, updates: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """Apply a partial update to the row with ``record_id``."""
        pass

    @abstractmethod
    async def delete(self, table: str, record_id: Any) -> None:
        """Delete the row with ``record_id``."""
        pass

    @abstractmethod
    async def is_online(self) -> bool:
        """Cheap connectivity probe. Must not raise."""
        pass
