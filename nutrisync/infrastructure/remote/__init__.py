"""Remote data store adapters."""

from .in_memory_store import InMemoryRemoteStore
from .postgrest_store import PostgrestRemoteStore

__all__ = ["InMemoryRemoteStore", "PostgrestRemoteStore"]
