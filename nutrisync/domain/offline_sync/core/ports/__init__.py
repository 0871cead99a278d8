"""Ports (interfaces) for offline sync domain."""

from .key_value_storage import IKeyValueStorage
from .remote_store import IRemoteStore

__all__ = ["IKeyValueStorage", "IRemoteStore"]
