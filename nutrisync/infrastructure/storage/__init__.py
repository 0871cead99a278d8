"""Local key-value storage adapters."""

from .in_memory_storage import InMemoryKeyValueStorage
from .json_file_storage import JsonFileKeyValueStorage

__all__ = ["InMemoryKeyValueStorage", "JsonFileKeyValueStorage"]
