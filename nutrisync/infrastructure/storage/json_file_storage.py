"""
JSON file key-value storage.

Keeps every key in a single JSON document on disk. Writes go to a
temporary file that replaces the document atomically, so a crash never
leaves a half-written file behind. A document that is not a JSON object
is moved to ``<path>.corrupt`` and storage starts empty.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from nutrisync.domain.offline_sync.core.exceptions import StorageError
from nutrisync.domain.offline_sync.core.ports import IKeyValueStorage

logger = logging.getLogger(__name__)


class JsonFileKeyValueStorage(IKeyValueStorage):
    """
    File-backed implementation of IKeyValueStorage.

    Example:
        >>> storage = JsonFileKeyValueStorage("~/.nutrisync/storage.json")
        >>> await storage.set("supabase_offline_queue", "[]")
        >>> await storage.get("supabase_offline_queue")
        '[]'
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def corrupt_path(self) -> Path:
        """Where an unreadable document is moved."""
        return self._path.with_name(self._path.name + ".corrupt")

    async def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    async def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    async def remove(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    async def multi_remove(self, keys: Iterable[str]) -> None:
        data = self._read()
        removed = [key for key in keys if data.pop(key, None) is not None]
        if removed:
            self._write(data)

    def _read(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}

        try:
            content = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Cannot read {self._path}: {e}") from e

        if not content.strip():
            return {}

        try:
            data = json.loads(content)
        except ValueError as e:
            self._quarantine(f"not valid JSON: {e}")
            return {}

        if not isinstance(data, dict):
            self._quarantine(f"expected a JSON object, got {type(data).__name__}")
            return {}

        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _quarantine(self, reason: str) -> None:
        try:
            os.replace(self._path, self.corrupt_path)
        except OSError as e:
            raise StorageError(f"Cannot move corrupt {self._path} aside: {e}") from e

        logger.error(
            "Storage file is corrupt, moved aside",
            extra={"path": str(self._path), "moved_to": str(self.corrupt_path), "reason": reason},
        )

    def _write(self, data: Dict[str, str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                    json.dump(data, tmp)
                os.replace(tmp_name, self._path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            raise StorageError(f"Cannot write {self._path}: {e}") from e

        logger.debug(f"Wrote {len(data)} keys to {self._path}")
