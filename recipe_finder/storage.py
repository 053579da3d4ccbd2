"""
Key-value storage backends for persisted client state.

The favorites store only needs "read a string by key" and "write a string by
key", so persistence is modeled as a small injected interface:

- JsonFileStorage: a single JSON object on disk, one entry per key
- InMemoryStorage: a dict, for tests and throwaway sessions

Writes are synchronous; a value written with set() is returned by the next
get() of the same key.
"""

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

logger = logging.getLogger(__name__)


class KeyValueStorage(ABC):
    """Abstract string key-value store."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value for `key`, or None if absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store `value` under `key`, replacing any previous value."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove `key` if present."""
        pass


class InMemoryStorage(KeyValueStorage):
    """Dict-backed storage. Contents are lost with the instance."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStorage(KeyValueStorage):
    """
    Storage backed by one JSON object file.

    The whole file is rewritten on every set() through a temporary file and
    os.replace(), so a crash mid-write leaves the previous contents intact.
    A missing, unreadable or non-object file reads as empty.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("Storage file %s is unreadable, treating as empty: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Storage file %s does not hold a JSON object, treating as empty", self.path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=str(self.path.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except BaseException:
            # Leave no stray temp file behind
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)
        logger.debug("Wrote key %r to %s", key, self.path)

    def delete(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)
