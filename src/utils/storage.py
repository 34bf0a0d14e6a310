"""Key-value stores holding serialized client state.

Every store exposes the same synchronous ``get``/``set``/``delete`` trio over
string values, mirroring browser local storage.
"""

import json
from pathlib import Path
from typing import Protocol

from ..constants import LOCAL_STORE_PATH
from .logging import logger


class KeyValueStore(Protocol):
    """Minimal string key-value store."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class InMemoryStore:
    """Process-local store, used per request by the API and in tests."""

    def __init__(self):
        """Initialize an empty store."""
        self._items: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value

    def delete(self, key: str) -> None:
        self._items.pop(key, None)


class JSONFileStore:
    """Store persisted as a single JSON object on disk."""

    def __init__(self, path: str = LOCAL_STORE_PATH):
        """Initialize the store backed by the given file."""
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        """Load all items, treating a missing or corrupt file as empty."""
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                items = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read local store {self.path}: {e}")
            return {}
        return items if isinstance(items, dict) else {}

    def _write(self, items: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(items, f)

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        items = self._read()
        items[key] = value
        self._write(items)

    def delete(self, key: str) -> None:
        items = self._read()
        if items.pop(key, None) is not None:
            self._write(items)
