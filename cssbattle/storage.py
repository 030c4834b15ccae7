"""Key-value client storage.

Small string-to-string stores the importer keeps client state in (last
import summary, preferences). Callers receive a store instead of touching
global state; NullStorage and InMemoryStorage cover environments with no
persistent storage available.

Store failures are logged and never raised: a read that fails returns None
and a write that fails is dropped.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Protocol

from .utils import load_json_safe, save_json

logger = logging.getLogger('cssbattle.storage')


class KeyValueStorage(Protocol):
    """Interface shared by every client store."""

    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...

    def clear(self) -> None: ...


class NullStorage:
    """Store that keeps nothing."""

    def get_item(self, key: str) -> Optional[str]:
        return None

    def set_item(self, key: str, value: str) -> None:
        pass

    def remove_item(self, key: str) -> None:
        pass

    def clear(self) -> None:
        pass


class InMemoryStorage:
    """Store that lives as long as the process (session scope)."""

    def __init__(self):
        self._items: dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def clear(self) -> None:
        self._items.clear()


class JsonFileStorage:
    """Store persisted as a flat JSON object on disk."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        data = load_json_safe(self.path, default={})
        if not isinstance(data, dict):
            logger.error(f'Ignoring malformed storage file {self.path}')
            return {}
        return data

    def _save(self, items: dict[str, str]) -> None:
        try:
            save_json(self.path, items)
        except (OSError, TypeError) as e:
            logger.error(f'Error writing to storage file {self.path}: {e}')

    def get_item(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        items = self._load()
        items[key] = value
        self._save(items)

    def remove_item(self, key: str) -> None:
        items = self._load()
        if items.pop(key, None) is not None:
            self._save(items)

    def clear(self) -> None:
        self._save({})


def get_json_item(storage: KeyValueStorage, key: str) -> Optional[dict]:
    """Read a JSON-encoded value, None if missing or unreadable."""
    raw = storage.get_item(key)
    if raw is None:
        return None
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.error(f'Error decoding storage key "{key}": {e}')
        return None
    return value if isinstance(value, dict) else None


def set_json_item(storage: KeyValueStorage, key: str, value: dict) -> None:
    """Store a value JSON-encoded."""
    storage.set_item(key, json.dumps(value))
