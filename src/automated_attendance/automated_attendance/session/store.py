from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Durable local key-value storage (one string value per key)."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError


class InMemoryKeyValueStore(KeyValueStore):
    def __init__(self, initial: Optional[dict] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = str(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def snapshot(self) -> dict:
        return dict(self._data)


class JsonFileKeyValueStore(KeyValueStore):
    """Keeps every key in one JSON object on disk.

    Each ``set``/``remove`` is its own read-modify-write; there is no
    multi-key transaction.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def _load(self) -> dict:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except ValueError:
            logger.warning("Session store %s is corrupted; starting empty", self._path)
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: dict) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        os.replace(tmp, self._path)

    def get(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = str(value)
        self._save(data)

    def remove(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)


class ScopedKeyValueStore(KeyValueStore):
    """View of another store where every key lives under ``scope``."""

    def __init__(self, store: KeyValueStore, scope: str):
        if not scope:
            raise ValueError("scope must not be empty")
        self._store = store
        self._prefix = f"{scope}/"

    def get(self, key: str) -> Optional[str]:
        return self._store.get(self._prefix + key)

    def set(self, key: str, value: str) -> None:
        self._store.set(self._prefix + key, value)

    def remove(self, key: str) -> None:
        self._store.remove(self._prefix + key)
