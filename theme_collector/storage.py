"""
Fingerprinted theme cache and the key-value stores behind it.

The cache record is two keys: the publish fingerprint and the registry
JSON. A record whose fingerprint does not match the current page is
ignored as a whole.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from theme_collector.registry import ThemeRegistry

logger = logging.getLogger(__name__)


STORAGE_KEYS = {
    "THEMES": "colorThemes_data",
    "PUBLISH_DATE": "colorThemes_publishDate",
}


class KeyValueStore(ABC):
    """String key -> string value store."""

    @abstractmethod
    async def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""

    @abstractmethod
    async def set_item(self, key: str, value: str) -> None:
        """Store value under key."""

    @abstractmethod
    async def remove_item(self, key: str) -> None:
        """Remove key if present."""


class MemoryStore(KeyValueStore):
    def __init__(self, items: Optional[Dict[str, str]] = None):
        self.items: Dict[str, str] = dict(items or {})

    async def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    async def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


class JsonFileStore(KeyValueStore):
    """All keys in one JSON object on disk. A missing file is an empty store."""

    def __init__(self, path: Path):
        self.path = Path(path).expanduser()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not contain a JSON object")
        return data

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

    async def get_item(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if value is None or isinstance(value, str) else str(value)

    async def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    async def remove_item(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)


class ThemeCache:
    def __init__(self, store: KeyValueStore):
        self.store = store

    async def load(self, fingerprint: Optional[int]) -> Optional[ThemeRegistry]:
        """Return the cached registry if it was stored under this fingerprint."""
        if not fingerprint:
            return None
        try:
            stored_fingerprint = await self.store.get_item(STORAGE_KEYS["PUBLISH_DATE"])
            if not stored_fingerprint or stored_fingerprint != str(fingerprint):
                return None
            raw = await self.store.get_item(STORAGE_KEYS["THEMES"])
            if raw is None:
                return None
            return ThemeRegistry.from_json(raw)
        except Exception as exc:
            logger.warning("Failed to load themes from cache: %s", exc)
            return None

    async def save(self, registry: ThemeRegistry, fingerprint: Optional[int]) -> bool:
        if not fingerprint:
            return False
        try:
            # Drop the old registry before moving the fingerprint so that an
            # interrupted save reads back as a miss, never as a stale hit.
            await self.store.remove_item(STORAGE_KEYS["THEMES"])
            await self.store.set_item(STORAGE_KEYS["PUBLISH_DATE"], str(fingerprint))
            await self.store.set_item(STORAGE_KEYS["THEMES"], registry.to_json())
            return True
        except Exception as exc:
            logger.warning("Failed to save themes to cache: %s", exc)
            return False

    async def clear(self) -> None:
        try:
            await self.store.remove_item(STORAGE_KEYS["PUBLISH_DATE"])
            await self.store.remove_item(STORAGE_KEYS["THEMES"])
        except Exception as exc:
            logger.warning("Failed to clear theme cache: %s", exc)
