"""Per-identity memoisation of generated portal catalogs and favorites."""

from __future__ import annotations

import logging
from threading import Lock
from typing import Callable, Generic, KeysView, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PortalDataStore(Generic[T]):
    """Generate each identity's catalog once and keep it for the process lifetime.

    ``factory`` receives the normalised identity key and returns the dataset.
    Concurrent first requests for the same key block on a per-key lock so the
    factory runs at most once; different keys generate in parallel.
    """

    def __init__(self, factory: Callable[[str], T], *, label: str = "portal") -> None:
        self._factory = factory
        self._label = label
        self._data: dict[str, T] = {}
        self._favorites: dict[str, dict[str, None]] = {}
        self._guard = Lock()
        self._locks: dict[str, Lock] = {}

    @staticmethod
    def normalize_key(key: str) -> str:
        return key.strip().lower()

    def get_portal_data(self, key: str) -> T:
        normalized = self.normalize_key(key)
        cached = self._data.get(normalized)
        if cached is not None:
            return cached

        with self._guard:
            lock = self._locks.setdefault(normalized, Lock())
        with lock:
            cached = self._data.get(normalized)
            if cached is not None:
                return cached
            data = self._factory(normalized)
            scenario = getattr(data, "scenario", None)
            logger.info(
                "Generated %s data for %s (scenario=%s, seed=%s)",
                self._label,
                normalized,
                getattr(scenario, "name", "?"),
                getattr(scenario, "seed", "?"),
            )
            with self._guard:
                self._data[normalized] = data
            return data

    def get_favorites(self, key: str) -> KeysView[str]:
        """Return a live, insertion-ordered view of the identity's favorite ids."""

        normalized = self.normalize_key(key)
        with self._guard:
            favorites = self._favorites.setdefault(normalized, {})
        return favorites.keys()

    def add_favorite(self, key: str, item_id: str) -> None:
        normalized = self.normalize_key(key)
        with self._guard:
            self._favorites.setdefault(normalized, {})[str(item_id)] = None

    def remove_favorite(self, key: str, item_id: str) -> None:
        normalized = self.normalize_key(key)
        with self._guard:
            self._favorites.get(normalized, {}).pop(str(item_id), None)

    def reset_favorites(self, key: str) -> None:
        normalized = self.normalize_key(key)
        with self._guard:
            favorites = self._favorites.get(normalized)
            if favorites is not None:
                favorites.clear()

    def reset_all(self) -> None:
        """Drop every cached catalog and favorite set."""

        with self._guard:
            dropped = len(self._data)
            self._data.clear()
            self._favorites.clear()
            self._locks.clear()
        logger.info("Reset %s store (%d cached identities dropped)", self._label, dropped)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.normalize_key(key) in self._data
