"""A fixed-capacity least-recently-used cache."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass
class CacheEntry(Generic[K, V]):
    """A key and its cached value; changing ``value`` changes the cache."""

    key: K
    value: V


class LRUCache(Generic[K, V]):
    """Keeps at most ``capacity`` entries, evicting the least recently used.

    Lookups through :meth:`find`, ``cache[key]`` and assignment mark an entry
    as used; :meth:`insert` of an existing key does not.
    """

    def __init__(self, capacity: int, default_factory: Callable[[], V] | None = None) -> None:
        if capacity <= 0:
            raise ValueError("cache size must be greater than zero")
        self._capacity = capacity
        self._default_factory = default_factory
        self._entries: OrderedDict[K, CacheEntry[K, V]] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def _insert_new(self, key: K, value: V) -> CacheEntry[K, V]:
        if len(self._entries) == self._capacity:
            self._entries.popitem(last=False)
        entry = CacheEntry(key, value)
        self._entries[key] = entry
        return entry

    def find(self, key: K) -> CacheEntry[K, V] | None:
        """The entry for ``key``, marked as most recently used, or None."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        self._entries.move_to_end(key)
        return entry

    def insert(self, key: K, value: V) -> tuple[CacheEntry[K, V], bool]:
        """Add ``key`` unless present; return its entry and whether it was added."""
        entry = self._entries.get(key)
        if entry is not None:
            return entry, False
        return self._insert_new(key, value), True

    def __getitem__(self, key: K) -> V:
        entry = self.find(key)
        if entry is not None:
            return entry.value
        if self._default_factory is None:
            raise KeyError(key)
        return self._insert_new(key, self._default_factory()).value

    def __setitem__(self, key: K, value: V) -> None:
        entry = self.find(key)
        if entry is not None:
            entry.value = value
        else:
            self._insert_new(key, value)

    def erase(self, key: K) -> None:
        """Remove ``key`` if present."""
        self._entries.pop(key, None)