"""A hash set built from separate-chaining buckets."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)

_DEFAULT_BUCKET_COUNT = 16
_MAX_LOAD_FACTOR = 0.75


class UnorderedSet(Generic[T]):
    """A set of hashable values; the bucket table doubles past a 0.75 load factor."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._buckets: list[list[T]] = [[] for _ in range(_DEFAULT_BUCKET_COUNT)]
        self._size = 0
        for item in items:
            self.insert(item)

    def _bucket(self, value: T) -> list[T]:
        return self._buckets[hash(value) % len(self._buckets)]

    def _rehash(self) -> None:
        new_count = len(self._buckets) * 2
        new_buckets: list[list[T]] = [[] for _ in range(new_count)]
        for value in self:
            new_buckets[hash(value) % new_count].append(value)
        self._buckets = new_buckets

    def insert(self, value: T) -> bool:
        """Add ``value``; return False if it was already present."""
        if value in self:
            return False
        if (self._size + 1) / len(self._buckets) > _MAX_LOAD_FACTOR:
            self._rehash()
        self._bucket(value).append(value)
        self._size += 1
        return True

    def __contains__(self, value: object) -> bool:
        try:
            bucket = self._bucket(value)  # type: ignore[arg-type]
        except TypeError:
            return False
        return any(item == value for item in bucket)

    def erase(self, value: T) -> bool:
        """Remove ``value``; return False if it was not present."""
        bucket = self._bucket(value)
        for position, item in enumerate(bucket):
            if item == value:
                del bucket[position]
                self._size -= 1
                return True
        return False

    def clear(self) -> None:
        """Remove every value, keeping the current bucket table."""
        for bucket in self._buckets:
            bucket.clear()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for bucket in self._buckets:
            yield from bucket