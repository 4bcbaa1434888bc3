"""A Bloom filter using MD5-based double hashing."""

from __future__ import annotations

import hashlib
import math
from collections.abc import Iterator

_MASK64 = (1 << 64) - 1


class BloomFilter:
    """Approximate set membership with a bounded false positive rate.

    ``item in filter`` is false only when the item was never inserted.
    """

    def __init__(self, num_objects: int, false_positive_rate: float) -> None:
        if num_objects <= 0:
            raise ValueError("Number of objects must be positive")
        if not 0.0 < false_positive_rate < 1.0:
            raise ValueError("False positive rate must be between 0 and 1")

        ln2 = math.log(2)
        bits_needed = -(num_objects * math.log(false_positive_rate)) / (ln2 * ln2)
        num_bits = math.ceil(bits_needed)
        self._num_bits = (num_bits + 63) // 64 * 64
        self._num_hashes = math.floor(self._num_bits / num_objects * ln2 + 0.5)
        self._bits = bytearray(self._num_bits // 8)

    def _indices(self, item: str | bytes) -> Iterator[int]:
        data = item.encode("utf-8") if isinstance(item, str) else bytes(item)
        digest = hashlib.md5(data, usedforsecurity=False).digest()
        h1 = int.from_bytes(digest[:8], "little")
        h2 = int.from_bytes(digest[8:16], "little")
        for i in range(self._num_hashes):
            yield ((h1 + i * h2) & _MASK64) % self._num_bits

    def insert(self, item: str | bytes) -> None:
        """Add ``item`` to the filter."""
        for index in self._indices(item):
            self._bits[index >> 3] |= 1 << (index & 7)

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, (str, bytes, bytearray)):
            return False
        return all(self._bits[index >> 3] & (1 << (index & 7)) for index in self._indices(item))

    def memory_usage(self) -> int:
        """Bytes used by the bit array."""
        return len(self._bits)