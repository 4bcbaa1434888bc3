"""A binary-heap priority queue."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Keeps on top the item that orders last under ``compare``.

    With the default ``operator.lt`` the largest item is on top; pass
    ``operator.gt`` for the smallest.
    """

    def __init__(self, items: Iterable[T] = (), compare: Callable[[Any, Any], bool] = operator.lt) -> None:
        self._compare = compare
        self._heap: list[T] = list(items)
        for index in reversed(range(len(self._heap))):
            self._sift_down(index)

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if not self._compare(heap[parent], heap[index]):
                break
            heap[parent], heap[index] = heap[index], heap[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and self._compare(heap[largest], heap[child]):
                    largest = child
            if largest == index:
                return
            heap[index], heap[largest] = heap[largest], heap[index]
            index = largest

    def push(self, item: T) -> None:
        """Add ``item`` to the queue."""
        self._heap.append(item)
        self._sift_up(len(self._heap) - 1)

    def pop(self) -> T | None:
        """Remove and return the top item; an empty queue is left as is and gives None."""
        heap = self._heap
        if not heap:
            return None
        heap[0], heap[-1] = heap[-1], heap[0]
        item = heap.pop()
        if heap:
            self._sift_down(0)
        return item

    def top(self) -> T:
        """The item currently on top."""
        if not self._heap:
            raise IndexError("top() of an empty PriorityQueue")
        return self._heap[0]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)