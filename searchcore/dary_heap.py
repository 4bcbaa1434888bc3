"""An addressable d-ary heap with priority updates."""

from __future__ import annotations

import operator
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T", bound=Hashable)
P = TypeVar("P")


@dataclass(slots=True)
class _Node(Generic[T, P]):
    priority: P
    value: T


class DaryHeap(Generic[T, P]):
    """A heap of unique values ordered by priority.

    The value whose priority orders first under ``compare`` is on top.
    Membership tests and priority lookups use a value-to-position index.
    """

    def __init__(self, arity: int = 4, compare: Callable[[Any, Any], bool] = operator.lt) -> None:
        if arity < 2:
            raise ValueError("arity must be at least 2")
        self._arity = arity
        self._compare = compare
        self._heap: list[_Node[T, P]] = []
        self._index: dict[T, int] = {}

    def __contains__(self, value: object) -> bool:
        return value in self._index

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def _before(self, i: int, j: int) -> bool:
        return self._compare(self._heap[i].priority, self._heap[j].priority)

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._index[heap[i].value] = i
        self._index[heap[j].value] = j

    def _sift_up(self, i: int) -> None:
        while i > 0:
            parent = (i - 1) // self._arity
            if not self._before(i, parent):
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        size = len(self._heap)
        while True:
            first = i * self._arity + 1
            best = i
            for child in range(first, min(first + self._arity, size)):
                if self._before(child, best):
                    best = child
            if best == i:
                return
            self._swap(i, best)
            i = best

    def push(self, value: T, priority: P) -> None:
        """Add ``value`` with ``priority``; a value already present is an error."""
        if value in self._index:
            raise ValueError("duplicate element being pushed")
        self._heap.append(_Node(priority, value))
        self._index[value] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def pop(self) -> T:
        """Remove and return the top value."""
        if not self._heap:
            raise IndexError("heap is empty")
        top = self._heap[0]
        last = self._heap.pop()
        del self._index[top.value]
        if self._heap:
            self._heap[0] = last
            self._index[last.value] = 0
            self._sift_down(0)
        return top.value

    def update_priority(self, value: T, priority: P) -> None:
        """Change the priority of ``value`` and restore heap order."""
        try:
            idx = self._index[value]
        except KeyError:
            raise KeyError("value to update priority of not found in heap") from None
        node = self._heap[idx]
        old = node.priority
        node.priority = priority
        if self._compare(priority, old):
            self._sift_up(idx)
        elif self._compare(old, priority):
            self._sift_down(idx)

    def top(self) -> T:
        """The value with the first-ordering priority."""
        if not self._heap:
            raise IndexError("heap is empty")
        return self._heap[0].value