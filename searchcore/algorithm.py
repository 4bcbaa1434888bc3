"""Sequence algorithms that report positions as indices.

Functions that look for a position return the index of the element found,
or ``len(seq)`` when there is none.  Comparators follow the strict-weak
ordering convention: ``comp(a, b)`` is true when ``a`` orders before ``b``.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, MutableSequence, Sequence
from itertools import pairwise
from typing import Any, TypeVar

T = TypeVar("T")

Predicate = Callable[[Any], bool]
BinaryPredicate = Callable[[Any, Any], bool]
Compare = Callable[[Any, Any], bool]


# Batch operations


def for_each(seq: Iterable[T], func: Callable[[T], Any]) -> Callable[[T], Any]:
    """Call ``func`` on every item and return ``func``."""
    for item in seq:
        func(item)
    return func


def for_each_n(seq: Sequence[T], n: int, func: Callable[[T], Any]) -> int:
    """Call ``func`` on the first ``n`` items; return the index after the last one."""
    if n <= 0:
        return 0
    if n > len(seq):
        raise IndexError("n exceeds the length of the sequence")
    for item in seq[:n]:
        func(item)
    return n


# Search operations


def all_of(seq: Iterable[T], pred: Predicate) -> bool:
    """True if ``pred`` holds for every item (true for an empty sequence)."""
    return all(pred(item) for item in seq)


def any_of(seq: Iterable[T], pred: Predicate) -> bool:
    """True if ``pred`` holds for at least one item."""
    return any(pred(item) for item in seq)


def none_of(seq: Iterable[T], pred: Predicate) -> bool:
    """True if ``pred`` holds for no item."""
    return not any_of(seq, pred)


def find(seq: Sequence[T], value: Any) -> int:
    """Index of the first item equal to ``value``, else ``len(seq)``."""
    return find_if(seq, lambda item: item == value)


def find_if(seq: Sequence[T], pred: Predicate) -> int:
    """Index of the first item satisfying ``pred``, else ``len(seq)``."""
    for index, item in enumerate(seq):
        if pred(item):
            return index
    return len(seq)


def find_if_not(seq: Sequence[T], pred: Predicate) -> int:
    """Index of the first item not satisfying ``pred``, else ``len(seq)``."""
    return find_if(seq, lambda item: not pred(item))


def _matches_at(seq: Sequence, pattern: Sequence, start: int, pred: BinaryPredicate) -> bool:
    window = seq[start:start + len(pattern)]
    return all(pred(a, b) for a, b in zip(window, pattern))


def search(seq: Sequence[T], pattern: Sequence[Any], pred: BinaryPredicate | None = None) -> int:
    """Index where ``pattern`` first occurs in ``seq``, else ``len(seq)``.

    An empty pattern matches at index 0.
    """
    pred = pred or operator.eq
    for start in range(len(seq) - len(pattern) + 1):
        if _matches_at(seq, pattern, start, pred):
            return start
    return len(seq)


def find_end(seq: Sequence[T], pattern: Sequence[Any], pred: BinaryPredicate | None = None) -> int:
    """Index where ``pattern`` last occurs in ``seq``, else ``len(seq)``.

    An empty pattern is never found.
    """
    pred = pred or operator.eq
    if not pattern:
        return len(seq)
    for start in range(len(seq) - len(pattern), -1, -1):
        if _matches_at(seq, pattern, start, pred):
            return start
    return len(seq)


def find_first_of(seq: Sequence[T], needles: Sequence[Any], pred: BinaryPredicate | None = None) -> int:
    """Index of the first item matching any of ``needles``, else ``len(seq)``."""
    pred = pred or operator.eq
    for index, item in enumerate(seq):
        if any(pred(item, needle) for needle in needles):
            return index
    return len(seq)


def adjacent_find(seq: Sequence[T], pred: BinaryPredicate | None = None) -> int:
    """Index of the first item for which ``pred(item, next_item)`` holds, else ``len(seq)``."""
    pred = pred or operator.eq
    for index, (a, b) in enumerate(pairwise(seq)):
        if pred(a, b):
            return index
    return len(seq)


def count(seq: Iterable[T], value: Any) -> int:
    """Number of items equal to ``value``."""
    return sum(1 for item in seq if item == value)


def count_if(seq: Iterable[T], pred: Predicate) -> int:
    """Number of items satisfying ``pred``."""
    return sum(1 for item in seq if pred(item))


def equal(first: Sequence[Any], second: Sequence[Any], pred: BinaryPredicate | None = None) -> bool:
    """True if both sequences have the same length and match item by item.

    Sequences of different lengths are rejected without calling ``pred``.
    """
    if len(first) != len(second):
        return False
    pred = pred or operator.eq
    return all(pred(a, b) for a, b in zip(first, second))


def search_n(seq: Sequence[T], n: int, value: Any) -> int:
    """Index of the first run of ``n`` items equal to ``value``, else ``len(seq)``.

    A non-positive ``n`` matches at index 0.
    """
    if n <= 0:
        return 0
    run = 0
    for index, item in enumerate(seq):
        if item == value:
            run += 1
            if run == n:
                return index - n + 1
        else:
            run = 0
    return len(seq)


# Modifying operations


def fill(seq: MutableSequence[T], value: T) -> None:
    """Set every item to ``value``."""
    seq[:] = [value] * len(seq)


def replace(seq: MutableSequence[T], old_value: Any, new_value: T) -> None:
    """Replace every item equal to ``old_value`` with ``new_value``."""
    replace_if(seq, lambda item: item == old_value, new_value)


def replace_if(seq: MutableSequence[T], pred: Predicate, new_value: T) -> None:
    """Replace every item satisfying ``pred`` with ``new_value``."""
    seq[:] = [new_value if pred(item) else item for item in seq]


def reverse(seq: MutableSequence[T]) -> None:
    """Reverse the sequence in place."""
    seq[:] = list(seq)[::-1]


def rotate(seq: MutableSequence[T], middle: int) -> int:
    """Rotate left so ``seq[middle]`` becomes first; return the new index of the old first item."""
    size = len(seq)
    if not 0 <= middle <= size:
        raise IndexError("middle is out of range")
    seq[:] = list(seq[middle:]) + list(seq[:middle])
    return size - middle


def shift_left(seq: MutableSequence[T], n: int) -> int:
    """Move items ``n`` places towards the front; return the end of the shifted range.

    Items past the returned index keep their previous values.
    """
    if n < 0:
        raise ValueError("shift amount must not be negative")
    size = len(seq)
    if n == 0:
        return size
    if n >= size:
        return 0
    seq[:size - n] = list(seq[n:])
    return size - n


def shift_right(seq: MutableSequence[T], n: int) -> int:
    """Move items ``n`` places towards the back; return the start of the shifted range.

    Items before the returned index keep their previous values.
    """
    if n < 0:
        raise ValueError("shift amount must not be negative")
    size = len(seq)
    if n == 0:
        return 0
    if n >= size:
        return size
    seq[n:] = list(seq[:size - n])
    return n


# Sorted ranges


def lower_bound(seq: Sequence[T], value: Any, comp: Compare | None = None) -> int:
    """First index whose item does not order before ``value``."""
    comp = comp or operator.lt
    lo, hi = 0, len(seq)
    while lo < hi:
        mid = (lo + hi) // 2
        if comp(seq[mid], value):
            lo = mid + 1
        else:
            hi = mid
    return lo


def upper_bound(seq: Sequence[T], value: Any, comp: Compare | None = None) -> int:
    """First index whose item orders after ``value``."""
    comp = comp or operator.lt
    lo, hi = 0, len(seq)
    while lo < hi:
        mid = (lo + hi) // 2
        if comp(value, seq[mid]):
            hi = mid
        else:
            lo = mid + 1
    return lo


def binary_search(seq: Sequence[T], value: Any, comp: Compare | None = None) -> bool:
    """True if an item equivalent to ``value`` is in the sorted sequence."""
    comp = comp or operator.lt
    index = lower_bound(seq, value, comp)
    return index != len(seq) and not comp(value, seq[index])


# Minimum and maximum


def _collect(args: tuple) -> list:
    items = list(args[0]) if len(args) == 1 else list(args)
    if not items:
        raise ValueError("at least one value is required")
    return items


def max_of(*args: Any, comp: Compare | None = None) -> Any:
    """Largest of the arguments (or of a single iterable argument); the first on ties."""
    comp = comp or operator.lt
    items = _collect(args)
    largest = items[0]
    for item in items[1:]:
        if comp(largest, item):
            largest = item
    return largest


def min_of(*args: Any, comp: Compare | None = None) -> Any:
    """Smallest of the arguments (or of a single iterable argument); the first on ties."""
    comp = comp or operator.lt
    items = _collect(args)
    smallest = items[0]
    for item in items[1:]:
        if comp(item, smallest):
            smallest = item
    return smallest


def max_element(seq: Sequence[T], comp: Compare | None = None) -> int:
    """Index of the first largest item, else ``len(seq)`` for an empty sequence."""
    comp = comp or operator.lt
    if not seq:
        return len(seq)
    best = 0
    for index, item in enumerate(seq):
        if comp(seq[best], item):
            best = index
    return best


def min_element(seq: Sequence[T], comp: Compare | None = None) -> int:
    """Index of the first smallest item, else ``len(seq)`` for an empty sequence."""
    comp = comp or operator.lt
    if not seq:
        return len(seq)
    best = 0
    for index, item in enumerate(seq):
        if comp(item, seq[best]):
            best = index
    return best


def clamp(value: T, lo: T, hi: T, comp: Compare | None = None) -> T:
    """``lo`` if ``value`` orders before it, ``hi`` if ``hi`` orders before ``value``, else ``value``."""
    comp = comp or operator.lt
    if comp(hi, lo):
        raise ValueError("lo must not order after hi")
    if comp(value, lo):
        return lo
    if comp(hi, value):
        return hi
    return value


def clamp_range(seq: MutableSequence[T], lo: T, hi: T, comp: Compare | None = None) -> None:
    """Clamp every item of the sequence in place."""
    seq[:] = [clamp(item, lo, hi, comp) for item in seq]