"""Compressed sparse row storage for weighted graphs."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate


class CSRMatrix:
    """A square sparse matrix built edge by edge, used for rank propagation.

    Edges must be added grouped by source row, then :meth:`finalize` is
    called once before :meth:`multiply`.
    """

    def __init__(self, nodes: int) -> None:
        if nodes < 0:
            raise ValueError("number of nodes must not be negative")
        self.nodes = nodes
        self.row_ptr: list[int] = [0] * (nodes + 1)
        self.col_idx: list[int] = []
        self.values: list[float] = []

    def add_edge(self, source: int, target: int, weight: float) -> None:
        """Record an edge from ``source`` to ``target`` with ``weight``."""
        if not 0 <= source < self.nodes:
            raise IndexError("source node out of range")
        if not 0 <= target < self.nodes:
            raise IndexError("target node out of range")
        self.col_idx.append(target)
        self.values.append(float(weight))
        self.row_ptr[source + 1] += 1

    def finalize(self) -> None:
        """Turn per-row edge counts into row offsets."""
        self.row_ptr = list(accumulate(self.row_ptr))

    def multiply(self, vector: Sequence[float]) -> list[float]:
        """Return the product of the matrix with ``vector``."""
        if len(vector) != self.nodes:
            raise ValueError("vector length must equal the number of nodes")
        return [
            sum(
                (self.values[j] * vector[self.col_idx[j]] for j in range(start, end)),
                0.0,
            )
            for start, end in zip(self.row_ptr, self.row_ptr[1:])
        ]