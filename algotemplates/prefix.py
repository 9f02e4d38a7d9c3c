"""Prefix sums and difference arrays in one and two dimensions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate


def _check_span(low: int, high: int, size: int) -> None:
    if low < 1 or high > size:
        raise IndexError(f"range [{low}, {high}] outside 1..{size}")


def _shape(matrix: Sequence[Sequence[int]]) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return rows, cols


def _prefix_2d(matrix: Sequence[Sequence[int]], cols: int) -> list[list[int]]:
    """Return the (rows+1) x (cols+1) inclusive prefix-sum table."""
    table = [[0] * (cols + 1)]
    for row in matrix:
        running = accumulate(row, initial=0)
        table.append([above + here for above, here in zip(table[-1], running)])
    return table


def range_sums(values: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Answer 1-based inclusive ``(l, r)`` sum queries."""
    prefix = list(accumulate(values, initial=0))
    result = []
    for low, high in queries:
        _check_span(low, high, len(values))
        result.append(prefix[high] - prefix[low - 1])
    return result


def matrix_range_sums(
    matrix: Sequence[Sequence[int]],
    queries: Iterable[tuple[int, int, int, int]],
) -> list[int]:
    """Answer 1-based ``(x1, y1, x2, y2)`` sub-matrix sum queries."""
    rows, cols = _shape(matrix)
    table = _prefix_2d(matrix, cols)
    result = []
    for x1, y1, x2, y2 in queries:
        _check_span(x1, x2, rows)
        _check_span(y1, y2, cols)
        result.append(
            table[x2][y2] - table[x1 - 1][y2] - table[x2][y1 - 1] + table[x1 - 1][y1 - 1]
        )
    return result


def apply_range_additions(
    values: Sequence[int], updates: Iterable[tuple[int, int, int]]
) -> list[int]:
    """Return ``values`` after adding ``c`` to every 1-based range ``(l, r, c)``."""
    diff = [0] * (len(values) + 1)
    for low, high, amount in updates:
        _check_span(low, high, len(values))
        diff[low - 1] += amount
        diff[high] -= amount
    return [v + d for v, d in zip(values, accumulate(diff))]


def apply_matrix_additions(
    matrix: Sequence[Sequence[int]],
    updates: Iterable[tuple[int, int, int, int, int]],
) -> list[list[int]]:
    """Return ``matrix`` after adding ``c`` to each 1-based ``(x1, y1, x2, y2, c)`` block."""
    rows, cols = _shape(matrix)
    diff = [[0] * (cols + 1) for _ in range(rows + 1)]
    for x1, y1, x2, y2, amount in updates:
        _check_span(x1, x2, rows)
        _check_span(y1, y2, cols)
        diff[x1 - 1][y1 - 1] += amount
        diff[x1 - 1][y2] -= amount
        diff[x2][y1 - 1] -= amount
        diff[x2][y2] += amount
    deltas = _prefix_2d(diff, cols + 1)
    return [
        [v + d for v, d in zip(row, delta_row[1:])]
        for row, delta_row in zip(matrix, deltas[1:])
    ]