"""Two-pointer scans, bit tricks, coordinate compression and interval merging."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from itertools import accumulate

_INT_MASK = 0xFFFFFFFF


def find_pair_with_sum(a: Sequence[int], b: Sequence[int], target: int) -> tuple[int, int]:
    """Return indices ``(i, j)`` with ``a[i] + b[j] == target`` for ascending ``a`` and ``b``."""
    i, j = 0, len(b) - 1
    while i < len(a) and j >= 0:
        total = a[i] + b[j]
        if total == target:
            return i, j
        if total > target:
            j -= 1
        else:
            i += 1
    raise ValueError(f"no pair sums to {target}")


def is_subsequence(a: Iterable[object], b: Iterable[object]) -> bool:
    """Return whether ``a`` appears in ``b`` in order, not necessarily contiguously."""
    remaining = iter(b)
    return all(item in remaining for item in a)


def lowbit(x: int) -> int:
    """Return the lowest set bit of ``x``."""
    return x & -x


def count_set_bits(x: int) -> int:
    """Count the one bits of ``x``; negative values count as 32-bit two's complement."""
    if x < 0:
        x &= _INT_MASK
    count = 0
    while x:
        x -= lowbit(x)
        count += 1
    return count


def discretized_range_sums(
    additions: Iterable[tuple[int, int]], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Add ``c`` at coordinate ``x`` for each ``(x, c)``, then sum each ``[l, r]``."""
    additions = list(additions)
    queries = list(queries)
    coords = sorted({x for x, _ in additions} | {end for query in queries for end in query})
    totals = [0] * len(coords)
    for x, amount in additions:
        totals[bisect_left(coords, x)] += amount
    prefix = list(accumulate(totals, initial=0))
    return [
        prefix[bisect_left(coords, high) + 1] - prefix[bisect_left(coords, low)]
        for low, high in queries
    ]


def merge_intervals(segments: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Merge overlapping or touching closed intervals, returned in order."""
    merged: list[tuple[int, int]] = []
    for start, end in sorted(segments):
        if merged and start <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged