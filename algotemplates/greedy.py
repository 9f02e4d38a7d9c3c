"""Greedy algorithms on intervals, merges, queues and stacking."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable
from itertools import accumulate

Interval = tuple[int, int]


def _pick_by_right_end(intervals: Iterable[Interval]) -> int:
    chosen = 0
    end = -math.inf
    for low, high in sorted(intervals, key=lambda iv: iv[1]):
        if low <= end <= high:
            continue
        chosen += 1
        end = high
    return chosen


def min_points_cover(intervals: Iterable[Interval]) -> int:
    """Return the fewest points such that every closed interval holds at least one."""
    return _pick_by_right_end(intervals)


def max_disjoint_intervals(intervals: Iterable[Interval]) -> int:
    """Return the most closed intervals that can be chosen with no two sharing a point."""
    return _pick_by_right_end(intervals)


def min_groups(intervals: Iterable[Interval]) -> int:
    """Return the fewest groups such that intervals within a group do not intersect."""
    ends: list[int] = []
    for low, high in sorted(intervals):
        if not ends or ends[0] >= low:
            heapq.heappush(ends, high)
        else:
            heapq.heapreplace(ends, high)
    return len(ends)


def min_cover(start: int, end: int, intervals: Iterable[Interval]) -> int | None:
    """Return the fewest intervals covering ``[start, end]``, or None if impossible."""
    ranges = sorted(intervals, key=lambda iv: iv[0])
    count = 0
    i = 0
    while i < len(ranges):
        reach = -math.inf
        j = i
        while j < len(ranges) and ranges[j][0] <= start:
            reach = max(reach, ranges[j][1])
            j += 1
        if reach < start:
            return None
        count += 1
        if reach >= end:
            return count
        start = reach
        i = j
    return None


def huffman_merge_cost(weights: Iterable[int]) -> int:
    """Return the least total cost of merging all piles, two at a time."""
    heap = list(weights)
    heapq.heapify(heap)
    total = 0
    while len(heap) > 1:
        merged = heapq.heappop(heap) + heapq.heappop(heap)
        total += merged
        heapq.heappush(heap, merged)
    return total


def min_total_wait(times: Iterable[int]) -> int:
    """Return the least sum of waiting times when serving one person at a time."""
    waits = accumulate(sorted(times), initial=0)
    ordered = list(waits)
    return sum(ordered[:-1])


def min_distance_sum(positions: Iterable[int]) -> int:
    """Return the least sum of distances from one point to every position."""
    ordered = sorted(positions)
    if not ordered:
        return 0
    median = ordered[len(ordered) // 2]
    return sum(abs(p - median) for p in ordered)


def min_max_risk(cows: Iterable[tuple[int, int]]) -> int:
    """Return the least possible largest risk when stacking ``(weight, strength)`` cows.

    A cow's risk is the total weight above it minus its own strength.
    """
    ordered = sorted(((w + s, s) for w, s in cows))
    if not ordered:
        raise ValueError("at least one cow is required")
    worst = -math.inf
    above = 0
    for combined, strength in ordered:
        worst = max(worst, above - strength)
        above += combined - strength
    return int(worst)