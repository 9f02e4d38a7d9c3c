"""Comparison sorts and binary search over sorted sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence
from typing import Any


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of ``items`` using Hoare-partition quicksort."""
    data = list(items)
    pending = [(0, len(data) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = data[(low + high) // 2]
        i, j = low - 1, high + 1
        while i < j:
            i += 1
            while data[i] < pivot:
                i += 1
            j -= 1
            while data[j] > pivot:
                j -= 1
            if i < j:
                data[i], data[j] = data[j], data[i]
        pending.append((low, j))
        pending.append((j + 1, high))
    return data


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of ``items`` using top-down merge sort."""
    data = list(items)
    if len(data) <= 1:
        return data
    split = (len(data) - 1) // 2 + 1
    return _merge(merge_sort(data[:split]), merge_sort(data[split:]))


def equal_range(sorted_items: Sequence[Any], x: Any) -> tuple[int, int]:
    """Return the first and last index of ``x``, or ``(-1, -1)`` if absent."""
    first = bisect_left(sorted_items, x)
    if first == len(sorted_items) or sorted_items[first] != x:
        return -1, -1
    return first, bisect_right(sorted_items, x) - 1