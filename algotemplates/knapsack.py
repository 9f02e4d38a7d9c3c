"""Knapsack variants: 0/1, unbounded, bounded and grouped."""

from __future__ import annotations

from collections.abc import Iterable

Item = tuple[int, int]
CountedItem = tuple[int, int, int]


def _table(capacity: int) -> list[int]:
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    return [0] * (capacity + 1)


def _check_volume(volume: int) -> None:
    if volume < 0:
        raise ValueError(f"item volume must be non-negative: {volume}")


def _take_once(best: list[int], volume: int, value: int) -> None:
    """Update ``best`` in place as if one more item could be taken at most once."""
    for j in range(len(best) - 1, volume - 1, -1):
        candidate = best[j - volume] + value
        if candidate > best[j]:
            best[j] = candidate


def zero_one_knapsack(capacity: int, items: Iterable[Item]) -> int:
    """Return the best total value when each ``(volume, value)`` item is used at most once."""
    best = _table(capacity)
    for volume, value in items:
        _check_volume(volume)
        _take_once(best, volume, value)
    return best[capacity]


def unbounded_knapsack(capacity: int, items: Iterable[Item]) -> int:
    """Return the best total value when each ``(volume, value)`` item may be reused freely."""
    best = _table(capacity)
    for volume, value in items:
        _check_volume(volume)
        for j in range(volume, capacity + 1):
            candidate = best[j - volume] + value
            if candidate > best[j]:
                best[j] = candidate
    return best[capacity]


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"item count must be non-negative: {count}")


def bounded_knapsack(capacity: int, items: Iterable[CountedItem]) -> int:
    """Return the best value for ``(volume, value, count)`` items, one copy at a time."""
    best = _table(capacity)
    for volume, value, count in items:
        _check_volume(volume)
        _check_count(count)
        for _ in range(count):
            _take_once(best, volume, value)
    return best[capacity]


def _binary_pieces(volume: int, value: int, count: int) -> Iterable[Item]:
    size = 1
    while size <= count:
        yield volume * size, value * size
        count -= size
        size *= 2
    if count > 0:
        yield volume * count, value * count


def bounded_knapsack_binary(capacity: int, items: Iterable[CountedItem]) -> int:
    """Return the best value for ``(volume, value, count)`` items using binary splitting."""
    best = _table(capacity)
    for volume, value, count in items:
        _check_volume(volume)
        _check_count(count)
        for piece_volume, piece_value in _binary_pieces(volume, value, count):
            _take_once(best, piece_volume, piece_value)
    return best[capacity]


def grouped_knapsack(capacity: int, groups: Iterable[Iterable[Item]]) -> int:
    """Return the best value when at most one ``(volume, value)`` item is taken per group."""
    best = _table(capacity)
    for group in groups:
        group = list(group)
        for volume, _ in group:
            _check_volume(volume)
        for j in range(capacity, 0, -1):
            for volume, value in group:
                if volume <= j and best[j - volume] + value > best[j]:
                    best[j] = best[j - volume] + value
    return best[capacity]