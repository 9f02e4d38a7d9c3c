"""Binary min-heaps: partial heap sort and a heap addressable by insertion number."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from typing import Any


def smallest_k(values: Iterable[Any], k: int) -> list[Any]:
    """Return the ``k`` smallest values in ascending order."""
    heap = list(values)
    if not 0 <= k <= len(heap):
        raise ValueError(f"cannot take {k} values from {len(heap)}")
    heapq.heapify(heap)
    return [heapq.heappop(heap) for _ in range(k)]


class IndexedHeap:
    """Min-heap whose elements can be deleted or changed by insertion number."""

    def __init__(self) -> None:
        self._values: list[Any] = []
        self._keys: list[int] = []
        self._position: dict[int, int] = {}
        self._inserted = 0

    def __len__(self) -> int:
        return len(self._values)

    def _swap(self, i: int, j: int) -> None:
        values, keys = self._values, self._keys
        values[i], values[j] = values[j], values[i]
        keys[i], keys[j] = keys[j], keys[i]
        self._position[keys[i]] = i
        self._position[keys[j]] = j

    def _up(self, i: int) -> None:
        while i > 0:
            parent = (i - 1) // 2
            if not self._values[i] < self._values[parent]:
                break
            self._swap(i, parent)
            i = parent

    def _down(self, i: int) -> None:
        size = len(self._values)
        while True:
            smallest = i
            for child in (2 * i + 1, 2 * i + 2):
                if child < size and self._values[child] < self._values[smallest]:
                    smallest = child
            if smallest == i:
                return
            self._swap(i, smallest)
            i = smallest

    def _locate(self, k: int) -> int:
        try:
            return self._position[k]
        except KeyError:
            raise KeyError(f"no element in the heap was inserted as number {k}") from None

    def _remove_at(self, i: int) -> Any:
        self._swap(i, len(self._values) - 1)
        value = self._values.pop()
        del self._position[self._keys.pop()]
        if i < len(self._values):
            self._down(i)
            self._up(i)
        return value

    def insert(self, x: Any) -> int:
        """Insert ``x`` and return its insertion number, counting from 1."""
        self._inserted += 1
        self._values.append(x)
        self._keys.append(self._inserted)
        self._position[self._inserted] = len(self._values) - 1
        self._up(len(self._values) - 1)
        return self._inserted

    def peek_min(self) -> Any:
        """Return the smallest value."""
        if not self._values:
            raise IndexError("peek at empty heap")
        return self._values[0]

    def pop_min(self) -> Any:
        """Remove and return the smallest value."""
        if not self._values:
            raise IndexError("pop from empty heap")
        return self._remove_at(0)

    def delete(self, k: int) -> Any:
        """Remove and return the element inserted as number ``k``."""
        return self._remove_at(self._locate(k))

    def change(self, k: int, x: Any) -> None:
        """Replace the value of the element inserted as number ``k`` with ``x``."""
        i = self._locate(k)
        self._values[i] = x
        self._down(i)
        self._up(i)