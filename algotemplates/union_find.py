"""Disjoint-set forests, with and without weighted edges to the root."""

from __future__ import annotations

from collections.abc import Iterable


class DisjointSet:
    """Union-find over the elements ``1..n`` with path compression and set sizes."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("element count must be non-negative")
        self._n = n
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)

    def __len__(self) -> int:
        return self._n

    def _check(self, x: int) -> None:
        if not 1 <= x <= self._n:
            raise IndexError(f"element {x} outside 1..{self._n}")

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; return whether they were separate."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        self._size[root_b] += self._size[root_a]
        self._parent[root_a] = root_b
        return True

    def connected(self, a: int, b: int) -> bool:
        """Return whether ``a`` and ``b`` are in the same set."""
        return self.find(a) == self.find(b)

    def size(self, x: int) -> int:
        """Return the number of elements in the set holding ``x``."""
        return self._size[self.find(x)]


def count_false_statements(n: int, statements: Iterable[tuple[int, int, int]]) -> int:
    """Count the false statements about ``n`` animals in a three-species food chain.

    Each statement is ``(1, x, y)`` ("x and y are the same kind") or
    ``(2, x, y)`` ("x eats y"). A statement is false if it names an animal
    outside ``1..n`` or contradicts the true statements before it.
    """
    parent = list(range(n + 1))
    depth = [0] * (n + 1)

    def find(x: int) -> int:
        path = []
        while parent[x] != x:
            path.append(x)
            x = parent[x]
        root = x
        for node in reversed(path):
            up = parent[node]
            if up != root:
                depth[node] += depth[up]
                parent[node] = root
        return root

    false_count = 0
    for kind, x, y in statements:
        if kind not in (1, 2):
            raise ValueError(f"unknown statement kind: {kind}")
        if not (1 <= x <= n and 1 <= y <= n):
            false_count += 1
            continue
        offset = 0 if kind == 1 else 1
        root_x, root_y = find(x), find(y)
        if root_x == root_y:
            if (depth[x] - depth[y] - offset) % 3:
                false_count += 1
        else:
            parent[root_x] = root_y
            depth[root_x] = depth[y] - depth[x] + offset
    return false_count