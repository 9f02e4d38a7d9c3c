"""Minimum spanning trees and maximum bipartite matching."""

from __future__ import annotations

import math
from collections.abc import Iterable

from algotemplates.union_find import DisjointSet


def prim(n: int, edges: Iterable[tuple[int, int, int]]) -> int | None:
    """Return the weight of a minimum spanning tree of nodes ``1..n``, or None if disconnected."""
    weight = [[math.inf] * (n + 1) for _ in range(n + 1)]
    for a, b, w in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise IndexError(f"edge ({a}, {b}) names a node outside 1..{n}")
        weight[a][b] = weight[b][a] = min(weight[a][b], w)
    reach = [math.inf] * (n + 1)
    if n:
        reach[1] = 0
    in_tree = [False] * (n + 1)
    total = 0
    for _ in range(n):
        nearest = min(
            (v for v in range(1, n + 1) if not in_tree[v]), key=reach.__getitem__
        )
        if reach[nearest] == math.inf:
            return None
        in_tree[nearest] = True
        total += reach[nearest]
        row = weight[nearest]
        for v in range(1, n + 1):
            if not in_tree[v] and row[v] < reach[v]:
                reach[v] = row[v]
    return total


def kruskal(n: int, edges: Iterable[tuple[int, int, int]]) -> int | None:
    """Return the weight of a minimum spanning tree of nodes ``1..n``, or None if disconnected."""
    forest = DisjointSet(n)
    total = 0
    joined = 0
    for a, b, w in sorted(edges, key=lambda edge: edge[2]):
        if forest.union(a, b):
            total += w
            joined += 1
    return total if joined >= n - 1 else None


def max_bipartite_matching(n1: int, n2: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return the size of a maximum matching between left ``1..n1`` and right ``1..n2``."""
    adjacency: list[list[int]] = [[] for _ in range(n1 + 1)]
    for a, b in edges:
        if not (1 <= a <= n1 and 1 <= b <= n2):
            raise IndexError(f"edge ({a}, {b}) outside 1..{n1} x 1..{n2}")
        adjacency[a].append(b)
    match = [0] * (n2 + 1)

    def augment(left: int, seen: list[bool]) -> bool:
        for right in reversed(adjacency[left]):
            if seen[right]:
                continue
            seen[right] = True
            if not match[right] or augment(match[right], seen):
                match[right] = left
                return True
        return False

    return sum(augment(left, [False] * (n2 + 1)) for left in range(1, n1 + 1))