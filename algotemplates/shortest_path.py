"""Single-source and all-pairs shortest paths on directed weighted graphs.

Nodes are numbered ``1..n``; edges are ``(a, b, w)`` triples from ``a`` to ``b``.
"""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable

Edge = tuple[int, int, int]


def _adjacency(n: int, edges: Iterable[Edge]) -> list[list[tuple[int, int]]]:
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for a, b, w in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise IndexError(f"edge ({a}, {b}) names a node outside 1..{n}")
        adjacency[a].append((b, w))
    return adjacency


def dijkstra_dense(n: int, edges: Iterable[Edge]) -> int:
    """Return the shortest distance from node 1 to node ``n`` in O(n^2), or -1."""
    adjacency = _adjacency(n, edges)
    dist = [math.inf] * (n + 1)
    dist[1] = 0
    done = [False] * (n + 1)
    for _ in range(n):
        nearest = min(
            (v for v in range(1, n + 1) if not done[v]), key=dist.__getitem__, default=None
        )
        if nearest is None or dist[nearest] == math.inf:
            break
        done[nearest] = True
        for b, w in adjacency[nearest]:
            dist[b] = min(dist[b], dist[nearest] + w)
    return -1 if dist[n] == math.inf else dist[n]


def dijkstra(n: int, edges: Iterable[Edge]) -> int:
    """Return the shortest distance from node 1 to node ``n`` using a heap, or -1."""
    adjacency = _adjacency(n, edges)
    dist = [math.inf] * (n + 1)
    dist[1] = 0
    done = [False] * (n + 1)
    heap = [(0, 1)]
    while heap:
        d, node = heapq.heappop(heap)
        if done[node]:
            continue
        done[node] = True
        for b, w in adjacency[node]:
            if dist[b] > d + w:
                dist[b] = d + w
                heapq.heappush(heap, (dist[b], b))
    return -1 if dist[n] == math.inf else dist[n]


def bellman_ford(n: int, edges: Iterable[Edge], k: int) -> int | None:
    """Return the shortest distance from 1 to ``n`` using at most ``k`` edges, or None."""
    edges = list(edges)
    _adjacency(n, edges)
    dist = [math.inf] * (n + 1)
    dist[1] = 0
    for _ in range(k):
        previous = dist.copy()
        for a, b, w in edges:
            if previous[a] + w < dist[b]:
                dist[b] = previous[a] + w
    return None if dist[n] == math.inf else dist[n]


def spfa(n: int, edges: Iterable[Edge]) -> int | None:
    """Return the shortest distance from node 1 to node ``n``, or None if unreachable.

    Raises ValueError if a negative cycle is reachable from node 1.
    """
    adjacency = _adjacency(n, edges)
    dist = [math.inf] * (n + 1)
    hops = [0] * (n + 1)
    dist[1] = 0
    queued = [False] * (n + 1)
    queued[1] = True
    queue = deque([1])
    while queue:
        node = queue.popleft()
        queued[node] = False
        for b, w in adjacency[node]:
            if dist[b] > dist[node] + w:
                dist[b] = dist[node] + w
                hops[b] = hops[node] + 1
                if hops[b] >= n:
                    raise ValueError("negative cycle reachable from node 1")
                if not queued[b]:
                    queued[b] = True
                    queue.append(b)
    return None if dist[n] == math.inf else dist[n]


def has_negative_cycle(n: int, edges: Iterable[Edge]) -> bool:
    """Return whether the graph contains any negative-weight cycle."""
    adjacency = _adjacency(n, edges)
    dist = [0] * (n + 1)
    hops = [0] * (n + 1)
    queued = [True] * (n + 1)
    queue = deque(range(1, n + 1))
    while queue:
        node = queue.popleft()
        queued[node] = False
        for b, w in adjacency[node]:
            if dist[b] > dist[node] + w:
                dist[b] = dist[node] + w
                hops[b] = hops[node] + 1
                if hops[b] >= n:
                    return True
                if not queued[b]:
                    queued[b] = True
                    queue.append(b)
    return False


def floyd_warshall(n: int, edges: Iterable[Edge]) -> dict[tuple[int, int], int | None]:
    """Return the shortest distance for every ordered pair, None where unreachable."""
    nodes = range(1, n + 1)
    dist = [[0 if i == j else math.inf for j in range(n + 1)] for i in range(n + 1)]
    for a, b, w in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise IndexError(f"edge ({a}, {b}) names a node outside 1..{n}")
        dist[a][b] = min(dist[a][b], w)
    for k in nodes:
        via = dist[k]
        for i in nodes:
            row = dist[i]
            to_k = row[k]
            if to_k == math.inf:
                continue
            for j in nodes:
                if to_k + via[j] < row[j]:
                    row[j] = to_k + via[j]
    return {
        (i, j): None if dist[i][j] == math.inf else dist[i][j] for i in nodes for j in nodes
    }