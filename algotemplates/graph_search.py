"""Depth- and breadth-first searches: permutations, queens, mazes, trees, DAGs."""

from __future__ import annotations

import itertools
from collections import deque
from collections.abc import Iterable, Sequence

_EIGHT_GOAL = "12345678x"
_STEPS = ((-1, 0), (0, -1), (1, 0), (0, 1))


def permutations(n: int) -> list[tuple[int, ...]]:
    """Return every ordering of ``1..n`` in lexicographic order."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return list(itertools.permutations(range(1, n + 1)))


def n_queens(n: int) -> list[list[str]]:
    """Return all placements of ``n`` non-attacking queens as rows of ``.`` and ``Q``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    boards: list[list[str]] = []
    columns: list[int] = []
    used_cols: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            boards.append(["." * c + "Q" + "." * (n - c - 1) for c in columns])
            return
        for col in range(n):
            if col in used_cols or row + col in diagonals or row - col in anti_diagonals:
                continue
            columns.append(col)
            used_cols.add(col)
            diagonals.add(row + col)
            anti_diagonals.add(row - col)
            place(row + 1)
            columns.pop()
            used_cols.discard(col)
            diagonals.discard(row + col)
            anti_diagonals.discard(row - col)

    place(0)
    return boards


def maze_shortest_path(grid: Sequence[Sequence[int]]) -> int:
    """Return the fewest moves from the top-left to the bottom-right cell, or -1.

    Cells holding 0 are open, any other value is a wall.
    """
    rows = len(grid)
    if not rows or not grid[0]:
        raise ValueError("maze must have at least one cell")
    cols = len(grid[0])
    distance = {(0, 0): 0}
    queue = deque([(0, 0)])
    while queue:
        x, y = queue.popleft()
        for dx, dy in _STEPS:
            nx, ny = x + dx, y + dy
            if (
                0 <= nx < rows
                and 0 <= ny < cols
                and grid[nx][ny] == 0
                and (nx, ny) not in distance
            ):
                distance[nx, ny] = distance[x, y] + 1
                queue.append((nx, ny))
    return distance.get((rows - 1, cols - 1), -1)


def eight_puzzle_steps(start: str | Iterable[str]) -> int:
    """Return the fewest slides from ``start`` to ``12345678x``, or -1 if unreachable."""
    state = "".join(start).replace(" ", "")
    if sorted(state) != sorted(_EIGHT_GOAL):
        raise ValueError(f"not an eight-puzzle state: {state!r}")
    distance = {state: 0}
    queue = deque([state])
    while queue:
        current = queue.popleft()
        steps = distance[current]
        if current == _EIGHT_GOAL:
            return steps
        blank = current.index("x")
        x, y = divmod(blank, 3)
        for dx, dy in _STEPS:
            a, b = x + dx, y + dy
            if 0 <= a < 3 and 0 <= b < 3:
                cells = list(current)
                target = a * 3 + b
                cells[blank], cells[target] = cells[target], cells[blank]
                moved = "".join(cells)
                if moved not in distance:
                    distance[moved] = steps + 1
                    queue.append(moved)
    return -1


def _undirected(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)
    return adjacency


def tree_centroid_balance(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return the smallest, over all nodes, of the largest component left by removing it."""
    if n < 1:
        raise ValueError("tree must have at least one node")
    adjacency = _undirected(n, edges)
    parent = {1: 0}
    order = []
    stack = [1]
    while stack:
        node = stack.pop()
        order.append(node)
        for nxt in adjacency[node]:
            if nxt not in parent:
                parent[nxt] = node
                stack.append(nxt)
    subtree = [1] * (n + 1)
    heaviest_child = [0] * (n + 1)
    for node in reversed(order):
        up = parent[node]
        if up:
            subtree[up] += subtree[node]
            heaviest_child[up] = max(heaviest_child[up], subtree[node])
    return min(max(heaviest_child[u], n - subtree[u]) for u in order)


def shortest_hops(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return the fewest directed edges from node 1 to node ``n``, or -1."""
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        adjacency[a].append(b)
    distance = {1: 0}
    queue = deque([1])
    while queue:
        node = queue.popleft()
        for nxt in adjacency[node]:
            if nxt not in distance:
                distance[nxt] = distance[node] + 1
                queue.append(nxt)
    return distance.get(n, -1)


def topological_order(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return a topological order of nodes ``1..n``; raise ValueError on a cycle.

    Sources are taken in ascending order and the out-edges of a node in the
    reverse of the order they were given.
    """
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    indegree = [0] * (n + 1)
    for a, b in edges:
        adjacency[a].append(b)
        indegree[b] += 1
    queue = deque(node for node in range(1, n + 1) if indegree[node] == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in reversed(adjacency[node]):
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                queue.append(nxt)
    if len(order) != n:
        raise ValueError("graph has a cycle")
    return order