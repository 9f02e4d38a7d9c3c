"""Dynamic programming over sequences, intervals, digits, bitmasks and trees."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections.abc import Iterable, Sequence
from itertools import accumulate

_MOD = 10**9 + 7
_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def triangle_max_path(rows: Iterable[Sequence[int]]) -> int:
    """Return the largest sum on a top-to-bottom path through a number triangle."""
    rows = [list(row) for row in rows]
    if not rows:
        raise ValueError("triangle must have at least one row")
    for i, row in enumerate(rows):
        if len(row) != i + 1:
            raise ValueError(f"row {i} must hold {i + 1} values")
    best = rows[-1]
    for row in reversed(rows[:-1]):
        best = [v + max(best[j], best[j + 1]) for j, v in enumerate(row)]
    return best[0]


def lis_length(values: Iterable[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in values:
        pos = bisect_left(tails, value)
        if pos == len(tails):
            tails.append(value)
        else:
            tails[pos] = value
    return len(tails)


def lcs_length(a: Sequence[object], b: Sequence[object]) -> int:
    """Return the length of the longest common subsequence of ``a`` and ``b``."""
    previous = [0] * (len(b) + 1)
    for x in a:
        current = [0]
        for j, y in enumerate(b, 1):
            if x == y:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def edit_distance(a: Sequence[object], b: Sequence[object]) -> int:
    """Return the fewest insertions, deletions and replacements turning ``a`` into ``b``."""
    previous = list(range(len(b) + 1))
    for i, x in enumerate(a, 1):
        current = [i]
        for j, y in enumerate(b, 1):
            current.append(
                min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + (x != y))
            )
        previous = current
    return previous[-1]


def count_within_distance(words: Iterable[str], query: str, limit: int) -> int:
    """Count the words whose edit distance to ``query`` is at most ``limit``."""
    return sum(edit_distance(word, query) <= limit for word in words)


def merge_stones_cost(weights: Sequence[int]) -> int:
    """Return the least total cost of merging adjacent piles into one pile."""
    n = len(weights)
    if n < 2:
        return 0
    prefix = list(accumulate(weights, initial=0))
    cost = [[0] * n for _ in range(n)]
    for length in range(1, n):
        for i in range(n - length):
            j = i + length
            cost[i][j] = min(cost[i][k] + cost[k + 1][j] for k in range(i, j)) + (
                prefix[j + 1] - prefix[i]
            )
    return cost[0][n - 1]


def partition_count(n: int) -> int:
    """Return the number of partitions of ``n`` into positive parts, modulo 1e9+7."""
    if n < 0:
        raise ValueError("n must be non-negative")
    ways = [1] + [0] * n
    for part in range(1, n + 1):
        for total in range(part, n + 1):
            ways[total] = (ways[total] + ways[total - part]) % _MOD
    return ways[n]


def _digit_occurrences(n: int, digit: int) -> int:
    """Count occurrences of ``digit`` in the decimal forms of ``1..n``."""
    total = 0
    p = 1
    while p <= n:
        left, right, here = n // p // 10, n % p, n // p % 10
        if digit:
            total += left * p
        elif left:
            total += (left - 1) * p
        if digit or left:
            if here > digit:
                total += p
            elif here == digit:
                total += right + 1
        p *= 10
    return total


def digit_counts(a: int, b: int) -> list[int]:
    """Return how often each digit 0-9 is written among the integers between ``a`` and ``b``."""
    if a < 1 or b < 1:
        raise ValueError("bounds must be positive")
    low, high = sorted((a, b))
    return [_digit_occurrences(high, d) - _digit_occurrences(low - 1, d) for d in range(10)]


def _even_gaps(mask: int, height: int) -> bool:
    run = 0
    for bit in range(height):
        if mask >> bit & 1:
            if run % 2:
                return False
            run = 0
        else:
            run += 1
    return run % 2 == 0


def mondrian_tilings(n: int, m: int) -> int:
    """Return the number of ways to tile an ``n`` x ``m`` board with 1x2 dominoes."""
    if n < 0 or m < 0:
        raise ValueError("board sides must be non-negative")
    states = 1 << n
    valid = [_even_gaps(mask, n) for mask in range(states)]
    compatible = [
        [k for k in range(states) if not j & k and valid[j | k]] for j in range(states)
    ]
    ways = [1] + [0] * (states - 1)
    for _ in range(m):
        ways = [sum(ways[k] for k in sources) for sources in compatible]
    return ways[0]


def shortest_hamilton_path(weights: Sequence[Sequence[int]]) -> int:
    """Return the shortest path from node 0 to node n-1 visiting every node once."""
    n = len(weights)
    if n == 0:
        raise ValueError("graph must have at least one node")
    if any(len(row) != n for row in weights):
        raise ValueError("weights must form a square matrix")
    full = 1 << n
    best = [[math.inf] * n for _ in range(full)]
    best[1][0] = 0
    for mask in range(1, full, 2):
        row = best[mask]
        for j in range(n):
            if not mask >> j & 1:
                continue
            previous = best[mask ^ (1 << j)]
            for k in range(n):
                candidate = previous[k] + weights[k][j]
                if candidate < row[j]:
                    row[j] = candidate
    return best[full - 1][n - 1]


def max_party_happiness(
    happiness: Sequence[int], relations: Iterable[tuple[int, int]]
) -> int:
    """Return the best total happiness when no one attends together with their direct boss.

    Employees are numbered from 1; each relation ``(employee, boss)`` names a boss.
    """
    n = len(happiness)
    if n == 0:
        raise ValueError("at least one employee is required")
    children: list[list[int]] = [[] for _ in range(n + 1)]
    has_boss = [False] * (n + 1)
    for employee, boss in relations:
        if not (1 <= employee <= n and 1 <= boss <= n):
            raise IndexError(f"relation ({employee}, {boss}) outside 1..{n}")
        has_boss[employee] = True
        children[boss].append(employee)
    root = next((i for i in range(1, n + 1) if not has_boss[i]), None)
    if root is None:
        raise ValueError("no employee is without a boss")
    order = []
    stack = [root]
    while stack:
        node = stack.pop()
        order.append(node)
        stack.extend(children[node])
    skip = [0] * (n + 1)
    take = [0] * (n + 1)
    for node in reversed(order):
        take[node] = happiness[node - 1]
        for child in children[node]:
            skip[node] += max(skip[child], take[child])
            take[node] += skip[child]
    return max(skip[root], take[root])


def longest_ski_run(heights: Sequence[Sequence[int]]) -> int:
    """Return the most cells on a path that moves to strictly lower neighbours."""
    rows = len(heights)
    if not rows:
        return 0
    cols = len(heights[0])
    if any(len(row) != cols for row in heights):
        raise ValueError("grid rows must all have the same length")
    length = [[1] * cols for _ in range(rows)]
    cells = sorted(((heights[x][y], x, y) for x in range(rows) for y in range(cols)))
    best = 0
    for height, x, y in cells:
        for dx, dy in _STEPS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < rows and 0 <= ny < cols and heights[nx][ny] < height:
                length[x][y] = max(length[x][y], length[nx][ny] + 1)
        best = max(best, length[x][y])
    return best