"""Gaussian elimination over the reals and over GF(2)."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum
from typing import TypeVar

_EPS = 1e-6
T = TypeVar("T")


class Solution(Enum):
    """How many solutions a linear system has."""

    UNIQUE = "unique"
    INFINITE = "infinite"
    NONE = "none"


def _augmented(rows: Sequence[Sequence[object]], convert: Callable[[object], T]) -> list[list[T]]:
    matrix = [[convert(v) for v in row] for row in rows]
    n = len(matrix)
    if any(len(row) != n + 1 for row in matrix):
        raise ValueError("augmented matrix must be n rows of n + 1 entries")
    return matrix


def solve_real_system(
    augmented: Sequence[Sequence[float]],
) -> tuple[Solution, list[float] | None]:
    """Solve the ``n x (n+1)`` augmented system; the values are given only when unique."""
    a = _augmented(augmented, float)
    n = len(a)
    r = 0
    for c in range(n):
        t = max(range(r, n), key=lambda i: abs(a[i][c]))
        if abs(a[t][c]) < _EPS:
            continue
        a[t], a[r] = a[r], a[t]
        pivot = a[r][c]
        a[r][c:] = [v / pivot for v in a[r][c:]]
        for i in range(r + 1, n):
            factor = a[i][c]
            if abs(factor) > _EPS:
                a[i][c:] = [x - y * factor for x, y in zip(a[i][c:], a[r][c:])]
        r += 1
    if r < n:
        if any(abs(a[i][n]) > _EPS for i in range(r, n)):
            return Solution.NONE, None
        return Solution.INFINITE, None
    for i in reversed(range(n)):
        for j in range(i + 1, n):
            a[i][n] -= a[j][n] * a[i][j]
    return Solution.UNIQUE, [row[n] for row in a]


def _bit(value: object) -> int:
    if value not in (0, 1):
        raise ValueError(f"not a bit: {value!r}")
    return int(value)  # type: ignore[call-overload]


def solve_xor_system(
    augmented: Sequence[Sequence[int]],
) -> tuple[Solution, list[int] | None]:
    """Solve an ``n x (n+1)`` system of XOR equations over bits."""
    a = _augmented(augmented, _bit)
    n = len(a)
    r = 0
    for c in range(n):
        t = next((i for i in range(r, n) if a[i][c]), None)
        if t is None:
            continue
        a[t], a[r] = a[r], a[t]
        for i in range(r + 1, n):
            if a[i][c]:
                a[i][c:] = [x ^ y for x, y in zip(a[i][c:], a[r][c:])]
        r += 1
    if r < n:
        if any(a[i][n] for i in range(r, n)):
            return Solution.NONE, None
        return Solution.INFINITE, None
    for i in reversed(range(n)):
        for j in range(i + 1, n):
            if a[i][j]:
                a[i][n] ^= a[j][n]
    return Solution.UNIQUE, [row[n] for row in a]