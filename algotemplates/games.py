"""Impartial games decided by XOR of piles and Sprague-Grundy values."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from itertools import count, islice
from operator import xor


def _mex(values: set[int]) -> int:
    return next(i for i in count() if i not in values)


def _piles(piles: Iterable[int]) -> list[int]:
    piles = list(piles)
    if any(p < 0 for p in piles):
        raise ValueError("pile sizes must be non-negative")
    return piles


def nim_first_wins(piles: Iterable[int]) -> bool:
    """Return whether the first player wins ordinary Nim."""
    return reduce(xor, _piles(piles), 0) != 0


def staircase_nim_first_wins(piles: Iterable[int]) -> bool:
    """Return whether the first player wins staircase Nim (steps listed from the bottom)."""
    return reduce(xor, islice(_piles(piles), 0, None, 2), 0) != 0


def set_nim_first_wins(moves: Iterable[int], piles: Iterable[int]) -> bool:
    """Return whether the first player wins when each move removes an amount from ``moves``."""
    moves = list(moves)
    if any(m < 1 for m in moves):
        raise ValueError("moves must be positive")
    piles = _piles(piles)
    grundy: list[int] = []
    for x in range(max(piles, default=0) + 1):
        grundy.append(_mex({grundy[x - m] for m in moves if x >= m}))
    return reduce(xor, (grundy[p] for p in piles), 0) != 0


def split_nim_first_wins(piles: Iterable[int]) -> bool:
    """Return whether the first player wins when a pile is replaced by two smaller piles."""
    piles = _piles(piles)
    grundy: list[int] = []
    for x in range(max(piles, default=0) + 1):
        grundy.append(
            _mex({grundy[i] ^ grundy[j] for i in range(x) for j in range(i + 1)})
        )
    return reduce(xor, (grundy[p] for p in piles), 0) != 0