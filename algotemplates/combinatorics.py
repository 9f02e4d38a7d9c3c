"""Binomial coefficients, Catalan numbers and inclusion-exclusion counting."""

from __future__ import annotations

import math
from collections.abc import Sequence
from itertools import combinations

from algotemplates.number_theory import primes_up_to, quick_pow

_MOD = 10**9 + 7
_factorials = [1]
_inverse_factorials = [1]


def _ensure_factorials(n: int) -> None:
    while len(_factorials) <= n:
        i = len(_factorials)
        _factorials.append(_factorials[-1] * i % _MOD)
        _inverse_factorials.append(_inverse_factorials[-1] * quick_pow(i, _MOD - 2, _MOD) % _MOD)


def _check(a: int, b: int) -> None:
    if a < 0 or b < 0:
        raise ValueError("binomial arguments must be non-negative")


def binomial_table(limit: int) -> list[list[int]]:
    """Return rows ``C(i, 0..i)`` modulo 1e9+7 for ``i`` in ``0..limit``."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    table = [[1]]
    for _ in range(limit):
        prev = table[-1]
        table.append([(x + y) % _MOD for x, y in zip([0] + prev, prev + [0])])
    return table


def binomial_mod(a: int, b: int) -> int:
    """Return ``C(a, b)`` modulo 1e9+7 from precomputed factorials."""
    _check(a, b)
    if b > a:
        return 0
    _ensure_factorials(a)
    return _factorials[a] * _inverse_factorials[b] % _MOD * _inverse_factorials[a - b] % _MOD


def _small_binomial(a: int, b: int, p: int) -> int:
    if b > a:
        return 0
    result = 1
    for i, j in zip(range(1, b + 1), range(a, a - b, -1)):
        result = result * j % p * quick_pow(i, p - 2, p) % p
    return result


def lucas(a: int, b: int, p: int) -> int:
    """Return ``C(a, b)`` modulo the prime ``p`` by Lucas' theorem."""
    _check(a, b)
    if p < 2:
        raise ValueError("modulus must be a prime")
    result = 1
    while a >= p or b >= p:
        result = result * _small_binomial(a % p, b % p, p) % p
        a //= p
        b //= p
    return result * _small_binomial(a, b, p) % p


def _legendre(n: int, p: int) -> int:
    count = 0
    while n:
        n //= p
        count += n
    return count


def exact_binomial(a: int, b: int) -> int:
    """Return ``C(a, b)`` exactly, built from its prime factorisation."""
    _check(a, b)
    if b > a:
        return 0
    return math.prod(
        p ** (_legendre(a, p) - _legendre(a - b, p) - _legendre(b, p)) for p in primes_up_to(a)
    )


def catalan_mod(n: int) -> int:
    """Return the ``n``-th Catalan number modulo 1e9+7."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return binomial_mod(2 * n, n) * quick_pow(n + 1, _MOD - 2, _MOD) % _MOD


def count_divisible(n: int, primes: Sequence[int]) -> int:
    """Count the integers in ``1..n`` divisible by at least one of ``primes``."""
    total = 0
    for size in range(1, len(primes) + 1):
        for subset in combinations(primes, size):
            product = math.prod(subset)
            if product > n:
                continue
            total += n // product if size % 2 else -(n // product)
    return total