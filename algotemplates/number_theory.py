"""Primes, divisors, Euler's totient, modular powers and linear congruences."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable

_MOD = 10**9 + 7


def is_prime(n: int) -> bool:
    """Return whether ``n`` is prime, by trial division."""
    if n < 2:
        return False
    i = 2
    while i <= n // i:
        if n % i == 0:
            return False
        i += 1
    return True


def prime_factors(n: int) -> list[tuple[int, int]]:
    """Return ``(prime, exponent)`` pairs of ``n`` in ascending order of prime."""
    if n < 1:
        raise ValueError(f"cannot factor {n}")
    factors = []
    i = 2
    while i <= n // i:
        if n % i == 0:
            exponent = 0
            while n % i == 0:
                n //= i
                exponent += 1
            factors.append((i, exponent))
        i += 1
    if n > 1:
        factors.append((n, 1))
    return factors


def primes_up_to(n: int) -> list[int]:
    """Return every prime not greater than ``n``, using a linear sieve."""
    composite = bytearray(max(n, 0) + 1)
    primes: list[int] = []
    for i in range(2, n + 1):
        if not composite[i]:
            primes.append(i)
        for p in primes:
            if p > n // i:
                break
            composite[p * i] = 1
            if i % p == 0:
                break
    return primes


def divisors(n: int) -> list[int]:
    """Return the positive divisors of ``n`` in ascending order."""
    if n < 1:
        raise ValueError(f"no divisors listed for {n}")
    small, large = [], []
    for i in range(1, math.isqrt(n) + 1):
        if n % i == 0:
            small.append(i)
            if n // i != i:
                large.append(n // i)
    return small + large[::-1]


def _exponents(values: Iterable[int]) -> Counter[int]:
    exponents: Counter[int] = Counter()
    for value in values:
        for prime, exponent in prime_factors(value):
            exponents[prime] += exponent
    return exponents


def divisor_count(values: Iterable[int]) -> int:
    """Return the number of divisors of the product of ``values``, modulo 1e9+7."""
    result = 1
    for exponent in _exponents(values).values():
        result = result * (exponent + 1) % _MOD
    return result


def divisor_sum(values: Iterable[int]) -> int:
    """Return the sum of divisors of the product of ``values``, modulo 1e9+7."""
    result = 1
    for prime, exponent in _exponents(values).items():
        term = 1
        for _ in range(exponent):
            term = (term * prime + 1) % _MOD
        result = result * term % _MOD
    return result


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of non-negative ``a`` and ``b``."""
    while b:
        a, b = b, a % b
    return a


def euler_phi(n: int) -> int:
    """Return how many of ``1..n`` are coprime to ``n``."""
    if n < 1:
        raise ValueError(f"totient undefined for {n}")
    result = n
    for prime, _ in prime_factors(n):
        result = result // prime * (prime - 1)
    return result


def phi_sum(n: int) -> int:
    """Return the sum of Euler's totient over ``1..n``, using a linear sieve."""
    if n < 0:
        raise ValueError("n must be non-negative")
    phi = [0] * (n + 1)
    if n >= 1:
        phi[1] = 1
    composite = bytearray(n + 1)
    primes: list[int] = []
    for i in range(2, n + 1):
        if not composite[i]:
            primes.append(i)
            phi[i] = i - 1
        for p in primes:
            if p > n // i:
                break
            composite[p * i] = 1
            if i % p == 0:
                phi[p * i] = phi[i] * p
                break
            phi[p * i] = phi[i] * (p - 1)
    return sum(phi)


def quick_pow(a: int, k: int, p: int) -> int:
    """Return ``a ** k % p`` by repeated squaring."""
    if k < 0:
        raise ValueError("exponent must be non-negative")
    if p < 1:
        raise ValueError("modulus must be positive")
    return pow(a, k, p)


def mod_inverse(a: int, p: int) -> int:
    """Return the inverse of ``a`` modulo the prime ``p`` by Fermat's little theorem."""
    if p < 2:
        raise ValueError("modulus must be a prime")
    if a % p == 0:
        raise ValueError(f"{a} has no inverse modulo {p}")
    return quick_pow(a, p - 2, p)


def exgcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(d, x, y)`` with ``d = gcd(a, b)`` and ``a*x + b*y == d``."""
    if b == 0:
        return a, 1, 0
    d, x1, y1 = exgcd(b, a % b)
    return d, y1, x1 - a // b * y1


def solve_linear_congruence(a: int, b: int, m: int) -> int:
    """Return some ``x`` in ``0..m-1`` with ``a*x ≡ b (mod m)``."""
    if m < 1:
        raise ValueError("modulus must be positive")
    d, x, _ = exgcd(a, m)
    if b % d:
        raise ValueError(f"{a}*x = {b} (mod {m}) has no solution")
    return x * (b // d) % m


def chinese_remainder(pairs: Iterable[tuple[int, int]]) -> int:
    """Return ``x`` with ``x ≡ r (mod m)`` for every ``(m, r)`` pair.

    Moduli need not be coprime. Raises ValueError if the congruences conflict.
    """
    pairs = list(pairs)
    if not pairs:
        raise ValueError("at least one congruence is required")
    if any(modulus < 1 for modulus, _ in pairs):
        raise ValueError("moduli must be positive")
    (modulus, remainder), *rest = pairs
    for other_modulus, other_remainder in rest:
        d, k, _ = exgcd(modulus, other_modulus)
        difference = other_remainder - remainder
        if difference % d:
            raise ValueError("congruences have no common solution")
        step = other_modulus // d
        k = k * (difference // d) % step
        remainder += k * modulus
        modulus = modulus // d * other_modulus
    return remainder