"""Arbitrary-precision arithmetic on non-negative decimal digit strings."""

from __future__ import annotations

from itertools import zip_longest


def _digits(number: str) -> list[int]:
    """Return the digits of ``number`` least significant first."""
    if not number or not (number.isascii() and number.isdigit()):
        raise ValueError(f"not a non-negative decimal number: {number!r}")
    return [int(ch) for ch in reversed(number)]


def _strip(digits: list[int]) -> list[int]:
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    return digits


def _to_str(digits: list[int]) -> str:
    return "".join(str(d) for d in reversed(digits))


def add(a: str, b: str) -> str:
    """Return ``a + b``; the result is as long as the longer operand or one longer."""
    x, y = _digits(a), _digits(b)
    if len(x) < len(y):
        x, y = y, x
    result: list[int] = []
    carry = 0
    for dx, dy in zip_longest(x, y, fillvalue=0):
        carry += dx + dy
        result.append(carry % 10)
        carry //= 10
    if carry:
        result.append(carry)
    return _to_str(result)


def _sub(x: list[int], y: list[int]) -> list[int]:
    result: list[int] = []
    borrow = 0
    for dx, dy in zip_longest(x, y, fillvalue=0):
        t = dx - borrow - dy
        result.append(t % 10)
        borrow = 1 if t < 0 else 0
    return _strip(result)


def _not_less(a: str, b: str) -> bool:
    a, b = a.lstrip("0"), b.lstrip("0")
    if len(a) != len(b):
        return len(a) > len(b)
    return a >= b


def subtract(a: str, b: str) -> str:
    """Return ``a - b`` with a leading ``-`` when the result is negative."""
    x, y = _digits(a), _digits(b)
    if a == b:
        return "0"
    if _not_less(a, b):
        return _to_str(_sub(x, y))
    return "-" + _to_str(_sub(y, x))


def multiply(a: str, b: int) -> str:
    """Return ``a * b`` for a digit string ``a`` and a small non-negative int ``b``."""
    if b < 0:
        raise ValueError("multiplier must be non-negative")
    result: list[int] = []
    carry = 0
    for d in _digits(a):
        carry += d * b
        result.append(carry % 10)
        carry //= 10
    while carry:
        result.append(carry % 10)
        carry //= 10
    return _to_str(_strip(result))


def divide(a: str, b: int) -> tuple[str, int]:
    """Return the quotient string and integer remainder of ``a / b``."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    if b < 0:
        raise ValueError("divisor must be positive")
    _digits(a)
    remainder = 0
    quotient: list[str] = []
    for ch in a:
        remainder = remainder * 10 + int(ch)
        quotient.append(str(remainder // b))
        remainder %= b
    return "".join(quotient).lstrip("0") or "0", remainder