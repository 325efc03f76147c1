"""Integer helpers used by the rational number type."""

from __future__ import annotations

__all__ = ["gcd", "lcm", "count_digits"]


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two non-negative integers.

    ``gcd(0, b)`` is ``b`` and ``gcd(a, 0)`` is ``a``.
    """
    a, b = abs(a), abs(b)
    while a and b:
        a, b = (a, b % a) if a < b else (b, a % b)
    return a or b


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of two positive integers."""
    return a // gcd(a, b) * b


def count_digits(n: int) -> int:
    """Return the number of characters needed to print ``n`` in base ten.

    A leading minus sign counts as one character.
    """
    count = 1
    if n < 0:
        n = -n
        count += 1
    while n >= 10:
        n //= 10
        count += 1
    return count