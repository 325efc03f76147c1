"""An immutable, always-normalised rational number."""

from __future__ import annotations

import operator

from .util import count_digits, gcd, lcm

__all__ = ["Rashunal"]


class Rashunal:
    """A rational number kept in lowest terms with a positive denominator.

    Zero is always stored as ``0 / 1``. A zero denominator raises
    :class:`ZeroDivisionError`.
    """

    __slots__ = ("numerator", "denominator")

    numerator: int
    denominator: int

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        numerator = operator.index(numerator)
        denominator = operator.index(denominator)
        if denominator == 0:
            raise ZeroDivisionError("denominator must not be zero")
        if numerator == 0:
            denominator = 1
        abs_d = abs(denominator)
        g = gcd(abs(numerator), abs_d)
        sign = 1 if denominator > 0 else -1
        object.__setattr__(self, "numerator", sign * numerator // g)
        object.__setattr__(self, "denominator", abs_d // g)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rashunal):
            return NotImplemented
        return (self.numerator, self.denominator) == (other.numerator, other.denominator)

    def __hash__(self) -> int:
        return hash((self.numerator, self.denominator))

    def __repr__(self) -> str:
        return f"Rashunal({self.numerator}, {self.denominator})"

    def __add__(self, other: Rashunal) -> Rashunal:
        if not isinstance(other, Rashunal):
            return NotImplemented
        d = lcm(self.denominator, other.denominator)
        return Rashunal(
            self.numerator * d // self.denominator + other.numerator * d // other.denominator,
            d,
        )

    def __sub__(self, other: Rashunal) -> Rashunal:
        if not isinstance(other, Rashunal):
            return NotImplemented
        d = lcm(self.denominator, other.denominator)
        return Rashunal(
            self.numerator * d // self.denominator - other.numerator * d // other.denominator,
            d,
        )

    def __mul__(self, other: Rashunal) -> Rashunal:
        if not isinstance(other, Rashunal):
            return NotImplemented
        return Rashunal(self.numerator * other.numerator, self.denominator * other.denominator)

    def __truediv__(self, other: Rashunal) -> Rashunal:
        if not isinstance(other, Rashunal):
            return NotImplemented
        return Rashunal(self.numerator * other.denominator, self.denominator * other.numerator)

    def inverse(self) -> Rashunal:
        """Return the reciprocal; raises ZeroDivisionError for zero."""
        return Rashunal(self.denominator, self.numerator)

    def mds(self, other: Rashunal, pivot: Rashunal, base: Rashunal) -> Rashunal:
        """Return ``(self * base - other * pivot) / base``.

        This is the multiply-subtract-divide step of fraction-free row
        reduction. Raises ZeroDivisionError if ``base`` is zero.
        """
        n1 = self.numerator * base.numerator
        d1 = self.denominator * base.denominator
        n2 = other.numerator * pivot.numerator
        d2 = other.denominator * pivot.denominator
        n3 = n1 * d2 - n2 * d1
        d3 = d1 * d2
        return Rashunal(n3 * base.denominator, d3 * base.numerator)

    def printed_length(self) -> int:
        """Return the length of ``str(self)``."""
        if self.numerator == 0:
            return 1
        if self.denominator == 1:
            return count_digits(self.numerator)
        return count_digits(self.numerator) + count_digits(self.denominator) + 3

    def __str__(self) -> str:
        if self.numerator == 0:
            return "0"
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator} / {self.denominator}"

    def padded(self, length: int) -> str:
        """Return the text padded to ``abs(length)`` characters.

        A positive length right-aligns, a negative one left-aligns.
        Raises ValueError if the text does not fit exactly.
        """
        width = abs(length)
        text = str(self)
        result = text.rjust(width) if length > 0 else text.ljust(width)
        if len(result) != width:
            raise ValueError(f"{text!r} does not fit in {width} characters")
        return result