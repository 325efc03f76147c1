"""Command that demonstrates the rational number type."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from .rational import Rashunal
from .util import gcd

__all__ = ["main"]

_DIVIDE_BY_ZERO = "Oops! you tried to divide by zero"


def _show(compute: Callable[[], Rashunal]) -> None:
    try:
        value = compute()
    except ZeroDivisionError:
        print(_DIVIDE_BY_ZERO)
    else:
        print(value)


def main(argv: Sequence[str] | None = None) -> int:
    """Print a short demonstration of rational arithmetic."""
    parser = argparse.ArgumentParser(
        prog="rashunal", description="Demonstrate rational number arithmetic."
    )
    parser.parse_args(argv)

    i1, i2 = 3240, 2760
    print(f"The gcd of {i1} and {i2} is {gcd(i1, i2)}")

    half = Rashunal(1, 2)
    third = Rashunal(1, 3)
    total = half + third
    print("The sum is:")
    print(total)
    print(total.padded(10))
    print(total.padded(-10))
    print()

    zero = Rashunal(0, 2)
    print("Zero:")
    print(zero)
    print(zero.padded(10))
    print(zero.padded(-10))
    print()

    print("Undefined:")
    _show(lambda: Rashunal(1, 0))
    print()

    print("Divide by zero:")
    _show(lambda: half / zero)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())