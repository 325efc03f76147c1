# rashunal

Exact rational numbers that are always kept in lowest terms, with the sign
carried by the numerator, plus a few integer helpers and a small demo
command.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The `Rashunal` type

```python
from rashunal.rational import Rashunal

half = Rashunal(1, 2)
third = Rashunal(1, 3)

print(half + third)           # 5 / 6
print(half - third)           # 1 / 6
print(half * third)           # 1 / 6
print(half / third)           # 3 / 2
print(half.inverse())         # 2

print(Rashunal(24, 36))       # 2 / 3
print(Rashunal(1, -2))        # -1 / 2
print(Rashunal(0, 5))         # 0
print(Rashunal(7))            # 7  (the denominator defaults to 1)
```

- `Rashunal(numerator, denominator=1)` takes integers (anything usable as an
  index). The value is reduced to lowest terms, the denominator is made
  positive, and zero is always stored as `0 / 1`.
- `numerator` and `denominator` are read-only attributes; a `Rashunal` cannot
  be changed after it is made.
- Two values are equal when their reduced numerator and denominator match,
  and equal values hash alike, so they work as dictionary keys and set
  members.
- `+`, `-`, `*` and `/` work between two `Rashunal` values; mixing in a plain
  `int` or `float` raises `TypeError`.
- A zero denominator, dividing by zero, or calling `inverse()` on zero raises
  `ZeroDivisionError`.

### Elimination step

`a.mds(b, pivot, base)` computes `(a * base - b * pivot) / base`, the
multiply-subtract-divide step used in fraction-free row reduction. It raises
`ZeroDivisionError` when `base` is zero.

```python
from rashunal.rational import Rashunal

pivot, base = Rashunal(3), Rashunal(2)
print(Rashunal(6).mds(Rashunal(1), pivot, base))   # 9 / 2
print(Rashunal(5).mds(Rashunal(4), pivot, base))   # -1
```

### Text output

`str()` gives `"0"`, an integer such as `"10"`, or a fraction written as
`"1 / 10"`. `printed_length()` is the length of that text. `padded(length)`
right-aligns the text in `length` characters, or left-aligns it in
`-length` characters when `length` is negative; it raises `ValueError` if the
text is longer than the width asked for.

```python
Rashunal(10).padded(6)       # '    10'
Rashunal(10).padded(-6)      # '10    '
Rashunal(1, 10).padded(6)    # '1 / 10'
Rashunal(1, 10).printed_length()   # 6
```

## Integer helpers

```python
from rashunal.util import gcd, lcm, count_digits

gcd(24, 36)          # 12
lcm(24, 36)          # 72
count_digits(32)     # 2
count_digits(-529)   # 4  (the minus sign counts)
```

## Demo command

```
rash
```

prints a short demonstration: the greatest common divisor of 3240 and 2760,
the sum `1/2 + 1/3` in plain, right-padded and left-padded form, zero in the
same three forms, and the message `Oops! you tried to divide by zero` for a
zero denominator and for a division by zero. It takes no options other than
`--help`, and returns exit status 0.

## What it does not do

There is no ordering (`<`, `>`), no conversion to or from `float` or
`decimal`, and no parsing of text into a `Rashunal`; the demo command does
not read any input.