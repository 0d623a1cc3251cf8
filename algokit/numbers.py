"""Small numeric helpers: coordinates, number bases, digits and characters."""

from __future__ import annotations

from enum import Enum
from itertools import zip_longest
from typing import NamedTuple

__all__ = [
    "Quadrant",
    "DayCount",
    "quadrant",
    "binary_to_decimal",
    "decimal_to_binary",
    "convert_days",
    "factorial",
    "is_armstrong",
    "is_palindrome_number",
    "add_binary",
    "is_vowel",
]

_VOWELS = frozenset("aeiouAEIOU")


class Quadrant(Enum):
    """Where a point of the plane lies."""

    FIRST = "1st Quadrant"
    SECOND = "2nd Quadrant"
    THIRD = "3rd Quadrant"
    FOURTH = "4th Quadrant"
    # Points on either axis are reported here too.
    ORIGIN = "origin"


class DayCount(NamedTuple):
    """A number of days split into years, months and days."""

    years: int
    months: int
    days: int


def quadrant(x: int, y: int) -> Quadrant:
    """Return the quadrant of the point (x, y)."""
    if x > 0 and y > 0:
        return Quadrant.FIRST
    if x < 0 and y < 0:
        return Quadrant.THIRD
    if x > 0 and y < 0:
        return Quadrant.FOURTH
    if x < 0 and y > 0:
        return Quadrant.SECOND
    return Quadrant.ORIGIN


def _digits(n: int, base: int):
    """Yield the digits of a non-negative ``n`` in ``base``, least significant first."""
    while n:
        n, digit = divmod(n, base)
        yield digit


def binary_to_decimal(n: int) -> int:
    """Read the decimal digits of ``n`` as binary place values.

    Each decimal digit is weighted by the matching power of two, so digits
    other than 0 and 1 are taken at face value. The sign is kept.
    """
    sign = -1 if n < 0 else 1
    total = sum(digit << power for power, digit in enumerate(_digits(abs(n), 10)))
    return sign * total


def decimal_to_binary(n: int) -> str:
    """Return the binary digits of ``n``; empty for values that are not positive."""
    if n <= 0:
        return ""
    return "".join(str(bit) for bit in reversed(list(_digits(n, 2))))


def convert_days(days: int) -> DayCount:
    """Split ``days`` into 365-day years, 12-day months and remaining days.

    Negative counts are split toward zero, so every part carries the sign.
    """
    sign = -1 if days < 0 else 1
    years, rest = divmod(abs(days), 365)
    months, rest = divmod(rest, 12)
    return DayCount(sign * years, sign * months, sign * rest)


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative integer."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def is_armstrong(n: int) -> bool:
    """Tell whether ``n`` equals the sum of the cubes of its digits."""
    sign = -1 if n < 0 else 1
    return sign * sum(d ** 3 for d in _digits(abs(n), 10)) == n


def is_palindrome_number(x: int) -> bool:
    """Tell whether ``x`` reads the same backwards; negative numbers never do."""
    if x < 0:
        return False
    reversed_value = 0
    for digit in _digits(x, 10):
        reversed_value = reversed_value * 10 + digit
    return reversed_value == x


def add_binary(a: str, b: str) -> str:
    """Add two binary numbers given as strings and return the sum as a string."""
    out: list[str] = []
    carry = 0
    for da, db in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry += (ord(da) - ord("0")) + (ord(db) - ord("0"))
        out.append(str(carry % 2))
        carry //= 2
    while carry > 0:
        out.append(str(carry % 2))
        carry //= 2
    return "".join(reversed(out))


def is_vowel(c: str) -> bool:
    """Tell whether the single character ``c`` is an English vowel."""
    if len(c) != 1:
        raise ValueError("expected exactly one character")
    return c in _VOWELS