"""Sequence and summation problems."""

from __future__ import annotations

import string
from collections.abc import Iterable, Iterator


def sequence_ij() -> Iterator[str]:
    """Yield the lines of the I/J sequence, stepping I by 0.2 from 0 to 2."""
    for tenths in range(0, 21, 2):
        i = tenths / 10
        if tenths % 10 == 0:
            whole = tenths // 10
            for j in range(1, 4):
                yield f"I={whole} J={whole + j}"
        else:
            for j in range(1, 4):
                yield f"I={i:.1f} J={i + j:.1f}"


def count_up(n: int) -> list[int]:
    """Return the numbers from 1 up to n, ending with n itself."""
    return [*range(1, n), n]


def consecutive_sum(start: int, count: int) -> int:
    """Return the sum of count consecutive integers starting at start."""
    if count <= 0:
        raise ValueError("count must be positive")
    return sum(range(start, start + count))


def series_sum() -> float:
    """Return the sum of 1/1 + 3/2 + 5/4 + ... + 39/2**19."""
    return sum(numerator / 2.0**k for k, numerator in enumerate(range(1, 40, 2)))


def odd_sum(x: int, count: int) -> int:
    """Return the sum of count consecutive odd numbers starting at x or the next odd."""
    first = x + 1 if x % 2 == 0 else x
    return sum(first + 2 * k for k in range(count))


def even_sum(x: int) -> int:
    """Return the sum of five consecutive even numbers starting at x or the next even."""
    first = x + 1 if x % 2 != 0 else x
    return sum(first + 2 * k for k in range(5))


def alphabet_codes() -> Iterator[str]:
    """Yield 'code e letter' for each lower-case letter."""
    for letter in string.ascii_lowercase:
        yield f"{ord(letter)} e {letter}"


def _trunc_divmod(n: int, k: int) -> tuple[int, int]:
    quotient = abs(n) // abs(k)
    if (n < 0) != (k < 0):
        quotient = -quotient
    return quotient, n - quotient * k


def remaining_items(n: int, k: int) -> int:
    """Return n // k + n % k, with division truncating toward zero."""
    quotient, remainder = _trunc_divmod(n, k)
    return quotient + remainder


def signed_total(pairs: Iterable[tuple[int, str]]) -> int:
    """Add or subtract each amount by its '+' or '-' sign; other signs are ignored."""
    total = 0
    for amount, sign in pairs:
        if sign == "+":
            total += amount
        elif sign == "-":
            total -= amount
    return total