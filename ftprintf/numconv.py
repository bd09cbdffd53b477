"""Conversions between integers and their decimal or hexadecimal text."""

from __future__ import annotations

import re

__all__ = ["to_hex", "to_hex_long", "uitoa", "itoa", "atoi", "INT_MIN", "INT_MAX"]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF
_WHITESPACE = "\t\n\v\f\r "
_DIGITS = re.compile(r"[0-9]*")


def _hex(value: int, capital: bool) -> str:
    return format(value, "X" if capital else "x")


def to_hex(value: int, capital: bool = False) -> str:
    """Return *value*, taken as a 32-bit unsigned integer, in hexadecimal."""
    return _hex(value & _UINT_MASK, capital)


def to_hex_long(value: int, capital: bool = False) -> str:
    """Return *value*, taken as a 64-bit unsigned integer, in hexadecimal."""
    return _hex(value & _ULONG_MASK, capital)


def uitoa(n: int) -> str:
    """Return *n*, taken as a 32-bit unsigned integer, in decimal."""
    return str(n & _UINT_MASK)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer.

    Raises OverflowError when *n* does not fit in 32 signed bits.
    """
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library's atoi does.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first character that is not an ASCII digit. Text with no
    digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = _DIGITS.match(rest).group()
    return sign * int(digits) if digits else 0