"""Writing characters, strings and numbers to text streams and file descriptors.

The ``put_*`` functions write to a text stream, ``sys.stdout`` unless another
is given, and return the number of characters they wrote. The ``*_fd``
functions write UTF-8 bytes straight to an open file descriptor.
"""

from __future__ import annotations

import operator
import os
import sys
from typing import Optional, TextIO, Union

from ftprintf.numconv import itoa, to_hex, to_hex_long, uitoa
from ftprintf.strings import strlen

__all__ = [
    "put_char",
    "put_str",
    "put_ptr",
    "put_int",
    "put_uint",
    "put_hex",
    "putchar_fd",
    "putstr_fd",
    "putendl_fd",
    "putnbr_fd",
]

CharLike = Union[int, str]

_NULL_TEXT = "(null)"
_NULL_POINTER = "0x0"


def _char(c: CharLike) -> str:
    """Turn a one-character string or a character code into a character.

    Integer codes are reduced to a byte, as a conversion to char does.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def _write(text: str, stream: Optional[TextIO]) -> int:
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)


def _to_int32(n: int) -> int:
    """Reduce *n* to a 32-bit signed integer, as a conversion to int does."""
    return (operator.index(n) + 2**31) % 2**32 - 2**31


def put_char(c: CharLike, stream: Optional[TextIO] = None) -> int:
    """Write one character and return 1."""
    return _write(_char(c), stream)


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write *s* up to its first NUL; a missing string is written as ``(null)``."""
    if s is None:
        return _write(_NULL_TEXT, stream)
    return _write(s[: strlen(s)], stream)


def put_ptr(address: Optional[int], stream: Optional[TextIO] = None) -> int:
    """Write an address as ``0x`` followed by lower-case hexadecimal digits.

    A missing or zero address is written as ``0x0``.
    """
    if not address:
        return _write(_NULL_POINTER, stream)
    return _write("0x" + to_hex_long(operator.index(address), False), stream)


def put_int(n: int, stream: Optional[TextIO] = None) -> int:
    """Write *n*, taken as a 32-bit signed integer, in decimal."""
    return _write(itoa(_to_int32(n)), stream)


def put_uint(n: int, stream: Optional[TextIO] = None) -> int:
    """Write *n*, taken as a 32-bit unsigned integer, in decimal."""
    return _write(uitoa(operator.index(n)), stream)


def put_hex(n: int, capital: bool = False, stream: Optional[TextIO] = None) -> int:
    """Write *n*, taken as a 32-bit unsigned integer, in hexadecimal."""
    return _write(to_hex(operator.index(n), capital), stream)


def _write_fd(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: CharLike, fd: int) -> None:
    """Write one character to file descriptor *fd*.

    An integer code is written as a single byte.
    """
    if isinstance(c, str):
        _write_fd(fd, _char(c).encode("utf-8"))
    else:
        _write_fd(fd, bytes([operator.index(c) & 0xFF]))


def putstr_fd(s: str, fd: int) -> None:
    """Write *s*, up to its first NUL, to file descriptor *fd*."""
    _write_fd(fd, s[: strlen(s)].encode("utf-8"))


def putendl_fd(s: str, fd: int) -> None:
    """Write *s*, up to its first NUL, and a newline to file descriptor *fd*."""
    _write_fd(fd, (s[: strlen(s)] + "\n").encode("utf-8"))


def putnbr_fd(n: int, fd: int) -> None:
    """Write a 32-bit signed integer in decimal to file descriptor *fd*.

    Raises OverflowError when *n* does not fit in 32 signed bits.
    """
    _write_fd(fd, itoa(operator.index(n)).encode("ascii"))