"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions.

Each conversion is a ``%`` and one character, with no flags, width or
precision. An unknown conversion character is dropped with its ``%``, and a
lone ``%`` at the end of the format prints nothing. A NUL character ends the
format.
"""

from __future__ import annotations

import io
import re
from functools import partial
from typing import Any, Callable, Iterator, Optional, TextIO

from ftprintf.output import (
    put_char,
    put_hex,
    put_int,
    put_ptr,
    put_str,
    put_uint,
    _write,
)
from ftprintf.strings import strlen

__all__ = ["render", "ft_printf"]

_SEGMENT = re.compile(r"%(.?)|[^%]+", re.DOTALL)

_CONVERSIONS: dict[str, Callable[..., int]] = {
    "c": put_char,
    "s": put_str,
    "p": put_ptr,
    "d": put_int,
    "i": put_int,
    "u": put_uint,
    "x": partial(put_hex, capital=False),
    "X": partial(put_hex, capital=True),
}


def _next_arg(args: Iterator[Any], conv: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{conv}") from None


def _emit(fmt: str, args: tuple, stream: Optional[TextIO]) -> int:
    pending = iter(args)
    count = 0
    for match in _SEGMENT.finditer(fmt[: strlen(fmt)]):
        conv = match.group(1)
        if conv is None:
            count += _write(match.group(), stream)
        elif conv == "%":
            count += put_char("%", stream=stream)
        elif conv in _CONVERSIONS:
            count += _CONVERSIONS[conv](_next_arg(pending, conv), stream=stream)
    return count


def render(fmt: str, *args: Any) -> str:
    """Return the text that formatting *args* with *fmt* produces."""
    buf = io.StringIO()
    _emit(fmt, args, buf)
    return buf.getvalue()


def ft_printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write *args* formatted with *fmt* and return the number of characters written.

    Output goes to *stream*, or to ``sys.stdout`` when none is given. Raises
    TypeError when the format asks for more arguments than were given.
    """
    return _emit(fmt, args, stream)