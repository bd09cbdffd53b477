"""String utilities that follow C string semantics.

Strings are Python ``str`` values. A NUL character (``"\\0"``) inside a string
ends it, as it does in C, for the functions that search it. Searches return an
index, or None where C would give a null pointer. The bounded copy functions
return a ``(text, length)`` pair in place of writing into a caller's buffer.
"""

from __future__ import annotations

import operator
from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, Tuple, Union

__all__ = [
    "strchr",
    "strrchr",
    "strdup",
    "strjoin",
    "strlcat",
    "strlcpy",
    "strlen",
    "strmapi",
    "striteri",
    "strncmp",
    "strnstr",
    "strtrim",
    "substr",
    "split",
]

CharLike = Union[int, str]
_NUL = "\0"


def _char(c: CharLike) -> str:
    """Turn a character code or one-character string into a character.

    Integer codes are reduced to a byte, as a conversion to unsigned char does.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def _cstr(s: str) -> str:
    """Return *s* up to its first NUL character."""
    return s.partition(_NUL)[0]


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first *c* in *s*, or None.

    Searching for NUL gives the index of the string's end.
    """
    text = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last *c* in *s*, or None.

    Searching for NUL gives the index of the string's end.
    """
    text = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of *s*, up to its first NUL."""
    return "".join(_cstr(s))


def strjoin(s1: str, s2: str) -> str:
    """Return *s1* followed by *s2*."""
    return _cstr(s1) + _cstr(s2)


def strlcat(dst: str, src: str, dstsize: int) -> Tuple[str, int]:
    """Append *src* to *dst* within a buffer of *dstsize* characters.

    Returns the resulting text and the length the full concatenation would
    have needed: the smaller of ``len(dst)`` and *dstsize*, plus ``len(src)``.
    Nothing is appended when *dst* already fills the buffer.
    """
    _check_size(dstsize, "dstsize")
    dst = _cstr(dst)
    src = _cstr(src)
    dstlen = len(dst)
    if dstlen >= dstsize:
        return dst, dstsize + len(src)
    room = dstsize - dstlen - 1
    return dst + src[:room], dstlen + len(src)


def strlcpy(dst: str, src: str, dstsize: int) -> Tuple[str, int]:
    """Copy *src* into a buffer of *dstsize* characters.

    Returns the resulting text and ``len(src)``. With a size of zero the
    buffer is left as *dst*.
    """
    _check_size(dstsize, "dstsize")
    src = _cstr(src)
    if dstsize == 0:
        return dst, len(src)
    return src[: dstsize - 1], len(src)


def strlen(s: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_cstr(s))


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of ``f(index, char)`` for each character."""
    return "".join(f(i, ch) for i, ch in enumerate(_cstr(s)))


def striteri(s: MutableSequence, f: Callable[[int, object], object]) -> None:
    """Call ``f(index, item)`` for each item of *s* up to a NUL, in place.

    When *f* returns a value other than None it replaces the item.
    """
    for i, item in enumerate(s):
        if item == _NUL or item == 0:
            break
        result = f(i, item)
        if result is not None:
            s[i] = result


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters; return -1, 0 or 1.

    The end of a string compares as NUL, below every other character.
    """
    _check_size(n, "n")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a != b:
            return 1 if ord(a) > ord(b) else -1
        if a == _NUL:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index of *needle* within the first *length* characters, or None.

    An empty needle is found at index 0.
    """
    _check_size(length, "length")
    needle = _cstr(needle)
    if not needle:
        return 0
    index = _cstr(haystack)[:length].find(needle)
    return None if index < 0 else index


def strtrim(s: str, charset: str) -> str:
    """Return *s* without the characters of *charset* at either end."""
    return _cstr(s).strip(_cstr(charset))


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most *length* characters of *s* from *start*.

    A start past the end gives an empty string; a missing *s* gives None.
    """
    if s is None:
        return None
    _check_size(start, "start")
    _check_size(length, "length")
    text = _cstr(s)
    if start >= len(text):
        return ""
    return text[start:start + length]


def split(s: str, sep: CharLike) -> list[str]:
    """Split *s* on *sep*, dropping empty words."""
    text = _cstr(s)
    ch = _char(sep)
    if ch == _NUL:
        return [text] if text else []
    return [word for word in text.split(ch) if word]