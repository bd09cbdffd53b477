"""Byte-buffer operations on bytes-like objects.

Writing functions need a writable buffer such as a bytearray. Requests that
reach past the end of a buffer raise IndexError; negative lengths or offsets
raise ValueError.
"""

from __future__ import annotations

from typing import Optional

__all__ = ["bzero", "calloc", "memchr", "memcmp", "memcpy", "memmove", "memset"]


def _check_span(buf, n: int, offset: int = 0) -> None:
    if n < 0 or offset < 0:
        raise ValueError("length and offset must not be negative")
    if offset + n > len(buf):
        raise IndexError(f"span of {n} bytes at {offset} exceeds buffer of {len(buf)}")


def bzero(buf: bytearray, n: int) -> None:
    """Set the first *n* bytes of *buf* to zero."""
    _check_span(buf, n)
    buf[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of *count* items of *size* bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(buf, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c & 0xFF`` among the first *n*, or None."""
    _check_span(buf, n)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Compare the first *n* bytes; return the difference at the first mismatch, else 0."""
    _check_span(a, n)
    _check_span(b, n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dst: Optional[bytearray], src, n: int) -> Optional[bytearray]:
    """Copy the first *n* bytes of *src* to the start of *dst* and return *dst*."""
    if dst is None and src is None:
        return None
    _check_span(dst, n)
    _check_span(src, n)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(
    dst: Optional[bytearray],
    src,
    n: int,
    dst_offset: int = 0,
    src_offset: int = 0,
) -> Optional[bytearray]:
    """Copy *n* bytes from ``src[src_offset:]`` to ``dst[dst_offset:]``.

    The regions may overlap, including when *dst* and *src* are the same
    buffer. Returns *dst*.
    """
    if dst is None and src is None:
        return None
    _check_span(dst, n, dst_offset)
    _check_span(src, n, src_offset)
    chunk = bytes(src[src_offset:src_offset + n])
    dst[dst_offset:dst_offset + n] = chunk
    return dst


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first *n* bytes of *buf* with ``c & 0xFF`` and return *buf*."""
    _check_span(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf