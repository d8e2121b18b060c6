"""Byte-buffer operations: filling, copying, searching and comparing."""

from __future__ import annotations

import sys
from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]
MutableBuffer = Union[bytearray, memoryview]

# Largest value of an unsigned machine word, the limit for an allocation size.
_SIZE_MAX = sys.maxsize * 2 + 1


def _check_count(n: int, *buffers: Buffer) -> None:
    """Reject a byte count that is negative or runs past any of ``buffers``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int byte count, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: MutableBuffer, value: int, n: int) -> MutableBuffer:
    """Set the first ``n`` bytes of ``buf`` to ``value`` (taken modulo 256)."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: MutableBuffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memcpy(
    dest: Optional[MutableBuffer], src: Optional[Buffer], n: int
) -> Optional[MutableBuffer]:
    """Copy ``n`` bytes from ``src`` into the start of ``dest`` and return ``dest``.

    When both buffers are ``None`` nothing is copied and ``None`` is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("both dest and src must be buffers")
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(
    dest: Optional[MutableBuffer], src: Optional[Buffer], n: int
) -> Optional[MutableBuffer]:
    """Copy ``n`` bytes like :func:`memcpy`, correct even when the buffers overlap.

    Overlapping regions are given as views of the same underlying buffer,
    for example ``memmove(memoryview(buf)[2:], buf, 8)``.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("both dest and src must be buffers")
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memchr(buf: Buffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` in the first ``n`` bytes.

    ``c`` is taken modulo 256; ``None`` is returned when there is no match.
    """
    _check_count(n, buf)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes as unsigned values: -1, 0 or 1."""
    _check_count(n, a, b)
    left, right = bytes(a[:n]), bytes(b[:n])
    return (left > right) - (left < right)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb`` items of ``size`` bytes each.

    Raises OverflowError when the total would not fit in a machine word.
    """
    for name, value in (("nmemb", nmemb), ("size", size)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an int, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")
    if nmemb != 0 and size > _SIZE_MAX // nmemb:
        raise OverflowError(f"allocation of {nmemb} x {size} bytes overflows")
    return bytearray(nmemb * size)