"""String searching, comparison and bounded copying.

The searching functions work on ``str`` and return indices instead of
pointers. The bounded copy functions work on NUL-terminated byte strings
held in a ``bytearray``, where the buffer size is the point of the call.
"""

from __future__ import annotations

from typing import Optional, Union

CharLike = Union[str, int]
Bytes = Union[bytes, bytearray, memoryview]


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string; integers are taken modulo 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return chr(c & 0xFF)


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, got {type(value).__name__}")
    return value


def _cstr_len(buf: Bytes) -> int:
    """Length of the NUL-terminated string at the start of ``buf``."""
    index = bytes(buf).find(0)
    return len(buf) if index < 0 else index


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(_require_str(s, "s"))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or ``None``.

    Searching for the NUL character finds the terminator, at ``len(s)``.
    """
    _require_str(s, "s")
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or ``None``.

    Searching for the NUL character finds the terminator, at ``len(s)``.
    """
    _require_str(s, "s")
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Return the index of ``little`` within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0; ``None`` means no match.
    """
    _require_str(big, "big")
    _require_str(little, "little")
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"length must be int, got {type(length).__name__}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strcmp(s1: str, s2: str) -> int:
    """Return 1 when the strings are identical and -1 otherwise."""
    _require_str(s1, "s1")
    _require_str(s2, "s2")
    return 1 if s1 == s2 else -1


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(_require_str(s, "s"))


def _check_size(dst: bytearray, size: int) -> None:
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"size must be int, got {type(size).__name__}")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dst):
        raise ValueError(f"size {size} exceeds buffer length {len(dst)}")


def strlcpy(dst: Optional[bytearray], src: Bytes, size: int) -> int:
    """Copy the string in ``src`` into ``dst``, writing at most ``size`` bytes.

    At most ``size - 1`` bytes are copied and the result is NUL-terminated
    whenever ``size`` is positive. Returns the length of ``src``, so a
    return value of ``size`` or more means the copy was truncated.
    """
    srclen = _cstr_len(src)
    if dst is None:
        return srclen
    _check_size(dst, size)
    if size > 0:
        count = min(size - 1, srclen)
        dst[:count] = bytes(src[:count])
        dst[count] = 0
    return srclen


def strlcat(dst: Optional[bytearray], src: Optional[Bytes], size: int) -> int:
    """Append the string in ``src`` to the string in ``dst`` within ``size`` bytes.

    Returns the length the joined string would have had, which is the
    source length plus the smaller of ``size`` and the destination length.
    """
    if src is None:
        if dst is None:
            return 0
        raise TypeError("src must be a byte string")
    srclen = _cstr_len(src)
    if dst is None or size == 0:
        return srclen
    _check_size(dst, size)
    destlen = _cstr_len(dst)
    if destlen >= size:
        return srclen + size
    count = min(srclen, size - 1 - destlen)
    dst[destlen:destlen + count] = bytes(src[:count])
    dst[destlen + count] = 0
    return srclen + destlen