"""Building new strings from existing ones: slicing, joining, trimming, splitting."""

from __future__ import annotations

from typing import Any, Callable, MutableSequence


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, got {type(value).__name__}")
    return value


def _require_count(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def substr(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` beginning at ``start``.

    A ``start`` past the end gives an empty string.
    """
    _require_str(s, "s")
    _require_count(start, "start")
    _require_count(length, "length")
    begin = min(start, len(s))
    return s[begin:begin + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def strtrim(s1: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``s1``."""
    _require_str(s1, "s1")
    _require_str(charset, "charset")
    if not charset:
        return s1
    return s1.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the single character ``sep``, dropping empty pieces."""
    _require_str(s, "s")
    _require_str(sep, "sep")
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in s.split(sep) if piece]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string of ``func(index, char)`` for every character of ``s``."""
    _require_str(s, "s")
    if not callable(func):
        raise TypeError("func must be callable")
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Call ``func(index, char)`` on every element of ``chars`` in place.

    A result other than ``None`` replaces the element at that index.
    """
    if not callable(func):
        raise TypeError("func must be callable")
    for index, ch in enumerate(list(chars)):
        result = func(index, ch)
        if result is not None:
            chars[index] = result