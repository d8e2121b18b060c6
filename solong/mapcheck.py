"""Validation of map text: shape, characters, walls and reachability."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Optional

from solong.libft.transform import split

WALL = "1"
EMPTY = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"

NOT_RECTANGULAR = "Map not rectangular"
BAD_CHARACTERS = "Map: Check playable characters"
NOT_WALLED = "Map: Not surrounded by walls"
NOT_PLAYABLE = "Map not playable"

_ALLOWED = frozenset((WALL, EMPTY, PLAYER, EXIT, COLLECTIBLE, "\n"))
_MIN_WIDTH = 3


class MapError(ValueError):
    """A map that cannot be played; the message says why."""


def rectangular_width(mapstring: str) -> int:
    """Return the width of the first row, or 0 if a newline-terminated row differs.

    Only rows that end in a newline are compared with the first one.
    """
    first, _, _ = mapstring.partition("\n")
    width = len(first)
    terminated_rows = mapstring.split("\n")[:-1]
    if any(len(row) != width for row in terminated_rows):
        return 0
    return width


def check_playable_characters(mapstring: str) -> None:
    """Require one player, one exit, at least one collectible and nothing else."""
    counts = Counter(mapstring)
    if (
        set(counts) - _ALLOWED
        or counts[PLAYER] != 1
        or counts[EXIT] != 1
        or counts[COLLECTIBLE] < 1
    ):
        raise MapError(BAD_CHARACTERS)


def check_surrounded_by_walls(mapstring: str, width: int) -> None:
    """Require walls along the top, bottom, left and right edges.

    The bottom row is taken to be the ``width`` characters before the final
    newline, so the map text must end with a newline.
    """
    last_row = len(mapstring) - width - 1
    if width < 1 or last_row < 0:
        raise MapError(NOT_WALLED)
    top = mapstring[:width]
    bottom = mapstring[last_row:last_row + width]
    if len(top) < width or any(ch != WALL for ch in top + bottom):
        raise MapError(NOT_WALLED)
    stride = width + 1
    for index, ch in enumerate(mapstring):
        if index % stride in (0, width - 1) and ch != WALL:
            raise MapError(NOT_WALLED)


def find_player(rows: Iterable[str]) -> Optional[tuple[int, int]]:
    """Return the ``(x, y)`` of the first player tile, or ``None``."""
    for y, row in enumerate(rows):
        x = row.find(PLAYER)
        if x >= 0:
            return x, y
    return None


def flood_fill(mapstring: str) -> set[tuple[int, int]]:
    """Return every ``(x, y)`` the player can reach.

    Raises MapError when a collectible or the exit cannot be reached.
    """
    rows = split(mapstring, "\n")
    if not rows:
        raise MapError(NOT_PLAYABLE)
    start = find_player(rows) or (0, 0)
    reachable: set[tuple[int, int]] = set()
    pending = [start]
    while pending:
        x, y = pending.pop()
        if not (0 <= y < len(rows) and 0 <= x < len(rows[y])):
            continue
        if rows[y][x] == WALL or (x, y) in reachable:
            continue
        reachable.add((x, y))
        pending.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch in (COLLECTIBLE, EXIT) and (x, y) not in reachable:
                raise MapError(NOT_PLAYABLE)
    return reachable


def validate_map(mapstring: str) -> int:
    """Run every check on the map text and return its width."""
    width = rectangular_width(mapstring)
    if width < _MIN_WIDTH:
        raise MapError(NOT_RECTANGULAR)
    check_playable_characters(mapstring)
    check_surrounded_by_walls(mapstring, width)
    flood_fill(mapstring)
    return width