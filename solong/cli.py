"""Command line entry point: check a map file and show it in a window."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from solong.libft.output import put_str
from solong.libft.transform import split
from solong.mapcheck import MapError, validate_map
from solong.render import Game

BUFFER_SIZE = 1024
MAP_EXTENSION = ".ber"

BAD_ARGUMENTS = "Invalid extension | Check arguments"
INVALID_FILE = "Invalid file"


def check_extension(filename: str) -> bool:
    """Return True when the file name ends in the map extension."""
    return filename.endswith(MAP_EXTENSION)


def read_map(filename: str) -> str:
    """Return up to BUFFER_SIZE characters of the map file.

    Raises OSError when the file cannot be read and ValueError when it is empty.
    """
    with open(filename, "rb") as handle:
        data = handle.read(BUFFER_SIZE)
    if not data:
        raise ValueError(f"{filename} is empty")
    return data.decode("latin-1")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Validate the map named on the command line and display it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1 or not check_extension(args[0]):
        put_str(BAD_ARGUMENTS)
        return 1
    try:
        content = read_map(args[0])
    except (OSError, ValueError):
        put_str(INVALID_FILE)
        return 1
    try:
        width = validate_map(content)
    except MapError as exc:
        put_str(str(exc))
        return 1
    game = Game(split(content, "\n"), width)
    try:
        game.run()
    except RuntimeError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    put_str(f"Content:\n{content}")
    return 0


if __name__ == "__main__":
    sys.exit(main())