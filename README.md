# solong

A small top-down tile game. A level is a plain-text `.ber` map. The map is
checked first, and only a playable map is shown in a window.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window.

## Running

```
so_long path/to/level.ber
```

The command takes exactly one argument, and its name must end in `.ber`.
Anything else prints `Invalid extension | Check arguments` and exits with
status 1. A file that cannot be opened, or that is empty, prints
`Invalid file` and exits with status 1. Only the first 1024 bytes of the
file are read.

When the map passes every check, a window titled `so_long` opens with one
50x50 pixel image per tile. Closing the window ends the program, which then
prints `Content:` followed by the map text and exits with status 0. If the
display, the window or a tile image cannot be set up, the error goes to
standard error and the exit status is 1.

## Map format

Each line is one row of tiles; all rows must have the same width, and the
file must end with a newline.

| Character | Meaning       |
|-----------|---------------|
| `1`       | wall          |
| `0`       | floor         |
| `P`       | player start  |
| `C`       | collectible   |
| `E`       | exit          |

A map is accepted when:

1. it is rectangular and at least three columns wide,
2. it holds only the characters above, with exactly one `P`, exactly one
   `E` and at least one `C`,
3. its border is made of walls,
4. every collectible and the exit can be reached from the player, moving
   up, down, left and right through anything that is not a wall.

Example:

```
1111111
1P0C0E1
1111111
```

Each failed check prints its own message (`Map not rectangular`,
`Map: Check playable characters`, `Map: Not surrounded by walls`,
`Map not playable`) and the program exits with status 1.

## Tile images

Images are loaded with pygame from an `assets` directory, relative to the
current working directory, holding `Wall.xpm`, `Floor.xpm`, `Player.xpm`,
`Collectable.xpm` and `Exit.xpm`.

## What it does not do

The window only shows the map. The player cannot be moved, collectibles
cannot be picked up, there is no move counter and no win condition; the
window stays open until it is closed.

## Using the library

`solong.mapcheck` holds the checks. `validate_map` runs all of them and
returns the map width, or raises `MapError` whose message is one of the
texts above:

```python
from solong.mapcheck import MapError, validate_map

try:
    width = validate_map("1111111\n1P0C0E1\n1111111\n")
except MapError as err:
    print(err)
```

The single checks are there too: `rectangular_width`,
`check_playable_characters`, `check_surrounded_by_walls`, `find_player`
(the `(x, y)` of the player in a list of rows) and `flood_fill` (the set of
reachable `(x, y)` cells).

`solong.render` gives the `Tile` enum, `asset_for` (the image file name for
a tile), `tile_placements` (asset name and pixel position of every cell)
and the `Game` window class with `open`, `render` and `run`.

`solong.cli` holds the command: `check_extension`, `read_map` and `main`.

The `solong.libft` sub-package holds the small helpers the rest is built
on: `chars` (ASCII classification, `atoi`, `itoa`), `text` (searching,
comparison, `strlcpy`, `strlcat`), `transform` (`substr`, `strjoin`,
`strtrim`, `split`, `strmapi`, `striteri`), `memory` (byte-buffer fill,
copy, search and compare), `output` (`put_char`, `put_str`, `put_endl`,
`put_nbr`) and `linkedlist` (`Node` and `LinkedList`).

## Tests

```
pip install ".[test]"
pytest
```