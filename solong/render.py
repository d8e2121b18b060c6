"""Drawing a validated map in a window, one image per tile."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

import pygame

TILE_SIZE = 50
WINDOW_TITLE = "so_long"


class Tile(str, Enum):
    """The kinds of cell a map can hold."""

    WALL = "1"
    FLOOR = "0"
    PLAYER = "P"
    COLLECTIBLE = "C"
    EXIT = "E"


_ASSETS = {
    Tile.WALL: "Wall.xpm",
    Tile.PLAYER: "Player.xpm",
    Tile.COLLECTIBLE: "Collectable.xpm",
    Tile.EXIT: "Exit.xpm",
    Tile.FLOOR: "Floor.xpm",
}


def asset_for(tile: Union[Tile, str]) -> str:
    """Return the image file name used to draw ``tile``.

    Raises ValueError for a character that is not a tile.
    """
    return _ASSETS[Tile(tile)]


def tile_placements(rows: Iterable[str]) -> Iterator[tuple[str, tuple[int, int]]]:
    """Yield ``(asset name, (left, top))`` for every drawable cell.

    Characters that are not tiles are skipped.
    """
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            try:
                name = asset_for(ch)
            except ValueError:
                continue
            yield name, (x * TILE_SIZE, y * TILE_SIZE)


class Game:
    """A window showing one map."""

    def __init__(
        self,
        rows: Iterable[str],
        width: int,
        asset_dir: Union[str, Path] = "assets",
    ) -> None:
        self.rows = list(rows)
        self.width = width
        self.height = len(self.rows)
        self.asset_dir = Path(asset_dir)
        self._screen: Optional[pygame.Surface] = None
        self._images: dict[str, pygame.Surface] = {}

    @property
    def window_size(self) -> tuple[int, int]:
        """Pixel size of the window."""
        return self.width * TILE_SIZE, self.height * TILE_SIZE

    def open(self) -> None:
        """Initialise the display and create the window."""
        try:
            pygame.init()
        except pygame.error as exc:
            raise RuntimeError("Error: MLX init failed") from exc
        try:
            self._screen = pygame.display.set_mode(self.window_size)
        except pygame.error as exc:
            raise RuntimeError("Error: Window creation failed") from exc
        pygame.display.set_caption(WINDOW_TITLE)

    def _image(self, name: str) -> pygame.Surface:
        image = self._images.get(name)
        if image is None:
            path = self.asset_dir / name
            try:
                image = pygame.image.load(str(path))
            except (pygame.error, OSError) as exc:
                raise RuntimeError(f"Error: Failed to load asset {path}") from exc
            self._images[name] = image
        return image

    def render(self) -> None:
        """Draw every tile of the map and show the result."""
        if self._screen is None:
            raise RuntimeError("Game window is not open")
        for name, position in tile_placements(self.rows):
            self._screen.blit(self._image(name), position)
        pygame.display.flip()

    def run(self) -> None:
        """Open the window, draw the map and wait until the window is closed."""
        try:
            self.open()
            self.render()
            while pygame.event.wait().type != pygame.QUIT:
                pass
        finally:
            self._screen = None
            self._images.clear()
            pygame.quit()