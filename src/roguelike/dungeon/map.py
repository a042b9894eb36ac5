from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from ..exceptions import MapBoundsError
from .tiles import Tile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned room descriptor. ``x2``/``y2`` are derived from the size."""

    x1: int
    y1: int
    w: int
    h: int
    x2: int = field(init=False)
    y2: int = field(init=False)

    def __post_init__(self) -> None:
        if self.w <= 0 or self.h <= 0:
            raise ValueError(f"Rect size must be positive, got {self.w}x{self.h}")
        object.__setattr__(self, "x2", self.x1 + self.w)
        object.__setattr__(self, "y2", self.y1 + self.h)

    def interior(self) -> Tuple[range, range]:
        """Columns and rows strictly inside the rectangle's border."""
        return range(self.x1 + 1, self.x2), range(self.y1 + 1, self.y2)


class GameMap:
    """
    The dungeon tile grid. Cells start out as walls and are only ever turned
    into floor by the generator. Reads are bounds-checked and raise
    MapBoundsError rather than wrapping around.
    """

    def __init__(self, width: int, height: int, default: Tile = Tile.wall()) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Map size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._tiles: List[List[Tile]] = [
            [default for _ in range(width)] for _ in range(height)
        ]

    # ---- Safety / Bounds -------------------------------------------------
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_tile(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise MapBoundsError(
                f"Tile out of bounds: ({x},{y}) not in [0,{self.width})x[0,{self.height})"
            )
        return self._tiles[y][x]

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        if not self.in_bounds(x, y):
            raise MapBoundsError(
                f"Tile out of bounds: ({x},{y}) not in [0,{self.width})x[0,{self.height})"
            )
        self._tiles[y][x] = tile

    # ---- Query -----------------------------------------------------------
    def is_blocked(self, x: int, y: int) -> bool:
        """True for blocked tiles and for anything outside the grid."""
        if not self.in_bounds(x, y):
            return True
        return self._tiles[y][x].blocked

    def __getitem__(self, pos: Tuple[int, int]) -> Tile:
        x, y = pos
        return self.get_tile(x, y)

    # ---- Export / Compare -----------------------------------------------
    def to_str_lines(self) -> List[str]:
        return ["".join(tile.glyph for tile in row) for row in self._tiles]

    def snapshot(self) -> Tuple[Tuple[bool, ...], ...]:
        """Hashable copy of the blocked flags, row by row."""
        return tuple(tuple(tile.blocked for tile in row) for row in self._tiles)

    def __repr__(self) -> str:
        return f"GameMap({self.width}x{self.height})"
