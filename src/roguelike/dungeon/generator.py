from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, Sequence, Tuple, Union

from ..exceptions import MapBoundsError
from .map import GameMap, Rect
from .tiles import Tile

if TYPE_CHECKING:
    from ..config import MapConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Room:
    """Carve the interior of ``rect``."""

    rect: Rect

    def cells(self) -> Iterator[Tuple[int, int]]:
        xs, ys = self.rect.interior()
        for x in xs:
            for y in ys:
                yield x, y


@dataclass(frozen=True)
class HTunnel:
    """Carve row ``y`` from ``x1`` to ``x2`` inclusive, in either order."""

    x1: int
    x2: int
    y: int

    def cells(self) -> Iterator[Tuple[int, int]]:
        for x in range(min(self.x1, self.x2), max(self.x1, self.x2) + 1):
            yield x, self.y


@dataclass(frozen=True)
class VTunnel:
    """Carve column ``x`` from ``y1`` to ``y2`` inclusive, in either order."""

    y1: int
    y2: int
    x: int

    def cells(self) -> Iterator[Tuple[int, int]]:
        for y in range(min(self.y1, self.y2), max(self.y1, self.y2) + 1):
            yield self.x, y


CarveOp = Union[Room, HTunnel, VTunnel]

# Two rooms side by side joined by one horizontal corridor.
DEFAULT_LAYOUT: Tuple[CarveOp, ...] = (
    Room(Rect(20, 15, 10, 15)),
    Room(Rect(50, 15, 10, 15)),
    HTunnel(25, 55, 23),
)


def validate_layout(game_map: GameMap, layout: Iterable[CarveOp]) -> None:
    """Raise MapBoundsError if any op would touch a cell outside ``game_map``."""
    for op in layout:
        for x, y in op.cells():
            if not game_map.in_bounds(x, y):
                raise MapBoundsError(
                    f"{op!r} reaches ({x},{y}) outside {game_map.width}x{game_map.height} map"
                )


def carve(game_map: GameMap, op: CarveOp) -> int:
    """Turn every cell covered by ``op`` into floor. Returns the cell count."""
    count = 0
    for x, y in op.cells():
        game_map.set_tile(x, y, Tile.empty())
        count += 1
    logger.debug("Carved %r (%d cells)", op, count)
    return count


def make_map(width: int, height: int, layout: Sequence[CarveOp] = DEFAULT_LAYOUT) -> GameMap:
    """Build a wall-filled map and apply ``layout`` in order.

    The whole layout is checked before the first cell is carved, so a bad op
    never leaves a half-built map behind.
    """
    game_map = GameMap(width, height, default=Tile.wall())
    validate_layout(game_map, layout)
    for op in layout:
        carve(game_map, op)
    logger.info("Generated %dx%d map from %d carve ops", width, height, len(layout))
    return game_map


def generate(config: "MapConfig") -> GameMap:
    return make_map(config.width, config.height, config.layout)
