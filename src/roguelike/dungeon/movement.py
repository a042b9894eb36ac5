from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from .map import GameMap

if TYPE_CHECKING:
    from ..entities import GameObject

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveResult:
    new_pos: Tuple[int, int]
    moved: bool


def try_move(game_map: GameMap, x: int, y: int, dx: int, dy: int) -> MoveResult:
    """
    Work out where a step by (dx, dy) from (x, y) lands. Never reads outside
    the grid; out-of-bounds targets count as blocked. Does not mutate anything.
    """
    tx, ty = x + dx, y + dy
    if game_map.is_blocked(tx, ty):
        return MoveResult(new_pos=(x, y), moved=False)
    return MoveResult(new_pos=(tx, ty), moved=True)


def move_by(obj: "GameObject", dx: int, dy: int, game_map: GameMap) -> bool:
    """Move ``obj`` by (dx, dy) unless the target cell is blocked.

    A blocked move is a silent no-op. Returns True if the object moved.
    """
    result = try_move(game_map, obj.x, obj.y, dx, dy)
    if not result.moved:
        logger.debug("Blocked move of %s by (%d, %d) at (%d, %d)", obj.name, dx, dy, obj.x, obj.y)
        return False
    obj.x, obj.y = result.new_pos
    return True
