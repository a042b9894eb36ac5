"""
Dungeon systems: tiles, the map grid, the carve-op generator, and movement
checks against the grid.
"""
from .generator import DEFAULT_LAYOUT, CarveOp, HTunnel, Room, VTunnel, carve, generate, make_map
from .map import GameMap, Rect
from .movement import MoveResult, move_by, try_move
from .tiles import Tile

__all__ = [
    "CarveOp",
    "DEFAULT_LAYOUT",
    "GameMap",
    "HTunnel",
    "MoveResult",
    "Rect",
    "Room",
    "Tile",
    "VTunnel",
    "carve",
    "generate",
    "make_map",
    "move_by",
    "try_move",
]
