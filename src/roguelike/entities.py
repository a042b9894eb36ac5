from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .dungeon.map import GameMap
from .dungeon.movement import move_by

Color = Tuple[int, int, int]


class Role(Enum):
    PLAYER = "player"
    NPC = "npc"


@dataclass
class GameObject:
    """A drawable token on the map: the player or an NPC."""

    x: int
    y: int
    glyph: str
    color: Color
    name: str = "object"
    role: Role = Role.NPC

    def __post_init__(self) -> None:
        if len(self.glyph) != 1:
            raise ValueError(f"glyph must be a single character, got {self.glyph!r}")

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def is_player(self) -> bool:
        return self.role is Role.PLAYER

    def move_by(self, dx: int, dy: int, game_map: GameMap) -> bool:
        return move_by(self, dx, dy, game_map)

    def __repr__(self) -> str:
        return f"GameObject({self.name}@{self.x},{self.y} {self.glyph!r} {self.role.value})"
