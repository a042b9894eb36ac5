from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Tile:
    """A single map cell.

    - blocked: objects cannot enter the cell
    - block_sight: the cell is rendered with the wall colour
    """

    blocked: bool
    block_sight: bool

    @classmethod
    def empty(cls) -> "Tile":
        return EMPTY

    @classmethod
    def wall(cls) -> "Tile":
        return WALL

    @property
    def glyph(self) -> str:
        """Single-character form used by ASCII dumps and logs."""
        return "#" if self.blocked else "."


EMPTY = Tile(blocked=False, block_sight=False)
WALL = Tile(blocked=True, block_sight=True)
