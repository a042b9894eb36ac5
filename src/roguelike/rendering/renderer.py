from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .console import Console, blit

if TYPE_CHECKING:
    from ..config import ColorConfig
    from ..engine.game_state import Game

logger = logging.getLogger(__name__)


def draw_objects(con: Console, game: "Game") -> None:
    # Sequence order; a later object on the same cell overwrites the earlier one.
    for obj in game.objects:
        con.put_char(obj.x, obj.y, obj.glyph, obj.color)


def draw_map(con: Console, game: "Game", colors: "ColorConfig") -> None:
    """Paint cell backgrounds from the map. Glyphs already drawn are kept."""
    game_map = game.map
    for y in range(game_map.height):
        for x in range(game_map.width):
            if game_map.get_tile(x, y).block_sight:
                con.set_char_background(x, y, colors.dark_wall)
            else:
                con.set_char_background(x, y, colors.dark_ground)


def render_all(con: Console, root: Console, game: "Game", colors: "ColorConfig") -> None:
    """Compose the frame in ``con`` and copy it onto ``root`` at 1:1."""
    draw_objects(con, game)
    draw_map(con, game, colors)
    blit(con, (0, 0), (game.map.width, game.map.height), root, (0, 0), 1.0, 1.0)
