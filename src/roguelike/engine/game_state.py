from __future__ import annotations

import logging
from typing import Callable, Iterable, List

from ..config import Settings
from ..dungeon.generator import generate
from ..dungeon.map import GameMap
from ..entities import GameObject, Role
from ..exceptions import MapBoundsError
from .events import GameEvent

logger = logging.getLogger(__name__)

Listener = Callable[[GameEvent, "Game"], None]


class Game:
    """Holds the map and the ordered list of objects for one run.

    The player is the single object tagged ``Role.PLAYER``; its position in
    ``objects`` does not matter. Initial placement is not checked unless
    ``strict`` is set, in which case every object must start on an open cell.
    """

    def __init__(self, game_map: GameMap, objects: Iterable[GameObject], strict: bool = False) -> None:
        self.map = game_map
        self.objects: List[GameObject] = list(objects)
        self._listeners: List[Listener] = []
        players = [o for o in self.objects if o.role is Role.PLAYER]
        if len(players) != 1:
            raise ValueError(f"Game needs exactly one player object, got {len(players)}")
        self._player = players[0]
        if strict:
            self.check_placement()

    @classmethod
    def from_settings(cls, settings: Settings, strict: bool = False) -> "Game":
        game_map = generate(settings.map)
        objects = [
            GameObject(x=s.x, y=s.y, glyph=s.glyph, color=s.color, name=s.name, role=s.role)
            for s in settings.spawns
        ]
        game = cls(game_map, objects, strict=strict)
        logger.info("Game ready: %r with %d objects, player at %s", game_map, len(objects), game.player.pos)
        return game

    @property
    def player(self) -> GameObject:
        return self._player

    def check_placement(self) -> None:
        """Raise MapBoundsError if any object starts outside the map or on a wall."""
        for obj in self.objects:
            if not self.map.in_bounds(obj.x, obj.y):
                raise MapBoundsError(f"{obj!r} starts outside the {self.map.width}x{self.map.height} map")
            if self.map.is_blocked(obj.x, obj.y):
                raise MapBoundsError(f"{obj!r} starts on a blocked tile")

    # ---- Events ----------------------------------------------------------
    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, event: GameEvent) -> None:
        for l in list(self._listeners):
            try:
                l(event, self)
            except Exception:
                logger.exception("Listener errored on %s", event)

    # ---- Actions ---------------------------------------------------------
    def move_player(self, dx: int, dy: int) -> bool:
        """Step the player by (dx, dy). Returns True if the player moved."""
        moved = self._player.move_by(dx, dy, self.map)
        if moved:
            logger.debug("Player moved to %s", self._player.pos)
            self._emit(GameEvent.PLAYER_MOVED)
        else:
            self._emit(GameEvent.MOVE_BLOCKED)
        return moved
