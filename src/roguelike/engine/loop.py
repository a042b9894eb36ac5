from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Optional

from ..config import Settings
from ..input.actions import InputAction, KeyPress
from ..input.mapping import InputMapper
from ..rendering.console import Console
from ..rendering.renderer import render_all
from ..rendering.terminal import Terminal
from .game_state import Game

logger = logging.getLogger(__name__)


class LoopState(Enum):
    RUNNING = auto()
    TERMINATED = auto()


class GameLoop:
    """Turn-based render/input loop.

    Each turn clears the offscreen console, renders the game into it, presents
    the root console and then blocks for one key press. Nothing changes
    between key presses. Escape or closing the window ends the loop.
    """

    def __init__(
        self,
        game: Game,
        terminal: Terminal,
        settings: Settings,
        mapper: Optional[InputMapper] = None,
    ) -> None:
        self.game = game
        self.terminal = terminal
        self.settings = settings
        if mapper is None:
            mapper = InputMapper.default()
            mapper.apply_bindings(settings.keys)
        self.mapper = mapper
        self.con = Console(settings.map.width, settings.map.height)
        self.root = Console(settings.display.screen_width, settings.display.screen_height)
        self._state = LoopState.RUNNING
        self._turns = 0

    @property
    def state(self) -> LoopState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state is LoopState.RUNNING

    @property
    def turns(self) -> int:
        return self._turns

    def stop(self) -> None:
        if self._state is LoopState.TERMINATED:
            return
        self._state = LoopState.TERMINATED
        logger.info("Game loop terminated after %d turns", self._turns)

    def render(self) -> None:
        self.con.clear()
        render_all(self.con, self.root, self.game, self.settings.colors)
        self.terminal.present(self.root)

    def handle_key(self, press: KeyPress) -> Optional[InputAction]:
        """Apply one key press. Unbound or modified keys do nothing."""
        if not self.running:
            return None
        action = self.mapper.translate(press)
        if action is None:
            logger.debug("Ignored key %r", press)
            return None
        if action is InputAction.EXIT:
            self.stop()
            return action
        delta = action.delta
        if delta is not None:
            self.game.move_player(*delta)
        return action

    def tick(self) -> bool:
        """Run one turn. Returns False once the loop has terminated."""
        if not self.running:
            return False
        if self.terminal.window_closed():
            logger.info("Window closed")
            self.stop()
            return False
        self.render()
        press = self.terminal.wait_for_keypress()
        if press is None or self.terminal.window_closed():
            self.stop()
            return False
        self._turns += 1
        self.handle_key(press)
        return self.running

    def run(self) -> int:
        """Loop until terminated. Returns the number of key presses handled."""
        logger.info("Game loop started, player at %s", self.game.player.pos)
        while self.tick():
            pass
        return self._turns
