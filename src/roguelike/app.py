from __future__ import annotations

import logging
from typing import Iterable, List, Union

from .config import Settings
from .engine.game_state import Game
from .engine.loop import GameLoop
from .exceptions import RoguelikeError
from .input.actions import KeyPress
from .rendering.terminal import HeadlessTerminal, Terminal

logger = logging.getLogger(__name__)


def build_game(settings: Settings) -> Game:
    # Placement is only enforced for user-supplied layouts.
    return Game.from_settings(settings, strict=settings.source is not None)


def play(settings: Settings, terminal: Terminal) -> GameLoop:
    """Build the game and run the loop on ``terminal`` until it terminates."""
    game = build_game(settings)
    loop = GameLoop(game, terminal, settings)
    try:
        loop.run()
    finally:
        terminal.close()
    return loop


def run_gui(settings: Settings) -> int:
    """Run the game in an Arcade window.

    Returns:
        Process exit code (0 on success, 1 on a fatal error).
    """
    from .rendering.arcade_terminal import ArcadeTerminal

    try:
        terminal = ArcadeTerminal(settings.display)
        loop = play(settings, terminal)
    except RoguelikeError as exc:
        logger.error("Fatal: %s", exc)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    logger.info("Exited after %d turns", loop.turns)
    return 0


def ascii_view(tiles: List[str], frame: List[str]) -> List[str]:
    """Overlay the glyphs of the last presented frame on the ``#``/``.`` map dump."""
    lines = []
    for y, row in enumerate(tiles):
        glyphs = frame[y].ljust(len(row)) if y < len(frame) else " " * len(row)
        lines.append("".join(g if g != " " else t for t, g in zip(row, glyphs)))
    return lines


def run_headless(settings: Settings, keys: Iterable[Union[KeyPress, str]] = ()) -> int:
    """Run the loop against a scripted key sequence and print the last frame."""
    terminal = HeadlessTerminal(keys)
    try:
        loop = play(settings, terminal)
    except RoguelikeError as exc:
        logger.error("Fatal: %s", exc)
        return 1
    except KeyboardInterrupt:
        print("Interrupted by user")
        return 130

    for line in ascii_view(loop.game.map.to_str_lines(), terminal.last_frame):
        print(line)
    player = loop.game.player
    print(f"Player at ({player.x}, {player.y}) after {loop.turns} turns")
    return 0
