from __future__ import annotations

from roguelike.engine.game_state import Game
from roguelike.engine.loop import GameLoop, LoopState
from roguelike.entities import GameObject, Role
from roguelike.input.actions import InputAction, KeyPress
from roguelike.rendering.colors import WHITE
from roguelike.rendering.terminal import HeadlessTerminal, parse_keys


def test_right_four_times_walks_the_tunnel(game, settings):
    terminal = HeadlessTerminal(["RIGHT"] * 4 + ["ESCAPE"])
    loop = GameLoop(game, terminal, settings)
    turns = loop.run()
    assert turns == 5
    assert game.player.pos == (29, 23)
    npc = next(o for o in game.objects if o.name == "npc")
    assert npc.pos == (25, 25)
    assert loop.state is LoopState.TERMINATED


def test_escape_stops_before_remaining_keys(game, settings):
    terminal = HeadlessTerminal(["RIGHT", "ESCAPE", "RIGHT", "RIGHT"])
    loop = GameLoop(game, terminal, settings)
    loop.run()
    assert game.player.pos == (26, 23)
    assert terminal.pending == 2
    # Frames are presented before every key read, never after Escape
    assert terminal.frames == 2


def test_up_from_wall_corner_is_blocked(settings, game):
    game.player.x, game.player.y = 20, 15
    loop = GameLoop(game, HeadlessTerminal(["UP", "ESCAPE"]), settings)
    loop.run()
    assert game.player.pos == (20, 15)


def test_unbound_and_modified_keys_are_ignored(game, settings):
    keys = [KeyPress("X"), KeyPress("RIGHT", shift=True), KeyPress("RIGHT", alt=True), KeyPress("ESCAPE")]
    loop = GameLoop(game, HeadlessTerminal(keys), settings)
    loop.run()
    assert game.player.pos == (25, 23)
    assert loop.turns == 4


def test_window_close_terminates(game, settings):
    terminal = HeadlessTerminal(["LEFT", "LEFT"])
    loop = GameLoop(game, terminal, settings)
    loop.run()
    assert terminal.window_closed()
    assert loop.state is LoopState.TERMINATED
    assert game.player.pos == (23, 23)


def test_closed_terminal_never_renders(game, settings):
    terminal = HeadlessTerminal(["RIGHT"])
    terminal.close()
    loop = GameLoop(game, terminal, settings)
    assert loop.tick() is False
    assert terminal.frames == 0
    assert game.player.pos == (25, 23)


def test_handle_key_after_termination_is_noop(game, settings):
    loop = GameLoop(game, HeadlessTerminal(), settings)
    assert loop.handle_key(KeyPress("ESCAPE")) is InputAction.EXIT
    assert loop.handle_key(KeyPress("RIGHT")) is None
    assert game.player.pos == (25, 23)


def test_player_found_by_role_not_index(settings):
    from roguelike.config import MapConfig
    from roguelike.dungeon.generator import generate

    npc = GameObject(25, 25, "@", WHITE, name="npc")
    player = GameObject(25, 23, "@", WHITE, name="player", role=Role.PLAYER)
    game = Game(generate(MapConfig()), [npc, player])
    GameLoop(game, HeadlessTerminal(["DOWN", "ESCAPE"]), settings).run()
    assert player.pos == (25, 24)
    assert npc.pos == (25, 25)


def test_presented_frame_shows_tokens(game, settings):
    terminal = HeadlessTerminal(["ESCAPE"])
    GameLoop(game, terminal, settings).run()
    assert len(terminal.last_frame) == 50
    assert terminal.last_frame[23][25] == "@"
    assert terminal.last_frame[25][25] == "@"


def test_parse_keys_handles_modifiers():
    presses = parse_keys("right, shift+up,,ESCAPE")
    assert presses == [KeyPress("RIGHT"), KeyPress("UP", shift=True), KeyPress("ESCAPE")]
