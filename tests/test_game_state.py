import pytest

from roguelike.dungeon.map import GameMap
from roguelike.dungeon.tiles import Tile
from roguelike.engine.events import GameEvent
from roguelike.engine.game_state import Game
from roguelike.entities import GameObject, Role
from roguelike.exceptions import MapBoundsError
from roguelike.rendering.colors import WHITE


def test_from_settings_places_default_objects(game):
    assert [o.name for o in game.objects] == ["player", "npc"]
    assert game.player.pos == (25, 23)
    assert game.player.is_player
    assert game.objects[1].pos == (25, 25)


def test_needs_exactly_one_player():
    m = GameMap(3, 3)
    with pytest.raises(ValueError):
        Game(m, [GameObject(1, 1, "g", WHITE)])
    with pytest.raises(ValueError):
        Game(m, [GameObject(1, 1, "@", WHITE, role=Role.PLAYER), GameObject(1, 1, "@", WHITE, role=Role.PLAYER)])


def test_placement_is_permissive_unless_strict():
    m = GameMap(3, 3)
    player = GameObject(0, 0, "@", WHITE, role=Role.PLAYER)
    Game(m, [player])
    with pytest.raises(MapBoundsError):
        Game(m, [player], strict=True)
    with pytest.raises(MapBoundsError):
        Game(GameMap(3, 3, default=Tile.empty()), [GameObject(5, 5, "@", WHITE, role=Role.PLAYER)], strict=True)


def test_events_emitted_for_moves(game):
    events = []
    game.add_listener(lambda e, g: events.append(e))
    assert game.move_player(1, 0) is True
    assert game.move_player(0, -10) is False
    assert events == [GameEvent.PLAYER_MOVED, GameEvent.MOVE_BLOCKED]


def test_listener_errors_do_not_propagate(game):
    def broken(event, g):
        raise RuntimeError("boom")

    game.add_listener(broken)
    assert game.move_player(1, 0) is True
    game.remove_listener(broken)
    assert game.player.pos == (26, 23)
