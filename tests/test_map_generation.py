import pytest

from roguelike.config import MapConfig
from roguelike.dungeon.generator import DEFAULT_LAYOUT, HTunnel, Room, VTunnel, carve, generate, make_map
from roguelike.dungeon.map import GameMap, Rect
from roguelike.dungeon.tiles import Tile
from roguelike.exceptions import MapBoundsError


def expected_empty(x, y):
    in_room_a = 21 <= x <= 29 and 16 <= y <= 29
    in_room_b = 51 <= x <= 59 and 16 <= y <= 29
    in_tunnel = y == 23 and 25 <= x <= 55
    return in_room_a or in_room_b or in_tunnel


def test_default_map_matches_two_rooms_and_tunnel():
    m = generate(MapConfig())
    assert (m.width, m.height) == (80, 45)
    for y in range(m.height):
        for x in range(m.width):
            tile = m.get_tile(x, y)
            if expected_empty(x, y):
                assert tile == Tile.empty(), (x, y)
            else:
                assert tile == Tile.wall(), (x, y)


def test_room_edges_stay_walls():
    m = generate(MapConfig())
    # Origin row/column and the far edge are not carved
    assert m.is_blocked(20, 20)
    assert m.is_blocked(30, 20)
    assert m.is_blocked(25, 15)
    assert m.is_blocked(25, 30)
    assert not m.is_blocked(21, 16)
    assert not m.is_blocked(29, 29)


def test_border_is_walled():
    m = generate(MapConfig())
    for x in range(m.width):
        assert m.is_blocked(x, 0)
        assert m.is_blocked(x, m.height - 1)
    for y in range(m.height):
        assert m.is_blocked(0, y)
        assert m.is_blocked(m.width - 1, y)


def test_generation_is_deterministic():
    assert generate(MapConfig()).snapshot() == generate(MapConfig()).snapshot()


def test_tunnel_endpoints_in_either_order():
    a = make_map(10, 5, [HTunnel(2, 6, 2)])
    b = make_map(10, 5, [HTunnel(6, 2, 2)])
    assert a.snapshot() == b.snapshot()
    assert a.to_str_lines()[2] == "##.....###"


def test_vertical_tunnel():
    m = make_map(5, 6, [VTunnel(4, 1, 2)])
    assert [m.is_blocked(2, y) for y in range(6)] == [True, False, False, False, False, True]


def test_carve_only_downgrades_walls():
    m = GameMap(6, 6)
    carve(m, Room(Rect(0, 0, 4, 4)))
    carve(m, HTunnel(1, 2, 2))  # overlaps the room, stays empty
    assert not m.is_blocked(2, 2)
    assert sum(row.count(".") for row in m.to_str_lines()) == 9


def test_out_of_bounds_op_fails_before_carving():
    with pytest.raises(MapBoundsError):
        make_map(40, 20, DEFAULT_LAYOUT)


def test_rect_derives_far_corner():
    r = Rect(20, 15, 10, 15)
    assert (r.x1, r.y1, r.x2, r.y2) == (20, 15, 30, 30)
    with pytest.raises(ValueError):
        Rect(0, 0, 0, 3)


def test_get_tile_out_of_bounds_raises():
    m = GameMap(3, 3)
    with pytest.raises(MapBoundsError):
        m.get_tile(3, 0)
    with pytest.raises(IndexError):
        m[(-1, 0)]
    assert m.is_blocked(-1, 0) is True
