import pytest

from delve.core.grid import DIRECTIONS, ORIGIN_CONNECTIVITY, Connectivity, Coordinate, Direction


def test_opposites_are_symmetric():
    assert Direction.UP.opposite() is Direction.DOWN
    assert Direction.LEFT.opposite() is Direction.RIGHT
    for d in DIRECTIONS:
        assert d.opposite().opposite() is d


def test_offset_scales_by_tile_size():
    origin = Coordinate(0, 0)
    assert origin.offset(Direction.UP, 10) == Coordinate(0, 10)
    assert origin.offset(Direction.DOWN, 10) == Coordinate(0, -10)
    assert origin.offset(Direction.LEFT, 10) == Coordinate(-10, 0)
    assert origin.offset(Direction.RIGHT) == Coordinate(1, 0)


def test_coordinates_hash_and_order():
    coords = {Coordinate(1, 2), Coordinate(1, 2), Coordinate(0, 5)}
    assert len(coords) == 2
    assert sorted(coords) == [Coordinate(0, 5), Coordinate(1, 2)]


@pytest.mark.parametrize("text,expected", [("up", Direction.UP), ("D", Direction.DOWN), (" Left ", Direction.LEFT), ("r", Direction.RIGHT)])
def test_parse_direction(text, expected):
    assert Direction.parse(text) is expected


def test_parse_direction_rejects_unknown():
    with pytest.raises(ValueError):
        Direction.parse("north")


def test_connectivity_with_open_returns_new_value():
    closed = Connectivity()
    opened = closed.with_open(Direction.LEFT)
    assert closed.open_directions() == ()
    assert opened.open_directions() == (Direction.LEFT,)
    assert opened.allows(Direction.LEFT)
    assert not opened.allows(Direction.RIGHT)


def test_origin_connectivity_is_up_only():
    assert ORIGIN_CONNECTIVITY.as_dict() == {"up": True, "down": False, "left": False, "right": False}
