import pytest

from advent_solvers.grid import XY, Direction, Grid, Node, NodeKind

SAMPLE = ["..#A#", ".....", "#.c.#"]


def test_xy_construction():
    xy = XY(5, 8)
    assert xy.x == 5
    assert xy.y == 8


def test_xy_adding():
    a, b = XY(5, 8), XY(4, 3)
    assert a + b == XY(9, 11)
    assert a + b == b + a


def test_xy_subtracting():
    a, b = XY(5, 8), XY(4, 3)
    assert a - b == XY(1, 5)
    assert b - a == XY(-1, -5)


def test_xy_multiplication():
    a, b = XY(5, 8), XY(4, 3)
    assert a * b == XY(20, 24)
    assert a * b == b * a


def test_xy_step():
    s = XY(5, 0)
    assert s.step(Direction.DOWN) == XY(5, 1)
    assert s.step(Direction.UP) == XY(5, -1)
    assert s.step(Direction.LEFT) == XY(4, 0)
    assert s.step(Direction.RIGHT) == XY(6, 0)


def test_dir_from_to():
    assert Direction.from_to(XY(5, 4), XY(5, 0)) == Direction.UP
    assert Direction.from_to(XY(5, 4), XY(5, 15)) == Direction.DOWN
    assert Direction.from_to(XY(5, 4), XY(15, 4)) == Direction.RIGHT
    assert Direction.from_to(XY(5, 4), XY(-1, 4)) == Direction.LEFT


def test_dir_from_to_diagonal_raises():
    with pytest.raises(ValueError):
        Direction.from_to(XY(0, 0), XY(1, 1))


def test_dir_from_char():
    assert Direction.from_char("^") == Direction.UP
    assert Direction.from_char(">") == Direction.RIGHT
    assert Direction.from_char("v") == Direction.DOWN
    assert Direction.from_char("<") == Direction.LEFT
    with pytest.raises(ValueError):
        Direction.from_char("x")


@pytest.mark.parametrize("direction", list(Direction))
def test_dir_reverse_is_involution(direction):
    assert direction.reverse().reverse() == direction
    assert direction.as_coords() + direction.reverse().as_coords() == XY(0, 0)


def test_node_from_char():
    assert Node.from_char(".") == Node(NodeKind.EMPTY)
    assert Node.from_char("#") == Node(NodeKind.BLOCKED)
    assert Node.from_char("c") == Node(NodeKind.SPECIAL, "c")


def test_grid_build():
    grid = Grid.from_lines(SAMPLE)
    assert grid.node_at(XY(0, 0)) == Node(NodeKind.EMPTY)
    assert grid.node_at(XY(2, 0)) == Node(NodeKind.BLOCKED)
    assert grid.node_at(XY(2, 2)) == Node(NodeKind.SPECIAL, "c")


def test_grid_outside_access():
    grid = Grid.from_lines(SAMPLE)
    with pytest.raises(IndexError, match="node out of bounds"):
        grid.node_at(XY(5, 3))


def test_grid_set_outside_access():
    grid = Grid.from_lines(SAMPLE)
    with pytest.raises(IndexError, match="node out of bounds"):
        grid.set_node(XY(5, 3), Node(NodeKind.EMPTY))


def test_grid_set_node():
    grid = Grid.from_lines(SAMPLE)
    grid.set_node(XY(0, 0), Node(NodeKind.BLOCKED))
    assert grid.node_at(XY(0, 0)) == Node(NodeKind.BLOCKED)


def test_grid_is_within():
    grid = Grid.from_lines(SAMPLE)
    assert grid.is_within(XY(5, 3)) is False
    assert grid.is_within(XY(5, 0)) is False
    assert grid.is_within(XY(0, 3)) is False
    assert grid.is_within(XY(4, 2)) is True
    assert grid.is_within(XY(0, -1)) is False
    assert grid.is_within(XY(-1, 0)) is False