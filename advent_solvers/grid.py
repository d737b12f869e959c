"""Flat 2D grid primitives: coordinates, directions, nodes and grids."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


@dataclass(frozen=True)
class XY:
    """An integer point or offset on a grid."""

    x: int
    y: int

    def __add__(self, other: object) -> XY:
        if not isinstance(other, XY):
            return NotImplemented
        return XY(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> XY:
        if not isinstance(other, XY):
            return NotImplemented
        return XY(self.x - other.x, self.y - other.y)

    def __mul__(self, other: object) -> XY:
        if not isinstance(other, XY):
            return NotImplemented
        return XY(self.x * other.x, self.y * other.y)

    def step(self, direction: Direction) -> XY:
        """Return the neighbouring point in the given direction."""
        return self + direction.as_coords()


class Direction(Enum):
    """The four orthogonal directions, y growing downwards."""

    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @classmethod
    def from_char(cls, c: str) -> Direction:
        """Parse one of the arrow characters ``^ > v <``."""
        try:
            return _DIRECTION_CHARS[c]
        except KeyError:
            raise ValueError(f"unknown direction character: {c!r}") from None

    def as_coords(self) -> XY:
        return XY(*self.value)

    def reverse(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))

    @staticmethod
    def from_to(start: XY, end: XY) -> Direction:
        """The direction leading straight from ``start`` to ``end``."""
        diff = end - start
        if diff.y == 0 and diff.x < 0:
            return Direction.LEFT
        if diff.y == 0 and diff.x > 0:
            return Direction.RIGHT
        if diff.x == 0 and diff.y > 0:
            return Direction.DOWN
        if diff.x == 0 and diff.y < 0:
            return Direction.UP
        raise ValueError(f"no straight direction from {start} to {end}")


_DIRECTION_CHARS = {
    "^": Direction.UP,
    ">": Direction.RIGHT,
    "v": Direction.DOWN,
    "<": Direction.LEFT,
}


class NodeKind(Enum):
    EMPTY = "empty"
    BLOCKED = "blocked"
    SPECIAL = "special"


@dataclass(frozen=True)
class Node:
    """One cell of a grid; special cells keep their character."""

    kind: NodeKind
    char: str | None = None

    @classmethod
    def from_char(cls, c: str) -> Node:
        if c == ".":
            return cls(NodeKind.EMPTY)
        if c == "#":
            return cls(NodeKind.BLOCKED)
        return cls(NodeKind.SPECIAL, c)


@dataclass
class Grid:
    """A rectangular grid of nodes indexed by ``XY``."""

    nodes: list[list[Node]]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Grid:
        return cls([[Node.from_char(c) for c in line.strip()] for line in lines])

    @property
    def width(self) -> int:
        return len(self.nodes[0]) if self.nodes else 0

    @property
    def height(self) -> int:
        return len(self.nodes)

    def is_within(self, at: XY) -> bool:
        return 0 <= at.x < self.width and 0 <= at.y < self.height

    def node_at(self, at: XY) -> Node:
        if not self.is_within(at):
            raise IndexError(f"Getting node out of bounds: {at}")
        return self.nodes[at.y][at.x]

    def set_node(self, at: XY, node: Node) -> None:
        if not self.is_within(at):
            raise IndexError(f"Setting node out of bounds: {at}")
        self.nodes[at.y][at.x] = node