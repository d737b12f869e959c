"""Count the cheats on a racetrack that save at least a given number of steps."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from dataclasses import dataclass
from typing import ClassVar, Iterable, Iterator, Sequence

from advent_solvers.grid import XY, Direction


@dataclass
class Racetrack:
    """Track size, wall positions, and the start and end of the race."""

    width: int
    height: int
    blocked: frozenset[XY]
    start: XY
    end: XY

    MAX_SHORTCUT: ClassVar[int] = 20

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Racetrack:
        """Parse ``.`` track, ``#`` walls, ``S`` start and ``E`` end."""
        rows = [line for line in (raw.strip() for raw in lines) if line]
        blocked = set()
        start: XY | None = None
        end: XY | None = None
        for y, row in enumerate(rows):
            for x, c in enumerate(row):
                if c == "#":
                    blocked.add(XY(x, y))
                elif c == "S":
                    start = XY(x, y)
                elif c == "E":
                    end = XY(x, y)
                elif c != ".":
                    raise ValueError(f"Unknown input character: {c!r}")
        if start is None or end is None:
            raise ValueError("racetrack needs both a start and an end")
        width = len(rows[0]) if rows else 0
        return cls(width, len(rows), frozenset(blocked), start, end)

    def is_within(self, at: XY) -> bool:
        return 0 <= at.x < self.width and 0 <= at.y < self.height

    def neighbours(self, pos: XY) -> list[XY]:
        """Open track cells next to ``pos``, in the order up, right, down, left."""
        return [
            cand
            for direction in Direction
            if self.is_within(cand := pos.step(direction))
            and cand not in self.blocked
        ]

    def nodes_at_dist(self, pos: XY, dist: int) -> list[XY]:
        """Cells on the map at exactly Manhattan distance ``dist`` from ``pos``.

        The ring is walked clockwise starting from the cell straight above.
        """
        if dist < 1:
            raise ValueError("dist has to be at least 1")
        corners = [
            pos + XY(0, -dist),
            pos + XY(dist, 0),
            pos + XY(0, dist),
            pos + XY(-dist, 0),
        ]
        steps = [XY(1, 1), XY(-1, 1), XY(-1, -1), XY(1, -1)]
        result = []
        current = corners[0]
        for target, step in zip(corners[1:] + corners[:1], steps):
            while current != target:
                if self.is_within(current):
                    result.append(current)
                current = current + step
        return result

    def _shortest_paths(self) -> tuple[dict[XY, int], dict[XY, XY]]:
        dists = {self.start: 0}
        parents: dict[XY, XY] = {}
        queue = deque([self.start])
        while queue:
            pos = queue.popleft()
            for n in self.neighbours(pos):
                if n in dists:
                    continue
                parents[n] = pos
                dists[n] = dists[pos] + 1
                queue.append(n)
        return dists, parents

    def _path_back(self, parents: dict[XY, XY]) -> Iterator[XY]:
        node: XY | None = self.end
        while node is not None:
            yield node
            node = parents.get(node)

    def count_shortcuts(self, at_least: int) -> int:
        """Count distinct cheats of up to ``MAX_SHORTCUT`` steps saving ``at_least``."""
        dists, parents = self._shortest_paths()
        if self.end not in dists:
            raise ValueError("the end cannot be reached from the start")
        path = list(self._path_back(parents))
        on_path = set(path)
        shortcuts = set()
        for node in path:
            for length in range(2, self.MAX_SHORTCUT + 1):
                for origin in self.nodes_at_dist(node, length):
                    if origin not in on_path:
                        continue
                    saved = dists[node] - dists[origin] - length + 1
                    if saved >= at_least:
                        shortcuts.add((origin, node))
        return len(shortcuts)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.parse_args(argv)
    lines = iter(sys.stdin)
    first = next(lines, None)
    if first is None:
        raise ValueError("no input given")
    at_least = int(first.strip())
    track = Racetrack.from_lines(lines)
    print(track.count_shortcuts(at_least))


if __name__ == "__main__":
    main()