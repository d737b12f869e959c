"""Find the fewest button presses to type door codes through chained keypads."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from itertools import pairwise, permutations
from typing import Iterable, Sequence

from advent_solvers.grid import XY, Direction

_NUMERIC_ROWS = ("789", "456", "123", " 0A")
_DIRECTIONAL_ROWS = (" ^A", "<v>")


@dataclass
class Keypad:
    """Key positions of a keypad and the position of its gap, if any."""

    keys: dict[str, XY]
    vals: dict[XY, str]
    blank: XY | None = None

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> Keypad:
        """Build a keypad from text rows, a space marking the gap."""
        keys: dict[str, XY] = {}
        vals: dict[XY, str] = {}
        blank: XY | None = None
        for y, row in enumerate(rows):
            for x, c in enumerate(row):
                at = XY(x, y)
                if c == " ":
                    blank = at
                    continue
                keys[c] = at
                vals[at] = c
        return cls(keys, vals, blank)

    @classmethod
    def numeric(cls) -> Keypad:
        return cls.from_rows(_NUMERIC_ROWS)

    @classmethod
    def directional(cls) -> Keypad:
        return cls.from_rows(_DIRECTIONAL_ROWS)

    def _position(self, key: str) -> XY:
        try:
            return self.keys[key]
        except KeyError:
            raise ValueError(f"keypad has no key {key!r}") from None

    def is_valid(self, start_key: XY, path: Iterable[str]) -> bool:
        """Whether following the arrow ``path`` from ``start_key`` stays on keys."""
        pos = start_key
        for c in path:
            pos = pos.step(Direction.from_char(c))
            if pos not in self.vals:
                return False
        return True

    def all_paths(self, start: str, end: str) -> list[str]:
        """Every shortest arrow sequence from ``start`` to ``end``, each ending in ``A``."""
        start_key = self._position(start)
        end_key = self._position(end)
        horizontal = (">" if start_key.x < end_key.x else "<") * abs(
            end_key.x - start_key.x
        )
        vertical = ("v" if start_key.y < end_key.y else "^") * abs(
            end_key.y - start_key.y
        )
        moves = horizontal + vertical
        return sorted(
            {
                "".join(order) + "A"
                for order in permutations(moves)
                if self.is_valid(start_key, order)
            }
        )


class KeypadChain:
    """Directional keypads operated by robots in a chain ending at a numeric keypad."""

    def __init__(self, dir_pads: int = 25) -> None:
        if dir_pads < 0:
            raise ValueError("number of directional keypads cannot be negative")
        self.pads: list[Keypad] = [Keypad.directional()] * dir_pads + [
            Keypad.numeric()
        ]
        self._cache: dict[tuple[int, str, str], int] = {}

    def _presses(self, start: str, end: str, level: int) -> int:
        key = (level, start, end)
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        best: int | None = None
        for path in self.pads[level].all_paths(start, end):
            if level == 0:
                length = len(path)
            else:
                length = sum(
                    self._presses(a, b, level - 1) for a, b in pairwise("A" + path)
                )
            if best is None or length < best:
                best = length
        if best is None:
            raise ValueError(f"no path from {start!r} to {end!r}")
        self._cache[key] = best
        return best

    def shortest_code(self, code: str) -> int:
        """The fewest presses on the first keypad needed to type ``code``."""
        top = len(self.pads) - 1
        return sum(self._presses(a, b, top) for a, b in pairwise("A" + code))


def num_code(code: str) -> int:
    """The numeric part of a code: its first three characters."""
    return int(code[:3])


def total_complexity(codes: Iterable[str], dir_pads: int = 25) -> int:
    """Sum of press count times numeric part over all codes."""
    chain = KeypadChain(dir_pads)
    return sum(chain.shortest_code(code) * num_code(code) for code in codes)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--part", type=int, choices=(1, 2), default=2)
    args = parser.parse_args(argv)
    codes = [line for line in (raw.strip() for raw in sys.stdin) if line]
    print(total_complexity(codes, 2 if args.part == 1 else 25))


if __name__ == "__main__":
    main()