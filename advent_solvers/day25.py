"""Count the lock and key schematic pairs that fit together."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Sequence

_COLUMNS = 5
_SPACE = 5


class Kind(Enum):
    LOCK = "lock"
    KEY = "key"


@dataclass(frozen=True)
class Schematic:
    """A lock or key and the heights of its pins or cuts."""

    kind: Kind
    heights: tuple[int, ...]

    def fits_with(self, other: Schematic) -> bool:
        """Whether a lock and a key overlap in no column."""
        if self.kind is other.kind:
            raise ValueError(f"Trying to fit together: {self}, {other}")
        return all(
            a + b <= _SPACE
            for a, b in zip(self.heights[:_COLUMNS], other.heights[:_COLUMNS])
        )


def _blocks(lines: Iterable[str]) -> Iterator[list[str]]:
    block: list[str] = []
    for raw in lines:
        line = raw.strip()
        if line:
            block.append(line)
        elif block:
            yield block
            block = []
    if block:
        yield block


def _parse_block(rows: list[str]) -> Schematic:
    if rows[0] == "#####":
        kind = Kind.LOCK
    elif rows[0] == ".....":
        kind = Kind.KEY
    else:
        raise ValueError(f"Wrong type of schematic: {rows[0]!r}")
    heights = tuple(column.count("#") - 1 for column in zip(*rows))
    return Schematic(kind, heights)


def parse_schematics(lines: Iterable[str]) -> tuple[list[Schematic], list[Schematic]]:
    """Parse blank-line separated schematics into (locks, keys)."""
    locks: list[Schematic] = []
    keys: list[Schematic] = []
    for block in _blocks(lines):
        schematic = _parse_block(block)
        (keys if schematic.kind is Kind.KEY else locks).append(schematic)
    return locks, keys


def count_fitting(lines: Iterable[str]) -> int:
    """Count the lock and key pairs that fit without overlapping."""
    locks, keys = parse_schematics(lines)
    return sum(lock.fits_with(key) for lock in locks for key in keys)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.parse_args(argv)
    print(count_fitting(sys.stdin))


if __name__ == "__main__":
    main()