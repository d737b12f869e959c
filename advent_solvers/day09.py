"""Compact a disk map and compute the resulting filesystem checksum."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, Sequence

_DIGITS = "0123456789"


def sum_from_to(start: int, end: int) -> int:
    """Sum of the integers from ``start`` to ``end`` inclusive."""
    return (start + end) * (end - start + 1) // 2


@dataclass(frozen=True)
class Space:
    """A run of blocks: a file when ``file_id`` is set, free space otherwise."""

    size: int
    file_id: int | None = None

    @property
    def is_file(self) -> bool:
        return self.file_id is not None


def parse_disk_map(line: str) -> list[Space]:
    """Parse alternating file and free-space lengths, one digit each."""
    spaces = []
    next_id = 0
    for index, c in enumerate(line.strip()):
        if c not in _DIGITS:
            raise ValueError(f"disk map holds a non-digit: {c!r}")
        if index % 2 == 0:
            spaces.append(Space(int(c), next_id))
            next_id += 1
        else:
            spaces.append(Space(int(c)))
    return spaces


def checksum(spaces: Iterable[Space]) -> int:
    """Sum of block position times file id over every file block."""
    total = 0
    position = 0
    for space in spaces:
        if space.file_id is not None:
            total += sum_from_to(position, position + space.size - 1) * space.file_id
        position += space.size
    return total


def compact_blocks(line: str) -> int:
    """Move single blocks from the end into the leftmost gaps; return the checksum."""
    blocks = [
        space.file_id for space in parse_disk_map(line) for _ in range(space.size)
    ]
    left, right = 0, len(blocks) - 1
    while True:
        while left < len(blocks) and blocks[left] is not None:
            left += 1
        while right >= 0 and blocks[right] is None:
            right -= 1
        if left >= right:
            break
        blocks[left], blocks[right] = blocks[right], None
    return sum(pos * file_id for pos, file_id in enumerate(blocks) if file_id is not None)


def compact_files(line: str) -> int:
    """Move whole files, highest id first, into the leftmost gap that fits them."""
    original = parse_disk_map(line)
    disk = list(original)
    for file in reversed([space for space in original if space.is_file]):
        for idx, space in enumerate(disk):
            if space.file_id == file.file_id:
                break
            if space.is_file or space.size < file.size:
                continue
            remaining = space.size - file.size
            disk[idx : idx + 1] = [file, Space(remaining)] if remaining > 0 else [file]
            for old in range(len(disk) - 1, -1, -1):
                if disk[old].file_id == file.file_id:
                    disk[old] = Space(file.size)
                    break
            break
    return checksum(disk)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--part", type=int, choices=(1, 2), default=2)
    args = parser.parse_args(argv)
    line = sys.stdin.readline()
    if not line:
        raise ValueError("no disk map given")
    print(compact_blocks(line) if args.part == 1 else compact_files(line))


if __name__ == "__main__":
    main()