"""Word search counting of XMAS and of X-shaped MAS."""

from __future__ import annotations

import argparse
import sys
from collections import defaultdict
from typing import Iterable, Sequence


def _read_rows(lines: Iterable[str]) -> list[str]:
    rows = [line.strip() for line in lines]
    if not rows:
        raise ValueError("empty word search")
    return rows


def count_xmas(lines: Iterable[str]) -> int:
    """Count ``XMAS`` in rows, columns and both diagonals, either way round."""
    rows = _read_rows(lines)
    columns = ["".join(col) for col in zip(*rows)]
    diagonals: dict[int, list[str]] = defaultdict(list)
    anti_diagonals: dict[int, list[str]] = defaultdict(list)
    for y, row in enumerate(rows):
        for x, c in enumerate(row):
            diagonals[x - y].append(c)
            anti_diagonals[x + y].append(c)
    strips = [
        *rows,
        *columns,
        *("".join(d) for d in diagonals.values()),
        *("".join(d) for d in anti_diagonals.values()),
    ]
    return sum(s.count("XMAS") + s.count("SAMX") for s in strips)


def is_x_mas(rows: Sequence[Sequence[str]], i: int, j: int) -> bool:
    """Whether two ``MAS`` cross in the 3x3 square at row ``i``, column ``j``."""
    if i > len(rows) - 3 or j > len(rows[0]) - 3:
        return False
    down = rows[i][j] + rows[i + 1][j + 1] + rows[i + 2][j + 2]
    up = rows[i + 2][j] + rows[i + 1][j + 1] + rows[i][j + 2]
    return down in ("MAS", "SAM") and up in ("MAS", "SAM")


def count_x_mas(lines: Iterable[str]) -> int:
    """Count every X-shaped pair of ``MAS`` in the word search."""
    rows = _read_rows(lines)
    return sum(
        is_x_mas(rows, i, j) for i in range(len(rows)) for j in range(len(rows[0]))
    )


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--part", type=int, choices=(1, 2), default=2)
    args = parser.parse_args(argv)
    lines = list(sys.stdin)
    print(count_xmas(lines) if args.part == 1 else count_x_mas(lines))


if __name__ == "__main__":
    main()