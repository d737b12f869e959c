"""Check and repair page orderings against "before" rules."""

from __future__ import annotations

import argparse
import sys
from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass
class PrintQueue:
    """Ordering rules (page -> pages that must come after it) and updates."""

    rules: dict[int, list[int]]
    updates: list[list[int]]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> PrintQueue:
        """Parse ``a|b`` rules, a blank line, then comma separated updates."""
        it = iter(lines)
        rules: dict[int, list[int]] = defaultdict(list)
        for raw in it:
            line = raw.strip()
            if not line:
                break
            before, after = (int(part) for part in line.split("|"))
            rules[before].append(after)
        updates = [
            [int(part) for part in line.split(",")]
            for line in (raw.strip() for raw in it)
            if line
        ]
        return cls(dict(rules), updates)

    def middle_if_correct(self, order: Sequence[int]) -> int | None:
        """The middle page of a correctly ordered update, or None if it breaks a rule."""
        seen: set[int] = set()
        for page in order:
            if any(after in seen for after in self.rules.get(page, ())):
                return None
            seen.add(page)
        if len(order) % 2 != 1:
            raise ValueError(f"update has no middle page: {list(order)}")
        return order[len(order) // 2]

    def reorder(self, order: Sequence[int]) -> list[int]:
        """Topologically sort the pages of an update by the rules."""
        pages = set(order)
        visited: set[int] = set()
        post_order: list[int] = []

        def visit(page: int) -> None:
            if page in visited:
                return
            visited.add(page)
            for after in self.rules.get(page, ()):
                if after in pages:
                    visit(after)
            post_order.append(page)

        for page in order:
            visit(page)
        if len(post_order) != len(order):
            raise ValueError(f"update repeats pages: {list(order)}")
        return post_order[::-1]

    def sum_correct_middles(self) -> int:
        """Sum the middle pages of the correctly ordered updates."""
        return sum(
            middle
            for middle in map(self.middle_if_correct, self.updates)
            if middle is not None
        )

    def sum_incorrect_middles(self) -> int:
        """Sum the middle pages of the incorrect updates once reordered."""
        total = 0
        for update in self.updates:
            if self.middle_if_correct(update) is not None:
                continue
            middle = self.middle_if_correct(self.reorder(update))
            if middle is None:
                raise ValueError(f"rules admit no valid order for {update}")
            total += middle
        return total


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--part", type=int, choices=(1, 2), default=2)
    args = parser.parse_args(argv)
    queue = PrintQueue.from_lines(sys.stdin)
    if args.part == 1:
        print(queue.sum_correct_middles())
    else:
        print(queue.sum_incorrect_middles())


if __name__ == "__main__":
    main()