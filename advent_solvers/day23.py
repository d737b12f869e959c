"""Find groups of interconnected computers in a LAN party network."""

from __future__ import annotations

import argparse
import sys
from collections import defaultdict
from dataclasses import dataclass
from itertools import combinations
from typing import Iterable, Sequence


@dataclass
class Network:
    """Undirected connections between computers, in input order."""

    adjacency: dict[str, list[str]]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Network:
        """Parse one ``a-b`` connection per line."""
        adjacency: dict[str, list[str]] = defaultdict(list)
        for raw in lines:
            line = raw.strip()
            if not line:
                continue
            a, sep, b = line.partition("-")
            if not sep or not a or not b:
                raise ValueError(f"malformed connection: {line!r}")
            adjacency[a].append(b)
            adjacency[b].append(a)
        return cls(dict(adjacency))

    def is_neighbour(self, a: str, b: str) -> bool:
        return b in self.adjacency[a]

    def is_clique(self, verts: Sequence[str]) -> bool:
        """Whether every pair of ``verts`` is connected."""
        return all(self.is_neighbour(a, b) for a, b in combinations(verts, 2))

    def triangles_with_t(self) -> int:
        """Count sets of three connected computers, one name starting with ``t``."""
        triangles = set()
        for v, neighs in self.adjacency.items():
            if not v.startswith("t"):
                continue
            for a, b in combinations(neighs, 2):
                if self.is_neighbour(a, b):
                    triangles.add(tuple(sorted((v, a, b))))
        return len(triangles)

    def simple_clique(self) -> list[str]:
        """A large clique found greedily, as a sorted list of names.

        For each size from 12 down, each computer is tried together with its
        first neighbours only, so this is a heuristic rather than an exact
        maximum clique search.
        """
        for size in range(12, 0, -1):
            for v, neighs in self.adjacency.items():
                if len(neighs) < size:
                    continue
                candidate = [*neighs[:size], v]
                if self.is_clique(candidate):
                    return sorted(candidate)
        return []


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--part", type=int, choices=(1, 2), default=2)
    args = parser.parse_args(argv)
    network = Network.from_lines(sys.stdin)
    if args.part == 1:
        print(network.triangles_with_t())
    else:
        print(",".join(network.simple_clique()))


if __name__ == "__main__":
    main()