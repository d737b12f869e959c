"""Evolve pseudo-random secret numbers and trade on their price changes."""

from __future__ import annotations

import argparse
import sys
from collections import Counter, deque
from typing import Iterable, Sequence

_PRUNE = 16777216


def next_secret(n: int) -> int:
    """One step of the secret number sequence."""
    n = (n ^ (n * 64)) % _PRUNE
    n = (n ^ (n // 32)) % _PRUNE
    return (n ^ (n * 2048)) % _PRUNE


def multi_step(n: int, iterations: int) -> int:
    """The secret number after ``iterations`` steps."""
    for _ in range(iterations):
        n = next_secret(n)
    return n


def price_sequences(n: int, iterations: int) -> dict[tuple[int, ...], int]:
    """Map each run of four price changes to the price at its first occurrence.

    Prices are the last digits of the first ``iterations`` secrets, starting
    with ``n`` itself.
    """
    sequences: dict[tuple[int, ...], int] = {}
    diffs: deque[int] = deque(maxlen=4)
    previous: int | None = None
    for _ in range(iterations):
        price = n % 10
        if previous is not None:
            diffs.append(price - previous)
        if len(diffs) == 4:
            sequences.setdefault(tuple(diffs), price)
        previous = price
        n = next_secret(n)
    return sequences


def sum_secrets(seeds: Iterable[int], iterations: int = 2000) -> int:
    """Sum of every seed's secret after ``iterations`` steps."""
    return sum(multi_step(seed, iterations) for seed in seeds)


def best_bananas(seeds: Iterable[int], iterations: int = 2000) -> int:
    """The most bananas one change sequence can buy across all buyers."""
    totals: Counter[tuple[int, ...]] = Counter()
    for seed in seeds:
        totals.update(price_sequences(seed, iterations))
    return max(totals.values(), default=0)


def _read_seeds(lines: Iterable[str]) -> list[int]:
    return [int(line) for line in (raw.strip() for raw in lines) if line]


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--part", type=int, choices=(1, 2), default=2)
    args = parser.parse_args(argv)
    seeds = _read_seeds(sys.stdin)
    print(sum_secrets(seeds) if args.part == 1 else best_bananas(seeds))


if __name__ == "__main__":
    main()