"""Find calibration equations that operators can make true."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence


def max_tenth(x: int) -> int:
    """The smallest power of ten greater than ``x`` (1 for ``x`` of 0)."""
    result = 1
    while x // result > 0:
        result *= 10
    return result


class Op(Enum):
    """Operators applied strictly left to right."""

    ADD = "+"
    MUL = "*"
    CON = "||"

    def eval(self, a: int, b: int) -> int:
        if self is Op.ADD:
            return a + b
        if self is Op.MUL:
            return a * b
        return a * max_tenth(b) + b


ALL_OPS: tuple[Op, ...] = tuple(Op)
BASIC_OPS: tuple[Op, ...] = (Op.ADD, Op.MUL)


@dataclass(frozen=True)
class Equation:
    """A test value and the numbers that should combine into it."""

    value: int
    numbers: tuple[int, ...]

    @classmethod
    def parse(cls, line: str) -> Equation:
        """Parse a line such as ``190: 10 19``."""
        head, sep, tail = line.strip().partition(":")
        if not sep:
            raise ValueError(f"missing ':' in equation: {line!r}")
        numbers = tuple(int(part) for part in tail.split())
        if not numbers:
            raise ValueError(f"equation has no numbers: {line!r}")
        return cls(int(head), numbers)

    def is_valid(self, ops: Iterable[Op] = ALL_OPS) -> bool:
        """Whether some choice of operators yields the test value."""
        ops = tuple(ops)
        results = {self.numbers[0]}
        for n in self.numbers[1:]:
            results = {op.eval(r, n) for r in results for op in ops}
        return self.value in results


def total_calibration(lines: Iterable[str], ops: Iterable[Op] = ALL_OPS) -> int:
    """Sum the test values of the equations that can be made true."""
    ops = tuple(ops)
    equations = (Equation.parse(line) for line in lines if line.strip())
    return sum(eq.value for eq in equations if eq.is_valid(ops))


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--part", type=int, choices=(1, 2), default=2)
    args = parser.parse_args(argv)
    ops = BASIC_OPS if args.part == 1 else ALL_OPS
    print(total_calibration(sys.stdin, ops))


if __name__ == "__main__":
    main()