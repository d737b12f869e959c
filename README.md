# advent_solvers

Solvers for a set of daily programming puzzles. Each day lives in its own
module and comes with a command. The command reads the puzzle input from
standard input and prints the answer.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

Every command reads its puzzle input on standard input. Where a day has two
parts, `--part 1` or `--part 2` picks one. The default is part 2.

```
advent-day04 < input.txt   # word search: XMAS (part 1) or X-shaped MAS (part 2)
advent-day05 < input.txt   # page ordering: correct middles (1) or repaired middles (2)
advent-day07 < input.txt   # calibration equations: + and * (1), or + * and || (2)
advent-day09 < input.txt   # disk compaction checksum: by block (1) or by whole file (2)
advent-day20 < input.txt   # racetrack cheats of up to 20 steps
advent-day21 < input.txt   # keypad robot chain: 2 (1) or 25 (2) directional keypads
advent-day22 < input.txt   # secret numbers: sum after 2000 steps (1) or best bananas (2)
advent-day23 < input.txt   # network: triangles with a t-computer (1) or a large clique (2)
advent-day25 < input.txt   # count the lock and key pairs that fit
```

For `advent-day20` the first line of input is the smallest saving that
counts. The racetrack map follows on the lines after it.

## Library use

The solvers can also be called directly:

```python
from advent_solvers.day22 import sum_secrets, best_bananas

print(sum_secrets([1, 10, 100, 2024], 2000))  # 37327623
print(best_bananas([1, 2, 3, 2024]))          # 23
```

```python
from advent_solvers.day21 import KeypadChain

print(KeypadChain(2).shortest_code("029A"))   # 68
```

```python
from advent_solvers.grid import Grid, XY

grid = Grid.from_lines(["..#A#", ".....", "#.c.#"])
grid.is_within(XY(4, 2))  # True
grid.is_within(XY(5, 0))  # False
```

`advent_solvers.grid` holds the shared pieces for two-dimensional puzzles:

- the `XY` coordinate, which supports `+`, `-` and `*`;
- the four-way `Direction`;
- the `Node` cell kinds;
- the `Grid` itself.

Reading or setting a node outside the grid raises `IndexError`. It does not
wrap around.

## What is not included

This package covers only the days listed above. It has no solvers for these
puzzles:

- the corrupted-memory multiplication puzzle;
- the guard patrol puzzle;
- the antenna antinode puzzle;
- the logic-gate circuit puzzle.

The package has no commands for those puzzles either.