[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent_solvers"
version = "0.1.0"
description = "Solvers for a season of daily programming puzzles: word searches, orderings, grids, keypads, graphs and more."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "grid", "graph", "solver"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
advent-day04 = "advent_solvers.day04:main"
advent-day05 = "advent_solvers.day05:main"
advent-day07 = "advent_solvers.day07:main"
advent-day09 = "advent_solvers.day09:main"
advent-day20 = "advent_solvers.day20:main"
advent-day21 = "advent_solvers.day21:main"
advent-day22 = "advent_solvers.day22:main"
advent-day23 = "advent_solvers.day23:main"
advent-day25 = "advent_solvers.day25:main"

[tool.hatch.build.targets.wheel]
packages = ["advent_solvers"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
