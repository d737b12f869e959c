"""Solvers for a season of daily programming puzzles, with shared grid helpers."""

__version__ = "0.1.0"