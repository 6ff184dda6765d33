"""Solvers for daily programming puzzles, one module per day (day01 to day19, and day21)."""

__version__ = "0.1.0"