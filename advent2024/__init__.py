"""Advent of Code 2024 puzzle solutions for days 1 to 12, one module per day."""

__version__ = "0.1.0"