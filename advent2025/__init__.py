"""Solutions to the 2025 Advent of Code puzzles, days 1 to 4."""

__version__ = "0.1.0"
__all__ = ["day1", "day2", "day3", "day4"]