"""Paper roll grid: count rolls a forklift can reach and remove."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from advent2025.day1 import _report

_OFFSETS = [(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if dx or dy]


@dataclass
class Grid:
    """Grid of cells, each holding a roll of paper or not."""

    points: list[list[bool]]

    @classmethod
    def parse(cls, text: str) -> "Grid":
        """Parse a grid where ``@`` marks a roll of paper."""
        return cls([[char == "@" for char in line] for line in text.splitlines()])

    def height(self) -> int:
        return len(self.points)

    def width(self) -> int:
        return len(self.points[0])

    def neighbours(self, x: int, y: int) -> list[tuple[int, int]]:
        """Return the in-bounds cells around a position."""
        width, height = self.width(), self.height()
        return [
            (x + dx, y + dy)
            for dx, dy in _OFFSETS
            if 0 <= x + dx < width and 0 <= y + dy < height
        ]

    def accessible(self, x: int, y: int) -> bool:
        """Tell whether a roll sits here with fewer than four rolls around it."""
        if not self.points[y][x]:
            return False
        around = sum(self.points[ny][nx] for nx, ny in self.neighbours(x, y))
        return around < 4

    def remove(self, points: Iterable[tuple[int, int]]) -> None:
        """Clear the given positions."""
        for x, y in points:
            self.points[y][x] = False

    def accessible_points(self) -> list[tuple[int, int]]:
        return [
            (x, y)
            for y, row in enumerate(self.points)
            for x in range(len(row))
            if self.accessible(x, y)
        ]


def part1(text: str) -> int:
    """Count the rolls that are accessible at the start."""
    return len(Grid.parse(text).accessible_points())


def part2(text: str) -> int:
    """Count the rolls removed by repeatedly taking every accessible one."""
    grid = Grid.parse(text)
    total = 0
    while removals := grid.accessible_points():
        total += len(removals)
        grid.remove(removals)
    return total


def main(argv: list[str] | None = None) -> int:
    """Solve both parts for the puzzle input file and print the answers."""
    return _report(argv, part1, part2)


if __name__ == "__main__":
    raise SystemExit(main())