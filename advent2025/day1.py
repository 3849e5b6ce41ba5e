"""Dial rotations: count how often the dial rests on or passes through zero."""

from __future__ import annotations

import sys
from collections.abc import Callable
from enum import Enum
from pathlib import Path

DIAL_SIZE = 100
START = 50


class Direction(Enum):
    """Direction in which the dial is turned."""

    L = "L"
    R = "R"

    @classmethod
    def from_char(cls, char: str) -> "Direction":
        """Return the direction named by a single character."""
        try:
            return cls(char)
        except ValueError:
            raise ValueError(f"Unknown direction: {char!r}") from None


def parse_input(text: str) -> list[tuple[Direction, int]]:
    """Parse one rotation per line, such as ``L68`` or ``R14``."""
    actions = []
    for line in text.splitlines():
        if not line:
            raise ValueError("Empty line in rotation list")
        actions.append((Direction.from_char(line[0]), int(line[1:])))
    return actions


def part1(text: str) -> int:
    """Count the rotations after which the dial points at zero."""
    value = START
    count = 0
    for direction, amount in parse_input(text):
        step = -amount if direction is Direction.L else amount
        value = (value + step) % DIAL_SIZE
        count += value == 0
    return count


def _zero_starts(first_hit: int, steps: int) -> int:
    """Count steps k in [0, steps) with k congruent to first_hit modulo the dial size."""
    if steps <= first_hit:
        return 0
    return (steps - 1 - first_hit) // DIAL_SIZE + 1


def part2(text: str) -> int:
    """Count every click that moves the dial away from zero."""
    value = START
    count = 0
    for direction, amount in parse_input(text):
        if amount <= 0:
            continue
        if direction is Direction.L:
            count += _zero_starts(value, amount)
            value = (value - amount) % DIAL_SIZE
        else:
            count += _zero_starts((-value) % DIAL_SIZE, amount)
            value = (value + amount) % DIAL_SIZE
    return count


def _report(argv: list[str] | None, *solvers: Callable[[str], int]) -> int:
    """Read the puzzle input named in argv (default ``input.txt``) and print each answer."""
    args = sys.argv[1:] if argv is None else argv
    text = Path(args[0] if args else "input.txt").read_text()
    for solve in solvers:
        print(solve(text))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Solve both parts for the puzzle input file and print the answers."""
    return _report(argv, part1, part2)


if __name__ == "__main__":
    raise SystemExit(main())