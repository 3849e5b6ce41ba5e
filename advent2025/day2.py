"""Invalid product IDs: numbers made of a repeated digit sequence."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from advent2025.day1 import _report


@dataclass(frozen=True)
class IDRange:
    """Inclusive range of product IDs."""

    low: int
    high: int

    @classmethod
    def parse(cls, text: str) -> "IDRange":
        """Parse a range written as ``low-high``."""
        parts = text.split("-")
        if len(parts) < 2:
            raise ValueError(f"Malformed ID range: {text!r}")
        return cls(int(parts[0]), int(parts[1]))

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.low, self.high + 1))


def parse_ranges(text: str) -> list[IDRange]:
    """Parse a comma separated list of ID ranges."""
    return [IDRange.parse(item) for item in text.split(",")]


def to_digits(value: int) -> list[int]:
    """Return the decimal digits of a number; zero has none."""
    digits = []
    while value > 0:
        value, digit = divmod(value, 10)
        digits.append(digit)
    digits.reverse()
    return digits


def is_all_same(items: Sequence) -> bool:
    """Tell whether every item equals the first; true for an empty sequence."""
    return all(item == items[0] for item in items) if items else True


def _chunks(digits: list[int], size: int) -> list[list[int]]:
    return [digits[start:start + size] for start in range(0, len(digits), size)]


def _repeated_twice(digits: list[int]) -> bool:
    half, odd = divmod(len(digits), 2)
    return not odd and digits[:half] == digits[half:]


def _repeated_any(digits: list[int]) -> bool:
    return any(is_all_same(_chunks(digits, size)) for size in range(1, len(digits)))


def _sum_matching(text: str, matches) -> int:
    return sum(
        number
        for id_range in parse_ranges(text)
        for number in id_range
        if matches(to_digits(number))
    )


def part1(text: str) -> int:
    """Sum the IDs made of one digit sequence repeated exactly twice."""
    return _sum_matching(text, _repeated_twice)


def part2(text: str) -> int:
    """Sum the IDs made of one digit sequence repeated at least twice."""
    return _sum_matching(text, _repeated_any)


def main(argv: list[str] | None = None) -> int:
    """Solve both parts for the puzzle input file and print the answers."""
    return _report(argv, part1, part2)


if __name__ == "__main__":
    raise SystemExit(main())