"""Battery banks: pick digits in order to form the largest joltage."""

from __future__ import annotations

from advent2025.day1 import _report

_DIGITS = "0123456789"


def parse_banks(text: str) -> list[list[int]]:
    """Parse one bank of single-digit batteries per line."""
    banks = []
    for line in text.splitlines():
        bad = [char for char in line if char not in _DIGITS]
        if bad:
            raise ValueError(f"Not a battery digit: {bad[0]!r}")
        banks.append([int(char) for char in line])
    return banks


def max_joltage(bank: list[int], count: int) -> int:
    """Greedily pick ``count`` batteries in order to form the largest number."""
    if len(bank) < count - 1:
        raise ValueError(f"Bank of {len(bank)} batteries is too short for {count} digits")
    digits = []
    start = 0
    for remaining in range(count - 1, -1, -1):
        best = 0
        best_index = 0
        window = bank[start:len(bank) - remaining]
        for index, battery in enumerate(window, start):
            if battery > best:
                best, best_index = battery, index
        digits.append(best)
        start = best_index + 1
    return int("".join(map(str, digits)))


def _total(text: str, count: int) -> int:
    return sum(max_joltage(bank, count) for bank in parse_banks(text))


def part1(text: str) -> int:
    """Sum the best two-battery joltage of every bank."""
    return _total(text, 2)


def part2(text: str) -> int:
    """Sum the best twelve-battery joltage of every bank."""
    return _total(text, 12)


def main(argv: list[str] | None = None) -> int:
    """Solve both parts for the puzzle input file and print the answers."""
    return _report(argv, part1, part2)


if __name__ == "__main__":
    raise SystemExit(main())