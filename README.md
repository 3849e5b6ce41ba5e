# advent2025

Solutions to the first four puzzles of Advent of Code 2025. Each day has its
own module with the functions `part1(text)` and `part2(text)`. Each function
takes the puzzle input as a string and returns the answer as an integer.

| Module             | Puzzle |
|--------------------|--------|
| `advent2025.day1`  | A dial with positions 0–99 that starts at 50 and is turned left and right. Part 1 counts the turns that leave it on 0. Part 2 counts every click that moves it away from 0. |
| `advent2025.day2`  | Ranges of product IDs. Part 1 adds up the IDs made of one digit sequence repeated exactly twice. Part 2 adds up those made of a sequence repeated at least twice. |
| `advent2025.day3`  | Banks of battery digits. The best joltage of a bank is the largest number formed by picking digits in order: 2 of them in part 1, 12 in part 2. |
| `advent2025.day4`  | A grid of paper rolls (`@`). Part 1 counts the rolls with fewer than four rolls around them. Part 2 removes such rolls repeatedly and counts how many are removed in all. |

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

Each day has a command. It reads the puzzle input from the file named as its
first argument, or from `input.txt` in the current directory if no file is
named. It prints the answer to part 1 on one line and the answer to part 2 on
the next:

```
advent2025-day1
advent2025-day2 my-input.txt
advent2025-day3
advent2025-day4
```

Each module can also be run directly, for example
`python -m advent2025.day1 input.txt`.

## Library use

```python
from advent2025 import day1, day3

print(day1.part2("R1000"))                 # 10
print(day3.max_joltage([9, 8, 7, 6, 5], 2))  # 98
```

Other helpers:

- `day1.parse_input(text)` turns the rotation list (`L68`, `R14`, ...) into
  `(Direction, distance)` pairs. `day1.Direction.from_char` raises
  `ValueError` for any letter other than `L` or `R`.
- `day2.parse_ranges(text)` reads the comma-separated `low-high` ranges into
  `IDRange` objects. Iterating over an `IDRange` yields every ID in it,
  including both ends. `day2.to_digits` and `day2.is_all_same` are the digit
  helpers the solutions use.
- `day3.parse_banks(text)` reads one bank of digits per line and raises
  `ValueError` on any other character. `day3.max_joltage(bank, count)` picks
  the digits greedily.
- `day4.Grid.parse(text)` builds the roll grid. The grid has `height()`,
  `width()`, `neighbours(x, y)`, `accessible(x, y)` and `remove(points)`
  methods.

## Scope

Only days 1 to 4 are solved. The package has no modules or commands for later
days.