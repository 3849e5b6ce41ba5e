[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent2025"
version = "0.1.0"
description = "Solutions to the 2025 Advent of Code puzzles, days 1 to 4."
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc2025"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
advent2025-day1 = "advent2025.day1:main"
advent2025-day2 = "advent2025.day2:main"
advent2025-day3 = "advent2025.day3:main"
advent2025-day4 = "advent2025.day4:main"

[tool.hatch.build.targets.wheel]
packages = ["advent2025"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
