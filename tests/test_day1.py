import pytest

from advent2025.day1 import Direction, main, parse_input, part1, part2

EXAMPLE = "L68\nL30\nR48\nL5\nR60\nL55\nL1\nL99\nR14\nL82\n"


@pytest.mark.parametrize(
    "solve, text, expected",
    [
        (part1, EXAMPLE, 3),
        (part2, EXAMPLE, 6),
        (part2, "R1000", 10),
        (part1, "L50", 1),
        (part1, "R50", 1),
        (part1, "R49", 0),
        (part2, "L50", 0),
        (part2, "L50\nL1", 1),
    ],
)
def test_parts(solve, text, expected):
    assert solve(text) == expected


@pytest.mark.parametrize("char, direction", [("L", Direction.L), ("R", Direction.R)])
def test_direction_from_char(char, direction):
    assert Direction.from_char(char) is direction


def test_direction_unknown():
    with pytest.raises(ValueError):
        Direction.from_char("X")


def test_parse_input():
    assert parse_input("L68\nR14") == [(Direction.L, 68), (Direction.R, 14)]


def test_main_reads_named_file(tmp_path, capsys):
    path = tmp_path / "rotations.txt"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.split() == ["3", "6"]