from advent2025.day4 import Grid, main, part1, part2

EXAMPLE = """..@@.@@@@.
@@@.@@@.@@
@@@@@.@.@@
@.@@@@..@.
@@.@@@@.@@
.@@@@@@@.@
.@.@.@@@@@
@.@@@.@@@.
@@@@@@@@@.
@.@.@@@.@.
"""


def test_p1():
    assert part1(EXAMPLE) == 13


def test_parse_and_size():
    grid = Grid.parse("@.\n.@\n@@")
    assert grid.points == [[True, False], [False, True], [True, True]]
    assert grid.height() == 3
    assert grid.width() == 2


def test_neighbours_corner_and_centre():
    grid = Grid.parse("...\n...\n...")
    assert sorted(grid.neighbours(0, 0)) == [(0, 1), (1, 0), (1, 1)]
    assert len(grid.neighbours(1, 1)) == 8


def test_accessible():
    grid = Grid.parse("@@@\n@@@\n@@@")
    assert grid.accessible(0, 0) is True
    assert grid.accessible(1, 1) is False
    assert Grid.parse(".").accessible(0, 0) is False


def test_remove():
    grid = Grid.parse("@@\n@@")
    grid.remove([(0, 0), (1, 1)])
    assert grid.points == [[False, True], [True, False]]


def test_full_block_removed_entirely():
    assert part2("@@@\n@@@\n@@@") == 9
    assert part1("@@@\n@@@\n@@@") == 4