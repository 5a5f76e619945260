import pytest

from advent2024.day06 import Direction, Guard, Lab, part_one, part_two

SAMPLE = """\
....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""

LOOP_MAP = [
    ".#..",
    ".^.#",
    "#...",
    "..#.",
]


def test_sample_part_one():
    assert part_one(SAMPLE) == 41


def test_sample_part_two():
    assert part_two(SAMPLE) == 6


def test_turn_right_cycles():
    d = Direction.UP
    seen = []
    for _ in range(4):
        d = d.turn_right()
        seen.append(d)
    assert seen == [Direction.RIGHT, Direction.DOWN, Direction.LEFT, Direction.UP]


def test_vectors():
    assert Direction.UP.vector() == (0, -1)
    assert Direction.DOWN.vector() == (0, 1)
    assert Direction.LEFT.vector() == (-1, 0)
    assert Direction.RIGHT.vector() == (1, 0)


def test_parse_sample():
    lab = Lab.parse(SAMPLE.splitlines())
    assert (lab.width, lab.height) == (10, 10)
    assert lab.guard == Guard((4, 6), Direction.UP)
    assert lab.visited_count() == 1
    assert lab.is_obstacle((4, 0))
    assert not lab.is_obstacle((0, 0))


def test_str_round_trip():
    lab = Lab.parse(SAMPLE.splitlines())
    assert str(lab) == SAMPLE


def test_parse_ignores_blank_lines():
    lab = Lab.parse(["", "..", ".>", ""])
    assert lab.height == 2
    assert lab.guard == Guard((1, 1), Direction.RIGHT)


@pytest.mark.parametrize(
    "lines, message",
    [
        (["...", "..."], "no guard"),
        (["^.^"], "two guard"),
        (["^..", ".."], "unique width"),
        (["^.x"], "unhandled char"),
        ([], "unique width"),
    ],
)
def test_parse_errors(lines, message):
    with pytest.raises(ValueError, match=message):
        Lab.parse(lines)


def test_out_of_bounds_checks():
    lab = Lab.parse(["#.", ".^"])
    assert not lab.contains((-1, 0))
    assert not lab.contains((2, 0))
    assert not lab.is_obstacle((5, 5))
    lab.add_obstacle((5, 5))
    assert (5, 5) not in lab.obstacles
    lab.add_obstacle((1, 0))
    assert lab.is_obstacle((1, 0))


def test_advance_turns_and_moves():
    lab = Lab.parse(["#.", "^."])
    lab.advance()
    assert lab.guard == Guard((0, 1), Direction.RIGHT)
    lab.advance()
    assert lab.guard == Guard((1, 1), Direction.RIGHT)
    assert lab.visited == {(0, 1), (1, 1)}
    lab.advance()
    assert not lab.guard_in_bounds()
    assert lab.visited_count() == 2


def test_find_path_escapes_without_mutating():
    lab = Lab.parse(SAMPLE.splitlines())
    is_loop, path = lab.find_path()
    assert is_loop is False
    assert path[0] == Guard((4, 6), Direction.UP)
    assert not lab.contains(path[-1].position)
    assert lab.guard == Guard((4, 6), Direction.UP)
    assert lab.visited_count() == 1


def test_find_path_detects_loop():
    lab = Lab.parse(LOOP_MAP)
    is_loop, path = lab.find_path()
    assert is_loop is True
    assert path == [
        Guard((1, 1), Direction.UP),
        Guard((1, 1), Direction.RIGHT),
        Guard((2, 1), Direction.RIGHT),
        Guard((2, 1), Direction.DOWN),
        Guard((2, 2), Direction.DOWN),
        Guard((2, 2), Direction.LEFT),
        Guard((1, 2), Direction.LEFT),
        Guard((1, 2), Direction.UP),
    ]


def test_copy_is_independent():
    lab = Lab.parse(SAMPLE.splitlines())
    clone = lab.copy()
    clone.add_obstacle((3, 6))
    clone.advance()
    assert not lab.is_obstacle((3, 6))
    assert lab.guard == Guard((4, 6), Direction.UP)
    assert clone.is_obstacle((3, 6))
    assert clone.guard == Guard((4, 5), Direction.UP)


def test_obstacle_creates_loop_in_sample():
    lab = Lab.parse(SAMPLE.splitlines())
    lab.add_obstacle((3, 6))
    is_loop, _ = lab.find_path()
    assert is_loop is True