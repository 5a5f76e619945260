import pytest

from advent2024.day10 import TopoMap, part_one, part_two

SAMPLE1 = """\
0123
1234
8765
9876
"""

SAMPLE2 = """\
89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732
"""


def _map(text):
    return TopoMap.parse(line.strip() for line in text.splitlines())


def test_sample1_part_one():
    assert part_one(SAMPLE1) == 1


def test_sample2_part_one():
    assert part_one(SAMPLE2) == 36


def test_sample2_part_two():
    assert part_two(SAMPLE2) == 81


def test_scores_in_reading_order():
    topo = _map(SAMPLE2)
    assert [topo.score(p) for p in topo.find_all(0)] == [5, 6, 5, 3, 1, 3, 5, 3, 5]


def test_ratings_in_reading_order():
    topo = _map(SAMPLE2)
    assert [topo.rating(p) for p in topo.find_all(0)] == [20, 24, 10, 4, 1, 4, 5, 8, 5]


def test_get_on_and_off_map():
    topo = _map(SAMPLE1)
    assert topo.get(0, 0) == 0
    assert topo.get(3, 0) == 3
    assert topo.get(0, 3) == 9
    assert topo.get(4, 0) is None
    assert topo.get(-1, 0) is None
    assert topo.get(0, 4) is None


def test_find_all():
    topo = _map(SAMPLE1)
    assert topo.find_all(9) == [(0, 3)]
    assert topo.find_all(1) == [(1, 0), (0, 1)]


def test_single_row_trail():
    topo = _map("0123456789")
    assert topo.score((0, 0)) == 1
    assert topo.rating((0, 0)) == 1
    assert topo.score((5, 0)) == 1


def test_uneven_rows_rejected():
    with pytest.raises(ValueError, match="same length"):
        part_one("012\n01\n")


def test_bad_height_rejected():
    with pytest.raises(ValueError, match="unhandled map height"):
        part_one("01.\n012\n")