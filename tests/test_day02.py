import pytest

from advent2024.day02 import (
    is_safe,
    is_safe_with_dampener,
    parse_reports,
    part_one,
    part_two,
)

SAMPLE = """\
7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
"""


def test_sample_part_one():
    assert part_one(SAMPLE) == 2


def test_sample_part_two():
    assert part_two(SAMPLE) == 4


def test_parse_reports_skips_blank_lines_and_splits_on_whitespace():
    assert parse_reports("1 2\t3\n\n  4   5  \n") == [[1, 2, 3], [4, 5]]


def test_parse_reports_rejects_non_numbers():
    with pytest.raises(ValueError, match="invalid level"):
        parse_reports("1 2 x\n")


@pytest.mark.parametrize(
    "report, expected",
    [
        ([7, 6, 4, 2, 1], True),
        ([1, 2, 7, 8, 9], False),
        ([9, 7, 6, 2, 1], False),
        ([1, 3, 2, 4, 5], False),
        ([8, 6, 4, 4, 1], False),
        ([1, 3, 6, 7, 9], True),
        ([5], True),
    ],
)
def test_is_safe(report, expected):
    assert is_safe(report) is expected


@pytest.mark.parametrize(
    "report, expected",
    [
        ([7, 6, 4, 2, 1], True),
        ([1, 2, 7, 8, 9], False),
        ([9, 7, 6, 2, 1], False),
        ([1, 3, 2, 4, 5], True),
        ([8, 6, 4, 4, 1], True),
        ([1, 3, 6, 7, 9], True),
    ],
)
def test_is_safe_with_dampener(report, expected):
    assert is_safe_with_dampener(report) is expected


def test_dampener_can_drop_first_level():
    assert is_safe([10, 1, 2, 3]) is False
    assert is_safe_with_dampener([10, 1, 2, 3]) is True