"""Word search puzzles: finding XMAS and crossed MAS patterns."""

from __future__ import annotations

from collections.abc import Iterable

Point = tuple[int, int]

_ALL_DIRECTIONS: tuple[Point, ...] = (
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
    (1, 1),
    (1, -1),
    (-1, 1),
    (-1, -1),
)

_DIAGONALS: tuple[Point, ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))


class WordGrid:
    """A rectangular grid of letters."""

    def __init__(self, lines: Iterable[str]) -> None:
        rows = tuple(lines)
        widths = {len(row) for row in rows}
        if len(widths) != 1:
            raise ValueError(f"lines with different widths detected: {sorted(widths)}")
        (self.width,) = widths
        self.height = len(rows)
        self.rows = rows

    def get_at(self, x: int, y: int) -> str | None:
        """The letter at (x, y), or None off the grid."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.rows[y][x]
        return None

    def is_word(self, start: Point, direction: Point, word: str) -> bool:
        """Whether ``word`` is spelled from ``start`` stepping by ``direction``."""
        (x, y), (dx, dy) = start, direction
        return all(
            self.get_at(x + dx * i, y + dy * i) == char for i, char in enumerate(word)
        )

    def is_cross(self, start: Point, direction: Point) -> bool:
        """Whether MAS runs from ``start`` along ``direction`` and is crossed by another MAS."""
        (x, y), (dx, dy) = start, direction
        mid_x, mid_y = x + dx, y + dy
        if not self.is_word(start, direction, "MAS"):
            return False
        return any(
            self.is_word((mid_x - ax, mid_y - ay), (ax, ay), "MAS")
            for ax, ay in ((-dy, dx), (dy, -dx))
        )

    def _points(self):
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)


def _grid(text: str) -> WordGrid:
    return WordGrid(line.strip() for line in text.splitlines())


def part_one(text: str) -> int:
    """Count every occurrence of XMAS in any of the eight directions."""
    grid = _grid(text)
    return sum(
        1
        for point in grid._points()
        for direction in _ALL_DIRECTIONS
        if grid.is_word(point, direction, "XMAS")
    )


def part_two(text: str) -> int:
    """Count the X-shaped pairs of MAS."""
    grid = _grid(text)
    count = sum(
        1
        for point in grid._points()
        for direction in _DIAGONALS
        if grid.is_cross(point, direction)
    )
    # each cross is found once from each of its two diagonals
    return count // 2