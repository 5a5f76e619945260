"""Hiking trails on a topographic map."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

Point = tuple[int, int]

_DIGITS = "0123456789"
_PEAK = 9


@dataclass(frozen=True)
class TopoMap:
    """A rectangular grid of heights from 0 to 9."""

    width: int
    height: int
    heights: tuple[tuple[int, ...], ...]

    @classmethod
    def parse(cls, lines: Iterable[str]) -> TopoMap:
        """Build a map from equal-length rows of height digits."""
        rows = list(lines)
        widths = {len(row) for row in rows}
        if len(widths) != 1:
            raise ValueError(
                f"expected all lines to be the same length, got {len(widths)}"
            )
        (width,) = widths
        heights = []
        for row in rows:
            values = []
            for char in row:
                if char not in _DIGITS:
                    raise ValueError(f"unhandled map height: {char}")
                values.append(int(char))
            heights.append(tuple(values))
        return cls(width, len(rows), tuple(heights))

    def get(self, x: int, y: int) -> int | None:
        """The height at (x, y), or None off the map."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.heights[y][x]
        return None

    def find_all(self, value: int) -> list[Point]:
        """Every point with the given height, in reading order."""
        return [
            (x, y)
            for y, row in enumerate(self.heights)
            for x, height in enumerate(row)
            if height == value
        ]

    def _neighbours(self, point: Point) -> Iterator[Point]:
        x, y = point
        for candidate in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
            if self.get(*candidate) is not None:
                yield candidate

    def _uphill(self, point: Point) -> Iterator[Point]:
        current = self.get(*point)
        if current is None:
            return
        for neighbour in self._neighbours(point):
            if self.get(*neighbour) == current + 1:
                yield neighbour

    def score(self, start: Point) -> int:
        """Number of distinct peaks reachable from ``start`` by gentle uphill steps."""
        if self.get(*start) is None:
            return 0
        peaks: set[Point] = set()
        seen = {start}
        stack = [start]
        while stack:
            current = stack.pop()
            if self.get(*current) == _PEAK:
                peaks.add(current)
            for neighbour in self._uphill(current):
                if neighbour not in seen:
                    seen.add(neighbour)
                    stack.append(neighbour)
        return len(peaks)

    def rating(self, start: Point) -> int:
        """Number of distinct uphill trails from ``start`` to any peak."""
        height = self.get(*start)
        if height is None:
            return 0
        if height == _PEAK:
            return 1
        return sum(self.rating(neighbour) for neighbour in self._uphill(start))


def _map(text: str) -> TopoMap:
    return TopoMap.parse(line.strip() for line in text.splitlines())


def part_one(text: str) -> int:
    """Sum of the scores of all trailheads."""
    topo = _map(text)
    return sum(topo.score(point) for point in topo.find_all(0))


def part_two(text: str) -> int:
    """Sum of the ratings of all trailheads."""
    topo = _map(text)
    return sum(topo.rating(point) for point in topo.find_all(0))