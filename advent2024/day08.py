"""Antenna antinodes on a city map."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

Point = tuple[int, int]


@dataclass(frozen=True)
class AntennaMap:
    """A rectangular map and the antennas on it, grouped by frequency."""

    width: int
    height: int
    towers: dict[str, list[Point]]

    @classmethod
    def parse(cls, lines: Iterable[str]) -> AntennaMap:
        """Build a map from rows where ``.`` is empty and any other character is an antenna.

        Blank lines are ignored.
        """
        rows = [row for row in (line.strip() for line in lines) if row]
        widths = {len(row) for row in rows}
        if len(widths) != 1:
            raise ValueError(f"uneven row lengths: {sorted(widths)}")
        (width,) = widths

        towers: dict[str, list[Point]] = {}
        for y, row in enumerate(rows):
            for x, char in enumerate(row):
                if char != ".":
                    towers.setdefault(char, []).append((x, y))
        return cls(width, len(rows), towers)

    def tower_pairs(self) -> Iterator[tuple[str, Point, Point]]:
        """Yield every unordered pair of antennas sharing a frequency."""
        for kind, towers in self.towers.items():
            for a, b in itertools.combinations(towers, 2):
                yield kind, a, b

    def contains(self, point: Point) -> bool:
        """Whether the point lies on the map."""
        x, y = point
        return 0 <= x < self.width and 0 <= y < self.height


def _map(text: str) -> AntennaMap:
    return AntennaMap.parse(text.splitlines())


def part_one(text: str) -> int:
    """Count the distinct on-map antinodes one step beyond each antenna pair."""
    grid = _map(text)
    antinodes: set[Point] = set()
    for _, (ax, ay), (bx, by) in grid.tower_pairs():
        dx, dy = bx - ax, by - ay
        for candidate in ((ax - dx, ay - dy), (bx + dx, by + dy)):
            if grid.contains(candidate):
                antinodes.add(candidate)
    return len(antinodes)


def part_two(text: str) -> int:
    """Count the distinct on-map antinodes along the full line of each antenna pair."""
    grid = _map(text)
    antinodes: set[Point] = set()
    for _, (ax, ay), (bx, by) in grid.tower_pairs():
        antinodes.add((ax, ay))
        antinodes.add((bx, by))
        dx, dy = bx - ax, by - ay
        point = (ax - dx, ay - dy)
        while grid.contains(point):
            antinodes.add(point)
            point = (point[0] - dx, point[1] - dy)
        point = (bx + dx, by + dy)
        while grid.contains(point):
            antinodes.add(point)
            point = (point[0] + dx, point[1] + dy)
    return len(antinodes)