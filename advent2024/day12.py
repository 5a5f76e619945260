"""Garden plot regions and the cost of fencing them."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

Point = tuple[int, int]


def _orthogonal(point: Point) -> Iterator[tuple[str, int, int, Point]]:
    """Yield (side, fence line, position along the line, neighbour) for each side of a cell."""
    x, y = point
    yield "left", x, y, (x - 1, y)
    yield "right", x + 1, y, (x + 1, y)
    yield "up", y, x, (x, y - 1)
    yield "down", y + 1, x, (x, y + 1)


def _perimeter(cells: frozenset[Point]) -> int:
    return sum(
        1
        for cell in cells
        for _, _, _, neighbour in _orthogonal(cell)
        if neighbour not in cells
    )


def _sides(cells: frozenset[Point]) -> int:
    fences: dict[tuple[str, int], list[int]] = defaultdict(list)
    for cell in cells:
        for side, line, location, neighbour in _orthogonal(cell):
            if neighbour not in cells:
                fences[(side, line)].append(location)

    sides = 0
    for locations in fences.values():
        locations.sort()
        sides += 1 + sum(1 for a, b in zip(locations, locations[1:]) if b - a > 1)
    return sides


@dataclass(frozen=True)
class Garden:
    """A rectangular grid of garden plots, each labelled with its plant."""

    width: int
    height: int
    rows: tuple[str, ...]

    @classmethod
    def parse(cls, lines: Iterable[str]) -> Garden:
        """Build a garden from equal-length rows of plant labels."""
        rows = tuple(lines)
        widths = {len(row) for row in rows}
        if len(widths) != 1:
            raise ValueError(
                f"expected all lines to the same length, got {sorted(widths)}"
            )
        (width,) = widths
        return cls(width, len(rows), rows)

    def _plant(self, point: Point) -> str | None:
        x, y = point
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.rows[y][x]
        return None

    def regions(self) -> list[tuple[str, frozenset[Point]]]:
        """Connected regions of the same plant, in row-major order of their first cell."""
        visited: set[Point] = set()
        found: list[tuple[str, frozenset[Point]]] = []
        for y in range(self.height):
            for x in range(self.width):
                start = (x, y)
                if start in visited:
                    continue
                plant = self.rows[y][x]
                cells = {start}
                visited.add(start)
                stack = [start]
                while stack:
                    current = stack.pop()
                    for _, _, _, neighbour in _orthogonal(current):
                        if neighbour not in visited and self._plant(neighbour) == plant:
                            visited.add(neighbour)
                            cells.add(neighbour)
                            stack.append(neighbour)
                found.append((plant, frozenset(cells)))
        return found

    def fence_price(self) -> int:
        """Sum of area times perimeter over all regions."""
        return sum(len(cells) * _perimeter(cells) for _, cells in self.regions())

    def bulk_price(self) -> int:
        """Sum of area times number of straight sides over all regions."""
        return sum(len(cells) * _sides(cells) for _, cells in self.regions())


def _garden(text: str) -> Garden:
    return Garden.parse(line.strip() for line in text.splitlines())


def part_one(text: str) -> int:
    """Total fencing price using perimeters."""
    return _garden(text).fence_price()


def part_two(text: str) -> int:
    """Total fencing price using the bulk discount on straight sides."""
    return _garden(text).bulk_price()