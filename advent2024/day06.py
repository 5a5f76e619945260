"""Guard patrol simulation on a lab floor map."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

Point = tuple[int, int]


class Direction(Enum):
    """A direction the guard can face."""

    UP = "^"
    DOWN = "v"
    LEFT = "<"
    RIGHT = ">"

    def vector(self) -> Point:
        """Return the (dx, dy) step for this direction."""
        return _VECTORS[self]

    def turn_right(self) -> Direction:
        """Return the direction after a 90 degree clockwise turn."""
        return _RIGHT_TURNS[self]


_VECTORS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_RIGHT_TURNS = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}


@dataclass(frozen=True)
class Guard:
    """The guard's position and facing."""

    position: Point
    direction: Direction


@dataclass
class Lab:
    """The lab floor: its obstacles, the guard and the cells the guard has visited."""

    width: int
    height: int
    obstacles: set[Point]
    guard: Guard
    visited: set[Point] = field(default_factory=set)

    @classmethod
    def parse(cls, lines) -> Lab:
        """Build a lab from map lines; blank lines are ignored."""
        rows = [line for line in lines if line]
        widths = {len(row) for row in rows}
        if len(widths) != 1:
            raise ValueError(f"expected unique width, got {sorted(widths)}")
        (width,) = widths

        obstacles: set[Point] = set()
        guard: Guard | None = None
        for y, row in enumerate(rows):
            for x, char in enumerate(row):
                if char == "#":
                    obstacles.add((x, y))
                elif char == ".":
                    continue
                else:
                    try:
                        direction = Direction(char)
                    except ValueError:
                        raise ValueError(f"unhandled char: {char}") from None
                    if guard is not None:
                        raise ValueError("two guard locations found")
                    guard = Guard((x, y), direction)
        if guard is None:
            raise ValueError("no guard")

        lab = cls(width, len(rows), obstacles, guard)
        lab._visit(guard.position)
        return lab

    def contains(self, point: Point) -> bool:
        """Whether the point lies inside the map."""
        x, y = point
        return 0 <= x < self.width and 0 <= y < self.height

    def is_obstacle(self, point: Point) -> bool:
        """Whether the point holds an obstacle; points off the map never do."""
        return self.contains(point) and point in self.obstacles

    def add_obstacle(self, point: Point) -> None:
        """Place an obstacle at the point if it lies on the map."""
        if self.contains(point):
            self.obstacles.add(point)

    def guard_in_bounds(self) -> bool:
        """Whether the guard is still on the map."""
        return self.contains(self.guard.position)

    def _visit(self, point: Point) -> None:
        if self.contains(point):
            self.visited.add(point)

    def _ahead(self) -> Point:
        (x, y), (dx, dy) = self.guard.position, self.guard.direction.vector()
        return (x + dx, y + dy)

    def advance(self) -> None:
        """Turn right if blocked, otherwise take one step forward."""
        ahead = self._ahead()
        if self.is_obstacle(ahead):
            self.guard = replace(self.guard, direction=self.guard.direction.turn_right())
        else:
            self.guard = replace(self.guard, position=ahead)
            self._visit(ahead)

    def find_path(self) -> tuple[bool, list[Guard]]:
        """Simulate on a copy; return whether the path loops, and the guard states seen."""
        state = self.copy()
        path = [state.guard]
        seen = {state.guard}
        while state.guard_in_bounds():
            state.advance()
            if state.guard in seen:
                return True, path
            path.append(state.guard)
            seen.add(state.guard)
        return False, path

    def copy(self) -> Lab:
        """Return an independent copy of this lab."""
        return Lab(self.width, self.height, set(self.obstacles), self.guard, set(self.visited))

    def visited_count(self) -> int:
        """Number of distinct cells the guard has visited."""
        return len(self.visited)

    def __str__(self) -> str:
        rows = []
        for y in range(self.height):
            cells = []
            for x in range(self.width):
                point = (x, y)
                if self.guard.position == point:
                    cells.append(self.guard.direction.value)
                elif self.is_obstacle(point):
                    cells.append("#")
                else:
                    cells.append(".")
            rows.append("".join(cells) + "\n")
        return "".join(rows)


def _lines(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines()]


def part_one(text: str) -> int:
    """Count the cells the guard visits before leaving the map."""
    lab = Lab.parse(_lines(text))
    while lab.guard_in_bounds():
        lab.advance()
    return lab.visited_count()


def part_two(text: str) -> int:
    """Count the single-obstacle placements on the guard's path that trap it in a loop."""
    lab = Lab.parse(_lines(text))
    _, path = lab.find_path()
    candidates = set()
    for guard in path:
        (x, y), (dx, dy) = guard.position, guard.direction.vector()
        candidates.add((x + dx, y + dy))

    loops = 0
    for obstacle in candidates:
        trial = lab.copy()
        trial.add_obstacle(obstacle)
        is_loop, _ = trial.find_path()
        if is_loop:
            loops += 1
    return loops