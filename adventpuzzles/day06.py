"""Guard patrol: trace the guard's route and find obstacle spots that trap it in a loop."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

Coord = tuple[int, int]


class Direction(Enum):
    """Heading of the guard as an (dx, dy) step."""

    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    def turn_right(self) -> Direction:
        """The heading after a quarter turn clockwise."""
        order = list(Direction)
        return order[(order.index(self) + 1) % len(order)]

    def step(self, position: Coord) -> Coord:
        """The coordinate one step ahead of position."""
        dx, dy = self.value
        return position[0] + dx, position[1] + dy


@dataclass(frozen=True)
class Grid:
    """The lab floor: all tiles, the obstacles among them and the guard's start."""

    cells: frozenset[Coord]
    obstacles: frozenset[Coord]
    start: Coord

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Grid:
        """Build a grid from rows of '.', '#' and a single '^' for the guard."""
        cells: set[Coord] = set()
        obstacles: set[Coord] = set()
        start: Coord = (0, 0)
        for y, row in enumerate(lines):
            for x, char in enumerate(row):
                coord = (x, y)
                if char == "#":
                    obstacles.add(coord)
                elif char == "^":
                    start = coord
                elif char != ".":
                    raise ValueError(f"unexpected tile {char!r} at {coord}")
                cells.add(coord)
        return cls(frozenset(cells), frozenset(obstacles), start)

    def _steps(self, obstacles: frozenset[Coord] | None = None) -> Iterator[tuple[Coord, Direction]]:
        """Yield every tile and heading the guard moves into until it leaves the grid."""
        blocked = self.obstacles if obstacles is None else obstacles
        position, heading = self.start, Direction.UP
        while True:
            ahead = heading.step(position)
            if ahead not in self.cells:
                return
            if ahead in blocked:
                heading = heading.turn_right()
                continue
            position = ahead
            yield position, heading

    def _loops_with(self, obstacles: frozenset[Coord]) -> bool:
        seen: set[tuple[Coord, Direction]] = set()
        for state in self._steps(obstacles):
            if state in seen:
                return True
            seen.add(state)
        return False


def visited_tile_count(lines: Iterable[str]) -> int:
    """Number of distinct tiles the guard covers, its start included."""
    grid = Grid.from_lines(lines)
    visited = {grid.start}
    visited.update(position for position, _ in grid._steps())
    return len(visited)


def loop_position_count(lines: Iterable[str]) -> int:
    """Number of tiles on the guard's route where a new obstacle causes a loop."""
    grid = Grid.from_lines(lines)
    tested: set[Coord] = set()
    looping = 0
    for position, _ in grid._steps():
        if position == grid.start or position in tested:
            continue
        tested.add(position)
        if grid._loops_with(grid.obstacles | {position}):
            looping += 1
    return looping