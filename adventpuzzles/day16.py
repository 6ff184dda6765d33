"""Reindeer maze: cheapest routes where steps cost 1 and quarter turns cost 1000."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

Coord = tuple[int, int]

_UNSEEN = 2**32 // 2 - 1
_STEP_COST = 1
_TURN_COST = 1000


class _Heading(Enum):
    UP = (0, -1)
    LEFT = (-1, 0)
    DOWN = (0, 1)
    RIGHT = (1, 0)

    def left(self) -> _Heading:
        order = [_Heading.UP, _Heading.LEFT, _Heading.DOWN, _Heading.RIGHT]
        return order[(order.index(self) + 1) % 4]

    def right(self) -> _Heading:
        order = [_Heading.UP, _Heading.RIGHT, _Heading.DOWN, _Heading.LEFT]
        return order[(order.index(self) + 1) % 4]

    def ahead(self, coord: Coord) -> Coord:
        return coord[0] + self.value[0], coord[1] + self.value[1]


@dataclass(frozen=True)
class _Trail:
    """A route's visited tiles as a shared, backward-linked list."""

    coord: Coord
    previous: _Trail | None = None

    def tiles(self) -> tuple[Coord, ...]:
        found = []
        node: _Trail | None = self
        while node is not None:
            found.append(node.coord)
            node = node.previous
        return tuple(reversed(found))


@dataclass(frozen=True)
class Route:
    """A route that reached the end: its score and every tile it visited in order."""

    cost: int
    tiles: tuple[Coord, ...]


@dataclass
class Maze:
    """Open tiles with the best score seen at each, plus the start and end tiles."""

    start: Coord
    end: Coord
    best: dict[Coord, int]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Maze:
        """Read a maze of '#', '.', 'S' and 'E'."""
        start: Coord = (0, 0)
        end: Coord = (0, 0)
        best: dict[Coord, int] = {}
        for y, row in enumerate(lines):
            for x, char in enumerate(row):
                coord = (x, y)
                if char == "#":
                    continue
                if char == "S":
                    start = coord
                elif char == "E":
                    end = coord
                elif char != ".":
                    raise ValueError(f"unexpected tile {char!r} at {coord}")
                best[coord] = _UNSEEN
        return cls(start, end, best)

    def lowest_cost_paths(self) -> list[Route]:
        """Every route reaching the end that survives pruning, cheapest ones included."""
        order = itertools.count()
        heap: list[tuple[int, int, Coord, _Heading, _Trail]] = [
            (0, next(order), self.start, _Heading.RIGHT, _Trail(self.start))
        ]
        routes: list[Route] = []
        while heap:
            cost, _, coord, heading, trail = heapq.heappop(heap)
            if coord == self.end:
                routes.append(Route(cost, trail.tiles()))
                continue
            known = self.best.setdefault(coord, _UNSEEN)
            if cost > known + _TURN_COST:
                continue
            self.best[coord] = min(known, cost)

            options = (
                (heading.left(), cost + _TURN_COST),
                (heading.right(), cost + _TURN_COST),
                (heading, cost),
            )
            for new_heading, new_cost in options:
                ahead = new_heading.ahead(coord)
                if ahead in self.best:
                    heapq.heappush(
                        heap,
                        (
                            new_cost + _STEP_COST,
                            next(order),
                            ahead,
                            new_heading,
                            _Trail(ahead, trail),
                        ),
                    )
        return routes

    def render(self) -> str:
        """The maze as text: '#' for explored tiles, '.' for unexplored, ' ' for walls."""
        max_x = max((x for x, _ in self.best), default=0)
        max_y = max((y for _, y in self.best), default=0)
        rows = []
        for y in range(max_y + 1):
            row = []
            for x in range(max_x + 1):
                score = self.best.get((x, y))
                if score is None:
                    row.append(" ")
                elif score == _UNSEEN:
                    row.append(".")
                else:
                    row.append("#")
            rows.append("".join(row))
        return "\n".join(rows)


def _cheapest(routes: list[Route]) -> int:
    if not routes:
        raise ValueError("the end cannot be reached")
    return min(route.cost for route in routes)


def lowest_score(lines: Iterable[str]) -> int:
    """The lowest score any route from start to end can get."""
    return _cheapest(Maze.from_lines(lines).lowest_cost_paths())


def best_path_tile_count(lines: Iterable[str]) -> int:
    """Number of distinct tiles lying on at least one lowest-score route."""
    routes = Maze.from_lines(lines).lowest_cost_paths()
    cheapest = _cheapest(routes)
    return len({tile for route in routes if route.cost == cheapest for tile in route.tiles})