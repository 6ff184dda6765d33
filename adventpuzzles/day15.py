"""Warehouse woes: a robot pushing boxes around a warehouse."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

Coord = tuple[int, int]

_STEPS: dict[str, Coord] = {"^": (0, -1), ">": (1, 0), "v": (0, 1), "<": (-1, 0)}
_WIDE = {"#": "##", "O": "[]", ".": "..", "@": "@."}


class Tile(Enum):
    """Something occupying a warehouse position."""

    WALL = "#"
    BOX = "O"
    BOX_LEFT = "["
    BOX_RIGHT = "]"


def _shift(coord: Coord, step: Coord) -> Coord:
    return coord[0] + step[0], coord[1] + step[1]


@dataclass
class Warehouse:
    """The warehouse floor, the robot's position and its pending moves."""

    robot: Coord
    tiles: dict[Coord, Tile | None]
    moves: deque[str] = field(default_factory=deque)

    @classmethod
    def from_lines(cls, lines: Iterable[str], expand: bool) -> Warehouse:
        """Read the map, a blank line, then the moves; expand doubles every tile's width."""
        map_rows: list[str] = []
        moves: deque[str] = deque()
        in_map = True
        for line in lines:
            if not line:
                in_map = False
                continue
            if in_map:
                if expand:
                    line = "".join(_WIDE.get(char, char) for char in line)
                map_rows.append(line)
            else:
                for move in line:
                    if move not in _STEPS:
                        raise ValueError(f"unknown move {move!r}")
                    moves.append(move)

        tiles: dict[Coord, Tile | None] = {}
        robot: Coord = (0, 0)
        for y, row in enumerate(map_rows):
            for x, char in enumerate(row):
                coord = (x, y)
                if char == "@":
                    robot = coord
                    tiles[coord] = None
                elif char == ".":
                    tiles[coord] = None
                else:
                    try:
                        tiles[coord] = Tile(char)
                    except ValueError:
                        raise ValueError(f"unexpected tile {char!r} at {coord}") from None
        return cls(robot, tiles, moves)

    def _collect(self, coord: Coord, step: Coord, found: set[Coord]) -> bool:
        """Gather the box tiles pushed from coord; False if anything hits a wall."""
        if coord not in self.tiles:
            return False
        tile = self.tiles[coord]
        if tile is None:
            return True
        if tile is Tile.WALL:
            return False
        if coord in found:
            return True
        found.add(coord)
        ahead = _shift(coord, step)
        if tile is Tile.BOX:
            return self._collect(ahead, step, found)
        partner = _shift(coord, (1, 0) if tile is Tile.BOX_LEFT else (-1, 0))
        return self._collect(ahead, step, found) and self._collect(partner, step, found)

    def arrange(self) -> None:
        """Carry out every pending move, pushing boxes where nothing blocks them."""
        while self.moves:
            step = _STEPS[self.moves.popleft()]
            ahead = _shift(self.robot, step)
            pushed: set[Coord] = set()
            if not self._collect(ahead, step, pushed):
                continue
            lifted = {coord: self.tiles[coord] for coord in pushed}
            for coord in lifted:
                self.tiles[coord] = None
            for coord, tile in lifted.items():
                self.tiles[_shift(coord, step)] = tile
            self.tiles[ahead] = None
            self.robot = ahead

    def box_gps_sum(self) -> int:
        """Sum of 100 * row + column over every box (its left half when wide)."""
        return sum(
            y * 100 + x
            for (x, y), tile in self.tiles.items()
            if tile in (Tile.BOX, Tile.BOX_LEFT)
        )

    def render(self) -> str:
        """The warehouse drawn as text, one row per line."""
        max_x = max((x for x, _ in self.tiles), default=0)
        max_y = max((y for _, y in self.tiles), default=0)
        rows = []
        for y in range(max_y + 1):
            row = []
            for x in range(max_x + 1):
                coord = (x, y)
                tile = self.tiles.get(coord)
                if coord == self.robot:
                    row.append("@")
                elif tile is not None:
                    row.append(tile.value)
                else:
                    row.append(".")
            rows.append("".join(row))
        return "\n".join(rows)


def warehouse_box_sum(lines: Iterable[str]) -> int:
    """GPS sum of the boxes after the robot finishes moving."""
    warehouse = Warehouse.from_lines(lines, expand=False)
    warehouse.arrange()
    return warehouse.box_gps_sum()


def wide_warehouse_box_sum(lines: Iterable[str]) -> int:
    """GPS sum of the boxes in the double-width warehouse after all moves."""
    warehouse = Warehouse.from_lines(lines, expand=True)
    warehouse.arrange()
    return warehouse.box_gps_sum()