"""Hoof It: score and rate hiking trails on a topographic map."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

Coord = tuple[int, int]

_PEAK = 9
_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


@dataclass
class HikingMap:
    """Heights from 0 to 9, indexed as (row, column)."""

    heights: list[list[int]]
    _trail_cache: dict[Coord, int] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> HikingMap:
        """Read rows of single-digit heights."""
        heights = []
        for line in lines:
            row = []
            for char in line:
                if char not in "0123456789":
                    raise ValueError(f"invalid height {char!r}")
                row.append(int(char))
            heights.append(row)
        return cls(heights)

    def _height(self, coord: Coord) -> int | None:
        row, col = coord
        if 0 <= row < len(self.heights) and 0 <= col < len(self.heights[row]):
            return self.heights[row][col]
        return None

    def _climbs(self, coord: Coord, height: int) -> Iterator[Coord]:
        row, col = coord
        for d_row, d_col in _STEPS:
            neighbour = (row + d_row, col + d_col)
            if self._height(neighbour) == height + 1:
                yield neighbour

    def trailheads(self) -> list[Coord]:
        """All positions of height 0, in row-major order."""
        return [
            (row, col)
            for row, heights in enumerate(self.heights)
            for col, height in enumerate(heights)
            if height == 0
        ]

    def reachable_tops(self, start: Coord) -> set[Coord]:
        """Height-9 positions reachable from start by steps that climb exactly 1."""
        height = self._height(start)
        if height is None:
            raise ValueError(f"{start} is outside the map")
        if height == _PEAK:
            return {start}
        tops: set[Coord] = set()
        for neighbour in self._climbs(start, height):
            tops |= self.reachable_tops(neighbour)
        return tops

    def trail_count(self, start: Coord) -> int:
        """Number of distinct climbing paths from start to any height-9 position."""
        height = self._height(start)
        if height is None:
            raise ValueError(f"{start} is outside the map")
        if height == _PEAK:
            return 1
        if start not in self._trail_cache:
            self._trail_cache[start] = sum(
                self.trail_count(neighbour) for neighbour in self._climbs(start, height)
            )
        return self._trail_cache[start]


def trailhead_score_sum(lines: Iterable[str]) -> int:
    """Sum over trailheads of the number of distinct peaks each reaches."""
    hiking_map = HikingMap.from_lines(lines)
    return sum(len(hiking_map.reachable_tops(start)) for start in hiking_map.trailheads())


def trailhead_rating_sum(lines: Iterable[str]) -> int:
    """Sum over trailheads of the number of distinct trails from each."""
    hiking_map = HikingMap.from_lines(lines)
    return sum(hiking_map.trail_count(start) for start in hiking_map.trailheads())