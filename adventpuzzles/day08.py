"""Resonant collinearity: count antinode locations created by antenna pairs."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import combinations

Coord = tuple[int, int]


@dataclass(frozen=True)
class AntennaMap:
    """Antenna positions grouped by frequency, within a width by height map."""

    antennas: dict[str, list[Coord]]
    width: int
    height: int

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> AntennaMap:
        """Read a map where every character other than '.' is an antenna."""
        rows = list(lines)
        if not rows:
            raise ValueError("empty map")
        antennas: dict[str, list[Coord]] = {}
        for y, row in enumerate(rows):
            for x, char in enumerate(row):
                if char != ".":
                    antennas.setdefault(char, []).append((x, y))
        return cls(antennas, len(rows[0]), len(rows))

    def _in_bounds(self, coord: Coord) -> bool:
        return 0 <= coord[0] < self.width and 0 <= coord[1] < self.height

    def antinodes(self) -> set[Coord]:
        """Points twice as far from one antenna of a pair as from the other."""
        found: set[Coord] = set()
        for positions in self.antennas.values():
            for (x1, y1), (x2, y2) in combinations(positions, 2):
                dx, dy = x1 - x2, y1 - y2
                for candidate in ((x1 + dx, y1 + dy), (x2 - dx, y2 - dy)):
                    if self._in_bounds(candidate):
                        found.add(candidate)
        return found

    def harmonic_antinodes(self) -> set[Coord]:
        """All in-bounds points in line with a pair, antennas themselves included."""
        found: set[Coord] = set()
        for positions in self.antennas.values():
            if len(positions) > 1:
                found.update(positions)
            for (x1, y1), (x2, y2) in combinations(positions, 2):
                dx, dy = x1 - x2, y1 - y2
                point = (x1 + dx, y1 + dy)
                while self._in_bounds(point):
                    found.add(point)
                    point = (point[0] + dx, point[1] + dy)
                point = (x2 - dx, y2 - dy)
                while self._in_bounds(point):
                    found.add(point)
                    point = (point[0] - dx, point[1] - dy)
        return found


def antinode_count(lines: Iterable[str]) -> int:
    """Number of unique antinode locations."""
    return len(AntennaMap.from_lines(lines).antinodes())


def harmonic_antinode_count(lines: Iterable[str]) -> int:
    """Number of unique antinode locations with resonant harmonics."""
    return len(AntennaMap.from_lines(lines).harmonic_antinodes())