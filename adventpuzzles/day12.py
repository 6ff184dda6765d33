"""Garden groups: fence prices for regions of plots growing the same plant."""

from collections import deque
from collections.abc import Iterable, Set

Coord = tuple[int, int]

_NEIGHBOURS: tuple[Coord, ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


def _plots(lines: Iterable[str]) -> dict[Coord, str]:
    return {(x, y): plant for y, row in enumerate(lines) for x, plant in enumerate(row)}


def find_regions(lines: Iterable[str]) -> list[frozenset[Coord]]:
    """Connected groups of same-plant plots, in row-major order of their first plot."""
    plots = _plots(lines)
    seen: set[Coord] = set()
    regions: list[frozenset[Coord]] = []
    for start in sorted(plots, key=lambda coord: (coord[1], coord[0])):
        if start in seen:
            continue
        plant = plots[start]
        region = {start}
        queue = deque([start])
        while queue:
            x, y = queue.popleft()
            for dx, dy in _NEIGHBOURS:
                neighbour = (x + dx, y + dy)
                if neighbour not in region and plots.get(neighbour) == plant:
                    region.add(neighbour)
                    queue.append(neighbour)
        seen |= region
        regions.append(frozenset(region))
    return regions


def _perimeter(region: Set[Coord]) -> int:
    return sum(
        (x + dx, y + dy) not in region for x, y in region for dx, dy in _NEIGHBOURS
    )


def corner_count(region: Set[Coord], cell: Coord) -> int:
    """Number of inside and outside corners of the region's boundary at this cell."""
    x, y = cell
    count = 0
    for (dx1, dy1), (dx2, dy2) in zip(_NEIGHBOURS, _NEIGHBOURS[1:] + _NEIGHBOURS[:1]):
        first = (x + dx1, y + dy1) in region
        second = (x + dx2, y + dy2) in region
        diagonal = (x + dx1 + dx2, y + dy1 + dy2) in region
        if first and second and not diagonal:
            count += 1
        if not first and not second:
            count += 1
    return count


def fence_price(lines: Iterable[str]) -> int:
    """Sum over regions of area times perimeter."""
    return sum(len(region) * _perimeter(region) for region in find_regions(lines))


def bulk_fence_price(lines: Iterable[str]) -> int:
    """Sum over regions of area times number of straight sides."""
    return sum(
        len(region) * sum(corner_count(region, cell) for cell in region)
        for region in find_regions(lines)
    )