"""RAM run: shortest way out of a memory grid as bytes fall into it."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

Coord = tuple[int, int]

_START: Coord = (0, 0)
_STEPS: tuple[Coord, ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


def parse_bytes(lines: Iterable[str]) -> list[Coord]:
    """Parse 'x,y' lines into coordinates."""
    coords: list[Coord] = []
    for line in lines:
        x_text, separator, y_text = line.partition(",")
        if not separator:
            raise ValueError(f"cannot parse byte position {line!r}")
        coords.append((int(x_text), int(y_text)))
    return coords


def min_steps_to_exit(lines: Iterable[str], byte_count: int, end: Coord) -> int | None:
    """Fewest steps from the top-left corner to end after byte_count bytes fall, or None."""
    rows = list(lines)
    if not 0 <= byte_count <= len(rows):
        raise ValueError(f"byte count {byte_count} out of range 0..{len(rows)}")
    fallen = set(parse_bytes(rows[:byte_count]))
    open_cells = {
        (x, y)
        for x in range(end[0] + 1)
        for y in range(end[1] + 1)
        if (x, y) not in fallen
    }
    open_cells.add(_START)

    distances = {_START: 0}
    queue = deque([_START])
    while queue:
        coord = queue.popleft()
        if coord == end:
            return distances[coord]
        for dx, dy in _STEPS:
            neighbour = (coord[0] + dx, coord[1] + dy)
            if neighbour in open_cells and neighbour not in distances:
                distances[neighbour] = distances[coord] + 1
                queue.append(neighbour)
    return None


def first_blocking_byte(lines: Iterable[str], end: Coord) -> str:
    """The line of the first byte after whose fall the exit can no longer be reached."""
    rows = list(lines)
    if not rows:
        raise ValueError("no bytes given")
    low, high = 1, len(rows)
    while low != high:
        middle = (low + high) // 2
        if min_steps_to_exit(rows, middle, end) is None:
            high = middle
        else:
            low = middle + 1
    return rows[low - 1]