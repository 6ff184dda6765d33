"""Keypad conundrum: fewest button presses through a chain of robot-operated keypads."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterable, Mapping
from functools import lru_cache

Coord = tuple[int, int]

NUMPAD: dict[Coord, str] = {
    (0, 0): "7", (1, 0): "8", (2, 0): "9",
    (0, 1): "4", (1, 1): "5", (2, 1): "6",
    (0, 2): "1", (1, 2): "2", (2, 2): "3",
    (1, 3): "0", (2, 3): "A",
}

KEYPAD: dict[Coord, str] = {
    (1, 0): "^", (2, 0): "A",
    (0, 1): "<", (1, 1): "v", (2, 1): ">",
}

_MOVES: tuple[tuple[str, Coord], ...] = (
    ("^", (0, -1)),
    (">", (1, 0)),
    ("v", (0, 1)),
    ("<", (-1, 0)),
)
_STRAIGHT_COST = 1
_TURN_COST = 2


def shortest_paths(pad: Mapping[Coord, str], start: str, end: str) -> tuple[str, ...]:
    """Arrow sequences moving from key start to key end that have the fewest steps and turns.

    A step costs 1 when it keeps the previous direction and 2 when it turns.
    """
    origin = next((coord for coord, key in pad.items() if key == start), None)
    if origin is None:
        raise ValueError(f"key {start!r} is not on the pad")
    if end not in pad.values():
        raise ValueError(f"key {end!r} is not on the pad")

    order = itertools.count()
    heap: list[tuple[int, int, Coord, str | None, str]] = [(0, next(order), origin, None, "")]
    best: int | None = None
    found: dict[str, None] = {}
    while heap:
        cost, _, coord, facing, taken = heapq.heappop(heap)
        if pad[coord] == end:
            if best is None:
                best = cost
            elif cost > best:
                break
            found[taken] = None
            continue
        for arrow, (dx, dy) in _MOVES:
            ahead = (coord[0] + dx, coord[1] + dy)
            if ahead in pad:
                step = _STRAIGHT_COST if facing is None or arrow == facing else _TURN_COST
                heapq.heappush(heap, (cost + step, next(order), ahead, arrow, taken + arrow))
    return tuple(found)


@lru_cache(maxsize=None)
def _pad_paths(use_numpad: bool, start: str, end: str) -> tuple[str, ...]:
    return shortest_paths(NUMPAD if use_numpad else KEYPAD, start, end)


@lru_cache(maxsize=None)
def _presses(keys: str, robots: int, use_numpad: bool) -> int:
    if robots == 0:
        return len(keys)
    return sum(
        min(
            _presses(path + "A", robots - 1, False)
            for path in _pad_paths(use_numpad, current, target)
        )
        for current, target in zip("A" + keys, keys)
    )


def press_count(sequence: str, robots: int, use_numpad: bool) -> int:
    """Fewest human presses to type sequence through robots layers of keypads.

    Every arm starts on 'A'. The innermost pad is the numeric one when use_numpad is set.
    """
    if robots < 0:
        raise ValueError("robot count cannot be negative")
    return _presses(sequence, robots, use_numpad)


def complexity_sum(lines: Iterable[str], robot_count: int) -> int:
    """Sum over door codes of presses needed times the code's numeric part."""
    total = 0
    for code in lines:
        if len(code) < 3:
            raise ValueError(f"code {code!r} is too short")
        total += press_count(code, robot_count, True) * int(code[:3])
    return total