"""Plutonian pebbles: count stones after repeated blinks."""

from collections.abc import Iterable
from functools import lru_cache

_MULTIPLIER = 2024


def split_in_half(number: int) -> tuple[int, int]:
    """Split the decimal digits of number into a left and a right number."""
    digits = str(number)
    half = len(digits) // 2
    return int(digits[:half]), int(digits[half:])


@lru_cache(maxsize=None)
def blink(stone: int, blinks: int) -> int:
    """Number of stones that one stone becomes after the given number of blinks."""
    if blinks == 0:
        return 1
    if stone == 0:
        return blink(1, blinks - 1)
    if len(str(stone)) % 2 == 0:
        left, right = split_in_half(stone)
        return blink(left, blinks - 1) + blink(right, blinks - 1)
    return blink(stone * _MULTIPLIER, blinks - 1)


def stone_count(lines: Iterable[str], blinks: int) -> int:
    """Total stones after blinking at the row of stones on the first line."""
    for line in lines:
        return sum(blink(int(stone), blinks) for stone in line.split())
    raise ValueError("no stones given")