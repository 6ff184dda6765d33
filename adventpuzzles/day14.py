"""Restroom redoubt: robots wrapping around a lobby and their safety factor."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TextIO

Coord = tuple[int, int]

_ROBOT = re.compile(r"p=(\d+),(\d+) v=(-?\d+),(-?\d+)")
_ELAPSED = 100
_MAX_STEPS = 10_000
_TREE_THRESHOLD = 170_000_000


@dataclass
class Robot:
    """A robot's position and velocity in the lobby."""

    position: Coord
    velocity: Coord

    @classmethod
    def parse(cls, line: str) -> Robot:
        """Parse a line such as 'p=0,4 v=3,-3'."""
        found = _ROBOT.search(line)
        if found is None:
            raise ValueError(f"cannot parse robot {line!r}")
        px, py, vx, vy = (int(group) for group in found.groups())
        return cls((px, py), (vx, vy))

    def step(self, times: int, size: Coord) -> None:
        """Move the robot times steps, wrapping around a lobby of the given size."""
        (px, py), (vx, vy) = self.position, self.velocity
        width, height = size
        self.position = ((px + vx * times) % width, (py + vy * times) % height)


def safety_factor(robots: Iterable[Robot], size: Coord) -> int:
    """Product of robot counts in the four quadrants; middle lines count for none."""
    middle_x, middle_y = size[0] // 2, size[1] // 2
    quadrants = [0, 0, 0, 0]
    for robot in robots:
        x, y = robot.position
        if x == middle_x or y == middle_y:
            continue
        quadrants[(y > middle_y) * 2 + (x > middle_x)] += 1
    q1, q2, q3, q4 = quadrants
    return q1 * q2 * q3 * q4


def _parse(lines: Iterable[str]) -> list[Robot]:
    return [Robot.parse(line) for line in lines]


def robot_safety_factor(lines: Iterable[str], size: Coord) -> int:
    """Safety factor after one hundred seconds."""
    robots = _parse(lines)
    for robot in robots:
        robot.step(_ELAPSED, size)
    return safety_factor(robots, size)


def _write_frame(output: TextIO, robots: Sequence[Robot], size: Coord, step: int, factor: int) -> None:
    width, height = size
    display = [["  "] * (width + 2) for _ in range(height + 2)]
    for robot in robots:
        x, y = robot.position
        display[y][x] = "##"
    output.write("\n" * 7)
    for row in display:
        output.write("".join(row) + "\n")
    output.write(f"iteration - {step} safety factor: {factor}\n")


def time_till_easter_egg(lines: Iterable[str], size: Coord, output: TextIO | None = None) -> int:
    """First second at which the safety factor drops low enough to show a picture, or 0.

    Each frame is drawn to output when it is given.
    """
    robots = _parse(lines)
    for step in range(1, _MAX_STEPS):
        for robot in robots:
            robot.step(1, size)
        factor = safety_factor(robots, size)
        if output is not None:
            _write_frame(output, robots, size, step, factor)
        if factor < _TREE_THRESHOLD:
            return step
    return 0