"""Claw contraption: fewest tokens to reach each prize."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

_BUTTON = re.compile(r"Button [AB]: X\+(\d+), Y\+(\d+)")
_PRIZE = re.compile(r"Prize: X=(\d+), Y=(\d+)")
_A_COST = 3
_B_COST = 1
_CORRECTION = 10000000000000

Vector = tuple[int, int]


@dataclass(frozen=True)
class ClawMachine:
    """Claw movement per press of A and of B, and the prize position."""

    a: Vector
    b: Vector
    prize: Vector

    def solve(self) -> int | None:
        """Token cost of the unique integral press combination, or None if there is none."""
        (ax, ay), (bx, by), (px, py) = self.a, self.b, self.prize
        determinant = ax * by - ay * bx
        if determinant == 0:
            return None
        a_presses, a_rest = divmod(px * by - py * bx, determinant)
        b_presses, b_rest = divmod(ax * py - ay * px, determinant)
        if a_rest or b_rest:
            return None
        cost = _A_COST * a_presses + _B_COST * b_presses
        return cost if cost >= 0 else None


def _match(pattern: re.Pattern[str], line: str) -> Vector:
    found = pattern.search(line)
    if found is None:
        raise ValueError(f"cannot parse {line!r}")
    return int(found.group(1)), int(found.group(2))


def parse_machines(lines: Iterable[str], offset: int) -> list[ClawMachine]:
    """Parse blank-line separated machine descriptions, shifting prizes by offset."""
    groups: list[list[str]] = [[]]
    for line in lines:
        if line:
            groups[-1].append(line)
        else:
            groups.append([])
    machines = []
    for group in groups:
        if len(group) != 3:
            raise ValueError(f"a machine needs exactly three lines, got {group!r}")
        a = _match(_BUTTON, group[0])
        b = _match(_BUTTON, group[1])
        px, py = _match(_PRIZE, group[2])
        machines.append(ClawMachine(a, b, (px + offset, py + offset)))
    return machines


def token_cost(lines: Iterable[str]) -> int:
    """Tokens needed to win every winnable prize."""
    costs = (machine.solve() for machine in parse_machines(lines, 0))
    return sum(cost for cost in costs if cost is not None)


def corrected_token_cost(lines: Iterable[str]) -> int:
    """Tokens needed once prize positions are corrected by the unit conversion."""
    costs = (machine.solve() for machine in parse_machines(lines, _CORRECTION))
    return sum(cost for cost in costs if cost is not None)