"""Linen layout: count ways to build towel designs from available patterns."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

_COLOURS = frozenset("wubrg")


def _check_colours(stripes: str) -> str:
    bad = set(stripes) - _COLOURS
    if bad:
        raise ValueError(f"unknown stripe colours {sorted(bad)} in {stripes!r}")
    return stripes


@dataclass(frozen=True)
class TowelDesigns:
    """Available towel patterns and the designs wanted from them."""

    towels: tuple[str, ...]
    designs: tuple[str, ...]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> TowelDesigns:
        """Read towel patterns from the first line and designs from the third onward."""
        rows = list(lines)
        if not rows:
            raise ValueError("no towel patterns given")
        towels = tuple(_check_colours(towel) for towel in rows[0].split(", "))
        designs = tuple(_check_colours(design) for design in rows[2:])
        return cls(towels, designs)

    def arrangements(self, design: str) -> int:
        """Number of ways to lay towels end to end to make the design."""
        _check_colours(design)
        ways = [0] * len(design) + [1]
        for start in range(len(design) - 1, -1, -1):
            ways[start] = sum(
                ways[start + len(towel)]
                for towel in self.towels
                if towel and design.startswith(towel, start)
            )
        return ways[0]


def possible_design_count(lines: Iterable[str]) -> int:
    """Number of designs that can be made at all."""
    towel_designs = TowelDesigns.from_lines(lines)
    return sum(towel_designs.arrangements(design) > 0 for design in towel_designs.designs)


def total_arrangement_count(lines: Iterable[str]) -> int:
    """Total number of ways to make every design."""
    towel_designs = TowelDesigns.from_lines(lines)
    return sum(towel_designs.arrangements(design) for design in towel_designs.designs)