"""Corrupted memory: sum the valid mul(x,y) instructions."""

import re
from collections.abc import Iterable

_MUL = re.compile(r"mul\((\d+),(\d+)\)")
_MUL_OR_TOGGLE = re.compile(r"mul\((\d+),(\d+)\)|do\(\)|don't\(\)")


def find_products(lines: Iterable[str]) -> list[tuple[int, int]]:
    """All operand pairs of mul instructions in the joined text."""
    text = "".join(lines)
    return [(int(a), int(b)) for a, b in _MUL.findall(text)]


def find_enabled_products(lines: Iterable[str]) -> list[tuple[int, int]]:
    """Operand pairs of mul instructions not switched off by don't()."""
    text = "".join(lines)
    enabled = True
    products: list[tuple[int, int]] = []
    for match in _MUL_OR_TOGGLE.finditer(text):
        token = match.group(0)
        if token == "do()":
            enabled = True
        elif token == "don't()":
            enabled = False
        elif enabled:
            products.append((int(match.group(1)), int(match.group(2))))
    return products


def multiply_sum(lines: Iterable[str]) -> int:
    """Sum of all mul results."""
    return sum(a * b for a, b in find_products(lines))


def enabled_multiply_sum(lines: Iterable[str]) -> int:
    """Sum of the enabled mul results."""
    return sum(a * b for a, b in find_enabled_products(lines))