"""Historian location lists: pairwise distance and similarity score."""

from collections import Counter
from collections.abc import Iterable


def parse_input(lines: Iterable[str]) -> tuple[list[int], list[int]]:
    """Split each line into a left and right number, returning both columns."""
    left: list[int] = []
    right: list[int] = []
    for line in lines:
        left_text, right_text = line.split(" ", 1)
        left.append(int(left_text.strip()))
        right.append(int(right_text.strip()))
    return left, right


def total_distance(lines: Iterable[str]) -> int:
    """Sum of distances between the sorted left and right lists."""
    left, right = parse_input(lines)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(lines: Iterable[str]) -> int:
    """Sum of each left number times its number of occurrences on the right."""
    left, right = parse_input(lines)
    counts = Counter(right)
    return sum(number * counts[number] for number in left)