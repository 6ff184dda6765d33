"""Reactor reports: count reports whose levels change safely."""

from collections.abc import Iterable, Sequence


def parse_reports(lines: Iterable[str]) -> list[list[int]]:
    """Parse each line of space-separated levels into a report."""
    return [[int(level) for level in line.split(" ")] for line in lines]


def is_safe(report: Sequence[int]) -> bool:
    """True if the levels strictly ascend or descend by steps of 1 to 3."""
    if len(report) < 2:
        raise ValueError("a report needs at least two levels")
    pairs = list(zip(report, report[1:]))
    descending = all(a > b for a, b in pairs)
    ascending = all(a < b for a, b in pairs)
    differences = [abs(a - b) for a, b in pairs]
    return (descending or ascending) and max(differences) <= 3 and min(differences) >= 1


def count_safe(lines: Iterable[str]) -> int:
    """Number of safe reports."""
    return sum(1 for report in parse_reports(lines) if is_safe(report))


def _safe_with_one_removed(report: list[int]) -> bool:
    return any(
        is_safe(report[:index] + report[index + 1:]) for index in range(len(report))
    )


def count_safe_with_dampener(lines: Iterable[str]) -> int:
    """Number of reports that are safe once any single level is removed."""
    return sum(1 for report in parse_reports(lines) if _safe_with_one_removed(report))