import pytest

from adventpuzzles.day02 import (
    count_safe,
    count_safe_with_dampener,
    is_safe,
    parse_reports,
)

EXAMPLE = [
    "7 6 4 2 1",
    "1 2 7 8 9",
    "9 7 6 2 1",
    "1 3 2 4 5",
    "8 6 4 4 1",
    "1 3 6 7 9",
]


def test_parse_reports():
    reports = parse_reports(EXAMPLE)
    assert len(reports) == len(EXAMPLE)
    assert reports[0] == [7, 6, 4, 2, 1]


def test_count_safe_example():
    assert count_safe(EXAMPLE) == 2


def test_count_safe_with_dampener_example():
    assert count_safe_with_dampener(EXAMPLE) == 4


def test_individual_reports():
    reports = parse_reports(EXAMPLE)
    assert [is_safe(r) for r in reports] == [True, False, False, False, False, True]


def test_dampener_never_lowers_count():
    assert count_safe_with_dampener(EXAMPLE) >= count_safe(EXAMPLE)


def test_reversed_report_keeps_safety():
    for report in parse_reports(EXAMPLE):
        assert is_safe(report) == is_safe(list(reversed(report)))


def test_flat_pair_is_unsafe():
    assert is_safe([4, 4]) is False


def test_single_level_raises():
    with pytest.raises(ValueError):
        is_safe([5])


def test_bad_level_raises():
    with pytest.raises(ValueError):
        parse_reports(["1 x 3"])