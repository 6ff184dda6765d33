import pytest

from adventpuzzles.day01 import parse_input, similarity_score, total_distance

EXAMPLE = [
    "3   4",
    "4   3",
    "2   5",
    "1   3",
    "3   9",
    "3   3",
]


def test_parse_input_columns():
    left, right = parse_input(EXAMPLE)
    assert left == [3, 4, 2, 1, 3, 3]
    assert right == [4, 3, 5, 3, 9, 3]


def test_total_distance_example():
    assert total_distance(EXAMPLE) == 11


def test_similarity_score_example():
    assert similarity_score(EXAMPLE) == 31


def test_distance_is_symmetric():
    swapped = [f"{b}   {a}" for a, b in (line.split() for line in EXAMPLE)]
    assert total_distance(swapped) == total_distance(EXAMPLE)


def test_identical_lists_have_zero_distance():
    assert total_distance(["5   5", "7   7", "1   1"]) == 0


def test_no_matches_gives_zero_similarity():
    assert similarity_score(["1   2", "3   4"]) == 0


def test_line_without_separator_raises():
    with pytest.raises(ValueError):
        parse_input(["12"])


def test_non_numeric_raises():
    with pytest.raises(ValueError):
        parse_input(["a   b"])