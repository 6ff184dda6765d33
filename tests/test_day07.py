import pytest

from adventpuzzles.day07 import (
    Equation,
    calibration_sum,
    calibration_sum_with_concat,
    concatenate,
)

EXAMPLE = [
    "190: 10 19",
    "3267: 81 40 27",
    "83: 17 5",
    "156: 15 6",
    "7290: 6 8 6 15",
    "161011: 16 10 13",
    "192: 17 8 14",
    "21037: 9 7 18 13",
    "292: 11 6 16 20",
]


def test_example_calibration_sum():
    assert calibration_sum(EXAMPLE) == 3749


def test_example_calibration_sum_with_concat():
    assert calibration_sum_with_concat(EXAMPLE) == 11387


def test_concatenate_joins_digits():
    assert concatenate(15, 6) == 156
    assert concatenate(48, 6) == 486


def test_parse_reads_answer_and_numbers():
    equation = Equation.parse("3267: 81 40 27")
    assert equation.answer == 3267
    assert equation.numbers == (81, 40, 27)


def test_parse_rejects_single_number():
    with pytest.raises(ValueError):
        Equation.parse("5: 5")


def test_solvability_per_operator_set():
    concat_only = Equation.parse("156: 15 6")
    assert not concat_only.is_solvable(with_concat=False)
    assert concat_only.is_solvable(with_concat=True)
    assert Equation.parse("190: 10 19").is_solvable(with_concat=False)
    assert not Equation.parse("83: 17 5").is_solvable(with_concat=True)


def test_concat_sum_at_least_plain_sum():
    assert calibration_sum_with_concat(EXAMPLE) >= calibration_sum(EXAMPLE)