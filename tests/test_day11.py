import pytest

from adventpuzzles.day11 import blink, split_in_half, stone_count


def test_example_25_blinks():
    assert stone_count(["125 17"], 25) == 55312


def test_example_6_blinks():
    assert stone_count(["125 17"], 6) == 22


def test_split_drops_leading_zeros():
    assert split_in_half(1000) == (10, 0)


def test_split_round_trip():
    for number in (12, 3456, 987654, 100200):
        left, right = split_in_half(number)
        half = len(str(number)) // 2
        assert int(str(left) + str(right).zfill(half)) == number


def test_zero_blinks_keeps_one_stone():
    assert blink(123456, 0) == 1


def test_even_digits_split():
    assert blink(10, 1) == 2


def test_stone_count_is_sum_of_stones():
    assert stone_count(["0 1 10 99 999"], 8) == sum(
        blink(stone, 8) for stone in (0, 1, 10, 99, 999)
    )


def test_zero_becomes_one():
    assert blink(0, 5) == blink(1, 4)


def test_empty_input_raises():
    with pytest.raises(ValueError):
        stone_count([], 3)