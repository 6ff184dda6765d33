import pytest

from adventpuzzles.day18 import first_blocking_byte, min_steps_to_exit, parse_bytes

EXAMPLE = [
    "5,4", "4,2", "4,5", "3,0", "2,1", "6,3", "2,4", "1,5", "0,6", "3,3",
    "2,6", "5,1", "1,2", "5,5", "2,5", "6,5", "1,4", "0,4", "6,4", "1,1",
    "6,1", "1,0", "0,5", "1,6", "2,0",
]


def test_example_steps():
    assert min_steps_to_exit(EXAMPLE, 12, (6, 6)) == 22


def test_example_blocking_byte():
    assert first_blocking_byte(EXAMPLE, (6, 6)) == "6,1"


def test_blocking_byte_cuts_off_exit():
    index = EXAMPLE.index(first_blocking_byte(EXAMPLE, (6, 6)))
    assert min_steps_to_exit(EXAMPLE, index, (6, 6)) is not None
    assert min_steps_to_exit(EXAMPLE, index + 1, (6, 6)) is None


def test_empty_grid_takes_manhattan_distance():
    assert min_steps_to_exit(EXAMPLE, 0, (6, 6)) == 12


def test_more_bytes_never_shorten_the_way():
    assert min_steps_to_exit(EXAMPLE, 12, (6, 6)) >= min_steps_to_exit(EXAMPLE, 0, (6, 6))


def test_walled_in_start_is_unreachable():
    assert min_steps_to_exit(["1,0", "0,1"], 2, (2, 2)) is None


def test_parse_bytes():
    assert parse_bytes(["5,4", "0,6"]) == [(5, 4), (0, 6)]


def test_parse_bytes_rejects_malformed_line():
    with pytest.raises(ValueError):
        parse_bytes(["5;4"])


def test_byte_count_out_of_range_raises():
    with pytest.raises(ValueError):
        min_steps_to_exit(EXAMPLE, len(EXAMPLE) + 1, (6, 6))


def test_first_blocking_byte_without_bytes_raises():
    with pytest.raises(ValueError):
        first_blocking_byte([], (6, 6))