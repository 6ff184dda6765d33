from itertools import product

import pytest

from adventpuzzles.day21 import KEYPAD, NUMPAD, complexity_sum, press_count, shortest_paths

EXAMPLE = ["029A", "980A", "179A", "456A", "379A"]

_STEPS = {"^": (0, -1), ">": (1, 0), "v": (0, 1), "<": (-1, 0)}


def _replay(pad, start, path):
    coord = next(c for c, key in pad.items() if key == start)
    for arrow in path:
        dx, dy = _STEPS[arrow]
        coord = (coord[0] + dx, coord[1] + dy)
        assert coord in pad
    return pad[coord]


def test_example_complexity():
    assert complexity_sum(EXAMPLE, 3) == 126384


def test_example_code_press_count():
    assert press_count("029A", 3, True) == 68


def test_no_robots_means_typing_directly():
    assert press_count("029A", 0, True) == len("029A")


def test_more_robots_need_more_presses():
    counts = [press_count("379A", robots, True) for robots in range(4)]
    assert counts == sorted(counts)
    assert counts[0] < counts[-1]


@pytest.mark.parametrize("pad", [NUMPAD, KEYPAD])
def test_paths_stay_on_pad_and_reach_target(pad):
    keys = list(pad.values())
    for start, end in product(keys, keys):
        paths = shortest_paths(pad, start, end)
        assert paths
        for path in paths:
            assert _replay(pad, start, path) == end
        assert len({len(path) for path in paths}) == 1


def test_path_avoids_numpad_gap():
    paths = shortest_paths(NUMPAD, "7", "A")
    assert paths
    assert "vvv>>" not in paths


def test_same_key_needs_no_moves():
    assert shortest_paths(KEYPAD, "A", "A") == ("",)


def test_unknown_key_raises():
    with pytest.raises(ValueError):
        shortest_paths(KEYPAD, "7", "A")


def test_negative_robot_count_raises():
    with pytest.raises(ValueError):
        press_count("029A", -1, True)