import pytest

from adventpuzzles.day13 import (
    ClawMachine,
    corrected_token_cost,
    parse_machines,
    token_cost,
)

EXAMPLE = [
    "Button A: X+94, Y+34",
    "Button B: X+22, Y+67",
    "Prize: X=8400, Y=5400",
    "",
    "Button A: X+26, Y+66",
    "Button B: X+67, Y+21",
    "Prize: X=12748, Y=12176",
    "",
    "Button A: X+17, Y+86",
    "Button B: X+84, Y+37",
    "Prize: X=7870, Y=6450",
    "",
    "Button A: X+69, Y+23",
    "Button B: X+27, Y+71",
    "Prize: X=18641, Y=10279",
]


def test_example_cost():
    assert token_cost(EXAMPLE) == 480


def test_first_machine_cost():
    machine = parse_machines(EXAMPLE, 0)[0]
    assert machine.solve() == 280


def test_unwinnable_machines():
    machines = parse_machines(EXAMPLE, 0)
    assert machines[1].solve() is None
    assert machines[3].solve() is None


def test_corrected_machines_winnable_pattern():
    machines = parse_machines(EXAMPLE, 10000000000000)
    assert [m.solve() is not None for m in machines] == [False, True, False, True]
    assert corrected_token_cost(EXAMPLE) == sum(
        cost for cost in (m.solve() for m in machines) if cost is not None
    )


def test_offset_applied_to_prize():
    machine = parse_machines(EXAMPLE, 10000000000000)[0]
    assert machine.a == (94, 34)
    assert machine.b == (22, 67)
    assert machine.prize == (8400 + 10000000000000, 5400 + 10000000000000)


def test_parallel_buttons_have_no_solution():
    assert ClawMachine((2, 2), (2, 2), (10, 10)).solve() is None


def test_trailing_blank_line_raises():
    with pytest.raises(ValueError):
        parse_machines(EXAMPLE + [""], 0)


def test_short_group_raises():
    with pytest.raises(ValueError):
        parse_machines(EXAMPLE[:2], 0)


def test_unparseable_line_raises():
    with pytest.raises(ValueError):
        parse_machines(["Button A: X+1, Y+2", "Button B: nope", "Prize: X=3, Y=4"], 0)