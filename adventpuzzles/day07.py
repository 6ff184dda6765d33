"""Bridge calibration: decide which equations can be made true with operators."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


def concatenate(left: int, right: int) -> int:
    """Join the decimal digits of two numbers into one number."""
    return int(f"{left}{right}")


@dataclass(frozen=True)
class Equation:
    """A test value and the numbers that must combine to reach it."""

    answer: int
    numbers: tuple[int, ...]

    @classmethod
    def parse(cls, line: str) -> Equation:
        """Parse a line such as '190: 10 19'."""
        answer_text, numbers_text = line.split(":", 1)
        numbers = tuple(int(n) for n in numbers_text.strip().split(" "))
        if len(numbers) < 2:
            raise ValueError(f"equation needs at least two numbers: {line!r}")
        return cls(int(answer_text), numbers)

    def is_solvable(self, with_concat: bool) -> bool:
        """True if +, * (and || when with_concat) evaluated left to right reach the answer."""
        if len(self.numbers) < 2:
            raise ValueError("equation needs at least two numbers")

        def search(total: int, index: int) -> bool:
            if index == len(self.numbers):
                return total == self.answer
            if with_concat and total > self.answer:
                return False
            number = self.numbers[index]
            if search(total + number, index + 1) or search(total * number, index + 1):
                return True
            return with_concat and search(concatenate(total, number), index + 1)

        return search(self.numbers[0], 1)


def _calibration(lines: Iterable[str], with_concat: bool) -> int:
    equations = [Equation.parse(line) for line in lines]
    return sum(eq.answer for eq in equations if eq.is_solvable(with_concat))


def calibration_sum(lines: Iterable[str]) -> int:
    """Sum of test values solvable with + and *."""
    return _calibration(lines, with_concat=False)


def calibration_sum_with_concat(lines: Iterable[str]) -> int:
    """Sum of test values solvable with +, * and concatenation."""
    return _calibration(lines, with_concat=True)