"""Chronospatial computer: a 3-bit machine and the register value that makes it print itself."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

_HEADER_LINES = 5


def _shift_div(value: int, exponent: int) -> int:
    """value divided by 2**exponent, truncated toward zero."""
    if exponent < 0:
        raise ValueError(f"negative exponent {exponent}")
    quotient = abs(value) >> exponent
    return -quotient if value < 0 else quotient


def _rem8(value: int) -> int:
    """Remainder of value by 8, taking the sign of value."""
    remainder = abs(value) % 8
    return -remainder if value < 0 else remainder


def _register(line: str) -> int:
    parts = line.split(" ", 2)
    if len(parts) < 3:
        raise ValueError(f"cannot parse register line {line!r}")
    return int(parts[2])


@dataclass
class Computer:
    """Three registers and the program of 3-bit numbers they run."""

    a: int
    b: int
    c: int
    program: tuple[int, ...]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Computer:
        """Read three register lines, a blank line, then the program line."""
        rows = list(lines)
        if len(rows) < _HEADER_LINES:
            raise ValueError("input needs three registers, a blank line and a program")
        _, separator, program_text = rows[4].partition(" ")
        if not separator:
            raise ValueError(f"cannot parse program line {rows[4]!r}")
        program = tuple(int(number) for number in program_text.split(","))
        return cls(_register(rows[0]), _register(rows[1]), _register(rows[2]), program)

    def _combo(self, operand: int) -> int | None:
        if 0 <= operand <= 3:
            return operand
        if operand == 4:
            return self.a
        if operand == 5:
            return self.b
        if operand == 6:
            return self.c
        if operand == 7:
            return None
        raise ValueError(f"invalid combo operand {operand}")

    def run(self) -> list[int]:
        """Run until the program halts, updating the registers; return what it printed.

        The program halts when the pointer runs past its end or a combo operand is 7.
        """
        output: list[int] = []
        pointer = 0
        while pointer + 1 < len(self.program):
            opcode, operand = self.program[pointer], self.program[pointer + 1]
            if opcode == 3:
                pointer = operand if self.a != 0 else pointer + 2
                continue
            if opcode == 1:
                self.b ^= operand
            elif opcode == 4:
                self.b ^= self.c
            elif opcode in (0, 2, 5, 6, 7):
                value = self._combo(operand)
                if value is None:
                    break
                if opcode == 0:
                    self.a = _shift_div(self.a, value)
                elif opcode == 2:
                    self.b = _rem8(value)
                elif opcode == 5:
                    output.append(_rem8(value) & 0xFF)
                elif opcode == 6:
                    self.b = _shift_div(self.a, value)
                else:
                    self.c = _shift_div(self.a, value)
            else:
                raise ValueError(f"invalid opcode {opcode}")
            pointer += 2
        return output


def program_output(lines: Iterable[str]) -> str:
    """The program's output joined with commas."""
    return ",".join(str(value) for value in Computer.from_lines(lines).run())


def lowest_self_replicating_a(lines: Iterable[str]) -> int:
    """Lowest value of register A for which the program prints a copy of itself."""
    computer = Computer.from_lines(lines)
    program = list(computer.program)
    if not program:
        raise ValueError("empty program")
    found: list[int] = []

    def search(total: int, power: int) -> None:
        for digit in range(8):
            start = total + 8**power * digit
            output = replace(computer, a=start).run()
            if len(output) != len(program):
                continue
            if output == program:
                found.append(start)
            if power == 0:
                continue
            if output[power] == program[power]:
                search(start, power - 1)

    search(0, len(program) - 1)
    if not found:
        raise ValueError("no value of register A reproduces the program")
    return min(found)