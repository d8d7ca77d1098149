"""Chronospatial Computer: a small 3-bit machine and its quine search."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

PROGRAM = (2, 4, 1, 1, 7, 5, 4, 0, 0, 3, 1, 6, 5, 5, 3, 0)


@dataclass
class Computer:
    """Three registers and a program of (opcode, operand) instructions."""

    register_a: int
    register_b: int
    register_c: int
    program: list[tuple[int, int]]

    def _combo(self, operand: int) -> int:
        if 0 <= operand <= 3:
            return operand
        if operand == 4:
            return self.register_a
        if operand == 5:
            return self.register_b
        if operand == 6:
            return self.register_c
        raise ValueError(f"Unsupported combo operand: {operand}")

    def run_program(self) -> list[int]:
        """Run until the pointer leaves the program; return the outputs."""
        pointer = 0
        output: list[int] = []
        while pointer < len(self.program):
            opcode, operand = self.program[pointer]
            pointer += 1
            match opcode:
                case 0:
                    self.register_a >>= self._combo(operand)
                case 1:
                    self.register_b ^= operand
                case 2:
                    self.register_b = self._combo(operand) % 8
                case 3:
                    if self.register_a != 0:
                        pointer = operand // 2
                case 4:
                    self.register_b ^= self.register_c
                case 5:
                    output.append(self._combo(operand) % 8)
                case 6:
                    self.register_b = self.register_a >> self._combo(operand)
                case 7:
                    self.register_c = self.register_a >> self._combo(operand)
                case _:
                    raise ValueError(f"opcode not supported: {opcode}")
        return output


def _value_after_colon(line: str) -> str:
    _, separator, value = line.partition(": ")
    if not separator:
        raise ValueError(f"expected 'name: value', got {line!r}")
    return value


def parse_computer(text: str) -> Computer:
    """Parse three register lines, a blank line and the program line."""
    lines = text.splitlines()
    if len(lines) < 5:
        raise ValueError("expected three registers, a blank line and a program")
    values = [int(value) for value in _value_after_colon(lines[4]).split(",")]
    if len(values) % 2:
        raise ValueError("the program must hold opcode and operand pairs")
    return Computer(
        register_a=int(_value_after_colon(lines[0])),
        register_b=int(_value_after_colon(lines[1])),
        register_c=int(_value_after_colon(lines[2])),
        program=list(zip(values[::2], values[1::2])),
    )


def run_instructions(a: int) -> int:
    """The first output of the puzzle program for register A = a."""
    b = (a % 8) ^ 1
    c = a >> b
    return ((b ^ c) ^ 6) % 8


def find_register_a(targets: Sequence[int]) -> int:
    """Smallest A whose outputs are targets, built three bits at a time."""
    candidates = [0]
    for target in reversed(targets):
        candidates = [
            a
            for low_bits in range(8)
            for candidate in candidates
            if run_instructions(a := candidate << 3 | low_bits) == target
        ]
    if not candidates:
        raise ValueError("no register value produces these outputs")
    return min(candidates)


def part1(text: str) -> str:
    return ",".join(str(value) for value in parse_computer(text).run_program())


def part2() -> int:
    return find_register_a(PROGRAM)