"""Mull It Over: summing multiplications found in corrupted memory."""

import re

MUL_PATTERN = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)")
INSTRUCTION_PATTERN = re.compile(r"do\(\)|don't\(\)|mul\((\d{1,3}),(\d{1,3})\)")


def _product(match: re.Match) -> int:
    return int(match[1]) * int(match[2])


def sum_multiplications(text: str) -> int:
    """Sum every mul(a,b) instruction, line by line."""
    return sum(
        _product(match) for line in text.splitlines() for match in MUL_PATTERN.finditer(line)
    )


def sum_enabled_multiplications(text: str) -> int:
    """Sum mul(a,b) instructions, honouring do() and don't() switches.

    The lines are joined without separators into one memory string.
    """
    memory = "".join(text.splitlines())
    total = 0
    enabled = True
    for match in INSTRUCTION_PATTERN.finditer(memory):
        if match[0] == "do()":
            enabled = True
        elif match[0] == "don't()":
            enabled = False
        elif enabled:
            total += _product(match)
    return total


def part1(text: str) -> int:
    return sum_multiplications(text)


def part2(text: str) -> int:
    return sum_enabled_multiplications(text)