"""Linen Layout: building towel designs from available patterns."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cache


def parse_towels(text: str) -> tuple[list[str], list[str]]:
    """Return the patterns of the first line and the designs after the blank line."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("the input is empty")
    return lines[0].split(", "), lines[2:]


def is_design_possible(design: str, patterns: Sequence[str]) -> bool:
    """Whether design can be made by laying patterns end to end."""
    usable = [pattern for pattern in patterns if pattern]

    @cache
    def possible_from(index: int) -> bool:
        if index >= len(design):
            return True
        return any(
            design.startswith(pattern, index) and possible_from(index + len(pattern))
            for pattern in usable
        )

    return possible_from(0)


def count_arrangements(design: str, patterns: Sequence[str]) -> int:
    """Number of different ways to make design from patterns."""
    usable = [pattern for pattern in patterns if pattern]

    @cache
    def count_from(index: int) -> int:
        if index >= len(design):
            return 1
        return sum(
            count_from(index + len(pattern))
            for pattern in usable
            if design.startswith(pattern, index)
        )

    return count_from(0)


def part1(text: str) -> int:
    patterns, designs = parse_towels(text)
    return sum(is_design_possible(design, patterns) for design in designs)


def part2(text: str) -> int:
    patterns, designs = parse_towels(text)
    return sum(count_arrangements(design, patterns) for design in designs)