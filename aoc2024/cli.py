"""Command line entry point: solve one part of one day's puzzle."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path

from aoc2024 import (
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day15,
    day16,
    day17,
    day18,
    day19,
    day20,
    day21,
    day23,
    day24,
    day25,
)

SOLVERS: dict[tuple[int, int], Callable[..., object]] = {
    (2, 1): day02.part1,
    (2, 2): day02.part2,
    (3, 1): day03.part1,
    (3, 2): day03.part2,
    (4, 1): day04.part1,
    (4, 2): day04.part2,
    (5, 1): day05.part1,
    (5, 2): day05.part2,
    (6, 1): day06.part1,
    (6, 2): day06.part2,
    (7, 1): day07.part1,
    (7, 2): day07.part2,
    (8, 1): day08.part1,
    (8, 2): day08.part2,
    (9, 1): day09.part1,
    (9, 2): day09.part2,
    (15, 1): day15.part1,
    (15, 2): day15.part2,
    (16, 1): day16.part1,
    (16, 2): day16.part2,
    (17, 1): day17.part1,
    (17, 2): day17.part2,
    (18, 1): day18.part1,
    (18, 2): day18.part2,
    (19, 1): day19.part1,
    (19, 2): day19.part2,
    (20, 1): day20.part1,
    (20, 2): day20.part2,
    (21, 1): day21.part1,
    (21, 2): day21.part2,
    (23, 1): day23.part1,
    (23, 2): day23.part2,
    (24, 1): day24.part1,
    (24, 2): day24.part2,
    (25, 1): day25.part1,
}

# Parts whose answer does not depend on the puzzle input.
WITHOUT_INPUT = frozenset({(17, 2), (24, 2)})

DAYS = frozenset(day for day, _ in SOLVERS)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aoc2024", description="Solve a puzzle of the year.")
    parser.add_argument("day", type=int, help="day number")
    parser.add_argument("part", type=int, choices=(1, 2), help="puzzle part")
    parser.add_argument("input", nargs="?", default="-", help="input file, '-' for stdin")
    return parser


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.day not in DAYS:
        parser.error(f"day {args.day} is not available")
    key = (args.day, args.part)
    solve = SOLVERS.get(key)
    if solve is None:
        parser.error(f"day {args.day} has no part {args.part}")

    if key in WITHOUT_INPUT:
        result = solve()
    else:
        result = solve(_read_input(args.input))

    print("No path found" if result is None else result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())