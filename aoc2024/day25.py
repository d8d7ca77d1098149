"""Code Chronicle: matching lock and key schematics."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

WIDTH = 5
MAX_HEIGHT = 5
LOCK_TOP = "#" * WIDTH

Heights = tuple[int, ...]


def _heights(schematic: Sequence[str]) -> Heights:
    counts = [0] * WIDTH
    for line in schematic:
        for index, symbol in enumerate(line):
            if symbol != "#":
                continue
            if index >= WIDTH:
                raise ValueError(f"schematic line is wider than {WIDTH}: {line!r}")
            counts[index] += 1
    if 0 in counts:
        raise ValueError("every column of a schematic needs at least one '#'")
    return tuple(count - 1 for count in counts)


def parse_schematics(text: str) -> tuple[list[Heights], list[Heights]]:
    """Return the pin heights of the locks and of the keys, in input order."""
    blocks: list[list[str]] = [[]]
    for line in text.splitlines():
        if line:
            blocks[-1].append(line)
        else:
            blocks.append([])

    locks: list[Heights] = []
    keys: list[Heights] = []
    for block in blocks:
        if not block:
            continue
        (locks if block[0] == LOCK_TOP else keys).append(_heights(block))
    return locks, keys


def count_fitting_pairs(locks: Iterable[Heights], keys: Iterable[Heights]) -> int:
    """Count lock/key pairs whose columns never overlap."""
    key_list = list(keys)
    return sum(
        all(lock_pin + key_pin <= MAX_HEIGHT for lock_pin, key_pin in zip(lock, key))
        for lock in locks
        for key in key_list
    )


def part1(text: str) -> int:
    locks, keys = parse_schematics(text)
    return count_fitting_pairs(locks, keys)