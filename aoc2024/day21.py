"""Keypad Conundrum: fewest button presses through layers of robot keypads."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Mapping, Sequence
from enum import Enum


class Direction(Enum):
    """An arrow key, valued by its symbol."""

    UP = "^"
    DOWN = "v"
    RIGHT = ">"
    LEFT = "<"


KeypadLayout = Mapping[str, Sequence[tuple[Direction, str]]]

NUMERIC_KEYPAD: dict[str, list[tuple[Direction, str]]] = {
    "7": [(Direction.RIGHT, "8"), (Direction.DOWN, "4")],
    "8": [(Direction.LEFT, "7"), (Direction.RIGHT, "9"), (Direction.DOWN, "5")],
    "9": [(Direction.LEFT, "8"), (Direction.DOWN, "6")],
    "4": [(Direction.UP, "7"), (Direction.RIGHT, "5"), (Direction.DOWN, "1")],
    "5": [(Direction.UP, "8"), (Direction.LEFT, "4"), (Direction.RIGHT, "6"), (Direction.DOWN, "2")],
    "6": [(Direction.UP, "9"), (Direction.LEFT, "5"), (Direction.DOWN, "3")],
    "1": [(Direction.UP, "4"), (Direction.RIGHT, "2")],
    "2": [(Direction.UP, "5"), (Direction.LEFT, "1"), (Direction.RIGHT, "3"), (Direction.DOWN, "0")],
    "3": [(Direction.UP, "6"), (Direction.LEFT, "2"), (Direction.DOWN, "A")],
    "0": [(Direction.UP, "2"), (Direction.RIGHT, "A")],
    "A": [(Direction.UP, "3"), (Direction.LEFT, "0")],
}

DIRECTIONAL_KEYPAD: dict[str, list[tuple[Direction, str]]] = {
    "^": [(Direction.RIGHT, "A"), (Direction.DOWN, "v")],
    "A": [(Direction.LEFT, "^"), (Direction.DOWN, ">")],
    "<": [(Direction.RIGHT, "v")],
    "v": [(Direction.UP, "^"), (Direction.LEFT, "<"), (Direction.RIGHT, ">")],
    ">": [(Direction.UP, "A"), (Direction.LEFT, "v")],
}


def _descending(key: str) -> tuple[int, ...]:
    return tuple(-ord(symbol) for symbol in key)


def keypad_shortest_sequences(source: str, target: str, keypad: KeypadLayout) -> list[str]:
    """Every shortest arrow sequence moving the arm from source to target."""
    if source not in keypad:
        raise ValueError(f"unknown key: {source!r}")

    counter = itertools.count()
    queue = [(0, _descending(source), next(counter), source, "")]
    shortest: dict[str, list[str]] = {}

    while queue:
        _, _, _, key, sequence = heapq.heappop(queue)
        found = shortest.setdefault(key, [])
        if found and len(found[0]) != len(sequence):
            continue
        found.append(sequence)

        for direction, neighbour in keypad[key]:
            heapq.heappush(
                queue,
                (len(sequence) + 1, _descending(neighbour), next(counter), neighbour, sequence + direction.value),
            )

    return list(shortest.get(target, []))


class Keypad:
    """A keypad layout able to tell how to press one key after another."""

    def __init__(self, keys: KeypadLayout) -> None:
        self.keys = keys

    def shortest_sequences(self, source: str, target: str) -> list[str]:
        """Shortest sequences moving from source to target, each ending with a press of A."""
        return [sequence + "A" for sequence in keypad_shortest_sequences(source, target, self.keys)]


def _pairs(sequence: str):
    # Every robot arm starts on the A key.
    keys = "A" + sequence
    return zip(keys, keys[1:])


class KeypadLayeringSystem:
    """A numeric keypad driven through a stack of directional keypads."""

    def __init__(self, nb_directional_layers: int) -> None:
        if nb_directional_layers < 1:
            raise ValueError("at least one directional layer is needed")
        self.numerical_keypad = Keypad(NUMERIC_KEYPAD)
        self.directional_keypad = Keypad(DIRECTIONAL_KEYPAD)
        self.nb_directional_layers = nb_directional_layers
        self._cache: dict[tuple[str, str, int], int] = {}

    def _sequence_cost(self, sequence: str, remaining: int) -> int:
        return sum(self._directional_cost(source, target, remaining) for source, target in _pairs(sequence))

    def _directional_cost(self, source: str, target: str, remaining: int) -> int:
        key = (source, target, remaining)
        if key in self._cache:
            return self._cache[key]

        sequences = self.directional_keypad.shortest_sequences(source, target)
        if remaining == 0:
            result = min((len(sequence) for sequence in sequences), default=0)
        else:
            result = min(self._sequence_cost(sequence, remaining - 1) for sequence in sequences)

        self._cache[key] = result
        return result

    def _numeric_cost(self, source: str, target: str) -> int:
        sequences = self.numerical_keypad.shortest_sequences(source, target)
        if not sequences:
            raise ValueError(f"no way from {source!r} to {target!r} on the numeric keypad")
        return min(self._sequence_cost(sequence, self.nb_directional_layers - 1) for sequence in sequences)

    def fewest_presses(self, code: str) -> int:
        """Fewest presses on the outermost keypad to type code."""
        return sum(self._numeric_cost(source, target) for source, target in _pairs(code))


def _numeric_part(code: str) -> int:
    prefix = code[:3]
    return int(prefix) if prefix.isascii() and prefix.isdigit() else 0


def complexity_sum(text: str, nb_layers: int) -> int:
    """Sum of press count times numeric part over every code line."""
    system = KeypadLayeringSystem(nb_layers)
    return sum(
        system.fewest_presses(code) * _numeric_part(code)
        for code in (line.strip() for line in text.splitlines())
        if code
    )


def part1(text: str) -> int:
    return complexity_sum(text, 2)


def part2(text: str) -> int:
    return complexity_sum(text, 25)