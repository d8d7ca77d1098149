"""RAM Run: shortest paths through memory as bytes fall on it."""

from __future__ import annotations

import heapq
from collections.abc import Iterable

Coordinate = tuple[int, int]

MEMORY_SIZE = 71
SIMULATION_ROUNDS = 1024

_DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))


class Computer:
    """A square memory space and the bytes that fall on it, in order."""

    def __init__(self, memory_size: int, fallen_bytes: Iterable[Coordinate]) -> None:
        self.memory_size = memory_size
        self.fallen_bytes = list(fallen_bytes)
        self.corrupted: set[Coordinate] = set()

    def _corrupt_first(self, count: int) -> None:
        if count > len(self.fallen_bytes):
            raise ValueError(f"only {len(self.fallen_bytes)} bytes fall, not {count}")
        self.corrupted.update(self.fallen_bytes[:count])

    def run_simulation(self, nb_rounds: int) -> None:
        """Let the first nb_rounds bytes fall."""
        self._corrupt_first(nb_rounds)

    def _in_bounds(self, coordinate: Coordinate) -> bool:
        return all(0 <= value < self.memory_size for value in coordinate)

    def find_shortest_path(self) -> set[Coordinate] | None:
        """Cells of one shortest path from the top-left to the bottom-right corner."""
        goal = (self.memory_size - 1, self.memory_size - 1)
        queue: list[tuple[int, int, int, Coordinate, Coordinate | None]] = [
            (0, 0, 0, (0, 0), None)
        ]
        visited: set[Coordinate] = set()
        predecessors: dict[Coordinate, Coordinate] = {}

        while queue:
            score, _, _, coordinate, predecessor = heapq.heappop(queue)
            if coordinate in visited:
                continue
            visited.add(coordinate)
            if predecessor is not None:
                predecessors[coordinate] = predecessor

            if coordinate == goal:
                return _trace_back(goal, predecessors)

            for d_first, d_second in _DIRECTIONS:
                target = (coordinate[0] + d_first, coordinate[1] + d_second)
                if not self._in_bounds(target) or target in self.corrupted:
                    continue
                heapq.heappush(queue, (score + 1, -target[1], -target[0], target, coordinate))

        return None

    def run_simulation_until_blocked(self, start_at: int) -> Coordinate:
        """Drop bytes after the first start_at until the exit is cut off; return that byte."""
        self._corrupt_first(start_at)
        path = self.find_shortest_path()

        for byte in self.fallen_bytes[start_at:]:
            self.corrupted.add(byte)
            if path is not None and byte in path:
                path = self.find_shortest_path()
                if path is None:
                    return byte

        raise ValueError("No blocking byte found")


def _trace_back(goal: Coordinate, predecessors: dict[Coordinate, Coordinate]) -> set[Coordinate]:
    path = set()
    current: Coordinate | None = goal
    while current is not None:
        path.add(current)
        current = predecessors.get(current)
    return path


def parse_bytes(text: str) -> list[Coordinate]:
    """Parse one "x,y" coordinate per line."""
    coordinates = []
    for line in text.splitlines():
        if not line.strip():
            continue
        first, separator, second = line.partition(",")
        if not separator:
            raise ValueError(f"expected 'x,y', got {line!r}")
        coordinates.append((int(first), int(second)))
    return coordinates


def part1(text: str, memory_size: int = MEMORY_SIZE, rounds: int = SIMULATION_ROUNDS) -> int | None:
    """Steps of the shortest path after some bytes fell, or None without a path."""
    computer = Computer(memory_size, parse_bytes(text))
    computer.run_simulation(rounds)
    path = computer.find_shortest_path()
    return None if path is None else len(path) - 1


def part2(text: str, memory_size: int = MEMORY_SIZE, rounds: int = SIMULATION_ROUNDS) -> Coordinate:
    """The first byte that cuts the exit off."""
    computer = Computer(memory_size, parse_bytes(text))
    return computer.run_simulation_until_blocked(rounds)