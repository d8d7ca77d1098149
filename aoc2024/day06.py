"""Guard Gallivant: following a patrolling guard around obstacles."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum

OBSTACLE = "#"
FLOOR = "."
GUARD = "^"

Position = tuple[int, int]


class Direction(Enum):
    """A heading of the guard, valued by its (row, col) step."""

    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    def turn_right(self) -> Direction:
        """The heading after a quarter turn clockwise."""
        return _CLOCKWISE[self]


_CLOCKWISE = {
    Direction.NORTH: Direction.EAST,
    Direction.EAST: Direction.SOUTH,
    Direction.SOUTH: Direction.WEST,
    Direction.WEST: Direction.NORTH,
}


class RunEnd(Enum):
    """How a patrol ended."""

    LOOP = "loop"
    OUT_OF_GRID = "out_of_grid"


@dataclass
class Grid:
    """The lab map, one list of characters per row."""

    cells: list[list[str]]

    def is_obstacle(self, position: Position) -> bool:
        row, col = position
        return self.cells[row][col] == OBSTACLE

    def is_valid_position(self, position: Position) -> bool:
        row, col = position
        return 0 <= row < len(self.cells) and 0 <= col < len(self.cells[0])

    def find_guard(self) -> Position:
        """Locate the guard's starting cell."""
        for row, line in enumerate(self.cells):
            for col, cell in enumerate(line):
                if cell == GUARD:
                    return (row, col)
        raise ValueError("Guard not found on the grid")


@contextmanager
def _extra_obstacle(grid: Grid, position: Position) -> Iterator[None]:
    row, col = position
    grid.cells[row][col] = OBSTACLE
    try:
        yield
    finally:
        grid.cells[row][col] = FLOOR


class Runner:
    """Walks the guard across a grid, recording visited cells and headings."""

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self.guard_position: Position = grid.find_guard()
        self.guard_direction = Direction.NORTH
        self.distinct_visited = 0
        self.visited_cells: dict[Position, set[Direction]] = {}

    def _next_move(self) -> tuple[Position, Direction] | None:
        direction = self.guard_direction
        row, col = self.guard_position
        for _ in range(4):
            d_row, d_col = direction.value
            candidate = (row + d_row, col + d_col)
            if not self.grid.is_valid_position(candidate):
                return None
            if not self.grid.is_obstacle(candidate):
                return candidate, direction
            direction = direction.turn_right()
        return None

    def run(self) -> RunEnd:
        """Patrol until the guard leaves the grid or repeats a state."""
        while self.grid.is_valid_position(self.guard_position):
            headings = self.visited_cells.get(self.guard_position)
            if headings is None:
                self.distinct_visited += 1
            elif self.guard_direction in headings:
                return RunEnd.LOOP
            self.visited_cells.setdefault(self.guard_position, set()).add(self.guard_direction)

            step = self._next_move()
            if step is None:
                return RunEnd.OUT_OF_GRID
            self.guard_position, self.guard_direction = step
        return RunEnd.OUT_OF_GRID


def parse_grid(text: str) -> Grid:
    return Grid([list(line) for line in text.splitlines() if line])


def part1(text: str) -> int:
    """Count the distinct cells the guard visits."""
    runner = Runner(parse_grid(text))
    runner.run()
    return runner.distinct_visited


def part2(text: str) -> int:
    """Count the single obstacle placements that trap the guard in a loop."""
    grid = parse_grid(text)
    runner = Runner(grid)
    start = runner.guard_position
    runner.run()

    loops = 0
    for position in set(runner.visited_cells) - {start}:
        with _extra_obstacle(grid, position):
            if Runner(grid).run() is RunEnd.LOOP:
                loops += 1
    return loops