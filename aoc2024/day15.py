"""Warehouse Woes: a robot pushing boxes around a warehouse."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

Position = tuple[int, int]

_SEPARATOR = "-----------------------"


class Cell(Enum):
    """A warehouse tile, valued by its map symbol."""

    WALL = "#"
    BOX = "O"
    EMPTY = "."
    BOX_LEFT = "["
    BOX_RIGHT = "]"


class Move(Enum):
    """A robot move, valued by its (row, col) step."""

    LEFT = (0, -1)
    RIGHT = (0, 1)
    UP = (-1, 0)
    DOWN = (1, 0)

    def __str__(self) -> str:
        return self.name

    @property
    def is_horizontal(self) -> bool:
        return self in (Move.LEFT, Move.RIGHT)


_MOVE_SYMBOLS = {"<": Move.LEFT, ">": Move.RIGHT, "^": Move.UP, "v": Move.DOWN}

_WIDE_CELLS = {
    Cell.WALL: (Cell.WALL, Cell.WALL),
    Cell.EMPTY: (Cell.EMPTY, Cell.EMPTY),
    Cell.BOX: (Cell.BOX_LEFT, Cell.BOX_RIGHT),
}


def _step(position: Position, move: Move) -> Position:
    d_row, d_col = move.value
    return (position[0] + d_row, position[1] + d_col)


@dataclass
class WarehouseDebugger:
    """Writes every warehouse state to a file once activated."""

    path: Path | None = None

    @property
    def is_activated(self) -> bool:
        return self.path is not None

    def activate(self, path: str | Path) -> None:
        """Start logging to path, truncating whatever it held."""
        self.path = Path(path)
        self.path.write_text("", encoding="utf-8")

    def _write(self, text: str) -> None:
        if self.path is None:
            return
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(text)

    def debug_initial_state(self, state: str) -> None:
        self._write(f"{state}\n{_SEPARATOR}\n\n")

    def debug_move(self, move: Move, state: str) -> None:
        self._write(f"Move {move}\n{state}\n{_SEPARATOR}\n\n")


@dataclass
class Warehouse:
    """The warehouse grid, the robot's position and its planned moves."""

    grid: list[list[Cell]]
    robot: Position
    moves: list[Move]
    debugger: WarehouseDebugger = field(default_factory=WarehouseDebugger)

    def __str__(self) -> str:
        rows = ["".join(cell.value for cell in row) for row in self.grid]
        row, col = self.robot
        rows[row] = rows[row][:col] + "@" + rows[row][col + 1 :]
        return "\n".join(rows) + "\n"

    def _at(self, position: Position) -> Cell:
        return self.grid[position[0]][position[1]]

    def _set(self, position: Position, cell: Cell) -> None:
        self.grid[position[0]][position[1]] = cell

    def make_wide(self) -> None:
        """Double every tile horizontally; boxes become [] pairs."""
        wide_grid = []
        for row in self.grid:
            wide_row: list[Cell] = []
            for cell in row:
                if cell not in _WIDE_CELLS:
                    raise ValueError(f"Unsupported cell making warehouse wide: {cell}")
                wide_row.extend(_WIDE_CELLS[cell])
            wide_grid.append(wide_row)
        self.grid = wide_grid
        self.robot = (self.robot[0], self.robot[1] * 2)

    def gps_sum(self) -> int:
        """Sum 100 * row + col over every box (its left half when wide)."""
        return sum(
            100 * row + col
            for row, cells in enumerate(self.grid)
            for col, cell in enumerate(cells)
            if cell in (Cell.BOX, Cell.BOX_LEFT)
        )

    def _try_move_box(self, box: Position, move: Move) -> bool:
        target = _step(box, move)
        cell = self._at(target)
        if cell is Cell.WALL:
            return False
        if cell is Cell.BOX:
            if not self._try_move_box(target, move):
                return False
        elif cell is not Cell.EMPTY:
            raise ValueError(f"Unsupported cell for narrow boxes: {cell}")
        self._set(target, Cell.BOX)
        self._set(box, Cell.EMPTY)
        return True

    def _move_wide_box(
        self, left: Position, right: Position, left_target: Position, right_target: Position
    ) -> None:
        self._set(left_target, Cell.BOX_LEFT)
        self._set(right_target, Cell.BOX_RIGHT)
        self._set(left, Cell.EMPTY)
        self._set(right, Cell.EMPTY)

    def _try_move_wide_box(self, box: Position, move: Move, readonly: bool) -> bool:
        if move.is_horizontal:
            target = _step(_step(box, move), move)
            cell = self._at(target)
            if cell is Cell.WALL:
                return False
            if cell in (Cell.BOX_LEFT, Cell.BOX_RIGHT):
                if not self._try_move_wide_box(target, move, readonly):
                    return False
            elif cell is not Cell.EMPTY:
                raise ValueError(f"Unsupported cell for wide boxes: {cell}")
            if move is Move.LEFT:
                far, near = Cell.BOX_LEFT, Cell.BOX_RIGHT
            else:
                far, near = Cell.BOX_RIGHT, Cell.BOX_LEFT
            self._set(target, far)
            self._set(_step(box, move), near)
            self._set(box, Cell.EMPTY)
            return True

        # Vertically, both halves of the box move together.
        if self._at(box) is Cell.BOX_LEFT:
            left, right = box, _step(box, Move.RIGHT)
        else:
            left, right = _step(box, Move.LEFT), box
        left_target, right_target = _step(left, move), _step(right, move)
        left_cell, right_cell = self._at(left_target), self._at(right_target)

        if Cell.WALL in (left_cell, right_cell):
            return False

        if left_cell is Cell.EMPTY and right_cell is Cell.EMPTY:
            pass
        elif left_cell is Cell.BOX_RIGHT and right_cell is Cell.BOX_LEFT:
            # Two boxes above: check both before moving either.
            if not (
                self._try_move_wide_box(left_target, move, True)
                and self._try_move_wide_box(right_target, move, True)
            ):
                return False
            if not readonly:
                self._try_move_wide_box(left_target, move, False)
                self._try_move_wide_box(right_target, move, False)
        elif left_cell is Cell.EMPTY and self._try_move_wide_box(right_target, move, readonly):
            pass
        elif right_cell is Cell.EMPTY and self._try_move_wide_box(left_target, move, readonly):
            pass
        elif (
            right_cell is Cell.BOX_RIGHT
            and left_cell is Cell.BOX_LEFT
            and self._try_move_wide_box(left_target, move, readonly)
        ):
            pass
        else:
            return False

        if not readonly:
            self._move_wide_box(left, right, left_target, right_target)
        return True

    def apply_robot_moves(self) -> None:
        """Carry out every planned move, pushing boxes where possible."""
        if self.debugger.is_activated:
            self.debugger.debug_initial_state(str(self))

        for move in list(self.moves):
            target = _step(self.robot, move)
            cell = self._at(target)
            if cell is Cell.WALL:
                continue
            if cell is Cell.EMPTY:
                moved = True
            elif cell is Cell.BOX:
                moved = self._try_move_box(target, move)
            else:
                moved = self._try_move_wide_box(target, move, False)
            if moved:
                self.robot = target

            if self.debugger.is_activated:
                self.debugger.debug_move(move, str(self))


def _parse_cell(symbol: str) -> Cell:
    if symbol == "#":
        return Cell.WALL
    if symbol == "O":
        return Cell.BOX
    return Cell.EMPTY


def _parse_moves(line: str) -> list[Move]:
    try:
        return [_MOVE_SYMBOLS[symbol] for symbol in line]
    except KeyError as error:
        raise ValueError(f"Invalid direction found while parsing input: {error.args[0]}") from None


def parse_warehouse(text: str) -> Warehouse:
    """Parse the map, a blank line, then the move lines."""
    grid: list[list[Cell]] = []
    moves: list[Move] = []
    robot: Position = (0, 0)
    in_moves = False

    for row, line in enumerate(text.splitlines()):
        if not line:
            in_moves = True
            continue
        if in_moves:
            moves.extend(_parse_moves(line))
        else:
            col = line.find("@")
            if col >= 0:
                robot = (row, col)
            grid.append([_parse_cell(symbol) for symbol in line])

    return Warehouse(grid, robot, moves)


def part1(text: str) -> int:
    warehouse = parse_warehouse(text)
    warehouse.apply_robot_moves()
    return warehouse.gps_sum()


def part2(text: str) -> int:
    warehouse = parse_warehouse(text)
    warehouse.make_wide()
    warehouse.apply_robot_moves()
    return warehouse.gps_sum()