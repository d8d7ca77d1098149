import pytest

from aoc2024.day15 import Cell, Move, Warehouse, WarehouseDebugger, parse_warehouse, part1, part2

SMALL_MAP = """\
########
#..O.O.#
##@.O..#
#...O..#
#.#.O..#
#...O..#
#......#
########
"""
SMALL = SMALL_MAP + "\n<^^>>>vv<v>>v<<\n"

WIDE = """\
#######
#...#.#
#.....#
#..OO@#
#..O..#
#.....#
#######

<vv<<^^<<^^
"""

SEPARATOR = "-----------------------"


def _count(warehouse, *cells):
    return sum(cell in cells for row in warehouse.grid for cell in row)


def test_part1_small_example():
    assert part1(SMALL) == 2028


def test_parse_robot_and_moves():
    warehouse = parse_warehouse(SMALL)
    assert warehouse.robot == (2, 2)
    assert len(warehouse.moves) == len("<^^>>>vv<v>>v<<")
    assert warehouse.moves[0] is Move.LEFT
    assert warehouse.moves[1] is Move.UP


def test_str_round_trips_map():
    assert str(parse_warehouse(SMALL)) == SMALL_MAP


def test_invalid_move_raises():
    with pytest.raises(ValueError):
        parse_warehouse("###\n#@#\n###\n\n<x>\n")


def test_moves_preserve_box_count():
    warehouse = parse_warehouse(SMALL)
    boxes = _count(warehouse, Cell.BOX)
    walls = _count(warehouse, Cell.WALL)
    warehouse.apply_robot_moves()
    assert _count(warehouse, Cell.BOX) == boxes
    assert _count(warehouse, Cell.WALL) == walls
    assert warehouse.grid[warehouse.robot[0]][warehouse.robot[1]] is Cell.EMPTY


def test_wide_example_final_state():
    warehouse = parse_warehouse(WIDE)
    warehouse.make_wide()
    warehouse.apply_robot_moves()
    assert str(warehouse) == (
        "##############\n"
        "##...[].##..##\n"
        "##...@.[]...##\n"
        "##....[]....##\n"
        "##..........##\n"
        "##..........##\n"
        "##############\n"
    )
    assert part2(WIDE) == warehouse.gps_sum()


def test_wide_boxes_stay_paired():
    warehouse = parse_warehouse(SMALL)
    warehouse.make_wide()
    boxes = _count(warehouse, Cell.BOX_LEFT)
    warehouse.apply_robot_moves()
    assert _count(warehouse, Cell.BOX_LEFT) == boxes
    assert _count(warehouse, Cell.BOX_RIGHT) == boxes
    for row in warehouse.grid:
        for col, cell in enumerate(row):
            if cell is Cell.BOX_LEFT:
                assert row[col + 1] is Cell.BOX_RIGHT


def test_make_wide_doubles_width():
    warehouse = parse_warehouse(SMALL)
    narrow = [len(row) for row in warehouse.grid]
    robot_row, robot_col = warehouse.robot
    warehouse.make_wide()
    assert [len(row) for row in warehouse.grid] == [2 * width for width in narrow]
    assert warehouse.robot == (robot_row, 2 * robot_col)
    assert _count(warehouse, Cell.BOX) == 0


def test_make_wide_twice_raises():
    warehouse = parse_warehouse(SMALL)
    warehouse.make_wide()
    with pytest.raises(ValueError):
        warehouse.make_wide()


def test_push_row_of_boxes():
    warehouse = parse_warehouse("########\n#@OO...#\n########\n\n>>\n")
    warehouse.apply_robot_moves()
    assert str(warehouse) == "########\n#..@OO.#\n########\n"


def test_wide_box_blocked_by_wall_stays():
    warehouse = parse_warehouse("#####\n#.O.#\n#.@.#\n#####\n\n^\n")
    warehouse.make_wide()
    before = str(warehouse)
    robot = warehouse.robot
    warehouse.apply_robot_moves()
    assert str(warehouse) == before
    assert warehouse.robot == robot


def test_parse_every_move_symbol():
    warehouse = parse_warehouse("###\n#@#\n###\n\n<>^v\n")
    assert warehouse.moves == [Move.LEFT, Move.RIGHT, Move.UP, Move.DOWN]


def test_debugger_inactive_by_default():
    assert WarehouseDebugger().is_activated is False


def test_debugger_logs_states(tmp_path):
    path = tmp_path / "debug.txt"
    warehouse = parse_warehouse("#####\n#@..#\n#####\n\n>\n")
    initial = str(warehouse)
    warehouse.debugger.activate(path)
    warehouse.apply_robot_moves()
    assert warehouse.robot == (1, 2)
    expected = f"{initial}\n{SEPARATOR}\n\nMove RIGHT\n{warehouse}\n{SEPARATOR}\n\n"
    assert path.read_text(encoding="utf-8") == expected


def test_debugger_skips_moves_into_walls(tmp_path):
    path = tmp_path / "debug.txt"
    warehouse = parse_warehouse("#####\n#@..#\n#####\n\n<\n")
    initial = str(warehouse)
    warehouse.debugger.activate(path)
    warehouse.apply_robot_moves()
    assert path.read_text(encoding="utf-8") == f"{initial}\n{SEPARATOR}\n\n"


def test_warehouse_built_directly():
    warehouse = Warehouse(
        [[Cell.WALL, Cell.EMPTY, Cell.BOX, Cell.EMPTY, Cell.WALL]], (0, 1), [Move.RIGHT]
    )
    before = warehouse.gps_sum()
    warehouse.apply_robot_moves()
    assert warehouse.robot == (0, 2)
    assert warehouse.gps_sum() == before + 1