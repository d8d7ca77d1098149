import pytest

from aoc2024.day16 import (
    EAST,
    NORTH,
    ROTATION_COST,
    SOUTH,
    WEST,
    best_path_tiles,
    calculate_rotations,
    dijkstra,
    find_start_end,
    parse_maze,
    part1,
    part2,
    smallest_score_at,
)

EXAMPLE = """\
###############
#.......#....E#
#.#.###.#.###.#
#.....#.#...#.#
#.###.#####.#.#
#.#.#.......#.#
#.#.#####.###.#
#...........#.#
###.#.#####.#.#
#...#.....#.#.#
#.#.#.###.#.#.#
#.....#...#.#.#
#.###.#.#.#.#.#
#S..#.....#...#
###############
"""

DIRECTIONS = [EAST, NORTH, SOUTH, WEST]


def corridor(length: int) -> str:
    wall = "#" * (length + 2)
    return f"{wall}\n#{'.' * length}#\n{wall}\n"


def test_example_part1():
    assert part1(EXAMPLE) == 7036


def test_example_part2():
    assert part2(EXAMPLE) == 45


def test_start_and_end_are_marked_in_example():
    maze = parse_maze(EXAMPLE)
    (start_row, start_col), (end_row, end_col) = find_start_end(maze)
    assert maze[start_row][start_col] == "S"
    assert maze[end_row][end_col] == "E"


def test_dijkstra_start_scores():
    maze = parse_maze(EXAMPLE)
    start, _ = find_start_end(maze)
    scores = dijkstra(maze, start)
    assert scores[(start, EAST)] == 0
    assert scores[(start, NORTH)] == ROTATION_COST
    assert scores[(start, SOUTH)] == ROTATION_COST
    assert all(score >= 0 for score in scores.values())


@pytest.mark.parametrize("length", [2, 3, 6])
def test_corridor(length):
    assert part1(corridor(length)) == length - 1
    assert part2(corridor(length)) == length


@pytest.mark.parametrize("direction", DIRECTIONS)
def test_no_rotation_needed_for_same_direction(direction):
    assert calculate_rotations(direction, direction) == 0


@pytest.mark.parametrize("first", DIRECTIONS)
@pytest.mark.parametrize("second", DIRECTIONS)
def test_rotations_are_symmetric(first, second):
    assert calculate_rotations(first, second) == calculate_rotations(second, first)


def test_half_turn_costs_more_than_quarter_turn():
    assert calculate_rotations(EAST, WEST) == calculate_rotations(NORTH, SOUTH)
    assert calculate_rotations(EAST, WEST) > calculate_rotations(EAST, NORTH)
    assert calculate_rotations(EAST, NORTH) == calculate_rotations(EAST, SOUTH)


def test_smallest_score_at_unreached_raises():
    maze = parse_maze(EXAMPLE)
    start, _ = find_start_end(maze)
    scores = dijkstra(maze, start)
    with pytest.raises(ValueError):
        smallest_score_at(scores, (0, 0))


def test_best_path_tiles_are_open_and_include_endpoints():
    maze = parse_maze(EXAMPLE)
    start, end = find_start_end(maze)
    tiles = best_path_tiles(dijkstra(maze, start), end)
    assert start in tiles
    assert end in tiles
    assert all(maze[row][col] != "#" for row, col in tiles)


def test_find_start_end_rejects_tiny_maze():
    with pytest.raises(ValueError):
        find_start_end(["#"])