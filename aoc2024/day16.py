"""Reindeer Maze: lowest-score paths through a maze."""

from __future__ import annotations

import heapq
from collections.abc import Mapping, Sequence

ROTATION_COST = 1000
FORWARD_COST = 1

Position = tuple[int, int]
Direction = tuple[int, int]
Scores = dict[tuple[Position, Direction], int]

EAST: Direction = (0, 1)
WEST: Direction = (0, -1)
SOUTH: Direction = (1, 0)
NORTH: Direction = (-1, 0)

ROTATE_CLOCKWISE = {NORTH: EAST, EAST: SOUTH, SOUTH: WEST, WEST: NORTH}
ROTATE_COUNTERCLOCKWISE = {after: before for before, after in ROTATE_CLOCKWISE.items()}


def _step(position: Position, direction: Direction) -> Position:
    return (position[0] + direction[0], position[1] + direction[1])


def parse_maze(text: str) -> list[str]:
    """Return the rows of the maze."""
    return [line for line in text.splitlines() if line]


def find_start_end(maze: Sequence[str]) -> tuple[Position, Position]:
    """The start is in the bottom-left corner, the end in the top-right one."""
    if len(maze) < 2 or len(maze[0]) < 2:
        raise ValueError("the maze is too small")
    return (len(maze) - 2, 1), (1, len(maze[0]) - 2)


def dijkstra(maze: Sequence[str], start: Position) -> Scores:
    """Lowest score to reach every (tile, heading), starting east-facing."""
    queue: list[tuple[int, Position, Direction]] = [(0, start, EAST)]
    scores: Scores = {}

    while queue:
        score, position, direction = heapq.heappop(queue)
        if (position, direction) in scores:
            continue
        scores[(position, direction)] = score

        forward = _step(position, direction)
        if maze[forward[0]][forward[1]] != "#":
            heapq.heappush(queue, (score + FORWARD_COST, forward, direction))
        heapq.heappush(queue, (score + ROTATION_COST, position, ROTATE_CLOCKWISE[direction]))
        heapq.heappush(
            queue, (score + ROTATION_COST, position, ROTATE_COUNTERCLOCKWISE[direction])
        )

    return scores


def smallest_score_at(scores: Mapping[tuple[Position, Direction], int], position: Position) -> tuple[Direction, int]:
    """The heading and score of the cheapest way to reach position."""
    found = [
        (direction, scores[(position, direction)])
        for direction in (EAST, NORTH, SOUTH, WEST)
        if (position, direction) in scores
    ]
    if not found:
        raise ValueError(f"position {position} was never reached")
    return min(found, key=lambda item: item[1])


def calculate_rotations(from_direction: Direction, to_direction: Direction) -> int:
    """Fewest quarter turns to go from one heading to another."""

    def count(rotate: Mapping[Direction, Direction]) -> int:
        rotations = 0
        current = from_direction
        while current != to_direction:
            current = rotate[current]
            rotations += 1
        return rotations

    return min(count(ROTATE_CLOCKWISE), count(ROTATE_COUNTERCLOCKWISE))


def best_path_tiles(scores: Mapping[tuple[Position, Direction], int], end: Position) -> set[Position]:
    """Every tile lying on at least one lowest-score path to end, traced backwards."""
    direction, score = smallest_score_at(scores, end)
    tiles: set[Position] = set()
    frontier = {(end, direction, score)}

    while frontier:
        next_frontier: set[tuple[Position, Direction, int]] = set()
        for tile, tile_direction, tile_score in frontier:
            tiles.add(tile)
            opposite = ROTATE_CLOCKWISE[ROTATE_CLOCKWISE[tile_direction]]
            predecessor = _step(tile, opposite)
            for entry_direction in (NORTH, SOUTH, EAST, WEST):
                entry_score = scores.get((predecessor, entry_direction))
                if entry_score is None:
                    continue
                rotations = calculate_rotations(entry_direction, tile_direction)
                if entry_score + rotations * ROTATION_COST + FORWARD_COST == tile_score:
                    next_frontier.add((predecessor, entry_direction, entry_score))
        frontier = next_frontier

    return tiles


def part1(text: str) -> int:
    maze = parse_maze(text)
    start, end = find_start_end(maze)
    _, score = smallest_score_at(dijkstra(maze, start), end)
    return score


def part2(text: str) -> int:
    maze = parse_maze(text)
    start, end = find_start_end(maze)
    return len(best_path_tiles(dijkstra(maze, start), end))