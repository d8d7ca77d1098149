"""Race Condition: counting the cheats that shorten a race through walls."""

from __future__ import annotations

import heapq
from dataclasses import dataclass

Position = tuple[int, int]

DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))
MIN_SAVE_FOR_QUALIFIED_CHEAT = 100
PART_1_CHEAT_DISTANCE = 2
PART_2_CHEAT_DISTANCE = 20


@dataclass
class RaceTrack:
    """The racetrack as rows of booleans (True for track), with start and end."""

    track: list[list[bool]]
    start: Position
    end: Position

    @property
    def nb_rows(self) -> int:
        return len(self.track)

    @property
    def nb_cols(self) -> int:
        return len(self.track[0])

    def _is_track(self, position: Position) -> bool:
        row, col = position
        return 0 <= row < self.nb_rows and 0 <= col < self.nb_cols and self.track[row][col]

    def distances_from(self, origin: Position, target: Position) -> dict[Position, int]:
        """Shortest distances from origin to every cell settled before target."""
        # Among equal distances, larger rows and columns come out first.
        queue: list[tuple[int, int, int]] = [(0, -origin[0], -origin[1])]
        distances: dict[Position, int] = {}

        while queue:
            distance, neg_row, neg_col = heapq.heappop(queue)
            position = (-neg_row, -neg_col)
            if position in distances:
                continue
            distances[position] = distance
            if position == target:
                return distances

            for d_row, d_col in DIRECTIONS:
                neighbour = (position[0] + d_row, position[1] + d_col)
                if self._is_track(neighbour):
                    heapq.heappush(queue, (distance + 1, -neighbour[0], -neighbour[1]))

        raise ValueError(f"Failed to reach {target} from {origin}")

    def cells_within(self, origin: Position, max_distance: int) -> list[tuple[Position, int]]:
        """Track cells within a Manhattan distance of origin, with their distance."""
        origin_row, origin_col = origin
        reachable = []
        for row in range(max(0, origin_row - max_distance), min(origin_row + max_distance, self.nb_rows - 1) + 1):
            for col in range(max(0, origin_col - max_distance), min(origin_col + max_distance, self.nb_cols - 1) + 1):
                if not self.track[row][col]:
                    continue
                distance = abs(row - origin_row) + abs(col - origin_col)
                if distance <= max_distance:
                    reachable.append(((row, col), distance))
        return reachable

    def count_qualified_cheats(self, shortest: int, min_save: int, cheat_distance: int) -> int:
        """Count distinct (start, end) cheats that save at least min_save steps."""
        from_start = self.distances_from(self.start, self.end)
        from_end = self.distances_from(self.end, self.start)

        cheats: set[tuple[Position, Position]] = set()
        for row in range(1, self.nb_rows - 1):
            for col in range(1, self.nb_cols - 1):
                if not self.track[row][col]:
                    continue
                before = from_start.get((row, col))
                if before is None:
                    continue
                for position, distance in self.cells_within((row, col), cheat_distance):
                    after = from_end.get(position)
                    if after is None:
                        continue
                    total = before + distance + after
                    if total < shortest and shortest - total >= min_save:
                        cheats.add(((row, col), position))
        return len(cheats)


def parse_racetrack(text: str) -> RaceTrack:
    """Parse a map of # walls, . track, S start and E end."""
    start: Position = (0, 0)
    end: Position = (0, 0)
    track: list[list[bool]] = []
    for row, line in enumerate(line for line in text.splitlines() if line):
        cells = []
        for col, symbol in enumerate(line):
            if symbol == "#":
                cells.append(False)
                continue
            if symbol == "S":
                start = (row, col)
            elif symbol == "E":
                end = (row, col)
            elif symbol != ".":
                raise ValueError(f"Unexpected cell character: {symbol!r}")
            cells.append(True)
        track.append(cells)
    if not track:
        raise ValueError("the racetrack is empty")
    return RaceTrack(track, start, end)


def count_cheats(text: str, cheat_distance: int, min_save: int = MIN_SAVE_FOR_QUALIFIED_CHEAT) -> int:
    """Count the cheats of at most cheat_distance that save at least min_save."""
    race = parse_racetrack(text)
    shortest = race.distances_from(race.start, race.end)[race.end]
    return race.count_qualified_cheats(shortest, min_save, cheat_distance)


def part1(text: str) -> int:
    return count_cheats(text, PART_1_CHEAT_DISTANCE)


def part2(text: str) -> int:
    return count_cheats(text, PART_2_CHEAT_DISTANCE)