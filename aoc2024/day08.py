"""Resonant Collinearity: counting antinodes of same-frequency antennas."""

from dataclasses import dataclass
from itertools import combinations

Point = tuple[int, int]


@dataclass
class AntennaMap:
    """Antenna positions grouped by frequency label, plus the map size."""

    antennas_by_label: dict[str, list[Point]]
    nb_rows: int
    nb_cols: int


def parse_antennas(text: str) -> AntennaMap:
    lines = text.splitlines()
    if not lines:
        raise ValueError("the antenna map is empty")
    antennas: dict[str, list[Point]] = {}
    for row, line in enumerate(lines):
        for col, label in enumerate(line):
            if label != ".":
                antennas.setdefault(label, []).append((row, col))
    return AntennaMap(antennas, len(lines), len(lines[0]))


def is_in_bounds(point: Point, nb_rows: int, nb_cols: int) -> bool:
    row, col = point
    return 0 <= row < nb_rows and 0 <= col < nb_cols


def generate_antinodes(point: Point, shift: Point, nb_rows: int, nb_cols: int) -> list[Point]:
    """Repeatedly step from point by shift while staying on the map."""
    antinodes = []
    row, col = point[0] + shift[0], point[1] + shift[1]
    while is_in_bounds((row, col), nb_rows, nb_cols):
        antinodes.append((row, col))
        row, col = row + shift[0], col + shift[1]
    return antinodes


def _antenna_pairs(antenna_map: AntennaMap):
    for positions in antenna_map.antennas_by_label.values():
        yield from combinations(positions, 2)


def part1(text: str) -> int:
    antenna_map = parse_antennas(text)
    antinodes: set[Point] = set()
    for first, second in _antenna_pairs(antenna_map):
        d_row, d_col = first[0] - second[0], first[1] - second[1]
        for candidate in ((first[0] + d_row, first[1] + d_col), (second[0] - d_row, second[1] - d_col)):
            if is_in_bounds(candidate, antenna_map.nb_rows, antenna_map.nb_cols):
                antinodes.add(candidate)
    return len(antinodes)


def part2(text: str) -> int:
    antenna_map = parse_antennas(text)
    rows, cols = antenna_map.nb_rows, antenna_map.nb_cols
    antinodes: set[Point] = set()
    for first, second in _antenna_pairs(antenna_map):
        d_row, d_col = first[0] - second[0], first[1] - second[1]
        antinodes.update(generate_antinodes(first, (-d_row, -d_col), rows, cols))
        antinodes.update(generate_antinodes(second, (d_row, d_col), rows, cols))
    return len(antinodes)