"""Ceres Search: finding XMAS and X-MAS in a letter grid."""

from collections.abc import Sequence

Grid = Sequence[str]

DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0), (-1, 1), (-1, -1), (1, 1), (1, -1))
VALID_X_MAS_PATTERNS = frozenset(
    {
        ("M", "S", "M", "S"),
        ("S", "S", "M", "M"),
        ("S", "M", "S", "M"),
        ("M", "M", "S", "S"),
    }
)


def parse_grid(text: str) -> list[str]:
    """Return the non-blank rows of the grid."""
    return [line for line in text.splitlines() if line]


def count_xmas_at(grid: Grid, row: int, col: int) -> int:
    """Count the words MAS leading away from (row, col) in all eight directions."""
    height = len(grid)
    width = len(grid[row])
    count = 0
    for d_row, d_col in DIRECTIONS:
        end_row, end_col = row + 3 * d_row, col + 3 * d_col
        if not (0 <= end_row < height and 0 <= end_col < width):
            continue
        if all(
            grid[row + step * d_row][col + step * d_col] == letter
            for step, letter in enumerate("MAS", start=1)
        ):
            count += 1
    return count


def is_x_mas(grid: Grid, row: int, col: int) -> bool:
    """Whether the corners around (row, col) form two crossing MAS words."""
    if not (0 < row < len(grid) - 1 and 0 < col < len(grid[row]) - 1):
        return False
    corners = (
        grid[row - 1][col - 1],
        grid[row - 1][col + 1],
        grid[row + 1][col - 1],
        grid[row + 1][col + 1],
    )
    return corners in VALID_X_MAS_PATTERNS


def part1(text: str) -> int:
    grid = parse_grid(text)
    return sum(
        count_xmas_at(grid, row, col)
        for row, line in enumerate(grid)
        for col, letter in enumerate(line)
        if letter == "X"
    )


def part2(text: str) -> int:
    grid = parse_grid(text)
    return sum(
        is_x_mas(grid, row, col)
        for row, line in enumerate(grid)
        for col, letter in enumerate(line)
        if letter == "A"
    )