"""Red-Nosed Reports: deciding which level reports are safe."""

from collections.abc import Sequence

MIN_LEVEL_DIFF = 1
MAX_LEVEL_DIFF = 3


def parse_reports(text: str) -> list[list[int]]:
    """Parse one report of whitespace separated levels per non-blank line."""
    return [[int(value) for value in line.split()] for line in text.splitlines() if line.strip()]


def is_sequence_safe(levels: Sequence[int]) -> bool:
    """A report is safe when it moves steadily in one direction by 1 to 3."""
    if len(levels) < 2:
        raise ValueError("a report needs at least two levels")
    descending = levels[0] > levels[1]
    return all(
        MIN_LEVEL_DIFF <= (current - following if descending else following - current) <= MAX_LEVEL_DIFF
        for current, following in zip(levels, levels[1:])
    )


def is_sequence_safe_tolerant(levels: Sequence[int]) -> bool:
    """Like is_sequence_safe, but a single bad level may be dropped."""
    if is_sequence_safe(levels):
        return True
    return any(
        is_sequence_safe([*levels[:skip], *levels[skip + 1 :]]) for skip in range(len(levels))
    )


def part1(text: str) -> int:
    """Count the safe reports."""
    return sum(is_sequence_safe(report) for report in parse_reports(text))


def part2(text: str) -> int:
    """Count the reports that are safe with one level tolerated."""
    return sum(is_sequence_safe_tolerant(report) for report in parse_reports(text))