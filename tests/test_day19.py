import pytest

from aoc2024.day19 import count_arrangements, is_design_possible, parse_towels, part1, part2

EXAMPLE = """\
r, wr, b, g, bwu, rb, gb, br

brwrr
bggr
gbbr
rrbgbr
ubwu
bwurrg
brgr
bbrgwb
"""

DESIGNS = ["brwrr", "bggr", "gbbr", "rrbgbr", "ubwu", "bwurrg", "brgr", "bbrgwb"]
PATTERNS = ["r", "wr", "b", "g", "bwu", "rb", "gb", "br"]


def test_parse_towels():
    patterns, designs = parse_towels(EXAMPLE)
    assert patterns == PATTERNS
    assert designs == DESIGNS


def test_parse_empty_raises():
    with pytest.raises(ValueError):
        parse_towels("")


def test_example_part1():
    assert part1(EXAMPLE) == 6


def test_example_part2():
    assert part2(EXAMPLE) == 16


@pytest.mark.parametrize("design", DESIGNS)
def test_possible_iff_arrangements_exist(design):
    assert is_design_possible(design, PATTERNS) == (count_arrangements(design, PATTERNS) > 0)


@pytest.mark.parametrize("design", DESIGNS)
def test_pattern_order_does_not_matter(design):
    assert count_arrangements(design, PATTERNS) == count_arrangements(design, PATTERNS[::-1])


def test_empty_design_has_one_arrangement():
    assert count_arrangements("", PATTERNS) == 1
    assert is_design_possible("", PATTERNS) is True


def test_unmatchable_design():
    assert count_arrangements("x", ["a"]) == 0
    assert is_design_possible("x", ["a"]) is False


def test_single_pattern_repeated():
    assert count_arrangements("rrrr", ["r"]) == 1
    assert is_design_possible("rrrr", ["r"]) is True