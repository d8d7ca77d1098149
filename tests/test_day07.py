import pytest

from aoc2024.day07 import (
    CalibrationEquation,
    concat_numbers,
    parse_line,
    part1,
    part2,
    total_calibration,
)

EXAMPLE = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""


def test_parse_line():
    assert parse_line("190: 10 19") == CalibrationEquation(190, [10, 19])


def test_parse_line_rejects_bad_format():
    with pytest.raises(ValueError):
        parse_line("190 10 19")
    with pytest.raises(ValueError):
        parse_line("abc: 1 2")


def test_concat_numbers():
    assert concat_numbers(12, 345) == 12345
    assert concat_numbers(7, 0) == 7


def test_is_valid_without_concat():
    assert parse_line("190: 10 19").is_valid(False)
    assert parse_line("3267: 81 40 27").is_valid(False)
    assert not parse_line("83: 17 5").is_valid(False)
    assert not parse_line("156: 15 6").is_valid(False)


def test_is_valid_with_concat():
    assert parse_line("156: 15 6").is_valid(True)
    assert parse_line("7290: 6 8 6 15").is_valid(True)
    assert not parse_line("161011: 16 10 13").is_valid(True)


def test_single_number_equation():
    assert parse_line("5: 5").is_valid(False)
    assert not parse_line("6: 5").is_valid(True)


def test_total_calibration_sums_valid_values():
    assert total_calibration("190: 10 19\n83: 17 5\n", False) == 190


def test_example_answers():
    assert part1(EXAMPLE) == 3749
    assert part2(EXAMPLE) == 11387
    assert part1(EXAMPLE) <= part2(EXAMPLE)