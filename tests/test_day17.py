import pytest

from aoc2024.day17 import (
    PROGRAM,
    Computer,
    find_register_a,
    parse_computer,
    part1,
    part2,
    run_instructions,
)

EXAMPLE = """\
Register A: 729
Register B: 0
Register C: 0

Program: 0,1,5,4,3,0
"""


def puzzle_computer(a: int) -> Computer:
    text = f"Register A: {a}\nRegister B: 0\nRegister C: 0\n\nProgram: {','.join(map(str, PROGRAM))}\n"
    return parse_computer(text)


def test_parse_example():
    computer = parse_computer(EXAMPLE)
    assert (computer.register_a, computer.register_b, computer.register_c) == (729, 0, 0)
    assert computer.program == [(0, 1), (5, 4), (3, 0)]


def test_example_part1():
    assert part1(EXAMPLE) == "4,6,3,5,6,3,5,2,1,0"


def test_outputs_of_register_a():
    computer = Computer(10, 0, 0, [(5, 0), (5, 1), (5, 4)])
    assert computer.run_program() == [0, 1, 2]


def test_loop_ends_with_register_a_zero():
    computer = Computer(2024, 0, 0, [(0, 1), (5, 4), (3, 0)])
    output = computer.run_program()
    assert computer.register_a == 0
    assert all(0 <= value < 8 for value in output)


@pytest.mark.parametrize("a", range(1, 300, 7))
def test_run_instructions_matches_first_output(a):
    assert puzzle_computer(a).run_program()[0] == run_instructions(a)


def test_part2_reproduces_program():
    a = part2()
    assert puzzle_computer(a).run_program() == list(PROGRAM)


def test_part2_matches_find_register_a():
    assert part2() == find_register_a(PROGRAM)


def test_find_register_a_impossible_target():
    with pytest.raises(ValueError):
        find_register_a([8])


def test_invalid_combo_operand_raises():
    with pytest.raises(ValueError):
        Computer(0, 0, 0, [(2, 7)]).run_program()


def test_unknown_opcode_raises():
    with pytest.raises(ValueError):
        Computer(0, 0, 0, [(9, 0)]).run_program()


def test_odd_program_raises():
    with pytest.raises(ValueError):
        parse_computer("Register A: 1\nRegister B: 0\nRegister C: 0\n\nProgram: 0,1,5\n")