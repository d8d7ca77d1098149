import io

import pytest

from aoc2024 import day02, day17
from aoc2024.cli import main

REPORTS = "7 6 4 2 1\n1 2 7 8 9\n"


def test_solves_from_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(REPORTS, encoding="utf-8")
    assert main(["2", "1", str(path)]) == 0
    assert capsys.readouterr().out == f"{day02.part1(REPORTS)}\n"
    assert day02.part1(REPORTS) == 1


def test_solves_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(REPORTS))
    assert main(["2", "2"]) == 0
    assert capsys.readouterr().out.strip() == str(day02.part2(REPORTS))


def test_part_without_input(capsys):
    assert main(["24", "2"]) == 0
    assert capsys.readouterr().out.strip() == "cvp,mkk,qbw,wcb,wjb,z10,z14,z34"


def test_day17_part2_needs_no_input(capsys):
    main(["17", "2"])
    assert capsys.readouterr().out.strip() == str(day17.part2())


def test_unknown_day_exits():
    with pytest.raises(SystemExit) as error:
        main(["1", "1"])
    assert error.value.code == 2


def test_missing_part_exits():
    with pytest.raises(SystemExit) as error:
        main(["25", "2"])
    assert error.value.code == 2


def test_invalid_part_number_exits():
    with pytest.raises(SystemExit) as error:
        main(["2", "3"])
    assert error.value.code == 2