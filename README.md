# aoc2024

Solvers for the 2024 puzzle calendar. Each available day lives in its own
module: `aoc2024.day02` to `aoc2024.day09`, `aoc2024.day15` to
`aoc2024.day21`, and `aoc2024.day23` to `aoc2024.day25`. Every solver takes
the puzzle input as plain text and returns the answer rather than printing
it.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the solvers from Python

Most days expose `part1(text)` and `part2(text)`, where `text` is the full
contents of your puzzle input:

```python
from pathlib import Path

from aoc2024 import day02, day07

text = Path("input/day02.txt").read_text()
print(day02.part1(text))
print(day02.part2(text))

print(day07.part2(Path("input/day07.txt").read_text()))
```

A few days differ:

- `day17.part1(text)` returns the program output as a comma separated
  string.
- `day18.part1(text, memory_size=71, rounds=1024)` returns the number of
  steps of the shortest path, or `None` when the exit cannot be reached.
  `day18.part2(text, memory_size=71, rounds=1024)` returns the `(x, y)`
  coordinate of the first byte that cuts the exit off.
- `day23.part2(text)` returns the password: the names of the largest clique,
  sorted and comma separated.
- `day17.part2()` and `day24.part2()` take no input: their answers are fixed
  for one specific program and one specific circuit.
- `day25` has only `part1(text)`.

The building blocks are public as well, for example:

- `day19.count_arrangements(design, patterns)`
- `day16.dijkstra(maze, start)` and `day16.best_path_tiles(scores, end)`
- `day17.Computer(...).run_program()` and `day17.find_register_a(targets)`
- `day20.count_cheats(text, cheat_distance, min_save=100)`
- `day21.KeypadLayeringSystem(nb_directional_layers).fewest_presses(code)`
- `day23.maximum_cliques(graph)`
- `day24.generate_dot(system)`, which returns a Graphviz description of a
  circuit as a string

For day 15, `day15.parse_warehouse(text)` returns a `Warehouse`. Before
calling `apply_robot_moves()`, you may call
`warehouse.debugger.activate(path)` to have the initial state and the state
after every move written to `path`.

## Command line

Installing the package provides an `aoc2024` command:

```
aoc2024 DAY PART [INPUT]
```

It runs the solver for one part of one day and prints the answer. `INPUT` is
the path of the puzzle input; when it is left out or given as `-`, the input
is read from standard input. Day 17 part 2 and day 24 part 2 ignore the
input. For day 18 the real puzzle's sizes (71 and 1024) are used, and
`No path found` is printed when the exit cannot be reached.

```
aoc2024 7 2 input/day07.txt
aoc2024 24 2
aoc2024 --help
```

## What it does not do

- Days 1, 10 to 14 and 22 are not included. The command rejects them.
- Puzzle inputs are not downloaded; you supply them as files or on
  standard input.
- Day 24 part 2 does not work out the swapped wires from the circuit. It
  returns a fixed answer. `generate_dot` only gives a description of the
  circuit that you can inspect with your own tools.