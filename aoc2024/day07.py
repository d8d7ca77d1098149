"""Bridge Repair: finding which calibration equations can be made true."""

from dataclasses import dataclass


@dataclass
class CalibrationEquation:
    """A target value and the numbers to combine left to right."""

    test_value: int
    numbers: list[int]

    def is_valid(self, with_concat: bool) -> bool:
        """Whether +, * (and concatenation, if enabled) can reach the test value."""
        values = {self.numbers[0]}
        for number in self.numbers[1:]:
            reached: set[int] = set()
            for value in values:
                candidates = [value + number, value * number]
                if with_concat:
                    candidates.append(concat_numbers(value, number))
                reached.update(c for c in candidates if c <= self.test_value)
            values = reached
        return self.test_value in values


def parse_line(line: str) -> CalibrationEquation:
    """Parse a line such as "190: 10 19"."""
    test_part, separator, numbers_part = line.partition(": ")
    if not separator:
        raise ValueError(f"Invalid line format: {line!r}")
    numbers = [int(value) for value in numbers_part.split()]
    if not numbers:
        raise ValueError(f"Equation has no numbers: {line!r}")
    return CalibrationEquation(int(test_part), numbers)


def concat_numbers(a: int, b: int) -> int:
    """Append the digits of b to a; a zero b leaves a unchanged."""
    factor = 1
    rest = b
    while rest > 0:
        rest //= 10
        factor *= 10
    return a * factor + b


def total_calibration(text: str, with_concat: bool) -> int:
    """Sum the test values of the equations that can be made true."""
    equations = (parse_line(line) for line in text.splitlines() if line.strip())
    return sum(eq.test_value for eq in equations if eq.is_valid(with_concat))


def part1(text: str) -> int:
    return total_calibration(text, False)


def part2(text: str) -> int:
    return total_calibration(text, True)