"""Crossed Wires: simulating a circuit of logic gates."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

SWAPPED_WIRES = ("mkk", "z10", "qbw", "z14", "wcb", "z34", "wjb", "cvp")

_SHAPES = {"AND": "invtriangle", "OR": "diamond", "XOR": "hexagon"}


class Gate(Enum):
    """A logic gate, valued by its name in the input."""

    XOR = "XOR"
    OR = "OR"
    AND = "AND"

    def apply(self, first: int, second: int) -> int:
        if self is Gate.AND:
            return first & second
        if self is Gate.OR:
            return first | second
        return first ^ second


@dataclass(frozen=True)
class Operation:
    """A gate combining two wires into a destination wire."""

    gate: Gate
    key1: str
    key2: str
    destination_key: str


@dataclass
class CircuitSystem:
    """Known wire values and the gates still to evaluate."""

    values: dict[str, int] = field(default_factory=dict)
    operations: list[Operation] = field(default_factory=list)

    def execute(self) -> None:
        """Evaluate every gate once both of its inputs are known."""
        pending = list(self.operations)
        while pending:
            waiting = []
            for operation in pending:
                first = self.values.get(operation.key1)
                second = self.values.get(operation.key2)
                if first is None or second is None:
                    waiting.append(operation)
                else:
                    self.values[operation.destination_key] = operation.gate.apply(first, second)
            if len(waiting) == len(pending):
                raise ValueError("some gates can never receive both inputs")
            pending = waiting

    def _number(self, prefix: str) -> int:
        result = 0
        bit = 0
        while (value := self.values.get(f"{prefix}{bit:02d}")) is not None:
            result ^= value << bit
            bit += 1
        return result

    def output_number(self) -> int:
        """The number formed by the z wires, z00 being the lowest bit."""
        return self._number("z")

    def expected_output(self) -> int:
        """The sum of the numbers on the x and y wires."""
        return self._number("x") + self._number("y")


def parse_circuit(text: str) -> CircuitSystem:
    """Parse "wire: value" lines, a blank line, then "a GATE b -> c" lines."""
    system = CircuitSystem()
    in_gates = False
    for line in text.splitlines():
        if not line:
            in_gates = True
            continue
        if in_gates:
            inputs, separator, destination = line.partition(" -> ")
            parts = inputs.split(" ")
            if not separator or len(parts) != 3:
                raise ValueError(f"expected 'a GATE b -> c', got {line!r}")
            try:
                gate = Gate(parts[1])
            except ValueError:
                raise ValueError(f"Unexpected value for Gate: {parts[1]!r}") from None
            system.operations.append(Operation(gate, parts[0], parts[2], destination))
        else:
            key, separator, value = line.partition(": ")
            if not separator:
                raise ValueError(f"expected 'wire: value', got {line!r}")
            system.values[key] = int(value)
    return system


def _wire_rows(prefix: str, count: int, per_row: int = 10) -> list[str]:
    names = [f"{prefix}{index:02d}" for index in range(count)]
    return [" ".join(names[start : start + per_row]) + ";" for start in range(0, count, per_row)]


def _gate_nodes(system: CircuitSystem, gate: Gate) -> str:
    return " ".join(
        f'{op.key1}_{gate.value}_{op.key2} [label="{gate.value} {op.destination_key}", '
        f"shape={_SHAPES[gate.value]}];"
        for op in system.operations
        if op.gate is gate
    )


def generate_dot(system: CircuitSystem) -> str:
    """Describe the circuit as a Graphviz digraph."""
    connections = []
    for op in system.operations:
        node = f"{op.key1}_{op.gate.name.title()}_{op.key2}"
        connections += [
            f"{op.key1} -> {node};",
            f"{op.key2} -> {node};",
            f"{node} -> {op.destination_key};",
        ]

    lines = [
        "digraph LogicCircuit {",
        "    rankdir=LR;",
        "    node [shape=box, style=filled, color=lightblue];",
        "    subgraph cluster_inputs {",
        '        label="Inputs";',
        "        node [shape=ellipse, color=lightgreen];",
        *(f"        {row}" for row in _wire_rows("x", 45)),
        *(f"        {row}" for row in _wire_rows("y", 45)),
        "    }",
        "    subgraph cluster_outputs {",
        '        label="Outputs";',
        "        node [shape=ellipse, color=lightpink];",
        *(f"        {row}" for row in _wire_rows("z", 46)),
        "    }",
        f"    {_gate_nodes(system, Gate.AND)}",
        f"    {_gate_nodes(system, Gate.XOR)}",
        f"    {_gate_nodes(system, Gate.OR)}",
        f"    {' '.join(connections)}",
        "}",
    ]
    return "\n".join(lines) + "\n"


def part1(text: str) -> int:
    system = parse_circuit(text)
    system.execute()
    return system.output_number()


def part2() -> str:
    """The swapped wires found by inspecting the circuit, sorted and comma separated."""
    return ",".join(sorted(SWAPPED_WIRES))