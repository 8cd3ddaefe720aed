"""Logic gate types and single-gate evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class GateType(Enum):
    """The kinds of logic gate the simulator supports, in display order."""

    AND = "And"
    OR = "Or"
    NOT = "Not"
    XOR = "Xor"
    INPUT = "Input"

    def __str__(self) -> str:
        return self.value


@dataclass
class Gate:
    """A logic gate with a type, a number of inputs and a current output."""

    gate_type: GateType
    input_count: int
    output: bool = False

    def evaluate_with_inputs(self, inputs: Iterable[bool]) -> bool:
        """Compute this gate's output for the given input values.

        Input gates ignore ``inputs`` and return their stored output.
        A NOT gate given anything other than exactly one input yields False.
        """
        values = list(inputs)
        if self.gate_type is GateType.INPUT:
            return self.output
        if self.gate_type is GateType.AND:
            return all(values)
        if self.gate_type is GateType.OR:
            return any(values)
        if self.gate_type is GateType.NOT:
            if len(values) != 1:
                return False
            return not values[0]
        if self.gate_type is GateType.XOR:
            return sum(1 for value in values if value) % 2 == 1
        raise ValueError(f"unknown gate type: {self.gate_type!r}")