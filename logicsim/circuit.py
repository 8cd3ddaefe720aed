"""Circuits of connected gates and their evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import MutableMapping

from logicsim.gate import Gate, GateType

GateId = int


@dataclass(frozen=True)
class Connection:
    """A wire from one gate's output to an input slot of another gate."""

    from_id: GateId
    to_id: GateId
    input_index: int


class NotAnInputGateError(ValueError):
    """Raised when an input value is set on a gate that is not an input."""

    def __init__(self, gate_id: GateId) -> None:
        super().__init__(f"Gate {gate_id} is not an input gate")
        self.gate_id = gate_id


class Circuit:
    """A set of gates joined by connections, evaluated from its inputs."""

    def __init__(self) -> None:
        self._gates: list[Gate] = []
        self._connections: list[Connection] = []

    def _gate(self, gate_id: GateId) -> Gate:
        if not 0 <= gate_id < len(self._gates):
            raise IndexError(f"no gate with id {gate_id}")
        return self._gates[gate_id]

    def evaluate_gate(self, gate_id: GateId, cache: MutableMapping[GateId, bool]) -> bool:
        """Recursively compute a gate's output, memoising results in ``cache``."""
        if gate_id in cache:
            return cache[gate_id]

        gate = self._gate(gate_id)
        if gate.gate_type is GateType.INPUT:
            cache[gate_id] = gate.output
            return gate.output

        inputs = [False] * gate.input_count
        for conn in self._connections:
            if conn.to_id != gate_id:
                continue
            if not 0 <= conn.input_index < gate.input_count:
                raise IndexError(
                    f"input index {conn.input_index} out of range for gate {gate_id}"
                )
            inputs[conn.input_index] = self.evaluate_gate(conn.from_id, cache)

        output = gate.evaluate_with_inputs(inputs)
        cache[gate_id] = output
        return output

    def add_gate(self, gate_type: GateType, input_count: int) -> GateId:
        """Add a gate and return its id."""
        self._gates.append(Gate(gate_type, input_count))
        return len(self._gates) - 1

    def evaluate(self) -> None:
        """Evaluate every gate in order and store its output."""
        cache: dict[GateId, bool] = {}
        for gate_id, gate in enumerate(self._gates):
            gate.output = self.evaluate_gate(gate_id, cache)

    def set_primary_input_value(self, gate_id: GateId, value: bool) -> None:
        """Set the output of an input gate."""
        gate = self._gate(gate_id)
        if gate.gate_type is not GateType.INPUT:
            raise NotAnInputGateError(gate_id)
        gate.output = value

    def get_output(self, gate_id: GateId) -> bool:
        """Return the stored output of a gate."""
        return self._gate(gate_id).output

    def connect(self, from_id: GateId, to_id: GateId, input_index: int) -> None:
        """Wire the output of ``from_id`` to input ``input_index`` of ``to_id``."""
        self._connections.append(Connection(from_id, to_id, input_index))

    def connections(self) -> list[tuple[GateId, GateId, int]]:
        """Return all connections as ``(from_id, to_id, input_index)`` tuples."""
        return [(c.from_id, c.to_id, c.input_index) for c in self._connections]