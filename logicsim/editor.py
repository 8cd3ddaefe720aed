"""Editing model for a circuit laid out on a canvas: geometry, widgets and clicks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from logicsim.circuit import Circuit, GateId
from logicsim.gate import GateType

GATE_WIDTH = 80.0
GATE_HEIGHT = 50.0
PIN_RADIUS = 6.0


@dataclass(frozen=True)
class Point:
    """A position or offset on the canvas."""

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    min: Point
    width: float
    height: float

    @classmethod
    def from_center_size(cls, center: Point, width: float, height: float) -> Rect:
        return cls(Point(center.x - width / 2, center.y - height / 2), width, height)

    @property
    def max(self) -> Point:
        return Point(self.min.x + self.width, self.min.y + self.height)

    @property
    def center(self) -> Point:
        return Point(self.min.x + self.width / 2, self.min.y + self.height / 2)

    def contains(self, point: Point) -> bool:
        """True if ``point`` lies inside or on the edge of the rectangle."""
        return (
            self.min.x <= point.x <= self.max.x
            and self.min.y <= point.y <= self.max.y
        )

    def intersects(self, other: Rect) -> bool:
        """True if the two rectangles overlap or touch."""
        return (
            self.min.x <= other.max.x
            and other.min.x <= self.max.x
            and self.min.y <= other.max.y
            and other.min.y <= self.max.y
        )


def gate_rect(position: Point) -> Rect:
    """The body rectangle of a gate whose top-left corner is ``position``."""
    return Rect(position, GATE_WIDTH, GATE_HEIGHT)


def pin_count(gate_type: GateType) -> int:
    """Number of input pins a gate of this type is given in the editor."""
    if gate_type is GateType.NOT:
        return 1
    if gate_type is GateType.INPUT:
        return 0
    return 2


def input_pin_position(position: Point, gate_type: GateType, index: int) -> Point:
    """Centre of input pin ``index`` of a gate placed at ``position``."""
    spacing = GATE_HEIGHT / (pin_count(gate_type) + 1)
    return Point(position.x, position.y + spacing * (index + 1))


def output_pin_position(position: Point) -> Point:
    """Centre of the output pin of a gate placed at ``position``."""
    return Point(position.x + GATE_WIDTH, position.y + GATE_HEIGHT / 2)


@dataclass
class GateWidget:
    """A gate as placed on the canvas."""

    id: GateId
    gate_type: GateType
    position: Point
    input_state: Optional[bool] = None

    @property
    def rect(self) -> Rect:
        return gate_rect(self.position)


@dataclass
class CircuitEditor:
    """A circuit together with its on-screen layout and pending user actions."""

    circuit: Circuit = field(default_factory=Circuit)
    gate_widgets: list[GateWidget] = field(default_factory=list)
    selected_gate: Optional[GateType] = None
    connect_from: Optional[GateId] = None

    def _widget(self, gate_id: GateId) -> Optional[GateWidget]:
        return next((w for w in self.gate_widgets if w.id == gate_id), None)

    def add_gate(self, gate_type: GateType, position: Point) -> GateId:
        """Place a new gate with its top-left corner at ``position``."""
        gate_id = self.circuit.add_gate(gate_type, pin_count(gate_type))
        input_state = False if gate_type is GateType.INPUT else None
        self.gate_widgets.append(GateWidget(gate_id, gate_type, position, input_state))
        return gate_id

    def is_position_free(self, position: Point) -> bool:
        """True if a gate placed at ``position`` would overlap no existing gate."""
        new_rect = gate_rect(position)
        return not any(w.rect.intersects(new_rect) for w in self.gate_widgets)

    def select_gate_type(self, gate_type: GateType) -> None:
        """Select a gate type for placement, or deselect it if already selected."""
        self.selected_gate = None if self.selected_gate is gate_type else gate_type

    def toggle_input(self, gate_id: GateId) -> bool:
        """Flip the value of an input gate, re-evaluate, and return the new value."""
        value = not self.circuit.get_output(gate_id)
        self.circuit.set_primary_input_value(gate_id, value)
        self.circuit.evaluate()
        widget = self._widget(gate_id)
        if widget is not None:
            widget.input_state = value
        return value

    def input_signal(self, gate_id: GateId, input_index: int) -> bool:
        """The signal arriving at an input pin; False if nothing drives it."""
        for from_id, to_id, index in self.circuit.connections():
            if to_id == gate_id and index == input_index:
                return self.circuit.get_output(from_id)
        return False

    def click_input_pin(self, gate_id: GateId, input_index: int) -> bool:
        """Finish a pending connection at this pin; return whether one was made."""
        if self.connect_from is None:
            return False
        self.circuit.connect(self.connect_from, gate_id, input_index)
        self.connect_from = None
        self.circuit.evaluate()
        return True

    def click_output_pin(self, gate_id: GateId) -> None:
        """Start a connection from this gate's output."""
        self.connect_from = gate_id

    def click_canvas(self, position: Point) -> Optional[GateId]:
        """Handle a click on the canvas at ``position``.

        Input gates under the pointer are toggled. A click on a gate body
        completes a pending connection to its input 0, or starts one from it.
        A click on empty space places the selected gate type centred on the
        pointer if the spot is free; its id is then returned.
        """
        for widget in self.gate_widgets:
            if widget.gate_type is GateType.INPUT and widget.rect.contains(position):
                widget.input_state = not (widget.input_state or False)
                self.circuit.set_primary_input_value(widget.id, widget.input_state)
                self.circuit.evaluate()

        clicked = next((w for w in self.gate_widgets if w.rect.contains(position)), None)
        if clicked is not None:
            if self.connect_from is not None:
                self.circuit.connect(self.connect_from, clicked.id, 0)
                self.connect_from = None
                self.circuit.evaluate()
            else:
                self.connect_from = clicked.id
            return None

        if self.selected_gate is None:
            return None
        adjusted = position - Point(GATE_WIDTH / 2, GATE_HEIGHT / 2)
        if not self.is_position_free(adjusted):
            return None
        gate_id = self.add_gate(self.selected_gate, adjusted)
        self.circuit.evaluate()
        return gate_id