import pytest

from logicsim.circuit import NotAnInputGateError
from logicsim.editor import (
    GATE_HEIGHT,
    GATE_WIDTH,
    CircuitEditor,
    Point,
    Rect,
    input_pin_position,
    output_pin_position,
    pin_count,
)
from logicsim.gate import GateType


def test_point_arithmetic_round_trip():
    a = Point(3.0, 4.0)
    b = Point(10.0, -2.0)
    assert (a + b) - b == a


def test_rect_contains_edges_and_outside():
    rect = Rect(Point(0.0, 0.0), GATE_WIDTH, GATE_HEIGHT)
    assert rect.contains(Point(0.0, 0.0))
    assert rect.contains(rect.max)
    assert rect.contains(rect.center)
    assert not rect.contains(Point(GATE_WIDTH + 1, 0.0))


def test_rect_intersects_is_symmetric_and_includes_touching():
    a = Rect(Point(0.0, 0.0), 10.0, 10.0)
    touching = Rect(Point(10.0, 0.0), 10.0, 10.0)
    apart = Rect(Point(11.0, 11.0), 5.0, 5.0)
    assert a.intersects(touching) and touching.intersects(a)
    assert not a.intersects(apart) and not apart.intersects(a)


def test_rect_from_center_size_round_trip():
    rect = Rect.from_center_size(Point(5.0, 7.0), 4.0, 6.0)
    assert rect.center == Point(5.0, 7.0)


@pytest.mark.parametrize(
    "gate_type, expected",
    [(GateType.NOT, 1), (GateType.INPUT, 0), (GateType.AND, 2), (GateType.OR, 2), (GateType.XOR, 2)],
)
def test_pin_count(gate_type, expected):
    assert pin_count(gate_type) == expected


def test_pin_positions_lie_on_gate_edges():
    pos = Point(100.0, 200.0)
    body = Rect(pos, GATE_WIDTH, GATE_HEIGHT)
    for index in range(pin_count(GateType.AND)):
        pin = input_pin_position(pos, GateType.AND, index)
        assert pin.x == pos.x
        assert body.contains(pin)
    out = output_pin_position(pos)
    assert out.x == pos.x + GATE_WIDTH
    assert out == Point(body.max.x, body.center.y)


def test_single_input_pin_is_level_with_output():
    pos = Point(0.0, 0.0)
    assert input_pin_position(pos, GateType.NOT, 0).y == output_pin_position(pos).y


def test_add_gate_creates_widget_and_circuit_gate():
    editor = CircuitEditor()
    in_id = editor.add_gate(GateType.INPUT, Point(0.0, 0.0))
    and_id = editor.add_gate(GateType.AND, Point(200.0, 0.0))
    assert (in_id, and_id) == (0, 1)
    assert editor.gate_widgets[0].input_state is False
    assert editor.gate_widgets[1].input_state is None
    assert editor.circuit.get_output(in_id) is False


def test_is_position_free():
    editor = CircuitEditor()
    editor.add_gate(GateType.OR, Point(0.0, 0.0))
    assert not editor.is_position_free(Point(10.0, 10.0))
    assert editor.is_position_free(Point(500.0, 500.0))


def test_select_gate_type_toggles():
    editor = CircuitEditor()
    editor.select_gate_type(GateType.XOR)
    assert editor.selected_gate is GateType.XOR
    editor.select_gate_type(GateType.AND)
    assert editor.selected_gate is GateType.AND
    editor.select_gate_type(GateType.AND)
    assert editor.selected_gate is None


def test_toggle_input_updates_circuit_and_widget():
    editor = CircuitEditor()
    gate_id = editor.add_gate(GateType.INPUT, Point(0.0, 0.0))
    assert editor.toggle_input(gate_id) is True
    assert editor.circuit.get_output(gate_id) is True
    assert editor.gate_widgets[0].input_state is True
    assert editor.toggle_input(gate_id) is False


def test_toggle_non_input_raises():
    editor = CircuitEditor()
    gate_id = editor.add_gate(GateType.AND, Point(0.0, 0.0))
    with pytest.raises(NotAnInputGateError):
        editor.toggle_input(gate_id)


def test_connect_via_pins_and_propagate():
    editor = CircuitEditor()
    a = editor.add_gate(GateType.INPUT, Point(0.0, 0.0))
    n = editor.add_gate(GateType.NOT, Point(200.0, 0.0))
    editor.click_output_pin(a)
    assert editor.connect_from == a
    assert editor.click_input_pin(n, 0) is True
    assert editor.connect_from is None
    assert editor.circuit.connections() == [(a, n, 0)]
    assert editor.circuit.get_output(n) is True
    editor.toggle_input(a)
    assert editor.input_signal(n, 0) is True
    assert editor.circuit.get_output(n) is False


def test_click_input_pin_without_pending_connection_does_nothing():
    editor = CircuitEditor()
    n = editor.add_gate(GateType.NOT, Point(0.0, 0.0))
    assert editor.click_input_pin(n, 0) is False
    assert editor.circuit.connections() == []


def test_input_signal_unconnected_is_false():
    editor = CircuitEditor()
    g = editor.add_gate(GateType.OR, Point(0.0, 0.0))
    assert editor.input_signal(g, 1) is False


def test_click_canvas_places_selected_gate_centred():
    editor = CircuitEditor()
    editor.select_gate_type(GateType.AND)
    click = Point(300.0, 300.0)
    gate_id = editor.click_canvas(click)
    assert gate_id == 0
    widget = editor.gate_widgets[0]
    assert widget.gate_type is GateType.AND
    assert widget.rect.center == click


def test_click_canvas_without_selection_adds_nothing():
    editor = CircuitEditor()
    assert editor.click_canvas(Point(300.0, 300.0)) is None
    assert editor.gate_widgets == []


def test_click_canvas_rejects_overlapping_placement():
    editor = CircuitEditor()
    editor.add_gate(GateType.OR, Point(0.0, 0.0))
    editor.select_gate_type(GateType.AND)
    assert editor.click_canvas(Point(GATE_WIDTH + 20, GATE_HEIGHT / 2)) is None
    assert len(editor.gate_widgets) == 1


def test_click_canvas_on_bodies_connects_to_input_zero():
    editor = CircuitEditor()
    a = editor.add_gate(GateType.OR, Point(0.0, 0.0))
    b = editor.add_gate(GateType.AND, Point(300.0, 0.0))
    editor.click_canvas(editor.gate_widgets[0].rect.center)
    assert editor.connect_from == a
    editor.click_canvas(editor.gate_widgets[1].rect.center)
    assert editor.connect_from is None
    assert editor.circuit.connections() == [(a, b, 0)]


def test_click_canvas_on_input_gate_toggles_it():
    editor = CircuitEditor()
    a = editor.add_gate(GateType.INPUT, Point(0.0, 0.0))
    editor.click_canvas(editor.gate_widgets[0].rect.center)
    assert editor.circuit.get_output(a) is True
    assert editor.gate_widgets[0].input_state is True
    assert editor.connect_from == a