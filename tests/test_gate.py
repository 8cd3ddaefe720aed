import pytest

from logicsim.gate import Gate, GateType


def test_input_gate_returns_stored_output():
    gate = Gate(GateType.INPUT, 0, output=True)
    assert gate.evaluate_with_inputs([]) is True

    gate = Gate(GateType.INPUT, 0, output=False)
    assert gate.evaluate_with_inputs([]) is False


def test_input_gate_ignores_given_inputs():
    gate = Gate(GateType.INPUT, 0, output=False)
    assert gate.evaluate_with_inputs([True, True]) is False


def test_new_gate_output_defaults_false():
    gate = Gate(GateType.AND, 2)
    assert gate.output is False
    assert gate.input_count == 2


def test_and_gate():
    gate = Gate(GateType.AND, 2)
    assert gate.evaluate_with_inputs([True, True]) is True
    assert gate.evaluate_with_inputs([True, False]) is False
    assert gate.evaluate_with_inputs([False, False]) is False


def test_or_gate():
    gate = Gate(GateType.OR, 2)
    assert gate.evaluate_with_inputs([False, False]) is False
    assert gate.evaluate_with_inputs([True, False]) is True
    assert gate.evaluate_with_inputs([True, True]) is True


def test_not_gate():
    gate = Gate(GateType.NOT, 1)
    assert gate.evaluate_with_inputs([True]) is False
    assert gate.evaluate_with_inputs([False]) is True


def test_not_gate_with_invalid_input_length():
    gate = Gate(GateType.NOT, 1)
    assert gate.evaluate_with_inputs([]) is False
    assert gate.evaluate_with_inputs([True, False]) is False


def test_xor_gate():
    gate = Gate(GateType.XOR, 2)
    assert gate.evaluate_with_inputs([False, False]) is False
    assert gate.evaluate_with_inputs([True, False]) is True
    assert gate.evaluate_with_inputs([True, True]) is False
    assert gate.evaluate_with_inputs([True, False, True]) is False
    assert gate.evaluate_with_inputs([True, True, True]) is True


@pytest.mark.parametrize(
    "gate_type, expected",
    [(GateType.AND, True), (GateType.OR, False), (GateType.XOR, False)],
)
def test_empty_inputs(gate_type, expected):
    assert Gate(gate_type, 0).evaluate_with_inputs([]) is expected


def test_every_gate_type_with_two_true_inputs():
    expected = {
        GateType.AND: True,
        GateType.OR: True,
        GateType.NOT: False,
        GateType.XOR: False,
        GateType.INPUT: False,
    }
    results = {t: Gate(t, 2).evaluate_with_inputs([True, True]) for t in GateType}
    assert results == expected