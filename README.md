# logicsim

logicsim is a small digital logic simulator. You build circuits from AND,
OR, NOT and XOR gates and drive them with input switches. It also has a
point-and-click editor where you place gates, wire them together and watch
the signals propagate.

## Installation

```
pip install .
```

The editor window uses Tk (`tkinter`), which comes with most Python
installations. The simulation modules use only the standard library.

## The editor

Start it with:

```
logicsim
```

The editor works as follows:

- Pick a gate type from the panel on the left. Clicking the selected type
  again deselects it. The label under the buttons shows the current
  selection.
- Click an empty spot on the canvas to place a gate of the selected type,
  centred on the pointer. The gate is placed only if it would not overlap
  or touch an existing gate.
- Each input gate has a TRUE/FALSE toggle. Clicking the toggle flips the
  switch and re-evaluates the circuit. Clicking elsewhere on an input
  gate's body also flips it.
- To wire two gates, click the output pin of the source gate, then click
  an input pin of the destination gate. You can also start a wire by
  clicking a gate's body, and finish one by clicking the body of the
  destination gate. A wire finished on a body goes to that gate's first
  input.
- Pins and wires are green when the signal is high and red when it is low.

In the editor, NOT gates have one input pin, input gates have none, and
every other gate has two.

## Using the library

### Gates: `logicsim.gate`

`GateType` lists the gate kinds: `AND`, `OR`, `NOT`, `XOR` and `INPUT`.
`Gate` holds a `gate_type`, an `input_count` and an `output`.
`Gate.evaluate_with_inputs(inputs)` computes the gate's output from a
sequence of booleans:

- AND is true when every input is true.
- OR is true when any input is true.
- XOR is true when an odd number of inputs are true.
- NOT inverts its single input. Given any other number of inputs, it
  returns false.
- An input gate ignores `inputs` and returns its stored `output`.

### Circuits: `logicsim.circuit`

`Circuit` holds the gates and the wires (`Connection`) between them.

- `add_gate(gate_type, input_count)` adds a gate and returns its id. Ids
  are assigned in order, starting at 0.
- `connect(from_id, to_id, input_index)` wires one gate's output to an
  input slot of another gate.
- `set_primary_input_value(gate_id, value)` sets an input gate's value.
  On any other kind of gate it raises `NotAnInputGateError`, a
  `ValueError` whose message reads `Gate <id> is not an input gate`.
- `evaluate()` recomputes and stores the output of every gate.
- `evaluate_gate(gate_id, cache)` computes one gate's output recursively
  and memoises the results in the given dict.
- `get_output(gate_id)` returns a gate's stored output.
- `connections()` lists every wire as a `(from_id, to_id, input_index)`
  tuple.

An unknown gate id raises `IndexError`. So does a wire whose
`input_index` lies outside the destination gate's inputs, once the circuit
is evaluated. An input slot with no wire attached reads as false.

```python
from logicsim.circuit import Circuit
from logicsim.gate import GateType

c = Circuit()
a = c.add_gate(GateType.INPUT, 0)
b = c.add_gate(GateType.INPUT, 0)
g = c.add_gate(GateType.AND, 2)
c.connect(a, g, 0)
c.connect(b, g, 1)
c.set_primary_input_value(a, True)
c.set_primary_input_value(b, True)
c.evaluate()
assert c.get_output(g) is True
```

### Scripting the editor: `logicsim.editor`

`CircuitEditor` implements the editor's behaviour without a window, so you
can drive the same actions from code: `add_gate`, `is_position_free`,
`select_gate_type`, `toggle_input`, `input_signal`, `click_input_pin`,
`click_output_pin` and `click_canvas`. Positions are `Point` values. The
module also provides `Rect`, `GateWidget`, `pin_count`,
`input_pin_position` and `output_pin_position`.

`logicsim.app.scene(editor)` returns the list of `Shape` primitives the
window draws for an editor. `EditorApp` is the window itself, and
`logicsim.app.main` is the `logicsim` command.

## What it does not do

Circuits exist only while the editor is open. There is no saving or
loading. Gates and wires cannot be moved or deleted once placed.

## Running the tests

```
pip install .[test]
pytest
```