"""Interactive window for building and running circuits."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Any, Literal, Optional, Sequence

from logicsim.editor import (
    GATE_HEIGHT,
    GATE_WIDTH,
    PIN_RADIUS,
    CircuitEditor,
    Point,
    Rect,
    gate_rect,
    input_pin_position,
    output_pin_position,
    pin_count,
)
from logicsim.gate import GateType

TITLE = "Digital Logic Simulator"

SIGNAL_ON = "green"
SIGNAL_OFF = "red"
INPUT_FILL = "light green"
GATE_FILL = "light blue"
OUTLINE = "black"
TOGGLE_FILL = "dark gray"
TOGGLE_TEXT = "white"
SELECTED_FILL = "dark green"
UNSELECTED_FILL = "dark gray"
SELECTED_BORDER = "yellow"

_FONTS = {"body": ("TkDefaultFont", 10), "small": ("TkDefaultFont", 8)}

ShapeKind = Literal["rect", "circle", "line", "text"]


@dataclass(frozen=True)
class Shape:
    """One drawing primitive of the canvas scene.

    ``points`` holds the two corners of a rect, the centre of a circle,
    the two ends of a line, or the anchor point of a text.
    """

    kind: ShapeKind
    points: tuple[Point, ...]
    fill: Optional[str] = None
    outline: Optional[str] = None
    width: float = 1.0
    radius: float = 0.0
    text: str = ""
    anchor: str = "nw"
    size: str = "body"


def _signal_colour(value: bool) -> str:
    return SIGNAL_ON if value else SIGNAL_OFF


def _toggle_rect(position: Point) -> Rect:
    return Rect(position + Point(10.0, 30.0), 60.0, 15.0)


def scene(editor: CircuitEditor) -> list[Shape]:
    """Describe everything to draw for ``editor``, back to front."""
    shapes: list[Shape] = []
    circuit = editor.circuit

    for widget in editor.gate_widgets:
        body = widget.rect
        is_input = widget.gate_type is GateType.INPUT
        shapes.append(
            Shape(
                "rect",
                (body.min, body.max),
                fill=INPUT_FILL if is_input else GATE_FILL,
                outline=OUTLINE,
            )
        )
        shapes.append(
            Shape(
                "text",
                (widget.position + Point(10.0, 10.0),),
                fill=OUTLINE,
                text=str(widget.gate_type),
                anchor="nw",
            )
        )
        for index in range(pin_count(widget.gate_type)):
            pin = input_pin_position(widget.position, widget.gate_type, index)
            shapes.append(
                Shape(
                    "circle",
                    (pin,),
                    fill=_signal_colour(editor.input_signal(widget.id, index)),
                    radius=PIN_RADIUS,
                )
            )
            shapes.append(
                Shape(
                    "text",
                    (pin - Point(10.0, 0.0),),
                    fill=OUTLINE,
                    text=f"In{index}",
                    anchor="e",
                    size="small",
                )
            )
        out = output_pin_position(widget.position)
        shapes.append(
            Shape(
                "circle",
                (out,),
                fill=_signal_colour(circuit.get_output(widget.id)),
                radius=PIN_RADIUS,
            )
        )
        shapes.append(
            Shape(
                "text",
                (out + Point(10.0, 0.0),),
                fill=OUTLINE,
                text="Out",
                anchor="w",
                size="small",
            )
        )

    widgets = {w.id: w for w in editor.gate_widgets}
    for from_id, to_id, input_index in circuit.connections():
        source = widgets.get(from_id)
        target = widgets.get(to_id)
        if source is None or target is None:
            continue
        start = output_pin_position(source.position)
        end = input_pin_position(target.position, target.gate_type, input_index)
        shapes.append(
            Shape(
                "line",
                (start, end),
                fill=_signal_colour(circuit.get_output(from_id)),
                width=2.0,
            )
        )

    for widget in editor.gate_widgets:
        if widget.gate_type is not GateType.INPUT:
            continue
        toggle = _toggle_rect(widget.position)
        shapes.append(Shape("rect", (toggle.min, toggle.max), fill=TOGGLE_FILL, width=0.0))
        shapes.append(
            Shape(
                "text",
                (toggle.center,),
                fill=TOGGLE_TEXT,
                text="TRUE" if circuit.get_output(widget.id) else "FALSE",
                anchor="center",
            )
        )

    return shapes


class EditorApp:
    """A window with a gate palette and a canvas bound to a circuit editor."""

    def __init__(self, editor: Optional[CircuitEditor] = None, canvas: Any = None) -> None:
        self.editor = editor if editor is not None else CircuitEditor()
        self.canvas = canvas
        self._root: Any = None
        self._buttons: dict[GateType, Any] = {}
        self._status: Any = None

    def redraw(self) -> None:
        """Repaint the canvas and refresh the palette from the editor state."""
        if self.canvas is not None:
            self.canvas.delete("all")
            for shape in scene(self.editor):
                self._draw(shape)
        for gate_type, button in self._buttons.items():
            selected = self.editor.selected_gate is gate_type
            button.configure(
                bg=SELECTED_FILL if selected else UNSELECTED_FILL,
                highlightbackground=SELECTED_BORDER if selected else UNSELECTED_FILL,
                highlightthickness=2 if selected else 0,
            )
        if self._status is not None:
            selected = self.editor.selected_gate
            self._status.configure(
                text=f"Selected: {selected}" if selected is not None else "No gate selected"
            )

    def _draw(self, shape: Shape) -> None:
        canvas = self.canvas
        if shape.kind == "rect":
            a, b = shape.points
            canvas.create_rectangle(
                a.x, a.y, b.x, b.y,
                fill=shape.fill or "",
                outline=shape.outline or "",
                width=shape.width,
            )
        elif shape.kind == "circle":
            (c,) = shape.points
            r = shape.radius
            canvas.create_oval(c.x - r, c.y - r, c.x + r, c.y + r, fill=shape.fill or "", outline="")
        elif shape.kind == "line":
            a, b = shape.points
            canvas.create_line(a.x, a.y, b.x, b.y, fill=shape.fill or "", width=shape.width)
        elif shape.kind == "text":
            (p,) = shape.points
            canvas.create_text(
                p.x, p.y,
                text=shape.text,
                anchor=shape.anchor,
                fill=shape.fill or "",
                font=_FONTS[shape.size],
            )
        else:
            raise ValueError(f"unknown shape kind: {shape.kind!r}")

    def _handle_click(self, point: Point) -> None:
        editor = self.editor
        for widget in editor.gate_widgets:
            if widget.gate_type is GateType.INPUT and _toggle_rect(widget.position).contains(point):
                editor.toggle_input(widget.id)
                return
        pin_size = PIN_RADIUS * 2
        for widget in editor.gate_widgets:
            for index in range(pin_count(widget.gate_type)):
                pin = input_pin_position(widget.position, widget.gate_type, index)
                if Rect.from_center_size(pin, pin_size, pin_size).contains(point):
                    editor.click_input_pin(widget.id, index)
                    return
        for widget in editor.gate_widgets:
            pin = output_pin_position(widget.position)
            if Rect.from_center_size(pin, pin_size, pin_size).contains(point):
                editor.click_output_pin(widget.id)
                return
        editor.click_canvas(point)

    def _on_click(self, event: Any) -> None:
        self._handle_click(Point(float(event.x), float(event.y)))
        self.redraw()

    def _select(self, gate_type: GateType) -> None:
        self.editor.select_gate_type(gate_type)
        self.redraw()

    def run(self) -> None:
        """Open the window and process events until it is closed."""
        import tkinter as tk

        root = tk.Tk()
        root.title(TITLE)
        self._root = root

        sidebar = tk.Frame(root, padx=6, pady=6)
        sidebar.pack(side=tk.LEFT, fill=tk.Y)
        tk.Label(sidebar, text="Select Gate Type", font=("TkDefaultFont", 12, "bold")).pack(
            anchor="w", pady=(0, 6)
        )
        for gate_type in GateType:
            button = tk.Button(
                sidebar,
                text=str(gate_type),
                fg="white",
                command=lambda g=gate_type: self._select(g),
            )
            button.pack(fill=tk.X, pady=2)
            self._buttons[gate_type] = button
        self._status = tk.Label(sidebar, text="No gate selected")
        self._status.pack(anchor="w", pady=(6, 0))

        self.canvas = tk.Canvas(
            root,
            background="white",
            width=int(GATE_WIDTH * 10),
            height=int(GATE_HEIGHT * 12),
        )
        self.canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        self.canvas.bind("<Button-1>", self._on_click)

        self.redraw()
        root.mainloop()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the interactive editor."""
    parser = argparse.ArgumentParser(prog="logicsim", description=TITLE)
    parser.parse_args(argv)
    EditorApp().run()
    return 0