"""Digital logic gates, circuits, a scriptable circuit editor and its Tk window."""

__version__ = "0.1.0"

__all__ = ["app", "circuit", "editor", "gate"]