"""objtasks model layer -- public type re-exports."""

from objtasks.model.circle import Circle
from objtasks.model.diagnostic import Diagnostic, Severity
from objtasks.model.rectangle import Rectangle, make_rectangle

__all__ = [
    # shapes
    "Rectangle",
    "Circle",
    "make_rectangle",
    # diagnostic
    "Severity",
    "Diagnostic",
]
