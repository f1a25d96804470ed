"""Whiteboard domain model: geometry, shapes, dragging and containment."""

from whiteboard.core.containment import ContainmentScanner, containment_matrix, containment_pairs
from whiteboard.core.drag_state import DragState
from whiteboard.core.geometry import Bbox, Point, Size
from whiteboard.core.shapes import SHAPE_STYLES, Shape, ShapeKind, StylePair, make_area, make_rectangle

__all__ = [
    "Bbox",
    "ContainmentScanner",
    "DragState",
    "Point",
    "SHAPE_STYLES",
    "Shape",
    "ShapeKind",
    "Size",
    "StylePair",
    "containment_matrix",
    "containment_pairs",
    "make_area",
    "make_rectangle",
]
