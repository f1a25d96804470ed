"""Surface controller: owns shapes and routes pointer input."""

from __future__ import annotations

import logging
from enum import StrEnum

from engine.api.input_events import PointerEvent, PointerEventType
from engine.api.render import RenderAPI
from whiteboard.core.containment import ContainmentScanner
from whiteboard.core.drag_state import DragState
from whiteboard.core.geometry import Point
from whiteboard.core.shapes import Shape

logger = logging.getLogger(__name__)

PRIMARY_BUTTON = 1


class Cursor(StrEnum):
    """Pointer affordance shown over the surface."""

    DEFAULT = "default"
    GRAB = "grab"
    GRABBING = "grabbing"


class SurfaceController:
    """Single owner of the shape collection and the drag state.

    Every mutating operation runs to completion synchronously:
    mutate, rescan containment, redraw.
    """

    def __init__(self, renderer: RenderAPI, scanner: ContainmentScanner | None = None) -> None:
        self._renderer = renderer
        self._scanner = scanner if scanner is not None else ContainmentScanner()
        self._shapes: list[Shape] = []
        self._drag = DragState()
        self._cursor = Cursor.DEFAULT

    @property
    def shapes(self) -> tuple[Shape, ...]:
        return tuple(self._shapes)

    @property
    def drag_state(self) -> DragState:
        return self._drag

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    @property
    def scanner(self) -> ContainmentScanner:
        return self._scanner

    def get_shape(self, shape_id: str) -> Shape | None:
        for shape in self._shapes:
            if shape.id == shape_id:
                return shape
        return None

    def add_shape(self, shape: Shape) -> None:
        self._shapes.append(shape)
        logger.debug("shape_added id=%s kind=%s z=%d", shape.id, shape.kind.value, shape.z_index)
        self._rescan()
        self.render()

    def remove_shape(self, shape_id: str) -> bool:
        """Remove a shape by id. Return False when no such shape exists."""
        shape = self.get_shape(shape_id)
        if shape is None:
            return False
        if self._drag.invalidate(shape_id):
            self._cursor = Cursor.DEFAULT
            logger.debug("drag_cancelled_by_removal id=%s", shape_id)
        self._shapes.remove(shape)
        logger.debug("shape_removed id=%s", shape_id)
        self._rescan()
        self.render()
        return True

    def find_shape_at(self, point: Point) -> Shape | None:
        """Return the topmost hit by reverse insertion order."""
        for shape in reversed(self._shapes):
            if shape.contains_point(point):
                return shape
        return None

    def draw_order(self) -> list[Shape]:
        """Shapes by ascending z-index; equal z keeps insertion order."""
        return sorted(self._shapes, key=lambda shape: shape.z_index)

    def handle_pointer_event(self, event: PointerEvent) -> bool:
        """Dispatch one pointer event. Return whether the surface was redrawn."""
        event_type = event.event_type
        if event_type == PointerEventType.DOWN:
            if event.button not in (0, PRIMARY_BUTTON):
                return False
            return self.on_pointer_down(event.x, event.y)
        if event_type == PointerEventType.MOVE:
            return self.on_pointer_move(event.x, event.y)
        if event_type == PointerEventType.UP:
            return self.on_pointer_up(event.x, event.y)
        if event_type == PointerEventType.LEAVE:
            return self.on_pointer_leave()
        return False

    def on_pointer_down(self, x: float, y: float) -> bool:
        pointer = Point(x, y)
        shape = self.find_shape_at(pointer)
        if shape is None:
            return False
        self._drag.start_drag(shape, pointer)
        self._set_cursor(Cursor.GRABBING)
        logger.debug("drag_started id=%s x=%.1f y=%.1f", shape.id, x, y)
        return False

    def on_pointer_move(self, x: float, y: float) -> bool:
        pointer = Point(x, y)
        if not self._drag.dragging:
            hovered = self.find_shape_at(pointer)
            self._set_cursor(Cursor.GRAB if hovered is not None else Cursor.DEFAULT)
            return False
        moved = self._drag.update_drag(pointer, self.get_shape)
        if moved is None:
            # Drag target vanished; the drag state has already reset itself.
            self._set_cursor(Cursor.DEFAULT)
            return False
        self._rescan()
        self.render()
        return True

    def on_pointer_up(self, x: float, y: float) -> bool:
        if not self._drag.dragging:
            return False
        logger.debug("drag_ended id=%s x=%.1f y=%.1f", self._drag.dragged_shape_id, x, y)
        self._drag.end_drag()
        self._cursor = Cursor.DEFAULT
        self._rescan()
        self.render()
        return True

    def on_pointer_leave(self) -> bool:
        if not self._drag.dragging:
            self._set_cursor(Cursor.DEFAULT)
            return False
        logger.debug("drag_cancelled_on_leave id=%s", self._drag.dragged_shape_id)
        self._drag.reset()
        self._cursor = Cursor.DEFAULT
        self._rescan()
        self.render()
        return True

    def render(self) -> None:
        """Clear the surface and draw every shape bottom-up by z-index."""
        self._renderer.clear()
        for shape in self.draw_order():
            shape.draw(self._renderer)
        self._renderer.set_cursor(self._cursor.value)
        self._renderer.invalidate()

    def _rescan(self) -> None:
        self._scanner.scan(self._shapes)

    def _set_cursor(self, cursor: Cursor) -> None:
        if cursor is self._cursor:
            return
        self._cursor = cursor
        self._renderer.set_cursor(cursor.value)
