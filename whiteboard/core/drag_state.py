"""Drag interaction state machine."""

from __future__ import annotations

import logging
from collections.abc import Callable

from whiteboard.core.geometry import ORIGIN, Point
from whiteboard.core.shapes import Shape

logger = logging.getLogger(__name__)

ShapeResolver = Callable[[str], Shape | None]


class DragState:
    """Idle/dragging state for a single pointer.

    The dragged shape is held by id and resolved on every update, so a shape
    removed from the surface mid-drag is never mutated.
    """

    def __init__(self) -> None:
        self._dragging = False
        self._shape_id: str | None = None
        self._offset = ORIGIN
        self._last_pointer = ORIGIN

    @property
    def dragging(self) -> bool:
        return self._dragging

    @property
    def dragged_shape_id(self) -> str | None:
        return self._shape_id

    @property
    def drag_offset(self) -> Point:
        return self._offset

    @property
    def last_pointer_position(self) -> Point:
        return self._last_pointer

    def start_drag(self, shape: Shape, pointer: Point) -> None:
        """Begin dragging ``shape``; the grab offset stays fixed until the next start."""
        self._dragging = True
        self._shape_id = shape.id
        self._offset = pointer.offset_from(shape.position)
        self._last_pointer = pointer

    def update_drag(self, pointer: Point, resolve: ShapeResolver) -> Shape | None:
        """Move the dragged shape so the grab offset follows ``pointer``.

        Returns the moved shape, or None when idle or when the dragged shape
        no longer resolves. The latter resets the state.
        """
        if not self._dragging or self._shape_id is None:
            return None
        shape = resolve(self._shape_id)
        if shape is None:
            logger.debug("drag_target_missing id=%s", self._shape_id)
            self.reset()
            return None
        shape.set_position(pointer.translated(-self._offset.x, -self._offset.y))
        self._last_pointer = pointer
        return shape

    def end_drag(self) -> None:
        self._dragging = False
        self._shape_id = None

    def reset(self) -> None:
        self._dragging = False
        self._shape_id = None
        self._offset = ORIGIN
        self._last_pointer = ORIGIN

    def invalidate(self, shape_id: str) -> bool:
        """Reset if ``shape_id`` is the current drag target. Return whether it was."""
        if self._shape_id != shape_id:
            return False
        self.reset()
        return True
