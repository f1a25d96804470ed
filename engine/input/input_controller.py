"""Pointer capture from a rendercanvas-style canvas."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from engine.api.input_events import POINTER_EVENT_TYPES, PointerEvent

logger = logging.getLogger(__name__)

PointerEventHandler = Callable[[PointerEvent], object]


class InputController:
    """Normalize canvas pointer events and forward them synchronously."""

    def __init__(self, on_pointer_event: PointerEventHandler, *, trace: bool = False) -> None:
        self._on_pointer_event = on_pointer_event
        self._pointer_x = 0.0
        self._pointer_y = 0.0
        self._trace = trace

    def bind(self, canvas: Any) -> None:
        """Attach pointer listeners to a wgpu canvas."""
        if not hasattr(canvas, "add_event_handler"):
            raise RuntimeError("Canvas does not support event handlers.")
        for event_type in POINTER_EVENT_TYPES:
            canvas.add_event_handler(self._on_raw_event, event_type)

    def consume_events(self, events: Iterable[PointerEvent]) -> int:
        """Forward already-normalized events in order. Return how many were forwarded."""
        count = 0
        for event in events:
            self._forward(event)
            count += 1
        return count

    def _on_raw_event(self, event: dict[str, Any]) -> None:
        pointer_event = self._normalize(event)
        if pointer_event is None:
            return
        self._forward(pointer_event)

    def _normalize(self, event: dict[str, Any]) -> PointerEvent | None:
        event_type = event.get("event_type")
        if event_type not in POINTER_EVENT_TYPES:
            return None
        x = event.get("x")
        y = event.get("y")
        if not isinstance(x, (int, float)) or not isinstance(y, (int, float)):
            if event_type != "pointer_leave":
                return None
            # Leave events may carry no coordinates on some backends.
            x, y = self._pointer_x, self._pointer_y
        button = event.get("button")
        if not isinstance(button, int):
            button = 0
        return PointerEvent(str(event_type), float(x), float(y), button)

    def _forward(self, event: PointerEvent) -> None:
        self._pointer_x = event.x
        self._pointer_y = event.y
        if self._trace:
            logger.debug(
                "input_event type=%s x=%.1f y=%.1f button=%d",
                event.event_type,
                event.x,
                event.y,
                event.button,
            )
        self._on_pointer_event(event)
