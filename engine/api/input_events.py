"""Public input event types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class PointerEventType(StrEnum):
    """Pointer event kinds delivered to the surface."""

    DOWN = "pointer_down"
    MOVE = "pointer_move"
    UP = "pointer_up"
    LEAVE = "pointer_leave"


POINTER_EVENT_TYPES: tuple[str, ...] = tuple(kind.value for kind in PointerEventType)


@dataclass(frozen=True, slots=True)
class PointerEvent:
    """Raw pointer event in surface-local coordinates."""

    event_type: str
    x: float
    y: float
    button: int = 0


__all__ = ["POINTER_EVENT_TYPES", "PointerEvent", "PointerEventType"]
