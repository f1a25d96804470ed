"""Engine input capture runtime modules."""

from engine.api.input_events import PointerEvent, PointerEventType
from engine.input.input_controller import InputController

__all__ = ["InputController", "PointerEvent", "PointerEventType"]
