"""Public engine API contracts."""

from engine.api.input_events import POINTER_EVENT_TYPES, PointerEvent, PointerEventType
from engine.api.logging import EngineLoggingConfig, JsonFormatter, configure_logging, get_logger
from engine.api.render import BoxLike, RectStyle, RenderAPI

__all__ = [
    "BoxLike",
    "EngineLoggingConfig",
    "JsonFormatter",
    "POINTER_EVENT_TYPES",
    "PointerEvent",
    "PointerEventType",
    "RectStyle",
    "RenderAPI",
    "configure_logging",
    "get_logger",
]
