"""Backend glue between the scene renderer and rendercanvas."""

from __future__ import annotations

import logging
from typing import Any

from engine.runtime.errors import BACKEND_QUIRK_ERRORS, log_recoverable

logger = logging.getLogger(__name__)

# rendercanvas has no grab hands; both grab affordances use the pointer hand.
CURSOR_NAMES: dict[str, str] = {
    "default": "default",
    "grab": "pointer",
    "grabbing": "pointer",
    "pointer": "pointer",
    "crosshair": "crosshair",
    "none": "none",
}


def resolve_cursor_name(name: str) -> str:
    """Map an app cursor affordance to a backend cursor name."""
    return CURSOR_NAMES.get(name.strip().lower(), "default")


def get_canvas_logical_size(canvas: Any) -> tuple[float, float] | None:
    """Return the canvas logical size, or None when the backend cannot report one."""
    get_logical_size = getattr(canvas, "get_logical_size", None)
    if not callable(get_logical_size):
        return None
    try:
        size = get_logical_size()
    except BACKEND_QUIRK_ERRORS:
        log_recoverable(logger, "logical_size_unavailable")
        return None
    if not (isinstance(size, (tuple, list)) and len(size) >= 2):
        return None
    width, height = size[0], size[1]
    if not isinstance(width, (int, float)) or not isinstance(height, (int, float)):
        return None
    return float(width), float(height)


def run_backend_loop(rc_auto: Any) -> None:
    """Block in the rendercanvas event loop."""
    loop = getattr(rc_auto, "loop", None)
    if loop is not None and hasattr(loop, "run"):
        loop.run()
        return
    run_func = getattr(rc_auto, "run", None)
    if callable(run_func):
        run_func()
        return
    raise RuntimeError("rendercanvas.auto did not expose a runnable loop.")


def stop_backend_loop(rc_auto: Any) -> None:
    loop = getattr(rc_auto, "loop", None)
    if loop is not None and hasattr(loop, "stop"):
        loop.stop()
