"""Headless render backend that records draw calls instead of drawing."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from engine.api.render import BoxLike, RectStyle
from engine.runtime.errors import SurfaceUnavailableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DrawnRect:
    """One recorded ``draw_rect`` call."""

    x: float
    y: float
    width: float
    height: float
    style: RectStyle


@dataclass(slots=True)
class HeadlessRenderer:
    """Render port implementation for tests and windowless runs."""

    width: int = 800
    height: int = 600
    background_color: str = "#F5F5F5"
    cursor: str = "default"
    calls: list[str] = field(default_factory=list)
    frame: list[DrawnRect] = field(default_factory=list)
    frames_requested: int = 0
    closed: bool = False

    def init_surface(self, width: int, height: int, background_color: str) -> None:
        if width <= 0 or height <= 0:
            raise SurfaceUnavailableError(f"invalid surface size {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.background_color = background_color
        self.calls.append("init_surface")

    def get_dimensions(self) -> tuple[int, int]:
        return self.width, self.height

    def clear(self) -> None:
        self.frame.clear()
        self.calls.append("clear")

    def draw_rect(self, bbox: BoxLike, style: RectStyle) -> None:
        self.frame.append(DrawnRect(bbox.x, bbox.y, bbox.width, bbox.height, style))
        self.calls.append("draw_rect")

    def set_cursor(self, name: str) -> None:
        self.cursor = name

    def invalidate(self) -> None:
        if self.closed:
            return
        self.frames_requested += 1
        self.calls.append("invalidate")

    def run(self) -> None:
        """Nothing to pump without a window; report the last frame and return."""
        logger.info("headless_run rects=%d frames_requested=%d", len(self.frame), self.frames_requested)

    def close(self) -> None:
        self.closed = True
