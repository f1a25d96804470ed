"""Engine-owned rendering API contract."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class RectStyle:
    """Fill and stroke settings for one rectangle draw."""

    fill_color: str = "#FDF6E3"
    stroke_color: str = "#000000"
    stroke_width: float = 1.0


class BoxLike(Protocol):
    """Axis-aligned box accepted by ``draw_rect``."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...

    @property
    def width(self) -> float: ...

    @property
    def height(self) -> float: ...


class RenderAPI(Protocol):
    """Rendering capabilities exposed by the engine to higher layers."""

    def init_surface(self, width: int, height: int, background_color: str) -> None:
        """Size the drawing surface and set its background."""

    def clear(self) -> None:
        """Drop everything drawn since the last clear."""

    def draw_rect(self, bbox: BoxLike, style: RectStyle) -> None:
        """Draw a filled and stroked rectangle above previous draws."""

    def set_cursor(self, name: str) -> None:
        """Set pointer cursor affordance when supported."""

    def get_dimensions(self) -> tuple[int, int]:
        """Return surface (width, height)."""

    def invalidate(self) -> None:
        """Schedule one redraw."""

    def run(self) -> None:
        """Run the backend loop until the surface is closed."""

    def close(self) -> None:
        """Close renderer resources and stop the loop."""


__all__ = ["BoxLike", "RectStyle", "RenderAPI"]
