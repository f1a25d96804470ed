"""Shapes placed on the whiteboard surface."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from engine.api.render import RectStyle, RenderAPI
from whiteboard.core.geometry import Bbox, Point, Size


class ShapeKind(StrEnum):
    """Shape variants. They differ only in styling."""

    RECTANGLE = "RECTANGLE"
    AREA = "AREA"


@dataclass(frozen=True, slots=True)
class StylePair:
    """Idle and highlighted presets for one shape kind."""

    idle: RectStyle
    highlighted: RectStyle

    def select(self, highlighted: bool) -> RectStyle:
        return self.highlighted if highlighted else self.idle


SHAPE_STYLES: dict[ShapeKind, StylePair] = {
    ShapeKind.RECTANGLE: StylePair(
        idle=RectStyle(fill_color="#FFB6C1", stroke_color="#000000", stroke_width=2.0),
        # rgba(58, 115, 249, 0.66)
        highlighted=RectStyle(fill_color="#3A73F9A8", stroke_color="#000000", stroke_width=2.0),
    ),
    ShapeKind.AREA: StylePair(
        idle=RectStyle(fill_color="#FDF6E3", stroke_color="#666666", stroke_width=1.0),
        highlighted=RectStyle(fill_color="#FDF6E3", stroke_color="#0758EE", stroke_width=3.0),
    ),
}


class Shape:
    """Axis-aligned rectangle with identity, draw order and highlight state.

    Position and size are immutable values, so setters never share state
    with the caller. Highlighting only swaps the style preset; redrawing is
    left to whoever owns the surface.
    """

    __slots__ = ("_id", "_kind", "_position", "_size", "_z_index", "_highlighted")

    def __init__(
        self,
        shape_id: str,
        kind: ShapeKind,
        position: Point,
        size: Size,
        z_index: int = 0,
    ) -> None:
        self._id = shape_id
        self._kind = kind
        self._position = Point(position.x, position.y)
        self._size = Size(size.width, size.height)
        self._z_index = int(z_index)
        self._highlighted = False

    def __repr__(self) -> str:
        return (
            f"Shape(id={self._id!r}, kind={self._kind.value}, position=({self._position.x}, "
            f"{self._position.y}), size=({self._size.width}, {self._size.height}), z={self._z_index})"
        )

    @property
    def id(self) -> str:
        return self._id

    @property
    def kind(self) -> ShapeKind:
        return self._kind

    @property
    def position(self) -> Point:
        return self._position

    @property
    def size(self) -> Size:
        return self._size

    @property
    def z_index(self) -> int:
        return self._z_index

    @property
    def highlighted(self) -> bool:
        return self._highlighted

    @property
    def bounds(self) -> Bbox:
        return Bbox.from_parts(self._position, self._size)

    @property
    def style(self) -> RectStyle:
        """Style preset selected by the highlight flag."""
        return SHAPE_STYLES[self._kind].select(self._highlighted)

    def set_position(self, position: Point) -> None:
        self._position = Point(position.x, position.y)

    def set_size(self, size: Size) -> None:
        self._size = Size(size.width, size.height)

    def set_highlighted(self, highlighted: bool) -> None:
        self._highlighted = bool(highlighted)

    def contains_point(self, point: Point) -> bool:
        """Hit test against the closed bounding box."""
        return self.bounds.contains_point(point)

    def is_fully_contained_within(self, other: Shape) -> bool:
        return self.bounds.is_within(other.bounds)

    def draw(self, renderer: RenderAPI) -> None:
        renderer.draw_rect(self.bounds, self.style)


def make_rectangle(shape_id: str, position: Point, size: Size, z_index: int = 0) -> Shape:
    return Shape(shape_id, ShapeKind.RECTANGLE, position, size, z_index)


def make_area(shape_id: str, position: Point, size: Size, z_index: int = 0) -> Shape:
    return Shape(shape_id, ShapeKind.AREA, position, size, z_index)
