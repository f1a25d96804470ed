"""Scene graph setup for pygfx rendering."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from engine.api.render import BoxLike, RectStyle
from engine.rendering.scene_runtime import (
    get_canvas_logical_size,
    resolve_cursor_name,
    run_backend_loop,
    stop_backend_loop,
)
from engine.runtime.errors import BACKEND_QUIRK_ERRORS, SurfaceUnavailableError, log_recoverable

try:
    import pygfx as gfx
except Exception as exc:  # pragma: no cover - import guard for environments without graphics deps
    gfx = None
    _gfx_import_error = exc
else:
    _gfx_import_error = None

try:
    import rendercanvas.auto as rc_auto
except Exception as exc:  # pragma: no cover - missing GUI backend
    rc_auto = None
    _canvas_import_error = exc
else:
    _canvas_import_error = None

logger = logging.getLogger(__name__)

# Depth step between consecutive draws so later rects sit above earlier ones.
_Z_STEP = 0.001


@dataclass(slots=True)
class SceneRenderer:
    """Immediate-mode 2D rect renderer over a pygfx scene."""

    width: int = 800
    height: int = 600
    title: str = "Whiteboard"
    _rect_nodes: list[Any] = field(default_factory=list)
    _draw_index: int = 0
    canvas: Any = field(init=False)
    renderer: Any = field(init=False)
    scene: Any = field(init=False)
    camera: Any = field(init=False)
    _layer: Any = field(init=False)
    _background: Any = field(init=False, default=None)
    _draw_failed: bool = field(init=False, default=False)
    _is_closed: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        if gfx is None:
            raise SurfaceUnavailableError(
                f"pygfx dependency unavailable: {_gfx_import_error!r}. Install 'pygfx' and 'wgpu'."
            )
        if rc_auto is None:
            raise SurfaceUnavailableError(
                "Render canvas backend unavailable. Install a desktop backend such as 'glfw' or 'pyside6'. "
                f"Original error: {_canvas_import_error!r}"
            )

        canvas_cls = getattr(rc_auto, "RenderCanvas", None)
        if canvas_cls is None:
            raise SurfaceUnavailableError("rendercanvas.auto did not expose RenderCanvas.")

        self.canvas = canvas_cls(size=(self.width, self.height), title=self.title)
        try:
            self.renderer = gfx.WgpuRenderer(self.canvas)
        except RuntimeError as exc:
            raise SurfaceUnavailableError(f"Could not get a drawing context from canvas: {exc!r}") from exc
        self.scene = gfx.Scene()
        self._layer = gfx.Group()
        self.scene.add(self._layer)
        self.camera = gfx.OrthographicCamera(self.width, self.height)
        self._update_camera_projection()

    def _update_camera_projection(self) -> None:
        if hasattr(self.camera, "width"):
            self.camera.width = self.width
        if hasattr(self.camera, "height"):
            self.camera.height = self.height
        self.camera.local.position = (self.width / 2.0, self.height / 2.0, 0.0)
        self.camera.local.scale_y = -1.0

    def init_surface(self, width: int, height: int, background_color: str) -> None:
        """Resize the canvas and install a solid background."""
        if width <= 0 or height <= 0:
            raise SurfaceUnavailableError(f"invalid surface size {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        set_logical_size = getattr(self.canvas, "set_logical_size", None)
        if callable(set_logical_size):
            set_logical_size(self.width, self.height)
        self._update_camera_projection()
        if self._background is not None:
            self.scene.remove(self._background)
        self._background = gfx.Background.from_color(background_color)
        self.scene.add(self._background)
        logger.info("surface_initialized width=%d height=%d background=%s", self.width, self.height, background_color)

    def get_dimensions(self) -> tuple[int, int]:
        size = get_canvas_logical_size(self.canvas)
        if size is None:
            return self.width, self.height
        return int(size[0]), int(size[1])

    def clear(self) -> None:
        """Remove every rect drawn since the last clear."""
        for node in self._rect_nodes:
            self._layer.remove(node)
        self._rect_nodes.clear()
        self._draw_index = 0

    def draw_rect(self, bbox: BoxLike, style: RectStyle) -> None:
        """Add a filled rect with a closed outline above all previous draws."""
        x, y = float(bbox.x), float(bbox.y)
        w, h = float(bbox.width), float(bbox.height)
        z = self._draw_index * _Z_STEP
        self._draw_index += 1

        fill = gfx.Mesh(gfx.plane_geometry(w, h), gfx.MeshBasicMaterial(color=style.fill_color))
        fill.local.position = (x + w / 2.0, y + h / 2.0, z)
        self._layer.add(fill)
        self._rect_nodes.append(fill)

        if style.stroke_width <= 0:
            return
        corners = np.array(
            [
                (x, y, z),
                (x + w, y, z),
                (x + w, y + h, z),
                (x, y + h, z),
                (x, y, z),
            ],
            dtype=np.float32,
        )
        outline = gfx.Line(
            gfx.Geometry(positions=corners),
            gfx.LineMaterial(
                color=style.stroke_color,
                thickness=float(style.stroke_width),
                thickness_space="screen",
            ),
        )
        self._layer.add(outline)
        self._rect_nodes.append(outline)

    def set_cursor(self, name: str) -> None:
        set_cursor = getattr(self.canvas, "set_cursor", None)
        if not callable(set_cursor):
            return
        try:
            set_cursor(resolve_cursor_name(name))
        except BACKEND_QUIRK_ERRORS:
            log_recoverable(logger, "cursor_not_supported", cursor=name)

    def invalidate(self) -> None:
        """Schedule one redraw."""
        if self._is_closed:
            return
        if hasattr(self.canvas, "request_draw"):
            self.canvas.request_draw()

    def run(self) -> None:
        """Start the demand-driven draw loop."""

        def _draw_frame() -> None:
            if self._draw_failed or self._is_closed:
                return
            try:
                self.renderer.render(self.scene, self.camera)
            except Exception:  # pylint: disable=broad-exception-caught
                self._draw_failed = True
                logger.exception("unhandled_exception_in_draw_loop")
                self.close()

        self.canvas.request_draw(_draw_frame)
        self.invalidate()
        run_backend_loop(rc_auto)

    def close(self) -> None:
        """Close canvas and stop backend loop when possible."""
        if self._is_closed:
            return
        self._is_closed = True
        if hasattr(self.canvas, "close"):
            self.canvas.close()
        stop_backend_loop(rc_auto)
