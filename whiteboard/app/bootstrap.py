"""Application composition: surface, controller, input and sample shapes."""

from __future__ import annotations

import logging

from engine.api.render import RenderAPI
from engine.input.input_controller import InputController
from engine.runtime.config import RuntimeConfig, SurfaceConfig
from engine.runtime.logging import setup_engine_logging
from whiteboard.app.controller import SurfaceController
from whiteboard.core.geometry import Point, Size
from whiteboard.core.shapes import Shape, make_area, make_rectangle

logger = logging.getLogger(__name__)


def sample_shapes(surface: SurfaceConfig) -> list[Shape]:
    """One area on the right and one rectangle on the left, vertically centered."""
    area = make_area(
        "area-1",
        Point(400.0, (surface.height - 300.0) / 2.0),
        Size(350.0, 300.0),
        z_index=0,
    )
    rectangle = make_rectangle(
        "rect-1",
        Point(200.0, (surface.height - 80.0) / 2.0),
        Size(120.0, 80.0),
        z_index=1,
    )
    return [area, rectangle]


class WhiteboardApp:
    """Wire a render backend to a surface controller."""

    def __init__(self, renderer: RenderAPI, config: RuntimeConfig, *, with_samples: bool = True) -> None:
        setup_engine_logging()
        self._renderer = renderer
        self._config = config
        surface = config.surface
        renderer.init_surface(surface.width, surface.height, surface.background_color)
        self.controller = SurfaceController(renderer)
        self.input = InputController(
            self.controller.handle_pointer_event,
            trace=config.input_trace_enabled,
        )
        canvas = getattr(renderer, "canvas", None)
        if canvas is not None:
            self.input.bind(canvas)
        if with_samples:
            for shape in sample_shapes(surface):
                self.controller.add_shape(shape)
        else:
            self.controller.render()
        logger.info(
            "whiteboard_ready width=%d height=%d shapes=%d",
            surface.width,
            surface.height,
            len(self.controller.shapes),
        )

    def run(self) -> None:
        self._renderer.run()

    def close(self) -> None:
        self._renderer.close()
