"""Application entry point."""

from __future__ import annotations

from engine.api.logging import get_logger
from engine.api.render import RenderAPI
from engine.runtime.config import RuntimeConfig, load_runtime_config
from whiteboard.app.bootstrap import WhiteboardApp
from whiteboard.infra.config import load_default_env_files
from whiteboard.infra.logging import setup_logging

logger = get_logger(__name__)


def create_renderer(config: RuntimeConfig) -> RenderAPI:
    """Pick the render backend for this run."""
    surface = config.surface
    if config.headless:
        from engine.rendering.headless import HeadlessRenderer

        return HeadlessRenderer(width=surface.width, height=surface.height)
    from engine.rendering.scene import SceneRenderer

    return SceneRenderer(width=surface.width, height=surface.height, title=surface.title)


def main() -> None:
    """Run the whiteboard application."""
    load_default_env_files()
    setup_logging()
    config = load_runtime_config()
    logger.info("runtime_config headless=%s surface=%s", config.headless, config.surface)
    try:
        renderer = create_renderer(config)
        app = WhiteboardApp(renderer, config)
    except RuntimeError:
        logger.exception("surface_startup_failed")
        raise
    app.run()


if __name__ == "__main__":
    main()
