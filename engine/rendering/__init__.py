"""Engine rendering runtime modules."""

from engine.rendering.headless import DrawnRect, HeadlessRenderer
from engine.rendering.scene import SceneRenderer

__all__ = ["DrawnRect", "HeadlessRenderer", "SceneRenderer"]
