"""Whiteboard application layer."""

from whiteboard.app.bootstrap import WhiteboardApp, sample_shapes
from whiteboard.app.controller import Cursor, SurfaceController

__all__ = ["Cursor", "SurfaceController", "WhiteboardApp", "sample_shapes"]
