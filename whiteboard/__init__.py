"""Whiteboard application: draggable rectangles with containment highlighting."""
