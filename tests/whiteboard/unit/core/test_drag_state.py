from __future__ import annotations

from whiteboard.core.drag_state import DragState
from whiteboard.core.geometry import ORIGIN, Point, Size
from whiteboard.core.shapes import make_rectangle


def _resolver(*shapes):
    by_id = {shape.id: shape for shape in shapes}
    return by_id.get


def test_new_state_is_idle_at_origin() -> None:
    state = DragState()
    assert state.dragging is False
    assert state.dragged_shape_id is None
    assert state.drag_offset == ORIGIN
    assert state.last_pointer_position == ORIGIN


def test_start_drag_records_grab_offset() -> None:
    shape = make_rectangle("r", Point(200.0, 260.0), Size(120.0, 80.0))
    state = DragState()
    state.start_drag(shape, Point(210.0, 270.0))

    assert state.dragging is True
    assert state.dragged_shape_id == "r"
    assert state.drag_offset == Point(10.0, 10.0)
    assert state.last_pointer_position == Point(210.0, 270.0)


def test_update_drag_keeps_grab_point_under_pointer() -> None:
    shape = make_rectangle("r", Point(200.0, 260.0), Size(120.0, 80.0))
    state = DragState()
    state.start_drag(shape, Point(210.0, 270.0))

    moved = state.update_drag(Point(420.0, 200.0), _resolver(shape))

    assert moved is shape
    assert shape.position == Point(410.0, 190.0)
    assert state.last_pointer_position == Point(420.0, 200.0)
    assert state.drag_offset == Point(10.0, 10.0)


def test_update_drag_when_idle_is_noop() -> None:
    shape = make_rectangle("r", Point(0.0, 0.0), Size(10.0, 10.0))
    state = DragState()
    assert state.update_drag(Point(50.0, 50.0), _resolver(shape)) is None
    assert shape.position == Point(0.0, 0.0)


def test_update_drag_resets_when_target_is_gone() -> None:
    shape = make_rectangle("r", Point(0.0, 0.0), Size(10.0, 10.0))
    state = DragState()
    state.start_drag(shape, Point(5.0, 5.0))

    assert state.update_drag(Point(50.0, 50.0), _resolver()) is None
    assert state.dragging is False
    assert state.dragged_shape_id is None
    assert shape.position == Point(0.0, 0.0)


def test_end_drag_stops_updates_but_keeps_offset() -> None:
    shape = make_rectangle("r", Point(0.0, 0.0), Size(10.0, 10.0))
    state = DragState()
    state.start_drag(shape, Point(3.0, 4.0))
    state.end_drag()

    assert state.dragging is False
    assert state.drag_offset == Point(3.0, 4.0)
    assert state.update_drag(Point(90.0, 90.0), _resolver(shape)) is None
    assert shape.position == Point(0.0, 0.0)


def test_reset_clears_everything() -> None:
    shape = make_rectangle("r", Point(0.0, 0.0), Size(10.0, 10.0))
    state = DragState()
    state.start_drag(shape, Point(3.0, 4.0))
    state.reset()
    assert state.dragging is False
    assert state.drag_offset == ORIGIN
    assert state.last_pointer_position == ORIGIN


def test_invalidate_only_resets_for_current_target() -> None:
    shape = make_rectangle("r", Point(0.0, 0.0), Size(10.0, 10.0))
    state = DragState()
    state.start_drag(shape, Point(1.0, 1.0))

    assert state.invalidate("other") is False
    assert state.dragging is True
    assert state.invalidate("r") is True
    assert state.dragging is False
