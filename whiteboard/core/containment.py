"""Containment scan and highlight policy."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from whiteboard.core.shapes import Shape

logger = logging.getLogger(__name__)


def _bounds_array(shapes: Sequence[Shape]) -> np.ndarray:
    """Return an (n, 4) array of left, top, right, bottom."""
    if not shapes:
        return np.zeros((0, 4), dtype=np.float64)
    rows = []
    for shape in shapes:
        box = shape.bounds
        rows.append((box.x, box.y, box.right, box.bottom))
    return np.asarray(rows, dtype=np.float64)


def containment_matrix(shapes: Sequence[Shape]) -> np.ndarray:
    """Return bool matrix where ``[i, j]`` means shape i lies within shape j.

    Same inclusive comparisons as ``Shape.is_fully_contained_within``; the
    diagonal is always False.
    """
    edges = _bounds_array(shapes)
    left, top, right, bottom = (edges[:, k] for k in range(4))
    matrix = (
        (left[:, None] >= left[None, :])
        & (top[:, None] >= top[None, :])
        & (right[:, None] <= right[None, :])
        & (bottom[:, None] <= bottom[None, :])
    )
    np.fill_diagonal(matrix, False)
    return matrix


def containment_pairs(shapes: Sequence[Shape]) -> list[tuple[str, str]]:
    """Return ``(inner_id, outer_id)`` for every containment edge, row-major."""
    matrix = containment_matrix(shapes)
    inner, outer = np.nonzero(matrix)
    return [(shapes[int(i)].id, shapes[int(j)].id) for i, j in zip(inner, outer)]


class ContainmentScanner:
    """Recompute every shape's highlight flag from scratch."""

    def __init__(self) -> None:
        self._scan_count = 0

    @property
    def scan_count(self) -> int:
        return self._scan_count

    def scan(self, shapes: Sequence[Shape]) -> tuple[str, ...]:
        """Highlight both ends of every containment edge. Return highlighted ids."""
        self._scan_count += 1
        for shape in shapes:
            shape.set_highlighted(False)
        matrix = containment_matrix(shapes)
        involved = matrix.any(axis=0) | matrix.any(axis=1)
        highlighted: list[str] = []
        for index in np.flatnonzero(involved):
            shape = shapes[int(index)]
            shape.set_highlighted(True)
            highlighted.append(shape.id)
        logger.debug("containment_scan shapes=%d highlighted=%d", len(shapes), len(highlighted))
        return tuple(highlighted)
