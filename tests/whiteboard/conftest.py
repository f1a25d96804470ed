from __future__ import annotations

import pytest

from engine.rendering.headless import HeadlessRenderer
from whiteboard.app.controller import SurfaceController
from whiteboard.core.containment import ContainmentScanner


@pytest.fixture
def renderer() -> HeadlessRenderer:
    return HeadlessRenderer()


@pytest.fixture
def scanner() -> ContainmentScanner:
    return ContainmentScanner()


@pytest.fixture
def controller(renderer: HeadlessRenderer, scanner: ContainmentScanner) -> SurfaceController:
    return SurfaceController(renderer, scanner)
