"""Shared pytest fixtures for splinekit tests."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
import yaml

from splinekit.core.spline.models import ControlPoint

# ============================================================================
# Point Fixtures
# ============================================================================


@pytest.fixture
def hump_points() -> list[ControlPoint]:
    """Three-point hump: (0,0), (1,1), (2,0)."""
    return [
        ControlPoint(x=0.0, y=0.0),
        ControlPoint(x=1.0, y=1.0),
        ControlPoint(x=2.0, y=0.0),
    ]


@pytest.fixture
def irregular_points() -> list[ControlPoint]:
    """Unevenly spaced points with mixed slopes, deliberately unsorted."""
    return [
        ControlPoint(x=3.5, y=-1.0),
        ControlPoint(x=0.0, y=2.0),
        ControlPoint(x=7.0, y=4.5),
        ControlPoint(x=1.25, y=0.5),
        ControlPoint(x=10.0, y=0.0),
        ControlPoint(x=4.0, y=3.0),
    ]


@pytest.fixture
def canvas_points() -> list[ControlPoint]:
    """Pixel-space points like a 800x600 drawing surface produces."""
    return [
        ControlPoint(x=50.0, y=400.0),
        ControlPoint(x=180.0, y=220.0),
        ControlPoint(x=330.0, y=310.0),
        ControlPoint(x=520.0, y=120.0),
        ControlPoint(x=760.0, y=450.0),
    ]


# ============================================================================
# File Fixtures
# ============================================================================


@pytest.fixture
def hump_points_json(tmp_path: Path) -> Path:
    """JSON points file with {x, y} mappings."""
    path = tmp_path / "points.json"
    path.write_text(json.dumps([{"x": 0, "y": 0}, {"x": 1, "y": 1}, {"x": 2, "y": 0}]))
    return path


@pytest.fixture
def hump_points_yaml(tmp_path: Path) -> Path:
    """YAML points file with [x, y] pairs under a points key."""
    path = tmp_path / "points.yaml"
    path.write_text(yaml.safe_dump({"points": [[2, 0], [0, 0], [1, 1]]}))
    return path


# ============================================================================
# Logging
# ============================================================================


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Undo handlers and level installed by configure_logging during a test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers and type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
