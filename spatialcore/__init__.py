"""Spatial interaction core of a 2D canvas editor.

Coordinate mapping between screen and world space, point picking, and
drag-time alignment snapping. Every entry point is a pure function of its
arguments; element lists are read, never modified.
"""

from spatialcore.engine import (
    AlignmentConfig,
    ElementGeometry,
    SceneIndex,
    ViewportConfig,
    check_alignment,
    compute_alignment,
    find_hit,
    hit_test,
)
from spatialcore.models import (
    AlignmentResult,
    Guideline,
    Point,
    Rectangle,
    SceneElement,
    ViewportState,
    VisibleBounds,
)
from spatialcore.viewport import screen_to_world, world_to_screen

__version__ = "0.1.0"

__all__ = [
    "AlignmentConfig",
    "AlignmentResult",
    "ElementGeometry",
    "Guideline",
    "Point",
    "Rectangle",
    "SceneElement",
    "SceneIndex",
    "ViewportConfig",
    "ViewportState",
    "VisibleBounds",
    "check_alignment",
    "compute_alignment",
    "find_hit",
    "hit_test",
    "screen_to_world",
    "world_to_screen",
]
