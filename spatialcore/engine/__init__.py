"""Spatial interaction engine: geometry, hit-testing and alignment."""

from spatialcore.engine.alignment import check_alignment, compute_alignment, snap_threshold
from spatialcore.engine.config import AlignmentConfig, ViewportConfig
from spatialcore.engine.geometry import (
    ElementGeometry,
    GeometryKind,
    RotatedBoundingBox,
    compute_rotated_bbox,
    element_to_geometry,
    extract_snap_points,
)
from spatialcore.engine.hit_test import find_hit, hit_test
from spatialcore.engine.scene import SceneIndex

__all__ = [
    "AlignmentConfig",
    "ElementGeometry",
    "GeometryKind",
    "RotatedBoundingBox",
    "SceneIndex",
    "ViewportConfig",
    "check_alignment",
    "compute_alignment",
    "compute_rotated_bbox",
    "element_to_geometry",
    "extract_snap_points",
    "find_hit",
    "hit_test",
    "snap_threshold",
]
