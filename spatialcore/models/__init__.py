"""Boundary data model of the spatial core."""

from spatialcore.models.alignment import (
    AlignmentResult,
    Guideline,
    GuidelineAxis,
    GuidelineType,
    SnapPoint,
    SnapPointType,
)
from spatialcore.models.element import ElementType, SceneElement, ShapeType
from spatialcore.models.geometry import Point, Rectangle, ViewportState, VisibleBounds

__all__ = [
    "AlignmentResult",
    "ElementType",
    "Guideline",
    "GuidelineAxis",
    "GuidelineType",
    "Point",
    "Rectangle",
    "SceneElement",
    "ShapeType",
    "SnapPoint",
    "SnapPointType",
    "ViewportState",
    "VisibleBounds",
]
