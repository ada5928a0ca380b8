"""Element geometry — rotated bounding boxes and snap point extraction.

A RotatedBoundingBox keeps its corners in a fixed winding order
(top-left, top-right, bottom-right, bottom-left of the unrotated box),
rotated about the box centre. Rotation does not move the centre.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from spatialcore.models.alignment import SnapPoint, SnapPointType
from spatialcore.models.element import ElementType, SceneElement, ShapeType
from spatialcore.models.geometry import Rectangle
from spatialcore.utils.geometry import bbox, rotate_points


class GeometryKind(str, enum.Enum):
    RECTANGLE = "rectangle"
    ROUNDED_RECT = "roundedRect"
    CIRCLE = "circle"
    TRIANGLE = "triangle"
    TEXT = "text"
    IMAGE = "image"
    GROUP = "group"


_SHAPE_KINDS = {
    ShapeType.RECTANGLE: GeometryKind.RECTANGLE,
    ShapeType.ROUNDED_RECT: GeometryKind.ROUNDED_RECT,
    ShapeType.CIRCLE: GeometryKind.CIRCLE,
    ShapeType.TRIANGLE: GeometryKind.TRIANGLE,
}

_ELEMENT_KINDS = {
    ElementType.TEXT: GeometryKind.TEXT,
    ElementType.IMAGE: GeometryKind.IMAGE,
    ElementType.GROUP: GeometryKind.GROUP,
}


@dataclass(frozen=True)
class ElementGeometry:
    """Minimal shape description for spatial math."""

    x: float
    y: float
    width: float
    height: float
    rotation: float = 0.0
    kind: GeometryKind = GeometryKind.RECTANGLE

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    @classmethod
    def from_rect(cls, rect: Rectangle, rotation: float = 0.0) -> ElementGeometry:
        """Plain box geometry, e.g. for a drag selection."""
        return cls(x=rect.x, y=rect.y, width=rect.width, height=rect.height, rotation=rotation)


@dataclass(frozen=True, eq=False)
class RotatedBoundingBox:
    # 4x2 array: TL, TR, BR, BL after rotation
    corners: NDArray[np.float64] = field(repr=False)
    center: tuple[float, float] = (0.0, 0.0)

    @property
    def aabb(self) -> tuple[float, float, float, float]:
        """(xmin, ymin, xmax, ymax) over the rotated corners and the centre."""
        return bbox(np.vstack([self.corners, np.asarray(self.center)]))

    def edge_midpoints(self) -> NDArray[np.float64]:
        """Midpoints of the top, right, bottom and left edges, in that order."""
        return (self.corners + np.roll(self.corners, -1, axis=0)) / 2


def element_to_geometry(element: SceneElement) -> ElementGeometry:
    if element.type == ElementType.SHAPE:
        kind = _SHAPE_KINDS.get(element.shape_type, GeometryKind.RECTANGLE)
    else:
        kind = _ELEMENT_KINDS[element.type]
    return ElementGeometry(
        x=element.x,
        y=element.y,
        width=element.width,
        height=element.height,
        rotation=element.rotation,
        kind=kind,
    )


def compute_rotated_bbox(geometry: ElementGeometry) -> RotatedBoundingBox:
    x, y, w, h = geometry.x, geometry.y, geometry.width, geometry.height
    corners = np.array(
        [[x, y], [x + w, y], [x + w, y + h], [x, y + h]],
        dtype=np.float64,
    )
    center = geometry.center
    return RotatedBoundingBox(
        corners=rotate_points(corners, center, geometry.rotation),
        center=center,
    )


# Snap point type per canonical position: 4 corners, 4 edge midpoints, centre.
_CORNER_TYPES = (
    SnapPointType.EDGE_LEFT,  # top-left
    SnapPointType.EDGE_RIGHT,  # top-right
    SnapPointType.EDGE_RIGHT,  # bottom-right
    SnapPointType.EDGE_LEFT,  # bottom-left
)
_MIDPOINT_TYPES = (
    SnapPointType.EDGE_TOP,
    SnapPointType.EDGE_RIGHT,
    SnapPointType.EDGE_BOTTOM,
    SnapPointType.EDGE_LEFT,
)

# Triangle silhouette: apex at top-mid, base on the bottom corners.
_TRIANGLE_VERTICES = {("corner", 2), ("corner", 3), ("mid", 0)}


def extract_snap_points(
    geometry: ElementGeometry,
    rbbox: RotatedBoundingBox | None = None,
) -> list[SnapPoint]:
    """Nine canonical snap points in fixed order: TL, TR, BR, BL, top/right/bottom/left mids, centre.

    Triangles relabel their three vertices (apex, base corners) as ``vertex``.
    """
    rb = rbbox if rbbox is not None else compute_rotated_bbox(geometry)
    is_triangle = geometry.kind == GeometryKind.TRIANGLE

    points: list[SnapPoint] = []
    for i, (cx, cy) in enumerate(rb.corners):
        kind = _CORNER_TYPES[i]
        if is_triangle and ("corner", i) in _TRIANGLE_VERTICES:
            kind = SnapPointType.VERTEX
        points.append(SnapPoint(x=float(cx), y=float(cy), type=kind))

    for i, (mx, my) in enumerate(rb.edge_midpoints()):
        kind = _MIDPOINT_TYPES[i]
        if is_triangle and ("mid", i) in _TRIANGLE_VERTICES:
            kind = SnapPointType.VERTEX
        points.append(SnapPoint(x=float(mx), y=float(my), type=kind))

    points.append(SnapPoint(x=rb.center[0], y=rb.center[1], type=SnapPointType.CENTER))
    return points
