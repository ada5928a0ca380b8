"""Tests for rotated boxes and snap point extraction."""

import math

import numpy as np
import pytest

from spatialcore.engine.geometry import (
    ElementGeometry,
    GeometryKind,
    compute_rotated_bbox,
    element_to_geometry,
    extract_snap_points,
)
from spatialcore.models.alignment import SnapPointType
from spatialcore.models.element import SceneElement
from spatialcore.models.geometry import Rectangle
from tests.conftest import make_shape


def test_unrotated_corners_in_winding_order():
    rb = compute_rotated_bbox(ElementGeometry(x=10, y=20, width=100, height=50))
    assert rb.corners.tolist() == [[10, 20], [110, 20], [110, 70], [10, 70]]
    assert rb.center == (60, 45)
    assert rb.aabb == (10, 20, 110, 70)


def test_quarter_turn_swaps_extents():
    rb = compute_rotated_bbox(ElementGeometry(x=0, y=0, width=100, height=40, rotation=math.pi / 2))
    xmin, ymin, xmax, ymax = rb.aabb
    assert xmax - xmin == pytest.approx(40)
    assert ymax - ymin == pytest.approx(100)
    assert rb.center == (50, 20)


def test_rotation_preserves_centre_and_distances():
    geom = ElementGeometry(x=5, y=-7, width=30, height=12, rotation=0.7)
    rb = compute_rotated_bbox(geom)
    center = np.asarray(rb.center)
    assert np.allclose(rb.corners.mean(axis=0), center)
    radius = math.hypot(15, 6)
    assert np.allclose(np.linalg.norm(rb.corners - center, axis=1), radius)


def test_rectangle_snap_points():
    points = extract_snap_points(ElementGeometry(x=0, y=0, width=100, height=50))
    assert len(points) == 9
    coords = [(p.x, p.y) for p in points]
    assert coords == [
        (0, 0), (100, 0), (100, 50), (0, 50),
        (50, 0), (100, 25), (50, 50), (0, 25),
        (50, 25),
    ]
    assert points[-1].type == SnapPointType.CENTER
    assert points[4].type == SnapPointType.EDGE_TOP
    assert points[7].type == SnapPointType.EDGE_LEFT
    assert not any(p.type == SnapPointType.VERTEX for p in points)


def test_triangle_vertices_are_labelled():
    geom = element_to_geometry(make_shape("t", "triangle", 0, 0, 100, 100))
    assert geom.kind == GeometryKind.TRIANGLE
    points = extract_snap_points(geom)
    vertices = {(p.x, p.y) for p in points if p.type == SnapPointType.VERTEX}
    assert vertices == {(50, 0), (0, 100), (100, 100)}


def test_rotated_snap_points_follow_rotation():
    geom = ElementGeometry(x=0, y=0, width=100, height=100, rotation=math.pi / 4)
    points = extract_snap_points(geom)
    top_left = points[0]
    # TL of a square turned 45 degrees clockwise (y down) lands straight above the centre
    assert top_left.x == pytest.approx(50)
    assert top_left.y == pytest.approx(50 - 50 * math.sqrt(2))


def test_element_kind_mapping():
    assert element_to_geometry(SceneElement(id="t", type="text")).kind == GeometryKind.TEXT
    assert element_to_geometry(SceneElement(id="i", type="image")).kind == GeometryKind.IMAGE
    assert element_to_geometry(SceneElement(id="g", type="group")).kind == GeometryKind.GROUP
    # shape without a shape type falls back to a rectangle
    assert element_to_geometry(SceneElement(id="s", type="shape")).kind == GeometryKind.RECTANGLE


def test_from_rect():
    geom = ElementGeometry.from_rect(Rectangle(x=1, y=2, width=3, height=4), rotation=0.5)
    assert (geom.x, geom.y, geom.width, geom.height, geom.rotation) == (1, 2, 3, 4, 0.5)
