"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

# Relative size below which a barycentric denominator means a collapsed triangle.
_DEGENERATE_EPS = 1e-12


def rotate_points(
    points: NDArray[np.float64],
    center: tuple[float, float],
    angle: float,
) -> NDArray[np.float64]:
    """Rotate an Nx2 point array by ``angle`` radians about ``center``.

    Screen convention (y down): positive angles turn clockwise on screen.
    """
    if angle == 0:
        return points.astype(np.float64, copy=True)
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    rot = np.array([[cos_a, -sin_a], [sin_a, cos_a]])
    origin = np.asarray(center, dtype=np.float64)
    return (points - origin) @ rot.T + origin


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def bbox_gap(
    a: tuple[float, float, float, float],
    b: tuple[float, float, float, float],
) -> tuple[float, float]:
    """Per-axis empty space between two (xmin, ymin, xmax, ymax) boxes. 0 when they overlap."""
    gap_x = max(a[0] - b[2], b[0] - a[2], 0.0)
    gap_y = max(a[1] - b[3], b[1] - a[3], 0.0)
    return gap_x, gap_y


def point_in_rect(px: float, py: float, x: float, y: float, width: float, height: float) -> bool:
    """Inclusive containment in an axis-aligned rectangle."""
    return x <= px <= x + width and y <= py <= y + height


def point_in_circle(px: float, py: float, cx: float, cy: float, radius: float) -> bool:
    """Closed-disc containment. A non-positive radius never contains anything."""
    if radius <= 0:
        return False
    dx = px - cx
    dy = py - cy
    return dx * dx + dy * dy <= radius * radius


def point_in_triangle(
    p: tuple[float, float],
    a: tuple[float, float],
    b: tuple[float, float],
    c: tuple[float, float],
) -> bool:
    """Barycentric containment test, edges included.

    Returns False for a zero-area triangle instead of dividing by zero.
    """
    v0 = (b[0] - a[0], b[1] - a[1])
    v1 = (c[0] - a[0], c[1] - a[1])
    vp = (p[0] - a[0], p[1] - a[1])

    dot00 = v0[0] * v0[0] + v0[1] * v0[1]
    dot01 = v0[0] * v1[0] + v0[1] * v1[1]
    dot02 = v0[0] * vp[0] + v0[1] * vp[1]
    dot11 = v1[0] * v1[0] + v1[1] * v1[1]
    dot12 = v1[0] * vp[0] + v1[1] * vp[1]

    denom = dot00 * dot11 - dot01 * dot01
    if denom == 0 or abs(denom) <= _DEGENERATE_EPS * dot00 * dot11:
        return False

    u = (dot11 * dot02 - dot01 * dot12) / denom
    v = (dot00 * dot12 - dot01 * dot02) / denom
    return u >= 0 and v >= 0 and u + v <= 1
