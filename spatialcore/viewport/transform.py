"""Screen <-> world coordinate mapping.

Screen space: viewport pixels, origin at the top-left corner.
World space: the infinite canvas. The camera position (``ViewportState.x/y``)
is the world point shown at the centre of the viewport.

    world  = (screen - size / 2) / zoom + camera
    screen = (world - camera) * zoom + size / 2

Every function here is pure. A non-positive zoom is a caller error; it is
replaced by ``ViewportConfig.zoom_epsilon`` rather than dividing by zero.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from spatialcore.engine.config import ViewportConfig
from spatialcore.models.geometry import Point, Rectangle, ViewportState, VisibleBounds

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = ViewportConfig()


def effective_zoom(viewport: ViewportState, config: ViewportConfig | None = None) -> float:
    """Zoom to divide by: the viewport's zoom, or the epsilon if it is not positive."""
    if viewport.zoom > 0:
        return viewport.zoom
    cfg = config or _DEFAULT_CONFIG
    logger.debug("Non-positive zoom %r clamped to %g", viewport.zoom, cfg.zoom_epsilon)
    return cfg.zoom_epsilon


def screen_to_world(
    point: Point,
    viewport: ViewportState,
    viewport_width: float,
    viewport_height: float,
    config: ViewportConfig | None = None,
) -> Point:
    zoom = effective_zoom(viewport, config)
    return Point(
        x=(point.x - viewport_width / 2) / zoom + viewport.x,
        y=(point.y - viewport_height / 2) / zoom + viewport.y,
    )


def world_to_screen(
    point: Point,
    viewport: ViewportState,
    viewport_width: float,
    viewport_height: float,
    config: ViewportConfig | None = None,
) -> Point:
    zoom = effective_zoom(viewport, config)
    return Point(
        x=(point.x - viewport.x) * zoom + viewport_width / 2,
        y=(point.y - viewport.y) * zoom + viewport_height / 2,
    )


def screen_points_to_world(
    points: Sequence[Point],
    viewport: ViewportState,
    viewport_width: float,
    viewport_height: float,
    config: ViewportConfig | None = None,
) -> list[Point]:
    """Vectorised ``screen_to_world`` over many points."""
    if not points:
        return []
    zoom = effective_zoom(viewport, config)
    arr = np.array([(p.x, p.y) for p in points], dtype=np.float64)
    half = np.array([viewport_width / 2, viewport_height / 2])
    camera = np.array([viewport.x, viewport.y])
    world = (arr - half) / zoom + camera
    return [Point(x=float(x), y=float(y)) for x, y in world]


def world_points_to_screen(
    points: Sequence[Point],
    viewport: ViewportState,
    viewport_width: float,
    viewport_height: float,
    config: ViewportConfig | None = None,
) -> list[Point]:
    """Vectorised ``world_to_screen`` over many points."""
    if not points:
        return []
    zoom = effective_zoom(viewport, config)
    arr = np.array([(p.x, p.y) for p in points], dtype=np.float64)
    half = np.array([viewport_width / 2, viewport_height / 2])
    camera = np.array([viewport.x, viewport.y])
    screen = (arr - camera) * zoom + half
    return [Point(x=float(x), y=float(y)) for x, y in screen]


def screen_delta_to_world_delta(
    screen_dx: float,
    screen_dy: float,
    viewport: ViewportState,
    config: ViewportConfig | None = None,
) -> tuple[float, float]:
    """Scale a drag delta into world units. Translation-invariant; camera rotation ignored."""
    zoom = effective_zoom(viewport, config)
    return screen_dx / zoom, screen_dy / zoom


def get_visible_bounds(
    viewport: ViewportState,
    viewport_width: float,
    viewport_height: float,
    config: ViewportConfig | None = None,
) -> VisibleBounds:
    """World rectangle covering all four mapped screen corners.

    Takes min/max over every corner so a rotated camera would still be covered.
    """
    corners = screen_points_to_world(
        [
            Point(x=0, y=0),
            Point(x=viewport_width, y=0),
            Point(x=0, y=viewport_height),
            Point(x=viewport_width, y=viewport_height),
        ],
        viewport,
        viewport_width,
        viewport_height,
        config,
    )
    xs = [c.x for c in corners]
    ys = [c.y for c in corners]
    return VisibleBounds.from_extents(min(xs), min(ys), max(xs), max(ys))


def is_rect_visible(rect: Rectangle, bounds: VisibleBounds) -> bool:
    """AABB overlap; touching edges count as visible."""
    return not (
        rect.right < bounds.left
        or rect.x > bounds.right
        or rect.bottom < bounds.top
        or rect.y > bounds.bottom
    )


def is_point_visible(point: Point, bounds: VisibleBounds) -> bool:
    return bounds.left <= point.x <= bounds.right and bounds.top <= point.y <= bounds.bottom


def calculate_zoom_position(
    viewport: ViewportState,
    new_zoom: float,
    screen_center: Point,
    viewport_width: float,
    viewport_height: float,
    config: ViewportConfig | None = None,
) -> Point:
    """Camera position keeping the world point under ``screen_center`` fixed on screen."""
    anchor = screen_to_world(screen_center, viewport, viewport_width, viewport_height, config)
    zoom = new_zoom if new_zoom > 0 else (config or _DEFAULT_CONFIG).zoom_epsilon
    return Point(
        x=anchor.x - (screen_center.x - viewport_width / 2) / zoom,
        y=anchor.y - (screen_center.y - viewport_height / 2) / zoom,
    )


def clamp_to_bounds(
    viewport: ViewportState,
    viewport_width: float,
    viewport_height: float,
    world_bounds: Rectangle,
    config: ViewportConfig | None = None,
) -> Point:
    """Camera position keeping the visible area inside ``world_bounds``.

    On an axis where the visible extent is at least the world extent the
    camera is centred on the world instead.
    """
    zoom = effective_zoom(viewport, config)
    return Point(
        x=_clamp_axis(viewport.x, viewport_width / zoom, world_bounds.x, world_bounds.width),
        y=_clamp_axis(viewport.y, viewport_height / zoom, world_bounds.y, world_bounds.height),
    )


def _clamp_axis(camera: float, visible: float, start: float, extent: float) -> float:
    if visible >= extent:
        return start + extent / 2
    low = start + visible / 2
    high = start + extent - visible / 2
    return max(low, min(high, camera))
