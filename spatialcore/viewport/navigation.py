"""Camera navigation — pan, zoom and fit, each returning a new ViewportState."""

from __future__ import annotations

import logging

from spatialcore.engine.config import ViewportConfig
from spatialcore.models.geometry import Point, Rectangle, ViewportState
from spatialcore.viewport.transform import calculate_zoom_position, screen_delta_to_world_delta

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = ViewportConfig()


def clamp_zoom(zoom: float, config: ViewportConfig | None = None) -> float:
    cfg = config or _DEFAULT_CONFIG
    return max(cfg.min_zoom, min(cfg.max_zoom, zoom))


def pan(
    viewport: ViewportState,
    screen_dx: float,
    screen_dy: float,
    config: ViewportConfig | None = None,
) -> ViewportState:
    """Drag the canvas by a screen delta; the camera moves the opposite way."""
    world_dx, world_dy = screen_delta_to_world_delta(screen_dx, screen_dy, viewport, config)
    return viewport.model_copy(update={"x": viewport.x - world_dx, "y": viewport.y - world_dy})


def zoom_to(
    viewport: ViewportState,
    new_zoom: float,
    viewport_width: float,
    viewport_height: float,
    anchor: Point | None = None,
    config: ViewportConfig | None = None,
) -> ViewportState:
    """Set the zoom (clamped). With an anchor, the world point under it stays put."""
    zoom = clamp_zoom(new_zoom, config)
    if zoom == viewport.zoom:
        return viewport

    x, y = viewport.x, viewport.y
    if anchor is not None:
        position = calculate_zoom_position(
            viewport, zoom, anchor, viewport_width, viewport_height, config
        )
        x, y = position.x, position.y

    if zoom != new_zoom:
        logger.debug("Zoom %.4f clamped to %.4f", new_zoom, zoom)
    return ViewportState(x=x, y=y, zoom=zoom)


def zoom_by(
    viewport: ViewportState,
    delta: float,
    viewport_width: float,
    viewport_height: float,
    anchor: Point | None = None,
    config: ViewportConfig | None = None,
) -> ViewportState:
    return zoom_to(viewport, viewport.zoom + delta, viewport_width, viewport_height, anchor, config)


def wheel_zoom(
    viewport: ViewportState,
    delta_y: float,
    mouse: Point,
    viewport_width: float,
    viewport_height: float,
    config: ViewportConfig | None = None,
) -> ViewportState:
    """Multiplicative zoom for a wheel tick, anchored at the mouse.

    Positive ``delta_y`` (wheel down) zooms out.
    """
    cfg = config or _DEFAULT_CONFIG
    factor = cfg.zoom_out_factor if delta_y > 0 else cfg.zoom_in_factor
    return zoom_to(viewport, viewport.zoom * factor, viewport_width, viewport_height, mouse, cfg)


def fit_to_view(
    content: Rectangle,
    viewport_width: float,
    viewport_height: float,
    padding: float | None = None,
    config: ViewportConfig | None = None,
) -> ViewportState | None:
    """Viewport centred on ``content`` and zoomed so it fits inside the padding.

    Returns None if the viewport has no size or the content has no extent.
    """
    cfg = config or _DEFAULT_CONFIG
    if not viewport_width or not viewport_height:
        return None
    if content.width <= 0 or content.height <= 0:
        return None

    pad = cfg.fit_padding if padding is None else padding
    scale_x = (viewport_width - pad * 2) / content.width
    scale_y = (viewport_height - pad * 2) / content.height
    zoom = min(scale_x, scale_y, cfg.max_zoom)
    if zoom <= 0:
        # Padding eats the whole viewport
        zoom = cfg.min_zoom

    center = content.center
    return ViewportState(x=center.x, y=center.y, zoom=zoom)
