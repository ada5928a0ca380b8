"""Viewport math: coordinate mapping and camera navigation."""

from spatialcore.viewport.navigation import clamp_zoom, fit_to_view, pan, wheel_zoom, zoom_by, zoom_to
from spatialcore.viewport.transform import (
    calculate_zoom_position,
    clamp_to_bounds,
    get_visible_bounds,
    is_point_visible,
    is_rect_visible,
    screen_delta_to_world_delta,
    screen_points_to_world,
    screen_to_world,
    world_points_to_screen,
    world_to_screen,
)

__all__ = [
    "calculate_zoom_position",
    "clamp_to_bounds",
    "clamp_zoom",
    "fit_to_view",
    "get_visible_bounds",
    "is_point_visible",
    "is_rect_visible",
    "pan",
    "screen_delta_to_world_delta",
    "screen_points_to_world",
    "screen_to_world",
    "wheel_zoom",
    "world_points_to_screen",
    "world_to_screen",
    "zoom_by",
    "zoom_to",
]
