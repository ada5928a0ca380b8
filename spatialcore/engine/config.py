"""Engine configuration — snapping and viewport constants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from spatialcore.config import Settings


@dataclass(frozen=True)
class AlignmentConfig:
    """Controls snap tolerance and the reference prefilter."""

    # Snap zone in screen pixels; divided by zoom to get world units
    threshold_base: float = 8.0
    # Zoom floor for the threshold so it cannot explode when zoomed far out
    min_scale: float = 0.1

    # Prefilter radius = threshold * factor + max(target w, h) * size factor
    prefilter_threshold_factor: float = 20.0
    prefilter_size_factor: float = 0.75

    # Below this (radians) a reference is treated as unrotated
    rotation_epsilon: float = 0.001

    # Decimal places of the guideline dedup key
    guideline_precision: int = 2

    @classmethod
    def from_settings(cls, settings: Settings) -> AlignmentConfig:
        return cls(
            threshold_base=settings.snap_threshold_base,
            min_scale=settings.snap_min_scale,
        )


@dataclass(frozen=True)
class ViewportConfig:
    """Zoom range and navigation factors."""

    min_zoom: float = 0.1
    max_zoom: float = 4.0
    default_zoom: float = 1.0
    zoom_step: float = 0.1

    # Wheel zoom multipliers
    zoom_in_factor: float = 1.2
    zoom_out_factor: float = 0.9

    # Fit-to-view margin in screen pixels
    fit_padding: float = 50.0

    # Stand-in for a non-positive zoom
    zoom_epsilon: float = 1e-6

    @classmethod
    def from_settings(cls, settings: Settings) -> ViewportConfig:
        return cls(
            min_zoom=settings.zoom_min,
            max_zoom=settings.zoom_max,
            default_zoom=settings.zoom_default,
        )
