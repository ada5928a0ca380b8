"""Drag-time snapping — per-axis correction that aligns a shape with its neighbours.

The dragged shape's snap points (corners, edge midpoints, centre of its
rotated box) are compared with those of every nearby visible top-level
reference. Each axis independently picks the smallest offset within the
threshold; every candidate sharing that smallest magnitude yields a
guideline, deduplicated by line position.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from spatialcore.engine.config import AlignmentConfig
from spatialcore.engine.geometry import (
    ElementGeometry,
    compute_rotated_bbox,
    element_to_geometry,
    extract_snap_points,
)
from spatialcore.models.alignment import (
    AlignmentResult,
    Guideline,
    GuidelineAxis,
    GuidelineType,
    SnapPoint,
    SnapPointType,
)
from spatialcore.models.element import SceneElement
from spatialcore.models.geometry import Point, Rectangle
from spatialcore.utils.geometry import bbox_gap

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = AlignmentConfig()

_TYPE_RANK = {GuidelineType.EDGE: 0, GuidelineType.VERTEX: 1, GuidelineType.CENTER: 2}


@dataclass(frozen=True)
class SnapCandidate:
    offset: float
    target_point: SnapPoint
    ref_point: SnapPoint


def snap_threshold(scale: float, config: AlignmentConfig | None = None) -> float:
    """World-space snap distance that looks like ``threshold_base`` pixels on screen."""
    cfg = config or _DEFAULT_CONFIG
    return cfg.threshold_base / max(scale, cfg.min_scale)


def compute_alignment(
    target: ElementGeometry | Rectangle,
    reference_elements: Sequence[SceneElement],
    scale: float = 1.0,
    config: AlignmentConfig | None = None,
) -> AlignmentResult:
    """Snap correction for ``target`` (its free, pre-snap position) against the references."""
    cfg = config or _DEFAULT_CONFIG
    geometry = target if isinstance(target, ElementGeometry) else ElementGeometry.from_rect(target)
    threshold = snap_threshold(scale, cfg)

    target_rbbox = compute_rotated_bbox(geometry)
    target_points = extract_snap_points(geometry, target_rbbox)
    target_aabb = target_rbbox.aabb

    # Group children never align on their own; their group stands for them.
    references = [el for el in reference_elements if el.is_top_level]
    max_distance = threshold * cfg.prefilter_threshold_factor + max(
        target_aabb[2] - target_aabb[0], target_aabb[3] - target_aabb[1]
    ) * cfg.prefilter_size_factor
    nearby = _filter_nearby(references, target_aabb, max_distance, cfg)

    ref_points: list[list[SnapPoint]] = []
    for element in nearby:
        if not element.visible:
            continue
        ref_geometry = element_to_geometry(element)
        ref_points.append(extract_snap_points(ref_geometry, compute_rotated_bbox(ref_geometry)))

    x_candidates: list[SnapCandidate] = []
    y_candidates: list[SnapCandidate] = []
    for tp in target_points:
        for points in ref_points:
            for rp in points:
                diff_x = rp.x - tp.x
                if abs(diff_x) <= threshold:
                    x_candidates.append(SnapCandidate(diff_x, tp, rp))
                diff_y = rp.y - tp.y
                if abs(diff_y) <= threshold:
                    y_candidates.append(SnapCandidate(diff_y, tp, rp))

    selected_x = _select_minimal(x_candidates)
    selected_y = _select_minimal(y_candidates)
    dx = selected_x[0].offset if selected_x else 0.0
    dy = selected_y[0].offset if selected_y else 0.0

    logger.debug(
        "Alignment: %d refs (%d nearby), %d/%d candidates, dx=%.3f dy=%.3f",
        len(references),
        len(nearby),
        len(x_candidates),
        len(y_candidates),
        dx,
        dy,
    )

    return AlignmentResult(
        dx=dx,
        dy=dy,
        vertical_lines=_build_guidelines(selected_x, GuidelineAxis.VERTICAL, dx, cfg),
        horizontal_lines=_build_guidelines(selected_y, GuidelineAxis.HORIZONTAL, dy, cfg),
    )


def check_alignment(
    target: ElementGeometry | Rectangle,
    elements: Sequence[SceneElement],
    exclude_ids: Sequence[str],
    zoom: float,
    snap_enabled: bool = True,
    config: AlignmentConfig | None = None,
) -> AlignmentResult:
    """Drag wrapper: skips the dragged ids, or returns no correction when snapping is off."""
    if not snap_enabled:
        return AlignmentResult()
    excluded = set(exclude_ids)
    others = [el for el in elements if el.id not in excluded]
    return compute_alignment(target, others, zoom, config)


def _filter_nearby(
    elements: Sequence[SceneElement],
    target_aabb: tuple[float, float, float, float],
    max_distance: float,
    config: AlignmentConfig,
) -> list[SceneElement]:
    """Drop references whose box is farther than ``max_distance`` on either axis."""
    nearby: list[SceneElement] = []
    for element in elements:
        if abs(element.rotation) > config.rotation_epsilon:
            element_aabb = compute_rotated_bbox(element_to_geometry(element)).aabb
        else:
            element_aabb = (
                element.x,
                element.y,
                element.x + element.width,
                element.y + element.height,
            )
        gap_x, gap_y = bbox_gap(target_aabb, element_aabb)
        if gap_x <= max_distance and gap_y <= max_distance:
            nearby.append(element)
    return nearby


def _select_minimal(candidates: list[SnapCandidate]) -> list[SnapCandidate]:
    """All candidates whose |offset| equals the smallest one, in candidate order."""
    if not candidates:
        return []
    best = min(abs(c.offset) for c in candidates)
    return [c for c in candidates if abs(c.offset) == best]


def _build_guidelines(
    candidates: list[SnapCandidate],
    axis: GuidelineAxis,
    offset: float,
    config: AlignmentConfig,
) -> list[Guideline]:
    """One guideline per rounded line position.

    Candidates landing on the same line collapse into the first one with the
    highest-ranked type, so a centre match is not hidden behind an edge match.
    """
    by_position: dict[float, Guideline] = {}

    for candidate in candidates:
        tp, rp = candidate.target_point, candidate.ref_point
        if axis == GuidelineAxis.VERTICAL:
            start = Point(x=tp.x + offset, y=tp.y)
            position = start.x
        else:
            start = Point(x=tp.x, y=tp.y + offset)
            position = start.y

        # + 0.0 folds -0.0 into 0.0
        key = round(position, config.guideline_precision) + 0.0
        kind = guideline_type(tp.type, rp.type)
        current = by_position.get(key)
        if current is not None and _TYPE_RANK[kind] <= _TYPE_RANK[current.type]:
            continue

        by_position[key] = Guideline(
            start=start,
            end=Point(x=rp.x, y=rp.y),
            axis=axis,
            type=kind,
        )
    return list(by_position.values())


def guideline_type(target_type: SnapPointType, ref_type: SnapPointType) -> GuidelineType:
    """Centre beats vertex beats edge."""
    if SnapPointType.CENTER in (target_type, ref_type):
        return GuidelineType.CENTER
    if SnapPointType.VERTEX in (target_type, ref_type):
        return GuidelineType.VERTEX
    return GuidelineType.EDGE
