"""Alignment output model: snap points, guidelines and the snap correction."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field

from spatialcore.models.geometry import Point


class SnapPointType(str, enum.Enum):
    EDGE_LEFT = "edge-left"
    EDGE_RIGHT = "edge-right"
    EDGE_TOP = "edge-top"
    EDGE_BOTTOM = "edge-bottom"
    CENTER = "center"
    VERTEX = "vertex"  # shape-specific points, e.g. triangle apex


class GuidelineAxis(str, enum.Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class GuidelineType(str, enum.Enum):
    CENTER = "center"
    EDGE = "edge"
    VERTEX = "vertex"


class SnapPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    type: SnapPointType


class Guideline(BaseModel):
    """World-space segment from the snapped target point to its reference point."""

    model_config = ConfigDict(frozen=True)

    start: Point
    end: Point
    axis: GuidelineAxis
    type: GuidelineType


class AlignmentResult(BaseModel):
    """Correction to add to the dragged shape's position, plus guidelines to draw."""

    dx: float = 0.0
    dy: float = 0.0
    vertical_lines: list[Guideline] = Field(default_factory=list)
    horizontal_lines: list[Guideline] = Field(default_factory=list)

    @property
    def snapped(self) -> bool:
        return bool(self.vertical_lines or self.horizontal_lines)
