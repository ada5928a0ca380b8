"""Primitive spatial records shared by the viewport and engine layers."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Point(BaseModel):
    """A location in screen or world space. The space is implied by context."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class Rectangle(BaseModel):
    """Axis-aligned rectangle, (x, y) is the top-left corner."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    width: float = Field(ge=0)
    height: float = Field(ge=0)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point:
        return Point(x=self.x + self.width / 2, y=self.y + self.height / 2)


class ViewportState(BaseModel):
    """Camera: the world point at the screen centre plus a zoom factor."""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    zoom: float = 1.0

    @field_validator("zoom")
    @classmethod
    def _finite_zoom(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError(f"zoom must be finite, got {value}")
        return value


class VisibleBounds(Rectangle):
    """World-space rectangle currently visible through the viewport."""

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @classmethod
    def from_extents(cls, left: float, top: float, right: float, bottom: float) -> VisibleBounds:
        return cls(
            x=left,
            y=top,
            width=right - left,
            height=bottom - top,
        )
