"""Shared test fixtures."""

from __future__ import annotations

import pytest

from spatialcore.models.element import SceneElement
from spatialcore.models.geometry import ViewportState


def make_rect(element_id: str, x: float, y: float, w: float, h: float, **extra) -> SceneElement:
    return SceneElement(
        id=element_id,
        type="shape",
        shape_type="rectangle",
        x=x,
        y=y,
        width=w,
        height=h,
        **extra,
    )


def make_shape(element_id: str, shape_type: str, x: float, y: float, w: float, h: float, **extra) -> SceneElement:
    return SceneElement(
        id=element_id,
        type="shape",
        shape_type=shape_type,
        x=x,
        y=y,
        width=w,
        height=h,
        **extra,
    )


# Store-shaped records (camelCase keys) as the scene store hands them over.
GROUPED_SCENE = [
    {"id": "g1", "type": "group", "x": 0, "y": 0, "width": 200, "height": 100,
     "rotation": 0, "visible": True, "zIndex": 2, "children": ["a", "b"]},
    {"id": "a", "type": "shape", "shapeType": "rectangle", "x": 0, "y": 0,
     "width": 80, "height": 100, "rotation": 0, "visible": True, "zIndex": 0, "parentGroup": "g1"},
    {"id": "b", "type": "text", "x": 120, "y": 0, "width": 80, "height": 40,
     "rotation": 0, "visible": True, "zIndex": 1, "parentGroup": "g1"},
    {"id": "c", "type": "image", "x": 300, "y": 0, "width": 100, "height": 100,
     "rotation": 0, "visible": True, "zIndex": 3},
]


@pytest.fixture
def grouped_scene() -> list[SceneElement]:
    return [SceneElement.model_validate(record) for record in GROUPED_SCENE]


@pytest.fixture
def viewport() -> ViewportState:
    return ViewportState(x=120.0, y=-40.0, zoom=1.5)
