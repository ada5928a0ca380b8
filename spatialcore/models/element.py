"""Read-only element records as handed over by the scene store."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


class ElementType(str, enum.Enum):
    TEXT = "text"
    SHAPE = "shape"
    IMAGE = "image"
    GROUP = "group"


class ShapeType(str, enum.Enum):
    RECTANGLE = "rectangle"
    ROUNDED_RECT = "roundedRect"
    CIRCLE = "circle"
    TRIANGLE = "triangle"


class SceneElement(BaseModel):
    """Spatial view of one scene element.

    Field aliases follow the store's camelCase keys, so raw store dicts can be
    validated directly: ``SceneElement.model_validate(store_dict)``.
    Relations (``parent_group``, ``children``) are element ids, never objects.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    type: ElementType
    x: float = 0.0
    y: float = 0.0
    width: float = Field(default=0.0, ge=0)
    height: float = Field(default=0.0, ge=0)
    rotation: float = 0.0  # radians, about the element's own centre
    visible: bool = True
    z_index: int = Field(default=0, alias="zIndex")
    parent_group: str | None = Field(default=None, alias="parentGroup")
    children: list[str] = Field(default_factory=list)
    shape_type: ShapeType | None = Field(default=None, alias="shapeType")

    @property
    def is_group(self) -> bool:
        return self.type == ElementType.GROUP

    @property
    def is_top_level(self) -> bool:
        return not self.parent_group
