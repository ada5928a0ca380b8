"""SceneIndex — read-only id → element view over the caller's element list.

Groups and children refer to each other by id only; nothing here builds an
object graph. The index never mutates the elements it is given.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from spatialcore.engine.geometry import ElementGeometry
from spatialcore.models.element import SceneElement
from spatialcore.models.geometry import Rectangle

logger = logging.getLogger(__name__)


class SceneIndex:
    """Id lookup plus the group queries used around hit-testing and dragging."""

    def __init__(self, elements: Iterable[SceneElement] = ()) -> None:
        self._elements: dict[str, SceneElement] = {}
        for element in elements:
            self.add(element)

    def add(self, element: SceneElement) -> None:
        if element.id in self._elements:
            raise ValueError(f"Duplicate element ID: {element.id}")
        self._elements[element.id] = element

    def get(self, element_id: str) -> SceneElement:
        return self._elements[element_id]

    def find(self, element_id: str) -> SceneElement | None:
        return self._elements.get(element_id)

    def __contains__(self, element_id: object) -> bool:
        return element_id in self._elements

    def __len__(self) -> int:
        return len(self._elements)

    def all(self) -> list[SceneElement]:
        return list(self._elements.values())

    def top_level(self) -> list[SceneElement]:
        return [el for el in self._elements.values() if el.is_top_level]

    def children_of(self, group_id: str) -> list[SceneElement]:
        """Resolved direct children of a group, in the group's order. Unknown ids are skipped."""
        group = self.find(group_id)
        if group is None or not group.is_group:
            return []
        return [self._elements[cid] for cid in group.children if cid in self._elements]

    def expand_groups(self, ids: Sequence[str]) -> list[str]:
        """Ids with each group followed by its children. Order kept, duplicates dropped."""
        expanded: list[str] = []
        seen: set[str] = set()

        def _push(element_id: str) -> None:
            if element_id not in seen:
                seen.add(element_id)
                expanded.append(element_id)

        for element_id in ids:
            element = self.find(element_id)
            if element is None:
                continue
            _push(element_id)
            if element.is_group:
                for child_id in element.children:
                    if child_id in self._elements:
                        _push(child_id)
        return expanded

    def bounding_box(self, ids: Sequence[str]) -> Rectangle | None:
        """Union of the unrotated boxes of the resolvable ids."""
        elements = [self._elements[i] for i in ids if i in self._elements]
        if not elements:
            return None
        min_x = min(el.x for el in elements)
        min_y = min(el.y for el in elements)
        max_x = max(el.x + el.width for el in elements)
        max_y = max(el.y + el.height for el in elements)
        return Rectangle(x=min_x, y=min_y, width=max_x - min_x, height=max_y - min_y)

    def drag_geometry(self, ids: Sequence[str]) -> ElementGeometry | None:
        """Geometry to align while dragging ``ids``.

        One element keeps its own rotation; several collapse into their
        combined box with rotation 0.
        """
        resolved = [i for i in ids if i in self._elements]
        if not resolved:
            return None
        if len(resolved) == 1:
            el = self._elements[resolved[0]]
            return ElementGeometry(x=el.x, y=el.y, width=el.width, height=el.height, rotation=el.rotation)
        box = self.bounding_box(resolved)
        logger.debug("Drag geometry for %d elements: %s", len(resolved), box)
        return ElementGeometry.from_rect(box)
