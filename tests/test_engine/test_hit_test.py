"""Tests for point picking."""

import math

from spatialcore.engine.hit_test import find_hit, hit_test
from spatialcore.models.element import SceneElement
from spatialcore.models.geometry import Point
from tests.conftest import make_rect, make_shape


def test_empty_scene_misses():
    assert hit_test(Point(x=0, y=0), []) is None


def test_triangle_silhouette():
    tri = make_shape("tri", "triangle", 0, 0, 100, 100)
    assert hit_test(Point(x=50, y=90), [tri]) == "tri"
    # inside the box, outside the triangle
    assert hit_test(Point(x=5, y=5), [tri]) is None


def test_triangle_falls_through_to_element_beneath():
    below = make_rect("below", 0, 0, 100, 100, z_index=0)
    tri = make_shape("tri", "triangle", 0, 0, 100, 100, z_index=5)
    assert hit_test(Point(x=5, y=5), [below, tri]) == "below"
    assert hit_test(Point(x=50, y=90), [below, tri]) == "tri"


def test_circle_uses_radius():
    circle = make_shape("c", "circle", 0, 0, 100, 100)
    assert hit_test(Point(x=50, y=50), [circle]) == "c"
    assert hit_test(Point(x=100, y=50), [circle]) == "c"
    # bounding-box corner is outside the disc
    assert hit_test(Point(x=3, y=3), [circle]) is None


def test_zero_size_shapes_never_hit():
    circle = make_shape("c", "circle", 10, 10, 0, 0)
    tri = make_shape("t", "triangle", 10, 10, 0, 40)
    assert hit_test(Point(x=10, y=10), [circle]) is None
    assert hit_test(Point(x=10, y=20), [tri]) is None


def test_rect_edges_are_inclusive():
    rect = make_rect("r", 10, 10, 20, 20)
    assert hit_test(Point(x=10, y=10), [rect]) == "r"
    assert hit_test(Point(x=30, y=30), [rect]) == "r"
    assert hit_test(Point(x=30.01, y=30), [rect]) is None


def test_topmost_z_index_wins():
    low = make_rect("low", 0, 0, 100, 100, z_index=1)
    high = make_rect("high", 50, 50, 100, 100, z_index=7)
    assert hit_test(Point(x=75, y=75), [low, high]) == "high"
    assert hit_test(Point(x=25, y=25), [low, high]) == "low"


def test_equal_z_index_keeps_input_order():
    first = make_rect("first", 0, 0, 10, 10, z_index=3)
    second = make_rect("second", 0, 0, 10, 10, z_index=3)
    assert hit_test(Point(x=5, y=5), [first, second]) == "first"
    assert hit_test(Point(x=5, y=5), [second, first]) == "second"


def test_hidden_elements_are_skipped():
    hidden = make_rect("hidden", 0, 0, 100, 100, z_index=9, visible=False)
    shown = make_rect("shown", 0, 0, 100, 100, z_index=1)
    assert hit_test(Point(x=50, y=50), [hidden, shown]) == "shown"
    assert hit_test(Point(x=50, y=50), [hidden]) is None


def test_group_children_are_not_hit_directly(grouped_scene):
    # inside child "a" only: the group is returned
    assert hit_test(Point(x=40, y=50), grouped_scene) == "g1"
    # in the gap between the children, still inside the group box
    assert hit_test(Point(x=100, y=90), grouped_scene) == "g1"
    assert hit_test(Point(x=350, y=50), grouped_scene) == "c"
    assert hit_test(Point(x=250, y=50), grouped_scene) is None


def test_orphaned_child_is_never_top_level():
    child = make_rect("child", 0, 0, 10, 10, parent_group="missing")
    assert hit_test(Point(x=5, y=5), [child]) is None


def test_rotated_rect_uses_unrotated_box():
    rect = make_rect("r", 0, 0, 100, 20, rotation=math.pi / 2)
    # inside the unrotated box, outside the rotated silhouette
    assert hit_test(Point(x=5, y=10), [rect]) == "r"
    # inside the rotated silhouette, outside the unrotated box
    assert hit_test(Point(x=50, y=-30), [rect]) is None


def test_text_and_image_use_box():
    text = SceneElement(id="t", type="text", x=0, y=0, width=50, height=10)
    image = SceneElement(id="i", type="image", x=100, y=0, width=50, height=50)
    assert hit_test(Point(x=49, y=9), [text, image]) == "t"
    assert hit_test(Point(x=149, y=49), [text, image]) == "i"


def test_find_hit_returns_element():
    rect = make_rect("r", 0, 0, 10, 10)
    assert find_hit(Point(x=1, y=1), [rect]) is rect


def test_input_is_not_reordered():
    elements = [make_rect("a", 0, 0, 1, 1, z_index=0), make_rect("b", 0, 0, 1, 1, z_index=5)]
    hit_test(Point(x=0.5, y=0.5), elements)
    assert [el.id for el in elements] == ["a", "b"]
