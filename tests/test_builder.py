import math

import pytest

from diomanim.builder import NodeBuilder, SceneBuilder
from diomanim.geometry import Polygon, Vector3
from diomanim.scene import (
    ArrowRenderable,
    CircleRenderable,
    LineRenderable,
    PolygonRenderable,
    RectangleRenderable,
    SceneGraph,
    TextRenderable,
)

RED = (1.0, 0.0, 0.0, 1.0)
BLUE = (0.0, 0.0, 1.0, 1.0)


@pytest.fixture
def builder():
    return SceneBuilder(SceneGraph())


def test_add_circle_sets_renderable(builder):
    node_id = builder.add_circle("c", 1.0, RED).build()
    node = builder.scene.get_node(node_id)
    assert node.name == "c"
    assert node.renderable == CircleRenderable(1.0, RED)


def test_id_matches_build(builder):
    b = builder.add_circle("c", 1.0, RED)
    assert isinstance(b, NodeBuilder)
    assert b.id == b.build()


def test_at_and_scale_chain(builder):
    node_id = builder.add_circle("c", 1.0, RED).at(2.0, 1.0, 0.0).scale(2.0).build()
    node = builder.scene.get_node(node_id)
    assert node.local_transform.position == Vector3(2.0, 1.0, 0.0)
    assert node.local_transform.scale == Vector3(2.0, 2.0, 2.0)


def test_at_vec_and_scale_xyz(builder):
    node_id = (
        builder.add_rectangle("r", 2.0, 1.0, BLUE)
        .at_vec(Vector3(3.0, 0.0, 0.0))
        .scale_xyz(1.0, 2.0, 3.0)
        .build()
    )
    node = builder.scene.get_node(node_id)
    assert node.local_transform.position == Vector3(3.0, 0.0, 0.0)
    assert node.local_transform.scale == Vector3(1.0, 2.0, 3.0)


def test_world_transform_follows_builder_position(builder):
    node_id = builder.add_circle("c", 1.0, RED).at(2.0, 1.0, 0.0).build()
    builder.scene.update_transforms()
    assert builder.scene.get_node(node_id).world_transform.position == Vector3(2.0, 1.0, 0.0)


@pytest.mark.parametrize("given, expected", [(1.5, 1.0), (-0.2, 0.0), (0.5, 0.5)])
def test_opacity_is_clamped(builder, given, expected):
    node_id = builder.add_circle("c", 1.0, RED).opacity(given).build()
    assert builder.scene.get_node(node_id).opacity == expected


def test_invisible_node_not_rendered(builder):
    builder.add_circle("shown", 1.0, RED)
    builder.add_circle("hidden", 1.0, BLUE).visible(False)
    renderables = builder.scene.visible_renderables()
    assert [r for _, r, _ in renderables] == [CircleRenderable(1.0, RED)]


def test_parent_to(builder):
    parent_id = builder.add_circle("p", 1.0, RED).build()
    child_id = builder.add_circle("c", 0.5, BLUE).parent_to(parent_id).build()
    assert builder.scene.get_node(child_id).parent == parent_id
    assert child_id in builder.scene.get_node(parent_id).children
    assert child_id not in builder.scene.root_nodes


def test_parent_to_missing_node_is_ignored(builder):
    child_id = builder.add_circle("c", 0.5, BLUE).parent_to(999).build()
    assert builder.scene.get_node(child_id).parent is None
    assert child_id in builder.scene.root_nodes


def test_add_square_is_rectangle(builder):
    node_id = builder.add_square("s", 3.0, BLUE).build()
    assert builder.scene.get_node(node_id).renderable == RectangleRenderable(3.0, 3.0, BLUE)


def test_add_line_and_arrow(builder):
    start, end = Vector3(0.0, 0.0, 0.0), Vector3(1.0, 1.0, 0.0)
    line_id = builder.add_line("l", start, end, RED, 2.0).build()
    arrow_id = builder.add_arrow("a", start, end, RED, 2.0).build()
    assert builder.scene.get_node(line_id).renderable == LineRenderable(start, end, RED, 2.0)
    assert builder.scene.get_node(arrow_id).renderable == ArrowRenderable(start, end, RED, 2.0)


def test_add_regular_polygon_vertices(builder):
    node_id = builder.add_regular_polygon("p", 5, 2.0, RED).build()
    renderable = builder.scene.get_node(node_id).renderable
    assert isinstance(renderable, PolygonRenderable)
    assert renderable.vertices == tuple(Polygon.regular(5, 2.0, RED).vertices)
    for v in renderable.vertices:
        assert math.isclose(math.hypot(v.x, v.y), 2.0)


@pytest.mark.parametrize("method, sides", [("add_triangle", 3), ("add_pentagon", 5), ("add_hexagon", 6)])
def test_named_polygons(builder, method, sides):
    node_id = getattr(builder, method)("p", 1.0, RED).build()
    assert len(builder.scene.get_node(node_id).renderable.vertices) == sides


def test_add_star_alternates_radii(builder):
    node_id = builder.add_star("s", 5, 0.3, 0.15, RED).build()
    vertices = builder.scene.get_node(node_id).renderable.vertices
    assert len(vertices) == 10
    for i, v in enumerate(vertices):
        expected = 0.3 if i % 2 == 0 else 0.15
        assert math.isclose(math.hypot(v.x, v.y), expected, rel_tol=1e-9)


def test_add_text(builder):
    node_id = builder.add_text("t", "Hello", 48.0, RED).build()
    assert builder.scene.get_node(node_id).renderable == TextRenderable("Hello", 48.0, RED)


def test_ids_are_unique_and_sequential(builder):
    ids = [builder.add_circle(f"c{i}", 1.0, RED).build() for i in range(3)]
    assert len(set(ids)) == 3
    assert ids == sorted(ids)
    assert len(builder.scene) == 3


def test_default_scene_is_created():
    b = SceneBuilder()
    node_id = b.add_circle("c", 1.0, RED).build()
    assert b.scene.get_node(node_id).renderable == CircleRenderable(1.0, RED)