"""Chainable helpers for adding and configuring scene nodes."""

from __future__ import annotations

from typing import Any, Iterable

from diomanim.geometry import Polygon, Vector3
from diomanim.scene import (
    ArrowRenderable,
    CircleRenderable,
    LineRenderable,
    PolygonRenderable,
    RectangleRenderable,
    Renderable,
    SceneError,
    SceneGraph,
    SceneNode,
    TextRenderable,
)


class NodeBuilder:
    """Configures one node of a scene; every setter returns the builder."""

    def __init__(self, scene: SceneGraph, node_id: int) -> None:
        self._scene = scene
        self._node_id = node_id

    @property
    def id(self) -> int:
        return self._node_id

    def _node(self) -> SceneNode | None:
        return self._scene.get_node(self._node_id)

    def at(self, x: float, y: float, z: float) -> NodeBuilder:
        """Set the local position."""
        return self.at_vec(Vector3(x, y, z))

    def at_vec(self, position: Vector3) -> NodeBuilder:
        node = self._node()
        if node is not None:
            node.local_transform.position = position
        return self

    def scale(self, scale: float) -> NodeBuilder:
        """Set a uniform scale."""
        return self.scale_xyz(scale, scale, scale)

    def scale_xyz(self, x: float, y: float, z: float) -> NodeBuilder:
        node = self._node()
        if node is not None:
            node.local_transform.scale = Vector3(x, y, z)
        return self

    def opacity(self, opacity: float) -> NodeBuilder:
        """Set the opacity, clamped to the range 0 to 1."""
        node = self._node()
        if node is not None:
            node.opacity = min(max(opacity, 0.0), 1.0)
        return self

    def visible(self, visible: bool) -> NodeBuilder:
        node = self._node()
        if node is not None:
            node.visible = visible
        return self

    def parent_to(self, parent_id: int) -> NodeBuilder:
        """Place the node under another; an impossible parenting is ignored."""
        try:
            self._scene.parent(self._node_id, parent_id)
        except SceneError:
            pass
        return self

    def build(self) -> int:
        """Finish and return the node id."""
        return self._node_id


class SceneBuilder:
    """Adds shapes to a scene graph, handing back a builder for each."""

    def __init__(self, scene: SceneGraph | None = None) -> None:
        self.scene = scene if scene is not None else SceneGraph()

    def _add(self, name: str, renderable: Renderable) -> NodeBuilder:
        node_id = self.scene.create_node(name)
        node = self.scene.get_node(node_id)
        assert node is not None
        node.renderable = renderable
        return NodeBuilder(self.scene, node_id)

    def add_circle(self, name: str, radius: float, color: Any) -> NodeBuilder:
        return self._add(name, CircleRenderable(radius, color))

    def add_rectangle(
        self, name: str, width: float, height: float, color: Any
    ) -> NodeBuilder:
        return self._add(name, RectangleRenderable(width, height, color))

    def add_square(self, name: str, side: float, color: Any) -> NodeBuilder:
        return self.add_rectangle(name, side, side, color)

    def add_line(
        self, name: str, start: Vector3, end: Vector3, color: Any, thickness: float
    ) -> NodeBuilder:
        return self._add(name, LineRenderable(start, end, color, thickness))

    def add_arrow(
        self, name: str, start: Vector3, end: Vector3, color: Any, thickness: float
    ) -> NodeBuilder:
        return self._add(name, ArrowRenderable(start, end, color, thickness))

    def add_polygon(
        self, name: str, vertices: Iterable[Vector3], color: Any
    ) -> NodeBuilder:
        return self._add(name, PolygonRenderable(tuple(vertices), color))

    def add_regular_polygon(
        self, name: str, sides: int, radius: float, color: Any
    ) -> NodeBuilder:
        """An n-sided regular polygon centred on the node."""
        return self.add_polygon(name, Polygon.regular(sides, radius, color).vertices, color)

    def add_triangle(self, name: str, size: float, color: Any) -> NodeBuilder:
        return self.add_regular_polygon(name, 3, size, color)

    def add_pentagon(self, name: str, size: float, color: Any) -> NodeBuilder:
        return self.add_regular_polygon(name, 5, size, color)

    def add_hexagon(self, name: str, size: float, color: Any) -> NodeBuilder:
        return self.add_regular_polygon(name, 6, size, color)

    def add_star(
        self,
        name: str,
        points: int,
        outer_radius: float,
        inner_radius: float,
        color: Any,
    ) -> NodeBuilder:
        star = Polygon.star(points, outer_radius, inner_radius, color)
        return self.add_polygon(name, star.vertices, color)

    def add_text(
        self, name: str, content: str, font_size: float, color: Any
    ) -> NodeBuilder:
        return self._add(name, TextRenderable(content, font_size, color))