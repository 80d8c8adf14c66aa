"""A hierarchical scene graph of transformed, renderable nodes."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterator

from diomanim.geometry import Vector3

Matrix4 = tuple[
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
]


class SceneError(Exception):
    """Raised when a scene graph operation cannot be carried out."""


def _unit_scale() -> Vector3:
    return Vector3(1.0, 1.0, 1.0)


@dataclass
class Transform:
    """Position, rotation (a quaternion as x, y, z, w) and scale."""

    position: Vector3 = field(default_factory=Vector3.zero)
    rotation: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)
    scale: Vector3 = field(default_factory=_unit_scale)

    def copy(self) -> Transform:
        return replace(self)


class Renderable:
    """Base class of the visual shapes that can be attached to a node."""


@dataclass(frozen=True)
class CircleRenderable(Renderable):
    radius: float
    color: Any


@dataclass(frozen=True)
class RectangleRenderable(Renderable):
    width: float
    height: float
    color: Any


@dataclass(frozen=True)
class LineRenderable(Renderable):
    start: Vector3
    end: Vector3
    color: Any
    thickness: float


@dataclass(frozen=True)
class ArrowRenderable(Renderable):
    start: Vector3
    end: Vector3
    color: Any
    thickness: float


@dataclass(frozen=True)
class PolygonRenderable(Renderable):
    vertices: tuple[Vector3, ...]
    color: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", tuple(self.vertices))


@dataclass(frozen=True)
class TextRenderable(Renderable):
    content: str
    font_size: float
    color: Any


@dataclass(frozen=True)
class MathRenderable(Renderable):
    latex: str
    font_size: float
    color: Any


@dataclass
class SceneNode:
    """An object in the scene hierarchy."""

    id: int
    name: str
    local_transform: Transform = field(default_factory=Transform)
    world_transform: Transform = field(default_factory=Transform)
    parent: int | None = None
    children: list[int] = field(default_factory=list)
    visible: bool = True
    opacity: float = 1.0
    renderable: Renderable | None = None

    def compute_model_matrix(self) -> Matrix4:
        """Column-major 4x4 matrix of the world scale and translation."""
        pos = self.world_transform.position
        scale = self.world_transform.scale
        return (
            (scale.x, 0.0, 0.0, 0.0),
            (0.0, scale.y, 0.0, 0.0),
            (0.0, 0.0, scale.z, 0.0),
            (pos.x, pos.y, pos.z, 1.0),
        )


class SceneGraph:
    """Owns the nodes of a scene and their parent/child relations."""

    def __init__(self) -> None:
        self._nodes: dict[int, SceneNode] = {}
        self._roots: list[int] = []
        self._next_id = 1  # 0 is reserved

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __iter__(self) -> Iterator[SceneNode]:
        return iter(self._nodes.values())

    @property
    def root_nodes(self) -> tuple[int, ...]:
        return tuple(self._roots)

    def create_node(self, name: str, transform: Transform | None = None) -> int:
        """Add a new root node and return its id."""
        node_id = self._next_id
        self._next_id += 1
        local = transform.copy() if transform is not None else Transform()
        self._nodes[node_id] = SceneNode(node_id, name, local_transform=local)
        self._roots.append(node_id)
        return node_id

    def parent(self, child_id: int, parent_id: int) -> None:
        """Place one node under another."""
        if child_id not in self._nodes:
            raise SceneError(f"Child node {child_id} does not exist")
        if parent_id not in self._nodes:
            raise SceneError(f"Parent node {parent_id} does not exist")
        if self._would_create_cycle(child_id, parent_id):
            raise SceneError("Parenting would create a cycle")

        self._roots = [node_id for node_id in self._roots if node_id != child_id]

        child = self._nodes[child_id]
        old_parent_id = child.parent
        if old_parent_id is not None and old_parent_id != parent_id:
            old_parent = self._nodes[old_parent_id]
            old_parent.children = [c for c in old_parent.children if c != child_id]

        child.parent = parent_id
        new_parent = self._nodes[parent_id]
        if child_id not in new_parent.children:
            new_parent.children.append(child_id)

    def _would_create_cycle(self, child_id: int, parent_id: int) -> bool:
        current: int | None = parent_id
        while current is not None and current in self._nodes:
            if current == child_id:
                return True
            current = self._nodes[current].parent
        return False

    def get_node(self, node_id: int) -> SceneNode | None:
        """The node with this id, or None."""
        return self._nodes.get(node_id)

    def update_transforms(self) -> None:
        """Recompute every node's world transform from the hierarchy."""
        for node in self._nodes.values():
            node.world_transform = node.local_transform.copy()
        for root_id in list(self._roots):
            self._propagate(root_id, Transform())

    def _propagate(self, node_id: int, parent_world: Transform) -> None:
        node = self._nodes.get(node_id)
        if node is None:
            return
        local = node.local_transform
        node.world_transform = Transform(
            position=parent_world.position + local.position,
            rotation=local.rotation,
            scale=Vector3(
                parent_world.scale.x * local.scale.x,
                parent_world.scale.y * local.scale.y,
                parent_world.scale.z * local.scale.z,
            ),
        )
        for child_id in list(node.children):
            self._propagate(child_id, node.world_transform)

    def visible_renderables(self) -> list[tuple[Matrix4, Renderable, float]]:
        """Matrix, renderable and opacity of every visible node, depth first."""
        found: list[tuple[Matrix4, Renderable, float]] = []
        for root_id in self._roots:
            self._gather(root_id, found)
        return found

    def _gather(self, node_id: int, found: list[tuple[Matrix4, Renderable, float]]) -> None:
        node = self._nodes.get(node_id)
        if node is None or not node.visible or node.opacity <= 0.0:
            return
        if node.renderable is not None:
            found.append((node.compute_model_matrix(), node.renderable, node.opacity))
        for child_id in node.children:
            self._gather(child_id, found)

    def remove_node(self, node_id: int) -> SceneNode | None:
        """Remove a node and its descendants, returning the removed node."""
        node = self._nodes.pop(node_id, None)
        if node is None:
            return None
        self._roots = [root for root in self._roots if root != node_id]
        if node.parent is not None:
            parent = self._nodes.get(node.parent)
            if parent is not None:
                parent.children = [c for c in parent.children if c != node_id]
        for child_id in list(node.children):
            self.remove_node(child_id)
        return node