"""Basic vectors and the geometric shapes that can be placed in a scene."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Vector3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> Vector3:
        return cls(0.0, 0.0, 0.0)

    def __add__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)


@dataclass
class Circle:
    """A filled circle."""

    radius: float
    color: Any
    position: Vector3 = field(default_factory=Vector3.zero)

    def move_to(self, position: Vector3) -> None:
        self.position = position


@dataclass
class Square:
    """A filled square."""

    side_length: float
    color: Any
    position: Vector3 = field(default_factory=Vector3.zero)

    def move_to(self, position: Vector3) -> None:
        self.position = position


@dataclass
class Rectangle:
    """A filled axis-aligned rectangle."""

    width: float
    height: float
    color: Any
    position: Vector3 = field(default_factory=Vector3.zero)

    @classmethod
    def from_square(cls, side_length: float, color: Any) -> Rectangle:
        return cls(side_length, side_length, color)

    def move_to(self, position: Vector3) -> None:
        self.position = position


@dataclass
class Line:
    """A straight segment between two points."""

    start: Vector3
    end: Vector3
    color: Any
    thickness: float

    @classmethod
    def from_points(cls, start: Vector3, end: Vector3, color: Any) -> Line:
        return cls(start, end, color, 2.0)

    def length(self) -> float:
        delta = self.end - self.start
        return math.hypot(delta.x, delta.y, delta.z)

    def direction(self) -> Vector3:
        """Unit vector from start to end, or the zero vector for a degenerate line."""
        length = self.length()
        if length > 0.0:
            delta = self.end - self.start
            return Vector3(delta.x / length, delta.y / length, delta.z / length)
        return Vector3.zero()

    def perpendicular(self) -> Vector3:
        """The direction rotated a quarter turn in the XY plane."""
        direction = self.direction()
        return Vector3(-direction.y, direction.x, 0.0)


@dataclass
class Arrow:
    """A line with a triangular tip at its end."""

    start: Vector3
    end: Vector3
    color: Any
    thickness: float
    tip_size: float

    @classmethod
    def from_points(cls, start: Vector3, end: Vector3, color: Any) -> Arrow:
        return cls(start, end, color, 2.0, 8.0)

    def line(self) -> Line:
        """The shaft of the arrow, stopping where the tip begins."""
        delta = self.end - self.start
        length = math.hypot(delta.x, delta.y)
        tip_length = self.tip_size / 100.0
        if length > 0.0 and length > tip_length:
            scale = (length - tip_length) / length
            line_end = Vector3(
                self.start.x + delta.x * scale,
                self.start.y + delta.y * scale,
                self.start.z + delta.z * scale,
            )
            return Line(self.start, line_end, self.color, self.thickness)
        return Line(self.start, self.start, self.color, self.thickness)


def _ring(count: int, step: float, radius_at) -> list[Vector3]:
    vertices = []
    for i in range(count):
        angle = i * step - math.pi / 2.0
        radius = radius_at(i)
        vertices.append(Vector3(radius * math.cos(angle), radius * math.sin(angle), 0.0))
    return vertices


@dataclass
class Polygon:
    """A polygon given by its vertices."""

    vertices: list[Vector3]
    color: Any
    closed: bool = True

    @classmethod
    def regular(cls, sides: int, radius: float, color: Any) -> Polygon:
        """A regular polygon with its first vertex straight below the centre."""
        if sides <= 0:
            return cls([], color)
        return cls(_ring(sides, 2.0 * math.pi / sides, lambda _: radius), color)

    @classmethod
    def triangle(cls, size: float, color: Any) -> Polygon:
        return cls.regular(3, size, color)

    @classmethod
    def pentagon(cls, size: float, color: Any) -> Polygon:
        return cls.regular(5, size, color)

    @classmethod
    def hexagon(cls, size: float, color: Any) -> Polygon:
        return cls.regular(6, size, color)

    @classmethod
    def star(
        cls, points: int, outer_radius: float, inner_radius: float, color: Any
    ) -> Polygon:
        """A star whose vertices alternate between the outer and inner radius."""
        if points <= 0:
            return cls([], color)
        vertices = _ring(
            points * 2,
            math.pi / points,
            lambda i: outer_radius if i % 2 == 0 else inner_radius,
        )
        return cls(vertices, color)

    def triangulate(self) -> list[int]:
        """Fan triangulation from the first vertex, as a flat index list."""
        count = len(self.vertices)
        if count < 3:
            return []
        return [index for i in range(1, count - 1) for index in (0, i, i + 1)]

    def center(self) -> Vector3:
        """The mean of the vertices."""
        if not self.vertices:
            return Vector3.zero()
        total = Vector3.zero()
        for vertex in self.vertices:
            total = total + vertex
        count = len(self.vertices)
        return Vector3(total.x / count, total.y / count, total.z / count)