import math

import pytest

from diomanim.geometry import (
    Arrow,
    Circle,
    Line,
    Polygon,
    Rectangle,
    Square,
    Vector3,
)

RED = "red"


def test_vector_add_sub_round_trip():
    a = Vector3(1.5, -2.0, 3.25)
    b = Vector3(-4.0, 0.5, 7.0)
    assert (a + b) - b == a


def test_vector_zero_is_additive_identity():
    a = Vector3(2.0, 3.0, 4.0)
    assert a + Vector3.zero() == a
    assert Vector3.zero() == Vector3(0.0, 0.0, 0.0)


def test_circle_defaults_and_move():
    circle = Circle(2.0, RED)
    assert circle.position == Vector3.zero()
    target = Vector3(5.0, 5.0, 0.0)
    circle.move_to(target)
    assert circle.position == target
    assert circle.radius == 2.0


def test_square_move():
    square = Square(3.0, RED)
    target = Vector3(-5.0, 0.0, 0.0)
    square.move_to(target)
    assert square.position == target


def test_rectangle_from_square():
    rect = Rectangle.from_square(4.0, RED)
    assert rect.width == 4.0
    assert rect.height == 4.0
    assert rect.position == Vector3.zero()


def test_line_from_points_default_thickness():
    line = Line.from_points(Vector3.zero(), Vector3(1.0, 0.0, 0.0), RED)
    assert line.thickness == 2.0


def test_line_length():
    line = Line.from_points(Vector3.zero(), Vector3(3.0, 4.0, 0.0), RED)
    assert line.length() == pytest.approx(5.0)


def test_line_direction_is_unit_and_parallel():
    start = Vector3(1.0, 2.0, 3.0)
    end = Vector3(4.0, -1.0, 7.0)
    line = Line(start, end, RED, 1.0)
    d = line.direction()
    assert math.hypot(d.x, d.y, d.z) == pytest.approx(1.0)
    delta = end - start
    assert d.x * line.length() == pytest.approx(delta.x)
    assert d.z * line.length() == pytest.approx(delta.z)


def test_line_perpendicular_is_orthogonal():
    line = Line(Vector3(0.0, 0.0, 0.0), Vector3(2.0, 5.0, 0.0), RED, 1.0)
    d = line.direction()
    p = line.perpendicular()
    assert d.x * p.x + d.y * p.y == pytest.approx(0.0)
    assert p.z == 0.0


def test_degenerate_line_direction_is_zero():
    point = Vector3(1.0, 1.0, 1.0)
    line = Line(point, point, RED, 1.0)
    assert line.length() == 0.0
    assert line.direction() == Vector3.zero()


def test_arrow_from_points_defaults():
    arrow = Arrow.from_points(Vector3.zero(), Vector3(1.0, 0.0, 0.0), RED)
    assert arrow.thickness == 2.0
    assert arrow.tip_size == 8.0


def test_arrow_shaft_is_shortened_by_tip():
    start = Vector3(0.0, 0.0, 0.0)
    end = Vector3(1.0, 1.0, 0.0)
    arrow = Arrow.from_points(start, end, RED)
    shaft = arrow.line()
    full = Line(start, end, RED, 2.0)
    assert shaft.start == start
    assert shaft.length() == pytest.approx(full.length() - arrow.tip_size / 100.0)
    assert shaft.direction().x == pytest.approx(full.direction().x)
    assert shaft.thickness == arrow.thickness


def test_arrow_shorter_than_tip_collapses():
    start = Vector3(0.0, 0.0, 0.0)
    arrow = Arrow(start, Vector3(0.01, 0.0, 0.0), RED, 2.0, 8.0)
    shaft = arrow.line()
    assert shaft.start == start
    assert shaft.end == start


@pytest.mark.parametrize("sides", [3, 4, 5, 6, 9])
def test_regular_polygon_vertices_on_circle(sides):
    radius = 2.5
    poly = Polygon.regular(sides, radius, RED)
    assert len(poly.vertices) == sides
    for v in poly.vertices:
        assert math.hypot(v.x, v.y) == pytest.approx(radius)
    assert poly.vertices[0].x == pytest.approx(0.0, abs=1e-12)
    assert poly.vertices[0].y == pytest.approx(-radius)
    assert poly.closed is True


def test_regular_polygon_center_is_origin():
    c = Polygon.regular(7, 3.0, RED).center()
    assert c.x == pytest.approx(0.0, abs=1e-9)
    assert c.y == pytest.approx(0.0, abs=1e-9)


def test_named_polygons():
    assert len(Polygon.triangle(1.0, RED).vertices) == 3
    assert len(Polygon.pentagon(1.0, RED).vertices) == 5
    assert len(Polygon.hexagon(1.0, RED).vertices) == 6


def test_regular_with_no_sides_is_empty():
    assert Polygon.regular(0, 1.0, RED).vertices == []


def test_star_alternates_radii():
    star = Polygon.star(5, 0.3, 0.15, RED)
    assert len(star.vertices) == 10
    for i, v in enumerate(star.vertices):
        expected = 0.3 if i % 2 == 0 else 0.15
        assert math.hypot(v.x, v.y) == pytest.approx(expected)


def test_triangulate_fan():
    poly = Polygon.hexagon(1.0, RED)
    indices = poly.triangulate()
    assert len(indices) == 3 * (len(poly.vertices) - 2)
    assert indices[:3] == [0, 1, 2]
    assert all(indices[i] == 0 for i in range(0, len(indices), 3))
    assert max(indices) == len(poly.vertices) - 1


def test_triangulate_too_few_vertices():
    poly = Polygon([Vector3.zero(), Vector3(1.0, 0.0, 0.0)], RED)
    assert poly.triangulate() == []


def test_center_of_empty_polygon():
    assert Polygon([], RED).center() == Vector3.zero()