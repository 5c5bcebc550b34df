import pytest

from svgraster.color import Color
from svgraster.elements import (
    Circle,
    Ellipse,
    Group,
    Line,
    Polygon,
    Polyline,
    Rect,
    SVGElement,
)
from svgraster.png_image import PNGImage
from svgraster.point import Point

RED = Color(255, 0, 0)
BLUE = Color(0, 0, 255)
WHITE = Color(255, 255, 255)


def _pixels(img):
    return [img[x, y] for y in range(img.height) for x in range(img.width)]


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        SVGElement()


def test_circle_has_equal_radii():
    c = Circle(RED, Point(5, 5), 3)
    assert c.radius == Point(3, 3)
    assert c.center == Point(5, 5)
    assert c.fill == RED


def test_ellipse_translate_moves_center():
    e = Ellipse(RED, Point(5, 6), Point(2, 3))
    e.translate(3, -2)
    assert e.center == Point(8, 4)
    assert e.radius == Point(2, 3)


def test_ellipse_rotate_and_scale_keep_center():
    e = Ellipse(RED, Point(5, 6), Point(2, 3))
    e.rotate(90)
    e.scale(4)
    assert e.center == Point(5, 6)
    assert e.radius == Point(2, 3)


def test_ellipse_draw_matches_image_primitive():
    img = PNGImage(20, 20)
    Ellipse(RED, Point(10, 10), Point(5, 3)).draw(img)
    ref = PNGImage(20, 20)
    ref.draw_ellipse(Point(10, 10), Point(5, 3), RED)
    assert _pixels(img) == _pixels(ref)
    assert img[10, 10] == RED
    assert img[0, 0] == WHITE


def test_circle_draw_equals_ellipse_draw():
    a = PNGImage(15, 15)
    b = PNGImage(15, 15)
    Circle(BLUE, Point(7, 7), 4).draw(a)
    Ellipse(BLUE, Point(7, 7), Point(4, 4)).draw(b)
    assert _pixels(a) == _pixels(b)


def test_polyline_draws_each_segment():
    points = [Point(1, 1), Point(8, 1), Point(8, 8)]
    img = PNGImage(10, 10)
    Polyline(RED, points).draw(img)
    ref = PNGImage(10, 10)
    ref.draw_line(points[0], points[1], RED)
    ref.draw_line(points[1], points[2], RED)
    assert _pixels(img) == _pixels(ref)
    assert img[1, 8] == WHITE


def test_polyline_copies_points():
    points = [Point(0, 0), Point(1, 1)]
    p = Polyline(RED, points)
    p.translate(1, 1)
    assert points == [Point(0, 0), Point(1, 1)]


def test_polyline_translate_round_trip():
    p = Polyline(RED, [Point(1, 2), Point(3, 4)])
    p.translate(5, -7)
    p.translate(-5, 7)
    assert p.points == [Point(1, 2), Point(3, 4)]


def test_polyline_full_rotation_is_identity():
    p = Polyline(RED, [Point(1, 2), Point(-3, 4)])
    p.rotate(360)
    assert p.points == [Point(1, 2), Point(-3, 4)]


def test_polyline_rotate_matches_point_rotation():
    pts = [Point(3, 1), Point(2, 7)]
    p = Polyline(RED, pts)
    p.rotate(90)
    assert p.points == [q.rotate(Point(0, 0), 90) for q in pts]


def test_polyline_scale_about_origin():
    p = Polyline(RED, [Point(1, 2), Point(3, 4)])
    p.scale(2)
    assert p.points == [Point(1, 2).scale(Point(0, 0), 2), Point(3, 4).scale(Point(0, 0), 2)]
    p.scale(1)
    assert p.points == [Point(1, 2).scale(Point(0, 0), 2), Point(3, 4).scale(Point(0, 0), 2)]


def test_line_holds_two_points():
    line = Line(RED, Point(1, 2), Point(3, 4))
    assert line.points == [Point(1, 2), Point(3, 4)]
    assert line.stroke == RED


def test_line_draw_equals_draw_line():
    a = PNGImage(10, 10)
    b = PNGImage(10, 10)
    Line(BLUE, Point(0, 0), Point(9, 5)).draw(a)
    b.draw_line(Point(0, 0), Point(9, 5), BLUE)
    assert _pixels(a) == _pixels(b)


def test_rect_corners():
    r = Rect(RED, 2, 3, 4, 5)
    assert r.points == [Point(2, 3), Point(6, 3), Point(6, 8), Point(2, 8)]


def test_rect_draw_fills_interior():
    img = PNGImage(12, 12)
    Rect(RED, 2, 3, 4, 5).draw(img)
    assert img[4, 5] == RED
    assert img[2, 3] == RED
    assert img[6, 8] == RED
    assert img[7, 5] == WHITE
    assert img[4, 9] == WHITE


def test_polygon_draw_equals_draw_polygon():
    pts = [Point(1, 1), Point(9, 2), Point(5, 9)]
    a = PNGImage(12, 12)
    b = PNGImage(12, 12)
    Polygon(BLUE, pts).draw(a)
    b.draw_polygon(pts, BLUE)
    assert _pixels(a) == _pixels(b)


def test_polygon_transforms():
    poly = Polygon(RED, [Point(1, 1), Point(4, 1), Point(2, 5)])
    poly.translate(2, 3)
    assert poly.points == [Point(3, 4), Point(6, 4), Point(4, 8)]
    poly.rotate(360)
    assert poly.points == [Point(3, 4), Point(6, 4), Point(4, 8)]
    poly.scale(1)
    assert poly.points == [Point(3, 4), Point(6, 4), Point(4, 8)]


def test_group_draws_all_elements_in_order():
    circle = Circle(RED, Point(5, 5), 2)
    rect = Rect(BLUE, 4, 4, 2, 2)
    img = PNGImage(10, 10)
    Group([circle, rect]).draw(img)
    ref = PNGImage(10, 10)
    circle.draw(ref)
    rect.draw(ref)
    assert _pixels(img) == _pixels(ref)
    assert img[5, 5] == BLUE


def test_group_translate_delegates():
    line = Line(RED, Point(0, 0), Point(1, 1))
    ellipse = Ellipse(RED, Point(3, 3), Point(1, 1))
    group = Group([line, ellipse])
    group.translate(2, 2)
    assert line.points == [Point(2, 2), Point(3, 3)]
    assert ellipse.center == Point(5, 5)


def test_group_nested_rotate_and_scale():
    line = Line(RED, Point(1, 2), Point(3, 4))
    outer = Group([Group([line])])
    outer.rotate(360)
    outer.scale(1)
    assert line.points == [Point(1, 2), Point(3, 4)]
    assert list(outer.elements[0]) == [line]