import pytest

from svgraster.point import Point


def test_translate_adds_offset():
    assert Point(3, 4).translate(Point(10, -2)) == Point(13, 2)


def test_translate_round_trip():
    p = Point(7, -5)
    t = Point(12, 9)
    assert p.translate(t).translate(Point(-t.x, -t.y)) == p


def test_rotate_quarter_turn():
    assert Point(1, 0).rotate(Point(0, 0), 90) == Point(0, 1)


def test_rotate_eighth_turn_rounds():
    assert Point(1, 0).rotate(Point(0, 0), 45) == Point(1, 1)


@pytest.mark.parametrize("p", [Point(3, 4), Point(-7, 2), Point(0, 0), Point(100, -50)])
def test_rotate_half_turn_negates(p):
    assert p.rotate(Point(0, 0), 180) == Point(-p.x, -p.y)


@pytest.mark.parametrize("p", [Point(3, 4), Point(-7, 2), Point(25, -13)])
def test_four_quarter_turns_identity(p):
    origin = Point(5, 6)
    q = p
    for _ in range(4):
        q = q.rotate(origin, 90)
    assert q == p


def test_full_turn_identity():
    p = Point(17, -31)
    assert p.rotate(Point(2, 3), 360) == p


def test_rotate_around_self_is_identity():
    p = Point(9, 9)
    assert p.rotate(p, 73) == p


def test_rotation_preserves_distance_for_right_angles():
    origin = Point(10, 10)
    p = Point(14, 13)
    q = p.rotate(origin, 270)
    d_before = (p.x - origin.x) ** 2 + (p.y - origin.y) ** 2
    d_after = (q.x - origin.x) ** 2 + (q.y - origin.y) ** 2
    assert d_before == d_after


def test_scale_from_origin():
    assert Point(3, -4).scale(Point(0, 0), 2) == Point(6, -8)


def test_scale_by_one_identity():
    p = Point(8, 11)
    assert p.scale(Point(3, 4), 1) == p


def test_scale_around_self_identity():
    p = Point(8, 11)
    assert p.scale(p, 5) == p


def test_point_is_immutable():
    p = Point(1, 2)
    with pytest.raises(AttributeError):
        p.x = 5
    assert (p.x, p.y) == (1, 2)
    assert p.translate(Point(0, 0)) == Point(1, 2)