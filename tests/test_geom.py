import pytest

from frogs import units
from frogs.geom import Line2D, Shape2D, intersect, is_left
from frogs.matrix import Mat4
from frogs.vector import vec


def meters(q):
    return q.to(units.m)


def line(x0, y0, x1, y1):
    return Line2D(units.m(x0), units.m(y0), units.m(x1), units.m(y1))


def point(x, y):
    return vec(units.m(x), units.m(y))


def test_deltas_and_length():
    segment = line(1, 2, 4, 6)
    assert segment.dx() == units.m(3)
    assert segment.dy() == units.m(4)
    assert segment.length() == units.m(5)


def test_constructed_from_points_matches_coordinates():
    a = Line2D(point(1, 2), point(3, 4))
    assert a == line(1, 2, 3, 4)
    assert a.p0 == point(1, 2)
    assert a.x1 == units.m(3)
    assert a.y1 == units.m(4)


def test_default_line_is_empty():
    assert Line2D().length() == units.m(0)


def test_bad_arguments():
    with pytest.raises(TypeError):
        Line2D(units.m(1))
    with pytest.raises(ValueError):
        Line2D(vec(units.m(1), units.m(1), units.m(1)), point(0, 0))


def test_rotate_keeps_first_point_and_length():
    segment = line(1, 1, 3, 1)
    before = meters(segment.length())
    segment.rotate(units.deg(90))
    assert meters(segment.x0) == pytest.approx(1.0, abs=1e-6)
    assert meters(segment.y0) == pytest.approx(1.0, abs=1e-6)
    assert meters(segment.x1) == pytest.approx(1.0, abs=1e-6)
    assert meters(segment.y1) == pytest.approx(3.0, abs=1e-6)
    assert meters(segment.length()) == pytest.approx(before)


def test_set_angle():
    segment = line(0, 0, 3, 4)
    before = meters(segment.length())
    segment.set_angle(units.deg(30))
    assert segment.angle().to(units.deg) == pytest.approx(30.0)
    assert meters(segment.length()) == pytest.approx(before)


def test_set_length_keeps_direction():
    segment = line(1, 1, 4, 5)
    angle = segment.angle().to(units.rad)
    segment.set_length(units.m(10))
    assert meters(segment.length()) == pytest.approx(10.0)
    assert segment.angle().to(units.rad) == pytest.approx(angle)
    assert meters(segment.x0) == pytest.approx(1.0)
    assert meters(segment.y0) == pytest.approx(1.0)


def test_scale_multiplies_length():
    segment = line(2, -1, 5, 3)
    before = meters(segment.length())
    segment.scale(3.0)
    assert meters(segment.length()) == pytest.approx(3 * before)


def test_matrix_times_line_translates_without_changing_original():
    segment = line(1, 2, 4, 6)
    mat = Mat4()
    mat.translate(units.m(5), units.m(-2))
    moved = mat * segment
    assert meters(moved.x0) == pytest.approx(meters(segment.x0) + 5)
    assert meters(moved.y1) == pytest.approx(meters(segment.y1) - 2)
    assert moved.dx() == segment.dx()
    assert segment == line(1, 2, 4, 6)


def test_non_matrix_times_line_fails():
    with pytest.raises(TypeError):
        3 * line(0, 0, 1, 1)


def test_intersect_diagonals():
    hit, where = intersect(line(0, 0, 2, 2), line(0, 2, 2, 0))
    assert hit is True
    assert meters(where.x) == pytest.approx(1.0)
    assert meters(where.y) == pytest.approx(1.0)


def test_intersect_shallow_and_steep():
    hit, where = intersect(line(0, 0, 4, 1), line(2, -1, 2, 3))
    assert hit is True
    assert meters(where.x) == pytest.approx(2.0)
    assert meters(where.y) == pytest.approx(0.5)


def test_intersect_is_symmetric():
    a = line(0, 0, 4, 1)
    b = line(2, -1, 2, 3)
    hit_ab, p_ab = intersect(a, b)
    hit_ba, p_ba = intersect(b, a)
    assert hit_ab == hit_ba
    assert meters(p_ab.x) == pytest.approx(meters(p_ba.x))
    assert meters(p_ab.y) == pytest.approx(meters(p_ba.y))


def test_intersect_outside_segments():
    hit, where = intersect(line(0, 0, 1, 0), line(5, -1, 5, 1))
    assert hit is False
    assert meters(where.x) == pytest.approx(5.0)


def test_parallel_lines_do_not_intersect():
    hit, _ = intersect(line(0, 0, 1, 0), line(0, 1, 1, 1))
    assert hit is False


def test_is_left():
    segment = line(0, 0, 1, 0)
    assert is_left(point(0, 1), segment) is True
    assert is_left(point(0, -1), segment) is False
    assert is_left(point(0, -1), line(1, 0, 0, 0)) is True


def test_shape_append_and_iterate():
    shape = Shape2D()
    shape.append(point(1, 1))
    shape.append(point(2, 2))
    other = Shape2D([point(3, 3)])
    shape.append(other)
    assert len(shape) == 3
    assert list(shape) == [point(1, 1), point(2, 2), point(3, 3)]
    assert len(other) == 1


def test_shape_rejects_non_points():
    shape = Shape2D()
    with pytest.raises(TypeError):
        shape.append(units.m(1))
    with pytest.raises(ValueError):
        shape.append(vec(units.m(1), units.m(1), units.m(1)))


def test_shape_str():
    shape = Shape2D([point(1, 1), point(2, 2)])
    assert str(shape) == "[ [1 meters, 1 meters][2 meters, 2 meters] ]"
    assert str(Shape2D()) == "[  ]"


def test_matrix_times_shape():
    shape = Shape2D([point(1, 1), point(-1, 1)])
    mat = Mat4()
    mat.translate(units.m(10), units.m(0))
    moved = mat * shape
    assert len(moved) == len(shape)
    for before, after in zip(shape, moved):
        assert meters(after.x) == pytest.approx(meters(before.x) + 10)
        assert meters(after.y) == pytest.approx(meters(before.y))
    assert list(shape) == [point(1, 1), point(-1, 1)]