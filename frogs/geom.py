"""Two-dimensional lines and shapes made of distance vectors."""

from __future__ import annotations

import math
from typing import Any, Iterable, Iterator

from . import units
from .matrix import Mat4, Matrix
from .quantity import Quantity
from .ranges import Range
from .vector import Vector, dist, vec


def _point(item: Any) -> Vector:
    if not isinstance(item, Vector):
        raise TypeError(f"expected a 2-component vector, got {item!r}")
    if len(item) != 2:
        raise ValueError(f"expected a 2-component vector, got {len(item)} components")
    return Vector(*item)


class Line2D:
    """A line segment between two points whose coordinates are distances."""

    __slots__ = ("p0", "p1")

    def __init__(self, *args: Any) -> None:
        if not args:
            self.p0 = vec(units.m(0), units.m(0))
            self.p1 = vec(units.m(0), units.m(0))
        elif len(args) == 2:
            self.p0 = _point(args[0])
            self.p1 = _point(args[1])
        elif len(args) == 4:
            x0, y0, x1, y1 = args
            self.p0 = vec(x0, y0)
            self.p1 = vec(x1, y1)
        else:
            raise TypeError(
                f"a line takes two points or four coordinates, got {len(args)} arguments"
            )

    @property
    def x0(self) -> Quantity:
        return self.p0.x

    @property
    def y0(self) -> Quantity:
        return self.p0.y

    @property
    def x1(self) -> Quantity:
        return self.p1.x

    @property
    def y1(self) -> Quantity:
        return self.p1.y

    def dx(self) -> Quantity:
        """Horizontal extent from the first point to the second."""
        return self.p1.x - self.p0.x

    def dy(self) -> Quantity:
        """Vertical extent from the first point to the second."""
        return self.p1.y - self.p0.y

    def angle(self) -> Quantity:
        """Direction of the line from the first point to the second."""
        return units.atan2(self.dy(), self.dx())

    def length(self) -> Quantity:
        """Distance between the two points."""
        return dist(self.p0, self.p1)

    def set_angle(self, angle: Quantity) -> None:
        """Turn the line about its first point so that it points at ``angle``."""
        self.rotate(angle - self.angle())

    def rotate(self, angle: Quantity) -> None:
        """Turn the line about its first point by ``angle``."""
        mat = Mat4()
        mat.translate(-self.x0, -self.y0)
        mat.rotate(angle, 0.0, 0.0, 1.0)
        mat.translate(self.x0, self.y0)
        self._assign(mat * self)

    def set_length(self, length: Quantity) -> None:
        """Stretch the line from its first point to the given length."""
        self.scale(length / self.length())

    def scale(self, factor: float) -> None:
        """Stretch the line from its first point by ``factor``."""
        mat = Mat4()
        mat.translate(-self.x0, -self.y0)
        mat.scale(factor)
        mat.translate(self.x0, self.y0)
        self._assign(mat * self)

    def _assign(self, other: Line2D) -> None:
        self.p0 = other.p0
        self.p1 = other.p1

    def __rmul__(self, matrix: Any) -> Line2D:
        if not isinstance(matrix, Matrix):
            return NotImplemented
        start = matrix * self.p0
        end = matrix * self.p1
        return Line2D(start[0], start[1], end[0], end[1])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line2D):
            return NotImplemented
        return self.p0 == other.p0 and self.p1 == other.p1

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Line2D({self.p0}, {self.p1})"


def _ieee_div(numerator: float, denominator: float) -> float:
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def intersect(l0: Line2D, l1: Line2D) -> tuple[bool, Vector]:
    """Where the infinite lines through two segments cross, and whether that
    point lies within both segments' bounding boxes.

    Parallel or degenerate lines give a point with infinite or undefined
    coordinates and ``False``.
    """
    x00, y00 = l0.x0.to(units.m), l0.y0.to(units.m)
    x10, y10 = l1.x0.to(units.m), l1.y0.to(units.m)
    dx0, dy0 = l0.dx().to(units.m), l0.dy().to(units.m)
    dx1, dy1 = l1.dx().to(units.m), l1.dy().to(units.m)

    if abs(dx0) > abs(dy0):
        m0 = _ieee_div(dy0, dx0)
        b0 = y00 - m0 * x00
        if abs(dx1) > abs(dy1):
            m1 = _ieee_div(dy1, dx1)
            b1 = y10 - m1 * x10
            ix = _ieee_div(b0 - b1, m1 - m0)
            iy = m0 * ix + b0
        else:
            m1 = _ieee_div(dx1, dy1)
            b1 = x10 - m1 * y10
            ix = _ieee_div(-b0 * m1 - b1, m1 * m0 - 1.0)
            iy = ix * m0 + b0
    else:
        m0 = _ieee_div(dx0, dy0)
        b0 = x00 - m0 * y00
        if abs(dx1) > abs(dy1):
            m1 = _ieee_div(dy1, dx1)
            b1 = y10 - m1 * x10
            ix = _ieee_div(-b1 * m0 - b0, m0 * m1 - 1.0)
            iy = ix * m1 + b1
        else:
            m1 = _ieee_div(dx1, dy1)
            b1 = x10 - m1 * y10
            iy = _ieee_div(b0 - b1, m1 - m0)
            ix = iy * m0 + b0

    point = vec(units.m(ix), units.m(iy))
    hit = (
        point.x in Range(l0.x0, l0.x1)
        and point.y in Range(l0.y0, l0.y1)
        and point.x in Range(l1.x0, l1.x1)
        and point.y in Range(l1.y0, l1.y1)
    )
    return hit, point


def is_left(point: Vector, line: Line2D) -> bool:
    """Whether ``point`` lies to the left of the line, looking along it."""
    mat = Mat4()
    mat.translate(-line.x0, -line.y0)
    mat.rotate(-line.angle(), 0.0, 0.0, 1.0)
    return (mat * point).y > units.m(0)


class Shape2D:
    """An ordered collection of 2D points whose coordinates are distances."""

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[Vector] = ()) -> None:
        self._points: list[Vector] = []
        for item in points:
            self.append(item)

    def append(self, item: Any) -> None:
        """Add a point, or every point of another shape."""
        if isinstance(item, Shape2D):
            self._points.extend(Vector(*p) for p in item)
        else:
            self._points.append(_point(item))

    def __iter__(self) -> Iterator[Vector]:
        return iter(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __rmul__(self, matrix: Any) -> Shape2D:
        if not isinstance(matrix, Matrix):
            return NotImplemented
        result = Shape2D()
        for point in self._points:
            moved = matrix * point
            result.append(vec(moved[0], moved[1]))
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape2D):
            return NotImplemented
        return self._points == other._points

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "[ " + "".join(str(p) for p in self._points) + " ]"

    def __repr__(self) -> str:
        return f"Shape2D({self})"