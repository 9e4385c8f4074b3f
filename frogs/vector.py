"""Fixed-size vectors of numbers or physical quantities."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from .primitives import one, sqrt, to_str, zero


class Vector:
    """A mutable vector with a fixed number of components."""

    __slots__ = ("_data",)

    def __init__(self, *components: Any) -> None:
        if not components:
            raise ValueError("a vector needs at least one component")
        self._data = list(components)

    def __getitem__(self, index: int) -> Any:
        return self._data[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._data[index] = value

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def _pairs(self, other: Vector) -> Iterable[tuple[Any, Any]]:
        if len(other) != len(self):
            raise ValueError(
                f"vector sizes differ: {len(self)} and {len(other)}"
            )
        return zip(self._data, other._data)

    def __add__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(*(a + b for a, b in self._pairs(other)))

    def __sub__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(*(a - b for a, b in self._pairs(other)))

    def __neg__(self) -> Vector:
        return Vector(*(-a for a in self._data))

    def __pos__(self) -> Vector:
        return Vector(*self._data)

    def __mul__(self, other: Any) -> Vector:
        if isinstance(other, Vector):
            return Vector(*(a * b for a, b in self._pairs(other)))
        return Vector(*(a * other for a in self._data))

    def __rmul__(self, other: Any) -> Vector:
        return Vector(*(other * a for a in self._data))

    def __truediv__(self, other: Any) -> Vector:
        if isinstance(other, Vector):
            return Vector(*(a / b for a, b in self._pairs(other)))
        return Vector(*(a / other for a in self._data))

    def __str__(self) -> str:
        return "[" + ", ".join(to_str(a) for a in self._data) + "]"

    def __repr__(self) -> str:
        return f"Vector({', '.join(repr(a) for a in self._data)})"

    def concat(self, other: Any) -> Vector:
        """Return a longer vector with ``other`` (a component or a vector) appended."""
        if isinstance(other, Vector):
            return Vector(*self._data, *other._data)
        return Vector(*self._data, other)

    def normalized(self) -> Vector:
        """Return the unitless vector of the same direction and length one."""
        length = hypot(self)
        return Vector(*(a / length for a in self._data))

    def _component(self, index: int, name: str) -> Any:
        if index >= len(self._data):
            raise IndexError(f"a {len(self._data)}-component vector has no {name}")
        return self._data[index]

    @property
    def x(self) -> Any:
        return self._component(0, "x")

    @property
    def y(self) -> Any:
        return self._component(1, "y")

    @property
    def z(self) -> Any:
        return self._component(2, "z")

    @property
    def w(self) -> Any:
        return self._component(3, "w")


def vec(*args: Any) -> Vector:
    """Build a 2-, 3- or 4-component vector from components and smaller vectors."""
    components: list[Any] = []
    for item in args:
        if isinstance(item, Vector):
            components.extend(item)
        else:
            components.append(item)
    if not 2 <= len(components) <= 4:
        raise ValueError(
            f"a vector is built from 2 to 4 components, got {len(components)}"
        )
    return Vector(*components)


def hypot(vector: Vector) -> Any:
    """Euclidean length of a vector, in the unit of its components."""
    squares = [a * a for a in vector]
    return sqrt(sum(squares, zero(squares[0])))


def dist(a: Vector, b: Vector) -> Any:
    """Euclidean distance between two points."""
    return hypot(b - a)


def dot(a: Vector, b: Vector) -> float:
    """Dot product of two vectors, with every component taken as a plain number."""
    if len(a) != len(b):
        raise ValueError(f"vector sizes differ: {len(a)} and {len(b)}")
    return float(
        sum(((x / one(x)) * (y / one(y)) for x, y in zip(a, b)), 0.0)
    )