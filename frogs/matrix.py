"""Matrices of reals, with 4x4 affine transforms for points and vectors."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Sequence

from . import units
from .primitives import one, to_str, zero
from .quantity import Quantity
from .vector import Vector

_SCALARS = (int, float, Quantity)


class Matrix:
    """A ``rows`` x ``cols`` matrix; square ones start as identity, others as zeros."""

    __slots__ = ("_rows", "_cols", "_data")

    def __init__(self, rows: int, cols: int, values: Iterable[Any] | None = None) -> None:
        if rows < 1 or cols < 1:
            raise ValueError(f"a matrix needs positive dimensions, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._data: List[List[Any]] = []
        if values is None:
            if rows == cols:
                self.identity()
            else:
                self.zeros()
            return
        items = list(values)
        if len(items) != rows * cols:
            raise ValueError(
                f"a {rows}x{cols} matrix needs {rows * cols} values, got {len(items)}"
            )
        self._data = [items[r * cols:(r + 1) * cols] for r in range(rows)]

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def identity(self) -> None:
        """Set ones on the diagonal and zeros elsewhere."""
        self._data = [
            [1.0 if r == c else 0.0 for c in range(self._cols)]
            for r in range(self._rows)
        ]

    def zeros(self) -> None:
        """Set every element to zero."""
        self._data = [[0.0] * self._cols for _ in range(self._rows)]

    def _position(self, index: Any) -> tuple[int, int]:
        if not (isinstance(index, tuple) and len(index) == 2):
            raise TypeError("a matrix is indexed by (row, col)")
        row, col = index
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(
                f"({row}, {col}) is outside a {self._rows}x{self._cols} matrix"
            )
        return row, col

    def __getitem__(self, index: Any) -> Any:
        row, col = self._position(index)
        return self._data[row][col]

    def __setitem__(self, index: Any, value: Any) -> None:
        row, col = self._position(index)
        self._data[row][col] = value

    def _values(self) -> Iterator[Any]:
        for row in self._data:
            yield from row

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._rows == other._rows
            and self._cols == other._cols
            and self._data == other._data
        )

    __hash__ = None  # type: ignore[assignment]

    def _same_shape(self, other: Matrix, op: str) -> None:
        if (self._rows, self._cols) != (other._rows, other._cols):
            raise ValueError(
                f"cannot apply {op!r} to {self._rows}x{self._cols} and "
                f"{other._rows}x{other._cols} matrices"
            )

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._same_shape(other, "+")
        return _make(
            self._rows, self._cols,
            (a + b for a, b in zip(self._values(), other._values())),
        )

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._same_shape(other, "-")
        return _make(
            self._rows, self._cols,
            (a - b for a, b in zip(self._values(), other._values())),
        )

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Matrix):
            return self._matmul(other)
        if isinstance(other, Vector):
            return self._vecmul(other)
        if isinstance(other, _SCALARS):
            return _make(self._rows, self._cols, (a * other for a in self._values()))
        return NotImplemented

    def __rmul__(self, other: Any) -> Any:
        if isinstance(other, _SCALARS):
            return _make(self._rows, self._cols, (other * a for a in self._values()))
        return NotImplemented

    def _matmul(self, other: Matrix) -> Matrix:
        if self._cols != other._rows:
            raise ValueError(
                f"cannot multiply {self._rows}x{self._cols} by "
                f"{other._rows}x{other._cols}"
            )
        columns = list(zip(*other._data))
        return _make(
            self._rows, other._cols,
            (_sum_products(row, col) for row in self._data for col in columns),
        )

    def _vecmul(self, v: Vector) -> Vector:
        components = list(v)
        if self._rows == 4 and self._cols == 4 and len(components) in (2, 3):
            if len(components) == 2:
                components.append(zero(components[0]))
            components.append(one(components[0]))
        if len(components) != self._cols:
            raise ValueError(
                f"cannot multiply a {self._rows}x{self._cols} matrix by a "
                f"{len(v)}-component vector"
            )
        return Vector(*(_sum_products(row, components) for row in self._data))

    def __str__(self) -> str:
        return "[" + ", ".join(
            "[" + ", ".join(to_str(a) for a in row) + "]" for row in self._data
        ) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._rows}x{self._cols}: {self})"


def _sum_products(left: Sequence[Any], right: Sequence[Any]) -> Any:
    terms = [a * b for a, b in zip(left, right)]
    return sum(terms[1:], terms[0])


class Mat2(Matrix):
    """A 2x2 matrix of reals, given row by row or identity by default."""

    __slots__ = ()

    def __init__(self, *values: Any) -> None:
        super().__init__(2, 2, _square_values(2, values))


class Mat3(Matrix):
    """A 3x3 matrix of reals, given row by row or identity by default."""

    __slots__ = ()

    def __init__(self, *values: Any) -> None:
        super().__init__(3, 3, _square_values(3, values))


class Mat4(Matrix):
    """A 4x4 affine transform; each operation is applied after the earlier ones."""

    __slots__ = ()

    def __init__(self, *values: Any) -> None:
        super().__init__(4, 4, _square_values(4, values))

    def _apply(self, transform: Matrix) -> None:
        self._data = (transform * self)._data

    def rotate(self, angle: Quantity, x: float, y: float, z: float) -> None:
        """Rotate by ``angle`` about the axis (x, y, z)."""
        c = units.cos(angle)
        s = units.sin(angle)
        ic = 1.0 - c
        self._apply(Mat4(
            x * x * ic + c, x * y * ic - z * s, x * z * ic + y * s, 0.0,
            y * x * ic + z * s, y * y * ic + c, y * z * ic - x * s, 0.0,
            x * z * ic - y * s, y * z * ic + x * s, z * z * ic + c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    def translate(self, *args: Any) -> None:
        """Translate by (x, y[, z]) or by a 2-, 3- or homogeneous 4-vector.

        Components are plain numbers or distances, which are taken in meters.
        """
        x, y, z = (_meters(a) for a in _three(args, 0.0))
        self._apply(Mat4(
            1.0, 0.0, 0.0, x,
            0.0, 1.0, 0.0, y,
            0.0, 0.0, 1.0, z,
            0.0, 0.0, 0.0, 1.0,
        ))

    def scale(self, *args: Any) -> None:
        """Scale uniformly by one number, or by (x, y, z) or a 2-, 3- or 4-vector."""
        if len(args) == 1 and not isinstance(args[0], Vector):
            factor = _real(args[0])
            x, y, z = factor, factor, factor
        else:
            x, y, z = (_real(a) for a in _three(args, 1.0))
        self._apply(Mat4(
            x, 0.0, 0.0, 0.0,
            0.0, y, 0.0, 0.0,
            0.0, 0.0, z, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))


def _square_values(size: int, values: tuple[Any, ...]) -> Iterable[Any] | None:
    if not values:
        return None
    if len(values) == 1 and isinstance(values[0], Matrix):
        source = values[0]
        if (source.rows, source.cols) != (size, size):
            raise ValueError(
                f"cannot copy a {source.rows}x{source.cols} matrix "
                f"into a {size}x{size} one"
            )
        return list(source._values())
    return values


def _three(args: tuple[Any, ...], fill: float) -> tuple[Any, Any, Any]:
    if len(args) == 1 and isinstance(args[0], Vector):
        v = list(args[0])
        if len(v) == 2:
            return v[0], v[1], fill
        if len(v) == 3:
            return v[0], v[1], v[2]
        if len(v) == 4:
            return v[0] / v[3], v[1] / v[3], v[2] / v[3]
        raise ValueError(f"expected a 2-, 3- or 4-component vector, got {len(v)}")
    if len(args) == 2:
        return args[0], args[1], fill
    if len(args) == 3:
        return args[0], args[1], args[2]
    raise TypeError(f"expected a vector or 2 or 3 components, got {len(args)} arguments")


def _meters(value: Any) -> float:
    if isinstance(value, Quantity):
        return value.to(units.m)
    return _real(value)


def _real(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {value!r}")
    return float(value)


_SHAPES = {(2, 2): Mat2, (3, 3): Mat3, (4, 4): Mat4}


def _make(rows: int, cols: int, values: Iterable[Any]) -> Matrix:
    cls = _SHAPES.get((rows, cols))
    if cls is None:
        return Matrix(rows, cols, values)
    return cls(*values)