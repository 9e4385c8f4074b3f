"""Symbolic expressions over live variables holding numbers or quantities.

A ``Var`` is a named, mutable value. Arithmetic on variables and expressions
builds a tree. Evaluating the tree with ``value`` always reads the variables'
current values. Adding or multiplying by a ``ZeroExp`` simplifies the tree
instead of growing it.
"""

from __future__ import annotations

import itertools
import math
from abc import ABC, abstractmethod
from typing import Any

from . import primitives, units
from .primitives import zero
from .quantity import Quantity

_var_numbers = itertools.count(1)


def _wrap(item: Any) -> Expr:
    return item if isinstance(item, Expr) else Const(item)


class Expr(ABC):
    """A node of an expression tree."""

    @abstractmethod
    def val(self) -> Any:
        """Evaluate the expression with the current variable values."""

    @abstractmethod
    def __str__(self) -> str:
        ...

    def __add__(self, other: Any) -> Expr:
        return _add(self, _wrap(other))

    def __radd__(self, other: Any) -> Expr:
        return _add(_wrap(other), self)

    def __sub__(self, other: Any) -> Expr:
        return _sub(self, _wrap(other))

    def __rsub__(self, other: Any) -> Expr:
        return _sub(_wrap(other), self)

    def __mul__(self, other: Any) -> Expr:
        return _mul(self, _wrap(other))

    def __rmul__(self, other: Any) -> Expr:
        return _mul(_wrap(other), self)

    def __truediv__(self, other: Any) -> Expr:
        return _div(self, _wrap(other))

    def __rtruediv__(self, other: Any) -> Expr:
        return _div(_wrap(other), self)

    def __neg__(self) -> Expr:
        return Neg(self)

    def __pos__(self) -> Expr:
        return Pos(self)


class Var(Expr):
    """A named variable; every expression using it sees changes to its value."""

    def __init__(self, value: Any, name: str | None = None) -> None:
        self._value = value
        self.name = name if name is not None else f"var{next(_var_numbers)}"

    def val(self) -> Any:
        return self._value

    def set(self, value: Any) -> None:
        """Give the variable a new value."""
        self._value = value

    def __iadd__(self, other: Any) -> Var:
        self._value = self._value + value(other)
        return self

    def __isub__(self, other: Any) -> Var:
        self._value = self._value - value(other)
        return self

    def __imul__(self, factor: Any) -> Var:
        self._value = self._value * value(factor)
        return self

    def __itruediv__(self, factor: Any) -> Var:
        self._value = self._value / value(factor)
        return self

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Expr):
            return NotImplemented
        return self._value == other

    def __ne__(self, other: object) -> bool:
        if isinstance(other, Expr):
            return NotImplemented
        return self._value != other

    __hash__ = Expr.__hash__

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, Expr):
            return NotImplemented
        return self._value < other

    def __le__(self, other: Any) -> bool:
        if isinstance(other, Expr):
            return NotImplemented
        return self._value <= other

    def __gt__(self, other: Any) -> bool:
        if isinstance(other, Expr):
            return NotImplemented
        return self._value > other

    def __ge__(self, other: Any) -> bool:
        if isinstance(other, Expr):
            return NotImplemented
        return self._value >= other

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Var({self._value!r}, {self.name!r})"


class Const(Expr):
    """A fixed value inside an expression."""

    def __init__(self, value: Any) -> None:
        self._value = value

    def val(self) -> Any:
        return self._value

    def __str__(self) -> str:
        return primitives.to_str(self._value)

    def __repr__(self) -> str:
        return f"Const({self._value!r})"


class ZeroExp(Expr):
    """A known zero; ``template`` fixes the type of the zero it evaluates to."""

    def __init__(self, template: Any = 0.0) -> None:
        self._template = template

    def val(self) -> Any:
        return zero(self._template)

    def __str__(self) -> str:
        return "0"

    def __repr__(self) -> str:
        return f"ZeroExp({self._template!r})"


class UnaryExpr(Expr):
    """An operation on one sub-expression."""

    _open = "( "
    _close = " )"

    def __init__(self, arg: Any) -> None:
        self.arg = _wrap(arg)

    def val(self) -> Any:
        return self._compute(value(self.arg))

    @abstractmethod
    def _compute(self, operand: Any) -> Any:
        ...

    def __str__(self) -> str:
        return f"{self._open}{self.arg}{self._close}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.arg!r})"


class BinaryExpr(Expr):
    """An operation on two sub-expressions."""

    _open = "("
    _sep = ", "
    _close = ")"

    def __init__(self, first: Any, second: Any) -> None:
        self.first = _wrap(first)
        self.second = _wrap(second)

    def val(self) -> Any:
        return self._compute(value(self.first), value(self.second))

    @abstractmethod
    def _compute(self, a: Any, b: Any) -> Any:
        ...

    def __str__(self) -> str:
        return f"{self._open}{self.first}{self._sep}{self.second}{self._close}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.first!r}, {self.second!r})"


class Add(BinaryExpr):
    _sep = " + "

    def _compute(self, a: Any, b: Any) -> Any:
        return a + b


class Sub(BinaryExpr):
    _sep = " - "

    def _compute(self, a: Any, b: Any) -> Any:
        return a - b


class Mul(BinaryExpr):
    _sep = " * "

    def _compute(self, a: Any, b: Any) -> Any:
        return a * b


class Div(BinaryExpr):
    _sep = " / "

    def _compute(self, a: Any, b: Any) -> Any:
        return a / b


class Neg(UnaryExpr):
    _open = "( -"

    def _compute(self, operand: Any) -> Any:
        return -operand


class Pos(UnaryExpr):
    _open = "( +"

    def _compute(self, operand: Any) -> Any:
        return +operand


def _cos(v: Any) -> float:
    return units.cos(v) if isinstance(v, Quantity) else math.cos(v)


def _sin(v: Any) -> float:
    return units.sin(v) if isinstance(v, Quantity) else math.sin(v)


def _tan(v: Any) -> float:
    return units.tan(v) if isinstance(v, Quantity) else math.tan(v)


class AbsExp(UnaryExpr):
    _open = "Abs( "

    def _compute(self, operand: Any) -> Any:
        return primitives.absolute(operand)


class SqrtExp(UnaryExpr):
    _open = "Sqrt( "

    def _compute(self, operand: Any) -> Any:
        return primitives.sqrt(operand)


class SqrExp(UnaryExpr):
    _open = "Sqr( "

    def _compute(self, operand: Any) -> Any:
        return primitives.sqr(operand)


class CubeExp(UnaryExpr):
    _open = "Cube( "

    def _compute(self, operand: Any) -> Any:
        return primitives.cube(operand)


class CosExp(UnaryExpr):
    _open = "Cos( "

    def _compute(self, operand: Any) -> Any:
        return _cos(operand)


class SinExp(UnaryExpr):
    _open = "Sin( "

    def _compute(self, operand: Any) -> Any:
        return _sin(operand)


class TanExp(UnaryExpr):
    _open = "Tan( "

    def _compute(self, operand: Any) -> Any:
        return _tan(operand)


class ACosExp(UnaryExpr):
    _open = "ACos( "

    def _compute(self, operand: Any) -> Any:
        return units.acos(operand)


class ASinExp(UnaryExpr):
    _open = "ASin( "

    def _compute(self, operand: Any) -> Any:
        return units.asin(operand)


class ATanExp(UnaryExpr):
    _open = "ATan( "

    def _compute(self, operand: Any) -> Any:
        return units.atan(operand)


class ATan2Exp(BinaryExpr):
    _open = "ATan2( "
    _sep = ", "
    _close = " )"

    def _compute(self, a: Any, b: Any) -> Any:
        return units.atan2(a, b)


def _add(a: Expr, b: Expr) -> Expr:
    if isinstance(b, ZeroExp):
        return a
    if isinstance(a, ZeroExp):
        return b
    return Add(a, b)


def _sub(a: Expr, b: Expr) -> Expr:
    if isinstance(b, ZeroExp):
        return a
    if isinstance(a, ZeroExp):
        return Neg(b)
    return Sub(a, b)


def _mul(a: Expr, b: Expr) -> Expr:
    if isinstance(a, ZeroExp):
        return a
    if isinstance(b, ZeroExp):
        return b
    return Mul(a, b)


def _div(a: Expr, b: Expr) -> Expr:
    if isinstance(a, ZeroExp):
        return a
    return Div(a, b)


def value(item: Any) -> Any:
    """The current value of an expression; anything else is returned as is."""
    return item.val() if isinstance(item, Expr) else item


def replace(expr: Any, var: Var) -> Any:
    """A copy of ``expr`` in which every variable named like ``var`` is ``var``."""
    if isinstance(expr, Var):
        return var if expr.name == var.name else expr
    if isinstance(expr, UnaryExpr):
        return type(expr)(replace(expr.arg, var))
    if isinstance(expr, BinaryExpr):
        return type(expr)(replace(expr.first, var), replace(expr.second, var))
    return expr


def absolute(arg: Any) -> Any:
    """Absolute value: an expression node for expressions, computed otherwise."""
    return AbsExp(arg) if isinstance(arg, Expr) else primitives.absolute(arg)


def sqrt(arg: Any) -> Any:
    """Square root: an expression node for expressions, computed otherwise."""
    return SqrtExp(arg) if isinstance(arg, Expr) else primitives.sqrt(arg)


def sqr(arg: Any) -> Any:
    """Square: an expression node for expressions, computed otherwise."""
    return SqrExp(arg) if isinstance(arg, Expr) else primitives.sqr(arg)


def cube(arg: Any) -> Any:
    """Cube: an expression node for expressions, computed otherwise."""
    return CubeExp(arg) if isinstance(arg, Expr) else primitives.cube(arg)


def cos(arg: Any) -> Any:
    """Cosine of an angle or an angle expression."""
    return CosExp(arg) if isinstance(arg, Expr) else _cos(arg)


def sin(arg: Any) -> Any:
    """Sine of an angle or an angle expression."""
    return SinExp(arg) if isinstance(arg, Expr) else _sin(arg)


def tan(arg: Any) -> Any:
    """Tangent of an angle or an angle expression."""
    return TanExp(arg) if isinstance(arg, Expr) else _tan(arg)


def acos(arg: Any) -> Any:
    """Arc cosine, giving an angle."""
    return ACosExp(arg) if isinstance(arg, Expr) else units.acos(arg)


def asin(arg: Any) -> Any:
    """Arc sine, giving an angle."""
    return ASinExp(arg) if isinstance(arg, Expr) else units.asin(arg)


def atan(arg: Any) -> Any:
    """Arc tangent, giving an angle."""
    return ATanExp(arg) if isinstance(arg, Expr) else units.atan(arg)


def atan2(y: Any, x: Any) -> Any:
    """The angle of the point (x, y), as a node if either side is an expression."""
    if isinstance(y, Expr) or isinstance(x, Expr):
        return ATan2Exp(y, x)
    return units.atan2(y, x)