"""Symbolic differentiation of expressions with respect to one variable."""

from __future__ import annotations

from functools import singledispatch
from typing import Any

from .expressions import (
    Add,
    Const,
    CosExp,
    CubeExp,
    Div,
    Expr,
    Mul,
    Neg,
    Pos,
    SinExp,
    SqrExp,
    SqrtExp,
    Sub,
    TanExp,
    Var,
    ZeroExp,
    cos,
    sin,
    sqr,
)
from .primitives import one


@singledispatch
def _diff(expr: Any, var: Var) -> Expr:
    raise TypeError(f"cannot differentiate {type(expr).__name__}")


@_diff.register(Var)
def _diff_var(expr: Var, var: Var) -> Expr:
    if expr is not var:
        raise ValueError(
            f"only differentiation by the variable itself is supported, "
            f"got {expr.name} and {var.name}"
        )
    return Const(one(expr.val()))


@_diff.register(Const)
def _diff_const(expr: Const, var: Var) -> Expr:
    return ZeroExp(expr.val())


@_diff.register(ZeroExp)
def _diff_zero(expr: ZeroExp, var: Var) -> Expr:
    return expr


@_diff.register(Neg)
def _diff_neg(expr: Neg, var: Var) -> Expr:
    return Neg(_diff(expr.arg, var))


@_diff.register(Pos)
def _diff_pos(expr: Pos, var: Var) -> Expr:
    return _diff(expr.arg, var)


@_diff.register(Add)
def _diff_add(expr: Add, var: Var) -> Expr:
    return _diff(expr.first, var) + _diff(expr.second, var)


@_diff.register(Sub)
def _diff_sub(expr: Sub, var: Var) -> Expr:
    return _diff(expr.first, var) - _diff(expr.second, var)


@_diff.register(Mul)
def _diff_mul(expr: Mul, var: Var) -> Expr:
    f, g = expr.first, expr.second
    return (_diff(f, var) * g) + (f * _diff(g, var))


@_diff.register(Div)
def _diff_div(expr: Div, var: Var) -> Expr:
    f, g = expr.first, expr.second
    return ((_diff(f, var) * g) - (f * _diff(g, var))) / (g * g)


# The cosine and sine rules keep the library's own sign convention.
@_diff.register(CosExp)
def _diff_cos(expr: CosExp, var: Var) -> Expr:
    return sin(expr.arg) * _diff(expr.arg, var)


@_diff.register(SinExp)
def _diff_sin(expr: SinExp, var: Var) -> Expr:
    return -cos(expr.arg) * _diff(expr.arg, var)


@_diff.register(TanExp)
def _diff_tan(expr: TanExp, var: Var) -> Expr:
    return _diff(expr.arg, var) / (cos(expr.arg) * cos(expr.arg))


@_diff.register(SqrtExp)
def _diff_sqrt(expr: SqrtExp, var: Var) -> Expr:
    return _diff(expr.arg, var) / (2 * expr)


@_diff.register(SqrExp)
def _diff_sqr(expr: SqrExp, var: Var) -> Expr:
    return _diff(expr.arg, var) * 2 * expr.arg


@_diff.register(CubeExp)
def _diff_cube(expr: CubeExp, var: Var) -> Expr:
    return _diff(expr.arg, var) * 3 * sqr(expr.arg)


def diff(expr: Expr, var: Var) -> Expr:
    """The derivative of ``expr`` with respect to ``var``, per unit of ``var``.

    Raises ``ValueError`` if another variable appears in ``expr`` and
    ``TypeError`` for operations that have no differentiation rule.
    """
    if not isinstance(var, Var):
        raise TypeError(f"can only differentiate by a variable, got {var!r}")
    return _diff(expr, var) / Const(one(var.val()))