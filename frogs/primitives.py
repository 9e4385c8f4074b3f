"""Scalar helpers shared by the quantity, vector and matrix types."""

from __future__ import annotations

import math
import re
from typing import Any

PI = 3.1415926535

_TRAILING_ZEROS = re.compile(r"(\.|)0+$")


def format_real(value: float) -> str:
    """Format a real number with six decimals, then drop trailing zeros and a bare dot."""
    return _TRAILING_ZEROS.sub("", f"{float(value):f}")


def to_str(value: Any) -> str:
    """Render a value the way the library prints it: integers plainly, reals trimmed."""
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format_real(value)
    return str(value)


def one(value: Any) -> Any:
    """Return the unit value of the same type as ``value``."""
    if isinstance(value, int):
        return 1
    if isinstance(value, float):
        return 1.0
    method = getattr(value, "one", None)
    if callable(method):
        return method()
    raise TypeError(f"no unit value for {type(value).__name__}")


def zero(value: Any) -> Any:
    """Return the zero value of the same type as ``value``."""
    if isinstance(value, int):
        return 0
    if isinstance(value, float):
        return 0.0
    method = getattr(value, "zero", None)
    if callable(method):
        return method()
    raise TypeError(f"no zero value for {type(value).__name__}")


def sqrt(value: Any) -> Any:
    """Square root of a number (NaN for negatives) or of any object with ``sqrt()``."""
    if isinstance(value, (int, float)):
        return math.sqrt(value) if value >= 0 else math.nan
    method = getattr(value, "sqrt", None)
    if callable(method):
        return method()
    raise TypeError(f"cannot take the square root of {type(value).__name__}")


def absolute(value: Any) -> Any:
    """Absolute value of a number or quantity."""
    return abs(value)


def sqr(value: Any) -> Any:
    """The value multiplied by itself."""
    return value * value


def cube(value: Any) -> Any:
    """The value raised to the third power by repeated multiplication."""
    return value * value * value