"""Physical quantities with units, vectors, matrices, 2D geometry,
symbolic expressions and their differentiation."""

__version__ = "0.1.0"
__all__ = [
    "primitives",
    "vector",
    "quantity",
    "units",
    "ranges",
    "matrix",
    "expressions",
    "diff",
    "geom",
    "cli",
]