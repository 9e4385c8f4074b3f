# frogs

frogs is a small library for physical quantities. Each value carries its
kind of measure and a power, for example distance to the power 1 (a length),
2 (an area) or 3 (a volume), or time to the power -1 (a frequency).
Arithmetic on these values gives a result of the matching kind. The library
also has vectors, matrices with 4×4 affine transforms, 2D lines and shapes,
and symbolic expressions that you can evaluate and differentiate.

It depends only on the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Quantities and units

`frogs.units` defines the kinds and their units. A unit is a `UnitDef`. To
make a quantity, call the unit with a number, or multiply a number by the
unit. To read a quantity in some unit, use `Quantity.to`:

```python
from frogs import units

d = units.km(20)
t = 30 * units.minutes
v = d / t                      # a velocity
print(v)                       # value in m/s
print(v.to(units.kmph))        # 40.0
print(d.to(units.miles))
```

- Quantities store their value in the base unit of their kind. Mass is held
  in grams.
- You can add, subtract and compare two quantities only when they have the
  same kind and power. Otherwise the operation raises `TypeError`.
- Within one kind, multiplying adds the powers and dividing subtracts them.
  Dividing two quantities of the same kind and power gives a plain float.
- Some products and quotients of different kinds resolve to a named kind.
  Distance / time is a velocity, mass × acceleration is a force, and energy /
  time is a power. A product or quotient with no rule becomes a
  `UnitsProduct` or `UnitsQuotient`. It stays that way until a later
  multiplication or division cancels one factor.
- `Quantity.sqrt()` works for powers 2, 4, 6 and 8.
- `units.cos`, `sin` and `tan` take an angle. `acos`, `asin`, `atan` and
  `atan2` return one. `atan2` accepts two numbers, or two quantities of the
  same kind and power.
- `msecs_part`, `secs_part` and `mins_part` split a time into its parts.

`frogs.quantity` holds the underlying `Kind`, `UnitDef` and `Quantity` types.
It also has `register_product`, `register_quotient` and `register_ab_div_c`,
which add conversion rules between kinds.

## Vectors, matrices and ranges

- `frogs.vector`: `Vector` has any number of components, with element-wise
  `+`, `-`, `*` and `/` and scaling by a scalar. It also has `concat`,
  `normalized` and the `x`, `y`, `z`, `w` accessors. The module provides
  `vec(...)`, which builds a 2- to 4-component vector from components and
  smaller vectors, plus `hypot`, `dist` and `dot`.
- `frogs.matrix`: `Matrix(rows, cols, values)`, `Mat2`, `Mat3` and `Mat4`.
  A square matrix starts as the identity. `Mat4.rotate`, `scale` and
  `translate` apply each transform after the ones already in the matrix.
  `translate` takes distances in metres or plain numbers. If you multiply a
  `Mat4` by a 2- or 3-component vector, it fills in `z = 0` and `w = 1`.
- `frogs.ranges`: `Range(stop)`, `Range(start, stop)` and
  `Range(start, stop, step)` work over numbers or quantities.
  - Iteration yields values below `stop`.
  - `in` tests the closed interval between the two bounds.
  - `overlap` tells whether two ranges share a value, and `interpolate`
    blends two values.

## Geometry

`frogs.geom` has two classes and two functions:

- `Line2D` is a segment whose coordinates are distances. It has `dx`, `dy`,
  `angle`, `length`, `rotate`, `set_angle`, `scale` and `set_length`. It
  rotates and scales about its first point.
- `Shape2D` is an ordered list of 2D points. Use `append` to add a point or
  another whole shape.
- `intersect(l0, l1)` returns `(hit, point)`. `point` is where the two lines
  cross. `hit` tells whether that point lies within the bounding boxes of
  both segments.
- `is_left(point, line)` tells whether a point lies to the left of a line.

You can multiply a matrix by a `Line2D` or a `Shape2D` to transform it.

## Expressions and differentiation

`frogs.expressions.Var` is a named variable that stays live. Operators and
the functions `absolute`, `sqrt`, `sqr`, `cube`, `cos`, `sin`, `tan`, `acos`,
`asin`, `atan` and `atan2` build an expression tree. `value` evaluates the
tree with the variables' current values. `str` shows the tree itself. A
`Var` also supports `set`, `+=`, `-=`, `*=` and `/=`.

`frogs.diff.diff(expr, var)` returns the derivative with respect to `var`,
per unit of `var`:

```python
from frogs.expressions import Var, value
from frogs.diff import diff

t = Var(0.0, "t")
distance = 0.2 * t * t + 10 * t + 20
velocity = diff(distance, t)

t.set(3.0)
print(distance)          # the expression itself
print(value(velocity))   # its value at t = 3
```

### Limits of differentiation

- `diff` handles only one variable. It raises `ValueError` if `expr`
  contains any other `Var`.
- It has rules for `+`, `-`, `*`, `/`, unary `-` and `+`, `cos`, `sin`,
  `tan`, `sqrt`, `sqr` and `cube`.
- Expressions that use `absolute`, `acos`, `asin`, `atan` or `atan2` raise
  `TypeError`.

## Demonstrations

The `frogs-demo` command runs worked examples. Give it one of `units`,
`expressions`, `differentiation`, `vectors` or `matrix` to run that example,
or `all` to run them all. `all` is the default.

```
frogs-demo
frogs-demo differentiation
```