"""Command-line demonstrations of quantities, expressions, derivatives,
vectors and matrices."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence, TextIO

from . import expressions, units
from .diff import diff
from .expressions import Var, value
from .geom import Shape2D
from .matrix import Mat4
from .ranges import Range
from .vector import hypot, vec


def _stream(out: Optional[TextIO]) -> TextIO:
    return sys.stdout if out is None else out


def _banner(out: TextIO, text: str) -> None:
    middle = f"* {text} *"
    stars = "*" * len(middle)
    print(stars, file=out)
    print(middle, file=out)
    print(stars, file=out)
    print(file=out)


def _num(x: float) -> str:
    return f"{x:g}"


def units_demo(out: Optional[TextIO] = None) -> None:
    """Show physical quantities and unit conversions."""
    out = _stream(out)
    _banner(out, "This example shows how to use physical quantities")

    d = units.km(20)
    t = units.minutes(30)
    print("Declared distance and time variables:", file=out)
    print(f"d = {d}", file=out)
    print(f"t = {t}", file=out)

    v = d / t
    print("Dividing distance by time should give a velocity:", file=out)
    print(f"v = {v}", file=out)

    print("Converting them to different units:", file=out)
    print(f"t in minutes = {_num(t.to(units.minutes))}", file=out)
    print(f"t in seconds = {_num(t.to(units.sec))}", file=out)
    print(f"t in milliseconds = {_num(t.to(units.msec))}", file=out)
    print(f"d in meters = {_num(d.to(units.m))}", file=out)
    print(f"d in inches = {_num(d.to(units.inch))}", file=out)
    print(f"d in miles = {_num(d.to(units.miles))}", file=out)
    print(f"v in kmph = {_num(v.to(units.kmph))}", file=out)
    print(f"v in mps = {_num(v.to(units.mps))}", file=out)
    print(f"v in mph = {_num(v.to(units.mph))}", file=out)


def expressions_demo(out: Optional[TextIO] = None) -> None:
    """Show expressions that follow changes to their variables."""
    out = _stream(out)
    _banner(out, "This example shows how to use mathematical expressions")

    x = Var(units.m(2000), "x")
    y = Var(units.m(2000), "y")
    t = Var(units.minutes(20), "t")
    print(f"x = {value(x)}", file=out)
    print(f"y = {value(y)}", file=out)
    print(f"t = {value(t)}", file=out)

    distance = expressions.sqrt(x * x + y * y)
    velocity = distance / t
    angle = expressions.atan2(y, x)
    velocity_x = expressions.cos(angle) * distance
    velocity_y = expressions.sin(angle) * distance

    def report() -> None:
        print(f"Velocity now = {value(velocity)}", file=out)
        print(f"Angle now = {value(angle)}", file=out)
        print(
            f"Velocity (x,y) = {value(velocity_x)}, {value(velocity_y)}", file=out
        )

    report()

    x += units.m(250)
    y -= units.m(60)
    t *= 1.5
    print("After that change:", file=out)
    report()

    print(f"Velocity expression = {velocity}", file=out)
    print(f"Angle expression = {angle}", file=out)
    print(f"Velocity_x = {velocity_x}", file=out)
    print(f"Velocity_y = {velocity_y}", file=out)


def differentiation_demo(out: Optional[TextIO] = None) -> None:
    """Show symbolic derivatives of a distance formula."""
    out = _stream(out)
    _banner(out, "This example shows how to differentiate expressions")

    t = Var(units.sec(0), "myTime")
    distance = units.mps2(0.2) * t * t + units.mps(10) * t + units.m(20)
    velocity = diff(distance, t)
    acceleration = diff(velocity, t)

    print("The formulas are:", file=out)
    print(f"distance = {distance}", file=out)
    print(f"velocity = {velocity}", file=out)
    print(f"acceleration = {acceleration}", file=out)
    print(file=out)

    print("Printing several values:", file=out)
    for current in Range(units.sec(5)):
        t.set(current)
        print(f"distance({value(t)}) = {value(distance)}", file=out)
        print(f"velocity({value(t)}) = {value(velocity)}", file=out)
        print(f"acceleration({value(t)}) = {value(acceleration)}", file=out)


def vectors_demo(out: Optional[TextIO] = None) -> None:
    """Show vectors of distances and velocities."""
    out = _stream(out)
    _banner(out, "This example shows how to use vectors")

    point0 = vec(units.m(10), units.m(10), units.m(10))
    point1 = vec(units.m(20), units.m(30), units.m(40))
    delta = point1 - point0
    duration = units.sec(0.5)
    velocities = delta / duration
    velocity = hypot(delta) / duration

    print(
        f"From {point0} to {point1} in {duration} is {velocity} {velocities}",
        file=out,
    )


def matrix_demo(out: Optional[TextIO] = None) -> None:
    """Show a shape transformed by a 4x4 matrix."""
    out = _stream(out)
    _banner(out, "This example shows how to use matrices")

    shape = Shape2D()
    shape.append(vec(units.m(1), units.m(1)))
    shape.append(vec(units.m(-1), units.m(1)))
    shape.append(vec(units.m(-1), units.m(-1)))
    shape.append(vec(units.m(1), units.m(-1)))

    print("Shape before transformation:", file=out)
    print(shape, file=out)

    # Operations apply in the order they are called: rotate, scale, translate.
    mat = Mat4()
    mat.rotate(units.deg(45), 0.0, 0.0, 1.0)
    mat.scale(2.0)
    mat.translate(units.m(50), units.m(50))

    print("The transformation matrix:", file=out)
    print(mat, file=out)

    print("Shape after transformation:", file=out)
    print(mat * shape, file=out)


_DEMOS: dict[str, Callable[[Optional[TextIO]], None]] = {
    "units": units_demo,
    "expressions": expressions_demo,
    "differentiation": differentiation_demo,
    "vectors": vectors_demo,
    "matrix": matrix_demo,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one demonstration by name, or all of them."""
    parser = argparse.ArgumentParser(
        prog="frogs", description="Demonstrations of physical quantities and expressions."
    )
    parser.add_argument(
        "demo",
        nargs="?",
        choices=[*_DEMOS, "all"],
        default="all",
        help="which demonstration to run (default: all)",
    )
    args = parser.parse_args(argv)
    names = list(_DEMOS) if args.demo == "all" else [args.demo]
    first = True
    for name in names:
        if not first:
            print(file=sys.stdout)
        first = False
        _DEMOS[name](sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())