"""The physical kinds, their units, the rules that convert between them,
and the trigonometric and time helpers built on them."""

from __future__ import annotations

import math
from typing import Any

from .primitives import PI
from .quantity import (
    Kind,
    Quantity,
    UnitDef,
    register_ab_div_c,
    register_product,
    register_quotient,
)

DISTANCE = Kind("Distance", "meters")
ANGLE = Kind("Angle", "rad")
TIME = Kind("Time", "seconds")
VELOCITY = Kind("Velocity", "m/s")
ACCELERATION = Kind("Acceleration", "m/s2")
MASS = Kind("Mass", "kg")
MASS_FLOW = Kind("MassFlow", "g/s")
MOMENTUM = Kind("Momentum", "g*m/s")
FORCE = Kind("Force", "N")
ENERGY = Kind("Energy", "J")
POWER = Kind("Power", "W")
PIXELS = Kind("Pixels", "px")
DPI = Kind("Dpi", "dpi")

# Distance, area and volume
m = UnitDef(DISTANCE, 1, "m", 1.0)
cm = UnitDef(DISTANCE, 1, "cm", 1.0e-2)
mm = UnitDef(DISTANCE, 1, "mm", 1.0e-3)
um = UnitDef(DISTANCE, 1, "um", 1.0e-6)
nm = UnitDef(DISTANCE, 1, "nm", 1.0e-9)
km = UnitDef(DISTANCE, 1, "km", 1.0e3)
inch = UnitDef(DISTANCE, 1, "inch", 0.0254)
ft = UnitDef(DISTANCE, 1, "ft", 0.3048)
miles = UnitDef(DISTANCE, 1, "miles", 1609.344)
yd = UnitDef(DISTANCE, 1, "yd", 0.914444)

m2 = UnitDef(DISTANCE, 2, "m2", m.scale * m.scale)
cm2 = UnitDef(DISTANCE, 2, "cm2", cm.scale * cm.scale)
mm2 = UnitDef(DISTANCE, 2, "mm2", mm.scale * mm.scale)
um2 = UnitDef(DISTANCE, 2, "um2", um.scale * um.scale)
nm2 = UnitDef(DISTANCE, 2, "nm2", nm.scale * nm.scale)
km2 = UnitDef(DISTANCE, 2, "km2", km.scale * km.scale)
inch2 = UnitDef(DISTANCE, 2, "inch2", inch.scale * inch.scale)
ft2 = UnitDef(DISTANCE, 2, "ft2", ft.scale * ft.scale)
miles2 = UnitDef(DISTANCE, 2, "miles2", miles.scale * miles.scale)
yd2 = UnitDef(DISTANCE, 2, "yd2", yd.scale * yd.scale)
acre = UnitDef(DISTANCE, 2, "acre", 4047.0)

m3 = UnitDef(DISTANCE, 3, "m3", m2.scale * m.scale)
cm3 = UnitDef(DISTANCE, 3, "cm3", cm2.scale * cm.scale)
mm3 = UnitDef(DISTANCE, 3, "mm3", mm2.scale * mm.scale)
um3 = UnitDef(DISTANCE, 3, "um3", um2.scale * um.scale)
nm3 = UnitDef(DISTANCE, 3, "nm3", nm2.scale * nm.scale)
km3 = UnitDef(DISTANCE, 3, "km3", km2.scale * km.scale)
inch3 = UnitDef(DISTANCE, 3, "inch3", inch2.scale * inch.scale)
ft3 = UnitDef(DISTANCE, 3, "ft3", ft2.scale * ft.scale)
miles3 = UnitDef(DISTANCE, 3, "miles3", miles2.scale * miles.scale)
yd3 = UnitDef(DISTANCE, 3, "yd3", yd2.scale * yd.scale)
l = UnitDef(DISTANCE, 3, "l", 1e-3)  # noqa: E741
ml = UnitDef(DISTANCE, 3, "ml", 1e-6)
gal = UnitDef(DISTANCE, 3, "gal", 3.78541e-3)

# Angle
rad = UnitDef(ANGLE, 1, "rad", 1.0)
deg = UnitDef(ANGLE, 1, "deg", PI / 180.0)

# Time and frequency
hours = UnitDef(TIME, 1, "hours", 3600.0)
minutes = UnitDef(TIME, 1, "minutes", 60.0)
sec = UnitDef(TIME, 1, "sec", 1.0)
msec = UnitDef(TIME, 1, "msec", 1.0e-3)
usec = UnitDef(TIME, 1, "usec", 1.0e-6)
nsec = UnitDef(TIME, 1, "nsec", 1.0e-9)
sec2 = UnitDef(TIME, 2, "sec2", 1.0)
Hz = UnitDef(TIME, -1, "Hz", 1.0)
fps = UnitDef(TIME, -1, "fps", 1.0)
Hz2 = UnitDef(TIME, -2, "Hz2", 1.0)

# Velocity
kmph = UnitDef(VELOCITY, 1, "kmph", 1.0 / 3.6)
mph = UnitDef(VELOCITY, 1, "mph", 0.44704)
mps = UnitDef(VELOCITY, 1, "mps", 1.0)

# Acceleration
mps2 = UnitDef(ACCELERATION, 1, "mps2", 1.0)
mmps2 = UnitDef(ACCELERATION, 1, "mmps2", 1.0e-3)
umps2 = UnitDef(ACCELERATION, 1, "umps2", 1.0e-6)
nmps2 = UnitDef(ACCELERATION, 1, "nmps2", 1.0e-9)

# Mass (held in grams)
kg = UnitDef(MASS, 1, "kg", 1.0e3)
g = UnitDef(MASS, 1, "g", 1.0)
mg = UnitDef(MASS, 1, "mg", 1.0e-3)
ug = UnitDef(MASS, 1, "ug", 1.0e-6)
ng = UnitDef(MASS, 1, "ng", 1.0e-9)
lb = UnitDef(MASS, 1, "lb", 453.59)
oz = UnitDef(MASS, 1, "oz", 28.350)

# Mass flow
gps = UnitDef(MASS_FLOW, 1, "gps", 1.0)
kgps = UnitDef(MASS_FLOW, 1, "kgps", 1.0e3)

# Momentum
kgmps = UnitDef(MOMENTUM, 1, "kgmps", 1.0e3)
gmps = UnitDef(MOMENTUM, 1, "gmps", 1.0)

# Force
N = UnitDef(FORCE, 1, "N", 1.0)

# Energy
J = UnitDef(ENERGY, 1, "J", 1.0)
kJ = UnitDef(ENERGY, 1, "kJ", 1.0e3)
MJ = UnitDef(ENERGY, 1, "MJ", 1.0e6)
GJ = UnitDef(ENERGY, 1, "GJ", 1.0e9)
mJ = UnitDef(ENERGY, 1, "mJ", 1.0e-3)
uJ = UnitDef(ENERGY, 1, "uJ", 1.0e-6)
nJ = UnitDef(ENERGY, 1, "nJ", 1.0e-9)
kWh = UnitDef(ENERGY, 1, "kWh", 3.6e6)
cal = UnitDef(ENERGY, 1, "cal", 4.184)
kcal = UnitDef(ENERGY, 1, "kcal", 4.184e3)

# Power
GW = UnitDef(POWER, 1, "GW", 1.0e9)
MW = UnitDef(POWER, 1, "MW", 1.0e6)
kW = UnitDef(POWER, 1, "kW", 1.0e3)
W = UnitDef(POWER, 1, "W", 1.0)
mW = UnitDef(POWER, 1, "mW", 1.0e-3)
uW = UnitDef(POWER, 1, "uW", 1.0e-6)

# Display
px = UnitDef(PIXELS, 1, "px", 1.0)
dpi = UnitDef(DPI, 1, "dpi", 1.0)

# Conversion rules between kinds
register_product(DISTANCE, 1, mps, sec)
register_quotient(VELOCITY, 1, m, sec)
register_product(VELOCITY, 1, mps2, sec)
register_quotient(ACCELERATION, 1, mps, sec)
register_quotient(ACCELERATION, 1, m, sec2)
register_product(ACCELERATION, 1, m, Hz2)
register_quotient(MASS_FLOW, 1, g, sec)
register_product(MOMENTUM, 1, g, mps)
register_product(MOMENTUM, 1, gps, m)
register_product(MOMENTUM, 1, N, m)
register_ab_div_c(MOMENTUM, 1, g, m, sec)
register_product(FORCE, 1, g, mps2)
register_quotient(FORCE, 1, gmps, sec)
register_quotient(POWER, 1, J, sec)
register_ab_div_c(POWER, 1, N, m, sec)
register_quotient(DPI, 1, px, inch)


def _radians(angle: Any) -> float:
    if not isinstance(angle, Quantity) or angle.signature != rad.signature:
        raise TypeError(f"expected an angle, got {angle!r}")
    return angle.to(rad)


def _angle(radians: float) -> Quantity:
    return rad(radians)


def cos(angle: Quantity) -> float:
    """Cosine of an angle."""
    return math.cos(_radians(angle))


def sin(angle: Quantity) -> float:
    """Sine of an angle."""
    return math.sin(_radians(angle))


def tan(angle: Quantity) -> float:
    """Tangent of an angle."""
    return math.tan(_radians(angle))


def acos(value: float) -> Quantity:
    """The angle whose cosine is ``value``."""
    return _angle(math.acos(value))


def asin(value: float) -> Quantity:
    """The angle whose sine is ``value``."""
    return _angle(math.asin(value))


def atan(value: float) -> Quantity:
    """The angle whose tangent is ``value``."""
    return _angle(math.atan(value))


def atan2(y: Any, x: Any) -> Quantity:
    """The angle of the point (x, y); both plain numbers or both of one kind."""
    if isinstance(y, (int, float)) and isinstance(x, (int, float)):
        return _angle(math.atan2(y, x))
    if (
        isinstance(y, Quantity)
        and isinstance(x, Quantity)
        and y.signature == x.signature
    ):
        return _angle(math.atan2(y.value, x.value))
    raise TypeError(f"cannot take atan2 of {y!r} and {x!r}")


def _seconds(time: Any) -> float:
    if not isinstance(time, Quantity) or time.signature != sec.signature:
        raise TypeError(f"expected a time, got {time!r}")
    return time.value


def msecs_part(time: Quantity) -> int:
    """The whole milliseconds past the last whole second."""
    seconds = _seconds(time)
    return int((seconds - int(seconds)) * 1000)


def secs_part(time: Quantity) -> int:
    """The whole seconds past the last whole minute."""
    return int(_seconds(time)) % 60


def mins_part(time: Quantity) -> int:
    """The whole minutes."""
    return int(_seconds(time)) // 60