"""Physical quantities: real values tagged with a kind of measure and a power.

A quantity stores its value in the base unit of its kind.  Quantities of the
same kind multiply and divide by adding and subtracting powers.  Products and
quotients of different kinds resolve through registered conversion rules; when
no rule applies they are kept as an unresolved ``UnitsProduct`` or
``UnitsQuotient`` until a later operation cancels one of the factors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Tuple

from .primitives import sqrt as _root
from .primitives import to_str

_NUMBERS = (int, float)


@dataclass(frozen=True)
class Kind:
    """A kind of physical measure and the name of its base unit."""

    name: str
    symbol: str


Signature = Tuple[Kind, int]


@dataclass(frozen=True)
class UnitDef:
    """A named unit: a kind, a power and the size of the unit in base units."""

    kind: Kind
    power: int
    symbol: str
    scale: float

    @property
    def signature(self) -> Signature:
        return (self.kind, self.power)

    def __call__(self, value: float) -> Quantity:
        """Create a quantity of ``value`` of this unit."""
        return Quantity(self.kind, self.power, float(value) * self.scale)

    def __rmul__(self, value: Any) -> Quantity:
        if not isinstance(value, _NUMBERS):
            return NotImplemented
        return self(value)


_BinaryRule = Callable[["Quantity", "Quantity"], "Quantity"]
_TernaryRule = Callable[["Quantity", "Quantity", "Quantity"], "Quantity"]

_BINARY: Dict[Tuple[str, Signature, Signature], _BinaryRule] = {}
_COMPOUND: Dict[Tuple[str, Signature, Signature, Signature], _TernaryRule] = {}


def _incompatible(op: str, a: Any, b: Any) -> TypeError:
    return TypeError(f"cannot apply {op!r} to {a!r} and {b!r}")


@dataclass(frozen=True, eq=False)
class Quantity:
    """A value of some kind of measure raised to a power, held in base units."""

    kind: Kind
    power: int
    value: float = 0.0

    @property
    def signature(self) -> Signature:
        return (self.kind, self.power)

    def _check(self, other: Quantity, op: str) -> None:
        if self.signature != other.signature:
            raise _incompatible(op, self, other)

    def to(self, unit: UnitDef) -> float:
        """The value expressed in ``unit``."""
        if unit.signature != self.signature:
            raise TypeError(
                f"cannot express {self.kind.name}^{self.power} in {unit.symbol}"
            )
        return self.value / unit.scale

    def one(self) -> Quantity:
        """One base unit of the same kind and power."""
        return Quantity(self.kind, self.power, 1.0)

    def zero(self) -> Quantity:
        """Zero of the same kind and power."""
        return Quantity(self.kind, self.power, 0.0)

    def sqrt(self) -> Quantity:
        """Square root; defined for powers 2, 4, 6 and 8."""
        if self.power not in (2, 4, 6, 8):
            raise TypeError(
                f"no square root for {self.kind.name} to the power {self.power}"
            )
        return Quantity(self.kind, self.power // 2, _root(self.value))

    def __add__(self, other: Any) -> Quantity:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._check(other, "+")
        return Quantity(self.kind, self.power, self.value + other.value)

    def __sub__(self, other: Any) -> Quantity:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._check(other, "-")
        return Quantity(self.kind, self.power, self.value - other.value)

    def __neg__(self) -> Quantity:
        return Quantity(self.kind, self.power, -self.value)

    def __pos__(self) -> Quantity:
        return self

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, _NUMBERS):
            return Quantity(self.kind, self.power, self.value * other)
        if isinstance(other, Quantity):
            return _multiply(self, other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Any:
        if isinstance(other, _NUMBERS):
            return Quantity(self.kind, self.power, other * self.value)
        return NotImplemented

    def __truediv__(self, other: Any) -> Any:
        if isinstance(other, _NUMBERS):
            return Quantity(self.kind, self.power, self.value / other)
        if isinstance(other, Quantity):
            return _divide(self, other)
        return NotImplemented

    def __rtruediv__(self, other: Any) -> Any:
        if isinstance(other, _NUMBERS):
            return Quantity(self.kind, -self.power, other / self.value)
        return NotImplemented

    def __abs__(self) -> Quantity:
        return -self if self.value < 0 else self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.signature == other.signature and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.kind, self.power, self.value))

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._check(other, "<")
        return self.value < other.value

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._check(other, "<=")
        return self.value <= other.value

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._check(other, ">")
        return self.value > other.value

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._check(other, ">=")
        return self.value >= other.value

    def __str__(self) -> str:
        suffix = "" if self.power == 1 else str(self.power)
        return f"{to_str(self.value)} {self.kind.symbol}{suffix}"


def _multiply(a: Quantity, b: Quantity) -> Any:
    rule = _BINARY.get(("*", a.signature, b.signature))
    if rule is not None:
        return rule(a, b)
    if a.kind == b.kind:
        return Quantity(a.kind, a.power + b.power, a.value * b.value)
    return UnitsProduct(a, b)


def _divide(a: Quantity, b: Quantity) -> Any:
    rule = _BINARY.get(("/", a.signature, b.signature))
    if rule is not None:
        return rule(a, b)
    if a.kind == b.kind:
        if a.power == b.power:
            return a.value / b.value
        return Quantity(a.kind, a.power - b.power, a.value / b.value)
    return UnitsQuotient(a, b)


@dataclass(frozen=True)
class UnitsProduct:
    """An unresolved product of two quantities of different kinds."""

    left: Quantity
    right: Quantity

    def __truediv__(self, other: Any) -> Any:
        if isinstance(other, Quantity):
            rule = _COMPOUND.get(
                ("product/", self.left.signature, self.right.signature, other.signature)
            )
            if rule is not None:
                return rule(self.left, self.right, other)
            if self.right.signature == other.signature:
                return self.left * (self.right / other)
            if self.left.signature == other.signature:
                return self.right * (self.left / other)
            if self.right.kind == other.kind:
                return self.left * (self.right / other)
            if self.left.kind == other.kind:
                return self.right * (self.left / other)
            raise _incompatible("/", self, other)
        if isinstance(other, UnitsProduct):
            if self.right.signature == other.left.signature:
                return (self.right / other.left) * (self.left / other.right)
            if self.right.signature == other.right.signature:
                return (self.right / other.right) * (self.left / other.left)
            raise _incompatible("/", self, other)
        return NotImplemented

    def __mul__(self, other: Any) -> Any:
        if not isinstance(other, UnitsQuotient):
            return NotImplemented
        num, den = other.numerator, other.denominator
        if (
            self.left.signature == num.signature
            and self.right.signature == den.signature
        ):
            return (num * self.left) * (self.right / den)
        if self.right.signature == den.signature:
            return (self.right / den) * (self.left * num)
        if self.left.signature == den.signature:
            return (self.left / den) * (self.right * num)
        raise _incompatible("*", self, other)


@dataclass(frozen=True)
class UnitsQuotient:
    """An unresolved quotient of two quantities of different kinds."""

    numerator: Quantity
    denominator: Quantity

    def __mul__(self, other: Any) -> Any:
        num, den = self.numerator, self.denominator
        if isinstance(other, Quantity):
            rule = _COMPOUND.get(
                ("quotient*", num.signature, den.signature, other.signature)
            )
            if rule is not None:
                return rule(num, den, other)
            if other.signature == den.signature:
                return num * (other / den)
            raise _incompatible("*", self, other)
        if isinstance(other, UnitsProduct):
            if other.right.signature == den.signature:
                return (other.right / den) * (other.left * num)
            if other.left.signature == den.signature:
                return (other.left / den) * (other.right * num)
            raise _incompatible("*", self, other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Any:
        if not isinstance(other, Quantity):
            return NotImplemented
        num, den = self.numerator, self.denominator
        rule = _COMPOUND.get(
            ("*quotient", other.signature, num.signature, den.signature)
        )
        if rule is not None:
            return rule(other, num, den)
        if other.signature == den.signature:
            return num * (other / den)
        raise _incompatible("*", other, self)


def register_product(
    result_kind: Kind, result_power: int, left_unit: UnitDef, right_unit: UnitDef
) -> None:
    """Make ``left * right`` (in either order) produce ``result_kind``.

    The result's base value is the product of the operands expressed in the
    given units.
    """

    def forward(a: Quantity, b: Quantity) -> Quantity:
        return Quantity(result_kind, result_power, a.to(left_unit) * b.to(right_unit))

    def backward(b: Quantity, a: Quantity) -> Quantity:
        return Quantity(result_kind, result_power, b.to(right_unit) * a.to(left_unit))

    _BINARY[("*", left_unit.signature, right_unit.signature)] = forward
    _BINARY[("*", right_unit.signature, left_unit.signature)] = backward


def register_quotient(
    result_kind: Kind, result_power: int, left_unit: UnitDef, right_unit: UnitDef
) -> None:
    """Make ``left / right`` produce ``result_kind``."""

    def rule(a: Quantity, b: Quantity) -> Quantity:
        return Quantity(result_kind, result_power, a.to(left_unit) / b.to(right_unit))

    _BINARY[("/", left_unit.signature, right_unit.signature)] = rule


def register_ab_div_c(
    result_kind: Kind,
    result_power: int,
    a_unit: UnitDef,
    b_unit: UnitDef,
    c_unit: UnitDef,
) -> None:
    """Make ``a * b / c`` produce ``result_kind`` whichever way it is grouped."""
    a_sig, b_sig, c_sig = a_unit.signature, b_unit.signature, c_unit.signature

    def make(value: float) -> Quantity:
        return Quantity(result_kind, result_power, value)

    _COMPOUND[("product/", a_sig, b_sig, c_sig)] = lambda a, b, c: make(
        (a.to(a_unit) * b.to(b_unit)) / c.to(c_unit)
    )
    _COMPOUND[("product/", b_sig, a_sig, c_sig)] = lambda b, a, c: make(
        (b.to(b_unit) * a.to(a_unit)) / c.to(c_unit)
    )
    _COMPOUND[("*quotient", a_sig, b_sig, c_sig)] = lambda a, b, c: make(
        a.to(a_unit) * (b.to(b_unit) / c.to(c_unit))
    )
    _COMPOUND[("*quotient", b_sig, a_sig, c_sig)] = lambda b, a, c: make(
        b.to(b_unit) * (a.to(a_unit) / c.to(c_unit))
    )
    _COMPOUND[("quotient*", b_sig, c_sig, a_sig)] = lambda b, c, a: make(
        (b.to(b_unit) / c.to(c_unit)) * a.to(a_unit)
    )
    _COMPOUND[("quotient*", a_sig, c_sig, b_sig)] = lambda a, c, b: make(
        (a.to(a_unit) / c.to(c_unit)) * b.to(b_unit)
    )