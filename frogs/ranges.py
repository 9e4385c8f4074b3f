"""Stepped ranges over numbers or quantities, with membership and overlap."""

from __future__ import annotations

from typing import Any, Iterator

from .primitives import one, zero


class Range:
    """A range from ``start`` towards ``stop`` in increments of ``step``.

    ``Range(stop)`` starts at zero; ``Range(start, stop)`` steps by one unit,
    negated when ``start`` is above ``stop``.  Iteration yields values below
    ``stop`` only, so a range whose ``stop`` is not above ``start`` is empty.
    Membership covers the closed interval between the two bounds.
    """

    __slots__ = ("start", "stop", "step")

    def __init__(self, first: Any, second: Any = None, step: Any = None) -> None:
        if second is None:
            if step is not None:
                raise TypeError("a step needs both a start and a stop")
            self.start = zero(first)
            self.stop = first
        else:
            self.start = first
            self.stop = second
        if step is None:
            step = one(self.stop)
            if self.start > self.stop:
                step = -step
        self.step = step

    def __iter__(self) -> Iterator[Any]:
        current = self.start
        while current < self.stop:
            yield current
            current = current + self.step

    def __contains__(self, value: Any) -> bool:
        low = min(self.start, self.stop)
        high = max(self.start, self.stop)
        return low <= value <= high

    def __repr__(self) -> str:
        return f"Range({self.start!r}, {self.stop!r}, {self.step!r})"


def overlap(a: Range, b: Range) -> bool:
    """Whether two ranges share any value."""
    return a.start in b or a.stop in b or b.start in a or b.stop in a


def interpolate(a: Any, b: Any, ratio: float) -> Any:
    """The value ``ratio`` of the way from ``a`` to ``b``."""
    return a * (1.0 - ratio) + b * ratio