"""Scalar measures used by the triangle solver.

Both measures treat a value of ``0`` as *unknown*.  A literal zero-degree angle
or zero-length side is therefore indistinguishable from an unset slot, which is
fine for triangles: no vertex of a real triangle is ever 0° and no side is ever
0 long.
"""

from __future__ import annotations

import math
from functools import total_ordering
from typing import Optional, Union

Number = Union[int, float]


class MeasureDivisionError(ZeroDivisionError):
    """Raised when a measure is divided by a zero-valued measure or number."""


def _plain(value: object, kind: type) -> float:
    if isinstance(value, kind):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    raise TypeError(f"expected {kind.__name__} or number, got {type(value).__name__}")


@total_ordering
class Angle:
    """Angular measure stored in degrees with a synchronised radians view."""

    __slots__ = ("_deg", "_rad")

    def __init__(self, degrees: Optional[Number] = None) -> None:
        self._deg = 0.0
        self._rad = 0.0
        if degrees is not None:
            self.degrees = degrees

    @property
    def degrees(self) -> float:
        return self._deg

    @degrees.setter
    def degrees(self, value: Number) -> None:
        self._deg = float(value)
        self._rad = math.radians(self._deg)

    @property
    def radians(self) -> float:
        return self._rad

    @radians.setter
    def radians(self, value: Number) -> None:
        self._rad = float(value)
        self._deg = math.degrees(self._rad)

    @property
    def is_empty(self) -> bool:
        return self._deg == 0

    def clear(self) -> None:
        self.degrees = 0.0

    def copy(self) -> "Angle":
        return Angle(self._deg)

    def add_degrees(self, other: Union["Angle", Number]) -> float:
        return self._deg + _plain(other, Angle)

    def subtract_degrees(self, other: Union["Angle", Number]) -> float:
        return self._deg - _plain(other, Angle)

    def divided_by(self, other: Union["Angle", Number]) -> float:
        divisor = _plain(other, Angle)
        if divisor == 0:
            if isinstance(other, Angle):
                raise MeasureDivisionError("cannot divide by an Angle of zero degrees")
            raise MeasureDivisionError("cannot divide by zero")
        return self._deg / divisor

    def __float__(self) -> float:
        return self._deg

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Angle):
            return self._deg == other._deg
        if isinstance(other, (int, float)):
            return self._deg == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Angle):
            return self._deg < other._deg
        if isinstance(other, (int, float)):
            return self._deg < other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._deg)

    def __str__(self) -> str:
        return f"{self._deg:.2f}"

    def __repr__(self) -> str:
        return f"Angle(degrees={self._deg!r})"


@total_ordering
class Length:
    """Non-negative linear measure with a derived squared view."""

    __slots__ = ("_value",)

    def __init__(self, value: Optional[Number] = None) -> None:
        self._value = 0.0
        if value is not None:
            self.value = value

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, value: Number) -> None:
        value = float(value)
        if value < 0:
            raise ValueError(f"length must be non-negative, got {value!r}")
        self._value = value

    @property
    def squared(self) -> float:
        return self._value ** 2

    @squared.setter
    def squared(self, value: Number) -> None:
        # law-of-cosines noise can push a near-zero square slightly negative
        self.value = math.sqrt(max(float(value), 0.0))

    @property
    def is_empty(self) -> bool:
        return self._value == 0

    def clear(self) -> None:
        self._value = 0.0

    def copy(self) -> "Length":
        return Length(self._value)

    def add(self, other: Union["Length", Number]) -> float:
        return self._value + _plain(other, Length)

    def divided_by(self, other: Union["Length", Number]) -> float:
        divisor = _plain(other, Length)
        if divisor == 0:
            if isinstance(other, Length):
                raise MeasureDivisionError("cannot divide by a Length of zero")
            raise MeasureDivisionError("cannot divide by zero")
        return self._value / divisor

    def __float__(self) -> float:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Length):
            return self._value == other._value
        if isinstance(other, (int, float)):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Length):
            return self._value < other._value
        if isinstance(other, (int, float)):
            return self._value < other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return f"{self._value:.2f}"

    def __repr__(self) -> str:
        return f"Length(value={self._value!r})"


__all__ = ["Angle", "Length", "MeasureDivisionError"]
