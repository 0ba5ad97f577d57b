"""Scalar and two-dimensional position value types."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterator, Tuple, Union

Coordinate = float


@dataclass(frozen=True, eq=False)
class Position:
    """A location in the plane.

    Equality is exact componentwise float equality.  A position with a NaN
    coordinate therefore never equals anything, itself included.  Positions
    have no ordering; sort with :func:`lexicographic_key` when needed.
    """

    x: Coordinate
    y: Coordinate

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def coerce(cls, value: "PositionLike") -> "Position":
        if isinstance(value, Position):
            return value
        x, y = value  # type: ignore[misc]
        return cls(x, y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: "Position") -> "Position":
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Position") -> "Position":
        return Position(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Position":
        return Position(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __repr__(self) -> str:
        return f"Position({self.x!r}, {self.y!r})"

    @staticmethod
    def cross(a: "Position", b: "Position") -> float:
        return a.x * b.y - a.y * b.x

    @staticmethod
    def dot(a: "Position", b: "Position") -> float:
        return a.x * b.x + a.y * b.y

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


PositionLike = Union[Position, Tuple[float, float], Any]


def lexicographic_key(position: Position) -> Tuple[float, float]:
    """Sort key ordering positions by x, then y."""

    return (position.x, position.y)


__all__ = ["Coordinate", "Position", "PositionLike", "lexicographic_key"]
