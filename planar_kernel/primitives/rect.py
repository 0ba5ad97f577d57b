from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .position import Position, PositionLike


def _fmin(a: float, b: float) -> float:
    # NaN is absorbed whenever the other operand is a number.
    return float(np.fmin(a, b))


def _fmax(a: float, b: float) -> float:
    return float(np.fmax(a, b))


@dataclass(frozen=True)
class Rect:
    """Axis-aligned box with closed bounds ``min <= max`` on both axes."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self) -> None:
        for name in ("min_x", "min_y", "max_x", "max_y"):
            object.__setattr__(self, name, float(getattr(self, name)))
        if self.min_x > self.max_x:
            raise ValueError(f"min_x {self.min_x} is greater than max_x {self.max_x}")
        if self.min_y > self.max_y:
            raise ValueError(f"min_y {self.min_y} is greater than max_y {self.max_y}")

    @classmethod
    def from_corners(cls, p1: PositionLike, p2: PositionLike) -> "Rect":
        a = Position.coerce(p1)
        b = Position.coerce(p2)
        return cls(_fmin(a.x, b.x), _fmin(a.y, b.y), _fmax(a.x, b.x), _fmax(a.y, b.y))

    @classmethod
    def from_position(cls, position: PositionLike) -> "Rect":
        p = Position.coerce(position)
        return cls(p.x, p.y, p.x, p.y)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def center(self) -> Position:
        return Position((self.min_x + self.max_x) * 0.5, (self.min_y + self.max_y) * 0.5)

    def corners(self) -> Tuple[Position, Position, Position, Position]:
        """Corners counter-clockwise from the lower-left one."""

        return (
            Position(self.min_x, self.min_y),
            Position(self.max_x, self.min_y),
            Position(self.max_x, self.max_y),
            Position(self.min_x, self.max_y),
        )

    def union(self, other: "Rect") -> "Rect":
        return Rect(
            _fmin(self.min_x, other.min_x),
            _fmin(self.min_y, other.min_y),
            _fmax(self.max_x, other.max_x),
            _fmax(self.max_y, other.max_y),
        )

    def add_position(self, position: PositionLike) -> "Rect":
        return self.union(Rect.from_position(position))

    def intersects(self, other: "Rect") -> bool:
        return (
            self.min_x <= other.max_x
            and other.min_x <= self.max_x
            and self.min_y <= other.max_y
            and other.min_y <= self.max_y
        )

    def contains(self, other: "Rect") -> bool:
        return (
            self.min_x <= other.min_x
            and other.max_x <= self.max_x
            and self.min_y <= other.min_y
            and other.max_y <= self.max_y
        )

    def contains_position(self, position: PositionLike) -> bool:
        p = Position.coerce(position)
        return self.min_x <= p.x <= self.max_x and self.min_y <= p.y <= self.max_y


__all__ = ["Rect"]
