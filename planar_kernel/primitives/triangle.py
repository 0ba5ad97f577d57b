from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple

from .envelope import Envelope
from .position import Position, PositionLike

Orientation = Literal["ccw", "cw", "collinear"]


@dataclass(frozen=True)
class Triangle:
    a: Position
    b: Position
    c: Position

    def __post_init__(self) -> None:
        for name in ("a", "b", "c"):
            object.__setattr__(self, name, Position.coerce(getattr(self, name)))

    @classmethod
    def from_coords(cls, a: PositionLike, b: PositionLike, c: PositionLike) -> "Triangle":
        return cls(Position.coerce(a), Position.coerce(b), Position.coerce(c))

    def vertices(self) -> Tuple[Position, Position, Position]:
        return (self.a, self.b, self.c)

    def signed_area(self) -> float:
        """Twice the signed area; positive when ``a, b, c`` wind counter-clockwise."""

        return Position.cross(self.b - self.a, self.c - self.a)

    def area(self) -> float:
        return abs(self.signed_area()) * 0.5

    def is_collinear(self) -> bool:
        return self.signed_area() == 0

    def orientation(self) -> Orientation:
        twice_area = self.signed_area()
        if twice_area > 0:
            return "ccw"
        if twice_area < 0:
            return "cw"
        return "collinear"

    def envelope(self) -> Envelope:
        return Envelope.from_positions(self.vertices())


__all__ = ["Triangle", "Orientation"]
