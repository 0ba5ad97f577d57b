from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterator, Optional

from ..primitives import Envelope, Position, PositionLike


def _scale_position(
    position: Position, fx: float, fy: Optional[float], origin: Optional[PositionLike]
) -> Position:
    o = Position.coerce(origin) if origin is not None else Position(0.0, 0.0)
    sy = fx if fy is None else fy
    return Position(o.x + (position.x - o.x) * fx, o.y + (position.y - o.y) * sy)


@dataclass(frozen=True)
class Point:
    position: Position

    kind: ClassVar[str] = "Point"
    geometry_type: ClassVar[str] = "Point"
    dimension: ClassVar[int] = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", Position.coerce(self.position))

    @classmethod
    def from_xy(cls, x: float, y: float) -> "Point":
        return cls(Position(x, y))

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    def positions(self) -> Iterator[Position]:
        yield self.position

    def envelope(self) -> Envelope:
        return Envelope.from_position(self.position)

    def is_empty(self) -> bool:
        return False

    def translate(self, dx: float, dy: float) -> "Point":
        return Point(self.position + Position(dx, dy))

    def scale(self, fx: float, fy: Optional[float] = None, origin: Optional[PositionLike] = None) -> "Point":
        return Point(_scale_position(self.position, fx, fy, origin))


__all__ = ["Point"]
