"""Ordered paths of positions and closed rings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterable, Iterator, Optional, Sequence, Tuple

import numpy as np

from ..errors import TooFewPoints, UnclosedRing
from ..primitives import Envelope, Position, PositionLike, Segment
from .point import _scale_position

MIN_LINE_POSITIONS = 2
MIN_RING_POSITIONS = 4


def check_ring(vertices: Sequence[Position]) -> None:
    """Raise unless ``vertices`` is a closed ring of at least four positions."""

    if len(vertices) < MIN_RING_POSITIONS:
        raise TooFewPoints("ring", MIN_RING_POSITIONS, len(vertices))
    if not vertices[0] == vertices[-1]:
        raise UnclosedRing(vertices[0], vertices[-1])


@dataclass(frozen=True)
class LineString:
    """A path through two or more positions; order is significant."""

    vertices: Tuple[Position, ...]

    kind: ClassVar[str] = "LineString"
    geometry_type: ClassVar[str] = "LineString"
    dimension: ClassVar[int] = 1

    def __post_init__(self) -> None:
        vertices = tuple(Position.coerce(p) for p in self.vertices)
        if len(vertices) < MIN_LINE_POSITIONS:
            raise TooFewPoints("LineString", MIN_LINE_POSITIONS, len(vertices))
        object.__setattr__(self, "vertices", vertices)

    @classmethod
    def ring(cls, positions: Iterable[PositionLike]) -> "LineString":
        """Build a polygon ring; it is never closed or deduplicated on the caller's behalf."""

        vertices = tuple(Position.coerce(p) for p in positions)
        check_ring(vertices)
        return cls(vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.vertices)

    @property
    def num_points(self) -> int:
        return len(self.vertices)

    @property
    def start(self) -> Position:
        return self.vertices[0]

    @property
    def end(self) -> Position:
        return self.vertices[-1]

    @property
    def coords(self) -> np.ndarray:
        """Read-only ``(n, 2)`` array of the vertices."""

        arr = np.array([p.as_tuple() for p in self.vertices], dtype=float)
        arr.setflags(write=False)
        return arr

    def positions(self) -> Iterator[Position]:
        return iter(self.vertices)

    def segment(self, index: int) -> Segment:
        return Segment(self.vertices[index], self.vertices[index + 1])

    def segments(self) -> Iterator[Segment]:
        for a, b in zip(self.vertices, self.vertices[1:]):
            yield Segment(a, b)

    @property
    def num_segments(self) -> int:
        return len(self.vertices) - 1

    def is_closed(self) -> bool:
        return self.vertices[0] == self.vertices[-1]

    def is_ring(self) -> bool:
        return len(self.vertices) >= MIN_RING_POSITIONS and self.is_closed()

    def is_empty(self) -> bool:
        return False

    def envelope(self) -> Envelope:
        return Envelope.from_array(self.coords)

    def length(self) -> float:
        arr = self.coords
        return float(np.sum(np.hypot(np.diff(arr[:, 0]), np.diff(arr[:, 1]))))

    def signed_area(self) -> float:
        """Shoelace area of a ring, positive for counter-clockwise; 0 for open paths."""

        if not self.is_ring():
            return 0.0
        arr = self.coords
        x, y = arr[:, 0], arr[:, 1]
        return float(0.5 * np.sum(x[:-1] * y[1:] - x[1:] * y[:-1]))

    def is_ccw(self) -> bool:
        return self.signed_area() > 0

    def reversed(self) -> "LineString":
        return LineString(self.vertices[::-1])

    def translate(self, dx: float, dy: float) -> "LineString":
        offset = Position(dx, dy)
        return LineString(tuple(p + offset for p in self.vertices))

    def scale(
        self, fx: float, fy: Optional[float] = None, origin: Optional[PositionLike] = None
    ) -> "LineString":
        return LineString(tuple(_scale_position(p, fx, fy, origin) for p in self.vertices))


__all__ = ["LineString", "check_ring", "MIN_LINE_POSITIONS", "MIN_RING_POSITIONS"]
