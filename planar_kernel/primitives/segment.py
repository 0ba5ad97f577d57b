"""Line segments and exact segment/segment intersection."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal, Optional

from .envelope import Envelope
from .position import Position, PositionLike
from .rect import Rect

PositionLocation = Literal["left", "on", "right"]
IntersectionKind = Literal["none", "position", "segment"]


@dataclass(frozen=True)
class Segment:
    start: Position
    end: Position

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", Position.coerce(self.start))
        object.__setattr__(self, "end", Position.coerce(self.end))

    @classmethod
    def from_coords(cls, start: PositionLike, end: PositionLike) -> "Segment":
        return cls(Position.coerce(start), Position.coerce(end))

    @property
    def vector(self) -> Position:
        return self.end - self.start

    @property
    def midpoint(self) -> Position:
        return Position((self.start.x + self.end.x) * 0.5, (self.start.y + self.end.y) * 0.5)

    def length_squared(self) -> float:
        dx = self.end.x - self.start.x
        dy = self.end.y - self.start.y
        return dx * dx + dy * dy

    def length(self) -> float:
        return math.hypot(self.end.x - self.start.x, self.end.y - self.start.y)

    def is_degenerate(self) -> bool:
        return self.start == self.end

    def reversed(self) -> "Segment":
        return Segment(self.end, self.start)

    def bounds(self) -> Rect:
        return Rect.from_corners(self.start, self.end)

    def envelope(self) -> Envelope:
        return Envelope(self.bounds())

    def position_location(self, position: PositionLike) -> PositionLocation:
        """Side of the infinite carrier line on which ``position`` lies."""

        p = Position.coerce(position)
        test = Position.cross(self.end - self.start, p - self.start)
        if test > 0:
            return "left"
        if test == 0:
            return "on"
        return "right"

    def contains_position(self, position: PositionLike) -> bool:
        p = Position.coerce(position)
        if self.is_degenerate():
            return p == self.start
        return self.bounds().contains_position(p) and self.position_location(p) == "on"

    def parameter_of(self, position: Position) -> float:
        """Projection parameter of ``position`` along the segment (0 at start, 1 at end)."""

        if position == self.start:
            return 0.0
        if position == self.end:
            return 1.0
        d = self.vector
        return Position.dot(position - self.start, d) / Position.dot(d, d)

    def intersect_segment(self, other: "Segment") -> "SegmentIntersection":
        """Exact intersection of two closed segments.

        Touching at a single point is a ``position`` intersection; collinear
        overlap is a ``segment`` intersection whose end points are always
        taken from the inputs, never recomputed.
        """

        if self.is_degenerate():
            return SegmentIntersection.at(self.start) if other.contains_position(self.start) else _NONE
        if other.is_degenerate():
            return SegmentIntersection.at(other.start) if self.contains_position(other.start) else _NONE
        if self == other or self == other.reversed():
            return SegmentIntersection.overlap(self)
        if not self.bounds().intersects(other.bounds()):
            return _NONE

        da = self.vector
        db = other.vector
        if Position.cross(da, db) == 0:
            return self._intersect_parallel(other)

        d1 = Position.cross(da, other.start - self.start)
        d2 = Position.cross(da, other.end - self.start)
        d3 = Position.cross(db, self.start - other.start)
        d4 = Position.cross(db, self.end - other.start)

        if d1 == 0 and self.contains_position(other.start):
            return SegmentIntersection.at(other.start)
        if d2 == 0 and self.contains_position(other.end):
            return SegmentIntersection.at(other.end)
        if d3 == 0 and other.contains_position(self.start):
            return SegmentIntersection.at(self.start)
        if d4 == 0 and other.contains_position(self.end):
            return SegmentIntersection.at(self.end)

        if (d1 > 0) != (d2 > 0) and (d3 > 0) != (d4 > 0) and 0 not in (d1, d2, d3, d4):
            offset = other.start - self.start
            ta = Position.cross(offset, db) / Position.cross(da, db)
            return SegmentIntersection.at(self.start + da * ta)
        return _NONE

    def _intersect_parallel(self, other: "Segment") -> "SegmentIntersection":
        if self.position_location(other.start) != "on":
            return _NONE
        # Collinear: order every end point along self and clip to [0, 1].
        t_other_start = self.parameter_of(other.start)
        t_other_end = self.parameter_of(other.end)
        if t_other_start <= t_other_end:
            (t_lo, p_lo), (t_hi, p_hi) = (t_other_start, other.start), (t_other_end, other.end)
        else:
            (t_lo, p_lo), (t_hi, p_hi) = (t_other_end, other.end), (t_other_start, other.start)
        if t_lo > 1.0 or t_hi < 0.0:
            return _NONE
        lower = self.start if t_lo <= 0.0 else p_lo
        upper = self.end if t_hi >= 1.0 else p_hi
        if lower == upper:
            return SegmentIntersection.at(lower)
        return SegmentIntersection.overlap(Segment(lower, upper))

    def intersects_segment(self, other: "Segment") -> bool:
        return self.intersect_segment(other).kind != "none"

    def winding_contribution(self, position: Position) -> int:
        """Signed crossing of the rightward ray from ``position`` with this segment.

        Upward crossings with ``position`` on the left count +1, downward
        crossings with ``position`` on the right count -1, everything else 0.
        """

        if self.start.y <= position.y:
            if self.end.y > position.y and self.position_location(position) == "left":
                return 1
        elif self.end.y <= position.y and self.position_location(position) == "right":
            return -1
        return 0


@dataclass(frozen=True)
class SegmentIntersection:
    kind: IntersectionKind
    position: Optional[Position] = None
    segment: Optional[Segment] = None

    @classmethod
    def at(cls, position: Position) -> "SegmentIntersection":
        return cls("position", position=position)

    @classmethod
    def overlap(cls, segment: Segment) -> "SegmentIntersection":
        return cls("segment", segment=segment)

    def __bool__(self) -> bool:
        return self.kind != "none"


_NONE = SegmentIntersection("none")


__all__ = ["Segment", "SegmentIntersection", "PositionLocation", "IntersectionKind"]
